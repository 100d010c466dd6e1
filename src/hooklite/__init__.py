"""Hooklite: in-process, thread-safe hook registry for exposing extension points."""

__version__ = "0.1.0"

from . import events
from . import settings
from .events import HookEvent
from .exceptions import HookHandlerError
from .exceptions import HookliteError
from .globals import get_global_registry
from .plugins.manager import _initialize_plugin_system
from .registry import HookRegistry

# Initialize plugin system on module import
_initialize_plugin_system()

__all__ = [
    "events",
    "get_global_registry",
    "HookEvent",
    "HookHandlerError",
    "HookliteError",
    "HookRegistry",
    "settings",
]
