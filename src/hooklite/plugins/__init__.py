from hooklite.plugins.default import LoggingPlugin

from .hooks.markers import hook_impl
from .manager import install_plugins
from .manager import register_plugins

__all__ = [
    "hook_impl",
    "install_plugins",
    "register_plugins",
    "LoggingPlugin",
]
