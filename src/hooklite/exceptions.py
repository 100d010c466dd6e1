"""
Centralized exception classes for the hooklite library.

All hooklite-specific exceptions inherit from HookliteError for easy catching.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from hooklite.events import HookEvent


class HookliteError(Exception):
    """Base exception for all hooklite errors."""


class HookHandlerError(HookliteError):
    """
    Describes a hook handler that raised during dispatch.

    Never raised out of `HookRegistry.trigger`; instances are delivered to the registry's
    error sink instead.
    """

    def __init__(
        self,
        kind: str,
        event: HookEvent,
        handler: Callable[..., Any],
        original: Exception,
    ) -> None:
        try:
            detail = f"{type(original).__name__}: {original}"
        except Exception:
            detail = type(original).__name__
        super().__init__(f"Hook handler {handler_name(handler)} for '{kind}' raised {detail}")
        self.kind = kind
        self.event = event
        self.handler = handler
        self.original = original


class PluginError(HookliteError):
    """Raised when a plugin is registered or resolved incorrectly."""


def handler_name(handler: Callable[..., Any]) -> str:
    """Best-effort display name for a handler; never raises."""
    try:
        name = getattr(handler, "__qualname__", None)
        if isinstance(name, str):
            return name
        return repr(handler)
    except Exception:
        return f"<{type(handler).__name__} object>"
