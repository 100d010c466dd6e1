"""Thread-safe registry of hook handlers keyed by event kind."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, TypeVar

from hooklite.events import HookEvent
from hooklite.exceptions import HookHandlerError
from hooklite.exceptions import handler_name
from hooklite.settings import HookliteSettings
from hooklite.settings import get_global_settings

logger = logging.getLogger(__name__)

HookHandler = Callable[[HookEvent], None]
"""A callable invoked with the triggered event. Its return value is ignored."""

ErrorSink = Callable[[HookHandlerError], None]
"""Diagnostic callback receiving every handler failure."""

H = TypeVar("H", bound=HookHandler)


class HookRegistry:
    """
    Registry mapping hook kinds to ordered lists of handlers.

    Hooks let a host expose extension points without its core logic depending on the
    extensions. Multiple handlers can be registered for the same kind; they are called in
    registration order.

    All methods are safe to call concurrently from multiple threads. Handlers are always
    invoked *outside* the registry lock: `trigger` copies the handler list for the kind while
    holding the lock, releases it, then calls the copy. A handler may therefore register,
    trigger or clear hooks on the same registry without deadlocking. Handlers registered or
    cleared while a trigger call is running do not affect that call.

    Handlers run synchronously on the triggering thread, so they should be fast. A handler
    that raises is reported to the error sink (or logged) and the remaining handlers still
    run; `trigger` itself never raises because of a handler.

    Examples:
        >>> registry = HookRegistry()
        >>> seen = []
        >>> _ = registry.register("turn_complete", lambda event: seen.append(event.data))
        >>> registry.trigger("turn_complete", HookEvent("turn_complete").with_data(1))
        >>> seen
        [1]
    """

    def __init__(
        self,
        on_error: ErrorSink | None = None,
        settings: HookliteSettings | None = None,
    ) -> None:
        """
        Create an empty registry.

        Args:
            on_error: Optional sink receiving a `HookHandlerError` for each failed handler.
                Failures are logged when no sink is given.
            settings: Settings for this registry. Global settings are used when omitted.
        """
        self._handlers: dict[str, list[HookHandler]] = {}
        self._lock = threading.Lock()
        self._on_error = on_error
        self._settings = settings

    def __repr__(self) -> str:
        with self._lock:
            counts = {kind: len(handlers) for kind, handlers in self._handlers.items()}
        return f"{type(self).__name__}({counts})"

    # region Registration

    def register(self, kind: str, handler: H) -> H:
        """
        Register a handler for a hook kind.

        Existing handlers for the kind are kept; the new one is appended and runs after them.

        Args:
            kind: Name of the hook point (e.g. "turn_complete").
            handler: Callable taking a single `HookEvent`.

        Returns:
            The handler itself, unchanged.

        Raises:
            TypeError: If `handler` is not callable.
        """
        if not callable(handler):
            raise TypeError(f"Hook handler for '{kind}' must be callable, got {handler!r}")

        with self._lock:
            self._handlers.setdefault(kind, []).append(handler)
        logger.debug(f"Registered hook handler {handler_name(handler)} for '{kind}'")
        return handler

    def on(self, kind: str) -> Callable[[H], H]:
        """
        Decorator form of `register`.

        Examples:
            >>> registry = HookRegistry()
            >>> @registry.on("user_input")
            ... def echo(event):
            ...     print(event.data)
            >>> registry.trigger("user_input", HookEvent("user_input").with_data("hi"))
            hi
        """

        def decorator(handler: H) -> H:
            return self.register(kind, handler)

        return decorator

    def unregister(self, kind: str, handler: HookHandler) -> bool:
        """
        Remove the first registration of `handler` for `kind`.

        Args:
            kind: Name of the hook point.
            handler: Previously registered handler (compared by equality).

        Returns:
            True if a registration was removed, False otherwise.
        """
        with self._lock:
            handlers = self._handlers.get(kind)
            if not handlers:
                return False
            try:
                handlers.remove(handler)
            except ValueError:
                return False
            if not handlers:
                del self._handlers[kind]
        logger.debug(f"Unregistered hook handler {handler_name(handler)} for '{kind}'")
        return True

    def clear(self, kind: str) -> None:
        """Remove all handlers for a single hook kind."""
        with self._lock:
            removed = self._handlers.pop(kind, None)
        if removed:
            logger.debug(f"Cleared {len(removed)} hook handler(s) for '{kind}'")

    def clear_all(self) -> None:
        """Remove every handler for every hook kind."""
        with self._lock:
            self._handlers.clear()
        logger.debug("Cleared all hook handlers")

    # region Introspection

    def handler_count(self, kind: str) -> int:
        """Return the number of handlers registered for `kind` (0 if none)."""
        with self._lock:
            return len(self._handlers.get(kind, ()))

    def has_handlers(self, kind: str) -> bool:
        """Return True if at least one handler is registered for `kind`."""
        return self.handler_count(kind) > 0

    def kinds(self) -> list[str]:
        """Return the kinds that currently have handlers, in first-registration order."""
        with self._lock:
            return [kind for kind, handlers in self._handlers.items() if handlers]

    # region Dispatch

    def trigger(self, kind: str, event: HookEvent) -> None:
        """
        Call every handler registered for `kind`, in registration order.

        Lookup is keyed by `kind` only; `event.kind` is passed through to handlers untouched
        and does not need to match. Triggering a kind with no handlers does nothing.

        Args:
            kind: Name of the hook point to trigger.
            event: Event handed to each handler.
        """
        with self._lock:
            handlers = list(self._handlers.get(kind, ()))

        if not handlers:
            return

        settings = self._settings if self._settings is not None else get_global_settings()
        for handler in handlers:
            self._invoke(kind, event, handler, settings)

    def _invoke(
        self, kind: str, event: HookEvent, handler: HookHandler, settings: HookliteSettings
    ) -> None:
        """Run one handler inside its own failure boundary."""
        start = time.perf_counter()
        try:
            handler(event)
        except Exception as e:
            try:
                self._report_failure(HookHandlerError(kind, event, handler, e), settings)
            except Exception:
                logger.exception(f"Failed to report hook handler error for '{kind}'")

        threshold = settings.slow_handler_threshold
        if threshold is not None:
            duration = time.perf_counter() - start
            if duration > threshold:
                logger.warning(
                    f"Hook handler {handler_name(handler)} for '{kind}' took {duration:.3f}s "
                    f"(threshold {threshold}s)"
                )

    def _report_failure(self, error: HookHandlerError, settings: HookliteSettings) -> None:
        if self._on_error is None:
            if settings.log_handler_tracebacks:
                logger.exception(f"Error in hook handler for '{error.kind}': {error}")
            else:
                logger.error(f"Error in hook handler for '{error.kind}': {error}")
            return

        try:
            self._on_error(error)
        except Exception:
            logger.exception(f"Error sink failed while reporting hook failure for '{error.kind}'")
