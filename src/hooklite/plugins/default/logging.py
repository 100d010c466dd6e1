"""
Logging plugin that records triggered hook events.

Example:
    >>> from hooklite import HookEvent, HookRegistry
    >>> from hooklite.plugins import LoggingPlugin
    >>> from hooklite.plugins.manager import install_plugins
    >>>
    >>> registry = HookRegistry()
    >>> _ = install_plugins(registry, [LoggingPlugin(kinds=["turn_complete"])])
    >>> registry.handler_count("turn_complete")
    1
"""

import logging
from typing import Iterable

from hooklite.events import STANDARD_KINDS
from hooklite.events import HookEvent
from hooklite.plugins.hooks.markers import hook_impl
from hooklite.registry import HookHandler
from hooklite.registry import HookRegistry

DEFAULT_LOGGER_NAME = "hooklite.events"


class LoggingPlugin:
    """
    Plugin that logs every event triggered for the configured hook kinds.

    Each log record carries the trigger key and the event as `hook_kind` and `hook_event`
    extras so formatters and handlers can pick them up.
    """

    def __init__(
        self,
        kinds: Iterable[str] = STANDARD_KINDS,
        level: int = logging.INFO,
        logger_name: str = DEFAULT_LOGGER_NAME,
    ) -> None:
        """
        Initialize the plugin.

        Args:
            kinds: Hook kinds to log. Defaults to the standard hook points.
            level: Log level used for event records.
            logger_name: Name of the logger receiving the records.
        """
        self.kinds = tuple(kinds)
        self.level = level
        self.logger = logging.getLogger(logger_name)

    @hook_impl
    def register_handlers(self, registry: HookRegistry) -> None:
        for kind in self.kinds:
            registry.register(kind, self._make_handler(kind))

    def _make_handler(self, kind: str) -> HookHandler:
        def log_event(event: HookEvent) -> None:
            if not self.logger.isEnabledFor(self.level):
                return
            message = f"Hook '{kind}' triggered"
            if event.kind != kind:
                message += f" with event '{event.kind}'"
            if event.data is not None:
                message += f": {event.data!r}"
            self.logger.log(self.level, message, extra={"hook_kind": kind, "hook_event": event})

        return log_event
