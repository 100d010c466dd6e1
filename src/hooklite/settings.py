from __future__ import annotations

import threading
from dataclasses import dataclass

_GLOBAL_HOOKLITE_SETTINGS: HookliteSettings | None = None
_SETTINGS_LOCK = threading.RLock()


@dataclass(frozen=True)
class HookliteSettings:
    """Configuration settings for hooklite."""

    slow_handler_threshold: float | None = None
    """
    Duration in seconds after which a hook handler is reported as slow.

    Slow handlers are only logged, never interrupted. If None, no timing checks are made.
    """

    log_handler_tracebacks: bool = True
    """Whether handler failures logged by a registry include the full traceback."""


def get_global_settings() -> HookliteSettings:
    """
    Get the global hooklite settings instance (thread-safe).

    If no global settings have been set, returns a default instance.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_HOOKLITE_SETTINGS
        if _GLOBAL_HOOKLITE_SETTINGS is None:
            _GLOBAL_HOOKLITE_SETTINGS = HookliteSettings()
        return _GLOBAL_HOOKLITE_SETTINGS


def set_global_settings(settings: HookliteSettings) -> None:
    """
    Set the global hooklite settings instance (thread-safe).

    Registries created without explicit settings pick up the new values on their next trigger.

    Args:
        settings (HookliteSettings): Settings to set as global.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_HOOKLITE_SETTINGS
        _GLOBAL_HOOKLITE_SETTINGS = settings
