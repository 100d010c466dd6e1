"""Optional process-wide hook registry shared by a host application."""

from __future__ import annotations

import threading

from hooklite.registry import HookRegistry

_GLOBAL_REGISTRY: HookRegistry | None = None
_REGISTRY_LOCK = threading.RLock()


def get_global_registry() -> HookRegistry:
    """
    Get the process-wide hook registry (thread-safe).

    The registry is created on first use unless one was installed with `set_global_registry`.
    Code that needs isolation (e.g. tests) should construct its own `HookRegistry` instead.
    """
    with _REGISTRY_LOCK:
        global _GLOBAL_REGISTRY
        if _GLOBAL_REGISTRY is None:
            _GLOBAL_REGISTRY = HookRegistry()
        return _GLOBAL_REGISTRY


def set_global_registry(registry: HookRegistry) -> None:
    """
    Install `registry` as the process-wide hook registry (thread-safe).

    Args:
        registry (HookRegistry): Registry to share.
    """
    with _REGISTRY_LOCK:
        global _GLOBAL_REGISTRY
        _GLOBAL_REGISTRY = registry


def reset_global_registry() -> None:
    """Discard the process-wide registry; the next `get_global_registry` call builds a new one."""
    with _REGISTRY_LOCK:
        global _GLOBAL_REGISTRY
        _GLOBAL_REGISTRY = None
