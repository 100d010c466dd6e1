"""Utility functions to manage the project-wide plugin configuration."""

import importlib
import logging
from inspect import isclass
from typing import Any, Iterable

from pluggy import PluginManager

from hooklite.exceptions import PluginError
from hooklite.registry import HookRegistry

from .hooks.markers import HOOK_NAMESPACE
from .hooks.specs import RegistrySpec

logger = logging.getLogger(__name__)

_PLUGIN_ENTRY_POINT = "hooklite.plugins"  # entry-point to load plugins from for installed packages
_PLUGIN_MANAGER: PluginManager | None = None


# region API


def register_plugins(*plugins: Any) -> None:
    """Register plugin instances with the global plugin manager."""
    plugin_manager = _get_global_plugin_manager()
    for plugin in plugins:
        if not plugin_manager.is_registered(plugin):
            _ensure_instance(plugin)
            plugin_manager.register(plugin)


def register_plugins_entry_points(_plugin_manager: PluginManager | None = None) -> int:
    """
    Register hooklite plugins from Python package entrypoints.

    Returns:
        The number of plugins loaded.
    """
    _plugin_manager = _plugin_manager if _plugin_manager else _get_global_plugin_manager()
    count = _plugin_manager.load_setuptools_entrypoints(_PLUGIN_ENTRY_POINT)  # No setuptools
    logger.debug(f"Loaded {count} plugin(s) from entry points '{_PLUGIN_ENTRY_POINT}'")
    return count


def create_plugin_manager_with_plugins(plugins: Iterable[Any]) -> PluginManager:
    """
    Create a new plugin manager with both global and call-specific plugins.

    The global plugin manager is left untouched.

    Args:
        plugins: Additional plugin instances to register.

    Returns:
        A new PluginManager with global + call-specific plugins.
    """
    manager = _create_plugin_manager()

    global_manager = _get_global_plugin_manager()
    for plugin in global_manager.get_plugins():
        if not manager.is_registered(plugin):  # pragma: no branch
            manager.register(plugin)

    for plugin in plugins:
        if not manager.is_registered(plugin):  # pragma: no branch
            _ensure_instance(plugin)
            manager.register(plugin)

    return manager


def install_plugins(registry: HookRegistry, plugins: Iterable[Any] = ()) -> PluginManager:
    """
    Let every global plugin, plus `plugins`, register its handlers on `registry`.

    Args:
        registry: Registry receiving the plugin handlers.
        plugins: Extra plugin instances used for this call only.

    Returns:
        The plugin manager that performed the installation.
    """
    manager = create_plugin_manager_with_plugins(plugins)
    manager.hook.register_handlers(registry=registry)
    logger.debug(f"Installed {len(manager.get_plugins())} plugin(s) into {registry!r}")
    return manager


def resolve_plugin(path: str, **kwargs: Any) -> Any:
    """
    Import and instantiate a plugin class from a dotted path.

    Args:
        path: Dotted path such as "mypackage.plugins.AuditPlugin".
        **kwargs: Keyword arguments passed to the plugin constructor.

    Raises:
        PluginError: If the path does not resolve to a class.
    """
    plugin_class = _resolve_class_from_path(path)
    if plugin_class is None:
        raise PluginError(f"Could not resolve plugin class '{path}'")
    return plugin_class(**kwargs)


def get_plugins() -> list[Any]:
    """Return the plugins registered with the global plugin manager."""
    return list(_get_global_plugin_manager().get_plugins())


def reset_global_plugin_manager() -> None:
    """Replace the global plugin manager with a fresh one (mainly for tests)."""
    _initialize_plugin_system()


# region Helpers


def _initialize_plugin_system() -> PluginManager:
    """Initializes plugins for the hooklite library."""
    manager = _create_plugin_manager()
    global _PLUGIN_MANAGER
    _PLUGIN_MANAGER = manager
    return manager


def _get_global_plugin_manager() -> PluginManager:
    """Returns initialized global plugin manager, creating it if needed."""
    plugin_manager = _PLUGIN_MANAGER
    if plugin_manager is None:
        plugin_manager = _initialize_plugin_system()
    return plugin_manager


def _create_plugin_manager() -> PluginManager:
    """Create a new PluginManager instance and register hooklite's hook specs."""
    manager = PluginManager(HOOK_NAMESPACE)
    manager.trace.root.setwriter(
        logger.debug if logger.getEffectiveLevel() == logging.DEBUG else None
    )
    manager.enable_tracing()
    manager.add_hookspecs(RegistrySpec)
    return manager


def _ensure_instance(plugin: Any) -> None:
    if isclass(plugin):
        raise PluginError(
            "hooklite expects plugins to be registered as instances. "
            "Have you forgotten the `()` when registering a plugin class?"
        )


def _resolve_class_from_path(path: str) -> type[Any] | None:
    """Resolve a dotted import path to a class/type object."""
    parts = path.split(".")

    for i in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:i])
        attr_parts = parts[i:]
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue

        obj: Any = module
        try:
            for attr in attr_parts:
                obj = getattr(obj, attr)
            if isinstance(obj, type):
                return obj
        except AttributeError:
            continue

    return None
