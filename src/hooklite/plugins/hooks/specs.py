"""Hook specifications implemented by hooklite plugins."""

from hooklite.plugins.hooks.markers import hook_spec
from hooklite.registry import HookRegistry


class RegistrySpec:
    """Hook specifications for attaching plugin handlers to a registry."""

    @hook_spec
    def register_handlers(self, registry: HookRegistry) -> None:
        """
        Called when plugins are installed into a hook registry.

        Implementations register their handlers, e.g. `registry.register("error", handler)`.

        Args:
            registry: Registry the plugin should attach its handlers to.
        """
