"""CLI ``plugins`` command for discovering installed plugins."""

from __future__ import annotations

from types import ModuleType

import click

from hooklite.plugins.manager import get_plugins
from hooklite.plugins.manager import register_plugins_entry_points


@click.command("plugins")
def list_plugins() -> None:
    """List plugins registered through the 'hooklite.plugins' entry point group."""
    register_plugins_entry_points()
    plugins = get_plugins()

    if not plugins:
        click.echo("No plugins found.")
        return

    for plugin in plugins:
        if isinstance(plugin, ModuleType):
            click.echo(plugin.__name__)
        else:
            cls = type(plugin)
            click.echo(f"{cls.__module__}.{cls.__qualname__}")
