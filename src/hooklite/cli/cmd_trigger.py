"""CLI ``trigger`` command for firing a hook once against installed plugins."""

from __future__ import annotations

import json
import logging
from typing import Any

import click

from hooklite.events import HookEvent
from hooklite.exceptions import HookHandlerError
from hooklite.exceptions import PluginError
from hooklite.plugins.default import LoggingPlugin
from hooklite.plugins.manager import install_plugins
from hooklite.plugins.manager import register_plugins_entry_points
from hooklite.plugins.manager import resolve_plugin
from hooklite.registry import HookRegistry
from hooklite.settings import HookliteSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.command()
@click.argument("kind")
@click.option("--data", "-d", default=None, help="Event payload as a JSON document.")
@click.option(
    "--event-kind",
    default=None,
    help="Kind carried by the event itself. Defaults to KIND.",
)
@click.option(
    "--plugin",
    "-p",
    "plugin_paths",
    multiple=True,
    help="Dotted path to a plugin class to install. Can be specified multiple times.",
)
@click.option("--log-events", is_flag=True, help="Install the logging plugin for KIND.")
@click.option(
    "--slow-threshold",
    type=float,
    default=None,
    help="Warn about handlers running longer than this many seconds.",
)
def trigger(
    kind: str,
    data: str | None,
    event_kind: str | None,
    plugin_paths: tuple[str, ...],
    log_events: bool,
    slow_threshold: float | None,
) -> None:
    r"""
    Trigger hook KIND once.

    A fresh registry is built, entry-point plugins and any --plugin classes register their
    handlers on it, and the event is dispatched synchronously.

    Examples:
    \b
    # Fire a standard hook point with a payload
    hooklite trigger turn_complete --data '{"turn": 3}'

    \b
    # Fire a custom hook with an explicit plugin and event logging
    hooklite trigger deploy_done -p myproject.plugins.AuditPlugin --log-events
    """
    payload: Any = None
    if data is not None:
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"Invalid JSON for --data: {e}") from e

    plugins: list[Any] = []
    for path in plugin_paths:
        try:
            plugins.append(resolve_plugin(path))
        except (PluginError, TypeError) as e:
            raise click.ClickException(str(e)) from e

    if log_events:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        plugins.append(LoggingPlugin(kinds=[kind]))

    failures: list[HookHandlerError] = []
    registry = HookRegistry(
        on_error=failures.append,
        settings=HookliteSettings(slow_handler_threshold=slow_threshold),
    )

    register_plugins_entry_points()
    try:
        install_plugins(registry, plugins)
    except PluginError as e:
        raise click.ClickException(str(e)) from e

    count = registry.handler_count(kind)
    event = HookEvent(event_kind if event_kind is not None else kind)
    if payload is not None:
        event = event.with_data(payload)

    registry.trigger(kind, event)

    click.echo(f"Triggered '{kind}': {count} handler(s), {len(failures)} failed")
    for failure in failures:
        click.echo(f"  {failure}")
    if failures:
        raise click.exceptions.Exit(1)
