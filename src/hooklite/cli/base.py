from __future__ import annotations

import click

import hooklite
from hooklite.cli.cmd_kinds import list_kinds
from hooklite.cli.cmd_plugins import list_plugins
from hooklite.cli.cmd_trigger import trigger


@click.group(context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.version_option(version=hooklite.__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Hooklite - In-process hook registry for extension points."""


cli.add_command(list_kinds)
cli.add_command(list_plugins)
cli.add_command(trigger)
