"""CLI ``kinds`` command listing the standard hook points."""

from __future__ import annotations

import click

from hooklite.events import STANDARD_KINDS


@click.command("kinds")
def list_kinds() -> None:
    """List the standard hook kinds. Any other string is also a valid kind."""
    for kind in STANDARD_KINDS:
        click.echo(kind)
