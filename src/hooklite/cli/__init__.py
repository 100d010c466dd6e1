from hooklite.cli.base import cli

__all__ = ["cli"]
