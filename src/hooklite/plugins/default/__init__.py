from hooklite.plugins.default.logging import LoggingPlugin

__all__ = ["LoggingPlugin"]
