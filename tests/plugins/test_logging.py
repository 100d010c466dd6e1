"""Unit tests for the logging plugin."""

import logging

from hooklite.events import STANDARD_KINDS
from hooklite.events import HookEvent
from hooklite.plugins import LoggingPlugin
from hooklite.plugins.default.logging import DEFAULT_LOGGER_NAME
from hooklite.plugins.manager import install_plugins
from hooklite.registry import HookRegistry


class TestLoggingPlugin:
    """Tests for LoggingPlugin."""

    def test_registers_standard_kinds_by_default(self) -> None:
        registry = HookRegistry()
        install_plugins(registry, [LoggingPlugin()])

        for kind in STANDARD_KINDS:
            assert registry.handler_count(kind) == 1

    def test_logs_triggered_event(self, caplog) -> None:
        registry = HookRegistry()
        install_plugins(registry, [LoggingPlugin(kinds=["turn_complete"])])

        with caplog.at_level(logging.INFO, logger=DEFAULT_LOGGER_NAME):
            registry.trigger("turn_complete", HookEvent("turn_complete").with_data({"turn": 2}))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == DEFAULT_LOGGER_NAME
        assert record.getMessage() == "Hook 'turn_complete' triggered: {'turn': 2}"
        assert record.hook_kind == "turn_complete"
        assert record.hook_event.data == {"turn": 2}

    def test_logs_mismatched_event_kind(self, caplog) -> None:
        registry = HookRegistry()
        install_plugins(registry, [LoggingPlugin(kinds=["custom"])])

        with caplog.at_level(logging.INFO, logger=DEFAULT_LOGGER_NAME):
            registry.trigger("custom", HookEvent("other"))

        assert "Hook 'custom' triggered with event 'other'" in caplog.text

    def test_respects_level(self, caplog) -> None:
        registry = HookRegistry()
        install_plugins(registry, [LoggingPlugin(kinds=["error"], level=logging.DEBUG)])

        with caplog.at_level(logging.INFO, logger=DEFAULT_LOGGER_NAME):
            registry.trigger("error", HookEvent("error"))

        assert caplog.records == []

    def test_custom_logger_name(self, caplog) -> None:
        registry = HookRegistry()
        install_plugins(registry, [LoggingPlugin(kinds=["error"], logger_name="my.hooks")])

        with caplog.at_level(logging.INFO, logger="my.hooks"):
            registry.trigger("error", HookEvent("error"))

        assert [r.name for r in caplog.records] == ["my.hooks"]
