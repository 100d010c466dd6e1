"""Unit tests for HookEvent and the standard hook kinds."""

import dataclasses

import pytest

from hooklite import events
from hooklite.events import STANDARD_KINDS
from hooklite.events import HookEvent


class TestHookEvent:
    """Tests for the event value type."""

    def test_new_event_has_no_data(self) -> None:
        event = HookEvent("turn_complete")
        assert event.kind == "turn_complete"
        assert event.data is None

    def test_any_kind_is_allowed(self) -> None:
        assert HookEvent("").kind == ""
        assert HookEvent("my_custom_hook").kind == "my_custom_hook"

    def test_with_data_returns_new_event(self) -> None:
        original = HookEvent("tool_before")
        updated = original.with_data({"tool": "shell", "args": ["ls", "-la"]})

        assert original.data is None
        assert updated.kind == "tool_before"
        assert updated.data == {"tool": "shell", "args": ["ls", "-la"]}

    def test_with_data_last_value_wins(self) -> None:
        event = HookEvent("error").with_data("first").with_data(42)
        assert event.data == 42

    def test_event_is_immutable(self) -> None:
        event = HookEvent("error")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.kind = "other"  # type: ignore[misc]

    def test_events_compare_by_value(self) -> None:
        assert HookEvent("a").with_data([1, 2]) == HookEvent("a", [1, 2])


class TestStandardKinds:
    """Tests for the predefined hook point names."""

    def test_standard_kind_values(self) -> None:
        assert STANDARD_KINDS == (
            "turn_complete",
            "error",
            "user_input",
            "response_start",
            "response_complete",
            "tool_before",
            "tool_after",
            "conversation_start",
            "conversation_end",
        )

    def test_constants_match_names(self) -> None:
        for kind in STANDARD_KINDS:
            assert getattr(events, kind.upper()) == kind
