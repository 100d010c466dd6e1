"""Hook event value type and the standard hook point names."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from typing import Any, Union

from typing_extensions import Self, TypeAlias

JsonValue: TypeAlias = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
"""Structured event payload. Opaque to the registry."""

# region Standard hook points

TURN_COMPLETE = "turn_complete"
"""Triggered when a turn completes successfully."""

ERROR = "error"
"""Triggered when an error occurs during execution."""

TOOL_BEFORE = "tool_before"
"""Triggered before a tool is invoked."""

TOOL_AFTER = "tool_after"
"""Triggered after a tool completes execution."""

USER_INPUT = "user_input"
"""Triggered when the user provides input."""

RESPONSE_START = "response_start"
"""Triggered when the host is about to respond."""

RESPONSE_COMPLETE = "response_complete"
"""Triggered when a response is complete."""

CONVERSATION_START = "conversation_start"
"""Triggered when a conversation is created."""

CONVERSATION_END = "conversation_end"
"""Triggered when a conversation ends."""

STANDARD_KINDS: tuple[str, ...] = (
    TURN_COMPLETE,
    ERROR,
    USER_INPUT,
    RESPONSE_START,
    RESPONSE_COMPLETE,
    TOOL_BEFORE,
    TOOL_AFTER,
    CONVERSATION_START,
    CONVERSATION_END,
)


# region Event


@dataclass(frozen=True)
class HookEvent:
    """
    Event passed to hook handlers.

    Events are immutable, so every handler of a trigger call can safely receive the same
    instance. Any string is a valid `kind`; the standard names above are only a convention.

    Examples:
        >>> event = HookEvent("turn_complete").with_data({"turn": 1})
        >>> event.kind
        'turn_complete'
        >>> event.data
        {'turn': 1}
    """

    kind: str
    """Event type identifier."""

    data: JsonValue = None
    """Optional contextual data (JSON-like)."""

    def with_data(self, data: JsonValue) -> Self:
        """
        Return a copy of this event carrying `data`.

        The receiver is left unchanged. Calling this more than once is allowed; the last
        value wins.

        Args:
            data: Structured payload to attach.

        Returns:
            A new event with the same kind and the given data.
        """
        return replace(self, data=data)
