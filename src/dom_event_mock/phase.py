"""Event phase enumeration used by the dispatch state machine."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .exceptions import InvalidArgumentError


class EventPhase(IntEnum):
    """Propagation phase an event is currently in."""

    NONE = 0
    CAPTURING_PHASE = 1
    AT_TARGET = 2
    BUBBLING_PHASE = 3


def coerce_phase(value: Any) -> EventPhase:
    """Return the EventPhase for ``value`` or raise InvalidArgumentError.

    Plain ints 0..3 are accepted so the DOM numeric constants keep working.
    Bools are rejected even though they are ints.
    """
    if isinstance(value, EventPhase):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return EventPhase(value)
        except ValueError:
            pass
    raise InvalidArgumentError(
        "eventPhase must be one of Event.NONE, Event.CAPTURING_PHASE, "
        f"Event.AT_TARGET, Event.BUBBLING_PHASE, not {value!r}"
    )
