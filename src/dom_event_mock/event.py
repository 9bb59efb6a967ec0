"""Strict Event record mutated only by the target that dispatches it.

Usage:
    event = Event("boom", bubbles=True, cancelable=True)
    event = Event("boom", {"bubbles": True})   # DOM-style options mapping

    target.dispatch_event(event)
    event.target            # sticky: still the dispatch target afterwards
    event.current_target    # None once dispatch has finished
"""

from __future__ import annotations

from collections.abc import Mapping
import time
from typing import Any

from .checks import require_bool, require_str
from .exceptions import InvalidArgumentError, ReadOnlyPropertyError
from .interfaces import Dispatchable, is_dispatchable
from .phase import EventPhase, coerce_phase

_OPTION_NAMES = frozenset({"bubbles", "cancelable"})


def _read_only(attr: str, name: str, hint: str = "") -> property:
    """Build a property whose setter always raises ReadOnlyPropertyError."""

    def getter(self: Event) -> Any:
        return getattr(self, attr)

    def setter(self: Event, value: Any) -> None:
        message = f"Event: {name} is read-only"
        if hint:
            message = f"{message}, use {hint} instead"
        raise ReadOnlyPropertyError(message)

    return property(getter, setter)


def _require_dispatchable_or_none(value: Any, name: str) -> Dispatchable | None:
    if value is not None and not is_dispatchable(value):
        raise InvalidArgumentError(
            f"Event: {name} must be an object implementing EventTarget or None"
        )
    return value


class Event:
    """A synthetic event carrying propagation state.

    Stricter than a browser Event: wrong types are rejected instead of being
    coerced, flags can only change through the methods that own them and
    ``target`` is write-once.
    """

    NONE = EventPhase.NONE
    CAPTURING_PHASE = EventPhase.CAPTURING_PHASE
    AT_TARGET = EventPhase.AT_TARGET
    BUBBLING_PHASE = EventPhase.BUBBLING_PHASE

    __slots__ = (
        "_type",
        "_bubbles",
        "_cancelable",
        "_time_stamp",
        "_event_phase",
        "_target",
        "_current_target",
        "_default_prevented",
        "_propagation_stopped",
        "_immediate_stopped",
    )

    def __init__(
        self,
        type: str,
        options: Mapping[str, Any] | None = None,
        *,
        bubbles: bool = False,
        cancelable: bool = False,
    ) -> None:
        require_str(type, "Event: name")
        if not type:
            raise InvalidArgumentError("Event: name must not be empty")
        if options is not None:
            if not isinstance(options, Mapping):
                raise InvalidArgumentError(
                    f"Event: options must be a mapping, not {options!r}"
                )
            unknown = set(options) - _OPTION_NAMES
            if unknown:
                raise InvalidArgumentError(
                    f"Event: unknown options {sorted(map(str, unknown))}"
                )
            bubbles = options.get("bubbles", bubbles)
            cancelable = options.get("cancelable", cancelable)

        self._type = type
        self._bubbles = require_bool(bubbles, "Event: bubbles")
        self._cancelable = require_bool(cancelable, "Event: cancelable")
        self._time_stamp = time.time() * 1000.0
        self._event_phase = EventPhase.NONE
        self._target: Dispatchable | None = None
        self._current_target: Dispatchable | None = None
        self._default_prevented = False
        self._propagation_stopped = False
        self._immediate_stopped = False

    type = _read_only("_type", "type")
    bubbles = _read_only("_bubbles", "bubbles")
    cancelable = _read_only("_cancelable", "cancelable")
    time_stamp = _read_only("_time_stamp", "timeStamp")
    default_prevented = _read_only(
        "_default_prevented", "defaultPrevented", "prevent_default()"
    )
    propagation_stopped = _read_only(
        "_propagation_stopped", "propagationStopped", "stop_propagation()"
    )
    immediate_stopped = _read_only(
        "_immediate_stopped", "immediateStopped", "stop_immediate_propagation()"
    )
    # Deprecated DOM spelling of propagation_stopped.
    cancel_bubble = _read_only(
        "_propagation_stopped", "cancelBubble", "stop_propagation()"
    )

    @property
    def is_trusted(self) -> bool:
        return False

    @is_trusted.setter
    def is_trusted(self, value: Any) -> None:
        raise ReadOnlyPropertyError("Event: isTrusted is read-only")

    @property
    def event_phase(self) -> EventPhase:
        return self._event_phase

    @event_phase.setter
    def event_phase(self, value: Any) -> None:
        self._event_phase = coerce_phase(value)

    @property
    def target(self) -> Dispatchable | None:
        """The original dispatch target; stays set after dispatch ends."""
        return self._target

    @target.setter
    def target(self, value: Any) -> None:
        if self._target is not None:
            raise ReadOnlyPropertyError(
                "Event: target cannot be changed after it has been set"
            )
        self._target = _require_dispatchable_or_none(value, "target")

    @property
    def current_target(self) -> Dispatchable | None:
        """The target whose listeners are running right now."""
        return self._current_target

    @current_target.setter
    def current_target(self, value: Any) -> None:
        self._current_target = _require_dispatchable_or_none(value, "currentTarget")

    def prevent_default(self) -> None:
        """Mark the default action as prevented; a no-op unless cancelable."""
        if self._cancelable:
            self._default_prevented = True

    def stop_propagation(self) -> None:
        self._propagation_stopped = True

    def stop_immediate_propagation(self) -> None:
        self._propagation_stopped = True
        self._immediate_stopped = True

    def __repr__(self) -> str:
        flags = [
            name
            for name, on in (
                ("bubbles", self._bubbles),
                ("cancelable", self._cancelable),
                ("default_prevented", self._default_prevented),
                ("propagation_stopped", self._propagation_stopped),
                ("immediate_stopped", self._immediate_stopped),
            )
            if on
        ]
        return (
            f"Event(type={self._type!r}, phase={self._event_phase.name}, "
            f"flags={flags})"
        )

    # DOM spellings.
    isTrusted = is_trusted
    timeStamp = time_stamp
    eventPhase = event_phase
    currentTarget = current_target
    defaultPrevented = default_prevented
    propagationStopped = propagation_stopped
    immediateStopped = immediate_stopped
    cancelBubble = cancel_bubble
    preventDefault = prevent_default
    stopPropagation = stop_propagation
    stopImmediatePropagation = stop_immediate_propagation
