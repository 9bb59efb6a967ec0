"""EventTarget: a node in a parent chain that runs three-phase propagation.

Usage:
    root = EventTarget(None, ["boom"])
    leaf = EventTarget(root, ["boom"])

    root.add_event_listener("boom", on_capture, True)
    leaf.onboom = on_boom
    leaf.dispatch_event(Event("boom", bubbles=True))

Capture runs root first, bubbling runs target first. Both passes use the
same recursive ``dispatch_event`` call on the parent; the event's phase tells
each ancestor which half of the algorithm to run.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any, Literal

from .checks import require_bool, require_callable, require_str
from .event import Event
from .exceptions import InvalidArgumentError
from .interfaces import Dispatchable, is_dispatchable
from .phase import EventPhase
from .registry import Listener, ListenerRegistry

LOGGER = logging.getLogger(__name__)

ListenerIteration = Literal["snapshot", "live"]
LISTENER_ITERATION_MODES: tuple[str, ...] = ("snapshot", "live")


class EventTarget:
    """Holds listeners and handler slots and dispatches events up its parent chain.

    ``listener_iteration`` controls what happens when a listener adds or
    removes listeners of the group that is currently running:

    - ``"snapshot"`` (default): each group is copied before it runs, so
      changes only affect later dispatches.
    - ``"live"``: the group is walked by index over the live list, so a
      removal can skip the next listener and an append runs in the same pass.

    Each ancestor adds two stack frames to a bubbling dispatch, so with the
    default recursion limit of 1000 a parent chain of a few hundred nodes
    (about 450) is the practical maximum.
    """

    __slots__ = (
        "_parent",
        "_handlers",
        "_capturing",
        "_bubbling",
        "_listener_iteration",
    )

    def __init__(
        self,
        parent: Dispatchable | None = None,
        handler_names: Sequence[str] = (),
        *,
        listener_iteration: ListenerIteration = "snapshot",
    ) -> None:
        if parent is not None and not is_dispatchable(parent):
            raise InvalidArgumentError(
                "EventTarget: parent must be None or implement EventTarget"
            )
        if not isinstance(handler_names, (list, tuple)):
            raise InvalidArgumentError(
                f"EventTarget: handler_names must be a list, not {handler_names!r}"
            )
        if listener_iteration not in LISTENER_ITERATION_MODES:
            raise InvalidArgumentError(
                "EventTarget: listener_iteration must be 'snapshot' or 'live', "
                f"not {listener_iteration!r}"
            )

        handlers: dict[str, Listener | None] = {}
        for name in handler_names:
            require_str(name, "EventTarget: handler_names entries")
            handlers[name] = None

        self._parent = parent
        self._handlers = handlers
        self._capturing = ListenerRegistry()
        self._bubbling = ListenerRegistry()
        self._listener_iteration = listener_iteration

    # --- Handler properties (on<name>) -------------------------------------

    def _handler_key(self, attr: str) -> str | None:
        if not attr.startswith("on"):
            return None
        try:
            handlers = object.__getattribute__(self, "_handlers")
        except AttributeError:
            return None
        key = attr[2:]
        return key if key in handlers else None

    def __getattr__(self, attr: str) -> Any:
        key = self._handler_key(attr)
        if key is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {attr!r}"
            )
        return self._handlers[key]

    def __setattr__(self, attr: str, value: Any) -> None:
        key = self._handler_key(attr)
        if key is None:
            super().__setattr__(attr, value)
            return
        if value is not None and not callable(value):
            raise InvalidArgumentError(
                f"{attr}: event handler can only be function or None"
            )
        self._handlers[key] = value

    # --- Introspection ------------------------------------------------------

    @property
    def parent(self) -> Dispatchable | None:
        return self._parent

    @property
    def handler_names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    @property
    def listener_iteration(self) -> str:
        return self._listener_iteration

    def listener_count(self, event_type: str, use_capture: bool = False) -> int:
        registry = self._capturing if use_capture else self._bubbling
        return registry.count(event_type)

    # --- Listener registration ---------------------------------------------

    def add_event_listener(
        self, event_type: str, listener: Listener, use_capture: bool = False
    ) -> None:
        """Append ``listener`` to the capturing or bubbling list for ``event_type``."""
        require_str(event_type, "addEventListener(): name")
        require_callable(listener, "addEventListener(): listener")
        require_bool(use_capture, "addEventListener(): useCapture")
        registry = self._capturing if use_capture else self._bubbling
        registry.add(event_type, listener)

    def remove_event_listener(
        self, event_type: str, listener: Listener, use_capture: bool = False
    ) -> None:
        """Remove the first matching listener; handler slots are untouched."""
        require_str(event_type, "removeEventListener(): name")
        require_callable(listener, "removeEventListener(): listener")
        require_bool(use_capture, "removeEventListener(): useCapture")
        registry = self._capturing if use_capture else self._bubbling
        registry.remove(event_type, listener)

    # --- Dispatch -----------------------------------------------------------

    def dispatch_event(self, event: Event) -> bool | None:
        """Dispatch ``event`` with this target as the dispatch target.

        Returns False if a listener prevented the default action of a
        cancelable event, True otherwise. When a descendant calls this during
        its own dispatch (phase CAPTURING_PHASE or BUBBLING_PHASE) this
        target only takes part in that pass and None is returned.
        """
        if not isinstance(event, Event) or not event.type:
            raise InvalidArgumentError("dispatchEvent(): event must be Event")

        phase = event.event_phase
        if phase is EventPhase.NONE:
            return self._dispatch_at_target(event)
        if phase is EventPhase.CAPTURING_PHASE:
            self._capture(event)
            return None
        if phase is EventPhase.BUBBLING_PHASE:
            self._bubble(event)
            return None
        raise InvalidArgumentError(
            "dispatchEvent(): event is already being dispatched at its target"
        )

    def _dispatch_at_target(self, event: Event) -> bool:
        # Raises if the event was already dispatched somewhere else.
        event.target = self
        LOGGER.debug(
            "dispatch.start",
            extra={"event_type": event.type, "bubbles": event.bubbles},
        )

        event.event_phase = EventPhase.CAPTURING_PHASE
        if event.bubbles and self._parent is not None:
            self._parent.dispatch_event(event)

        event.event_phase = EventPhase.AT_TARGET
        event.current_target = self
        self._run_group(event, self._capturing)
        self._run_handler(event)
        self._run_group(event, self._bubbling)

        event.event_phase = EventPhase.BUBBLING_PHASE
        if event.bubbles and self._parent is not None:
            self._parent.dispatch_event(event)

        event.event_phase = EventPhase.NONE
        event.current_target = None
        LOGGER.debug(
            "dispatch.end",
            extra={
                "event_type": event.type,
                "default_prevented": event.default_prevented,
                "propagation_stopped": event.propagation_stopped,
            },
        )
        return not event.default_prevented

    def _capture(self, event: Event) -> None:
        # Ancestors act on the way back down, so the root runs first.
        if event.bubbles and self._parent is not None:
            self._parent.dispatch_event(event)
        event.current_target = self
        self._run_group(event, self._capturing)

    def _bubble(self, event: Event) -> None:
        event.current_target = self
        self._run_handler(event)
        self._run_group(event, self._bubbling)
        if event.bubbles and self._parent is not None:
            self._parent.dispatch_event(event)

    def _run_handler(self, event: Event) -> None:
        handler = self._handlers.get(event.type)
        if handler is not None and not event.propagation_stopped:
            handler(event)

    def _run_group(self, event: Event, registry: ListenerRegistry) -> None:
        if event.propagation_stopped:
            return
        if self._listener_iteration == "live":
            listeners = registry.listeners(event.type)
            index = 0
            while index < len(listeners) and not event.immediate_stopped:
                listeners[index](event)
                index += 1
            return
        for listener in registry.snapshot(event.type):
            if event.immediate_stopped:
                break
            listener(event)

    def __repr__(self) -> str:
        return (
            f"EventTarget(handlers={list(self._handlers)}, "
            f"has_parent={self._parent is not None})"
        )

    # DOM spellings.
    dispatchEvent = dispatch_event
    addEventListener = add_event_listener
    removeEventListener = remove_event_listener
