"""Helpers for recording the order in which listeners run.

Usage:
    trace = PropagationTrace()
    chain = build_chain(["grandparent", "parent", "target"], handler_names=["boom"])
    instrument(trace, chain, "boom")
    chain["target"].dispatch_event(Event("boom", bubbles=True))
    trace.labels()  # ["grandparent-capture-1", ..., "grandparent-bubble-2"]
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .event import Event
from .phase import EventPhase
from .target import EventTarget, ListenerIteration

Action = Callable[[Event], Any]


@dataclass(frozen=True)
class TraceEntry:
    """One listener invocation."""

    node: str
    phase: EventPhase
    label: str


class PropagationTrace:
    """Collects TraceEntry records from listeners it creates."""

    def __init__(self) -> None:
        self.entries: list[TraceEntry] = []

    def listener(
        self, node: str, label: str, action: Action | None = None
    ) -> Callable[[Event], None]:
        """Return a listener that records itself, then runs ``action``."""

        def record(event: Event) -> None:
            self.entries.append(TraceEntry(node, event.event_phase, label))
            if action is not None:
                action(event)

        return record

    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]

    def nodes(self) -> list[str]:
        return [entry.node for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()


def build_chain(
    names: Sequence[str],
    handler_names: Sequence[str] = (),
    *,
    listener_iteration: ListenerIteration = "snapshot",
) -> dict[str, EventTarget]:
    """Build a parent chain, root first; each target is the parent of the next."""
    chain: dict[str, EventTarget] = {}
    parent: EventTarget | None = None
    for name in names:
        if name in chain:
            raise ValueError(f"Duplicate node name {name!r}")
        parent = EventTarget(
            parent, list(handler_names), listener_iteration=listener_iteration
        )
        chain[name] = parent
    return chain


def instrument(
    trace: PropagationTrace,
    chain: dict[str, EventTarget],
    event_type: str,
    copies: int = 2,
    actions: dict[str, Action] | None = None,
) -> None:
    """Register capture listeners, the handler and bubble listeners on every node.

    Labels are ``<node>-capture-<n>``, ``<node>-handler`` and
    ``<node>-bubble-<n>``. ``actions`` maps a label to a callable run after
    that listener records itself (e.g. one that stops propagation). The
    handler is only installed on nodes that declare ``event_type``.
    """
    actions = actions or {}
    for node, target in chain.items():
        for n in range(1, copies + 1):
            label = f"{node}-capture-{n}"
            target.add_event_listener(
                event_type, trace.listener(node, label, actions.get(label)), True
            )
        if event_type in target.handler_names:
            label = f"{node}-handler"
            handler = trace.listener(node, label, actions.get(label))
            setattr(target, f"on{event_type}", handler)
        for n in range(1, copies + 1):
            label = f"{node}-bubble-{n}"
            target.add_event_listener(
                event_type, trace.listener(node, label, actions.get(label))
            )
