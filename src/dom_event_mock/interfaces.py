"""Capability protocol shared by events and targets.

An event only needs to know that its ``target`` and ``current_target`` can
dispatch; it never needs the concrete EventTarget class. Keeping the protocol
here avoids an import cycle between ``event`` and ``target``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .event import Event


@runtime_checkable
class Dispatchable(Protocol):
    """Anything that can take part in event propagation."""

    def dispatch_event(self, event: Event) -> bool | None:
        ...


def is_dispatchable(value: Any) -> bool:
    """Return True when ``value`` satisfies the Dispatchable capability."""
    if isinstance(value, type):
        return False
    return isinstance(value, Dispatchable) and callable(value.dispatch_event)
