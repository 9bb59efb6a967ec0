"""Ordered per-type listener storage used by EventTarget."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from typing import Any

LOGGER = logging.getLogger(__name__)

Listener = Callable[[Any], Any]


class ListenerRegistry:
    """Ordered listener lists keyed by event type.

    Duplicates are kept: registering the same listener twice makes it run
    twice per dispatch.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add(self, event_type: str, listener: Listener) -> None:
        """Append ``listener`` to the list for ``event_type``."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(listener)
        LOGGER.debug("registry.add", extra={"event_type": event_type})

    def remove(self, event_type: str, listener: Listener) -> None:
        """Remove the first matching entry; a no-op when nothing matches."""
        if event_type in self._listeners:
            try:
                self._listeners[event_type].remove(listener)
                LOGGER.debug("registry.remove", extra={"event_type": event_type})
            except ValueError:
                pass

    def listeners(self, event_type: str) -> Sequence[Listener]:
        """Return the live list for ``event_type`` (an empty tuple if none)."""
        return self._listeners.get(event_type, ())

    def snapshot(self, event_type: str) -> tuple[Listener, ...]:
        return tuple(self._listeners.get(event_type, ()))

    def count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, ()))
