"""Top-level package for dom-event-mock."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .event import Event
from .exceptions import (
    ConfigValidationError,
    DomEventError,
    InvalidArgumentError,
    ReadOnlyPropertyError,
)
from .interfaces import Dispatchable, is_dispatchable
from .phase import EventPhase
from .target import EventTarget

if TYPE_CHECKING:
    from .config import load_config
    from .logging_utils import configure_logging
    from .trace import PropagationTrace, TraceEntry, build_chain, instrument

__all__ = [
    "ConfigValidationError",
    "Dispatchable",
    "DomEventError",
    "Event",
    "EventPhase",
    "EventTarget",
    "InvalidArgumentError",
    "PropagationTrace",
    "ReadOnlyPropertyError",
    "TraceEntry",
    "build_chain",
    "configure_logging",
    "instrument",
    "is_dispatchable",
    "load_config",
]


def __getattr__(name: str) -> Any:
    """Lazily import tooling so the core does not pull in pydantic or structlog."""
    if name == "load_config":
        from .config import load_config

        return load_config
    if name == "configure_logging":
        from .logging_utils import configure_logging

        return configure_logging
    if name in {"PropagationTrace", "TraceEntry", "build_chain", "instrument"}:
        from .trace import PropagationTrace, TraceEntry, build_chain, instrument

        return {
            "PropagationTrace": PropagationTrace,
            "TraceEntry": TraceEntry,
            "build_chain": build_chain,
            "instrument": instrument,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
