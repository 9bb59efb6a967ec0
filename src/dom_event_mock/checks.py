"""Argument checks shared by Event and EventTarget."""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidArgumentError


def require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be string, not {value!r}")
    return value


def require_bool(value: Any, what: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{what} must be boolean, not {value!r}")
    return value


def require_callable(value: Any, what: str) -> Any:
    if not callable(value):
        raise InvalidArgumentError(f"{what} must be a function, not {value!r}")
    return value
