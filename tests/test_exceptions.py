"""Tests for domain exception hierarchy."""

from __future__ import annotations

import unittest

from dom_event_mock.exceptions import (
    ConfigValidationError,
    DomEventError,
    InvalidArgumentError,
    ReadOnlyPropertyError,
)


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(InvalidArgumentError, DomEventError))
        self.assertTrue(issubclass(ReadOnlyPropertyError, InvalidArgumentError))
        self.assertTrue(issubclass(ConfigValidationError, DomEventError))

    def test_argument_errors_are_type_errors(self) -> None:
        self.assertTrue(issubclass(InvalidArgumentError, TypeError))
        self.assertTrue(issubclass(ReadOnlyPropertyError, TypeError))
        self.assertFalse(issubclass(ConfigValidationError, TypeError))


if __name__ == "__main__":
    unittest.main()
