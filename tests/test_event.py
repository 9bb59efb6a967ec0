"""Tests for Event construction, guarded state and stop/prevent methods."""

from __future__ import annotations

import time
import unittest

from dom_event_mock.event import Event
from dom_event_mock.exceptions import InvalidArgumentError, ReadOnlyPropertyError
from dom_event_mock.phase import EventPhase
from dom_event_mock.target import EventTarget


class EventConstructionTests(unittest.TestCase):
    """Validate constructor checks and defaults."""

    def test_type_is_kept_and_options_default_false(self) -> None:
        event = Event("boom")
        self.assertEqual(event.type, "boom")
        self.assertFalse(event.bubbles)
        self.assertFalse(event.cancelable)

    def test_cancelable_defaults_to_false_when_only_bubbles_given(self) -> None:
        self.assertFalse(Event("boom", bubbles=True).cancelable)
        self.assertFalse(Event("boom", {"bubbles": True}).cancelable)

    def test_bubbles_defaults_to_false_when_only_cancelable_given(self) -> None:
        self.assertFalse(Event("boom", cancelable=True).bubbles)
        self.assertFalse(Event("boom", {"cancelable": True}).bubbles)

    def test_options_mapping_sets_both_flags(self) -> None:
        event = Event("boom", {"bubbles": True, "cancelable": True})
        self.assertTrue(event.bubbles)
        self.assertTrue(event.cancelable)

    def test_non_string_name_is_rejected(self) -> None:
        for bad in (None, 1, b"boom", ["boom"]):
            with self.subTest(name=bad):
                with self.assertRaises(InvalidArgumentError):
                    Event(bad)  # type: ignore[arg-type]

    def test_empty_name_is_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Event("")

    def test_non_boolean_options_are_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Event("boom", bubbles=1)  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            Event("boom", cancelable="yes")  # type: ignore[arg-type]
        with self.assertRaises(InvalidArgumentError):
            Event("boom", {"bubbles": None})

    def test_unknown_option_keys_are_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Event("boom", {"composed": True})

    def test_non_mapping_options_are_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Event("boom", True)  # type: ignore[arg-type]

    def test_errors_are_type_errors(self) -> None:
        with self.assertRaises(TypeError):
            Event(42)  # type: ignore[arg-type]

    def test_initial_state(self) -> None:
        before = time.time() * 1000.0
        event = Event("boom")
        after = time.time() * 1000.0
        self.assertFalse(event.is_trusted)
        self.assertTrue(before <= event.time_stamp <= after)
        self.assertEqual(event.event_phase, EventPhase.NONE)
        self.assertIsNone(event.target)
        self.assertIsNone(event.current_target)
        self.assertFalse(event.default_prevented)
        self.assertFalse(event.propagation_stopped)
        self.assertFalse(event.immediate_stopped)

    def test_phase_constants(self) -> None:
        self.assertEqual(Event.NONE, 0)
        self.assertEqual(Event.CAPTURING_PHASE, 1)
        self.assertEqual(Event.AT_TARGET, 2)
        self.assertEqual(Event.BUBBLING_PHASE, 3)


class EventMethodTests(unittest.TestCase):
    """Validate prevent_default and the stop methods."""

    def test_prevent_default_is_noop_when_not_cancelable(self) -> None:
        event = Event("boom")
        event.prevent_default()
        self.assertFalse(event.default_prevented)

    def test_prevent_default_sets_flag_when_cancelable(self) -> None:
        event = Event("boom", cancelable=True)
        event.prevent_default()
        self.assertTrue(event.default_prevented)

    def test_stop_propagation_sets_only_propagation_flag(self) -> None:
        event = Event("boom")
        event.stop_propagation()
        self.assertTrue(event.propagation_stopped)
        self.assertFalse(event.immediate_stopped)
        self.assertTrue(event.cancel_bubble)

    def test_stop_immediate_propagation_sets_both_flags(self) -> None:
        event = Event("boom")
        event.stop_immediate_propagation()
        self.assertTrue(event.propagation_stopped)
        self.assertTrue(event.immediate_stopped)

    def test_dom_spellings_are_aliases(self) -> None:
        event = Event("boom", cancelable=True)
        event.preventDefault()
        event.stopImmediatePropagation()
        self.assertTrue(event.defaultPrevented)
        self.assertTrue(event.propagationStopped)
        self.assertTrue(event.immediateStopped)
        self.assertTrue(event.cancelBubble)
        self.assertFalse(event.isTrusted)
        self.assertEqual(event.eventPhase, Event.NONE)
        self.assertIsNone(event.currentTarget)


class EventGuardedStateTests(unittest.TestCase):
    """Validate read-only, write-once and enum-guarded members."""

    def test_read_only_members_reject_assignment(self) -> None:
        event = Event("boom")
        for name in (
            "type",
            "bubbles",
            "cancelable",
            "is_trusted",
            "time_stamp",
            "default_prevented",
            "propagation_stopped",
            "immediate_stopped",
            "cancel_bubble",
            "defaultPrevented",
        ):
            with self.subTest(name=name):
                with self.assertRaises(ReadOnlyPropertyError):
                    setattr(event, name, True)
        self.assertFalse(event.default_prevented)

    def test_unknown_attributes_cannot_be_added(self) -> None:
        event = Event("boom")
        with self.assertRaises(AttributeError):
            event.detail = 1  # type: ignore[attr-defined]

    def test_event_phase_accepts_the_four_phases(self) -> None:
        event = Event("boom")
        for phase in (Event.CAPTURING_PHASE, Event.AT_TARGET, 3, Event.NONE):
            event.event_phase = phase
            self.assertEqual(event.event_phase, phase)
        self.assertIsInstance(event.event_phase, EventPhase)

    def test_event_phase_rejects_other_values(self) -> None:
        event = Event("boom")
        for bad in (4, -1, True, 1.0, "1", None):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidArgumentError):
                    event.event_phase = bad
        self.assertEqual(event.event_phase, EventPhase.NONE)

    def test_target_can_be_set_once(self) -> None:
        event = Event("boom")
        first = EventTarget()
        event.target = first
        self.assertIs(event.target, first)

    def test_target_cannot_be_set_twice(self) -> None:
        event = Event("boom")
        first = EventTarget()
        event.target = first
        with self.assertRaises(ReadOnlyPropertyError):
            event.target = EventTarget()
        with self.assertRaises(ReadOnlyPropertyError):
            event.target = first
        self.assertIs(event.target, first)

    def test_target_rejects_wrong_shape(self) -> None:
        event = Event("boom")
        with self.assertRaises(InvalidArgumentError):
            event.target = object()
        with self.assertRaises(InvalidArgumentError):
            event.target = EventTarget
        with self.assertRaises(InvalidArgumentError):
            event.current_target = EventTarget
        self.assertIsNone(event.current_target)
        self.assertIsNone(event.target)

    def test_target_accepts_any_dispatchable(self) -> None:
        class Foreign:
            def dispatch_event(self, event: Event) -> bool:
                return True

        event = Event("boom")
        foreign = Foreign()
        event.target = foreign
        self.assertIs(event.target, foreign)

    def test_current_target_is_reassignable_but_validated(self) -> None:
        event = Event("boom")
        first, second = EventTarget(), EventTarget()
        event.current_target = first
        event.current_target = second
        self.assertIs(event.current_target, second)
        event.current_target = None
        self.assertIsNone(event.current_target)
        with self.assertRaises(InvalidArgumentError):
            event.current_target = "target"

    def test_repr_mentions_type_and_phase(self) -> None:
        text = repr(Event("boom", bubbles=True))
        self.assertIn("'boom'", text)
        self.assertIn("NONE", text)
        self.assertIn("bubbles", text)


if __name__ == "__main__":
    unittest.main()
