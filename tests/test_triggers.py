"""
Unit tests for triggers.
"""

import unittest

import torch

from optcallbacks.triggers import EventTrigger, FunctionTrigger, IterationTrigger, TimeTrigger, as_triggers


class FakeClock:
    """Manually advanced clock for TimeTrigger tests."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestIterationTrigger(unittest.TestCase):
    """Tests for IterationTrigger."""

    def test_fires_on_multiples_of_interval(self):
        """Test that the trigger fires exactly on k, 2k, 3k, ..."""
        for k in [1, 2, 3, 5, 7]:
            trig = IterationTrigger(k)
            fired = [t for t in range(1, 50) if trig(None, 0.0, t, None)]
            self.assertEqual(fired, list(range(k, 50, k)))

    def test_records_last_fire(self):
        """Test that last_fire_t follows the firing counter."""
        trig = IterationTrigger(3)
        for t in range(1, 8):
            trig(None, 0.0, t, None)
        self.assertEqual(trig.last_fire_t, 6)

    def test_reset(self):
        """Test that reset restores the initial fire point."""
        trig = IterationTrigger(2)
        trig(None, 0.0, 2, None)
        self.assertIs(trig.reset(), trig)
        self.assertEqual(trig.last_fire_t, 0)

    def test_rejects_non_positive_interval(self):
        """Test that invalid intervals fail at construction."""
        for interval in [0, -3, 2.5, True, torch.tensor(2.0), torch.tensor(-1)]:
            with self.assertRaises(ValueError):
                IterationTrigger(interval)

    def test_accepts_integer_like_interval(self):
        """Test that integer tensors are accepted as intervals."""
        trig = IterationTrigger(torch.tensor(3))
        self.assertEqual(trig.interval, 3)
        self.assertIsInstance(trig.interval, int)
        fired = [t for t in range(1, 10) if trig(None, 0.0, t, None)]
        self.assertEqual(fired, [3, 6, 9])

    def test_ignores_events(self):
        """Test that events are a no-op for iteration triggers."""
        trig = IterationTrigger(4)
        trig.trigger("end")
        self.assertFalse(trig(None, 0.0, 1, None))


class TestTimeTrigger(unittest.TestCase):
    """Tests for TimeTrigger."""

    def test_first_call_never_fires(self):
        """Test that the first call only starts the clock."""
        clock = FakeClock()
        trig = TimeTrigger(1.0, clock=clock)
        self.assertIsNone(trig.last_fire_time)

        self.assertFalse(trig(None, 0.0, 1, None))
        self.assertEqual(trig.last_fire_time, 100.0)

    def test_fires_after_interval(self):
        """Test firing only once more than interval seconds have passed."""
        clock = FakeClock()
        trig = TimeTrigger(2.0, clock=clock)
        trig(None, 0.0, 1, None)

        clock.now = 101.0
        self.assertFalse(trig(None, 0.0, 2, None))

        # Exactly the interval is not enough
        clock.now = 102.0
        self.assertFalse(trig(None, 0.0, 3, None))

        clock.now = 102.5
        self.assertTrue(trig(None, 0.0, 4, None))
        self.assertEqual(trig.last_fire_time, 102.5)

        # Restarts from the last fire
        clock.now = 104.0
        self.assertFalse(trig(None, 0.0, 5, None))
        clock.now = 104.6
        self.assertTrue(trig(None, 0.0, 6, None))

    def test_arguments_ignored(self):
        """Test that the decision depends on the clock only."""
        clock = FakeClock()
        trig = TimeTrigger(1.0, clock=clock)
        trig(None, 0.0, 1, None)
        clock.now = 200.0
        self.assertTrue(trig("state", 123.0, 999, {"extra": 1}))

    def test_reset(self):
        """Test that reset unsets the start time."""
        clock = FakeClock()
        trig = TimeTrigger(1.0, clock=clock)
        trig(None, 0.0, 1, None)
        trig.reset()
        self.assertIsNone(trig.last_fire_time)

        # Behaves like a fresh trigger again
        clock.now = 500.0
        self.assertFalse(trig(None, 0.0, 1, None))

    def test_rejects_non_positive_interval(self):
        """Test that invalid intervals fail at construction."""
        with self.assertRaises(ValueError):
            TimeTrigger(0)
        with self.assertRaises(ValueError):
            TimeTrigger(-1.5)
        with self.assertRaises(ValueError):
            TimeTrigger(float("nan"))

    def test_default_clock(self):
        """Test that the real clock works without injection."""
        trig = TimeTrigger(3600.0)
        self.assertFalse(trig(None, 0.0, 1, None))
        self.assertFalse(trig(None, 0.0, 2, None))


class TestEventTrigger(unittest.TestCase):
    """Tests for EventTrigger."""

    def test_latch_is_consumed(self):
        """Test that a recognized event fires exactly once."""
        trig = EventTrigger(("start", "end"))
        self.assertFalse(trig(None, 0.0, 1, None))

        trig.trigger("start")
        self.assertTrue(trig.latched)
        self.assertTrue(trig(None, 0.0, 2, None))
        self.assertFalse(trig.latched)
        self.assertFalse(trig(None, 0.0, 3, None))

    def test_unknown_event_clears_latch(self):
        """Test that an unrecognized event clears a pending latch."""
        trig = EventTrigger(("end",))
        trig.trigger("end")
        trig.trigger("other")
        self.assertFalse(trig(None, 0.0, 1, None))

    def test_single_string_event(self):
        """Test that a bare string is one label, not a set of characters."""
        trig = EventTrigger("end")
        trig.trigger("e")
        self.assertFalse(trig.latched)
        trig.trigger("end")
        self.assertTrue(trig.latched)

    def test_reset_clears_latch(self):
        """Test that reset drops a pending event."""
        trig = EventTrigger(("end",))
        trig.trigger("end")
        trig.reset()
        self.assertFalse(trig(None, 0.0, 1, None))


class TestAsTriggers(unittest.TestCase):
    """Tests for one-or-many normalization."""

    def test_single_trigger(self):
        """Test that a single trigger becomes a 1-tuple."""
        trig = IterationTrigger(1)
        self.assertEqual(as_triggers(trig), (trig,))

    def test_sequence(self):
        """Test that lists and tuples keep their order."""
        a, b = IterationTrigger(1), EventTrigger(("end",))
        self.assertEqual(as_triggers([a, b]), (a, b))
        self.assertEqual(as_triggers((b, a)), (b, a))

    def test_plain_function_wrapped(self):
        """Test that plain predicates are adapted."""
        (trig,) = as_triggers(lambda state, value, t, extra: value < 0)
        self.assertIsInstance(trig, FunctionTrigger)
        self.assertTrue(trig(None, -1.0, 1, None))
        self.assertFalse(trig(None, 1.0, 2, None))
        self.assertIs(trig.reset(), trig)

    def test_empty_sequence_rejected(self):
        """Test that an empty trigger collection is rejected."""
        with self.assertRaises(ValueError):
            as_triggers(())

    def test_non_callable_rejected(self):
        """Test that non-callables are rejected."""
        with self.assertRaises(TypeError):
            as_triggers(5)


if __name__ == "__main__":
    unittest.main()
