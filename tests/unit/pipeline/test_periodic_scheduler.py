#!/usr/bin/env python3
"""
Tests for the PeriodicScheduler lifecycle.

Usage:
    python -m pytest tests/unit/pipeline/test_periodic_scheduler.py -v
"""

import threading
import unittest
from datetime import timedelta

from pipeline.scheduler import PeriodicScheduler
from tests import FakeClock


class RecordingScheduler(PeriodicScheduler):
    name = "recording"

    def __init__(self, interval_seconds, clock=None, fail=False):
        super().__init__(interval_seconds, clock or FakeClock())
        self.ticks = []
        self.fail = fail
        self.ticked = threading.Event()

    def tick(self, now):
        self.ticks.append(now)
        self.ticked.set()
        if self.fail:
            raise RuntimeError("tick exploded")
        return len(self.ticks)


class TestRunOnce(unittest.TestCase):

    def test_records_run(self):
        clock = FakeClock()
        scheduler = RecordingScheduler(60, clock)

        self.assertEqual(scheduler.run_once(), 1)
        self.assertEqual(scheduler.ticks, [clock.now])
        self.assertEqual(scheduler.last_run_at, clock.now)
        self.assertEqual(scheduler.run_count, 1)
        self.assertIsNone(scheduler.last_error)

    def test_errors_are_contained(self):
        scheduler = RecordingScheduler(60, fail=True)

        self.assertIsNone(scheduler.run_once())
        self.assertEqual(scheduler.last_error, "tick exploded")
        self.assertEqual(scheduler.run_count, 1)

    def test_error_cleared_by_next_success(self):
        scheduler = RecordingScheduler(60, fail=True)
        scheduler.run_once()
        scheduler.fail = False
        scheduler.run_once()
        self.assertIsNone(scheduler.last_error)


class TestLifecycle(unittest.TestCase):

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            RecordingScheduler(0)
        scheduler = RecordingScheduler(60)
        with self.assertRaises(ValueError):
            scheduler.set_interval(-1)
        self.assertEqual(scheduler.interval_seconds, 60)

    def test_start_is_idempotent(self):
        scheduler = RecordingScheduler(3600)
        self.addCleanup(scheduler.stop, True)

        self.assertTrue(scheduler.start())
        self.assertFalse(scheduler.start())
        self.assertTrue(scheduler.is_running)

    def test_next_run_tracks_interval(self):
        clock = FakeClock()
        scheduler = RecordingScheduler(3600, clock)
        self.addCleanup(scheduler.stop, True)

        scheduler.start()

        self.assertEqual(scheduler.get_status()['next_run_at'], clock.now + timedelta(hours=1))

    def test_timer_thread_ticks(self):
        scheduler = RecordingScheduler(0.01)
        self.addCleanup(scheduler.stop, True)

        scheduler.start()

        self.assertTrue(scheduler.ticked.wait(timeout=5))
        self.assertGreaterEqual(scheduler.run_count, 1)

    def test_stop_prevents_further_ticks(self):
        scheduler = RecordingScheduler(3600)
        scheduler.start()
        scheduler.stop(wait=True, timeout=5)

        status = scheduler.get_status()
        self.assertFalse(status['is_running'])
        self.assertIsNone(status['next_run_at'])
        self.assertEqual(scheduler.ticks, [])

    def test_is_running_tolerates_concurrent_stop(self):
        class StoppedMidCheck(RecordingScheduler):
            # The event vanishes after the first read, as if stop() ran in between
            @property
            def _stop_event(self):
                event, self._events = self._events[0], [None]
                return event

            @_stop_event.setter
            def _stop_event(self, value):
                self._events = [value]

        scheduler = StoppedMidCheck(60)
        scheduler._stop_event = threading.Event()

        self.assertTrue(scheduler.is_running)
        self.assertFalse(scheduler.is_running)
        self.assertFalse(scheduler.get_status()['is_running'])

    def test_stop_when_idle_is_noop(self):
        scheduler = RecordingScheduler(60)
        scheduler.stop()
        self.assertFalse(scheduler.is_running)

    def test_set_interval_rearms_running_scheduler(self):
        clock = FakeClock()
        scheduler = RecordingScheduler(3600, clock)
        self.addCleanup(scheduler.stop, True)
        scheduler.start()

        scheduler.set_interval(120)

        self.assertTrue(scheduler.is_running)
        self.assertEqual(scheduler.interval_seconds, 120)
        self.assertEqual(scheduler.next_run_at, clock.now + timedelta(seconds=120))

    def test_set_interval_keeps_idle_scheduler_idle(self):
        scheduler = RecordingScheduler(3600)
        scheduler.set_interval(30)
        self.assertFalse(scheduler.is_running)
        self.assertEqual(scheduler.interval_seconds, 30)


if __name__ == '__main__':
    unittest.main()
