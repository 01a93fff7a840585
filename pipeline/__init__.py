"""Scheduled jobs for CareerMatch: job matching and preference reminders."""

from .scheduler import PeriodicScheduler
from .job_matcher import (
    JobMatcherScheduler, JobMatchSnapshot, JobMatchTick, JobMatchRun, compute_job_match_tick
)
from .preference_reminder import (
    PreferenceReminderScheduler, StudentSnapshot, ReminderTick, ReminderRun, compute_reminder_tick
)

__all__ = [
    'PeriodicScheduler',
    'JobMatcherScheduler', 'JobMatchSnapshot', 'JobMatchTick', 'JobMatchRun', 'compute_job_match_tick',
    'PreferenceReminderScheduler', 'StudentSnapshot', 'ReminderTick', 'ReminderRun', 'compute_reminder_tick',
]
