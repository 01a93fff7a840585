"""Preference reminder: nudge students who never set job preferences.

Each tick scans students whose accounts are at least a day old. A student
without any preference and outside the cooldown gets an in-app reminder
(unless an unread one exists) and, when that reminder was created, an
email. Emails are best effort and sent concurrently.

Cooldowns are kept in memory; a restart forgets them.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Mapping, Optional

from core.matcher import JobPreferences
from core.utils import ensure_utc, utc_now
from database.uow import StoreFactory
from notification.service import NotificationService
from pipeline.scheduler import Clock, PeriodicScheduler

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 3 * 60 * 60
MIN_ACCOUNT_AGE = timedelta(hours=24)


@dataclass
class StudentSnapshot:
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class ReminderTick:
    due: List[StudentSnapshot]
    last_reminders: Dict[str, datetime]


@dataclass
class ReminderRun:
    """Summary of one reminder tick."""
    students_scanned: int = 0
    due: int = 0
    reminders_created: int = 0
    emails_sent: int = 0
    failed: int = 0
    due_student_ids: List[str] = field(default_factory=list)


def compute_reminder_tick(
    now: datetime,
    students: List[StudentSnapshot],
    preferences: Mapping[str, JobPreferences],
    last_reminders: Mapping[str, datetime],
    cooldown: timedelta,
    min_account_age: timedelta = MIN_ACCOUNT_AGE
) -> ReminderTick:
    """
    Decide which students are due a reminder.

    A student is due when their account is old enough, they have no
    non-empty preference and they were never reminded or the cooldown has
    elapsed. Returns a new cooldown map; the input is not modified.
    """
    updated = dict(last_reminders)
    cutoff = now - min_account_age
    due = []
    for student in students:
        if student.created_at is None or student.created_at > cutoff:
            continue
        preference = preferences.get(student.id)
        if preference is not None and preference.has_any():
            continue
        last = updated.get(student.id)
        if last is not None and now - last < cooldown:
            continue
        updated[student.id] = now
        due.append(student)
    return ReminderTick(due=due, last_reminders=updated)


class PreferenceReminderScheduler(PeriodicScheduler):
    name = "preference-reminder"

    def __init__(
        self,
        store_factory: StoreFactory,
        notification_service: NotificationService,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock = utc_now,
        min_account_age: timedelta = MIN_ACCOUNT_AGE,
        send_email: bool = True,
        max_email_workers: int = 4
    ):
        super().__init__(interval_seconds, clock)
        self.store_factory = store_factory
        self.notification_service = notification_service
        self.min_account_age = min_account_age
        self.send_email = send_email
        self.max_email_workers = max_email_workers
        self.last_reminders: Dict[str, datetime] = {}

    @property
    def cooldown(self) -> timedelta:
        return timedelta(seconds=self.interval_seconds)

    def load_students(self, now: datetime):
        with self.store_factory() as repo:
            users = repo.users.get_students_created_before(now - self.min_account_age)
            students = [
                StudentSnapshot(
                    id=user.id,
                    name=user.name,
                    email=user.email,
                    created_at=ensure_utc(user.created_at)
                )
                for user in users
            ]
            stored = repo.preferences.get_for_students([student.id for student in students])
            preferences = {
                student_id: JobPreferences.from_dict(pref.to_dict())
                for student_id, pref in stored.items()
            }
        return students, preferences

    def tick(self, now: datetime) -> ReminderRun:
        students, preferences = self.load_students(now)
        result = compute_reminder_tick(
            now, students, preferences, self.last_reminders, self.cooldown, self.min_account_age
        )
        self.last_reminders = result.last_reminders

        run = ReminderRun(
            students_scanned=len(students),
            due=len(result.due),
            due_student_ids=[student.id for student in result.due]
        )

        to_email = []
        for student in result.due:
            try:
                with self.store_factory() as repo:
                    created = self.notification_service.create_preference_reminder(
                        repo.notifications, student.id
                    )
            except Exception as e:
                run.failed += 1
                logger.error(f"Failed to create preference reminder for {student.id}: {e}", exc_info=True)
                continue

            if created is None:
                continue
            run.reminders_created += 1
            if self.send_email and student.email:
                to_email.append(student)

        run.emails_sent = self._send_emails(to_email)

        logger.info(
            f"Preference reminder: {run.students_scanned} student(s) scanned, {run.due} due, "
            f"{run.reminders_created} reminder(s) created, {run.emails_sent} email(s) sent"
        )
        return run

    def _send_emails(self, students: List[StudentSnapshot]) -> int:
        if not students:
            return 0
        with ThreadPoolExecutor(
            max_workers=max(1, self.max_email_workers), thread_name_prefix="reminder-email"
        ) as pool:
            futures = [
                pool.submit(self.notification_service.send_reminder_email, student.email, student.name)
                for student in students
            ]
            sent = 0
            for student, future in zip(students, futures):
                try:
                    if future.result():
                        sent += 1
                except Exception as e:
                    logger.warning(f"Preference reminder email failed for student {student.id}: {e}")
        return sent

    def get_status(self) -> Dict[str, Any]:
        status = super().get_status()
        status['students_on_cooldown'] = len(self.last_reminders)
        return status
