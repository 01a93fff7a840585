"""Job matcher: notify students when newly posted jobs fit their preferences.

Each tick loads active jobs posted since the last watermark, scores them
against every stored preference and stores one job_match notification per
(student, job) match. The watermark advances to the tick time whether or
not the tick succeeded, so a failed tick's jobs are not retried.
"""

import logging
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from core.matcher import (
    JobAttributes, JobPostingDTO, JobPreferences, PreferenceMatcher, StudentPreferences
)
from core.utils import ensure_utc, utc_now
from database.uow import StoreFactory
from notification.message_builder import NotificationContent, NotificationMessageBuilder
from notification.service import NotificationService
from pipeline.scheduler import Clock, PeriodicScheduler

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 10 * 60


@dataclass
class JobMatchSnapshot:
    jobs: List[JobPostingDTO] = field(default_factory=list)
    preferences: List[StudentPreferences] = field(default_factory=list)


@dataclass
class JobMatchTick:
    notifications: List[NotificationContent]
    next_watermark: datetime


@dataclass
class JobMatchRun:
    """Summary of one job matcher tick."""
    since: datetime
    jobs_scanned: int = 0
    matches: int = 0
    notifications_created: int = 0
    failed_jobs: int = 0


def compute_job_match_tick(
    now: datetime,
    snapshot: JobMatchSnapshot,
    matcher: PreferenceMatcher
) -> JobMatchTick:
    """Pure matching step: no I/O, no clock."""
    notifications = []
    for job in snapshot.jobs:
        for student in snapshot.preferences:
            result = matcher.score_match(job.attributes, student.preferences)
            if not result.is_match:
                continue
            notifications.append(NotificationMessageBuilder.build_job_match(
                student_id=student.student_id,
                job_id=job.id,
                job_title=job.title,
                company=job.company,
                reasons=result.reasons
            ))
    return JobMatchTick(notifications=notifications, next_watermark=now)


def job_to_dto(job) -> JobPostingDTO:
    return JobPostingDTO(
        id=job.id,
        title=job.title,
        company=job.company,
        attributes=JobAttributes.from_dict(job.to_attributes())
    )


class JobMatcherScheduler(PeriodicScheduler):
    name = "job-matcher"

    def __init__(
        self,
        store_factory: StoreFactory,
        matcher: PreferenceMatcher,
        notification_service: NotificationService,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock = utc_now,
        max_workers: int = 4
    ):
        super().__init__(interval_seconds, clock)
        self.store_factory = store_factory
        self.matcher = matcher
        self.notification_service = notification_service
        self.max_workers = max_workers
        self.last_check: datetime = self.clock()

    def load_snapshot(self, since: datetime) -> JobMatchSnapshot:
        with self.store_factory() as repo:
            jobs = [job_to_dto(job) for job in repo.jobs.get_active_posted_since(since)]
            if not jobs:
                return JobMatchSnapshot()
            preferences = [
                StudentPreferences(
                    student_id=pref.student_id,
                    preferences=JobPreferences.from_dict(pref.to_dict())
                )
                for pref in repo.preferences.get_all()
            ]
        return JobMatchSnapshot(jobs=jobs, preferences=preferences)

    def tick(self, now: datetime) -> JobMatchRun:
        since = self.last_check
        try:
            snapshot = self.load_snapshot(since)
            run = JobMatchRun(since=since, jobs_scanned=len(snapshot.jobs))
            if not snapshot.jobs:
                logger.debug(f"No new jobs since {since.isoformat()}")
                return run

            result = compute_job_match_tick(now, snapshot, self.matcher)
            run.matches = len(result.notifications)
            run.notifications_created, run.failed_jobs = self._persist(result.notifications)

            logger.info(
                f"Job matcher: {run.jobs_scanned} new job(s), {run.matches} match(es), "
                f"{run.notifications_created} notification(s) created"
            )
            return run
        finally:
            self.last_check = now

    def _persist(self, notifications: List[NotificationContent]):
        """Store notifications job by job; one job's failure does not affect another's."""
        by_job: Dict[str, List[NotificationContent]] = OrderedDict()
        for content in notifications:
            by_job.setdefault(content.related_id, []).append(content)

        if self.max_workers <= 1 or len(by_job) <= 1:
            outcomes = [self._persist_job(job_id, items) for job_id, items in by_job.items()]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="job-matcher") as pool:
                futures = [pool.submit(self._persist_job, job_id, items) for job_id, items in by_job.items()]
                outcomes = [future.result() for future in futures]

        created = sum(count for count in outcomes if count is not None)
        failed = sum(1 for count in outcomes if count is None)
        return created, failed

    def _persist_job(self, job_id: str, items: List[NotificationContent]):
        try:
            with self.store_factory() as repo:
                for content in items:
                    self.notification_service.create_notification(repo.notifications, content)
            return len(items)
        except Exception as e:
            logger.error(f"Failed to store match notifications for job {job_id}: {e}", exc_info=True)
            return None

    def get_status(self) -> Dict[str, Any]:
        status = super().get_status()
        status['last_check'] = ensure_utc(self.last_check)
        status['next_check'] = status['next_run_at']
        return status
