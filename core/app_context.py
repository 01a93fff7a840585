from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, Optional

from core.config_loader import AppConfig
from core.eligibility import EligibilityChecker
from core.matcher import PreferenceMatcher
from database.uow import StoreFactory, store_uow
from notification.service import NotificationService
from pipeline.job_matcher import JobMatcherScheduler
from pipeline.preference_reminder import PreferenceReminderScheduler
from pipeline.scheduler import PeriodicScheduler


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    DB access is obtained through store_factory() inside each tick or
    request; nothing here holds a session.
    """
    config: AppConfig
    eligibility_checker: EligibilityChecker
    matcher: PreferenceMatcher
    notification_service: NotificationService
    job_matcher: JobMatcherScheduler
    preference_reminder: PreferenceReminderScheduler

    @classmethod
    def build(cls, config: AppConfig, store_factory: Optional[StoreFactory] = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            store_factory: Unit-of-work factory; defaults to store_uow

        Returns:
            Fully wired AppContext instance (schedulers idle)
        """
        store_factory = store_factory or store_uow

        matcher = PreferenceMatcher(
            criterion_weight=config.matching.criterion_weight,
            match_threshold=config.matching.match_threshold
        )

        notification_service = NotificationService(
            base_url=config.notifications.base_url,
            email_enabled=config.notifications.email_enabled
        )

        job_matcher = JobMatcherScheduler(
            store_factory=store_factory,
            matcher=matcher,
            notification_service=notification_service,
            interval_seconds=config.job_matcher.interval_minutes * 60,
            max_workers=config.job_matcher.max_workers
        )

        reminder_config = config.preference_reminder
        preference_reminder = PreferenceReminderScheduler(
            store_factory=store_factory,
            notification_service=notification_service,
            interval_seconds=reminder_config.interval_hours * 3600,
            min_account_age=timedelta(hours=reminder_config.min_account_age_hours),
            send_email=reminder_config.send_email,
            max_email_workers=reminder_config.max_email_workers
        )

        return cls(
            config=config,
            eligibility_checker=EligibilityChecker(),
            matcher=matcher,
            notification_service=notification_service,
            job_matcher=job_matcher,
            preference_reminder=preference_reminder
        )

    @property
    def schedulers(self) -> Dict[str, PeriodicScheduler]:
        return {
            self.job_matcher.name: self.job_matcher,
            self.preference_reminder.name: self.preference_reminder,
        }

    def start_schedulers(self) -> None:
        if self.config.job_matcher.enabled:
            self.job_matcher.start()
        if self.config.preference_reminder.enabled:
            self.preference_reminder.start()

    def stop_schedulers(self, wait: bool = False) -> None:
        for scheduler in self.schedulers.values():
            scheduler.stop(wait=wait)
