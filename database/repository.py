import logging

from sqlalchemy.orm import Session

from database.repositories import (
    UserRepository,
    TranscriptRepository,
    CourseRequirementRepository,
    JobPostRepository,
    JobPreferenceRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


class StoreRepository:
    """
    All repositories bound to one Session, so a unit of work spans them.

    Usage:
        repo = StoreRepository(session)
        jobs = repo.jobs.get_active_posted_since(watermark)
        repo.notifications.create_notification(...)
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.transcripts = TranscriptRepository(db)
        self.course_requirements = CourseRequirementRepository(db)
        self.jobs = JobPostRepository(db)
        self.preferences = JobPreferenceRepository(db)
        self.notifications = NotificationRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
