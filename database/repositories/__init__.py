from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.transcript import TranscriptRepository
from database.repositories.course_requirement import CourseRequirementRepository
from database.repositories.job_post import JobPostRepository
from database.repositories.job_preference import JobPreferenceRepository
from database.repositories.notification import NotificationRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'TranscriptRepository',
    'CourseRequirementRepository',
    'JobPostRepository',
    'JobPreferenceRepository',
    'NotificationRepository',
]
