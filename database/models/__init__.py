from .base import Base
from .user import User
from .transcript import StudentTranscript
from .course import CourseRequirement
from .job import JobPost
from .job_preference import JobPreference
from .notification import Notification

__all__ = [
    'Base',
    'User',
    'StudentTranscript',
    'CourseRequirement',
    'JobPost',
    'JobPreference',
    'Notification',
]
