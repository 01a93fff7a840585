"""Business logic services."""

from .eligibility_service import EligibilityService
from .notification_service import UserNotificationService
from .scheduler_service import SchedulerService
