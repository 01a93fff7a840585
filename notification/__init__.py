"""
Notification Module

In-app notifications stored in the database plus best-effort email.

Usage:
    from notification import NotificationService, NotificationChannelFactory

    service = NotificationService(base_url="https://careermatch.app")
    with store_uow() as repo:
        service.create_preference_reminder(repo.notifications, student_id)

    channel = NotificationChannelFactory.get_channel('email')
    channel.send('user@example.com', 'Subject', 'Body', {})
"""

from notification.channels import (
    NotificationChannel,
    EmailChannel,
    NotificationChannelFactory,
)

from notification.message_builder import (
    NotificationContent,
    EmailContent,
    NotificationMessageBuilder,
    JOB_MATCH_TYPE,
    PREFERENCE_REMINDER_TYPE,
)

from notification.service import NotificationService

__all__ = [
    # Channels
    'NotificationChannel',
    'EmailChannel',
    'NotificationChannelFactory',
    # Messages
    'NotificationContent',
    'EmailContent',
    'NotificationMessageBuilder',
    'JOB_MATCH_TYPE',
    'PREFERENCE_REMINDER_TYPE',
    # Service
    'NotificationService',
]
