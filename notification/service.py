#!/usr/bin/env python3
"""
Notification Service

Writes in-app notifications through the notification repository and sends
best-effort emails through a NotificationChannel.

Usage:
    from notification.service import NotificationService

    service = NotificationService(base_url="https://careermatch.app")

    with store_uow() as repo:
        service.create_notification(repo.notifications, content)
        created = service.create_preference_reminder(repo.notifications, student_id)

    service.send_reminder_email("student@example.com", "Thandi")
"""

import logging
from typing import Optional

from database.models import Notification
from database.repositories.notification import NotificationRepository
from notification.channels import NotificationChannel, NotificationChannelFactory, _mask_email
from notification.message_builder import (
    NotificationContent, NotificationMessageBuilder, PREFERENCE_REMINDER_TYPE
)

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Coordinates notification storage and delivery.

    Storage failures propagate to the caller, which owns the transaction.
    Email failures never propagate: send_reminder_email returns False.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5173",
        email_enabled: bool = True,
        email_channel: Optional[NotificationChannel] = None
    ):
        self.base_url = base_url
        self.email_enabled = email_enabled
        self._email_channel = email_channel

    @property
    def email_channel(self) -> NotificationChannel:
        if self._email_channel is None:
            self._email_channel = NotificationChannelFactory.get_channel('email')
        return self._email_channel

    def create_notification(
        self,
        repo: NotificationRepository,
        content: NotificationContent
    ) -> Notification:
        notification = repo.create_notification(
            user_id=content.user_id,
            type=content.type,
            title=content.title,
            message=content.message,
            related_id=content.related_id,
            action_url=content.action_url
        )
        logger.debug(f"Created {content.type} notification for user {content.user_id}")
        return notification

    def create_preference_reminder(
        self,
        repo: NotificationRepository,
        student_id: str
    ) -> Optional[Notification]:
        """
        Create a preference reminder unless one is still unread.

        Returns the new notification, or None when suppressed.
        """
        if repo.has_unread_of_type(student_id, PREFERENCE_REMINDER_TYPE):
            logger.debug(f"Student {student_id} already has an unread preference reminder")
            return None
        return self.create_notification(
            repo, NotificationMessageBuilder.build_preference_reminder(student_id)
        )

    def send_reminder_email(self, email: str, name: Optional[str] = None) -> bool:
        if not self.email_enabled:
            logger.debug("Email disabled, skipping preference reminder email")
            return False

        content = NotificationMessageBuilder.build_reminder_email(name, self.base_url)
        try:
            sent = self.email_channel.send(email, content.subject, content.text, {'html': content.html})
        except Exception as e:
            logger.warning(f"Failed to send preference reminder email to {_mask_email(email)}: {e}")
            return False

        if not sent:
            logger.warning(f"Preference reminder email to {_mask_email(email)} was not sent")
        return sent
