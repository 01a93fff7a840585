#!/usr/bin/env python3
"""
User notification service - the in-app notification feed.
"""

import logging
from typing import List
from sqlalchemy.orm import Session

from database.models import Notification
from database.repositories import NotificationRepository
from ..models.responses import NotificationItem
from ..exceptions import NotificationNotFoundException, NotificationForbiddenException
from ..utils import safe_datetime_iso

logger = logging.getLogger(__name__)


class UserNotificationService:
    """Read and manage one user's notifications."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepository(db)

    def list_notifications(self, user_id: str, limit: int = 50, offset: int = 0) -> List[NotificationItem]:
        """Newest first."""
        return [
            self._to_item(notification)
            for notification in self.repo.get_for_user(user_id, limit=limit, offset=offset)
        ]

    def count(self, user_id: str) -> int:
        return self.repo.count_for_user(user_id)

    def unread_count(self, user_id: str) -> int:
        return self.repo.count_unread(user_id)

    def mark_read(self, user_id: str, notification_id: str) -> NotificationItem:
        notification = self._get_owned(user_id, notification_id)
        self.repo.mark_read(notification)
        self.db.commit()
        return self._to_item(notification)

    def mark_all_read(self, user_id: str) -> int:
        updated = self.repo.mark_all_read(user_id)
        self.db.commit()
        logger.info(f"Marked {updated} notification(s) read for user {user_id}")
        return updated

    def delete(self, user_id: str, notification_id: str) -> None:
        notification = self._get_owned(user_id, notification_id)
        self.repo.delete(notification)
        self.db.commit()

    def _get_owned(self, user_id: str, notification_id: str) -> Notification:
        notification = self.repo.get_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundException(f"Notification {notification_id} not found")
        if notification.user_id != user_id:
            raise NotificationForbiddenException("Not authorized to modify this notification")
        return notification

    @staticmethod
    def _to_item(notification: Notification) -> NotificationItem:
        return NotificationItem(
            id=notification.id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            related_id=notification.related_id,
            action_url=notification.action_url,
            read=bool(notification.read),
            read_at=safe_datetime_iso(notification.read_at),
            created_at=safe_datetime_iso(notification.created_at)
        )
