import logging
from typing import List, Optional

from sqlalchemy import select, update, func

from core.utils import utc_now
from database.models import Notification
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class NotificationRepository(BaseRepository):
    def create_notification(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        related_id: Optional[str] = None,
        action_url: Optional[str] = None
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            related_id=related_id,
            action_url=action_url,
            read=False
        )
        self.db.add(notification)
        self.db.flush()
        return notification

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        return self.db.get(Notification, notification_id)

    def get_for_user(self, user_id: str, limit: int = 50, offset: int = 0) -> List[Notification]:
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    def count_for_user(self, user_id: str) -> int:
        stmt = select(func.count(Notification.id)).where(Notification.user_id == user_id)
        return self.db.execute(stmt).scalar_one()

    def count_unread(self, user_id: str) -> int:
        stmt = select(func.count(Notification.id)).where(
            Notification.user_id == user_id,
            Notification.read.is_(False)
        )
        return self.db.execute(stmt).scalar_one()

    def has_unread_of_type(self, user_id: str, notification_type: str) -> bool:
        stmt = select(Notification.id).where(
            Notification.user_id == user_id,
            Notification.type == notification_type,
            Notification.read.is_(False)
        ).limit(1)
        return self.db.execute(stmt).first() is not None

    def mark_read(self, notification: Notification) -> Notification:
        if not notification.read:
            notification.read = True
            notification.read_at = utc_now()
            self.db.flush()
        return notification

    def mark_all_read(self, user_id: str) -> int:
        """Returns the number of notifications that changed."""
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
            .values(read=True, read_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        return result.rowcount or 0

    def delete(self, notification: Notification) -> None:
        self.db.delete(notification)
        self.db.flush()
