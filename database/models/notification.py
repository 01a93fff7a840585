from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, ForeignKey, Index

from core.utils import new_id, utc_now
from .base import Base


class Notification(Base):
    """
    In-app notification shown in a user's dashboard.

    related_id points at the record that triggered it (a job post for
    job_match); action_url is a dashboard route for reminders.
    """
    __tablename__ = 'notifications'

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    type = Column(String(64), nullable=False)  # job_match, job_preference_reminder
    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(String(36), nullable=True)
    action_url = Column(Text, nullable=True)

    read = Column(Boolean, nullable=False, default=False)
    read_at = Column(TIMESTAMP(timezone=True), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now)

    __table_args__ = (
        Index('idx_notifications_user_created', 'user_id', 'created_at'),
        Index('idx_notifications_user_type_read', 'user_id', 'type', 'read'),
    )
