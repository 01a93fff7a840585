from sqlalchemy import Column, String, Text, TIMESTAMP, Index

from core.utils import new_id, utc_now
from .base import Base


class User(Base):
    """
    Platform account. Only students receive job matches and reminders;
    companies own job posts and institutions own course requirements.
    """
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=new_id)
    role = Column(String(32), nullable=False)  # student, institution, company, admin
    name = Column(Text)
    email = Column(Text, unique=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now)

    __table_args__ = (
        Index('idx_users_role_created', 'role', 'created_at'),
    )
