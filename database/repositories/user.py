import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_students_created_before(self, cutoff: datetime) -> List[User]:
        """Students whose account is at least as old as `cutoff`."""
        stmt = (
            select(User)
            .where(User.role == 'student', User.created_at <= cutoff)
            .order_by(User.created_at)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_user(
        self,
        role: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        created_at: Optional[datetime] = None,
        user_id: Optional[str] = None
    ) -> User:
        user = User(id=user_id, role=role, name=name, email=email)
        if created_at is not None:
            user.created_at = created_at
        self.db.add(user)
        self.db.flush()
        return user
