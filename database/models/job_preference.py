from sqlalchemy import Column, String, Text, Integer, JSON, TIMESTAMP, ForeignKey

from core.utils import new_id, utc_now
from .base import Base


class JobPreference(Base):
    """
    A student's job interests. A row with every field empty is treated the
    same as no row at all.
    """
    __tablename__ = 'job_preferences'

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    industries = Column(JSON, nullable=False, default=list)
    job_types = Column(JSON, nullable=False, default=list)
    skills = Column(JSON, nullable=False, default=list)
    work_type = Column(JSON, nullable=False, default=list)
    location = Column(Text)
    salary_min = Column(Integer)
    salary_max = Column(Integer)

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def to_dict(self) -> dict:
        return {
            'industries': list(self.industries or []),
            'job_types': list(self.job_types or []),
            'skills': list(self.skills or []),
            'work_type': list(self.work_type or []),
            'location': self.location,
            'salary_min': self.salary_min,
            'salary_max': self.salary_max,
        }
