from sqlalchemy import Column, String, Float, JSON, TIMESTAMP, ForeignKey

from core.utils import new_id, utc_now
from .base import Base


class StudentTranscript(Base):
    """
    The active academic transcript of a student (one per student).

    subjects: [{"name": "Mathematics", "mark": 72, "grade": "B"}, ...]
    """
    __tablename__ = 'transcripts'

    id = Column(String(36), primary_key=True, default=new_id)
    student_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    overall_percentage = Column(Float, nullable=True)
    subjects = Column(JSON, nullable=False, default=list)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def to_dict(self) -> dict:
        return {
            'student_id': self.student_id,
            'overall_percentage': self.overall_percentage,
            'subjects': list(self.subjects or []),
        }
