from sqlalchemy import Column, String, Float, Integer, JSON, TIMESTAMP

from core.utils import new_id, utc_now
from .base import Base


class CourseRequirement(Base):
    """
    Admission requirements an institution sets for one of its courses.

    required_subjects: [{"subject_name": "Mathematics", "minimum_mark": 60}, ...]
    additional_subjects: [{"subject_name": "Physics", "preferred_minimum_mark": 50}, ...]
    Bare subject names are accepted in both lists.
    """
    __tablename__ = 'course_requirements'

    id = Column(String(36), primary_key=True, default=new_id)
    course_id = Column(String(36), nullable=False, unique=True, index=True)
    institution_id = Column(String(36), nullable=True)

    required_subjects = Column(JSON, nullable=False, default=list)
    additional_subjects = Column(JSON, nullable=False, default=list)
    minimum_overall_percentage = Column(Float, nullable=False, default=0)
    # NULL or 0 means every required subject must be met
    minimum_required_subjects_needed = Column(Integer, nullable=True)

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def to_dict(self) -> dict:
        return {
            'course_id': self.course_id,
            'required_subjects': list(self.required_subjects or []),
            'additional_subjects': list(self.additional_subjects or []),
            'minimum_overall_percentage': self.minimum_overall_percentage,
            'minimum_required_subjects_needed': self.minimum_required_subjects_needed,
        }
