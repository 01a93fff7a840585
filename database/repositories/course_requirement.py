from typing import Any, Dict, Optional

from sqlalchemy import select

from database.models import CourseRequirement
from database.repositories.base import BaseRepository


class CourseRequirementRepository(BaseRepository):
    def get_by_course(self, course_id: str) -> Optional[CourseRequirement]:
        stmt = select(CourseRequirement).where(CourseRequirement.course_id == course_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def save_requirement(self, course_id: str, data: Dict[str, Any]) -> CourseRequirement:
        requirement = self.get_by_course(course_id)
        if requirement is None:
            requirement = CourseRequirement(course_id=course_id)
            self.db.add(requirement)
        requirement.institution_id = data.get('institution_id')
        requirement.required_subjects = list(data.get('required_subjects') or [])
        requirement.additional_subjects = list(data.get('additional_subjects') or [])
        requirement.minimum_overall_percentage = data.get('minimum_overall_percentage') or 0
        requirement.minimum_required_subjects_needed = data.get('minimum_required_subjects_needed')
        self.db.flush()
        return requirement
