from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import JobPreference
from database.repositories.base import BaseRepository

_LIST_FIELDS = ('industries', 'job_types', 'skills', 'work_type')
_SCALAR_FIELDS = ('location', 'salary_min', 'salary_max')


class JobPreferenceRepository(BaseRepository):
    def get_all(self) -> List[JobPreference]:
        return list(self.db.execute(select(JobPreference)).scalars().all())

    def get_by_student(self, student_id: str) -> Optional[JobPreference]:
        stmt = select(JobPreference).where(JobPreference.student_id == student_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_students(self, student_ids: List[str]) -> Dict[str, JobPreference]:
        if not student_ids:
            return {}
        stmt = select(JobPreference).where(JobPreference.student_id.in_(student_ids))
        return {pref.student_id: pref for pref in self.db.execute(stmt).scalars().all()}

    def save_preferences(self, student_id: str, data: Dict[str, Any]) -> JobPreference:
        preference = self.get_by_student(student_id)
        if preference is None:
            preference = JobPreference(student_id=student_id)
            self.db.add(preference)
        for name in _LIST_FIELDS:
            setattr(preference, name, list(data.get(name) or []))
        for name in _SCALAR_FIELDS:
            setattr(preference, name, data.get(name))
        self.db.flush()
        return preference
