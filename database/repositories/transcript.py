from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import StudentTranscript
from database.repositories.base import BaseRepository


class TranscriptRepository(BaseRepository):
    def get_by_student(self, student_id: str) -> Optional[StudentTranscript]:
        stmt = select(StudentTranscript).where(StudentTranscript.student_id == student_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def save_transcript(
        self,
        student_id: str,
        overall_percentage: Optional[float],
        subjects: List[Dict[str, Any]]
    ) -> StudentTranscript:
        """Store a transcript, replacing the student's previous one."""
        transcript = self.get_by_student(student_id)
        if transcript is None:
            transcript = StudentTranscript(student_id=student_id)
            self.db.add(transcript)
        transcript.overall_percentage = overall_percentage
        transcript.subjects = list(subjects)
        self.db.flush()
        return transcript
