#!/usr/bin/env python3
"""
Eligibility service - course eligibility checks for the web application.
"""

import logging
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from core.eligibility import EligibilityChecker, EligibilityResult, QualificationDetails
from database.repository import StoreRepository
from ..models.responses import EligibilityResponse
from ..exceptions import InvalidRequestException, TranscriptNotFoundException

logger = logging.getLogger(__name__)

NO_REQUIREMENTS_REASON = 'No specific eligibility criteria set for this course'


class EligibilityService:
    """Service for checking transcripts against course requirements."""

    def __init__(self, db: Session, checker: Optional[EligibilityChecker] = None):
        self.db = db
        self.repo = StoreRepository(db)
        self.checker = checker or EligibilityChecker()

    def check(
        self,
        transcript: Optional[Dict[str, Any]],
        requirements: Optional[Dict[str, Any]]
    ) -> EligibilityResult:
        return self.checker.evaluate(transcript, requirements)

    def check_for_course(
        self,
        course_id: str,
        student_id: Optional[str] = None,
        transcript: Optional[Dict[str, Any]] = None
    ) -> EligibilityResult:
        """
        Check against the course's stored requirements.

        A course without stored requirements is open to everyone.

        Raises:
            InvalidRequestException: Neither a transcript nor a student id was given.
            TranscriptNotFoundException: The student has no stored transcript.
        """
        transcript = self._resolve_transcript(student_id, transcript)

        requirement = self.repo.course_requirements.get_by_course(course_id)
        if requirement is None:
            logger.info(f"No requirements stored for course {course_id}, treating as general")
            return EligibilityResult(
                is_eligible=True,
                match_percentage=100,
                reasons=[NO_REQUIREMENTS_REASON],
                qualification_details=QualificationDetails(
                    overall_percentage_check=True,
                    required_subjects_check=True
                )
            )

        return self.checker.evaluate(transcript, requirement.to_dict())

    def _resolve_transcript(
        self,
        student_id: Optional[str],
        transcript: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if transcript is not None:
            return transcript
        if not student_id:
            raise InvalidRequestException("Student transcript is required")

        stored = self.repo.transcripts.get_by_student(student_id)
        if stored is None:
            raise TranscriptNotFoundException(f"No transcript found for student {student_id}")
        return stored.to_dict()

    @staticmethod
    def to_response(result: EligibilityResult) -> EligibilityResponse:
        return EligibilityResponse(success=True, **result.to_dict())
