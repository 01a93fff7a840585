#!/usr/bin/env python3
"""
Eligibility endpoints - check transcripts against course requirements.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.eligibility_service import EligibilityService
from ..models.requests import EligibilityCheckRequest, CourseEligibilityRequest
from ..models.responses import EligibilityResponse

router = APIRouter(prefix="/api", tags=["eligibility"])


def get_eligibility_service(db: Session = Depends(get_db)) -> EligibilityService:
    """Dependency to get eligibility service."""
    return EligibilityService(db)


@router.post("/eligibility/check", response_model=EligibilityResponse)
def check_eligibility(
    request: EligibilityCheckRequest,
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Check a transcript against requirements supplied in the request.

    Malformed transcripts or requirements produce an ineligible result,
    not an error.
    """
    result = service.check(request.transcript, request.requirements)
    return service.to_response(result)


@router.post("/courses/{course_id}/check-eligibility", response_model=EligibilityResponse)
def check_course_eligibility(
    course_id: str,
    request: CourseEligibilityRequest,
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Check a student against a course's stored requirements.

    Pass either `transcript` or `student_id` (stored transcript).
    """
    result = service.check_for_course(
        course_id,
        student_id=request.student_id,
        transcript=request.transcript
    )
    return service.to_response(result)
