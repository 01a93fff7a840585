#!/usr/bin/env python3
"""
Request models for API endpoints.

Transcripts, requirements, jobs and preferences are passed through as
dictionaries; the core parsers accept camelCase or snake_case keys and
decide what is malformed.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class EligibilityCheckRequest(BaseModel):
    """Evaluate a transcript against ad-hoc course requirements."""
    transcript: Optional[Dict[str, Any]] = Field(None, description="Student transcript")
    requirements: Optional[Dict[str, Any]] = Field(
        None, description="Course requirements; omitted means a general course"
    )


class CourseEligibilityRequest(BaseModel):
    """Evaluate against a course's stored requirements."""
    student_id: Optional[str] = Field(None, description="Use the student's stored transcript")
    transcript: Optional[Dict[str, Any]] = Field(None, description="Or pass a transcript directly")


class MatchScoreRequest(BaseModel):
    job: Dict[str, Any] = Field(..., description="Job attributes: industries, skills, work_type, location")
    preferences: Dict[str, Any] = Field(..., description="Student job preferences")


class IntervalUpdate(BaseModel):
    interval_seconds: float = Field(..., gt=0, description="New scheduler period in seconds")
