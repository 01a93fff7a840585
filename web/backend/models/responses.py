#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class InsufficientMarkModel(BaseModel):
    subject: str
    student_mark: float
    required_mark: float


class QualificationDetailsModel(BaseModel):
    overall_percentage_check: bool
    required_subjects_check: bool
    additional_subjects_matched: int


class EligibilityResponse(BaseModel):
    """Eligibility of one transcript for one course."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "is_eligible": False,
                "match_percentage": 50,
                "missing_subjects": [],
                "insufficient_marks": [
                    {"subject": "Mathematics", "student_mark": 55, "required_mark": 60}
                ],
                "reasons": ["Mathematics: Your mark (55%) is below required (60%)",
                            "Met only 1 of 2 required subjects"],
                "qualification_details": {
                    "overall_percentage_check": True,
                    "required_subjects_check": False,
                    "additional_subjects_matched": 0
                }
            }
        }
    )

    success: bool = True
    is_eligible: bool
    match_percentage: int = Field(ge=0, le=100)
    missing_subjects: List[str]
    insufficient_marks: List[InsufficientMarkModel]
    reasons: List[str]
    qualification_details: QualificationDetailsModel


class MatchScoreResponse(BaseModel):
    success: bool = True
    is_match: bool
    score: int = Field(ge=0, le=100)
    reasons: List[str]


class NotificationItem(BaseModel):
    id: str
    type: str
    title: str
    message: str
    related_id: Optional[str] = None
    action_url: Optional[str] = None
    read: bool
    read_at: Optional[str] = None
    created_at: Optional[str] = None


class NotificationsResponse(BaseModel):
    success: bool = True
    count: int
    total: int
    unread_count: int
    notifications: List[NotificationItem]


class UnreadCountResponse(BaseModel):
    success: bool = True
    unread_count: int


class NotificationActionResponse(BaseModel):
    success: bool = True
    message: str
    updated: int = 0


class SchedulerStatus(BaseModel):
    name: str
    is_running: bool
    interval_seconds: float
    last_run_at: Optional[str] = None
    next_run_at: Optional[str] = None
    run_count: int = 0
    last_error: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


class SchedulersResponse(BaseModel):
    success: bool = True
    schedulers: List[SchedulerStatus]


class SchedulerRunResponse(BaseModel):
    success: bool = True
    scheduler: SchedulerStatus
    result: Optional[Dict[str, Any]] = None
