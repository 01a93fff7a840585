"""Eligibility Module - course requirement checks against student transcripts."""
from core.eligibility.models import (
    Transcript, SubjectMark, CourseRequirements, RequiredSubject, AdditionalSubject,
    EligibilityResult, InsufficientMark, QualificationDetails, MalformedRecordError
)
from core.eligibility.checker import (
    EligibilityChecker, SubjectLookup, evaluate, GENERAL_COURSE_REASON
)

__all__ = [
    'EligibilityChecker', 'SubjectLookup', 'evaluate', 'GENERAL_COURSE_REASON',
    'Transcript', 'SubjectMark', 'CourseRequirements', 'RequiredSubject', 'AdditionalSubject',
    'EligibilityResult', 'InsufficientMark', 'QualificationDetails', 'MalformedRecordError'
]
