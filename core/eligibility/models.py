#!/usr/bin/env python3
"""
Eligibility Models - transcripts, course requirements and evaluation results.

Records arrive as plain dictionaries from the document store or the HTTP
layer, written in either camelCase (legacy documents) or snake_case.
Parsing raises MalformedRecordError for anything that cannot be read.
"""

import math
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional, Union


class MalformedRecordError(ValueError):
    """Raised when a transcript or requirement record cannot be parsed."""
    pass


def _first(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _to_number(value: Any, field_name: str) -> float:
    number = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            pass
    if number is None or not math.isfinite(number):
        raise MalformedRecordError(f"{field_name} must be a number, got {value!r}")
    return number


def _to_percentage(value: Any, field_name: str) -> float:
    number = _to_number(value, field_name)
    if not 0 <= number <= 100:
        raise MalformedRecordError(f"{field_name} must be between 0 and 100, got {value!r}")
    return number


def _to_count(value: Any, field_name: str) -> int:
    number = _to_number(value, field_name)
    if number < 0 or not number.is_integer():
        raise MalformedRecordError(f"{field_name} must be a whole number of at least 0, got {value!r}")
    return int(number)


def _to_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise MalformedRecordError(f"{field_name} must be a list")
    return list(value)


@dataclass
class SubjectMark:
    """One subject on a student's transcript."""
    name: str
    mark: float = 0.0
    grade: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "SubjectMark":
        if not isinstance(data, dict):
            raise MalformedRecordError(f"Transcript subject must be an object, got {data!r}")
        name = _first(data, 'name', 'subjectName', 'subject_name', 'subject') or ''
        if not isinstance(name, str):
            raise MalformedRecordError(f"Subject name must be text, got {name!r}")
        # A zero or missing mark falls through to percentage, then to 0.
        raw_mark = data.get('mark') or data.get('percentage') or 0
        grade = data.get('grade')
        return cls(
            name=name,
            mark=_to_percentage(raw_mark, f"mark for {name!r}"),
            grade=grade if isinstance(grade, str) else None
        )


@dataclass
class Transcript:
    """A student's academic transcript."""
    overall_percentage: Optional[float] = None
    subjects: List[SubjectMark] = field(default_factory=list)
    student_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Transcript":
        if not isinstance(data, dict):
            raise MalformedRecordError("Transcript must be an object")
        overall = _first(data, 'overall_percentage', 'overallPercentage')
        subjects = _to_list(data.get('subjects'), 'subjects')
        return cls(
            overall_percentage=None if overall is None else _to_percentage(overall, 'overall percentage'),
            subjects=[SubjectMark.from_dict(subject) for subject in subjects],
            student_id=_first(data, 'student_id', 'studentId')
        )


@dataclass
class RequiredSubject:
    subject_name: str
    minimum_mark: float = 0.0


@dataclass
class AdditionalSubject:
    subject_name: str
    preferred_minimum_mark: float = 0.0


def _parse_subject_entry(entry: Any, mark_keys: tuple, label: str) -> tuple:
    """Entries are either a bare subject name or an object with a name and a mark."""
    if isinstance(entry, str):
        return entry, 0.0
    if not isinstance(entry, dict):
        raise MalformedRecordError(f"{label} entry must be text or an object, got {entry!r}")
    name = _first(entry, 'subject_name', 'subjectName', 'name')
    if not isinstance(name, str) or not name.strip():
        raise MalformedRecordError(f"{label} entry is missing a subject name")
    mark = _first(entry, *mark_keys)
    return name, 0.0 if not mark else _to_percentage(mark, f"{label} mark for {name!r}")


@dataclass
class CourseRequirements:
    """Institution-defined admission requirements for one course."""
    required_subjects: List[RequiredSubject] = field(default_factory=list)
    additional_subjects: List[AdditionalSubject] = field(default_factory=list)
    minimum_overall_percentage: float = 0.0
    minimum_required_subjects_needed: Optional[int] = None
    course_id: Optional[str] = None

    @property
    def is_general(self) -> bool:
        """A course without required subjects is open to everyone."""
        return not self.required_subjects

    @property
    def subjects_needed(self) -> int:
        return self.minimum_required_subjects_needed or len(self.required_subjects)

    @classmethod
    def from_dict(cls, data: Any) -> "CourseRequirements":
        if not isinstance(data, dict):
            raise MalformedRecordError("Course requirements must be an object")

        required = []
        for entry in _to_list(_first(data, 'required_subjects', 'requiredSubjects'), 'required subjects'):
            name, mark = _parse_subject_entry(entry, ('minimum_mark', 'minimumMark'), 'Required subject')
            required.append(RequiredSubject(subject_name=name, minimum_mark=mark))

        additional = []
        for entry in _to_list(_first(data, 'additional_subjects', 'additionalSubjects'), 'additional subjects'):
            name, mark = _parse_subject_entry(
                entry, ('preferred_minimum_mark', 'preferredMinimumMark'), 'Additional subject'
            )
            additional.append(AdditionalSubject(subject_name=name, preferred_minimum_mark=mark))

        minimum_overall = _first(data, 'minimum_overall_percentage', 'minimumOverallPercentage')
        needed = _first(data, 'minimum_required_subjects_needed', 'minimumRequiredSubjectsNeeded')

        return cls(
            required_subjects=required,
            additional_subjects=additional,
            minimum_overall_percentage=0.0 if not minimum_overall else _to_percentage(
                minimum_overall, 'minimum overall percentage'
            ),
            minimum_required_subjects_needed=None if not needed else _to_count(
                needed, 'minimum required subjects needed'
            ),
            course_id=_first(data, 'course_id', 'courseId')
        )


@dataclass
class InsufficientMark:
    subject: str
    student_mark: float
    required_mark: float


@dataclass
class QualificationDetails:
    overall_percentage_check: bool = False
    required_subjects_check: bool = False
    additional_subjects_matched: int = 0


@dataclass
class EligibilityResult:
    """Outcome of checking one transcript against one course's requirements."""
    is_eligible: bool = True
    match_percentage: int = 0
    missing_subjects: List[str] = field(default_factory=list)
    insufficient_marks: List[InsufficientMark] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)
    qualification_details: QualificationDetails = field(default_factory=QualificationDetails)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


TranscriptInput = Union[Transcript, Dict[str, Any], None]
RequirementsInput = Union[CourseRequirements, Dict[str, Any], None]
