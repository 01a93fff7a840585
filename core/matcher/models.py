#!/usr/bin/env python3
"""
Matcher Models - Data structures for job/preference matching.
"""

import math
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional


def _string_list(value: Any) -> List[str]:
    """Coerce a stored list field into clean strings; anything else is empty."""
    if not isinstance(value, (list, tuple, set)):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _optional_string(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _optional_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _first(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass
class JobAttributes:
    """Categorical attributes a company declares on a job posting."""
    industries: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    work_type: List[str] = field(default_factory=list)
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "JobAttributes":
        if not isinstance(data, dict):
            return cls()
        return cls(
            industries=_string_list(data.get('industries')),
            skills=_string_list(data.get('skills')),
            work_type=_string_list(_first(data, 'work_type', 'workType')),
            location=_optional_string(data.get('location')),
        )


@dataclass
class JobPreferences:
    """A student's stored job preferences. Empty fields mean "no opinion"."""
    industries: List[str] = field(default_factory=list)
    job_types: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    work_type: List[str] = field(default_factory=list)
    location: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "JobPreferences":
        if not isinstance(data, dict):
            return cls()
        return cls(
            industries=_string_list(data.get('industries')),
            job_types=_string_list(_first(data, 'job_types', 'jobTypes')),
            skills=_string_list(data.get('skills')),
            work_type=_string_list(_first(data, 'work_type', 'workType')),
            location=_optional_string(data.get('location')),
            salary_min=_optional_number(_first(data, 'salary_min', 'salaryMin')),
            salary_max=_optional_number(_first(data, 'salary_max', 'salaryMax')),
        )

    def has_any(self) -> bool:
        """True when at least one preference field is actually filled in."""
        return bool(
            self.industries or self.job_types or self.skills or self.work_type
            or self.location or self.salary_min or self.salary_max
        )


@dataclass
class MatchResult:
    """Outcome of scoring one job against one student's preferences."""
    is_match: bool
    score: int
    reasons: List[str] = field(default_factory=list)

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(is_match=False, score=0, reasons=[])


@dataclass
class JobPostingDTO:
    """Job data extracted from the store for use outside the session."""
    id: str
    title: str
    company: str
    attributes: JobAttributes = field(default_factory=JobAttributes)


@dataclass
class StudentPreferences:
    student_id: str
    preferences: JobPreferences = field(default_factory=JobPreferences)
