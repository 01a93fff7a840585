#!/usr/bin/env python3
"""
Preference Matcher - Score a job posting against a student's job preferences.

Four independent criteria (industry, skills, work type, location), each
worth a fixed weight. A criterion is scored only when the student set that
preference and the job declares the attribute; unset preferences neither
add nor subtract. The score is always out of 100.
"""
from typing import Any, Dict, List, Optional, Union
import logging

from core.matcher.categories import (
    CategoryIndex, INDUSTRY_INDEX, SKILL_INDEX, WORK_TYPE_INDEX
)
from core.matcher.models import JobAttributes, JobPreferences, MatchResult

logger = logging.getLogger(__name__)

FLEXIBLE_LOCATION_TERMS = ('remote', 'hybrid', 'on-site')
MAX_SCORE = 100
CRITERIA_COUNT = 4


class PreferenceMatcher:
    """Calculate job/preference alignment with category-based fuzzy matching."""

    def __init__(
        self,
        criterion_weight: int = 25,
        match_threshold: int = 50,
        skill_index: CategoryIndex = SKILL_INDEX,
        industry_index: CategoryIndex = INDUSTRY_INDEX,
        work_type_index: CategoryIndex = WORK_TYPE_INDEX
    ):
        """
        Initialize the matcher.

        Args:
            criterion_weight: Points awarded per matched criterion
            match_threshold: Minimum score for a job to count as a match
        """
        if not 0 < criterion_weight <= MAX_SCORE // CRITERIA_COUNT:
            raise ValueError(f"criterion_weight must be in (0, {MAX_SCORE // CRITERIA_COUNT}], got {criterion_weight}")
        self.criterion_weight = criterion_weight
        self.match_threshold = match_threshold
        self.skill_index = skill_index
        self.industry_index = industry_index
        self.work_type_index = work_type_index

    def is_skill_related(self, student_skill: str, job_skill: str) -> bool:
        return self.skill_index.related(student_skill, job_skill)

    def is_industry_related(self, student_industry: str, job_industry: str) -> bool:
        return self.industry_index.related(student_industry, job_industry)

    def is_work_type_related(self, student_work_type: str, job_work_type: str) -> bool:
        return self.work_type_index.related(student_work_type, job_work_type)

    @staticmethod
    def _any_related(job_terms: List[str], preferred_terms: List[str], related) -> bool:
        return any(
            related(preferred, job_term)
            for job_term in job_terms
            for preferred in preferred_terms
        )

    def calculate_industry_match(self, job: JobAttributes, preferences: JobPreferences) -> Optional[bool]:
        """None when the criterion does not apply."""
        if not preferences.industries or not job.industries:
            return None
        return self._any_related(job.industries, preferences.industries, self.is_industry_related)

    def calculate_skills_match(self, job: JobAttributes, preferences: JobPreferences) -> Optional[bool]:
        if not preferences.skills or not job.skills:
            return None
        return self._any_related(job.skills, preferences.skills, self.is_skill_related)

    def calculate_work_type_match(self, job: JobAttributes, preferences: JobPreferences) -> Optional[bool]:
        if not preferences.work_type or not job.work_type:
            return None
        return self._any_related(job.work_type, preferences.work_type, self.is_work_type_related)

    def calculate_location_match(self, job: JobAttributes, preferences: JobPreferences) -> Optional[bool]:
        """
        Location matches when the preferred location appears in the job's
        location, when the student prefers remote, or when the student is
        flexible and the job names an arrangement.
        """
        if not preferences.location or not job.location:
            return None

        job_location = job.location.lower()
        preferred = preferences.location.lower()

        if preferred in job_location:
            return True
        if preferred == 'remote':
            return True
        if preferred == 'flexible':
            return any(term in job_location for term in FLEXIBLE_LOCATION_TERMS)
        return False

    def score_match(
        self,
        job: Union[JobAttributes, Dict[str, Any]],
        preferences: Union[JobPreferences, Dict[str, Any]]
    ) -> MatchResult:
        """
        Score a job against a student's preferences.

        Returns a non-match with score 0 for unusable input.
        """
        try:
            if not isinstance(job, JobAttributes):
                job = JobAttributes.from_dict(job)
            if not isinstance(preferences, JobPreferences):
                preferences = JobPreferences.from_dict(preferences)

            criteria = (
                ('industry', self.calculate_industry_match),
                ('skills', self.calculate_skills_match),
                ('work type', self.calculate_work_type_match),
                ('location', self.calculate_location_match),
            )

            score = 0
            reasons = []
            for name, check in criteria:
                if check(job, preferences):
                    score += self.criterion_weight
                    reasons.append(name)

            return MatchResult(
                is_match=score >= self.match_threshold,
                score=score,
                reasons=reasons
            )
        except Exception as e:
            logger.error(f"Error checking preference match: {e}", exc_info=True)
            return MatchResult.no_match()
