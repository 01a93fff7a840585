"""Matcher Module - job/preference matching with category-based fuzzy equivalence."""
from core.matcher.models import (
    JobAttributes, JobPreferences, MatchResult, JobPostingDTO, StudentPreferences
)
from core.matcher.categories import (
    CategoryIndex, SKILL_CATEGORIES, INDUSTRY_CATEGORIES, WORK_TYPE_ALTERNATIVES,
    is_skill_related, is_industry_related, is_work_type_related
)
from core.matcher.preference_matcher import PreferenceMatcher

__all__ = [
    'PreferenceMatcher', 'CategoryIndex',
    'JobAttributes', 'JobPreferences', 'MatchResult', 'JobPostingDTO', 'StudentPreferences',
    'SKILL_CATEGORIES', 'INDUSTRY_CATEGORIES', 'WORK_TYPE_ALTERNATIVES',
    'is_skill_related', 'is_industry_related', 'is_work_type_related'
]
