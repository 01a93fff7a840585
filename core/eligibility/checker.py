#!/usr/bin/env python3
"""
Eligibility Checker - decide whether a transcript satisfies a course's requirements.

Two top-level checks feed the result:
1. Overall percentage against the course minimum (skipped when the
   transcript carries no overall percentage).
2. Required subjects, matched fuzzily by name, each with a minimum mark.
   At least `minimum_required_subjects_needed` of them must be satisfied.

Additional subjects are counted as a bonus and never block eligibility.
match_percentage is the share of the two checks that passed (0, 50 or 100).
"""
import logging
import re
from typing import Dict, List, Optional

from core.eligibility.models import (
    CourseRequirements, EligibilityResult, InsufficientMark, MalformedRecordError,
    QualificationDetails, RequirementsInput, SubjectMark, Transcript, TranscriptInput
)

logger = logging.getLogger(__name__)

GENERAL_COURSE_REASON = 'No specific requirements - this is a general course. Everyone can apply!'

_WORD_SPLIT = re.compile(r'[\s\-_]')


def _fmt(value: float) -> str:
    """Render marks the way students enter them: 75 rather than 75.0."""
    return str(int(value)) if float(value).is_integer() else str(value)


def _words(name: str) -> List[str]:
    return [word for word in _WORD_SPLIT.split(name) if word]


def _is_plural(word: str) -> bool:
    return len(word) > 3 and word.endswith('s')


def _words_match(required_word: str, student_word: str) -> bool:
    if student_word in required_word or required_word in student_word:
        return True
    # "maths" vs "mathematics": compare without the trailing "s", but only
    # when both words carry one, so "physics" stays apart from "physical".
    if not (_is_plural(required_word) and _is_plural(student_word)):
        return False
    required_stem, student_stem = required_word[:-1], student_word[:-1]
    return student_stem in required_stem or required_stem in student_stem


class SubjectLookup:
    """
    Case-insensitive view of a transcript's subjects with fuzzy name matching.

    Exact names win. Otherwise names are split on whitespace, hyphens and
    underscores and the first student subject sharing a word (by substring,
    either direction, also after dropping a trailing "s" when both words
    end in one) is returned, so
    "Maths" finds "Mathematics" and "Mathematics" finds "Maths".
    """

    def __init__(self, subjects: List[SubjectMark]):
        self._subjects: Dict[str, SubjectMark] = {}
        for subject in subjects:
            name = subject.name.lower().strip()
            if name:
                self._subjects[name] = subject

    def __len__(self) -> int:
        return len(self._subjects)

    def find(self, subject_name: str) -> Optional[SubjectMark]:
        required = subject_name.lower().strip()
        if not required:
            return None

        if required in self._subjects:
            return self._subjects[required]

        required_words = _words(required)
        for student_subject, marks in self._subjects.items():
            student_words = _words(student_subject)
            if any(
                _words_match(required_word, student_word)
                for required_word in required_words
                for student_word in student_words
            ):
                return marks

        return None


class EligibilityChecker:
    """Stateless course eligibility evaluator."""

    def evaluate(
        self,
        transcript: TranscriptInput,
        requirements: RequirementsInput
    ) -> EligibilityResult:
        """
        Check a student's transcript against a course's requirements.

        Never raises for bad input: unreadable records produce an ineligible
        result whose reason explains the problem.
        """
        try:
            requirements = self._coerce_requirements(requirements)
        except MalformedRecordError as e:
            return self._malformed(e)

        if requirements is None or requirements.is_general:
            return self.general_course()

        try:
            transcript = self._coerce_transcript(transcript)
        except MalformedRecordError as e:
            return self._malformed(e)

        return self._evaluate(transcript, requirements)

    @staticmethod
    def general_course() -> EligibilityResult:
        return EligibilityResult(
            is_eligible=True,
            match_percentage=100,
            reasons=[GENERAL_COURSE_REASON],
            qualification_details=QualificationDetails(
                overall_percentage_check=True,
                required_subjects_check=True
            )
        )

    @staticmethod
    def _coerce_requirements(requirements: RequirementsInput) -> Optional[CourseRequirements]:
        if requirements is None or isinstance(requirements, CourseRequirements):
            return requirements
        return CourseRequirements.from_dict(requirements)

    @staticmethod
    def _coerce_transcript(transcript: TranscriptInput) -> Transcript:
        if isinstance(transcript, Transcript):
            return transcript
        if transcript is None:
            raise MalformedRecordError("No transcript provided")
        return Transcript.from_dict(transcript)

    @staticmethod
    def _malformed(error: MalformedRecordError) -> EligibilityResult:
        logger.warning(f"Treating malformed eligibility input as ineligible: {error}")
        return EligibilityResult(
            is_eligible=False,
            match_percentage=0,
            reasons=[f"Unable to check eligibility: {error}"]
        )

    def _evaluate(self, transcript: Transcript, requirements: CourseRequirements) -> EligibilityResult:
        result = EligibilityResult()
        details = result.qualification_details
        overall_ok = True

        # Check 1: overall percentage
        if transcript.overall_percentage is not None:
            required_percentage = requirements.minimum_overall_percentage
            if transcript.overall_percentage < required_percentage:
                overall_ok = False
                result.reasons.append(
                    f"Overall percentage {_fmt(transcript.overall_percentage)}% "
                    f"is below required {_fmt(required_percentage)}%"
                )
            else:
                details.overall_percentage_check = True

        lookup = SubjectLookup(transcript.subjects)

        # Check 2: required subjects
        matched = 0
        for required in requirements.required_subjects:
            student_marks = lookup.find(required.subject_name)
            if student_marks is None:
                result.missing_subjects.append(required.subject_name)
                result.reasons.append(f"Missing required subject: {required.subject_name}")
            elif student_marks.mark < required.minimum_mark:
                result.insufficient_marks.append(InsufficientMark(
                    subject=required.subject_name,
                    student_mark=student_marks.mark,
                    required_mark=required.minimum_mark
                ))
                result.reasons.append(
                    f"{required.subject_name}: Your mark ({_fmt(student_marks.mark)}%) "
                    f"is below required ({_fmt(required.minimum_mark)}%)"
                )
            else:
                matched += 1

        needed = requirements.subjects_needed
        if matched >= needed:
            details.required_subjects_check = True
        else:
            result.reasons.append(f"Met only {matched} of {needed} required subjects")

        # Check 3: additional subjects (bonus only)
        for additional in requirements.additional_subjects:
            student_marks = lookup.find(additional.subject_name)
            if student_marks is not None and student_marks.mark >= additional.preferred_minimum_mark:
                details.additional_subjects_matched += 1

        passed = int(details.overall_percentage_check) + int(details.required_subjects_check)
        result.match_percentage = round(passed / 2 * 100)
        result.is_eligible = overall_ok and details.required_subjects_check

        if result.is_eligible:
            result.reasons = self._confirmation(matched, requirements, details)

        return result

    @staticmethod
    def _confirmation(
        matched: int,
        requirements: CourseRequirements,
        details: QualificationDetails
    ) -> List[str]:
        total = len(requirements.required_subjects)
        if matched == total:
            reasons = ['✓ All required subjects present with sufficient marks']
        else:
            reasons = [f'✓ Met {matched} of {total} required subjects (minimum {requirements.subjects_needed})']
        if details.overall_percentage_check:
            reasons.append('✓ Overall percentage meets requirement')
        reasons.append('✓ You qualify for this course!')
        if details.additional_subjects_matched > 0:
            reasons.append(
                f'✓ Bonus: {details.additional_subjects_matched} additional subject(s) matched'
            )
        return reasons


_default_checker = EligibilityChecker()


def evaluate(transcript: TranscriptInput, requirements: RequirementsInput) -> EligibilityResult:
    """Module-level shortcut for EligibilityChecker().evaluate()."""
    return _default_checker.evaluate(transcript, requirements)
