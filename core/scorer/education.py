#!/usr/bin/env python3
"""
Education - Degree and field-of-study detection.
"""

from typing import List
import logging

from core.scorer.models import EducationProfile
from core.utils import TermMatcher

logger = logging.getLogger(__name__)

# Characters inspected before / after a degree mention for its field
FIELD_LOOKBEHIND = 30
FIELD_LOOKAHEAD = 100

DEGREE_POINTS = 50.0
FIELD_POINTS = 50.0


def extract_education(
    text: str,
    degrees: List[str],
    fields: List[str],
    contextual: bool = True
) -> EducationProfile:
    """
    Detect degrees and fields of study.

    In contextual mode a field must appear near a degree mention; if degrees
    are found but none has a nearby field, any field mentioned anywhere is
    accepted instead.
    """
    lower_text = text.lower()

    if not contextual:
        found_degrees = TermMatcher.find_all(lower_text, degrees)
        found_fields = TermMatcher.find_all(lower_text, fields)
    else:
        found_degrees = []
        found_fields = []
        for degree in degrees:
            index = next(TermMatcher.positions(lower_text, degree), None)
            if index is None:
                continue
            found_degrees.append(degree)

            nearby = lower_text[max(0, index - FIELD_LOOKBEHIND):index + FIELD_LOOKAHEAD]
            for study_field in fields:
                if study_field in nearby:
                    found_fields.append(study_field)

        if found_degrees and not found_fields:
            found_fields = TermMatcher.find_all(lower_text, fields)

    found_degrees = list(dict.fromkeys(found_degrees))
    found_fields = list(dict.fromkeys(found_fields))

    return EducationProfile(
        has_degree=bool(found_degrees),
        degree_levels=found_degrees,
        relevant_field=bool(found_fields),
        fields_of_study=found_fields,
    )


def calculate_education_score(resume_education: EducationProfile) -> float:
    """50 points for a degree, 50 more when it is in a relevant field."""
    score = 0.0
    if resume_education.has_degree:
        score += DEGREE_POINTS
        if resume_education.relevant_field:
            score += FIELD_POINTS
    return score
