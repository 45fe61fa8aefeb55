#!/usr/bin/env python3
"""
Experience Years - Stated years of experience and requirement match.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Tried in order; the first pattern that matches anywhere wins
EXPERIENCE_PATTERNS = [
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s+(?:of)?\s*(?:experience|work)", re.IGNORECASE),
    re.compile(r"experienced?.+?(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"worked for\s+(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s+in\s+(?:the\s+)?(?:field|industry)", re.IGNORECASE),
]

SIMPLE_EXPERIENCE_PATTERN = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)


def extract_experience_years(text: str, contextual: bool = True) -> int:
    """First stated number of years of experience, 0 when none is stated."""
    patterns = EXPERIENCE_PATTERNS if contextual else [SIMPLE_EXPERIENCE_PATTERN]
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return 0


def calculate_experience_score(required_years: int, candidate_years: int) -> float:
    """
    100 when the requirement is met or absent, proportional when the
    candidate states fewer years, 0 when the candidate states none.
    """
    if required_years <= 0:
        return 100.0
    if candidate_years <= 0:
        return 0.0
    if candidate_years >= required_years:
        return 100.0
    return candidate_years / required_years * 100
