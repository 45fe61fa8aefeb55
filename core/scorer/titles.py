#!/usr/bin/env python3
"""
Position Relevance - Job title detection and JD/resume title overlap.
"""

from typing import List
import logging

from core.utils import TermMatcher

logger = logging.getLogger(__name__)

MATCH_SCORE = 100.0
NO_MATCH_SCORE = 50.0


def extract_job_titles(
    text: str,
    titles: List[str],
    context_patterns: List[str],
    contextual: bool = True
) -> List[str]:
    """
    Titles mentioned in text.

    In contextual mode, titles introduced by a phrase such as "as a" or
    "role as" are preferred; all mentions are returned only when none is
    introduced that way.
    """
    lower_text = text.lower()
    candidates = TermMatcher.find_all(lower_text, titles)

    if not contextual:
        return candidates

    contextual_titles = [
        title for title in candidates
        if any(f"{pattern} {title}" in lower_text for pattern in context_patterns)
    ]
    return contextual_titles or candidates


def calculate_title_score(jd_titles: List[str], resume_titles: List[str]) -> float:
    """Full marks when any JD title overlaps a resume title by substring, half otherwise."""
    for title in jd_titles:
        for resume_title in resume_titles:
            if title in resume_title or resume_title in title:
                return MATCH_SCORE
    return NO_MATCH_SCORE
