#!/usr/bin/env python3
"""
Keyword Matching - Share of job description keywords found in the resume.

A JD keyword counts as matched when some resume keyword contains it or is
contained by it, or (contextual mode) when the two are near-identical
spellings by Jaro-Winkler similarity.
"""

from rapidfuzz.distance import JaroWinkler
from typing import Iterable, List
import logging
import re

logger = logging.getLogger(__name__)


def extract_keywords(text: str, stop_words: Iterable[str]) -> List[str]:
    """
    Lower-case, strip punctuation, split on whitespace and drop stop words
    and words of two characters or fewer.
    """
    clean_text = re.sub(r"[^\w\s]", "", text.lower())
    stop = set(stop_words)
    return [word for word in clean_text.split() if word not in stop and len(word) > 2]


def is_fuzzy_match(a: str, b: str, threshold: float) -> bool:
    return JaroWinkler.similarity(a, b) > threshold


def calculate_keyword_match(
    jd_keywords: List[str],
    resume_keywords: List[str],
    contextual: bool = True,
    fuzzy_threshold: float = 0.85
) -> float:
    """
    Percentage of unique JD keywords matched by any resume keyword.

    Returns:
        Score in [0, 100]; 0.0 when the JD yields no keywords
    """
    unique_jd_keywords = list(dict.fromkeys(jd_keywords))
    if not unique_jd_keywords:
        logger.warning("Job description yielded no keywords")
        return 0.0

    resume_words = list(dict.fromkeys(resume_keywords))

    def matched(keyword: str) -> bool:
        for word in resume_words:
            if keyword in word or word in keyword:
                return True
            if contextual and is_fuzzy_match(word, keyword, fuzzy_threshold):
                return True
        return False

    matched_count = sum(1 for keyword in unique_jd_keywords if matched(keyword))
    logger.debug(f"Keyword match: {matched_count}/{len(unique_jd_keywords)} JD keywords")

    return matched_count / len(unique_jd_keywords) * 100
