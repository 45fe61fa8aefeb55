#!/usr/bin/env python3
"""
Soft Skills - Direct mentions plus skills inferred from behavioural cues.

"Led a team of five engineers" yields leadership and teamwork even when
neither word appears; cues are matched as word stems.
"""

from typing import Dict, List, Tuple
import logging

from core.utils import TermMatcher

logger = logging.getLogger(__name__)


def extract_soft_skills(
    text: str,
    soft_skills: List[str],
    cues: Dict[str, List[str]],
    contextual: bool = True
) -> List[str]:
    lower_text = text.lower()
    found = TermMatcher.find_all(lower_text, soft_skills)

    if contextual:
        for skill, skill_cues in cues.items():
            if skill in found:
                continue
            if any(TermMatcher.contains(lower_text, cue, whole_word=False) for cue in skill_cues):
                found.append(skill)

    return found


def calculate_soft_skills_score(jd_soft_skills: List[str], resume_soft_skills: List[str]) -> Tuple[float, List[str], List[str]]:
    """
    Percentage of JD soft skills found in the resume.

    Returns:
        (score, matched, missing); score is 100 when the JD names none
    """
    matched = [s for s in jd_soft_skills if s in resume_soft_skills]
    missing = [s for s in jd_soft_skills if s not in resume_soft_skills]

    if not jd_soft_skills:
        return 100.0, matched, missing

    return len(matched) / len(jd_soft_skills) * 100, matched, missing
