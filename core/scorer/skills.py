#!/usr/bin/env python3
"""
Technical Skills - Skill extraction, proficiency inference and weighted match.

Proficiency is inferred from the text surrounding every mention of a skill:
marker phrases (proficiency, duration, complexity, role) adjust a contextual
score, as do certifications, hands-on implementation, teaching others and
nearby "N years" claims in the work-experience section. The score maps to a
level: expert at or above expert_threshold, beginner at or below
beginner_threshold, intermediate otherwise.
"""

from typing import Dict, List, Optional
import logging
import re

from core.config_loader import ScoringConfig, VocabularyConfig
from core.scorer.models import SkillProficiency
from core.utils import TermMatcher

logger = logging.getLogger(__name__)

YEARS_PATTERN = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)

IMPLEMENTATION_CUES = ("implement", "develop", "built", "created")
TEACHING_CUES = ("teach", "mentor", "train", "coach")

CERTIFICATION_BONUS = 3
IMPLEMENTATION_BONUS = 1
TEACHING_BONUS = 3


def years_bonus(years: int) -> int:
    if years >= 5:
        return 3
    if years >= 3:
        return 2
    if years >= 1:
        return 1
    return 0


class SkillAnalyzer:
    """
    Extract technical skills and assess proficiency.

    Args:
        scoring: Scoring configuration (window sizes, thresholds, credits)
        vocabulary: Vocabulary tables (skills, marker tables and weights)
    """

    def __init__(
        self,
        scoring: Optional[ScoringConfig] = None,
        vocabulary: Optional[VocabularyConfig] = None
    ):
        self.scoring = scoring or ScoringConfig()
        self.vocabulary = vocabulary or VocabularyConfig()

    def extract_technical_skills(self, text: str) -> List[str]:
        """Vocabulary skills mentioned in text, in vocabulary order."""
        lower_text = text.lower()
        skills = []
        for skill in dict.fromkeys(self.vocabulary.technical_skills):
            if TermMatcher.contains(lower_text, skill):
                skills.append(skill)
            elif self.scoring.contextual_analysis and self._has_context_phrase(lower_text, skill):
                skills.append(skill)
        return skills

    def _has_context_phrase(self, lower_text: str, skill: str) -> bool:
        return any(
            TermMatcher.contains(lower_text, pattern.format(skill=skill))
            for pattern in self.vocabulary.skill_context_patterns
        )

    def _marker_tables(self) -> Dict[str, Dict[str, List[str]]]:
        return {
            "proficiency": self.vocabulary.proficiency_markers,
            "duration": self.vocabulary.duration_markers,
            "complexity": self.vocabulary.complexity_markers,
            "role": self.vocabulary.role_markers,
        }

    def _score_context(self, context: str, skill: str, evidence: List[str]) -> int:
        score = 0
        weights = self.vocabulary.marker_weights

        for category, table in self._marker_tables().items():
            for level, markers in table.items():
                for marker in markers:
                    if TermMatcher.contains(context, marker, whole_word=False):
                        evidence.append(_describe_marker(category, level, marker, skill))
                        score += weights.get(category, {}).get(level, 0)

        if "certif" in context:
            evidence.append(f"Certification mentioned for {skill}")
            score += CERTIFICATION_BONUS

        if any(cue in context for cue in IMPLEMENTATION_CUES):
            evidence.append(f"Implementation experience with {skill}")
            score += IMPLEMENTATION_BONUS

        if any(cue in context for cue in TEACHING_CUES):
            evidence.append(f"Taught or mentored others in {skill}")
            score += TEACHING_BONUS

        return score

    def _score_work_history_years(self, work_section: str, skill: str, evidence: List[str]) -> int:
        lower_section = work_section.lower()
        skill_index = next(TermMatcher.positions(lower_section, skill), None)
        if skill_index is None:
            return 0

        score = 0
        for match in YEARS_PATTERN.finditer(lower_section):
            if abs(match.start() - skill_index) < self.scoring.proficiency_years_window:
                years = int(match.group(1))
                evidence.append(
                    f"Approximately {years} years of experience with {skill} based on work history"
                )
                score += years_bonus(years)
        return score

    def assess_skill(self, text: str, skill: str, work_section: Optional[str] = None) -> Optional[SkillProficiency]:
        """
        Proficiency for one skill, or None when the skill is not mentioned.
        """
        lower_text = text.lower()
        positions = list(TermMatcher.positions(lower_text, skill))
        if not positions:
            return None

        evidence: List[str] = []
        score = 0
        for index in positions:
            context = TermMatcher.window(
                lower_text, index, index + len(skill), self.scoring.proficiency_window
            )
            score += self._score_context(context, skill, evidence)

        if work_section:
            score += self._score_work_history_years(work_section, skill, evidence)

        if score >= self.scoring.expert_threshold:
            level = "expert"
        elif score <= self.scoring.beginner_threshold:
            level = "beginner"
        else:
            level = "intermediate"

        if not evidence:
            evidence.append(f"{skill} is mentioned without strong indicators of proficiency level")

        return SkillProficiency(
            level=level,
            evidence=evidence[:self.scoring.max_evidence],
            score=score,
        )

    def detect_skill_proficiency_levels(
        self,
        text: str,
        skills: List[str],
        work_section: Optional[str] = None
    ) -> Dict[str, SkillProficiency]:
        """Map each mentioned skill to its inferred proficiency."""
        proficiencies = {}
        for skill in skills:
            proficiency = self.assess_skill(text, skill, work_section)
            if proficiency is not None:
                proficiencies[skill] = proficiency
                logger.debug(f"Skill '{skill}': {proficiency.level} (score {proficiency.score})")
        return proficiencies

    def calculate_skill_score(
        self,
        jd_skills: List[str],
        resume_skills: List[str],
        proficiencies: Dict[str, SkillProficiency]
    ) -> float:
        """
        Proficiency-weighted share of JD skills present in the resume.

        Each matched skill earns its level's credit (undetermined_credit when
        no level was inferred); missing skills earn nothing.

        Returns:
            Score in [0, 100]; 0.0 when the JD names no skills
        """
        if not jd_skills:
            return 0.0

        earned = 0.0
        for skill in jd_skills:
            if skill not in resume_skills:
                continue
            proficiency = proficiencies.get(skill)
            if proficiency is None:
                earned += self.scoring.undetermined_credit
            else:
                earned += self.scoring.level_credit.get(proficiency.level, self.scoring.undetermined_credit)

        return earned / len(jd_skills) * 100


def _describe_marker(category: str, level: str, marker: str, skill: str) -> str:
    if category == "proficiency":
        return f'Found "{marker}" near {skill} mention, indicating {level} level'
    if category == "duration":
        return f'Found "{marker}" indicating {level} experience with {skill}'
    if category == "complexity":
        return f'Work with {skill} described as "{marker}" indicating {level} complexity'
    return f'"{marker}" indicates {level} role with {skill}'
