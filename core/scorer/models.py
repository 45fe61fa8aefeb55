#!/usr/bin/env python3
"""
Scoring Models - Data structures for ATS scoring results.
"""

from typing import List, Dict
from dataclasses import dataclass, field

from etl.resume.models import ChronologyReport


@dataclass
class SkillProficiency:
    """Inferred proficiency for one technical skill, with supporting evidence."""
    level: str = "intermediate"
    evidence: List[str] = field(default_factory=list)
    score: int = 0


@dataclass
class EducationProfile:
    """Degrees and fields of study mentioned in a document."""
    has_degree: bool = False
    degree_levels: List[str] = field(default_factory=list)
    relevant_field: bool = False
    fields_of_study: List[str] = field(default_factory=list)


@dataclass
class ATSScoreResult:
    """Complete ATS analysis: weighted sub-scores plus the evidence behind them."""
    semantic_similarity: float = 0.0
    keyword_match: float = 0.0
    skills_match: float = 0.0
    education_score: float = 0.0
    experience_score: float = 0.0
    soft_skills_score: float = 0.0
    title_score: float = 0.0
    final_score: float = 0.0

    jd_skills: List[str] = field(default_factory=list)
    resume_skills: List[str] = field(default_factory=list)
    matched_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    skill_proficiencies: Dict[str, SkillProficiency] = field(default_factory=dict)

    jd_education: EducationProfile = field(default_factory=EducationProfile)
    resume_education: EducationProfile = field(default_factory=EducationProfile)

    required_experience_years: int = 0
    candidate_experience_years: int = 0

    jd_soft_skills: List[str] = field(default_factory=list)
    matched_soft_skills: List[str] = field(default_factory=list)
    missing_soft_skills: List[str] = field(default_factory=list)

    jd_titles: List[str] = field(default_factory=list)
    resume_titles: List[str] = field(default_factory=list)

    chronology: ChronologyReport = field(default_factory=ChronologyReport)

    def skills_at_level(self, level: str, skills: List[str] = None) -> List[str]:
        """Skills (resume skills by default) whose detected proficiency is level."""
        pool = self.resume_skills if skills is None else skills
        return [
            s for s in pool
            if s in self.skill_proficiencies and self.skill_proficiencies[s].level == level
        ]
