#!/usr/bin/env python3
"""
Scoring Module - ATS resume / job description scoring.

Public API:
- ScoringService: Main scoring service orchestrator
- ATSScoreResult: Dataclass for the complete analysis result

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures (ATSScoreResult, SkillProficiency, EducationProfile)
- similarity.py: Embedding cosine similarity
- keywords.py: Keyword extraction and fuzzy keyword match
- skills.py: Technical skills and proficiency inference
- education.py: Degree and field-of-study detection
- experience.py: Stated years of experience
- soft_skills.py: Direct and inferred soft skills
- titles.py: Job title relevance
- service.py: ScoringService orchestrator
"""

from core.scorer.models import ATSScoreResult, SkillProficiency, EducationProfile
from core.scorer.service import ScoringService

__all__ = ['ScoringService', 'ATSScoreResult', 'SkillProficiency', 'EducationProfile']
