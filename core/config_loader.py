import yaml
import os
import logging
from typing import List, Optional, Dict
from pydantic import BaseModel, Field

from core import vocabulary

logger = logging.getLogger(__name__)


class EmbeddingConfig(BaseModel):
    """Connection settings for the Ollama-compatible embedding endpoint."""
    base_url: str = "http://localhost:11434"
    model: str = "nomic-embed-text"
    timeout_seconds: float = 60.0
    max_attempts: int = 3  # Transient connection errors only


class ChronologyConfig(BaseModel):
    """
    Configuration for employment-history reconstruction.

    Thresholds and vocabulary tables used by the entry extractor,
    interval aggregator and progression analyzer.
    """
    gap_threshold_months: int = 3
    short_tenure_months: int = 12
    job_hopping_min_jobs: int = 3
    job_hopping_ratio: float = 0.5

    # Characters inspected on each side of an unstructured date match
    context_window: int = 100

    seniority_levels: Dict[str, int] = Field(default_factory=lambda: dict(vocabulary.SENIORITY_LEVELS))
    default_seniority: int = 2
    job_titles: List[str] = Field(default_factory=lambda: list(vocabulary.JOB_TITLES))
    education_markers: List[str] = Field(default_factory=lambda: list(vocabulary.EDUCATION_MARKERS))
    work_section_headings: List[str] = Field(default_factory=lambda: list(vocabulary.WORK_SECTION_HEADINGS))
    section_end_headings: List[str] = Field(default_factory=lambda: list(vocabulary.SECTION_END_HEADINGS))


class ScoreWeights(BaseModel):
    """Weights of each sub-score in the final ATS score (sum to 1.0)."""
    semantic: float = 0.35
    keyword: float = 0.20
    skills: float = 0.20
    education: float = 0.10
    experience: float = 0.05
    soft_skills: float = 0.05
    title: float = 0.05


class ScoringConfig(BaseModel):
    """
    Configuration for the ScoringService.

    contextual_analysis switches the extractors between plain substring
    matching and the context-aware variants (fuzzy keywords, skill phrases,
    inferred soft skills, contextual job titles).
    """
    contextual_analysis: bool = True
    fuzzy_threshold: float = 0.85
    weights: ScoreWeights = Field(default_factory=ScoreWeights)

    proficiency_window: int = 100
    proficiency_years_window: int = 150
    expert_threshold: int = 4
    beginner_threshold: int = -3
    max_evidence: int = 3

    # Credit per required skill by detected proficiency level
    level_credit: Dict[str, float] = Field(default_factory=lambda: {
        "expert": 1.0,
        "intermediate": 0.8,
        "beginner": 0.4,
    })
    undetermined_credit: float = 0.6


class VocabularyConfig(BaseModel):
    """Vocabulary tables for keyword, skill, education and title extraction."""
    stop_words: List[str] = Field(default_factory=lambda: list(vocabulary.STOP_WORDS))
    technical_skills: List[str] = Field(default_factory=lambda: list(vocabulary.TECHNICAL_SKILLS))
    skill_context_patterns: List[str] = Field(default_factory=lambda: list(vocabulary.SKILL_CONTEXT_PATTERNS))
    proficiency_markers: Dict[str, List[str]] = Field(default_factory=lambda: dict(vocabulary.PROFICIENCY_MARKERS))
    duration_markers: Dict[str, List[str]] = Field(default_factory=lambda: dict(vocabulary.DURATION_MARKERS))
    complexity_markers: Dict[str, List[str]] = Field(default_factory=lambda: dict(vocabulary.COMPLEXITY_MARKERS))
    role_markers: Dict[str, List[str]] = Field(default_factory=lambda: dict(vocabulary.ROLE_MARKERS))
    marker_weights: Dict[str, Dict[str, int]] = Field(default_factory=lambda: dict(vocabulary.MARKER_WEIGHTS))
    degrees: List[str] = Field(default_factory=lambda: list(vocabulary.DEGREES))
    fields_of_study: List[str] = Field(default_factory=lambda: list(vocabulary.FIELDS_OF_STUDY))
    soft_skills: List[str] = Field(default_factory=lambda: list(vocabulary.SOFT_SKILLS))
    soft_skill_cues: Dict[str, List[str]] = Field(default_factory=lambda: dict(vocabulary.SOFT_SKILL_CUES))
    job_titles: List[str] = Field(default_factory=lambda: list(vocabulary.JOB_TITLES))
    title_context_patterns: List[str] = Field(default_factory=lambda: list(vocabulary.TITLE_CONTEXT_PATTERNS))


class AppConfig(BaseModel):
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    chronology: ChronologyConfig = Field(default_factory=ChronologyConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    vocabulary: VocabularyConfig = Field(default_factory=VocabularyConfig)


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    data = {}

    if config_path and not os.path.exists(config_path):
        # Fall back to the config.yaml shipped at the repository root
        base_dir = os.path.dirname(os.path.abspath(__file__))
        fallback_path = os.path.join(base_dir, "..", "config.yaml")
        if os.path.exists(fallback_path):
            config_path = fallback_path
        else:
            logger.warning(f"Config file {config_path} not found, using defaults")
            config_path = None

    if config_path:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var overrides for the embedding endpoint
    env_embedding_url = os.environ.get("EMBEDDING_BASE_URL")
    if env_embedding_url:
        if data.get('embedding') is None:
            data['embedding'] = {}
        data['embedding']['base_url'] = env_embedding_url

    env_embedding_model = os.environ.get("EMBEDDING_MODEL")
    if env_embedding_model:
        if data.get('embedding') is None:
            data['embedding'] = {}
        data['embedding']['model'] = env_embedding_model

    return AppConfig(**data)
