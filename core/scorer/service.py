#!/usr/bin/env python3
"""
Scoring Service - ATS match score of a resume against a job description.

Combines seven weighted sub-scores:
- Semantic similarity of document embeddings
- Keyword match
- Technical skills, weighted by inferred proficiency
- Education
- Stated years of experience
- Soft skills
- Position (job title) relevance

The employment chronology is reconstructed alongside and reported as
narrative insight; it does not contribute to the numeric score.
"""

from typing import Optional
import logging

from core.config_loader import ScoringConfig, VocabularyConfig
from core.exceptions import EmbeddingServiceError, InputValidationError
from core.llm.interfaces import EmbeddingProvider
from etl.resume.chronology import ChronologyAnalyzer

from core.scorer.models import ATSScoreResult
from core.scorer import education, experience, keywords, similarity, soft_skills, titles
from core.scorer.skills import SkillAnalyzer

logger = logging.getLogger(__name__)


def validate_input(text: Optional[str], label: str) -> str:
    """Reject missing or whitespace-only documents."""
    if not text or not text.strip():
        raise InputValidationError(f"{label} is empty. Please provide a valid {label.lower()}.")
    return text


class ScoringService:
    """
    Service computing the ATS score for one job description / resume pair.

    Embeddings are fetched sequentially (resume first, then job description);
    an embedding failure aborts the analysis with no partial result.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        config: Optional[ScoringConfig] = None,
        vocabulary: Optional[VocabularyConfig] = None,
        chronology: Optional[ChronologyAnalyzer] = None
    ):
        self.embedding_provider = embedding_provider
        self.config = config or ScoringConfig()
        self.vocabulary = vocabulary or VocabularyConfig()
        self.chronology = chronology or ChronologyAnalyzer()
        self.skill_analyzer = SkillAnalyzer(self.config, self.vocabulary)

    def calculate_semantic_similarity(self, job_description: str, resume: str) -> float:
        resume_embedding = self.embedding_provider.generate_embedding(resume)
        jd_embedding = self.embedding_provider.generate_embedding(job_description)

        try:
            return similarity.calculate_semantic_similarity(resume_embedding, jd_embedding)
        except ValueError as e:
            raise EmbeddingServiceError(f"Unusable embeddings: {e}") from e

    def compute_ats_score(self, job_description: str, resume: str) -> ATSScoreResult:
        """Run the full analysis.

        Raises:
            InputValidationError: If either document is empty
            EmbeddingServiceError: If embeddings cannot be obtained
        """
        validate_input(job_description, "Job Description")
        validate_input(resume, "Resume")

        contextual = self.config.contextual_analysis
        vocab = self.vocabulary
        result = ATSScoreResult()

        logger.info("Calculating semantic similarity...")
        result.semantic_similarity = self.calculate_semantic_similarity(job_description, resume)

        logger.info("Analyzing keyword matches...")
        result.keyword_match = keywords.calculate_keyword_match(
            keywords.extract_keywords(job_description, vocab.stop_words),
            keywords.extract_keywords(resume, vocab.stop_words),
            contextual=contextual,
            fuzzy_threshold=self.config.fuzzy_threshold,
        )

        logger.info("Identifying technical skills match...")
        result.jd_skills = self.skill_analyzer.extract_technical_skills(job_description)
        result.resume_skills = self.skill_analyzer.extract_technical_skills(resume)
        result.matched_skills = [s for s in result.jd_skills if s in result.resume_skills]
        result.missing_skills = [s for s in result.jd_skills if s not in result.resume_skills]

        logger.info("Analyzing skill proficiency levels...")
        work_section = self.chronology.extractor.find_work_section(resume)
        result.skill_proficiencies = self.skill_analyzer.detect_skill_proficiency_levels(
            resume, result.resume_skills, work_section
        )
        result.skills_match = self.skill_analyzer.calculate_skill_score(
            result.jd_skills, result.resume_skills, result.skill_proficiencies
        )

        logger.info("Evaluating education requirements...")
        result.jd_education = education.extract_education(
            job_description, vocab.degrees, vocab.fields_of_study, contextual
        )
        result.resume_education = education.extract_education(
            resume, vocab.degrees, vocab.fields_of_study, contextual
        )
        result.education_score = education.calculate_education_score(result.resume_education)

        logger.info("Comparing experience levels...")
        result.required_experience_years = experience.extract_experience_years(job_description, contextual)
        result.candidate_experience_years = experience.extract_experience_years(resume, contextual)
        result.experience_score = experience.calculate_experience_score(
            result.required_experience_years, result.candidate_experience_years
        )

        logger.info("Analyzing employment history and career progression...")
        result.chronology = self.chronology.analyze(resume)

        logger.info("Assessing soft skills match...")
        result.jd_soft_skills = soft_skills.extract_soft_skills(
            job_description, vocab.soft_skills, vocab.soft_skill_cues, contextual
        )
        resume_soft_skills = soft_skills.extract_soft_skills(
            resume, vocab.soft_skills, vocab.soft_skill_cues, contextual
        )
        (
            result.soft_skills_score,
            result.matched_soft_skills,
            result.missing_soft_skills,
        ) = soft_skills.calculate_soft_skills_score(result.jd_soft_skills, resume_soft_skills)

        logger.info("Evaluating position relevance...")
        result.jd_titles = titles.extract_job_titles(
            job_description, vocab.job_titles, vocab.title_context_patterns, contextual
        )
        result.resume_titles = titles.extract_job_titles(
            resume, vocab.job_titles, vocab.title_context_patterns, contextual
        )
        result.title_score = titles.calculate_title_score(result.jd_titles, result.resume_titles)

        result.final_score = self.calculate_final_score(result)
        logger.info(f"ATS score: {result.final_score:.2f}")

        return result

    def calculate_final_score(self, result: ATSScoreResult) -> float:
        """Weighted sum of the sub-scores, rounded to two decimals."""
        w = self.config.weights
        weighted = (
            result.semantic_similarity * w.semantic +
            result.keyword_match * w.keyword +
            result.skills_match * w.skills +
            result.education_score * w.education +
            result.experience_score * w.experience +
            result.soft_skills_score * w.soft_skills +
            result.title_score * w.title
        )
        return round(weighted, 2)
