from dataclasses import dataclass

from core.config_loader import AppConfig, EmbeddingConfig
from core.llm.interfaces import EmbeddingProvider
from core.llm.ollama_service import OllamaEmbeddingService
from core.scorer.service import ScoringService
from etl.resume.chronology import ChronologyAnalyzer
from etl.resume.parser import ResumeParser


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    This eliminates duplicate wiring code and provides a single source
    of truth for service instantiation.
    """
    config: AppConfig
    embedding_service: EmbeddingProvider
    chronology_analyzer: ChronologyAnalyzer
    scoring_service: ScoringService
    document_parser: ResumeParser

    @classmethod
    def build(cls, config: AppConfig, embedding_service: EmbeddingProvider = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            embedding_service: Optional provider overriding the configured Ollama endpoint

        Returns:
            Fully wired AppContext instance
        """
        if embedding_service is None:
            embedding_service = cls._build_embedding_service(config.embedding)

        chronology_analyzer = ChronologyAnalyzer(config.chronology)

        scoring_service = ScoringService(
            embedding_provider=embedding_service,
            config=config.scoring,
            vocabulary=config.vocabulary,
            chronology=chronology_analyzer,
        )

        return cls(
            config=config,
            embedding_service=embedding_service,
            chronology_analyzer=chronology_analyzer,
            scoring_service=scoring_service,
            document_parser=ResumeParser(),
        )

    @staticmethod
    def _build_embedding_service(embedding_config: EmbeddingConfig) -> OllamaEmbeddingService:
        """Build Ollama embedding service from embedding configuration."""
        return OllamaEmbeddingService(config=embedding_config)
