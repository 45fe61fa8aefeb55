"""LLM Module - Embedding services and interfaces."""
from core.llm.interfaces import EmbeddingProvider
from core.llm.ollama_service import OllamaEmbeddingService

__all__ = ['EmbeddingProvider', 'OllamaEmbeddingService']
