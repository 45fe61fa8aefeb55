"""
Embedding Provider Interface - Abstract base for embedding services.

This module defines the interface for embedding services (Ollama, test doubles, etc.).
"""
from abc import ABC, abstractmethod
from typing import List


class EmbeddingProvider(ABC):
    """
    Abstract Interface for Embedding Service Providers.
    """

    @abstractmethod
    def generate_embedding(self, text: str) -> List[float]:
        """
        Generate a vector embedding for the given text.

        Raises:
            EmbeddingServiceError: If the embedding cannot be obtained
        """
        pass
