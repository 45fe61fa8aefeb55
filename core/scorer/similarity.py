#!/usr/bin/env python3
"""
Similarity Calculations - Cosine similarity between document embeddings.
"""

from typing import Sequence
import logging
import numpy as np

logger = logging.getLogger(__name__)


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float], eps: float = 1e-12) -> float:
    """
    Raw cosine similarity in [-1, 1].

    Raises:
        ValueError: If the vectors differ in dimension
    """
    a = np.asarray(vec1, dtype=np.float64)
    b = np.asarray(vec2, dtype=np.float64)

    if a.shape != b.shape:
        raise ValueError(f"Embedding dimensions differ: {a.shape} vs {b.shape}")

    norm = float(np.linalg.norm(a) * np.linalg.norm(b))
    if norm < eps:
        logger.warning("Zero-length embedding vector, similarity set to 0")
        return 0.0

    return float(np.dot(a, b) / norm)


def calculate_semantic_similarity(resume_embedding: Sequence[float], jd_embedding: Sequence[float]) -> float:
    """Semantic similarity score: cosine similarity scaled to a percentage."""
    return cosine_similarity(resume_embedding, jd_embedding) * 100
