#!/usr/bin/env python3
"""
Custom exceptions for the ATS analysis.
"""


class ATSError(Exception):
    """Base exception for analysis errors surfaced to the user."""
    pass


class InputValidationError(ATSError):
    """Raised when the job description or resume is empty."""
    pass


class EmbeddingServiceError(ATSError):
    """Raised when embeddings cannot be fetched from the embedding service."""
    pass
