"""
Ollama Service - Embedding generation via an Ollama-compatible HTTP API.

POST {base_url}/api/embeddings with {"model": ..., "prompt": ...}
and read the "embedding" vector from the JSON response.
"""
from typing import List, Optional
import logging

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState

from core.config_loader import EmbeddingConfig
from core.exceptions import EmbeddingServiceError
from core.llm.interfaces import EmbeddingProvider

logger = logging.getLogger(__name__)

# Transient transport failures worth another attempt
RETRYABLE_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
)


def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        "Embedding service unreachable (attempt %s). Waiting %.1fs before retry. Details: %s",
        retry_state.attempt_number, wait, exc,
    )


class OllamaEmbeddingService(EmbeddingProvider):
    """
    Embedding provider backed by a local or remote Ollama server.

    Connection errors and timeouts are retried with exponential backoff up to
    max_attempts; every other failure surfaces immediately as
    EmbeddingServiceError.
    """

    def __init__(
        self,
        config: Optional[EmbeddingConfig] = None,
        session: Optional[requests.Session] = None
    ):
        self.config = config or EmbeddingConfig()
        self.session = session
        self.url = f"{self.config.base_url.rstrip('/')}/api/embeddings"

    def _post(self, payload: dict) -> requests.Response:
        poster = self.session.post if self.session is not None else requests.post
        return poster(self.url, json=payload, timeout=self.config.timeout_seconds)

    def _post_with_retry(self, payload: dict) -> requests.Response:
        retrying = retry(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            stop=stop_after_attempt(self.config.max_attempts),
            before_sleep=_log_retry,
            reraise=True,
        )
        return retrying(self._post)(payload)

    def generate_embedding(self, text: str) -> List[float]:
        """Generate embedding vector for text."""
        payload = {"model": self.config.model, "prompt": text}

        try:
            response = self._post_with_retry(payload)
        except requests.exceptions.RequestException as e:
            logger.error(f"Embedding request to {self.url} failed: {e}")
            raise EmbeddingServiceError(f"Failed to get embedding from {self.url}: {e}") from e

        if not 200 <= response.status_code < 300:
            raise EmbeddingServiceError(
                f"Embedding service returned HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise EmbeddingServiceError(f"Embedding service returned invalid JSON: {e}") from e

        embedding = data.get("embedding") if isinstance(data, dict) else None
        if not embedding:
            raise EmbeddingServiceError(
                f"Embedding service response has no embedding (model '{self.config.model}')"
            )

        logger.debug(f"Received embedding of dimension {len(embedding)} for {len(text)} chars")
        return [float(v) for v in embedding]
