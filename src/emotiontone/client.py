"""
Public client for the Emotion Tone Analyzer API.
"""

from __future__ import annotations

from typing import Optional, Sequence

import structlog

from emotiontone.config.config import ClientConfig, Config
from emotiontone.models import BatchEmotionResult, EmotionResult
from emotiontone.transport.http_client import HttpClient
from emotiontone.validation import validate_batch, validate_text

logger = structlog.get_logger(__name__)

ANALYZE_PATH = "/api/v1/analyze"
ANALYZE_BATCH_PATH = "/api/v1/analyze/batch"


class EmotionAnalyzer:
    """
    Async client for single and batch emotion analysis.

    Example:
        analyzer = EmotionAnalyzer()
        result = await analyzer.analyze("I'm so happy today!")
        result.primary_emotion  # "joy"

    The configuration is fixed at construction; calls on one instance may run
    concurrently and share no other state.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        *,
        config: Optional[ClientConfig] = None,
        metrics_enabled: bool = True,
    ):
        """
        Args:
            base_url: Custom base URL for self-hosted instances
            timeout: Request timeout in milliseconds (default: 30000)
            config: Full client configuration; base_url and timeout override its fields
            metrics_enabled: Record Prometheus metrics for each request
        """
        config = config or ClientConfig()
        overrides = {}
        if base_url is not None:
            overrides["base_url"] = base_url
        if timeout is not None:
            overrides["timeout_ms"] = timeout
        if overrides:
            config = ClientConfig.model_validate({**config.model_dump(), **overrides})

        self.config = config
        self._http = HttpClient(config, metrics_enabled=metrics_enabled)

    @classmethod
    def from_config(cls, config: Config) -> EmotionAnalyzer:
        """Build a client from application settings."""
        return cls(config=config.client, metrics_enabled=config.monitoring.metrics_enabled)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> int:
        return self.config.timeout_ms

    async def analyze(self, text: str) -> EmotionResult:
        """
        Analyze a single text (max 100 words).

        Raises:
            ValidationError: text is missing, empty or too long
            RateLimitError, ApiError, RequestTimeoutError, NetworkError: the request failed
        """
        validate_text(text)
        payload = await self._http.post_json(ANALYZE_PATH, {"text": text.strip()})
        result = EmotionResult.from_api(payload)
        logger.debug("Analyzed text", primary_emotion=result.primary_emotion, confidence=result.confidence)
        return result

    async def analyze_batch(self, texts: Sequence[str]) -> BatchEmotionResult:
        """
        Analyze up to 10 texts in one request. Results keep the input order.

        Raises:
            ValidationError: the list or one of its texts is invalid
            RateLimitError, ApiError, RequestTimeoutError, NetworkError: the request failed
        """
        validate_batch(texts)
        payload = await self._http.post_json(ANALYZE_BATCH_PATH, {"texts": [t.strip() for t in texts]})
        result = BatchEmotionResult.from_api(payload)
        logger.debug("Analyzed batch", count=result.count)
        return result
