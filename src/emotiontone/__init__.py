"""
emotiontone - Async client for the Emotion Tone Analyzer API.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .client import EmotionAnalyzer
from .config import ClientConfig, Config
from .errors import (
    ApiError,
    EmotionAnalyzerError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    ValidationError,
)
from .models import BatchEmotionResult, EmotionResult, EmotionScore

__all__ = [
    "__version__",
    "EmotionAnalyzer",
    "ClientConfig",
    "Config",
    "EmotionAnalyzerError",
    "ValidationError",
    "RateLimitError",
    "ApiError",
    "RequestTimeoutError",
    "NetworkError",
    "EmotionScore",
    "EmotionResult",
    "BatchEmotionResult",
]
