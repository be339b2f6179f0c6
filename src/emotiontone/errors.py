"""
Error taxonomy for the emotiontone client.

Every failure raised by the client derives from EmotionAnalyzerError, so callers
can catch the whole family at once or branch on the concrete kind.
"""

from __future__ import annotations

from typing import Optional


class EmotionAnalyzerError(Exception):
    """Base exception for all emotiontone errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EmotionAnalyzerError, ValueError):
    """Raised when caller input violates a client-side constraint. Never reaches the network."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class RateLimitError(EmotionAnalyzerError):
    """Raised when the API answers with HTTP 429."""

    status_code = 429

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please wait before making more requests.",
        retry_after: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class ApiError(EmotionAnalyzerError):
    """Raised when the API answers with any other non-success status."""

    def __init__(self, message: str, status_code: int, response_body: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class RequestTimeoutError(EmotionAnalyzerError):
    """Raised when no response arrives within the configured deadline."""

    def __init__(self, timeout: int) -> None:
        super().__init__(f"Request timed out after {timeout}ms")
        self.timeout = timeout


class NetworkError(EmotionAnalyzerError):
    """Raised on transport failures and anything not otherwise classified."""

    def __init__(self, message: str = "Network error occurred", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
