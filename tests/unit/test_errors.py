"""Tests for the emotiontone error taxonomy."""

import pytest
from emotiontone.errors import (
    ApiError,
    EmotionAnalyzerError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    ValidationError,
)


@pytest.mark.unit
class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad", "text"),
            RateLimitError(),
            ApiError("boom", 500),
            RequestTimeoutError(50),
            NetworkError(),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, EmotionAnalyzerError)
        assert str(error) == error.message

    def test_validation_error_is_value_error(self):
        error = ValidationError("Text cannot be empty", "text")
        assert isinstance(error, ValueError)
        assert error.field == "text"

    def test_rate_limit_defaults(self):
        error = RateLimitError()
        assert error.status_code == 429
        assert error.retry_after is None
        assert "Rate limit exceeded" in str(error)

    def test_api_error_fields(self):
        error = ApiError("boom", 503, '{"detail": "boom"}')
        assert error.status_code == 503
        assert error.response_body == '{"detail": "boom"}'

    def test_timeout_error_message(self):
        error = RequestTimeoutError(50)
        assert error.timeout == 50
        assert str(error) == "Request timed out after 50ms"

    def test_network_error_keeps_cause(self):
        cause = ConnectionRefusedError("refused")
        error = NetworkError("Failed to connect", cause)
        assert error.cause is cause
