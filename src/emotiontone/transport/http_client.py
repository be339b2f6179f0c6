"""
HTTP transport for the emotion API: one JSON POST per call, bounded by a timeout,
with HTTP and transport failures mapped onto the emotiontone error taxonomy.
"""

from __future__ import annotations

import asyncio
import json
import time
from typing import Any, Dict, Optional

import aiohttp
import async_timeout
import structlog

from emotiontone.config.config import ClientConfig
from emotiontone.errors import (
    ApiError,
    EmotionAnalyzerError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
)
from emotiontone.observability.metrics import record_request

logger = structlog.get_logger(__name__)

_ERROR_MESSAGE_FIELDS = ("detail", "message", "error")


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Return the Retry-After header as whole seconds, or None if it is absent or not an integer."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def extract_error_message(body: str, status: int) -> str:
    """Pick a human-readable message out of an error response body."""
    default = f"API request failed with status {status}"
    try:
        data = json.loads(body)
    except ValueError:
        return default
    if not isinstance(data, dict):
        return default

    for key in _ERROR_MESSAGE_FIELDS:
        value = data.get(key)
        if value:
            return value if isinstance(value, str) else json.dumps(value)
    return default


class HttpClient:
    """Sends JSON requests to the emotion API.

    Holds only the immutable client configuration; every call opens and closes
    its own session, so concurrent calls share nothing.
    """

    def __init__(self, config: ClientConfig, *, metrics_enabled: bool = True):
        self.config = config
        self.metrics_enabled = metrics_enabled
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": config.user_agent,
        }

    @property
    def timeout_seconds(self) -> float:
        return self.config.timeout_ms / 1000

    async def post_json(self, path: str, payload: Dict[str, Any]) -> Any:
        """
        POST payload as JSON to base_url + path and return the decoded JSON body.

        Raises:
            RateLimitError: the API answered 429
            ApiError: the API answered any other non-2xx status
            RequestTimeoutError: no complete response within the configured timeout
            NetworkError: transport failure or an undecodable response
        """
        url = f"{self.config.base_url}{path}"
        start_time = time.monotonic()
        outcome = "cancelled"

        try:
            data = await self._perform_request(url, payload)
            outcome = "success"
            return data
        except EmotionAnalyzerError as e:
            outcome = _outcome_for(e)
            raise
        except asyncio.TimeoutError as e:
            outcome = "timeout"
            logger.warning("Request timed out", url=url, timeout_ms=self.config.timeout_ms)
            raise RequestTimeoutError(self.config.timeout_ms) from e
        except aiohttp.ClientError as e:
            outcome = "network_error"
            logger.warning("Request failed", url=url, error=str(e))
            raise NetworkError(
                "Failed to connect to the API. Please check your network connection.", e
            ) from e
        except ValueError as e:
            outcome = "network_error"
            logger.warning("Invalid JSON in response", url=url, error=str(e))
            raise NetworkError(f"Invalid JSON in response from {url}", e) from e
        except Exception as e:
            outcome = "network_error"
            logger.warning("Unexpected request error", url=url, error=repr(e))
            raise NetworkError(str(e) or "An unexpected error occurred", e) from e
        finally:
            if self.metrics_enabled:
                record_request(path, outcome, time.monotonic() - start_time)

    async def _perform_request(self, url: str, payload: Dict[str, Any]) -> Any:
        """Perform the request under the timeout guard."""
        body = json.dumps(payload)
        # The guard is the only deadline; aiohttp's own default is disabled.
        async with async_timeout.timeout(self.timeout_seconds):
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None)) as session:
                async with session.post(url, data=body, headers=self._headers) as response:
                    if response.status == 429:
                        retry_after = parse_retry_after(response.headers.get("Retry-After"))
                        logger.warning("Rate limited by emotion API", url=url, retry_after=retry_after)
                        raise RateLimitError(retry_after=retry_after)

                    if not 200 <= response.status < 300:
                        response_text = await _read_text(response)
                        message = extract_error_message(response_text, response.status)
                        logger.warning("Emotion API returned an error", url=url, status=response.status)
                        raise ApiError(message, response.status, response_text)

                    text = await response.text()
                    logger.debug("Emotion API request succeeded", url=url, status=response.status)
                    return json.loads(text)


async def _read_text(response: aiohttp.ClientResponse) -> str:
    try:
        return await response.text()
    except (aiohttp.ClientError, UnicodeDecodeError):
        return ""


def _outcome_for(error: EmotionAnalyzerError) -> str:
    if isinstance(error, RateLimitError):
        return "rate_limited"
    if isinstance(error, ApiError):
        return "api_error"
    if isinstance(error, RequestTimeoutError):
        return "timeout"
    return "network_error"
