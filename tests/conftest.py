"""
Shared test configuration and fixtures for emotiontone.
"""

import os
from typing import Any, Dict, Generator

import pytest
from aioresponses import aioresponses
from emotiontone.client import EmotionAnalyzer

from tests.helpers.api import BASE_URL


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests across the client, transport and CLI")


# ============================================================================
# Environment isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep EMOTIONTONE_* settings from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("EMOTIONTONE_"):
            monkeypatch.delenv(key, raising=False)


# ============================================================================
# Client fixtures
# ============================================================================


@pytest.fixture
def analyzer() -> EmotionAnalyzer:
    """Client pointed at the mocked base URL with a short timeout."""
    return EmotionAnalyzer(base_url=BASE_URL, timeout=1000)


@pytest.fixture
def mock_api() -> Generator[aioresponses, None, None]:
    """Intercept every aiohttp request made during the test."""
    with aioresponses() as m:
        yield m


# ============================================================================
# Sample payloads
# ============================================================================


@pytest.fixture
def joy_response() -> Dict[str, Any]:
    return {
        "primary_emotion": "joy",
        "confidence": 0.9,
        "all_emotions": [
            {"emotion": "joy", "score": 0.9},
            {"emotion": "surprise", "score": 0.06},
            {"emotion": "neutral", "score": 0.04},
        ],
    }


@pytest.fixture
def sadness_response() -> Dict[str, Any]:
    return {
        "primary_emotion": "sadness",
        "confidence": 0.72,
        "all_emotions": [
            {"emotion": "sadness", "score": 0.72},
            {"emotion": "fear", "score": 0.28},
        ],
    }


@pytest.fixture
def batch_response(joy_response, sadness_response) -> Dict[str, Any]:
    return {"results": [joy_response, sadness_response], "count": 2}


# ============================================================================
# Logging isolation
# ============================================================================


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo configure_logging() so handlers bound to temporary streams do not leak."""
    import logging

    import structlog

    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()
