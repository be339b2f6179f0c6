"""
Result types returned by the client and their mapping from the API wire format.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple

from emotiontone.errors import NetworkError


@dataclass(frozen=True)
class EmotionScore:
    """Score for a single emotion label."""

    emotion: str
    score: float

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> EmotionScore:
        return cls(emotion=payload["emotion"], score=payload["score"])


@dataclass(frozen=True)
class EmotionResult:
    """Emotion analysis of one text."""

    primary_emotion: str
    confidence: float
    all_emotions: Tuple[EmotionScore, ...]

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> EmotionResult:
        """Build a result from a single-analysis response body."""
        try:
            return cls(
                primary_emotion=payload["primary_emotion"],
                confidence=payload["confidence"],
                all_emotions=tuple(EmotionScore.from_api(item) for item in payload["all_emotions"]),
            )
        except (KeyError, TypeError) as e:
            raise NetworkError(f"Unexpected response from emotion API: {e!r}", e) from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BatchEmotionResult:
    """Results of a batch analysis, in input order."""

    results: Tuple[EmotionResult, ...]
    count: int

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> BatchEmotionResult:
        """Build a batch result from a batch-analysis response body."""
        try:
            results = tuple(EmotionResult.from_api(item) for item in payload["results"])
            count = payload["count"]
        except (KeyError, TypeError) as e:
            raise NetworkError(f"Unexpected response from emotion API: {e!r}", e) from e
        return cls(results=results, count=count)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
