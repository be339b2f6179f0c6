"""
Input validation for texts sent to the emotion API.

All checks run before any network call and raise ValidationError on the first
violation found.
"""

from __future__ import annotations

from typing import Any

from emotiontone.errors import ValidationError

MAX_WORDS_PER_TEXT = 100
MAX_BATCH_SIZE = 10


def count_words(text: str) -> int:
    """Count whitespace-delimited words in text."""
    return len(text.split())


def _check_text(text: Any, field: str, label: str) -> None:
    if not isinstance(text, str) or not text:
        raise ValidationError(f"{label} is required and must be a string", field)

    stripped = text.strip()
    if not stripped:
        raise ValidationError(f"{label} cannot be empty", field)

    word_count = count_words(stripped)
    if word_count > MAX_WORDS_PER_TEXT:
        raise ValidationError(
            f"{label} exceeds maximum word limit. Got {word_count} words, maximum is {MAX_WORDS_PER_TEXT}",
            field,
        )


def validate_text(text: Any) -> None:
    """Validate a single text for analysis."""
    _check_text(text, "text", "Text")


def validate_batch(texts: Any) -> None:
    """
    Validate a list of texts for batch analysis.

    Stops at the first invalid element; its message names the element's index.
    """
    if not isinstance(texts, (list, tuple)):
        raise ValidationError("Texts must be a list", "texts")

    if not texts:
        raise ValidationError("At least one text is required", "texts")

    if len(texts) > MAX_BATCH_SIZE:
        raise ValidationError(
            f"Batch size exceeds maximum limit. Got {len(texts)} texts, maximum is {MAX_BATCH_SIZE}",
            "texts",
        )

    for index, text in enumerate(texts):
        _check_text(text, "texts", f"Text at index {index}")
