"""Tests for client-side input validation."""

import pytest
from emotiontone.errors import ValidationError
from emotiontone.validation import (
    MAX_BATCH_SIZE,
    MAX_WORDS_PER_TEXT,
    count_words,
    validate_batch,
    validate_text,
)


def words(n: int) -> str:
    return " ".join(["word"] * n)


@pytest.mark.unit
class TestCountWords:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hello", 1),
            ("hello world", 2),
            ("  spaced   out\ttext\nhere  ", 4),
            ("", 0),
            ("   ", 0),
        ],
    )
    def test_counts_whitespace_delimited_tokens(self, text, expected):
        assert count_words(text) == expected


@pytest.mark.unit
class TestValidateText:
    def test_accepts_text_at_word_limit(self):
        validate_text(words(MAX_WORDS_PER_TEXT))

    def test_accepts_text_with_surrounding_whitespace(self):
        validate_text("   I feel great   ")

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None, 42, ["hello"]])
    def test_rejects_missing_or_empty(self, text):
        with pytest.raises(ValidationError) as exc_info:
            validate_text(text)
        assert exc_info.value.field == "text"

    def test_rejects_text_over_word_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_text(words(MAX_WORDS_PER_TEXT + 1))
        assert exc_info.value.field == "text"
        assert "101" in str(exc_info.value)
        assert "100" in str(exc_info.value)

    def test_word_limit_counts_after_trimming(self):
        validate_text("  " + words(MAX_WORDS_PER_TEXT) + "   \n")


@pytest.mark.unit
class TestValidateBatch:
    def test_accepts_list_and_tuple(self):
        validate_batch(["one", "two"])
        validate_batch(("one", "two"))

    def test_accepts_batch_at_size_limit(self):
        validate_batch(["text"] * MAX_BATCH_SIZE)

    @pytest.mark.parametrize("texts", [None, "not a list", {"a": "b"}, 3])
    def test_rejects_non_list(self, texts):
        with pytest.raises(ValidationError) as exc_info:
            validate_batch(texts)
        assert exc_info.value.field == "texts"

    def test_rejects_empty_list(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_batch([])
        assert exc_info.value.field == "texts"

    def test_rejects_oversized_batch(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_batch(["ok"] * 11)
        assert exc_info.value.field == "texts"
        assert "Got 11 texts, maximum is 10" in str(exc_info.value)

    def test_reports_index_of_first_invalid_text(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_batch(["ok", "", "ok"])
        assert exc_info.value.field == "texts"
        assert "index 1" in str(exc_info.value)

    def test_stops_at_first_failure(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_batch(["ok", words(MAX_WORDS_PER_TEXT + 5), None])
        assert "index 1" in str(exc_info.value)
        assert "105" in str(exc_info.value)

    def test_rejects_non_string_element(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_batch(["ok", 7])
        assert "index 1" in str(exc_info.value)
