"""Tests for document text validation."""

from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from config.settings import settings
from utils.validators import DocumentValidator, InvalidInputError


def test_ensure_text_rejects_none():
    with pytest.raises(InvalidInputError):
        DocumentValidator.ensure_text(None)


def test_ensure_text_rejects_bytes():
    with pytest.raises(InvalidInputError):
        DocumentValidator.ensure_text(b"raw bytes")


def test_ensure_text_passes_strings_through():
    assert DocumentValidator.ensure_text("") == ""
    assert DocumentValidator.ensure_text("terms") == "terms"


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)


@pytest.mark.parametrize("text", [None, "", "   \n\t "])
def test_empty_paste_is_rejected(text):
    assert DocumentValidator.validate_pasted_text(text) == (False, "empty", "Content cannot be empty")


def test_short_paste_is_rejected():
    is_valid, validation_type, message = DocumentValidator.validate_pasted_text("x" * 49)

    assert not is_valid
    assert validation_type == "too_short"
    assert message == DocumentValidator.TOO_SHORT_MESSAGE


def test_paste_at_minimum_length_is_accepted():
    is_valid, validation_type, _ = DocumentValidator.validate_pasted_text("x" * 50)

    assert is_valid
    assert validation_type == "valid"


def test_explicit_zero_minimum_accepts_short_paste():
    is_valid, validation_type, _ = DocumentValidator.validate_pasted_text("short text", min_length=0)

    assert is_valid
    assert validation_type == "valid"


def test_overlong_text_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "MAX_DOCUMENT_LENGTH", 100)

    is_valid, validation_type, _ = DocumentValidator.validate_pasted_text("x" * 101)

    assert not is_valid
    assert validation_type == "too_long"


def test_blank_file_text_is_rejected():
    assert DocumentValidator.validate_extracted_text("  \n ") == (
        False,
        "empty",
        "No readable text found in the uploaded file",
    )


def test_short_file_text_is_accepted():
    # The minimum length only applies to pasted text
    is_valid, _, _ = DocumentValidator.validate_extracted_text("tiny")

    assert is_valid
