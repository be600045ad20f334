"""
Unit tests for filename generation, sanitizing and validation.
"""

from datetime import datetime, timedelta, timezone

import pytest

from exam_toolkit.common.path_utils import (
    format_timestamp,
    generate_filename,
    sanitize_filename,
    validate_filename,
)
from exam_toolkit.core.models import DocumentType

SAMPLE_DATE = datetime(2024, 1, 15, 14, 30)


class TestFormatTimestamp:
    """Tests for format_timestamp."""

    def test_format_when_single_digit_fields_then_zero_padded(self):
        assert format_timestamp(datetime(2024, 3, 5, 9, 7)) == "2024-03-05_09-07"

    def test_format_when_aware_datetime_then_uses_local_wall_clock(self):
        aware = datetime(2024, 1, 15, 14, 30, tzinfo=timezone(timedelta(hours=3)))
        local = aware.astimezone()

        assert format_timestamp(aware) == local.strftime("%Y-%m-%d_%H-%M")


class TestGenerateFilename:
    """Tests for generate_filename."""

    @pytest.mark.parametrize("doc_type,expected", [
        ("questions", "Questions_2024-01-15_14-30.pdf"),
        ("answers", "Answers_2024-01-15_14-30.pdf"),
        ("combined", "Questions_and_Answers_2024-01-15_14-30.pdf"),
    ])
    def test_generate_when_no_title_then_type_prefix(self, doc_type, expected):
        assert generate_filename(doc_type, None, SAMPLE_DATE) == expected

    def test_generate_when_custom_title_then_replaces_prefix(self):
        assert generate_filename("questions", "Custom Title", SAMPLE_DATE) == (
            "Custom_Title_2024-01-15_14-30.pdf"
        )

    def test_generate_when_enum_type_then_same_as_string(self):
        assert generate_filename(DocumentType.COMBINED, None, SAMPLE_DATE) == (
            "Questions_and_Answers_2024-01-15_14-30.pdf"
        )

    def test_generate_when_title_sanitizes_to_nothing_then_type_prefix(self):
        assert generate_filename("answers", "???", SAMPLE_DATE) == "Answers_2024-01-15_14-30.pdf"

    def test_generate_when_unknown_type_then_fallback_prefix(self):
        assert generate_filename("appendix", None, SAMPLE_DATE) == "Document_2024-01-15_14-30.pdf"


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_sanitize_when_unsafe_characters_then_replaced_and_collapsed(self):
        assert sanitize_filename("  a<b>:c  ") == "a_b_c"

    def test_sanitize_when_safe_then_unchanged(self):
        assert sanitize_filename("report-2024.v1_final.pdf") == "report-2024.v1_final.pdf"

    @pytest.mark.parametrize("raw", [
        "My Exam: Part 1/2",
        "__leading and trailing__",
        "émoji 🚀 title",
        "a\tb\nc",
        "",
    ])
    def test_sanitize_when_applied_twice_then_idempotent(self, raw):
        once = sanitize_filename(raw)

        assert sanitize_filename(once) == once


class TestValidateFilename:
    """Tests for validate_filename."""

    def test_validate_when_clean_then_valid(self):
        result = validate_filename("Questions_2024-01-15_14-30.pdf")

        assert result.is_valid
        assert result.issues == ()

    def test_validate_when_invalid_characters_then_flagged(self):
        result = validate_filename("what?.pdf")

        assert not result.is_valid
        assert "Contains invalid characters" in result.issues
        assert result.sanitized == "what_.pdf"

    @pytest.mark.parametrize("name", ["CON.pdf", "nul", "com1.txt", "LPT9"])
    def test_validate_when_reserved_name_then_flagged(self, name):
        assert "Uses reserved filename" in validate_filename(name).issues

    def test_validate_when_reserved_name_is_only_prefix_then_valid(self):
        assert validate_filename("CONSOLE.pdf").is_valid

    def test_validate_when_too_long_then_flagged(self):
        result = validate_filename("a" * 252 + ".pdf")

        assert result.issues == ("Filename too long",)

    @pytest.mark.parametrize("name", ["CON.pdf", "nul", "com1.txt", "LPT9"])
    def test_validate_when_reserved_name_then_sanitized_is_valid(self, name):
        sanitized = validate_filename(name).sanitized

        assert sanitized.startswith("_")
        assert validate_filename(sanitized).is_valid

    def test_validate_when_too_long_then_sanitized_cut_keeping_extension(self):
        sanitized = validate_filename("a" * 300 + ".pdf").sanitized

        assert len(sanitized) == 255
        assert sanitized.endswith(".pdf")
        assert validate_filename(sanitized).is_valid

    def test_validate_when_trailing_dot_then_sanitized_is_valid(self):
        sanitized = validate_filename("report.pdf.").sanitized

        assert sanitized == "report.pdf"

    def test_validate_when_exactly_255_then_valid(self):
        assert validate_filename("a" * 251 + ".pdf").is_valid

    @pytest.mark.parametrize("name", [" report.pdf", "report.pdf.", ".hidden"])
    def test_validate_when_leading_or_trailing_space_or_dot_then_flagged(self, name):
        assert "Invalid leading or trailing characters" in validate_filename(name).issues
