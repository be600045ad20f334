"""
Unit tests for export error classification and retry guidance.
"""

import pytest

from exam_toolkit.builder.errors import (
    MAX_EXPORT_ATTEMPTS,
    ExportError,
    ExportErrorCode,
    can_retry,
    describe_error,
)


class TestExportError:
    """Tests for ExportError."""

    @pytest.mark.parametrize("code,retryable", [
        (ExportErrorCode.GENERATION_FAILED, True),
        (ExportErrorCode.DOWNLOAD_FAILED, True),
        (ExportErrorCode.BROWSER_UNSUPPORTED, False),
    ])
    def test_retryable_when_code_given_then_matches_classification(self, code, retryable):
        assert ExportError("x", code).retryable is retryable

    def test_init_when_code_string_then_coerced(self):
        err = ExportError("x", "DOWNLOAD_FAILED")

        assert err.code is ExportErrorCode.DOWNLOAD_FAILED

    def test_str_when_formatted_then_includes_code(self):
        err = ExportError("Failed to save PDF file", ExportErrorCode.DOWNLOAD_FAILED)

        assert str(err) == "[DOWNLOAD_FAILED] Failed to save PDF file"
        assert err.message == "Failed to save PDF file"


class TestCanRetry:
    """Tests for the retry cap."""

    def test_can_retry_when_below_cap_then_true(self):
        err = ExportError("x", ExportErrorCode.GENERATION_FAILED)

        assert can_retry(err, 1)
        assert can_retry(err, MAX_EXPORT_ATTEMPTS - 1)

    def test_can_retry_when_cap_reached_then_false(self):
        err = ExportError("x", ExportErrorCode.DOWNLOAD_FAILED)

        assert not can_retry(err, MAX_EXPORT_ATTEMPTS)

    def test_can_retry_when_environment_unsupported_then_never(self):
        err = ExportError("x", ExportErrorCode.BROWSER_UNSUPPORTED)

        assert not can_retry(err, 0)

    def test_can_retry_when_unclassified_error_then_uses_cap(self):
        assert can_retry(RuntimeError("x"), 1)
        assert not can_retry(RuntimeError("x"), 3)


class TestDescribeError:
    """Tests for escalating guidance messages."""

    def test_describe_when_generation_fails_repeatedly_then_escalates(self):
        err = ExportError("x", ExportErrorCode.GENERATION_FAILED)

        messages = [describe_error(err, attempt) for attempt in (1, 2, 3)]

        assert len(set(messages)) == 3
        assert "Retry" in messages[0]
        assert messages[2].startswith("Multiple PDF generation attempts failed")

    def test_describe_when_download_failed_then_mentions_output_folder(self):
        err = ExportError("x", ExportErrorCode.DOWNLOAD_FAILED)

        assert "output folder" in describe_error(err, 1)

    def test_describe_when_unsupported_then_same_message_every_attempt(self):
        err = ExportError("x", ExportErrorCode.BROWSER_UNSUPPORTED)

        assert describe_error(err, 1) == describe_error(err, 3)
        assert "not supported" in describe_error(err, 1)

    def test_describe_when_unclassified_then_generic_escalation(self):
        first = describe_error(ValueError("x"), 1)
        last = describe_error(ValueError("x"), 5)

        assert first.startswith("An unexpected error occurred")
        assert last.startswith("Multiple attempts failed")
