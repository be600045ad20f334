"""
Module: builder.errors

Purpose:
    Classified errors raised by PDF export, plus the retry contract
    callers use to decide whether to offer another attempt.

Key Classes:
    - ExportErrorCode: GENERATION_FAILED, DOWNLOAD_FAILED, BROWSER_UNSUPPORTED
    - ExportError: Classified export failure

Key Functions:
    - can_retry(): Whether another attempt should be offered
    - describe_error(): User-facing guidance, escalating with attempts

Used By:
    - builder.controller: Raises ExportError
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

# Attempts a caller may make for one export before giving up
MAX_EXPORT_ATTEMPTS = 3


class ExportErrorCode(str, Enum):
    """Failure classification for PDF export."""

    GENERATION_FAILED = "GENERATION_FAILED"
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"
    BROWSER_UNSUPPORTED = "BROWSER_UNSUPPORTED"


class ExportError(Exception):
    """
    PDF export failed.

    Attributes:
        message: Human-readable description
        code: ExportErrorCode classification
        details: Underlying exception or extra context, if any

    Example:
        >>> err = ExportError("Failed to write PDF", ExportErrorCode.DOWNLOAD_FAILED)
        >>> err.retryable
        True
    """

    def __init__(
        self,
        message: str,
        code: ExportErrorCode = ExportErrorCode.GENERATION_FAILED,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = ExportErrorCode(code)
        self.details = details

    @property
    def retryable(self) -> bool:
        """Environment failures cannot be fixed by trying again."""
        return self.code is not ExportErrorCode.BROWSER_UNSUPPORTED

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"ExportError(code={self.code.value!r}, message={self.message!r})"


def can_retry(error: BaseException, attempts: int) -> bool:
    """
    Decide whether the caller should offer another attempt.

    Args:
        error: The failure from the latest attempt
        attempts: Attempts made so far (including the failed one)

    Returns:
        True when the error is retryable and the attempt cap is not reached
    """
    if isinstance(error, ExportError) and not error.retryable:
        return False
    return attempts < MAX_EXPORT_ATTEMPTS


def describe_error(error: BaseException, attempt: int = 1) -> str:
    """
    Build guidance text for a failed export.

    Messages for retryable failures escalate as attempts accumulate.

    Args:
        error: The failure
        attempt: Which attempt failed (1 for the first)

    Returns:
        Message suitable for showing to the user

    Example:
        >>> describe_error(ExportError("x", ExportErrorCode.GENERATION_FAILED), 2)
        'PDF generation failed again. Check the document content and export settings.'
    """
    if isinstance(error, ExportError):
        if error.code is ExportErrorCode.BROWSER_UNSUPPORTED:
            return (
                "PDF generation is not supported in this environment. "
                "Check that reportlab is installed and the configured fonts exist."
            )
        if error.code is ExportErrorCode.DOWNLOAD_FAILED:
            return (
                "Failed to save the PDF file. "
                "Check that the output folder is writable and try again."
            )
        if attempt <= 1:
            return (
                "Failed to generate PDF. This might be due to complex content. "
                "Retry to try again."
            )
        if attempt == 2:
            return "PDF generation failed again. Check the document content and export settings."
        return (
            "Multiple PDF generation attempts failed. "
            "Check the log output for details before trying again."
        )

    if attempt <= 1:
        return "An unexpected error occurred while generating the PDF. Retry to try again."
    if attempt == 2:
        return "PDF generation failed again. Check the export settings and try again."
    return "Multiple attempts failed. Check the log output for details."
