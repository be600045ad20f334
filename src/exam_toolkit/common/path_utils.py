"""Path and filename utilities.

Provides the timestamped PDF filenames used for every export, plus
sanitizing and validation helpers for user-supplied names. All functions
are pure: no filesystem access.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

MAX_FILENAME_LENGTH = 255
PDF_EXTENSION = ".pdf"

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.\-]")
_UNDERSCORE_RUN_RE = re.compile(r"_{2,}")
_INVALID_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

DOCUMENT_TYPE_PREFIXES = {
    "questions": "Questions",
    "answers": "Answers",
    "combined": "Questions_and_Answers",
}
FALLBACK_PREFIX = "Document"

RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


@dataclass(frozen=True)
class FilenameValidation:
    """
    Result of validate_filename().

    Attributes:
        is_valid: True when no issues were found
        issues: Human-readable problems, in check order
        sanitized: Safe alternative that itself passes validation (always populated)
    """
    is_valid: bool
    issues: tuple[str, ...]
    sanitized: str


def format_timestamp(date: datetime) -> str:
    """Format a datetime as YYYY-MM-DD_HH-MM using local wall-clock fields.

    Naive datetimes are taken as local time. Aware datetimes are converted
    to the local timezone first.

    Examples:
        >>> format_timestamp(datetime(2024, 1, 15, 14, 30))
        '2024-01-15_14-30'
        >>> format_timestamp(datetime(2024, 3, 5, 9, 7))
        '2024-03-05_09-07'
    """
    if date.tzinfo is not None:
        date = date.astimezone()
    return (
        f"{date.year:04d}-{date.month:02d}-{date.day:02d}"
        f"_{date.hour:02d}-{date.minute:02d}"
    )


def sanitize_filename(raw: str) -> str:
    """Make a string safe for use as a filename on any platform.

    Every character outside [A-Za-z0-9_.-] becomes an underscore, runs of
    underscores collapse to one, and leading/trailing underscores are
    stripped. Idempotent.

    Examples:
        >>> sanitize_filename("Custom Title")
        'Custom_Title'
        >>> sanitize_filename("  a<b>:c  ")
        'a_b_c'
    """
    cleaned = _UNSAFE_CHARS_RE.sub("_", raw)
    cleaned = _UNDERSCORE_RUN_RE.sub("_", cleaned)
    return cleaned.strip("_")


def _type_key(document_type: object) -> str:
    # Accepts DocumentType members as well as plain strings
    return str(getattr(document_type, "value", document_type))


def generate_filename(
    document_type: object,
    title: Optional[str] = None,
    date: Optional[datetime] = None,
) -> str:
    """Build the download filename for a rendered document.

    Args:
        document_type: "questions", "answers" or "combined" (or a DocumentType)
        title: Optional custom title; replaces the type-derived prefix
        date: Timestamp to embed; defaults to now

    Returns:
        Filename like "Questions_and_Answers_2024-01-15_14-30.pdf"

    Examples:
        >>> generate_filename("combined", None, datetime(2024, 1, 15, 14, 30))
        'Questions_and_Answers_2024-01-15_14-30.pdf'
        >>> generate_filename("questions", "Custom Title", datetime(2024, 1, 15, 14, 30))
        'Custom_Title_2024-01-15_14-30.pdf'
    """
    timestamp = format_timestamp(date or datetime.now())

    prefix = sanitize_filename(title) if title else ""
    if not prefix:
        prefix = DOCUMENT_TYPE_PREFIXES.get(_type_key(document_type), FALLBACK_PREFIX)

    return f"{prefix}_{timestamp}{PDF_EXTENSION}"


def validate_filename(name: str) -> FilenameValidation:
    """Check a filename for cross-platform problems.

    Flags invalid characters, Windows reserved device names (extension
    ignored, case-insensitive), excessive length and leading/trailing
    spaces or dots. A sanitized alternative is returned regardless: reserved
    stems get a leading underscore and over-long names are cut to fit,
    keeping the extension.

    Examples:
        >>> validate_filename("report.pdf").is_valid
        True
        >>> validate_filename("CON.pdf").issues
        ('Uses reserved filename',)
    """
    issues: list[str] = []

    if _INVALID_CHARS_RE.search(name):
        issues.append("Contains invalid characters")

    stem = name.split(".", 1)[0] if not name.startswith(".") else name
    if stem.strip().upper() in RESERVED_NAMES:
        issues.append("Uses reserved filename")

    if len(name) > MAX_FILENAME_LENGTH:
        issues.append("Filename too long")

    if name[:1] in (" ", ".") or name[-1:] in (" ", "."):
        issues.append("Invalid leading or trailing characters")

    return FilenameValidation(
        is_valid=not issues,
        issues=tuple(issues),
        sanitized=_safe_alternative(name),
    )


def _safe_alternative(name: str) -> str:
    candidate = sanitize_filename(name).strip(".")

    if candidate.split(".", 1)[0].upper() in RESERVED_NAMES:
        candidate = f"_{candidate}"

    if len(candidate) > MAX_FILENAME_LENGTH:
        stem, dot, ext = candidate.rpartition(".")
        if not dot or len(ext) + 1 >= MAX_FILENAME_LENGTH:
            stem, ext = candidate, ""
        else:
            ext = f".{ext}"
        candidate = stem[: MAX_FILENAME_LENGTH - len(ext)].rstrip(".") + ext

    return candidate
