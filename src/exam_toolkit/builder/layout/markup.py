"""
Module: builder.layout.markup

Purpose:
    Parse the markdown-like Document content dialect.
    Classifies content lines and splits text into plain/bold runs.

Dialect:
    - ""            blank line (vertical space)
    - "---"         separator (exact match)
    - "# Heading"   top-level heading
    - "A. option"   option line (indented)
    - anything else body text; "**bold**" pairs become bold runs.
      An unmatched "**" is kept as literal text.

Key Functions:
    - split_lines(): Split content into logical lines
    - classify_line(): Determine the ContentLineType of a line
    - split_runs(): Split text into TextRuns

Dependencies:
    - exam_toolkit.common.options: Option label detection
    - builder.layout.models: TextRun

Used By:
    - builder.layout.paginator
"""

from __future__ import annotations

import re
from enum import Enum

from exam_toolkit.common.options import has_option_label

from .models import TextRun

SEPARATOR = "---"
HEADING_PREFIX = "# "

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")


class ContentLineType(str, Enum):
    BLANK = "blank"
    SEPARATOR = "separator"
    HEADING = "heading"
    OPTION = "option"
    BODY = "body"


def split_lines(content: str) -> list[str]:
    """
    Split content into logical lines on "\\n".

    A trailing "\\r" is dropped so CRLF content classifies the same as LF
    content. No other character is treated as a line break.
    """
    return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]


def classify_line(line: str) -> ContentLineType:
    """
    Classify one content line.

    Example:
        >>> classify_line("# Answer Key")
        <ContentLineType.HEADING: 'heading'>
    """
    if line == SEPARATOR:
        return ContentLineType.SEPARATOR
    if not line.strip():
        return ContentLineType.BLANK
    if line.startswith(HEADING_PREFIX):
        return ContentLineType.HEADING
    if has_option_label(line):
        return ContentLineType.OPTION
    return ContentLineType.BODY


def heading_text(line: str) -> str:
    """Strip the heading prefix."""
    return line[len(HEADING_PREFIX):] if line.startswith(HEADING_PREFIX) else line


def split_runs(text: str, *, bold: bool = False) -> list[TextRun]:
    """
    Split text into alternating plain and bold runs.

    Args:
        text: Line text possibly containing **bold** pairs
        bold: Style for text outside markers (True forces all-bold)

    Returns:
        Runs in order; empty segments are dropped

    Example:
        >>> split_runs("**Answer 1:** Paris")
        [TextRun(text='Answer 1:', bold=True), TextRun(text=' Paris', bold=False)]
    """
    runs: list[TextRun] = []
    pos = 0
    for match in _BOLD_RE.finditer(text):
        if match.start() > pos:
            runs.append(TextRun(text[pos:match.start()], bold))
        runs.append(TextRun(match.group(1), True))
        pos = match.end()
    if pos < len(text):
        runs.append(TextRun(text[pos:], bold))
    return runs
