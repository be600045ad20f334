"""
Module: builder.layout.wrapping

Purpose:
    Greedy word-wrap of styled runs against a maximum width.
    Words from different runs share lines; each run keeps its font.

Algorithm:
    1. Group runs into words and whitespace, keeping each piece's style;
       text from adjacent runs with no space between them is one word
    2. Add words to the current line while the measured width fits
    3. Whitespace is only kept between words on the same line
    4. A word wider than the line on its own is broken by character

Key Functions:
    - wrap_runs(): Wrap runs into sub-lines of TextRuns

Dependencies:
    - builder.layout.models: TextRun

Used By:
    - builder.layout.paginator
"""

from __future__ import annotations

import re
from typing import Callable, List

from .models import TextRun

# (text, font_name, font_size_pt) -> width in mm
Measure = Callable[[str, str, float], float]

_TOKEN_RE = re.compile(r"\S+|\s+")


def wrap_runs(
    runs: List[TextRun],
    max_width: float,
    measure: Measure,
    *,
    font_name: str,
    bold_font_name: str,
    font_size: float,
) -> List[List[TextRun]]:
    """
    Wrap styled runs into sub-lines no wider than max_width.

    Args:
        runs: Runs making up one logical line
        max_width: Available width (mm)
        measure: Text width function
        font_name: Font for plain runs
        bold_font_name: Font for bold runs
        font_size: Size in points

    Returns:
        List of sub-lines; each sub-line is a list of merged TextRuns.
        Empty when the runs hold no visible text.

    Example:
        >>> wrap_runs([TextRun("one two three")], 8.0, measure, ...)
        [[TextRun('one two')], [TextRun('three')]]
    """
    def font_for(bold: bool) -> str:
        return bold_font_name if bold else font_name

    def width_of(group: List[TextRun]) -> float:
        return sum(measure(t.text, font_for(t.bold), font_size) for t in group)

    lines: List[List[TextRun]] = []
    current: List[TextRun] = []
    width = 0.0
    pending: List[TextRun] = []
    pending_width = 0.0

    for group in _group_words(runs):
        if group[0].text.isspace():
            if current:
                pending.extend(group)
                pending_width += width_of(group)
            continue

        w = width_of(group)
        if current and width + pending_width + w > max_width:
            lines.append(_merge(current))
            current = []
            width = 0.0
        elif current:
            current.extend(pending)
            width += pending_width
        pending = []
        pending_width = 0.0

        if w > max_width:
            pieces = _break_word(group, max_width, measure, font_for, font_size)
            for piece in pieces[:-1]:
                lines.append(_merge(piece))
            current = list(pieces[-1])
            width = width_of(current)
        else:
            current.extend(group)
            width += w

    if current:
        lines.append(_merge(current))

    return lines


def _group_words(runs: List[TextRun]) -> List[List[TextRun]]:
    """
    Split runs into word groups and whitespace groups, keeping styles.

    Non-whitespace text from adjacent runs with no space between them
    ("**x**y") forms a single word group, so no break falls inside it.
    """
    groups: List[List[TextRun]] = []
    for run in runs:
        for text in _TOKEN_RE.findall(run.text):
            token = TextRun(text, run.bold)
            if groups and groups[-1][0].text.isspace() == text.isspace():
                groups[-1].append(token)
            else:
                groups.append([token])
    return groups


def _merge(tokens: List[TextRun]) -> List[TextRun]:
    """Merge adjacent tokens that share a style."""
    merged: List[TextRun] = []
    for token in tokens:
        if merged and merged[-1].bold == token.bold:
            merged[-1] = TextRun(merged[-1].text + token.text, token.bold)
        else:
            merged.append(token)
    return merged


def _break_word(
    group: List[TextRun],
    max_width: float,
    measure: Measure,
    font_for: Callable[[bool], str],
    font_size: float,
) -> List[List[TextRun]]:
    """
    Break an over-long word group into pieces that each fit max_width.

    A single character wider than max_width still gets its own piece.
    """
    def piece_width(piece: List[TextRun]) -> float:
        return sum(measure(t.text, font_for(t.bold), font_size) for t in _merge(piece))

    pieces: List[List[TextRun]] = []
    piece: List[TextRun] = []
    for token in group:
        for ch in token.text:
            candidate = piece + [TextRun(ch, token.bold)]
            if piece and piece_width(candidate) > max_width:
                pieces.append(_merge(piece))
                piece = [TextRun(ch, token.bold)]
            else:
                piece = candidate
    pieces.append(_merge(piece))
    return pieces
