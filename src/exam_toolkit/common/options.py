"""Option labelling and answer matching utilities.

Multiple-choice options are labelled A, B, C... by position. Generated
options sometimes arrive already labelled ("A. Paris"); those are kept as
they are so a label is never doubled.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

_LABEL_RE = re.compile(r"^[A-Z]\.\s")


def option_letter(index: int) -> str:
    """Return the letter label for a zero-based option index.

    Examples:
        >>> option_letter(0)
        'A'
        >>> option_letter(3)
        'D'
    """
    return chr(ord("A") + index)


def has_option_label(option: str) -> bool:
    """Check whether an option already starts with a label like "A. ".

    Examples:
        >>> has_option_label("A. Paris")
        True
        >>> has_option_label("Paris")
        False
    """
    if not isinstance(option, str):
        return False
    return bool(_LABEL_RE.match(option.strip()))


def has_any_option_labels(options: Sequence[str]) -> bool:
    return any(has_option_label(option) for option in options)


def format_option(option: str, index: int) -> str:
    """Format one option line with its positional letter label.

    The option text is not trimmed or escaped. Already-labelled options
    are returned unchanged.

    Examples:
        >>> format_option("Paris", 1)
        'B. Paris'
        >>> format_option("C. Rome", 2)
        'C. Rome'
    """
    if has_option_label(option):
        return option
    return f"{option_letter(index)}. {option}"


def format_options(options: Sequence[str]) -> list[str]:
    return [format_option(option, i) for i, option in enumerate(options)]


def _normalize(text: str) -> str:
    return text.strip().lower()


def is_correct_option(option: str, answer: str) -> bool:
    """Trim + case-insensitive exact comparison of an option and an answer.

    No fuzzy matching is performed.

    Examples:
        >>> is_correct_option("  Paris ", "paris")
        True
        >>> is_correct_option("Paris, France", "Paris")
        False
    """
    if not isinstance(option, str) or not isinstance(answer, str):
        return False
    return _normalize(option) == _normalize(answer)


def find_correct_option(options: Sequence[str], answer: str) -> Optional[int]:
    """Return the index of the first option matching the answer, or None."""
    for i, option in enumerate(options):
        if is_correct_option(option, answer):
            return i
    return None
