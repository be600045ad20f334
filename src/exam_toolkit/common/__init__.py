"""Shared helpers used across the toolkit.

- options: option letter labels and answer matching
- path_utils: timestamped filenames, sanitizing and validation
"""

from .options import (
    find_correct_option,
    format_option,
    format_options,
    has_any_option_labels,
    has_option_label,
    is_correct_option,
    option_letter,
)
from .path_utils import (
    FilenameValidation,
    format_timestamp,
    generate_filename,
    sanitize_filename,
    validate_filename,
)

__all__ = [
    "find_correct_option",
    "format_option",
    "format_options",
    "has_any_option_labels",
    "has_option_label",
    "is_correct_option",
    "option_letter",
    "FilenameValidation",
    "format_timestamp",
    "generate_filename",
    "sanitize_filename",
    "validate_filename",
]
