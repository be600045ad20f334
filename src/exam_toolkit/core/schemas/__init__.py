"""
Schemas Package

Payload validation for question data.
"""

from .validator import (
    validate_question,
    validate_questions,
    ValidationError,
    MIN_OPTIONS,
    MAX_OPTIONS,
)

__all__ = [
    "validate_question",
    "validate_questions",
    "ValidationError",
    "MIN_OPTIONS",
    "MAX_OPTIONS",
]
