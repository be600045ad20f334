"""
Exam Toolkit Core Package

Shared data models, payload validation and serialization.

1. **Immutable Data Models**
   - Questions and Documents are frozen dataclasses
   - Formatting builds new Documents, never edits Questions

2. **Validation at the Boundary**
   - Payloads are validated once, when deserialized
   - Formatting and rendering accept any well-typed Question
"""

from .models import (
    Difficulty,
    Document,
    DocumentType,
    FormattedOutput,
    OutputFormat,
    Question,
    QuestionType,
)

__all__ = [
    "Difficulty",
    "Document",
    "DocumentType",
    "FormattedOutput",
    "OutputFormat",
    "Question",
    "QuestionType",
]
