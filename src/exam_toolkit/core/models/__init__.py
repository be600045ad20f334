"""
Core Models Package

Immutable data models shared by the formatting and export stages.

All models in this package are frozen dataclasses:
1. No accidental mutation of question content during formatting
2. Every export request builds its own FormattedOutput
3. Safe to pass between concurrent export calls
"""

from .questions import Difficulty, Question, QuestionType
from .documents import Document, DocumentType, FormattedOutput, OutputFormat

__all__ = [
    "Difficulty",
    "Question",
    "QuestionType",
    "Document",
    "DocumentType",
    "FormattedOutput",
    "OutputFormat",
]
