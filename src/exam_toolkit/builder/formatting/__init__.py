"""
Module: builder.formatting

Purpose:
    Turn a question list into one or more Documents for a chosen
    OutputFormat. Pure and synchronous; knows nothing about PDF layout.

Key Functions:
    - format_questions(): Format with the strategy for an OutputFormat
    - get_formatter(): Strategy lookup
    - format_question_content(), format_answer_content(): Shared blocks

Used By:
    - builder.controller: Export pipeline
"""

from .content import format_answer_content, format_question_content
from .strategies import (
    FORMATTERS,
    format_assignment,
    format_questions,
    format_separate_documents,
    format_solved_examples,
    get_formatter,
)

__all__ = [
    "format_question_content",
    "format_answer_content",
    "FORMATTERS",
    "format_solved_examples",
    "format_assignment",
    "format_separate_documents",
    "get_formatter",
    "format_questions",
]
