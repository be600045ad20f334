"""
Exam export builder.

Formats a question list into Documents and renders each Document to a
paginated PDF.

Pipeline:
    format_questions() → paginate() → render_layout() → PDF file

Example:
    >>> from exam_toolkit.builder import ExportConfig, export_questions
    >>> result = export_questions(questions, "assignment-format", ExportConfig(output_dir=Path("out")))
    >>> result.paths[0].name
    'Questions_and_Answers_2024-01-15_14-30.pdf'
"""

from .config import ExportConfig, load_export_config
from .controller import ExportResult, export_questions, generate_pdf, generate_pdfs
from .errors import (
    MAX_EXPORT_ATTEMPTS,
    ExportError,
    ExportErrorCode,
    can_retry,
    describe_error,
)
from .formatting import format_questions, get_formatter
from .layout import LayoutConfig, SeparatorStyle

__all__ = [
    "ExportConfig",
    "load_export_config",
    "ExportResult",
    "export_questions",
    "generate_pdf",
    "generate_pdfs",
    "MAX_EXPORT_ATTEMPTS",
    "ExportError",
    "ExportErrorCode",
    "can_retry",
    "describe_error",
    "format_questions",
    "get_formatter",
    "LayoutConfig",
    "SeparatorStyle",
]
