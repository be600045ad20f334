"""
Module: documents

Purpose:
    Output models of the formatting stage. A Document is the only thing
    the PDF layout engine sees: a title, a markdown-like content string
    and a type tag. FormattedOutput bundles the documents produced for
    one export request.

Key Classes:
    - OutputFormat: Selector for the three formatting strategies
    - DocumentType: What a document contains (questions/answers/combined)
    - Document: Title + content + type
    - FormattedOutput: Format, original questions, ordered documents

Content Dialect:
    - "\\n" separates paragraphs
    - A line that is exactly "---" is an explicit separator
    - A line starting with "# " is a top-level heading
    - "**text**" pairs mark bold spans

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.formatting: Produces FormattedOutput
    - builder.controller: Renders Documents to PDF
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .questions import Question


class OutputFormat(str, Enum):
    """
    Export layout selector.

    - SOLVED_EXAMPLES: answer directly after each question
    - ASSIGNMENT: all questions, then an answer key appendix
    - SEPARATE_DOCUMENTS: independent question and answer documents
    """

    SOLVED_EXAMPLES = "solved-examples"
    ASSIGNMENT = "assignment-format"
    SEPARATE_DOCUMENTS = "separate-documents"


class DocumentType(str, Enum):
    """What a document's content holds, independent of the OutputFormat."""

    QUESTIONS = "questions"
    ANSWERS = "answers"
    COMBINED = "combined"


@dataclass(frozen=True)
class Document:
    """
    One renderable document (immutable).

    Attributes:
        title: Human-readable name, used for the PDF header and optionally the filename
        content: Markdown-like content string (see module docstring)
        type: DocumentType tag

    Example:
        >>> doc = Document("Questions", "**Question 1:** Why?\\n\\n", DocumentType.QUESTIONS)
        >>> doc.type.value
        'questions'
    """

    title: str
    content: str
    type: DocumentType

    def __post_init__(self) -> None:
        """Coerce string type tags into DocumentType."""
        if not isinstance(self.type, DocumentType):
            try:
                object.__setattr__(self, "type", DocumentType(self.type))
            except ValueError as e:
                raise ValueError(f"Unknown document type: {self.type!r}") from e

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content, "type": self.type.value}

    @classmethod
    def from_dict(cls, data: dict) -> Document:
        return cls(title=data["title"], content=data["content"], type=data["type"])


@dataclass(frozen=True)
class FormattedOutput:
    """
    Complete formatting result (immutable).

    Constructed fresh for every export request and never cached.

    Attributes:
        format: OutputFormat that produced the documents
        questions: The original questions, unmodified and in input order
        documents: Documents in output order

    Example:
        >>> output = format_questions(questions, OutputFormat.SEPARATE_DOCUMENTS)
        >>> output.document_count
        2
    """

    format: OutputFormat
    questions: tuple[Question, ...]
    documents: tuple[Document, ...]

    @property
    def document_count(self) -> int:
        return len(self.documents)

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def get_document(self, doc_type: DocumentType) -> Optional[Document]:
        """Return the first document of the given type, or None."""
        for doc in self.documents:
            if doc.type == doc_type:
                return doc
        return None
