"""
Serialization Utilities

Provides to/from dict and JSON utilities for Question and Document models.

- `serialize_*` / `deserialize_*` work on plain dicts
- `dumps_questions` / `loads_questions` work on JSON text
- Validation runs before deserialization unless disabled

No file access happens here; callers own persistence.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from ..models.documents import Document, FormattedOutput
from ..models.questions import Question
from ..schemas.validator import ValidationError, validate_question, validate_questions


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    The output will pass validation if the question itself is valid.
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any], *, validate: bool = True, strict: bool = False
) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the payload first
        strict: Also validate against the JSON schema

    Returns:
        Question instance

    Raises:
        ValidationError: If validate=True and data is invalid
        KeyError: If validate=False and "id" is missing
    """
    if validate:
        validate_question(data, strict=strict)
    return Question.from_dict(data)


def deserialize_questions(
    data: list[dict[str, Any]], *, validate: bool = True, strict: bool = False
) -> list[Question]:
    """
    Deserialize a list of question payloads, preserving order.

    Raises:
        ValidationError: If validate=True and any entry is invalid
    """
    if validate:
        validate_questions(data, strict=strict)
    return [Question.from_dict(item) for item in data]


def dumps_questions(questions: Iterable[Question]) -> str:
    """Serialize questions to a JSON array string (Unicode kept verbatim)."""
    return json.dumps([serialize_question(q) for q in questions], ensure_ascii=False)


def loads_questions(text: str, *, validate: bool = True, strict: bool = False) -> list[Question]:
    """
    Parse questions from JSON text.

    Accepts either a bare array or an object with a "questions" array,
    the shape returned by the question-generation endpoint.

    Raises:
        ValidationError: If the text is not valid JSON or fails validation
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", path="") from e

    if isinstance(data, dict) and "questions" in data:
        data = data["questions"]

    return deserialize_questions(data, validate=validate, strict=strict)


# ─────────────────────────────────────────────────────────────────────────────
# Document Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_formatted_output(output: FormattedOutput) -> dict[str, Any]:
    """
    Serialize a FormattedOutput to a dictionary.

    Example:
        >>> serialize_formatted_output(output)["format"]
        'separate-documents'
    """
    return {
        "format": output.format.value,
        "questions": [serialize_question(q) for q in output.questions],
        "documents": [doc.to_dict() for doc in output.documents],
    }


def deserialize_document(data: dict[str, Any]) -> Document:
    """
    Deserialize a Document from a dictionary.

    Raises:
        ValidationError: If required keys are missing or the type is unknown
    """
    missing = [f for f in ("title", "content", "type") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing]
        )
    try:
        return Document.from_dict(data)
    except ValueError as e:
        raise ValidationError(str(e), path="type") from e
