"""
Payload Validation Utilities

Validates question payloads (e.g. parsed from an LLM response or a saved
result set) before they become Question objects.

Rules:
- id, stem, answer, difficulty and subject are required
- id and stem must be non-empty strings
- options, when present, is a list of 2-6 strings
- explanation, when present, is a string
- difficulty is one of the known levels

Every failing field is collected into ValidationError.errors; the
exception's path points at the first one. Strict mode also checks the
payload against question.schema.json with jsonschema.

Formatting itself never validates: a Question that was constructed
directly with degenerate content is still rendered as-is.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.questions import Difficulty


MIN_OPTIONS = 2
MAX_OPTIONS = 6

REQUIRED_QUESTION_FIELDS = ("id", "stem", "answer", "difficulty", "subject")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a payload fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a single question payload.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid; errors lists every issue found
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question must be an object, got {type(data).__name__}",
        )

    missing = [f for f in REQUIRED_QUESTION_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    issues = _basic_issues(data)
    if strict:
        issues.extend(_schema_issues(data, "question"))

    if issues:
        path, _ = issues[0]
        messages = list(dict.fromkeys(message for _, message in issues))
        raise ValidationError("; ".join(messages), path=path, errors=messages)


def _basic_issues(data: dict[str, Any]) -> list[tuple[str, str]]:
    """Collect (path, message) pairs for every field that fails a basic check."""
    issues: list[tuple[str, str]] = []

    question_id = data["id"]
    if not isinstance(question_id, str) or not question_id.strip():
        issues.append(("id", f"Invalid id: {question_id!r} (must be a non-empty string)"))

    stem = data["stem"]
    if not isinstance(stem, str) or not stem.strip():
        issues.append(("stem", "Question stem cannot be empty"))

    for name in ("answer", "subject"):
        if not isinstance(data[name], str):
            issues.append((name, f"Invalid {name}: {data[name]!r} (must be a string)"))

    difficulty = data["difficulty"]
    allowed = [d.value for d in Difficulty]
    if difficulty not in allowed:
        issues.append(
            ("difficulty", f"Invalid difficulty: {difficulty!r} (must be one of {allowed})")
        )

    if data.get("options") is not None:
        issues.extend(_option_issues(data["options"], "options"))

    explanation = data.get("explanation")
    if explanation is not None and not isinstance(explanation, str):
        issues.append(("explanation", f"Invalid explanation: {explanation!r} (must be a string)"))

    return issues


def _option_issues(options: Any, path: str) -> list[tuple[str, str]]:
    """Check an options list."""
    if not isinstance(options, list):
        return [(path, "options must be a list")]

    issues = []
    if not (MIN_OPTIONS <= len(options) <= MAX_OPTIONS):
        issues.append(
            (path, f"Invalid option count: {len(options)} (must be {MIN_OPTIONS}-{MAX_OPTIONS})")
        )

    for i, option in enumerate(options):
        if not isinstance(option, str):
            issues.append(
                (f"{path}[{i}]", f"Option {i} must be a string, got {type(option).__name__}")
            )
    return issues


def _schema_issues(data: dict[str, Any], schema_name: str) -> list[tuple[str, str]]:
    """Collect every jsonschema error for data, ordered by location."""
    validator = jsonschema.Draft202012Validator(_load_schema(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    return [
        (_format_path(e.absolute_path), f"Schema validation failed: {e.message}")
        for e in errors
    ]


def _format_path(parts) -> str:
    path = ""
    for part in parts:
        path += f"[{part}]" if isinstance(part, int) else (f".{part}" if path else str(part))
    return path


def validate_questions(data: Any, *, strict: bool = False) -> None:
    """
    Validate a list of question payloads.

    Also rejects duplicate ids, since numbering and answer lookup rely on
    ids being unique within a batch.

    Raises:
        ValidationError: On the first invalid entry
    """
    if not isinstance(data, list):
        raise ValidationError(
            "questions must be a list",
            path="questions"
        )

    seen: set[str] = set()
    for i, item in enumerate(data):
        try:
            validate_question(item, strict=strict)
        except ValidationError as e:
            path = f"questions[{i}]" + (f".{e.path}" if e.path else "")
            raise ValidationError(str(e), path=path, errors=e.errors) from e

        if item["id"] in seen:
            raise ValidationError(
                f"Duplicate question id: {item['id']!r}",
                path=f"questions[{i}].id"
            )
        seen.add(item["id"])
