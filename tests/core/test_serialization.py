"""
Unit Tests for Serialization

Tests for JSON loading of question payloads and document serialization.
"""

import json

import pytest

from exam_toolkit.core.models import Document, DocumentType, Difficulty
from exam_toolkit.core.schemas.validator import ValidationError
from exam_toolkit.core.utils.serialization import (
    deserialize_document,
    deserialize_question,
    dumps_questions,
    loads_questions,
    serialize_formatted_output,
)
from exam_toolkit.builder.formatting import format_questions


class TestQuestionSerialization:
    """Tests for question (de)serialization."""

    def test_deserialize_when_valid_then_creates_question(self, question_payload):
        q = deserialize_question(question_payload)

        assert q.id == "gen-1"
        assert q.options == ("Oxygen", "Carbon dioxide", "Nitrogen", "Helium")
        assert q.difficulty is Difficulty.NINJA
        assert q.correct_option_index == 1

    def test_deserialize_when_invalid_and_validation_off_then_still_loads(self, question_payload):
        question_payload["stem"] = ""

        q = deserialize_question(question_payload, validate=False)

        assert q.stem == ""

    def test_loads_when_strict_and_invalid_then_schema_errors_reported(self, question_payload):
        question_payload["subject"] = None
        text = json.dumps([question_payload])

        with pytest.raises(ValidationError) as exc_info:
            loads_questions(text, strict=True)

        assert exc_info.value.path == "questions[0].subject"
        assert any(e.startswith("Schema validation failed") for e in exc_info.value.errors)

    def test_loads_when_wrapped_in_questions_key_then_unwraps(self, question_payload):
        text = json.dumps({"questions": [question_payload]})

        questions = loads_questions(text)

        assert [q.id for q in questions] == ["gen-1"]

    def test_loads_when_invalid_json_then_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Invalid JSON"):
            loads_questions("{not json")

    def test_dumps_when_unicode_then_kept_verbatim(self, question_payload):
        question_payload["stem"] = "Solve ∫x dx 🧮"
        q = deserialize_question(question_payload)

        text = dumps_questions([q])

        assert "∫x dx 🧮" in text
        assert loads_questions(text)[0] == q


class TestDocumentSerialization:
    """Tests for document (de)serialization."""

    def test_serialize_formatted_output_when_split_then_two_documents(self, sample_questions):
        output = format_questions(sample_questions, "separate-documents")

        data = serialize_formatted_output(output)

        assert data["format"] == "separate-documents"
        assert [d["type"] for d in data["documents"]] == ["questions", "answers"]
        assert len(data["questions"]) == 2

    def test_deserialize_document_when_valid_then_creates_document(self):
        doc = deserialize_document({"title": "Questions", "content": "x", "type": "questions"})

        assert doc == Document("Questions", "x", DocumentType.QUESTIONS)

    def test_deserialize_document_when_missing_content_then_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            deserialize_document({"title": "Questions", "type": "questions"})

        assert exc_info.value.errors == ["Missing field: content"]

    def test_deserialize_document_when_unknown_type_then_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            deserialize_document({"title": "T", "content": "", "type": "appendix"})

        assert exc_info.value.path == "type"
