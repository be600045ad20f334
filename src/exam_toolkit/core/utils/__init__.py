"""
Utils Package

Serialization helpers for core models.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    deserialize_questions,
    dumps_questions,
    loads_questions,
    serialize_formatted_output,
    deserialize_document,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "deserialize_questions",
    "dumps_questions",
    "loads_questions",
    "serialize_formatted_output",
    "deserialize_document",
]
