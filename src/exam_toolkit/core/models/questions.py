"""
Module: questions

Purpose:
    Provides the Question dataclass - the input record for every export.
    One practice-exam question with its answer, optional choices and
    optional explanation. Immutable: formatting only reads it.

Key Classes:
    - Difficulty: Fixed difficulty levels
    - QuestionType: MCQ or subjective, derived from options
    - Question: Immutable question record

Dependencies:
    - dataclasses (std)
    - enum (std)
    - exam_toolkit.common.options: Answer/option matching

Used By:
    - core.models.documents.FormattedOutput
    - core.utils.serialization
    - builder.formatting
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from exam_toolkit.common.options import find_correct_option


class Difficulty(str, Enum):
    """Difficulty level of a question."""

    BEGINNER = "Beginner"
    AMATEUR = "Amateur"
    NINJA = "Ninja"


class QuestionType(str, Enum):
    """Question kind, derived from whether options are present."""

    MCQ = "MCQ"
    SUBJECTIVE = "Subjective"


@dataclass(frozen=True)
class Question:
    """
    Practice exam question (immutable).

    Attributes:
        id: Unique identifier within a batch
        stem: Question text (may be empty in degenerate input)
        answer: Canonical correct answer text
        options: Answer choices in display order; empty for subjective questions
        explanation: Optional rationale for the answer
        difficulty: Difficulty level
        subject: Free-text subject/topic label

    Invariants:
        - options is always a tuple (None and lists are normalized)
        - Content is never rewritten; empty strings are kept as-is

    Example:
        >>> q = Question(
        ...     id="q1",
        ...     stem="What is 2 + 2?",
        ...     answer="4",
        ...     options=("3", "4", "5", "6"),
        ...     explanation="Basic addition.",
        ...     difficulty=Difficulty.BEGINNER,
        ...     subject="Maths",
        ... )
        >>> q.is_multiple_choice
        True
    """

    id: str
    stem: str
    answer: str
    options: tuple[str, ...] = ()
    explanation: Optional[str] = None
    difficulty: Difficulty = Difficulty.BEGINNER
    subject: str = ""

    def __post_init__(self) -> None:
        """Normalize container and enum fields on construction."""
        if self.options is None:
            object.__setattr__(self, "options", ())
        elif not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))
        if not isinstance(self.difficulty, Difficulty):
            try:
                object.__setattr__(self, "difficulty", Difficulty(self.difficulty))
            except ValueError as e:
                raise ValueError(f"Unknown difficulty: {self.difficulty!r}") from e

    # ─────────────────────────────────────────────────────────────────────────
    # Derived Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_multiple_choice(self) -> bool:
        """True when the question has at least one option."""
        return len(self.options) > 0

    @property
    def question_type(self) -> QuestionType:
        return QuestionType.MCQ if self.is_multiple_choice else QuestionType.SUBJECTIVE

    @property
    def has_explanation(self) -> bool:
        return bool(self.explanation)

    @property
    def correct_option_index(self) -> Optional[int]:
        """
        Index of the option matching the answer.

        Matching is trim + case-insensitive exact comparison only.

        Returns:
            Zero-based option index, or None for subjective questions and
            answers that match no option
        """
        return find_correct_option(self.options, self.answer)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Optional fields are omitted when absent.
        """
        d = {
            "id": self.id,
            "stem": self.stem,
            "answer": self.answer,
            "difficulty": self.difficulty.value,
            "subject": self.subject,
        }
        if self.options:
            d["options"] = list(self.options)
        if self.explanation is not None:
            d["explanation"] = self.explanation
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation

        Returns:
            Question instance
        """
        return cls(
            id=str(data["id"]),
            stem=data.get("stem", ""),
            answer=data.get("answer", ""),
            options=tuple(data.get("options") or ()),
            explanation=data.get("explanation"),
            difficulty=data.get("difficulty", Difficulty.BEGINNER.value),
            subject=data.get("subject", ""),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, type={self.question_type.value}, "
            f"difficulty={self.difficulty.value}, subject={self.subject!r})"
        )
