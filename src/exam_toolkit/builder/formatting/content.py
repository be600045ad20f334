"""
Module: builder.formatting.content

Purpose:
    Build the markdown-like text blocks shared by every formatting
    strategy: one block per question and one per answer. "Question N" and
    "Answer N" carry the same number for the same question in every
    document.

Key Functions:
    - format_question_content(): Bold label, stem, lettered options
    - format_answer_content(): Bold label, answer, optional explanation

Dependencies:
    - exam_toolkit.common.options: Option labels
    - exam_toolkit.core.models: Question

Used By:
    - builder.formatting.strategies
"""

from __future__ import annotations

from exam_toolkit.common.options import format_option
from exam_toolkit.core.models import Question

SEPARATOR_LINE = "---"
QUESTIONS_HEADING = "# Questions"
ANSWER_KEY_HEADING = "# Answer Key"


def question_label(number: int) -> str:
    return f"**Question {number}:**"


def answer_label(number: int) -> str:
    return f"**Answer {number}:**"


EXPLANATION_LABEL = "**Explanation:**"


def format_question_content(question: Question, index: int) -> str:
    """
    Format a question block.

    Args:
        question: Question to format
        index: Zero-based position in the input list (rendered as index + 1)

    Returns:
        Block ending in a blank line, e.g.
        "**Question 1:** What is 2 + 2?\\n\\nA. 3\\nB. 4\\n\\n"
    """
    number = index + 1
    content = f"{question_label(number)} {question.stem}\n\n"

    if question.options:
        for opt_index, option in enumerate(question.options):
            content += f"{format_option(option, opt_index)}\n"
        content += "\n"

    return content


def format_answer_content(question: Question, index: int) -> str:
    """
    Format an answer block.

    The explanation line is omitted when the explanation is None or empty.

    Args:
        question: Question whose answer to format
        index: Zero-based position in the input list (rendered as index + 1)

    Returns:
        Block ending in a blank line
    """
    number = index + 1
    content = f"{answer_label(number)} {question.answer}\n\n"

    if question.explanation:
        content += f"{EXPLANATION_LABEL} {question.explanation}\n\n"

    return content
