"""
Module: builder.formatting.strategies

Purpose:
    The three formatting strategies and the OutputFormat dispatch table.
    Each strategy is a pure function with the same shape:
    (questions) -> FormattedOutput.

Key Functions:
    - format_solved_examples(): Answer directly after each question
    - format_assignment(): Questions section, separator, answer key section
    - format_separate_documents(): Independent questions and answers documents
    - get_formatter(): Look up the strategy for an OutputFormat
    - format_questions(): Format in one call

Rules (all strategies):
    - Questions are numbered 1..N in input order
    - An empty question list still yields well-formed documents
    - Missing options/explanations are omitted, never an error
    - Text is passed through verbatim (no escaping or sanitizing)

Dependencies:
    - builder.formatting.content: Shared question/answer blocks
    - exam_toolkit.core.models: Question, Document, FormattedOutput

Used By:
    - builder.controller: export_questions()
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Sequence, Union

from exam_toolkit.core.models import (
    Document,
    DocumentType,
    FormattedOutput,
    OutputFormat,
    Question,
)

from .content import (
    ANSWER_KEY_HEADING,
    QUESTIONS_HEADING,
    SEPARATOR_LINE,
    format_answer_content,
    format_question_content,
)

logger = logging.getLogger(__name__)

SOLVED_EXAMPLES_TITLE = "Solved Examples"
ASSIGNMENT_TITLE = "Assignment with Answer Key"
QUESTIONS_TITLE = "Questions"
ANSWER_KEY_TITLE = "Answer Key"

Formatter = Callable[[Sequence[Question]], FormattedOutput]


def format_solved_examples(questions: Sequence[Question]) -> FormattedOutput:
    """
    Interleave each question with its answer and explanation.

    No separator lines are emitted between questions: "---" is an
    explicit page break for the renderer, and solved examples flow
    continuously.

    Returns:
        FormattedOutput with one COMBINED document
    """
    content = ""
    for index, question in enumerate(questions):
        content += format_question_content(question, index)
        content += format_answer_content(question, index)

    document = Document(
        title=SOLVED_EXAMPLES_TITLE,
        content=content,
        type=DocumentType.COMBINED,
    )

    return FormattedOutput(
        format=OutputFormat.SOLVED_EXAMPLES,
        questions=tuple(questions),
        documents=(document,),
    )


def format_assignment(questions: Sequence[Question]) -> FormattedOutput:
    """
    All questions first, then the answer key.

    Layout:
        # Questions
        <question blocks>
        ---
        # Answer Key
        <answer blocks>

    The headings and separator are always present, so their relative
    order holds even for an empty list.

    Returns:
        FormattedOutput with one COMBINED document
    """
    questions_content = f"{QUESTIONS_HEADING}\n\n"
    for index, question in enumerate(questions):
        questions_content += format_question_content(question, index)

    answers_content = f"{ANSWER_KEY_HEADING}\n\n"
    for index, question in enumerate(questions):
        answers_content += format_answer_content(question, index)

    content = f"{questions_content}\n{SEPARATOR_LINE}\n\n{answers_content}"

    document = Document(
        title=ASSIGNMENT_TITLE,
        content=content,
        type=DocumentType.COMBINED,
    )

    return FormattedOutput(
        format=OutputFormat.ASSIGNMENT,
        questions=tuple(questions),
        documents=(document,),
    )


def format_separate_documents(questions: Sequence[Question]) -> FormattedOutput:
    """
    Two independent documents with no shared information.

    The questions document holds stems and options only; the answers
    document holds answers and explanations only.

    Returns:
        FormattedOutput with QUESTIONS and ANSWERS documents, in that order
    """
    questions_content = ""
    answers_content = ""
    for index, question in enumerate(questions):
        questions_content += format_question_content(question, index)
        answers_content += format_answer_content(question, index)

    questions_document = Document(
        title=QUESTIONS_TITLE,
        content=questions_content,
        type=DocumentType.QUESTIONS,
    )
    answers_document = Document(
        title=ANSWER_KEY_TITLE,
        content=answers_content,
        type=DocumentType.ANSWERS,
    )

    return FormattedOutput(
        format=OutputFormat.SEPARATE_DOCUMENTS,
        questions=tuple(questions),
        documents=(questions_document, answers_document),
    )


FORMATTERS: Dict[OutputFormat, Formatter] = {
    OutputFormat.SOLVED_EXAMPLES: format_solved_examples,
    OutputFormat.ASSIGNMENT: format_assignment,
    OutputFormat.SEPARATE_DOCUMENTS: format_separate_documents,
}


def get_formatter(output_format: Union[OutputFormat, str]) -> Formatter:
    """
    Look up the strategy for an output format.

    Args:
        output_format: OutputFormat member or its string value

    Returns:
        Formatting function. Unknown values fall back to solved examples.

    Example:
        >>> get_formatter("assignment-format") is format_assignment
        True
    """
    try:
        key = OutputFormat(output_format)
    except ValueError:
        logger.warning(
            f"Unknown output format {output_format!r}, "
            f"falling back to {OutputFormat.SOLVED_EXAMPLES.value}"
        )
        key = OutputFormat.SOLVED_EXAMPLES
    return FORMATTERS[key]


def format_questions(
    questions: Sequence[Question],
    output_format: Union[OutputFormat, str],
) -> FormattedOutput:
    """
    Format questions with the strategy for output_format.

    Example:
        >>> output = format_questions(questions, OutputFormat.ASSIGNMENT)
        >>> output.documents[0].title
        'Assignment with Answer Key'
    """
    formatter = get_formatter(output_format)
    output = formatter(questions)
    logger.debug(
        f"Formatted {len(output.questions)} questions as {output.format.value} "
        f"into {output.document_count} document(s)"
    )
    return output
