"""Utilities for exporting quizzes to the plain-text format used for imports.

Text fields are written line by line after their marker. Blank lines end a
block in that format, so multi-paragraph text is rejected with ``ValueError``.
"""

from __future__ import annotations

from pathlib import Path

from quiz_engine.constants.quiz_constants import ANSWER_LETTERS, BLOCK_SEPARATOR
from quiz_engine.core.models import QuestionType
from quiz_engine.core.question import Question
from quiz_engine.core.quiz_importer import TYPE_KEYWORDS

_TYPE_NAMES = {question_type: keyword for keyword, question_type in TYPE_KEYWORDS.items()}


def save_quiz_to_file(file_path: Path, questions: list[Question]) -> None:
    """Persist the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty quiz.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    document = serialize_questions(questions)
    file_path.write_text(document, encoding="utf-8")


def serialize_questions(questions: list[Question]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    return f"\n\n{BLOCK_SEPARATOR}\n\n".join(blocks) + "\n"


def _serialize_question(question: Question) -> str:
    type_name = _TYPE_NAMES.get(question.question_type)
    if type_name is None:
        raise ValueError(f"{question.question_type.value} questions cannot be exported.")

    # Letters follow answer ids, not the current shuffled order.
    answers = sorted(question.answers, key=lambda answer: answer.id)
    if len(answers) > len(ANSWER_LETTERS):
        raise ValueError(
            f"Cannot export more than {len(ANSWER_LETTERS)} answers per question."
        )

    lines: list[str] = [f"TYPE: {type_name}"]
    lines.extend(_marker_lines("Q", question.text))
    if question.hint:
        lines.extend(_marker_lines("HINT", question.hint))
    if question.explanation:
        lines.extend(_marker_lines("EXPLANATION", question.explanation))

    for letter, answer in zip(ANSWER_LETTERS, answers):
        lines.extend(_marker_lines(letter, answer.content))

    correct = [letter for letter, answer in zip(ANSWER_LETTERS, answers) if answer.correct]
    if correct and question.question_type is not QuestionType.SEQUENCE:
        lines.append(f"CORRECT: {', '.join(correct)}")

    if question.question_type is QuestionType.SCORE_CHOICE:
        lines.append(f"SCORES: {', '.join(format(answer.score, 'g') for answer in answers)}")

    for letter, answer in zip(ANSWER_LETTERS, answers):
        if answer.comment:
            lines.extend(_marker_lines(f"COMMENT {letter}", answer.comment))

    return "\n".join(lines)


def _marker_lines(marker: str, text: str) -> list[str]:
    text_lines = text.strip().splitlines()
    # A blank line ends the block on import.
    if any(not line.strip() for line in text_lines):
        raise ValueError(f"{marker} text cannot contain blank lines.")
    if not text_lines:
        return [f"{marker}: "]
    return [f"{marker}: {text_lines[0]}", *text_lines[1:]]
