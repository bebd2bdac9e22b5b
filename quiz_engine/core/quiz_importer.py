"""Utilities for importing quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    TYPE: SINGLE | MULTIPLE | SCORE | SEQUENCE   (optional, default SINGLE)
    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    HINT: Optional hint, may continue on following lines.
    EXPLANATION: Optional explanation shown after evaluation.
    A: First answer
    B: Second answer       (up to H)
    CORRECT: A, C          (choice questions)
    SCORES: 0, 5, 10       (SCORE questions, one value per answer)
    COMMENT B: Optional feedback for a single answer.

Answers get ids in letter order (A is 0). For SEQUENCE questions the letter
order is the correct order; the answers are shuffled when the quiz is shown.

Example:

    TYPE: MULTIPLE
    Q: Which of these are prime?
    A: 2
    B: 4
    C: 7
    CORRECT: A, C
    COMMENT B: $4 = 2 \\cdot 2$
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from quiz_engine.constants.quiz_constants import ANSWER_LETTERS, BLOCK_SEPARATOR
from quiz_engine.core.errors import InvalidQuestionError, QuizError
from quiz_engine.core.markdown_math_renderer import MarkdownMathRenderer, renderer
from quiz_engine.core.models import Answer, QuestionType, QuizConfig
from quiz_engine.core.question import Question
from quiz_engine.core.quiz import Quiz

logger = logging.getLogger(__name__)


class QuizImportError(QuizError):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path | None
    questions: list[Question]
    config: QuizConfig = field(default_factory=QuizConfig)

    def create_quiz(self) -> Quiz:
        """Start a quiz session over the imported questions."""
        return Quiz(self.questions, self.config)


TYPE_KEYWORDS: dict[str, QuestionType] = {
    "SINGLE": QuestionType.SINGLE_CHOICE,
    "MULTIPLE": QuestionType.MULTIPLE_CHOICE,
    "SCORE": QuestionType.SCORE_CHOICE,
    "SEQUENCE": QuestionType.SEQUENCE,
}

_TEXT_SECTIONS = ("Q", "HINT", "EXPLANATION")


def load_quiz_from_file(
    file_path: Path,
    config: QuizConfig | None = None,
    render_markdown: bool = False,
) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    config = config if config is not None else QuizConfig()
    questions = parse_quiz_text(text, config, render_markdown=render_markdown)
    logger.info("Imported %d questions from %s", len(questions), file_path)
    return ImportedQuiz(source_path=file_path, questions=questions, config=config)


def parse_quiz_text(
    text: str,
    config: QuizConfig | None = None,
    render_markdown: bool = False,
) -> list[Question]:
    """Parse quiz text into questions, optionally rendering markdown to HTML."""
    config = config if config is not None else QuizConfig()
    markdown = renderer if render_markdown else None

    questions: list[Question] = []
    for number, block in enumerate(_split_blocks(text), start=1):
        try:
            questions.append(_parse_block(block, config, markdown))
        except (QuizImportError, InvalidQuestionError) as exc:
            raise QuizImportError(f"Question block {number}: {exc}") from exc

    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return questions


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == BLOCK_SEPARATOR:
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_block(
    block: str,
    config: QuizConfig,
    markdown: MarkdownMathRenderer | None,
) -> Question:
    sections: dict[str, list[str]] = {}
    answers: dict[str, list[str]] = {}
    comments: dict[str, list[str]] = {}
    question_type = QuestionType.SINGLE_CHOICE
    correct_letters: list[str] | None = None
    scores: list[float] | None = None
    current: list[str] | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        keyword, _, value = line.partition(":")
        keyword = keyword.strip().upper()

        if upper.startswith("TYPE:"):
            question_type = _parse_type(value.strip())
            current = None
            continue

        if keyword in _TEXT_SECTIONS and ":" in line:
            current = [value.strip()]
            sections[keyword] = current
            continue

        if upper.startswith("CORRECT:"):
            correct_letters = _parse_letters(value)
            current = None
            continue

        if upper.startswith("SCORES:"):
            scores = _parse_scores(value)
            current = None
            continue

        if keyword.startswith("COMMENT ") and ":" in line:
            letter = keyword[len("COMMENT "):].strip()
            if letter not in ANSWER_LETTERS or len(letter) != 1:
                raise QuizImportError(f"COMMENT must name an answer letter, got '{letter}'.")
            current = [value.strip()]
            comments[letter] = current
            continue

        if len(line) > 2 and line[0].upper() in ANSWER_LETTERS and line[1] == ":":
            current = [line[2:].strip()]
            answers[line[0].upper()] = current
            continue

        if current is not None:
            current.append(line)
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    text = _join(sections.get("Q"))
    if not text:
        raise QuizImportError("Question text missing (Q: ...)")

    if not answers:
        raise QuizImportError("Each question needs at least one answer (A: ...).")
    letters = ANSWER_LETTERS[: len(answers)]
    if sorted(answers) != list(letters):
        raise QuizImportError(
            f"Answers must be lettered consecutively from A (at most {len(ANSWER_LETTERS)})."
        )
    for letter in comments:
        if letter not in answers:
            raise QuizImportError(f"COMMENT {letter} refers to a missing answer.")

    correct = set(correct_letters or [])
    unknown = correct - set(letters)
    if unknown:
        raise QuizImportError(f"CORRECT refers to missing answers: {', '.join(sorted(unknown))}.")
    if question_type is QuestionType.SEQUENCE and correct_letters is not None:
        raise QuizImportError("SEQUENCE questions take their order from the answer letters; drop CORRECT.")

    if question_type is QuestionType.SCORE_CHOICE and scores is None:
        raise QuizImportError("SCORE questions need a SCORES line.")
    if scores is not None and len(scores) != len(letters):
        raise QuizImportError(
            f"SCORES lists {len(scores)} values for {len(letters)} answers."
        )

    answer_list = [
        Answer(
            id=answer_id,
            content=_render_inline(markdown, _join(answers[letter])),
            correct=letter in correct,
            comment=_render_inline(markdown, _join(comments.get(letter))),
            score=scores[answer_id] if scores is not None else 0,
        )
        for answer_id, letter in enumerate(letters)
    ]
    if any(not answer.content for answer in answer_list):
        raise QuizImportError("Answer text cannot be empty.")

    return Question(
        text=_render_block(markdown, text),
        answers=answer_list,
        question_type=question_type,
        config=config,
        explanation=_render_block(markdown, _join(sections.get("EXPLANATION"))),
        hint=_render_block(markdown, _join(sections.get("HINT"))),
    )


def _parse_type(raw_value: str) -> QuestionType:
    try:
        return TYPE_KEYWORDS[raw_value.upper()]
    except KeyError:
        raise QuizImportError(
            f"TYPE must be one of {', '.join(TYPE_KEYWORDS)}, got '{raw_value}'."
        ) from None


def _parse_letters(raw_value: str) -> list[str]:
    letters = [part.strip().upper() for part in raw_value.split(",") if part.strip()]
    if not letters:
        raise QuizImportError("CORRECT must list at least one answer letter.")
    return letters


def _parse_scores(raw_value: str) -> list[float]:
    scores: list[float] = []
    for part in raw_value.split(","):
        part = part.strip()
        try:
            scores.append(int(part))
        except ValueError:
            try:
                scores.append(float(part))
            except ValueError as exc:
                raise QuizImportError(f"SCORES must be numbers, got '{part}'.") from exc
    return scores


def _join(lines: list[str] | None) -> str:
    if not lines:
        return ""
    return "\n".join(lines).strip()


def _render_block(markdown: MarkdownMathRenderer | None, text: str) -> str:
    return markdown.render_fragment(text) if markdown else text


def _render_inline(markdown: MarkdownMathRenderer | None, text: str) -> str:
    return markdown.render_inline(text) if markdown else text
