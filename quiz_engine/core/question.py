"""Question state and per-type scoring rules."""

from __future__ import annotations

from dataclasses import replace
import logging
import random
from typing import Callable, Iterable

from PySide6.QtCore import QObject, Signal

from quiz_engine.constants.quiz_constants import SCORE_BASELINE, UNSCORED_POINTS_PER_QUESTION
from quiz_engine.core.errors import (
    EmptyAnswersError,
    InvalidQuestionError,
    TooManyCorrectAnswersError,
    UnknownAnswerError,
)
from quiz_engine.core.models import Answer, QuestionType, QuizConfig

logger = logging.getLogger(__name__)

_SINGLE_ANSWER_TYPES = frozenset({QuestionType.SINGLE_CHOICE, QuestionType.SCORE_CHOICE})


class Question(QObject):
    """One quiz item: its answers, the user's selection and a scoring rule.

    The scoring rule is picked by ``question_type``. ``selected`` always holds
    answer ids, never positions, so it stays valid when answers are reshuffled.
    """

    hint_changed = Signal(bool)
    selection_changed = Signal(object)

    def __init__(
        self,
        text: str,
        answers: Iterable[Answer],
        question_type: QuestionType = QuestionType.SINGLE_CHOICE,
        config: QuizConfig | None = None,
        explanation: str = "",
        hint: str = "",
        rng: random.Random | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        answers = list(answers)
        if not answers:
            raise EmptyAnswersError("No answers for question provided.")

        question_type = QuestionType(question_type)
        if question_type in _SINGLE_ANSWER_TYPES:
            n_correct = sum(1 for answer in answers if answer.correct)
            if n_correct > 1:
                raise TooManyCorrectAnswersError(
                    f"{question_type.value} questions can not have more than one correct answer."
                )

        answers_by_id = {answer.id: answer for answer in answers}
        if len(answers_by_id) != len(answers):
            raise InvalidQuestionError("Answer ids must be unique within a question.")

        if config is None:
            config = QuizConfig()
        if question_type is QuestionType.SEQUENCE:
            # Sequence questions are always shuffled; the caller's config stays as is.
            config = replace(config, shuffle_answers=True)

        self.text = text
        self.explanation = explanation
        self.hint = hint
        self.question_type = question_type
        self.config = config
        self.solved: bool = False
        self.visited: bool = False
        self.score: float = 0
        self._answers = answers
        self._answers_by_id = answers_by_id
        self._selected: list[int] = []
        self._show_hint: bool = False
        self._rng = rng if rng is not None else random.Random()
        self.reset()

    def __repr__(self) -> str:
        return f"Question({self.question_type.value}, {self.text!r})"

    @property
    def answers(self) -> list[Answer]:
        """Answers in their current (possibly shuffled) display order."""
        return list(self._answers)

    @property
    def selected(self) -> list[int]:
        return list(self._selected)

    @selected.setter
    def selected(self, answer_ids: Iterable[int]) -> None:
        answer_ids = list(answer_ids)
        for answer_id in answer_ids:
            if answer_id not in self._answers_by_id:
                raise UnknownAnswerError(
                    f"Answer id {answer_id} does not belong to question {self.text!r}."
                )
        self._selected = answer_ids
        self.selection_changed.emit(self.selected)

    @property
    def show_hint(self) -> bool:
        return self._show_hint

    def answer_by_id(self, answer_id: int) -> Answer:
        try:
            return self._answers_by_id[answer_id]
        except KeyError:
            raise UnknownAnswerError(
                f"Answer id {answer_id} does not belong to question {self.text!r}."
            ) from None

    def enable_hint(self) -> None:
        self._set_show_hint(True)

    def mark_visited(self) -> None:
        self.visited = True

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def reset(self) -> None:
        """Clear the user's progress and reshuffle answers when configured."""
        had_selection = bool(self._selected)
        self._selected = []
        self.solved = False
        self.visited = False
        self.score = 0
        self._set_show_hint(False)
        if self.config.shuffle_answers:
            self._rng.shuffle(self._answers)
        if had_selection:
            self.selection_changed.emit([])

    def is_correct(self) -> bool:
        """Score the current selection, updating ``solved`` and ``score``."""
        evaluator = _EVALUATORS[self.question_type]
        self.solved, self.score = evaluator(self)
        logger.debug(
            "Evaluated %s: solved=%s score=%s", self, self.solved, self.score
        )
        return self.solved

    def get_max_score(self) -> float:
        if self.question_type is QuestionType.SCORE_CHOICE:
            return max([SCORE_BASELINE, *(answer.score for answer in self._answers)])
        return UNSCORED_POINTS_PER_QUESTION

    def get_min_score(self) -> float:
        if self.question_type is QuestionType.SCORE_CHOICE:
            return min([SCORE_BASELINE, *(answer.score for answer in self._answers)])
        return UNSCORED_POINTS_PER_QUESTION

    def _set_show_hint(self, value: bool) -> None:
        if self._show_hint != value:
            self._show_hint = value
            self.hint_changed.emit(value)


def _binary_result(question: Question, solved: bool) -> tuple[bool, float]:
    return solved, question.get_max_score() if solved else 0


def _evaluate_choice(question: Question) -> tuple[bool, float]:
    expected = sorted(answer.id for answer in question.answers if answer.correct)
    return _binary_result(question, expected == sorted(question.selected))


def _evaluate_sequence(question: Question) -> tuple[bool, float]:
    # Ids follow authored order, so sorting them gives the expected sequence.
    expected = sorted(answer.id for answer in question.answers)
    return _binary_result(question, expected == question.selected)


def _evaluate_score_choice(question: Question) -> tuple[bool, float]:
    selected = question.selected
    score = question.answer_by_id(selected[0]).score if selected else 0
    solved = score == question.get_max_score()
    # The minimum check wins over the maximum check.
    if score == question.get_min_score():
        score = 0
        solved = False
    return solved, score


def _evaluate_unsolvable(question: Question) -> tuple[bool, float]:
    return False, 0


_EVALUATORS: dict[QuestionType, Callable[[Question], tuple[bool, float]]] = {
    QuestionType.SINGLE_CHOICE: _evaluate_choice,
    QuestionType.MULTIPLE_CHOICE: _evaluate_choice,
    QuestionType.SCORE_CHOICE: _evaluate_score_choice,
    QuestionType.SEQUENCE: _evaluate_sequence,
    QuestionType.BLANKS: _evaluate_unsolvable,
    QuestionType.PAIRS: _evaluate_unsolvable,
}
