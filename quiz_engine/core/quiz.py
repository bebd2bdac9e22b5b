"""Quiz session: navigation state, evaluation and observable flags."""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable

from PySide6.QtCore import QObject, Signal, SignalInstance

from quiz_engine.constants.quiz_constants import LEVEL_SCALE, UNSCORED_POINTS_PER_QUESTION
from quiz_engine.core.errors import EmptyQuizError, QuizNotEvaluatedError
from quiz_engine.core.models import QuizConfig
from quiz_engine.core.question import Question
from quiz_engine.core.services.scoreboard import QuizResults, Scoreboard

logger = logging.getLogger(__name__)


class Quiz(QObject):
    """Ordered session of questions with navigation and scoring.

    Positions ``0 .. len(questions) - 1`` are questions; ``len(questions)`` is
    the results page. The derived flags are read-only and every change is
    published through the matching ``*_changed`` signal.
    """

    index_changed = Signal(int)
    active_changed = Signal(object)
    on_first_changed = Signal(bool)
    on_last_changed = Signal(bool)
    on_results_changed = Signal(bool)
    all_visited_changed = Signal(bool)
    is_evaluated_changed = Signal(bool)

    def __init__(
        self,
        questions: Iterable[Question],
        config: QuizConfig | None = None,
        rng: random.Random | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.config = config if config is not None else QuizConfig()
        self._rng = rng if rng is not None else random.Random()

        questions = list(questions)
        if self.config.shuffle_questions:
            n_questions = self.config.n_questions or len(questions)
            questions = self._rng.sample(questions, min(n_questions, len(questions)))
        if not questions:
            raise EmptyQuizError("No questions for quiz provided.")

        self.questions: list[Question] = questions
        self._scoreboard = Scoreboard()
        self._index: int = 0
        self._on_first: bool = True
        self._on_last: bool = len(questions) == 1
        self._on_results: bool = False
        self._all_visited: bool = len(questions) == 1
        self._is_evaluated: bool = False
        self.user_points: float = 0
        self.user_level: int = 0

        self.questions[0].mark_visited()
        self.max_points: float = self.get_max_points()
        logger.info(
            "Quiz ready: %d questions, %s max points", len(self.questions), self.max_points
        )

    # --- Observable state ---

    @property
    def index(self) -> int:
        return self._index

    @property
    def active(self) -> Question | None:
        """The current question, or ``None`` on the results page."""
        if self._index < len(self.questions):
            return self.questions[self._index]
        return None

    @property
    def on_first(self) -> bool:
        return self._on_first

    @property
    def on_last(self) -> bool:
        return self._on_last

    @property
    def on_results(self) -> bool:
        return self._on_results

    @property
    def all_visited(self) -> bool:
        return self._all_visited

    @property
    def is_evaluated(self) -> bool:
        return self._is_evaluated

    # --- Navigation ---

    def jump(self, index: int) -> bool:
        """Move to a question or, with ``index == len(questions)``, to the results."""
        count = len(self.questions)
        if 0 <= index <= count - 1:
            self._set_index(index)
            self._set_active()
            self._update("_all_visited", self._check_all_visited(), self.all_visited_changed)
            self._update("_on_results", False, self.on_results_changed)
            self._update("_on_last", index == count - 1, self.on_last_changed)
            self._update("_on_first", index == 0, self.on_first_changed)
            return True

        if index == count:
            self.user_points = self.evaluate()
            self.user_level = self._compute_level(self.user_points)
            self._update("_on_results", True, self.on_results_changed)
            self._update("_on_last", False, self.on_last_changed)
            self._update("_on_first", False, self.on_first_changed)
            self._set_index(index)
            self.active_changed.emit(None)
            logger.info(
                "Quiz finished: %s/%s points, level %d",
                self.user_points,
                self.max_points,
                self.user_level,
            )
            return True

        logger.debug("Rejected jump to %s (valid range 0..%d)", index, count)
        return False

    def next(self) -> bool:
        return self.jump(self._index + 1)

    def previous(self) -> bool:
        return self.jump(self._index - 1)

    def reset(self) -> bool:
        """Start over: clear progress on every question and return to the first one."""
        self._update("_on_last", False, self.on_last_changed)
        self._update("_on_results", False, self.on_results_changed)
        self._update("_all_visited", False, self.all_visited_changed)
        self._update("_is_evaluated", False, self.is_evaluated_changed)
        self.user_points = 0
        self.user_level = 0
        self._scoreboard.clear()

        for question in self.questions:
            question.reset()
        logger.debug("Quiz reset")
        return self.jump(0)

    # --- Scoring ---

    def evaluate(self) -> float:
        """Score every question and return the total.

        Re-runs ``is_correct`` on each question, so per-question ``solved`` and
        ``score`` reflect the current selections afterwards.
        """
        points: float = 0
        self._scoreboard.clear()
        for position, question in enumerate(self.questions):
            if question.is_correct():
                if self.config.scored:
                    points += question.score
                else:
                    points += UNSCORED_POINTS_PER_QUESTION
            self._scoreboard.record_question(position, question)
        self._update("_is_evaluated", True, self.is_evaluated_changed)
        return points

    def get_max_points(self) -> float:
        if self.config.scored:
            return sum(question.get_max_score() for question in self.questions)
        return len(self.questions) * UNSCORED_POINTS_PER_QUESTION

    def results(self) -> QuizResults:
        """Snapshot of the outcome shown on the results page."""
        if not self._on_results:
            raise QuizNotEvaluatedError("Results are only available on the results page.")
        return self._scoreboard.snapshot(self.user_points, self.max_points, self.user_level)

    def set_shuffle_seed(self, seed: int | None) -> None:
        """Seed the quiz and all of its questions for reproducible shuffling."""
        self._rng.seed(seed)
        for question in self.questions:
            question.set_shuffle_seed(seed)

    # --- Internals ---

    def _compute_level(self, points: float) -> int:
        if not self.max_points:
            return 0
        # Round half up.
        return math.floor(LEVEL_SCALE * points / self.max_points + 0.5)

    def _check_all_visited(self) -> bool:
        return all(question.visited for question in self.questions)

    def _set_index(self, index: int) -> None:
        if self._index != index:
            self._index = index
            self.index_changed.emit(index)

    def _set_active(self) -> None:
        question = self.questions[self._index]
        question.mark_visited()
        self.active_changed.emit(question)

    def _update(self, attribute: str, value: bool, signal: SignalInstance) -> None:
        if getattr(self, attribute) != value:
            setattr(self, attribute, value)
            signal.emit(value)
