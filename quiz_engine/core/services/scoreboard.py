"""Service collecting per-question outcomes for the results page."""

from __future__ import annotations

from dataclasses import dataclass

from quiz_engine.core.models import QuestionType
from quiz_engine.core.question import Question


@dataclass(slots=True)
class ScoreEntry:
    """Mutable outcome entry used internally."""

    position: int
    text: str
    question_type: QuestionType
    solved: bool = False
    score: float = 0
    max_score: float = 0


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """Immutable per-question outcome returned to consumers."""

    position: int
    text: str
    question_type: QuestionType
    solved: bool
    score: float
    max_score: float


@dataclass(frozen=True, slots=True)
class QuizResults:
    """Immutable snapshot of an evaluated quiz."""

    user_points: float
    max_points: float
    user_level: int
    questions: tuple[QuestionResult, ...]

    @property
    def solved_count(self) -> int:
        return sum(1 for result in self.questions if result.solved)


class Scoreboard:
    """Tracks the outcome of each question of the latest evaluation."""

    def __init__(self) -> None:
        self._entries: dict[int, ScoreEntry] = {}

    def record_question(self, position: int, question: Question) -> None:
        """Store the outcome of an already evaluated question."""
        entry = self._entries.get(position)
        if entry is None:
            entry = ScoreEntry(
                position=position,
                text=question.text,
                question_type=question.question_type,
            )
            self._entries[position] = entry

        entry.solved = question.solved
        entry.score = question.score
        entry.max_score = question.get_max_score()

    def snapshot(self, user_points: float, max_points: float, user_level: int) -> QuizResults:
        """Return the recorded outcomes in quiz order."""
        rows = tuple(
            QuestionResult(
                position=entry.position,
                text=entry.text,
                question_type=entry.question_type,
                solved=entry.solved,
                score=entry.score,
                max_score=entry.max_score,
            )
            for entry in sorted(self._entries.values(), key=lambda e: e.position)
        )
        return QuizResults(
            user_points=user_points,
            max_points=max_points,
            user_level=user_level,
            questions=rows,
        )

    def clear(self) -> None:
        """Forget all recorded outcomes."""
        self._entries.clear()
