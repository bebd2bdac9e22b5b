"""Domain models for the quiz engine."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping


class QuestionType(str, Enum):
    """Scoring variants a question can take."""

    SINGLE_CHOICE = "SingleChoice"
    MULTIPLE_CHOICE = "MultipleChoice"
    SCORE_CHOICE = "ScoreChoice"
    SEQUENCE = "Sequence"
    # Placeholders: never solvable.
    BLANKS = "Blanks"
    PAIRS = "Pairs"


@dataclass(frozen=True, slots=True)
class Answer:
    """One selectable option of a question."""

    id: int
    content: str
    correct: bool = False
    comment: str = ""
    score: float = 0


# camelCase keys as produced by external config loaders
_CONFIG_ALIASES = {
    "shuffleAnswers": "shuffle_answers",
    "shuffleQuestions": "shuffle_questions",
    "nQuestions": "n_questions",
}


@dataclass(slots=True)
class QuizConfig:
    """Options recognized by questions and quizzes."""

    shuffle_answers: bool = False
    shuffle_questions: bool = False
    n_questions: int | None = None
    scored: bool = False

    def __post_init__(self) -> None:
        if self.n_questions is not None and self.n_questions < 1:
            raise ValueError("n_questions must be a positive integer.")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "QuizConfig":
        """Build a config from a loader's mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _CONFIG_ALIASES.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values)
