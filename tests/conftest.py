"""Shared fixtures for quiz engine tests."""

import pytest

from quiz_engine.core.models import Answer, QuestionType, QuizConfig
from quiz_engine.core.question import Question


def build_answers(*flags, scores=None):
    """Build answers with ids 0..n-1 and the given correctness flags."""
    scores = scores or [0] * len(flags)
    return [
        Answer(id=i, content=f"answer {i}", correct=flag, score=score)
        for i, (flag, score) in enumerate(zip(flags, scores))
    ]


@pytest.fixture
def config():
    return QuizConfig()


@pytest.fixture
def single_choice(config):
    """Factory for single-choice questions whose correct answer has id 0."""

    def _make(text="Question", n_answers=3):
        flags = [True] + [False] * (n_answers - 1)
        return Question(text, build_answers(*flags), QuestionType.SINGLE_CHOICE, config)

    return _make


@pytest.fixture
def score_choice(config):
    """Factory for score-choice questions."""

    def _make(scores=(0, 5, 10), text="Scored question"):
        return Question(
            text,
            build_answers(*[False] * len(scores), scores=list(scores)),
            QuestionType.SCORE_CHOICE,
            config,
        )

    return _make


@pytest.fixture
def make_answers():
    return build_answers
