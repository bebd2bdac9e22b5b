"""Exceptions raised by the quiz engine."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz engine errors."""


class InvalidQuestionError(QuizError, ValueError):
    """Raised when a question cannot be constructed from the given answers."""


class EmptyAnswersError(InvalidQuestionError):
    """Raised when a question is constructed without answers."""


class TooManyCorrectAnswersError(InvalidQuestionError):
    """Raised when a single-answer question marks more than one answer correct."""


class EmptyQuizError(QuizError, ValueError):
    """Raised when a quiz ends up with no questions."""


class UnknownAnswerError(QuizError, LookupError):
    """Raised when a selection references an answer id the question does not own."""


class QuizNotEvaluatedError(QuizError, RuntimeError):
    """Raised when results are requested before the quiz was evaluated."""
