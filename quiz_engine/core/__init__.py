"""Quiz engine core: questions, answers, scoring rules and navigation state."""

from .errors import (
    EmptyAnswersError,
    EmptyQuizError,
    InvalidQuestionError,
    QuizError,
    QuizNotEvaluatedError,
    TooManyCorrectAnswersError,
    UnknownAnswerError,
)
from .models import Answer, QuestionType, QuizConfig
from .question import Question
from .quiz import Quiz
from .quiz_exporter import save_quiz_to_file, serialize_questions
from .quiz_importer import ImportedQuiz, QuizImportError, load_quiz_from_file, parse_quiz_text
from .services.scoreboard import QuestionResult, QuizResults

__all__ = [
    "Answer",
    "EmptyAnswersError",
    "EmptyQuizError",
    "ImportedQuiz",
    "InvalidQuestionError",
    "Question",
    "QuestionResult",
    "QuestionType",
    "Quiz",
    "QuizConfig",
    "QuizError",
    "QuizImportError",
    "QuizNotEvaluatedError",
    "QuizResults",
    "TooManyCorrectAnswersError",
    "UnknownAnswerError",
    "load_quiz_from_file",
    "parse_quiz_text",
    "save_quiz_to_file",
    "serialize_questions",
]
