"""
Core business logic - framework-agnostic.
Used by the web API; nothing here depends on FastAPI.
"""

# Constants
from .constants import (
    ANSWER_LETTERS,
    MAX_QUIZZES_PER_LESSON,
    LESSON_TYPES,
    VIDEO_TYPES,
    DEFAULT_CODE_LANGUAGE,
)

# Quiz parsing
from .quizzes import QuizQuestion, parse_quiz_text, answer_letter_to_index

__all__ = [
    # Constants
    'ANSWER_LETTERS', 'MAX_QUIZZES_PER_LESSON', 'LESSON_TYPES', 'VIDEO_TYPES',
    'DEFAULT_CODE_LANGUAGE',
    # Quizzes
    'QuizQuestion', 'parse_quiz_text', 'answer_letter_to_index',
]
