"""Quiz question types and the pasted-text parser."""

from .types import QuizQuestion, blank_quiz_question
from .parser import parse_quiz_text, answer_letter_to_index

__all__ = [
    "QuizQuestion",
    "blank_quiz_question",
    "parse_quiz_text",
    "answer_letter_to_index",
]
