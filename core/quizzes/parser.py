# core/quizzes/parser.py
"""
Parse pasted quiz text into structured quiz questions.

Expected format, one marker per line:

    Q1: What is 2+2?
    A) 3
    B) 4
    C) 5
    D) 6
    Answer: B

Lines matching none of the markers are ignored. Parsing never raises:
text with nothing recognisable yields an empty list.
"""

import logging
import re

from core.constants import ANSWER_LETTERS
from .types import QuizQuestion

logger = logging.getLogger(__name__)

QUESTION_PATTERN = re.compile(r"^Q\d+:")
OPTION_PATTERN = re.compile(r"^[A-D]\)")
ANSWER_PATTERN = re.compile(r"^Answer:\s*([A-Da-d])$")


def answer_letter_to_index(letter: str) -> int | None:
    """Map an answer letter (A-D, any case) to its zero-based option index.

    Returns None for anything that isn't a single letter A-D.
    """
    letter = letter.strip().upper()
    if len(letter) != 1 or letter not in ANSWER_LETTERS:
        return None
    return ANSWER_LETTERS.index(letter)


def parse_quiz_text(text: str) -> list[QuizQuestion]:
    """
    Parse pasted quiz text into an ordered list of questions.

    A question is emitted when its Answer: line is reached, or when the next
    Qn: marker starts (keeping whatever answer index was current, 0 by
    default). A question with no options is never emitted. A trailing
    question with no Answer: line is dropped.

    Args:
        text: Raw text as pasted by the operator

    Returns:
        List of QuizQuestion in the order their markers appeared
    """
    results: list[QuizQuestion] = []
    current_question = ""
    current_options: list[str] = []
    correct_answer_index = 0

    for line in text.split("\n"):
        line = line.strip()

        question_match = QUESTION_PATTERN.match(line)
        if question_match:
            # Flush previous question that never got an Answer: line
            if current_question and current_options:
                results.append(
                    QuizQuestion(current_question, current_options, correct_answer_index)
                )
            current_question = line[question_match.end() :].strip()
            current_options = []
            correct_answer_index = 0
            continue

        if OPTION_PATTERN.match(line):
            current_options.append(line[2:].strip())
            continue

        answer_match = ANSWER_PATTERN.match(line)
        if answer_match:
            correct_answer_index = answer_letter_to_index(answer_match.group(1))
            if current_question and current_options:
                results.append(
                    QuizQuestion(current_question, current_options, correct_answer_index)
                )
                current_question = ""
                current_options = []

    logger.debug("Parsed %d quiz questions from %d characters", len(results), len(text))
    return results
