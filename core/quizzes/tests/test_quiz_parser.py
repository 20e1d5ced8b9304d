# core/quizzes/tests/test_quiz_parser.py
"""Tests for the pasted quiz text parser."""

import pytest
from core.quizzes.parser import parse_quiz_text, answer_letter_to_index
from core.quizzes.types import QuizQuestion


TWO_QUESTIONS = """Q1: What is 2+2?
A) 3
B) 4
C) 5
D) 6
Answer: B
Q2: What color is the sky?
A) Red
B) Green
C) Blue
D) Yellow
Answer: C
"""


class TestParseWellFormed:
    """Test parsing of complete question blocks."""

    def test_two_questions(self):
        """Should parse both questions with their options and answers."""
        result = parse_quiz_text(TWO_QUESTIONS)

        assert result == [
            QuizQuestion("What is 2+2?", ("3", "4", "5", "6"), 1),
            QuizQuestion("What color is the sky?", ("Red", "Green", "Blue", "Yellow"), 2),
        ]

    def test_many_questions_keep_source_order(self):
        """Should return one question per block, in the order they appear."""
        blocks = []
        for i in range(1, 8):
            blocks.append(
                f"Q{i}: Question {i}\nA) a\nB) b\nC) c\nD) d\nAnswer: {'ABCD'[i % 4]}"
            )
        result = parse_quiz_text("\n".join(blocks))

        assert [q.question for q in result] == [f"Question {i}" for i in range(1, 8)]
        assert [q.correct_answer_index for q in result] == [i % 4 for i in range(1, 8)]
        assert all(len(q.options) == 4 for q in result)

    def test_question_numbers_are_not_used_for_ordering(self):
        """Duplicate or out-of-order Qn labels don't affect the output."""
        text = """Q5: First
A) x
Answer: A
Q1: Second
A) y
Answer: A
Q1: Third
A) z
Answer: A
"""
        result = parse_quiz_text(text)
        assert [q.question for q in result] == ["First", "Second", "Third"]

    def test_surrounding_whitespace_and_blank_lines(self):
        """Indented markers and blank lines between them are tolerated."""
        text = """

   Q1:    Spaced out question
      A)   one

  B) two
  C) three
  D) four

   Answer: D
"""
        result = parse_quiz_text(text)
        assert len(result) == 1
        assert result[0].question == "Spaced out question"
        assert result[0].options == ("one", "two", "three", "four")
        assert result[0].correct_answer_index == 3

    def test_windows_line_endings(self):
        """Carriage returns are stripped along with other whitespace."""
        text = TWO_QUESTIONS.replace("\n", "\r\n")
        assert parse_quiz_text(text) == parse_quiz_text(TWO_QUESTIONS)


class TestParseEmpty:
    """Test inputs that contain nothing recognisable."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_empty_or_whitespace(self, text):
        assert parse_quiz_text(text) == []

    def test_prose_only(self):
        text = "Here are some questions for the lesson.\nPlease answer them all."
        assert parse_quiz_text(text) == []

    def test_question_without_options_is_not_emitted(self):
        """A question needs at least one option line."""
        text = "Q1: Lonely question\nAnswer: A\n"
        assert parse_quiz_text(text) == []

    def test_question_with_empty_text_is_not_emitted(self):
        text = "Q1:\nA) one\nB) two\nAnswer: B\n"
        assert parse_quiz_text(text) == []


class TestFlushing:
    """Test when a question is emitted."""

    def test_missing_answer_flushed_by_next_question(self):
        """A question without Answer: is emitted with index 0 when the next Qn: starts."""
        text = """Q1: No answer given
A) a
B) b
C) c
D) d
Q2: Has answer
A) a
B) b
C) c
D) d
Answer: C
"""
        result = parse_quiz_text(text)
        assert len(result) == 2
        assert result[0].question == "No answer given"
        assert result[0].correct_answer_index == 0
        assert result[1].correct_answer_index == 2

    def test_trailing_question_without_answer_is_dropped(self):
        """The last question is only emitted if it has an Answer: line."""
        text = """Q1: Answered
A) a
B) b
C) c
D) d
Answer: B
Q2: Never answered
A) a
B) b
C) c
D) d
"""
        result = parse_quiz_text(text)
        assert [q.question for q in result] == ["Answered"]

    def test_second_answer_line_has_no_effect(self):
        """After Answer: closes a question, a repeated Answer: changes nothing."""
        text = """Q1: Question
A) a
B) b
Answer: B
Answer: A
"""
        result = parse_quiz_text(text)
        assert len(result) == 1
        assert result[0].correct_answer_index == 1

    def test_options_after_answer_do_not_attach_to_closed_question(self):
        text = """Q1: Question
A) a
Answer: A
B) stray
Q2: Next
A) x
Answer: A
"""
        result = parse_quiz_text(text)
        assert result[0].options == ("a",)
        assert result[1].options == ("x",)


class TestOptionCount:
    """The parser does not enforce four options."""

    def test_two_options(self):
        text = "Q1: True or false?\nA) True\nB) False\nAnswer: B\n"
        result = parse_quiz_text(text)
        assert result[0].options == ("True", "False")

    def test_five_options_are_kept(self):
        text = "Q1: Pick\nA) 1\nB) 2\nC) 3\nD) 4\nA) 5\nAnswer: A\n"
        result = parse_quiz_text(text)
        assert len(result[0].options) == 5


class TestUnrecognisedLines:
    """Lines that match no marker are skipped."""

    def test_prose_between_markers_is_ignored(self):
        noisy = """Quiz for week 3
Q1: What is 2+2?
Think carefully about this one.
A) 3
B) 4
(hint: it's even)
C) 5
D) 6
Answer: B
Q2: What color is the sky?
A) Red
B) Green
C) Blue
D) Yellow
Good luck!
Answer: C
"""
        assert parse_quiz_text(noisy) == parse_quiz_text(TWO_QUESTIONS)

    def test_lowercase_markers_are_not_recognised(self):
        """Q, option letters and the Answer: prefix are case-sensitive."""
        text = "q1: lower\na) one\nanswer: A\n"
        assert parse_quiz_text(text) == []

    def test_option_letter_outside_a_to_d_ignored(self):
        text = "Q1: Pick\nA) one\nE) five\nAnswer: A\n"
        assert parse_quiz_text(text)[0].options == ("one",)

    def test_malformed_answer_line_ignored(self):
        """An Answer: line without a single A-D letter doesn't close the question."""
        text = "Q1: Pick\nA) one\nB) two\nAnswer: E\nAnswer: b\n"
        result = parse_quiz_text(text)
        assert len(result) == 1
        assert result[0].correct_answer_index == 1


class TestAnswerLetters:
    """Letter-to-index mapping."""

    @pytest.mark.parametrize(
        "letter,expected", [("A", 0), ("B", 1), ("C", 2), ("D", 3)]
    )
    def test_answer_line_sets_index(self, letter, expected):
        text = f"Q1: Pick\nA) a\nB) b\nC) c\nD) d\nAnswer: {letter}\n"
        assert parse_quiz_text(text)[0].correct_answer_index == expected

    def test_answer_letter_case_insensitive(self):
        text = "Q1: Pick\nA) a\nB) b\nC) c\nD) d\nAnswer: c\n"
        assert parse_quiz_text(text)[0].correct_answer_index == 2

    @pytest.mark.parametrize(
        "letter,expected",
        [("A", 0), ("b", 1), (" C ", 2), ("d", 3), ("E", None), ("", None), ("AB", None)],
    )
    def test_answer_letter_to_index(self, letter, expected):
        assert answer_letter_to_index(letter) == expected
