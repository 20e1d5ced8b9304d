"""
Type definitions for multiple-choice quiz questions.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class QuizQuestion:
    """A multiple-choice question attached to a lesson."""

    question: str
    options: tuple[str, ...] = field(default_factory=tuple)
    correct_answer_index: int = 0  # Zero-based index into options

    def __post_init__(self):
        # Accept lists from callers, store as tuple
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def correct_option(self) -> str | None:
        """Text of the correct option, or None if the index is out of range."""
        if 0 <= self.correct_answer_index < len(self.options):
            return self.options[self.correct_answer_index]
        return None

    def is_blank(self) -> bool:
        """True when the question text is empty or whitespace."""
        return not self.question.strip()

    def to_dict(self) -> dict:
        """Serialize to the lesson record shape used by the lesson service."""
        return {
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuizQuestion":
        """Build from a lesson record dict.

        Accepts ``correctAnswerIndex`` as an alias for ``correctAnswer``.

        Raises:
            ValueError: If data isn't a dict, or the answer index doesn't
                point at one of the options
        """
        if not isinstance(data, dict):
            raise ValueError(f"Quiz question must be an object, got {data!r}")

        if "correctAnswer" in data:
            index = data["correctAnswer"]
        else:
            index = data.get("correctAnswerIndex", 0)
        index = int(index or 0)
        options = tuple(data.get("options") or ())

        # A question with no options yet only allows the default index
        if index < 0 or (options and index >= len(options)) or (not options and index):
            raise ValueError(
                f"Answer index {index} out of range for {len(options)} options"
            )

        return cls(
            question=data.get("question", ""),
            options=options,
            correct_answer_index=index,
        )


def blank_quiz_question() -> QuizQuestion:
    """Empty question with four empty options, as shown in a fresh form."""
    return QuizQuestion(question="", options=("", "", "", ""), correct_answer_index=0)
