"""
Type definitions for the lesson authoring form.
"""

from dataclasses import dataclass, field
from typing import Literal

from core.constants import DEFAULT_CODE_LANGUAGE
from core.quizzes.types import QuizQuestion, blank_quiz_question

LessonType = Literal["Video", "Text", "Quiz", "Code"]
VideoType = Literal["upload", "youtube"]


@dataclass(frozen=True)
class CodeSnippet:
    """A code example shown in the lesson."""

    language: str = DEFAULT_CODE_LANGUAGE
    code: str = ""


@dataclass(frozen=True)
class Attachment:
    """A file already uploaded to object storage."""

    name: str
    url: str
    type: str = ""  # MIME type as reported at upload


@dataclass(frozen=True)
class PendingFile:
    """A file the operator selected but that hasn't been uploaded yet."""

    name: str
    content_type: str = ""


def _default_snippets() -> tuple[CodeSnippet, ...]:
    return (CodeSnippet(),)


def _default_quizzes() -> tuple[QuizQuestion, ...]:
    return (blank_quiz_question(),)


@dataclass(frozen=True)
class LessonForm:
    """In-memory draft of a lesson being created or edited.

    Never mutated: every update in core.lessons.form returns a new instance.
    """

    title: str = ""
    description: str = ""
    content: str = ""
    type: LessonType = "Video"
    duration: int = 0  # Minutes
    order: int = 1
    ai_enabled: bool = True
    video_type: VideoType = "upload"
    video_url: str = ""
    youtube_url: str = ""
    code_snippets: tuple[CodeSnippet, ...] = field(default_factory=_default_snippets)
    attachments: tuple[Attachment, ...] = ()
    pending_files: tuple[PendingFile, ...] = ()
    quizzes: tuple[QuizQuestion, ...] = field(default_factory=_default_quizzes)
    bulk_quiz_text: str = ""

    def filled_quizzes(self) -> tuple[QuizQuestion, ...]:
        """Quizzes with non-blank question text."""
        return tuple(q for q in self.quizzes if not q.is_blank())


@dataclass(frozen=True)
class QuizImportResult:
    """Outcome of importing pasted quiz text into a form."""

    form: LessonForm
    imported: int
    ok: bool
    message: str
