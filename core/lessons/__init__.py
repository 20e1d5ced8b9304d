"""Lesson authoring: form state, payloads and the lesson service client."""

from .types import (
    Attachment,
    CodeSnippet,
    LessonForm,
    PendingFile,
    QuizImportResult,
)
from .form import (
    new_lesson_form,
    lesson_form_from_dict,
    lesson_form_from_record,
    lesson_form_to_dict,
    set_field,
    set_bulk_quiz_text,
    import_quiz_text,
    add_quiz,
    remove_quiz,
    update_quiz_question,
    set_correct_answer,
    update_quiz_option,
    add_code_snippet,
    remove_code_snippet,
    update_code_snippet,
    add_pending_files,
    remove_pending_file,
    remove_attachment,
    reduce_form,
    QuizLimitError,
    IMPORT_FAILED_MESSAGE,
)
from .payload import build_lesson_payload, LessonValidationError
from .ordering import move_lesson
from .service import LessonServiceClient, LessonServiceError

__all__ = [
    "Attachment",
    "CodeSnippet",
    "LessonForm",
    "PendingFile",
    "QuizImportResult",
    "new_lesson_form",
    "lesson_form_from_dict",
    "lesson_form_from_record",
    "lesson_form_to_dict",
    "set_field",
    "set_bulk_quiz_text",
    "import_quiz_text",
    "add_quiz",
    "remove_quiz",
    "update_quiz_question",
    "set_correct_answer",
    "update_quiz_option",
    "add_code_snippet",
    "remove_code_snippet",
    "update_code_snippet",
    "add_pending_files",
    "remove_pending_file",
    "remove_attachment",
    "reduce_form",
    "QuizLimitError",
    "IMPORT_FAILED_MESSAGE",
    "build_lesson_payload",
    "LessonValidationError",
    "move_lesson",
    "LessonServiceClient",
    "LessonServiceError",
]
