# core/lessons/form.py
"""
Lesson form state and its updates.

The form is an immutable LessonForm; each function here takes a form and
returns a new one. reduce_form() dispatches JSON-style actions onto these
functions so the admin front end can drive the form over HTTP.
"""

import logging
from dataclasses import replace

from core.constants import (
    DEFAULT_CODE_LANGUAGE,
    LESSON_TYPES,
    MAX_QUIZZES_PER_LESSON,
    VIDEO_TYPES,
)
from core.quizzes.parser import parse_quiz_text
from core.quizzes.types import QuizQuestion, blank_quiz_question

from .types import (
    Attachment,
    CodeSnippet,
    LessonForm,
    PendingFile,
    QuizImportResult,
)

logger = logging.getLogger(__name__)

IMPORT_FAILED_MESSAGE = "Could not parse quiz text; check the format"


class QuizLimitError(Exception):
    """Raised when a lesson already holds the maximum number of quizzes."""

    pass


def _to_str(value) -> str:
    """JSON null becomes ""; anything else must already be a string."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got {value!r}")
    return value


def _to_bool(value) -> bool:
    """Accept a real bool, 0/1, or the strings true/false/1/0."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "1"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("false", "0"):
        return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def _to_int(value) -> int:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Expected an integer, got {value!r}")
    return int(value)


# Scalar fields editable through set_field, with the function that coerces each
_SCALAR_FIELDS = {
    "title": _to_str,
    "description": _to_str,
    "content": _to_str,
    "type": _to_str,
    "duration": _to_int,
    "order": _to_int,
    "ai_enabled": _to_bool,
    "video_type": _to_str,
    "video_url": _to_str,
    "youtube_url": _to_str,
}

# camelCase names used by the front end
_FIELD_ALIASES = {
    "aiEnabled": "ai_enabled",
    "videoType": "video_type",
    "videoUrl": "video_url",
    "youtubeUrl": "youtube_url",
}


def _check_index(items: tuple, index: int, what: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"No {what} at index {index}")


def _replace_at(items: tuple, index: int, item) -> tuple:
    return items[:index] + (item,) + items[index + 1 :]


def _remove_at(items: tuple, index: int) -> tuple:
    return items[:index] + items[index + 1 :]


# --- Construction ---


def new_lesson_form(order: int = 1) -> LessonForm:
    """Blank form for creating a lesson at the given position."""
    return LessonForm(order=order)


def lesson_form_from_dict(data: dict) -> LessonForm:
    """
    Build a form from its JSON shape (camelCase keys, as in lesson records).

    Missing or null lists fall back to the blank-form defaults; an explicit
    empty list is kept as empty.

    Raises:
        ValueError: If type or videoType isn't a known value, a list isn't a
            list of objects, or a scalar has the wrong type
    """
    defaults = LessonForm()

    def _list(key: str) -> list[dict] | None:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, list):
            raise ValueError(f"{key} must be a list")
        for entry in value:
            if not isinstance(entry, dict):
                raise ValueError(f"{key} entries must be objects, got {entry!r}")
        return value

    snippets = _list("codeSnippets")
    attachments = _list("attachments")
    pending = _list("pendingFiles")
    quizzes = _list("quizzes")

    form = LessonForm(
        title=_to_str(data.get("title")),
        description=_to_str(data.get("description")),
        content=_to_str(data.get("content")),
        type=_to_str(data.get("type")) or defaults.type,
        duration=_to_int(data.get("duration") or 0),
        order=_to_int(data.get("order") or defaults.order),
        ai_enabled=_to_bool(data.get("aiEnabled", defaults.ai_enabled)),
        video_type=_to_str(data.get("videoType")) or defaults.video_type,
        video_url=_to_str(data.get("videoUrl")),
        youtube_url=_to_str(data.get("youtubeUrl")),
        code_snippets=(
            defaults.code_snippets
            if snippets is None
            else tuple(
                CodeSnippet(
                    language=s.get("language") or DEFAULT_CODE_LANGUAGE,
                    code=s.get("code") or "",
                )
                for s in snippets
            )
        ),
        attachments=(
            ()
            if attachments is None
            else tuple(
                Attachment(name=a["name"], url=a["url"], type=a.get("type") or "")
                for a in attachments
            )
        ),
        pending_files=(
            ()
            if pending is None
            else tuple(
                PendingFile(name=p["name"], content_type=p.get("contentType") or "")
                for p in pending
            )
        ),
        quizzes=(
            defaults.quizzes
            if quizzes is None
            else tuple(QuizQuestion.from_dict(q) for q in quizzes)
        ),
        bulk_quiz_text=data.get("bulkQuizText") or "",
    )
    _validate_enums(form)
    return form


def lesson_form_from_record(record: dict) -> LessonForm:
    """Form for editing an existing lesson record from the lesson service.

    Upload state and the paste buffer always start empty.
    """
    data = {k: v for k, v in record.items() if k not in ("pendingFiles", "bulkQuizText")}
    return lesson_form_from_dict(data)


def lesson_form_to_dict(form: LessonForm) -> dict:
    """Serialize a form to its JSON shape."""
    return {
        "title": form.title,
        "description": form.description,
        "content": form.content,
        "type": form.type,
        "duration": form.duration,
        "order": form.order,
        "aiEnabled": form.ai_enabled,
        "videoType": form.video_type,
        "videoUrl": form.video_url,
        "youtubeUrl": form.youtube_url,
        "codeSnippets": [
            {"language": s.language, "code": s.code} for s in form.code_snippets
        ],
        "attachments": [
            {"name": a.name, "url": a.url, "type": a.type} for a in form.attachments
        ],
        "pendingFiles": [
            {"name": p.name, "contentType": p.content_type} for p in form.pending_files
        ],
        "quizzes": [q.to_dict() for q in form.quizzes],
        "bulkQuizText": form.bulk_quiz_text,
    }


def _validate_enums(form: LessonForm) -> None:
    if form.type not in LESSON_TYPES:
        raise ValueError(f"Unknown lesson type: {form.type}")
    if form.video_type not in VIDEO_TYPES:
        raise ValueError(f"Unknown video type: {form.video_type}")


# --- Scalar fields ---


def set_field(form: LessonForm, name: str, value) -> LessonForm:
    """
    Set one scalar field.

    Args:
        form: Current form
        name: Field name, snake_case or the front end's camelCase
        value: New value, coerced to the field's type

    Raises:
        ValueError: Unknown field, or an invalid lesson/video type
    """
    name = _FIELD_ALIASES.get(name, name)
    if name not in _SCALAR_FIELDS:
        raise ValueError(f"Unknown lesson form field: {name}")

    updated = replace(form, **{name: _SCALAR_FIELDS[name](value)})
    _validate_enums(updated)
    return updated


def set_bulk_quiz_text(form: LessonForm, text: str) -> LessonForm:
    return replace(form, bulk_quiz_text=text)


# --- Quizzes ---


def import_quiz_text(form: LessonForm, text: str) -> QuizImportResult:
    """
    Replace the form's quizzes with those parsed from pasted text.

    Nothing parsed, or more than MAX_QUIZZES_PER_LESSON parsed, leaves the
    form untouched and reports failure in the result.
    """
    quizzes = parse_quiz_text(text)

    if not quizzes:
        return QuizImportResult(
            form=form, imported=0, ok=False, message=IMPORT_FAILED_MESSAGE
        )

    if len(quizzes) > MAX_QUIZZES_PER_LESSON:
        return QuizImportResult(
            form=form,
            imported=0,
            ok=False,
            message=(
                f"Cannot import {len(quizzes)} quiz questions; "
                f"maximum is {MAX_QUIZZES_PER_LESSON} per lesson"
            ),
        )

    updated = replace(form, quizzes=tuple(quizzes), bulk_quiz_text="")
    noun = "question" if len(quizzes) == 1 else "questions"
    logger.info("Imported %d quiz %s into lesson form", len(quizzes), noun)
    return QuizImportResult(
        form=updated,
        imported=len(quizzes),
        ok=True,
        message=f"Imported {len(quizzes)} quiz {noun}",
    )


def add_quiz(form: LessonForm) -> LessonForm:
    """Append a blank question.

    Raises:
        QuizLimitError: If the form already has the maximum number of filled questions
    """
    if len(form.filled_quizzes()) >= MAX_QUIZZES_PER_LESSON:
        raise QuizLimitError(
            f"Maximum {MAX_QUIZZES_PER_LESSON} quizzes per lesson"
        )
    return replace(form, quizzes=form.quizzes + (blank_quiz_question(),))


def remove_quiz(form: LessonForm, index: int) -> LessonForm:
    _check_index(form.quizzes, index, "quiz")
    return replace(form, quizzes=_remove_at(form.quizzes, index))


def update_quiz_question(form: LessonForm, index: int, question: str) -> LessonForm:
    _check_index(form.quizzes, index, "quiz")
    quiz = replace(form.quizzes[index], question=question)
    return replace(form, quizzes=_replace_at(form.quizzes, index, quiz))


def set_correct_answer(form: LessonForm, index: int, answer_index: int) -> LessonForm:
    """Mark which option of a question is correct.

    Raises:
        ValueError: If answer_index doesn't point at one of the question's options
    """
    _check_index(form.quizzes, index, "quiz")
    quiz = form.quizzes[index]
    if not 0 <= answer_index < len(quiz.options):
        raise ValueError(
            f"Answer index {answer_index} out of range for {len(quiz.options)} options"
        )
    quiz = replace(quiz, correct_answer_index=answer_index)
    return replace(form, quizzes=_replace_at(form.quizzes, index, quiz))


def update_quiz_option(
    form: LessonForm, index: int, option_index: int, text: str
) -> LessonForm:
    _check_index(form.quizzes, index, "quiz")
    quiz = form.quizzes[index]
    _check_index(quiz.options, option_index, "option")
    quiz = replace(quiz, options=_replace_at(quiz.options, option_index, text))
    return replace(form, quizzes=_replace_at(form.quizzes, index, quiz))


# --- Code snippets ---


def add_code_snippet(form: LessonForm) -> LessonForm:
    return replace(form, code_snippets=form.code_snippets + (CodeSnippet(),))


def remove_code_snippet(form: LessonForm, index: int) -> LessonForm:
    _check_index(form.code_snippets, index, "code snippet")
    return replace(form, code_snippets=_remove_at(form.code_snippets, index))


def update_code_snippet(
    form: LessonForm,
    index: int,
    *,
    language: str | None = None,
    code: str | None = None,
) -> LessonForm:
    _check_index(form.code_snippets, index, "code snippet")
    snippet = form.code_snippets[index]
    if language is not None:
        snippet = replace(snippet, language=language)
    if code is not None:
        snippet = replace(snippet, code=code)
    return replace(form, code_snippets=_replace_at(form.code_snippets, index, snippet))


# --- Attachments ---


def add_pending_files(form: LessonForm, files: list[PendingFile]) -> LessonForm:
    return replace(form, pending_files=form.pending_files + tuple(files))


def remove_pending_file(form: LessonForm, index: int) -> LessonForm:
    _check_index(form.pending_files, index, "pending file")
    return replace(form, pending_files=_remove_at(form.pending_files, index))


def remove_attachment(form: LessonForm, index: int) -> LessonForm:
    _check_index(form.attachments, index, "attachment")
    return replace(form, attachments=_remove_at(form.attachments, index))


# --- Reducer ---


def reduce_form(form: LessonForm, action: dict) -> LessonForm:
    """
    Apply a JSON-style action to a form.

    Action shapes (all keys camelCase):
    - {"type": "setField", "field": "title", "value": "..."}
    - {"type": "setBulkQuizText", "text": "..."}
    - {"type": "importQuizText", "text": "..."} (form unchanged on failure)
    - {"type": "addQuiz"}, {"type": "removeQuiz", "index": 0}
    - {"type": "updateQuizQuestion", "index": 0, "question": "..."}
    - {"type": "setCorrectAnswer", "index": 0, "answerIndex": 2}
    - {"type": "updateQuizOption", "index": 0, "optionIndex": 1, "text": "..."}
    - {"type": "addCodeSnippet"}, {"type": "removeCodeSnippet", "index": 0}
    - {"type": "updateCodeSnippet", "index": 0, "language"?: "...", "code"?: "..."}
    - {"type": "addPendingFiles", "files": [{"name": "...", "contentType": "..."}]}
    - {"type": "removePendingFile", "index": 0}
    - {"type": "removeAttachment", "index": 0}

    Raises:
        ValueError: Unknown action type or invalid value
        IndexError: Index out of range
        QuizLimitError: addQuiz at the quiz limit
    """
    action_type = action.get("type")

    if action_type == "setField":
        return set_field(form, action["field"], action["value"])
    elif action_type == "setBulkQuizText":
        return set_bulk_quiz_text(form, action["text"])
    elif action_type == "importQuizText":
        return import_quiz_text(form, action["text"]).form
    elif action_type == "addQuiz":
        return add_quiz(form)
    elif action_type == "removeQuiz":
        return remove_quiz(form, action["index"])
    elif action_type == "updateQuizQuestion":
        return update_quiz_question(form, action["index"], action["question"])
    elif action_type == "setCorrectAnswer":
        return set_correct_answer(form, action["index"], action["answerIndex"])
    elif action_type == "updateQuizOption":
        return update_quiz_option(
            form, action["index"], action["optionIndex"], action["text"]
        )
    elif action_type == "addCodeSnippet":
        return add_code_snippet(form)
    elif action_type == "removeCodeSnippet":
        return remove_code_snippet(form, action["index"])
    elif action_type == "updateCodeSnippet":
        return update_code_snippet(
            form,
            action["index"],
            language=action.get("language"),
            code=action.get("code"),
        )
    elif action_type == "addPendingFiles":
        files = [
            PendingFile(name=f["name"], content_type=f.get("contentType") or "")
            for f in action["files"]
        ]
        return add_pending_files(form, files)
    elif action_type == "removePendingFile":
        return remove_pending_file(form, action["index"])
    elif action_type == "removeAttachment":
        return remove_attachment(form, action["index"])
    else:
        raise ValueError(f"Unknown lesson form action: {action_type}")
