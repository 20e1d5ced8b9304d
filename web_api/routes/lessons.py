"""
Lesson authoring API routes.

Endpoints:
- POST /api/lesson-forms/import-quiz - Import pasted quiz text into a form
- POST /api/lesson-forms/actions - Apply a form action (reducer)
- POST /api/lesson-forms/payload - Build the lesson service body for a form
- GET /api/courses/{course_id}/lessons - List a course's lessons
- POST /api/courses/{course_id}/lessons - Create or update a lesson from a form
- POST /api/courses/{course_id}/lessons/move - Move a lesson up or down
- DELETE /api/lessons/{lesson_id} - Delete a lesson
"""

import logging
from typing import Literal

import sentry_sdk
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from core.lessons import (
    Attachment,
    LessonForm,
    LessonServiceClient,
    LessonServiceError,
    LessonValidationError,
    QuizLimitError,
    build_lesson_payload,
    import_quiz_text,
    lesson_form_from_dict,
    lesson_form_to_dict,
    move_lesson,
    reduce_form,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lessons"])


# --- Pydantic models ---


class AttachmentModel(BaseModel):
    name: str
    url: str
    type: str = ""


class ImportQuizRequest(BaseModel):
    """Request body for importing pasted quiz text into a form."""

    form: dict
    text: str


class FormActionRequest(BaseModel):
    """Request body for applying one reducer action to a form."""

    form: dict
    action: dict


class BuildPayloadRequest(BaseModel):
    """Request body for turning a form into a lesson service body."""

    form: dict
    courseId: str
    uploadedVideoUrl: str | None = None
    uploadedAttachments: list[AttachmentModel] = []


class SaveLessonRequest(BaseModel):
    """Request body for saving a form to the lesson service."""

    form: dict
    lessonId: str | None = None  # None creates a new lesson
    uploadedVideoUrl: str | None = None
    uploadedAttachments: list[AttachmentModel] = []


class MoveLessonRequest(BaseModel):
    lessonId: str
    direction: Literal["up", "down"]


# --- Helpers ---


def get_lesson_service() -> LessonServiceClient:
    """Client for the lesson service (patched in tests)."""
    return LessonServiceClient()


def _load_form(data: dict) -> LessonForm:
    try:
        return lesson_form_from_dict(data)
    except (ValueError, KeyError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid lesson form: {e}")


def _build_payload(
    form: LessonForm,
    course_id: str,
    uploaded_video_url: str | None,
    uploaded_attachments: list[AttachmentModel],
) -> dict:
    try:
        return build_lesson_payload(
            form,
            course_id,
            uploaded_video_url=uploaded_video_url,
            uploaded_attachments=[
                Attachment(name=a.name, url=a.url, type=a.type)
                for a in uploaded_attachments
            ],
        )
    except LessonValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _service_failure(e: LessonServiceError) -> HTTPException:
    logger.error("Lesson service error: %s", e)
    sentry_sdk.capture_exception(e)
    return HTTPException(status_code=502, detail=str(e))


# --- Form endpoints ---


@router.post("/lesson-forms/import-quiz")
async def import_quiz(request: ImportQuizRequest):
    """
    Replace a form's quizzes with questions parsed from pasted text.

    Returns 422 with a user-facing message when nothing could be parsed
    or the lesson quiz limit would be exceeded.
    """
    form = _load_form(request.form)
    result = import_quiz_text(form, request.text)

    if not result.ok:
        raise HTTPException(status_code=422, detail=result.message)

    return {
        "form": lesson_form_to_dict(result.form),
        "imported": result.imported,
        "message": result.message,
    }


@router.post("/lesson-forms/actions")
async def apply_form_action(request: FormActionRequest):
    """Apply one action to a form and return the new form."""
    form = _load_form(request.form)

    try:
        updated = reduce_form(form, request.action)
    except QuizLimitError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (ValueError, IndexError, KeyError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid action: {e}")

    return {"form": lesson_form_to_dict(updated)}


@router.post("/lesson-forms/payload")
async def build_payload(request: BuildPayloadRequest):
    """Return the body that would be sent to the lesson service."""
    form = _load_form(request.form)
    payload = _build_payload(
        form, request.courseId, request.uploadedVideoUrl, request.uploadedAttachments
    )
    return {"lesson": payload}


# --- Lesson service endpoints ---


@router.get("/courses/{course_id}/lessons")
async def list_course_lessons(course_id: str):
    try:
        lessons = await get_lesson_service().list_lessons(course_id)
    except LessonServiceError as e:
        raise _service_failure(e)
    return {"lessons": lessons}


@router.post("/courses/{course_id}/lessons")
async def save_course_lesson(course_id: str, request: SaveLessonRequest):
    """Build the lesson body from a form and create or update the lesson."""
    form = _load_form(request.form)
    payload = _build_payload(
        form, course_id, request.uploadedVideoUrl, request.uploadedAttachments
    )

    try:
        lesson = await get_lesson_service().save_lesson(payload, lesson_id=request.lessonId)
    except LessonServiceError as e:
        raise _service_failure(e)

    action = "updated" if request.lessonId else "created"
    return {
        "lesson": lesson,
        "message": f'Lesson "{form.title}" {action} successfully',
    }


@router.post("/courses/{course_id}/lessons/move")
async def move_course_lesson(course_id: str, request: MoveLessonRequest):
    """
    Move a lesson one place and persist the new order of every lesson.

    Moving past either end (or an unknown lesson) changes nothing.
    """
    service = get_lesson_service()

    try:
        lessons = await service.list_lessons(course_id)
        reordered = move_lesson(lessons, request.lessonId, request.direction)
        if reordered is not lessons:
            await service.save_lesson_order(reordered)
    except LessonServiceError as e:
        raise _service_failure(e)

    return {"lessons": reordered, "moved": reordered is not lessons}


@router.delete("/lessons/{lesson_id}")
async def delete_lesson(lesson_id: str):
    try:
        await get_lesson_service().delete_lesson(lesson_id)
    except LessonServiceError as e:
        raise _service_failure(e)
    return {"deleted": True}
