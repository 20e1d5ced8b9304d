"""
Build the JSON body the lesson service accepts from a lesson form.
"""

from .types import Attachment, LessonForm


class LessonValidationError(Exception):
    """Raised when a form can't be saved as a lesson."""

    pass


def build_lesson_payload(
    form: LessonForm,
    course_id: str,
    *,
    uploaded_video_url: str | None = None,
    uploaded_attachments: list[Attachment] | tuple[Attachment, ...] = (),
) -> dict:
    """
    Convert a form into a create/update lesson request body.

    Blank code snippets and blank quiz questions are left out. Attachments
    are the form's existing ones followed by any uploaded for this save.

    Args:
        form: The lesson form
        course_id: Course the lesson belongs to
        uploaded_video_url: URL of a video uploaded for this save, if any
        uploaded_attachments: Files uploaded for this save

    Returns:
        Dict ready to be sent as JSON

    Raises:
        LessonValidationError: If the title is blank
    """
    if not form.title.strip():
        raise LessonValidationError("Please enter a lesson title")

    attachments = list(form.attachments) + list(uploaded_attachments)

    payload = {
        "courseId": course_id,
        "title": form.title,
        "description": form.description,
        "content": form.content,
        "type": form.type,
        "duration": form.duration,
        "order": form.order,
        "aiEnabled": form.ai_enabled,
        "videoType": form.video_type,
        "codeSnippets": [
            {"language": s.language, "code": s.code}
            for s in form.code_snippets
            if s.code.strip()
        ],
        "attachments": [
            {"name": a.name, "url": a.url, "type": a.type} for a in attachments
        ],
        "quizzes": [q.to_dict() for q in form.filled_quizzes()],
    }

    video_url = uploaded_video_url or form.video_url
    if form.video_type == "upload" and video_url:
        payload["videoUrl"] = video_url
    elif form.video_type == "youtube" and form.youtube_url:
        # Lesson records read videoUrl; youtubeUrl kept for older clients
        payload["videoUrl"] = form.youtube_url
        payload["youtubeUrl"] = form.youtube_url

    return payload
