# core/lessons/service.py
"""
HTTP client for the course/lesson service that persists lessons.

The service owns storage; this module only sends the JSON bodies built by
core.lessons.payload and reads lesson records back.
"""

import asyncio
import logging

import httpx

from core.config import get_lesson_service_timeout, get_lesson_service_url

logger = logging.getLogger(__name__)


class LessonServiceError(Exception):
    """Raised when the lesson service rejects a request or can't be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LessonServiceClient:
    """Async client for the lesson service's /api/lessons endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or get_lesson_service_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_lesson_service_timeout()
        self._transport = transport  # Tests pass httpx.MockTransport

    async def _request(self, method: str, path: str, **kwargs):
        """Send a request and return the decoded JSON body (or None if empty)."""
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise LessonServiceError(f"Lesson service unreachable: {e}") from e

        try:
            data = response.json() if response.content else None
        except ValueError:
            data = None

        if response.is_error:
            message = None
            if isinstance(data, dict):
                message = data.get("error")
            raise LessonServiceError(
                message or f"Lesson service returned {response.status_code}",
                status_code=response.status_code,
            )

        return data

    async def list_lessons(self, course_id: str) -> list[dict]:
        """Get a course's lessons. Accepts {"lessons": [...]} or a bare list."""
        data = await self._request("GET", "/api/lessons", params={"courseId": course_id})
        if isinstance(data, dict):
            return data.get("lessons") or []
        return data or []

    async def create_lesson(self, payload: dict) -> dict:
        data = await self._request("POST", "/api/lessons", json=payload)
        logger.info("Created lesson %r in course %s", payload.get("title"), payload.get("courseId"))
        return data or {}

    async def update_lesson(self, lesson_id: str, payload: dict) -> dict:
        data = await self._request("PUT", f"/api/lessons/{lesson_id}", json=payload)
        logger.info("Updated lesson %s", lesson_id)
        return data or {}

    async def save_lesson(self, payload: dict, lesson_id: str | None = None) -> dict:
        """Create the lesson, or update it when lesson_id is given."""
        if lesson_id:
            return await self.update_lesson(lesson_id, payload)
        return await self.create_lesson(payload)

    async def delete_lesson(self, lesson_id: str) -> None:
        await self._request("DELETE", f"/api/lessons/{lesson_id}")
        logger.info("Deleted lesson %s", lesson_id)

    async def save_lesson_order(self, lessons: list[dict]) -> None:
        """Persist each lesson's "order" value. Lessons without an "_id" are skipped."""
        await asyncio.gather(
            *(
                self._request(
                    "PUT", f"/api/lessons/{lesson['_id']}", json={"order": lesson["order"]}
                )
                for lesson in lessons
                if lesson.get("_id")
            )
        )
