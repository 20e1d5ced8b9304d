"""
Quiz API routes.

Endpoints:
- POST /api/quizzes/parse - Parse pasted quiz text into questions
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from core.quizzes import parse_quiz_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


class ParseQuizRequest(BaseModel):
    """Request body for parsing pasted quiz text."""

    text: str


class QuizQuestionResponse(BaseModel):
    question: str
    options: list[str]
    correctAnswer: int


class ParseQuizResponse(BaseModel):
    quizzes: list[QuizQuestionResponse]
    count: int


@router.post("/parse", response_model=ParseQuizResponse)
async def parse_quiz(request: ParseQuizRequest):
    """
    Parse quiz text without touching any lesson.

    An empty result is returned as-is (count 0); the caller decides
    whether that counts as a failed import.
    """
    quizzes = parse_quiz_text(request.text)
    return {"quizzes": [q.to_dict() for q in quizzes], "count": len(quizzes)}
