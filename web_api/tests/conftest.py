# web_api/tests/conftest.py
"""Pytest fixtures for web API tests.

Provides a TestClient for the app and a mocked lesson service so route
tests run without the course/lesson service being reachable.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

# Ensure we import from root main.py
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from main import app


QUIZ_TEXT = """Q1: What is 2+2?
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


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def quiz_text():
    return QUIZ_TEXT


@pytest.fixture
def lesson_form_data():
    """A lesson form in its JSON shape, as the admin front end sends it."""
    return {
        "title": "Arithmetic",
        "description": "Adding numbers",
        "content": "",
        "type": "Quiz",
        "duration": 10,
        "order": 1,
        "aiEnabled": True,
        "videoType": "upload",
        "videoUrl": "",
        "youtubeUrl": "",
        "codeSnippets": [{"language": "JavaScript", "code": ""}],
        "attachments": [],
        "pendingFiles": [],
        "quizzes": [
            {"question": "Old question", "options": ["a", "b", "c", "d"], "correctAnswer": 3}
        ],
        "bulkQuizText": "",
    }


@pytest.fixture
def mock_lesson_service():
    """Patch the route module's lesson service factory with async mocks."""
    service = MagicMock()
    service.list_lessons = AsyncMock(return_value=[])
    service.save_lesson = AsyncMock(return_value={})
    service.delete_lesson = AsyncMock(return_value=None)
    service.save_lesson_order = AsyncMock(return_value=None)

    with patch("web_api.routes.lessons.get_lesson_service", return_value=service):
        yield service
