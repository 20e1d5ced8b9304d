# web_api/tests/test_quizzes_api.py
"""Tests for quiz API endpoints."""


def test_parse_quiz_text(client, quiz_text):
    response = client.post("/api/quizzes/parse", json={"text": quiz_text})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["quizzes"][0] == {
        "question": "What is 2+2?",
        "options": ["3", "4", "5", "6"],
        "correctAnswer": 1,
    }
    assert data["quizzes"][1]["correctAnswer"] == 2


def test_parse_unrecognised_text_returns_empty(client):
    """Nothing recognised is not an error for the parse endpoint."""
    response = client.post("/api/quizzes/parse", json={"text": "just some notes"})

    assert response.status_code == 200
    assert response.json() == {"quizzes": [], "count": 0}


def test_parse_requires_text(client):
    response = client.post("/api/quizzes/parse", json={})
    assert response.status_code == 422
