import pytest

import quizapi
import firebase_auth
from main import create_app
from tests.helpers import VALID_TOKEN, FakeModel


@pytest.fixture
def config():
    return {
        "TESTING": True,
        "ALLOWED_ORIGIN": "https://quiz-generator-gemini-ai.vercel.app",
        "CORS_ALLOW_CREDENTIALS": False,
        "QUIZ_EXPLANATIONS": False,
        "PORT": 8080,
    }


@pytest.fixture
def model(monkeypatch):
    fake = FakeModel()
    monkeypatch.setattr(quizapi, "_model", fake)
    return fake


@pytest.fixture
def verified_tokens(monkeypatch):
    seen = []

    def verify_id_token(token):
        seen.append(token)
        if token != VALID_TOKEN:
            raise ValueError("Invalid ID token")
        return {"uid": "user-123", "email": "student@example.com"}

    monkeypatch.setattr(firebase_auth.auth, "verify_id_token", verify_id_token)
    return seen


@pytest.fixture
def app(config, model, verified_tokens):
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
