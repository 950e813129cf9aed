import json

import pytest
from fastapi.testclient import TestClient

from quiz_service.config import Settings
from quiz_service.errors import ModelServiceError
from quiz_service.main import create_app
from quiz_service.schemas import QuizRequest


def make_question(question="Q", options=None, answer=0, explanation="e", **extra):
    item = {
        "question": question,
        "options": ["a", "b", "c", "d"] if options is None else options,
        "answer": answer,
        "explanation": explanation,
    }
    item.update(extra)
    return item


def reply(*questions) -> str:
    return json.dumps({"questions": list(questions)}, ensure_ascii=False)


class FakeGenerator:
    """Stands in for the Gemini client; records prompts and replays a fixed reply."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", environment="test")


@pytest.fixture
def quiz_request():
    return QuizRequest(grade="6", unit="Güneş Sistemi", topic="Güneş")


@pytest.fixture
def generator():
    return FakeGenerator(reply(make_question()))


@pytest.fixture
def client(settings, generator):
    app = create_app(settings, generator=generator)
    return TestClient(app)


@pytest.fixture
def unavailable_generator():
    return FakeGenerator(error=ModelServiceError("connection refused"))
