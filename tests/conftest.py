"""
Configuration for pytest tests.
"""

import os

# Keep a developer's .env from pointing tests at real providers
os.environ["RAPIDAPI_KEY"] = ""
os.environ["RAPIDAPI_HOST"] = ""
os.environ["GOOGLE_API_KEY"] = os.environ.get("GOOGLE_API_KEY", "test_api_key")
os.environ["ALLOW_DEMO_TRANSCRIPT"] = "true"
os.environ["CONVERSATION_TTL_SECONDS"] = "0"
os.environ["ENVIRONMENT"] = "development"

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from videotalk.core.conversation_storage import ConversationStorage, conversation_storage


@pytest.fixture(autouse=True)
def clean_conversation_storage():
    """Start every test with an empty process-wide store."""
    conversation_storage.clear_all()
    yield
    conversation_storage.clear_all()


@pytest.fixture
def storage():
    """A private conversation store."""
    return ConversationStorage()


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/dQw4w9WgXcQ"


@pytest.fixture
def sample_transcript():
    return "[00:00] Hello and welcome.\n\n[00:05] Today we talk about testing."


@pytest.fixture
def echo_llm():
    """Chat model stub answering with the prompt it received."""
    model = RunnableLambda(lambda prompt: AIMessage(content=prompt.to_string()))
    with patch("videotalk.core.chat.chain.init_chat_model", return_value=model) as mock_init_model:
        yield mock_init_model


@pytest.fixture
def failing_llm():
    """Chat model stub that always fails."""
    def fail(prompt):
        raise RuntimeError("model unavailable")

    with patch("videotalk.core.chat.chain.init_chat_model", return_value=RunnableLambda(fail)) as mock_init_model:
        yield mock_init_model


@pytest.fixture
def client():
    """FastAPI test client."""
    from videotalk.api.app import app

    with TestClient(app) as test_client:
        yield test_client
