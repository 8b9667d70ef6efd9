"""
Tests for the HTTP API.
"""

import gc

from videotalk.core.chat.handler import chat_handler
from videotalk.core.conversation_storage import conversation_storage
from videotalk.core.youtube_transcript import DEMO_TRANSCRIPT
from videotalk.models.schemas import MessageRole


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "Video Talk"


def test_transcript_requires_url(client):
    response = client.post("/transcript", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Video URL is required"}


def test_transcript_invalid_url(client):
    response = client.post("/transcript", json={"videoUrl": "https://vimeo.com/1"})

    assert response.status_code == 400
    assert "Invalid YouTube URL" in response.json()["error"]


def test_transcript_without_credentials_serves_demo(client, test_video_url):
    response = client.post("/transcript", json={"videoUrl": test_video_url})

    assert response.status_code == 200
    assert response.json()["transcript"] == DEMO_TRANSCRIPT


def test_chat_requires_question_and_transcript(client):
    response = client.post("/chat", json={"question": "Summarize"})

    assert response.status_code == 400
    assert response.json() == {"error": "Question and transcript are required"}


def test_chat_malformed_body(client):
    response = client.post("/chat", json={"question": ["not", "a", "string"], "transcript": "t"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_chat_replays_history(client, echo_llm, sample_transcript):
    payload = {"question": "Summarize", "transcript": sample_transcript, "sessionId": "s1"}

    first = client.post("/chat", json=payload)
    second = client.post("/chat", json=payload)

    assert first.status_code == 200
    assert second.status_code == 200
    first_answer = first.json()["response"]
    second_answer = second.json()["response"]
    assert "Human: Summarize" in first_answer
    assert f"AI: {first_answer}" in second_answer
    assert conversation_storage.get_conversation_summary("s1").message_count == 4


def test_chat_defaults_to_default_session(client, echo_llm, sample_transcript):
    response = client.post("/chat", json={"question": "Hi", "transcript": sample_transcript})

    assert response.status_code == 200
    assert conversation_storage.get_all_session_ids() == ["default"]


def test_chat_generation_failure(client, failing_llm, sample_transcript):
    response = client.post("/chat", json={"question": "Hi", "transcript": sample_transcript, "sessionId": "s1"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate response"}
    messages = conversation_storage.get_conversation("s1").messages
    assert [m.role for m in messages] == [MessageRole.USER]


def test_get_conversation(client):
    conversation_storage.create_conversation("s1", "the transcript")
    conversation_storage.add_message("s1", MessageRole.USER, "q")
    conversation_storage.add_message("s1", MessageRole.ASSISTANT, "a")

    response = client.get("/conversations", params={"sessionId": "s1"})

    assert response.status_code == 200
    conversation = response.json()["conversation"]
    assert conversation["sessionId"] == "s1"
    assert conversation["transcript"] == "the transcript"
    assert [m["role"] for m in conversation["messages"]] == ["user", "assistant"]
    assert "createdAt" in conversation and "updatedAt" in conversation


def test_get_unknown_conversation(client):
    response = client.get("/conversations", params={"sessionId": "nope"})

    assert response.status_code == 404
    assert response.json() == {"error": "Conversation not found"}


def test_list_conversation_summaries(client):
    conversation_storage.create_conversation("s1", "t1")
    conversation_storage.create_conversation("s2", "t2")
    conversation_storage.add_message("s2", MessageRole.USER, "q")

    response = client.get("/conversations")

    assert response.status_code == 200
    summaries = response.json()["conversations"]
    assert [s["sessionId"] for s in summaries] == ["s1", "s2"]
    assert [s["messageCount"] for s in summaries] == [0, 1]
    assert all("lastActivity" in s for s in summaries)


def test_delete_conversation(client):
    conversation_storage.create_conversation("s1", "t")

    response = client.delete("/conversations", params={"sessionId": "s1"})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    response = client.delete("/conversations", params={"sessionId": "s1"})
    assert response.status_code == 404


def test_delete_requires_session_id(client):
    response = client.delete("/conversations")

    assert response.status_code == 400
    assert response.json() == {"error": "Session ID is required"}


def test_clear_conversations(client):
    for i in range(3):
        conversation_storage.create_conversation(f"s{i}", "t")

    response = client.post("/conversations", json={"action": "clear"})

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert conversation_storage.get_all_session_ids() == []


def test_invalid_conversation_action(client):
    response = client.post("/conversations", json={"action": "explode"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid action"}


def test_chat_ignores_shape_of_client_history(client, echo_llm, sample_transcript):
    response = client.post("/chat", json={
        "question": "Hi",
        "transcript": sample_transcript,
        "sessionId": "s1",
        "chatHistory": [{"role": "system", "text": "x"}, "free text"],
    })

    assert response.status_code == 200
    assert conversation_storage.get_conversation_summary("s1").message_count == 2


def test_chat_null_session_id_uses_default(client, echo_llm, sample_transcript):
    response = client.post("/chat", json={"question": "Hi", "transcript": sample_transcript, "sessionId": None})

    assert response.status_code == 200
    assert conversation_storage.get_all_session_ids() == ["default"]


def test_clear_after_many_sessions_leaves_no_locks(client, echo_llm, sample_transcript):
    for i in range(50):
        response = client.post("/chat", json={"question": "Hi", "transcript": sample_transcript, "sessionId": f"s{i}"})
        assert response.status_code == 200

    response = client.post("/conversations", json={"action": "clear"})
    gc.collect()

    assert response.status_code == 200
    assert conversation_storage.get_all_session_ids() == []
    assert chat_handler.tracked_sessions() == 0
