"""
API routes for the Video Talk application.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from videotalk.api.schems import (
    TranscriptRequest,
    TranscriptResponse,
    ChatRequest,
    ChatResponse,
    ConversationResponse,
    ConversationListResponse,
    ConversationActionRequest,
    SuccessResponse,
)
from videotalk.config import config
from videotalk.core.chat.handler import ChatHandler, chat_handler
from videotalk.core.conversation_storage import ConversationStorage, conversation_storage
from videotalk.core.youtube_transcript import YouTubeTranscriptService
from videotalk.utils.error_handling import ValidationError, NotFoundError
from videotalk.utils.logger import logging

router = APIRouter(tags=["videotalk"])


def get_storage() -> ConversationStorage:
    return conversation_storage


def get_chat_handler() -> ChatHandler:
    return chat_handler


def get_transcript_service() -> YouTubeTranscriptService:
    return YouTubeTranscriptService()


@router.post("/transcript", response_model=TranscriptResponse)
def fetch_transcript(
    request: TranscriptRequest,
    service: YouTubeTranscriptService = Depends(get_transcript_service),
):
    """
    Fetch the formatted transcript of a YouTube video.

    Runs in the threadpool, the provider call blocks.
    """
    if not request.video_url:
        raise ValidationError("Video URL is required")

    logging.info(f"Fetching transcript for {request.video_url}")
    transcript = service.fetch_transcript(request.video_url)
    return TranscriptResponse(transcript=transcript)


@router.post("/chat", response_model=ChatResponse)
async def chat_with_video(
    chat_request: ChatRequest,
    handler: ChatHandler = Depends(get_chat_handler),
    storage: ConversationStorage = Depends(get_storage),
):
    """Answer a question about a transcript, keeping per-session history."""
    if not chat_request.question or not chat_request.transcript:
        raise ValidationError("Question and transcript are required")

    if config.CONVERSATION_TTL_SECONDS > 0:
        storage.prune_idle(config.CONVERSATION_TTL_SECONDS)

    answer = await handler.answer(
        session_id=chat_request.session_id or "default",
        question=chat_request.question,
        transcript=chat_request.transcript,
    )
    return ChatResponse(response=answer)


@router.get("/conversations", response_model=None)
def get_conversations(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    storage: ConversationStorage = Depends(get_storage),
):
    """Get one conversation, or summaries of all of them."""
    if session_id:
        conversation = storage.get_conversation(session_id)
        if conversation is None:
            raise NotFoundError("Conversation not found")
        return ConversationResponse(conversation=conversation)

    summaries = []
    for sid in storage.get_all_session_ids():
        summary = storage.get_conversation_summary(sid)
        # Deleted between listing and lookup
        if summary is not None:
            summaries.append(summary)
    return ConversationListResponse(conversations=summaries)


@router.delete("/conversations", response_model=SuccessResponse, response_model_exclude_none=True)
def delete_conversation(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    storage: ConversationStorage = Depends(get_storage),
):
    """Delete one conversation."""
    if not session_id:
        raise ValidationError("Session ID is required")

    if not storage.delete_conversation(session_id):
        raise NotFoundError("Conversation not found")

    logging.info(f"Deleted conversation {session_id}")
    return SuccessResponse()


@router.post("/conversations", response_model=SuccessResponse)
def conversation_action(
    request: ConversationActionRequest,
    storage: ConversationStorage = Depends(get_storage),
):
    """Run a bulk action on the conversation storage."""
    if request.action == "clear":
        storage.clear_all()
        logging.info("Cleared all conversations")
        return SuccessResponse(message="All conversations cleared")

    raise ValidationError("Invalid action")
