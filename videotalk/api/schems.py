from typing import Any, Optional, List

from pydantic import BaseModel, Field

from videotalk.models.schemas import CamelModel, ConversationRecord, ConversationSummary


class TranscriptRequest(CamelModel):
    """Model for transcript requests."""
    video_url: Optional[str] = None


class TranscriptResponse(BaseModel):
    """Model for transcript responses."""
    transcript: str


class ChatRequest(CamelModel):
    """Model for chat requests."""
    question: Optional[str] = None
    transcript: Optional[str] = None
    # Entries are not validated or used, the stored history is what gets replayed
    chat_history: Optional[List[Any]] = None
    session_id: Optional[str] = None


class ChatResponse(BaseModel):
    """Model for chat responses."""
    response: str


class ConversationResponse(BaseModel):
    conversation: ConversationRecord


class ConversationListResponse(BaseModel):
    conversations: List[ConversationSummary] = Field(default_factory=list)


class ConversationActionRequest(BaseModel):
    """Model for bulk conversation actions."""
    action: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
