"""
Data models for the Video Talk application.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, as the HTTP API speaks."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageRole(str, Enum):
    """Who wrote a chat message."""
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(CamelModel):
    """One message of a conversation."""
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=utcnow)


class ConversationRecord(CamelModel):
    """A transcript together with the messages exchanged about it."""
    session_id: str
    messages: List[ChatMessage] = Field(default_factory=list)
    transcript: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class ConversationSummary(CamelModel):
    """Short description of a stored conversation."""
    session_id: str
    message_count: int
    last_activity: datetime
    transcript: str


class TranscriptItem(BaseModel):
    """One timed caption fragment, as returned by the transcript provider."""
    text: str
    duration: float = 0.0
    offset: float = 0.0
    lang: Optional[str] = None

    model_config = {"extra": "ignore"}


class TranscriptChunk(BaseModel):
    """A fragment recovered from a formatted transcript."""
    timestamp: str
    seconds: int
    text: str
