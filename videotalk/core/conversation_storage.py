"""
In-memory storage for conversation history.

State lives in the server process only. Deployments running more than one
instance need a shared store instead.
"""

import threading
from datetime import timedelta
from typing import Dict, List, Optional

from videotalk.models.schemas import (
    ChatMessage,
    ConversationRecord,
    ConversationSummary,
    MessageRole,
    utcnow,
)
from videotalk.utils.logger import logging


class ConversationStorage:
    """Mapping from session id to conversation record."""

    def __init__(self):
        self._conversations: Dict[str, ConversationRecord] = {}
        self._lock = threading.RLock()

    def save_conversation(self, session_id: str, record: ConversationRecord) -> None:
        """Store a whole record, replacing any existing one."""
        with self._lock:
            record = record.model_copy(deep=True)
            record.session_id = session_id
            record.updated_at = max(utcnow(), record.updated_at)
            self._conversations[session_id] = record

    def get_conversation(self, session_id: str) -> Optional[ConversationRecord]:
        """Get a copy of the conversation for a session id, or None."""
        with self._lock:
            record = self._conversations.get(session_id)
            return record.model_copy(deep=True) if record else None

    def create_conversation(self, session_id: str, transcript: str) -> ConversationRecord:
        """
        Create a conversation for a session.

        Creating a session that already exists returns the existing record
        unchanged.

        Args:
            session_id: Session identifier
            transcript: Transcript the conversation is about

        Returns:
            A copy of the stored record
        """
        with self._lock:
            record = self._conversations.get(session_id)
            if record is None:
                record = ConversationRecord(session_id=session_id, transcript=transcript)
                self._conversations[session_id] = record
                logging.info(f"Created conversation for session {session_id}")
            return record.model_copy(deep=True)

    def add_message(self, session_id: str, role: MessageRole, content: str) -> None:
        """Append a message. Unknown sessions are ignored."""
        with self._lock:
            record = self._conversations.get(session_id)
            if record is None:
                logging.debug(f"Ignoring message for unknown session {session_id}")
                return
            message = ChatMessage(role=MessageRole(role), content=content)
            record.messages.append(message)
            record.updated_at = max(message.timestamp, record.updated_at)

    def clear_all(self) -> None:
        with self._lock:
            self._conversations.clear()

    def get_all_session_ids(self) -> List[str]:
        with self._lock:
            return list(self._conversations.keys())

    def delete_conversation(self, session_id: str) -> bool:
        """Delete a conversation; True if it existed."""
        with self._lock:
            return self._conversations.pop(session_id, None) is not None

    def get_conversation_summary(self, session_id: str) -> Optional[ConversationSummary]:
        with self._lock:
            record = self._conversations.get(session_id)
            if record is None:
                return None
            return ConversationSummary(
                session_id=session_id,
                message_count=len(record.messages),
                last_activity=record.updated_at,
                transcript=record.transcript,
            )

    def prune_idle(self, max_idle_seconds: float) -> int:
        """
        Remove conversations with no activity for ``max_idle_seconds``.

        Returns:
            int: Number of conversations removed
        """
        cutoff = utcnow() - timedelta(seconds=max_idle_seconds)
        with self._lock:
            expired = [
                session_id
                for session_id, record in self._conversations.items()
                if record.updated_at < cutoff
            ]
            for session_id in expired:
                del self._conversations[session_id]

        if expired:
            logging.info(f"Pruned {len(expired)} idle conversations")
        return len(expired)


# Process-wide instance
conversation_storage = ConversationStorage()
