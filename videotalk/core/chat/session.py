"""
Chat session management backed by the conversation storage.
"""

import uuid
from typing import List, Dict, Any, Optional

from langchain_core.chat_history import InMemoryChatMessageHistory
from langchain_core.messages import BaseMessage

from videotalk.core.conversation_storage import ConversationStorage
from videotalk.models.schemas import ChatMessage, MessageRole
from videotalk.utils.logger import logging


def pair_turns(messages: List[ChatMessage]) -> List[tuple]:
    """
    Collect adjacent user/assistant pairs in order.

    A message that is not part of such a pair, like a question whose
    answer was never produced, is skipped without shifting later pairs.
    """
    pairs = []
    i = 0
    while i < len(messages) - 1:
        current, following = messages[i], messages[i + 1]
        if current.role == MessageRole.USER and following.role == MessageRole.ASSISTANT:
            pairs.append((current.content, following.content))
            i += 2
        else:
            i += 1
    return pairs


class ChatSession:
    """Chat session with memory replayed from the conversation storage."""

    def __init__(self, session_id: Optional[str] = None):
        """Initialize an empty chat session."""
        self.session_id = session_id or str(uuid.uuid4())
        self.memory = InMemoryChatMessageHistory()
        self._loaded = False

    def load_history(self, storage: ConversationStorage) -> int:
        """
        Replay the stored conversation into memory.

        Returns:
            int: Number of message pairs loaded
        """
        if self._loaded:
            return len(self.memory.messages) // 2

        record = storage.get_conversation(self.session_id)
        loaded_count = 0
        if record is not None:
            for question, answer in pair_turns(record.messages):
                self.memory.add_user_message(question)
                self.memory.add_ai_message(answer)
                loaded_count += 1

        self._loaded = True
        logging.info(f"Loaded {loaded_count} message pairs for session {self.session_id}")
        return loaded_count

    @property
    def messages(self) -> List[BaseMessage]:
        return list(self.memory.messages)

    def get_memory_messages(self) -> List[Dict[str, Any]]:
        """Get memory messages in serializable format."""
        return [{"type": msg.type, "content": msg.content} for msg in self.memory.messages]

    def get_context_dict(self) -> Dict[str, Any]:
        """Get context information for diagnostics."""
        return {
            "session_id": self.session_id,
            "message_count": len(self.memory.messages) // 2,
            "loaded": self._loaded,
        }
