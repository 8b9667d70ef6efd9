# videotalk/core/chat/handler.py
"""
Chat handler module for answering questions about video transcripts using Langchain.
"""

import asyncio
import weakref
import traceback
from typing import Optional

from videotalk.config import config
from videotalk.core.chat.chain import ChatChainFactory
from videotalk.core.chat.session import ChatSession
from videotalk.core.conversation_storage import ConversationStorage, conversation_storage
from videotalk.models.schemas import MessageRole
from videotalk.utils.error_handling import GenerationFailedError
from videotalk.utils.logger import logging


class ChatHandler:
    """Handler for chat operations with video transcripts."""

    def __init__(self, storage: ConversationStorage = None, llm_timeout: Optional[float] = None):
        self.storage = storage or conversation_storage
        self.llm_timeout = llm_timeout or config.LLM_TIMEOUT
        # A lock lives only while some request for its session holds a reference
        self._session_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

    def _lock_for(self, session_id: str) -> asyncio.Lock:
        lock = self._session_locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._session_locks[session_id] = lock
        return lock

    def tracked_sessions(self) -> int:
        """Number of sessions with a request in flight or waiting."""
        return len(self._session_locks)

    async def answer(self, session_id: str, question: str, transcript: str) -> str:
        """
        Answer a question about a video, keeping the session history.

        The question is stored before the model is called; the answer only
        once the model has responded. Calls for one session run one at a
        time, other sessions are not held up.

        Args:
            session_id: Session identifier
            question: User question
            transcript: Formatted transcript of the video

        Returns:
            The model's answer
        """
        async with self._lock_for(session_id):
            self.storage.create_conversation(session_id, transcript)

            session = ChatSession(session_id)
            session.load_history(self.storage)

            self.storage.add_message(session_id, MessageRole.USER, question)

            logging.info(f"Processing question for session {session_id}: {question}")
            try:
                chain = ChatChainFactory.create_chain()
                response = await asyncio.wait_for(
                    chain.ainvoke({
                        "transcript": transcript,
                        "history": session.messages,
                        "question": question,
                    }),
                    timeout=self.llm_timeout,
                )
            except asyncio.TimeoutError as e:
                logging.error(f"Model call timed out after {self.llm_timeout}s for session {session_id}")
                raise GenerationFailedError() from e
            except Exception as e:
                logging.error(f"Error generating response: {str(e)}")
                logging.error(traceback.format_exc())
                raise GenerationFailedError() from e

            answer = response.content if hasattr(response, "content") else str(response)
            self.storage.add_message(session_id, MessageRole.ASSISTANT, answer)
            return answer


chat_handler = ChatHandler()
