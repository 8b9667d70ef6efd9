"""
Client-side agent that keeps a transcript and chat history for one video.
"""

import uuid
from typing import List, Optional

import requests

from videotalk.core.prompts import VIDEO_SUMMARY_QUESTION, KEY_TAKEAWAYS_QUESTION
from videotalk.frontend.api_client import ApiClient, ApiError
from videotalk.models.schemas import ChatMessage, MessageRole
from videotalk.utils.error_handling import ResponseGenerationFailedError
from videotalk.utils.logger import logging


class VideoTalkAgent:
    """Delegates questions to the chat endpoint and mirrors replies locally."""

    def __init__(
        self,
        transcript: str,
        api_client: Optional[ApiClient] = None,
        session_id: Optional[str] = None,
    ):
        self.transcript = transcript
        self.api_client = api_client or ApiClient()
        self.session_id = session_id or str(uuid.uuid4())
        self.chat_history: List[ChatMessage] = []

    def ask_question(self, question: str) -> str:
        """
        Ask a question about the current transcript.

        The question is added to the local history right away and removed
        again if no answer comes back.

        Args:
            question: User question

        Returns:
            The answer text
        """
        user_message = ChatMessage(role=MessageRole.USER, content=question)
        self.chat_history.append(user_message)

        try:
            answer = self.api_client.chat(
                question=question,
                transcript=self.transcript,
                chat_history=[m.model_dump(mode="json", by_alias=True) for m in self.chat_history],
                session_id=self.session_id,
            )
        except (requests.RequestException, ApiError, KeyError) as e:
            logging.error(f"Error generating response: {e}")
            if self.chat_history and self.chat_history[-1] is user_message:
                self.chat_history.pop()
            raise ResponseGenerationFailedError() from e

        self.chat_history.append(ChatMessage(role=MessageRole.ASSISTANT, content=answer))
        return answer

    def get_chat_history(self) -> List[ChatMessage]:
        return list(self.chat_history)

    def clear_history(self) -> None:
        self.chat_history = []

    def update_transcript(self, new_transcript: str) -> None:
        """Switch to another video; history starts over under a new session."""
        self.transcript = new_transcript
        self.clear_history()
        self.session_id = str(uuid.uuid4())

    def get_video_summary(self) -> str:
        return self.ask_question(VIDEO_SUMMARY_QUESTION)

    def get_key_takeaways(self) -> str:
        return self.ask_question(KEY_TAKEAWAYS_QUESTION)
