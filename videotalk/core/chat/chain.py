# videotalk/core/chat/chain.py
"""
Chain creation and configuration for chat with video transcripts.
"""

from langchain.chat_models import init_chat_model
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder
from langchain_core.runnables import Runnable

from videotalk.config import config
from videotalk.core.prompts import VIDEO_CHAT_SYSTEM_TEMPLATE
from videotalk.utils.logger import logging


class ChatChainFactory:
    """Factory for creating chat chains with appropriate configuration."""

    @staticmethod
    def create_prompt() -> ChatPromptTemplate:
        """Prompt with the transcript, the replayed history and the new question."""
        return ChatPromptTemplate.from_messages([
            ("system", VIDEO_CHAT_SYSTEM_TEMPLATE),
            MessagesPlaceholder(variable_name="history"),
            ("human", "{question}"),
        ])

    @staticmethod
    def create_llm():
        logging.info(f"Initializing LLM {config.DEFAULT_CHAT_MODEL} from {config.MODEL_PROVIDER}")
        return init_chat_model(
            model=config.DEFAULT_CHAT_MODEL,
            model_provider=config.MODEL_PROVIDER,
            temperature=config.TEMPERATURE,
        )

    @staticmethod
    def create_chain() -> Runnable:
        """
        Create the conversation chain.

        The chain expects ``transcript``, ``history`` and ``question``.

        Returns:
            Runnable: prompt piped into the chat model
        """
        return ChatChainFactory.create_prompt() | ChatChainFactory.create_llm()
