"""
API client for communicating with the Video Talk backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin

from videotalk.config import config


class ApiError(Exception):
    """The backend answered with an error status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Client for interacting with the Video Talk API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for each request
        """
        self.base_url = base_url
        self.timeout = timeout or config.LLM_TIMEOUT

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.base_url if self.base_url.endswith("/") else self.base_url + "/", endpoint)

    @staticmethod
    def _handle(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.status_code >= 400:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(message or f"Request failed with status {response.status_code}", response.status_code)
        if not isinstance(data, dict):
            raise ApiError("Unexpected response body", response.status_code)
        return data

    def fetch_transcript(self, video_url: str) -> str:
        """
        Fetch the formatted transcript of a video.

        Args:
            video_url: YouTube video URL

        Returns:
            Transcript text
        """
        response = requests.post(
            self._url("transcript"),
            json={"videoUrl": video_url},
            timeout=self.timeout,
        )
        return self._handle(response)["transcript"]

    def chat(
        self,
        question: str,
        transcript: str,
        chat_history: Optional[List[Dict[str, Any]]] = None,
        session_id: Optional[str] = None,
    ) -> str:
        """
        Ask a question about a transcript.

        Args:
            question: User question
            transcript: Transcript the question is about
            chat_history: Local history, sent along for the record
            session_id: Session ID for continuing a conversation

        Returns:
            The answer text
        """
        payload = {
            "question": question,
            "transcript": transcript,
            "chatHistory": chat_history or [],
        }

        if session_id:
            payload["sessionId"] = session_id

        response = requests.post(self._url("chat"), json=payload, timeout=self.timeout)
        return self._handle(response)["response"]

    def get_conversation(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Get one stored conversation, or None if the server does not know it."""
        response = requests.get(
            self._url("conversations"),
            params={"sessionId": session_id},
            timeout=self.timeout,
        )

        if response.status_code == 404:
            return None
        return self._handle(response)["conversation"]

    def list_conversations(self) -> List[Dict[str, Any]]:
        """Get summaries of all stored conversations."""
        response = requests.get(self._url("conversations"), timeout=self.timeout)
        return self._handle(response)["conversations"]

    def delete_conversation(self, session_id: str) -> bool:
        """Delete a stored conversation; False if it did not exist."""
        response = requests.delete(
            self._url("conversations"),
            params={"sessionId": session_id},
            timeout=self.timeout,
        )

        if response.status_code == 404:
            return False
        return self._handle(response).get("success", False)

    def clear_conversations(self) -> None:
        response = requests.post(
            self._url("conversations"),
            json={"action": "clear"},
            timeout=self.timeout,
        )
        self._handle(response)
