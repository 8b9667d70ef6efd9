"""
Module for fetching YouTube transcripts from a RapidAPI transcript provider.
"""

import re
from typing import Any, Optional

import requests

from videotalk.config import config
from videotalk.core.transcript_formatter import format_transcript
from videotalk.utils.error_handling import (
    InvalidURLError,
    NoCaptionsAvailableError,
    ProviderUnavailableError,
)
from videotalk.utils.logger import logging

# watch?v=, youtu.be/, /embed/, /e/, /v/ and youtube.com/<section>/<name>/ links
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)

DEMO_TRANSCRIPT = """[00:00] Welcome to this amazing video about artificial intelligence and machine learning concepts.

[00:15] Today we're going to explore how neural networks work and why they're so powerful for solving complex problems.

[00:32] First, let's understand what artificial intelligence really means. AI is the simulation of human intelligence in machines.

[00:48] Machine learning, a subset of AI, allows computers to learn and improve from experience without being explicitly programmed.

[01:05] Neural networks are inspired by the human brain and consist of interconnected nodes called neurons.

[01:22] These networks can process vast amounts of data and identify patterns that might be invisible to human observers.

[01:38] Deep learning, which uses deep neural networks, has revolutionized fields like computer vision and natural language processing.

[01:55] The applications are endless - from self-driving cars to medical diagnosis, AI is transforming our world.

[02:12] But with great power comes great responsibility. We must consider the ethical implications of AI development.

[02:28] Privacy, bias, and job displacement are just some of the challenges we face as AI becomes more prevalent.

[02:45] The future of AI is bright, but it requires careful consideration and responsible development practices.

[03:02] Thank you for watching! Don't forget to subscribe for more content about technology and innovation."""


def extract_video_id(url: str) -> Optional[str]:
    """Extract the 11-character video ID from a YouTube URL."""
    if not url:
        return None
    match = VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else None


class YouTubeTranscriptService:
    """Class to fetch and format transcripts for YouTube videos."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_host: Optional[str] = None,
        allow_demo: Optional[bool] = None,
        language: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the service with provider credentials.

        Args:
            api_key: RapidAPI key (if None, taken from the configuration)
            api_host: RapidAPI host (if None, taken from the configuration)
            allow_demo: Serve the demonstration transcript when the provider
                is missing or failing instead of raising
            language: Preferred transcript language
            timeout: Seconds to wait for each provider request
        """
        self.api_key = config.RAPIDAPI_KEY if api_key is None else api_key
        self.api_host = config.RAPIDAPI_HOST if api_host is None else api_host
        self.allow_demo = config.ALLOW_DEMO_TRANSCRIPT if allow_demo is None else allow_demo
        self.language = language or config.TRANSCRIPT_LANGUAGE
        self.timeout = timeout or config.REQUEST_TIMEOUT

    @staticmethod
    def extract_video_id(url: str) -> Optional[str]:
        return extract_video_id(url)

    def fetch_transcript(self, video_url: str) -> str:
        """
        Fetch the transcript of a video as formatted text.

        Args:
            video_url: YouTube video URL

        Returns:
            Transcript text with ``[MM:SS]`` markers
        """
        video_id = self.extract_video_id(video_url)
        if not video_id:
            raise InvalidURLError()

        if not self.api_key or not self.api_host:
            if self.allow_demo:
                logging.info(f"No transcript provider configured, serving demo transcript for {video_id}")
                return self.get_demo_transcript()
            raise ProviderUnavailableError("Transcript provider credentials are not configured")

        try:
            data = self._request_transcript(video_id)
            return self.process_transcript_data(data)
        except (requests.RequestException, ValueError, NoCaptionsAvailableError, ProviderUnavailableError) as e:
            if not self.allow_demo:
                if isinstance(e, (NoCaptionsAvailableError, ProviderUnavailableError)):
                    raise
                raise ProviderUnavailableError(f"Transcript provider request failed: {e}") from e
            logging.warning(f"Transcript provider error for {video_id}, using demo transcript: {e}")
            return self.get_demo_transcript()

    def _request_transcript(self, video_id: str) -> Any:
        """Query the provider, retrying once without the language hint."""
        url = f"https://{self.api_host}/api/transcript"
        headers = {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.api_host,
        }

        logging.info(f"Requesting transcript for {video_id} in '{self.language}'")
        response = requests.get(
            url,
            params={"videoId": video_id, "lang": self.language},
            headers=headers,
            timeout=self.timeout,
        )
        if response.ok:
            return response.json()

        logging.info(f"Transcript request in '{self.language}' failed with {response.status_code}, retrying without language")
        response = requests.get(
            url,
            params={"videoId": video_id},
            headers=headers,
            timeout=self.timeout,
        )
        if not response.ok:
            logging.warning(f"Transcript API failed: {response.status_code} {response.text}")
            raise ProviderUnavailableError(f"Transcript provider responded with {response.status_code}")

        return response.json()

    def process_transcript_data(self, data: Any) -> str:
        """
        Format a provider response.

        Accepts ``{"success": true, "transcript": [...]}``,
        ``{"transcript": [...]}`` or a bare list of fragments.
        """
        if isinstance(data, dict) and isinstance(data.get("transcript"), list):
            items = data["transcript"]
        elif isinstance(data, list):
            items = data
        else:
            raise NoCaptionsAvailableError()

        if not items:
            raise NoCaptionsAvailableError()

        try:
            return format_transcript(items)
        except (TypeError, ValueError) as e:
            raise NoCaptionsAvailableError() from e

    @staticmethod
    def get_demo_transcript() -> str:
        """Return the built-in demonstration transcript."""
        return DEMO_TRANSCRIPT
