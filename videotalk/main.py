"""
Command line entry point for Video Talk.

Fetches a video's transcript and optionally answers one question about it
without going through the HTTP API.
"""

import argparse
import asyncio
import uuid
from typing import Optional

from dotenv import load_dotenv

from videotalk.core.chat.handler import ChatHandler
from videotalk.core.youtube_transcript import YouTubeTranscriptService
from videotalk.utils.error_handling import VideoTalkError
from videotalk.utils.logger import logging


def talk_to_video(url: str, question: Optional[str] = None, strict: bool = False) -> dict:
    """
    Fetch a transcript and answer a question about it.

    Args:
        url: YouTube video URL
        question: Optional question about the video
        strict: Fail instead of falling back to the demonstration transcript

    Returns:
        Dict with the transcript and, if a question was asked, the answer
    """
    service = YouTubeTranscriptService(allow_demo=False if strict else None)
    logging.info(f"Fetching transcript for: {url}")
    transcript = service.fetch_transcript(url)

    result = {"transcript": transcript}
    if question:
        handler = ChatHandler()
        result["answer"] = asyncio.run(handler.answer(str(uuid.uuid4()), question, transcript))
    return result


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Video Talk")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--question", help="Question to ask about the video")
    parser.add_argument("--strict", action="store_true",
                        help="Do not fall back to the demonstration transcript")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        result = talk_to_video(args.url, args.question, args.strict)
    except VideoTalkError as e:
        parser.exit(1, f"Error: {e.message}\n")

    print("=" * 80)
    print(result["transcript"])
    print("=" * 80)
    if "answer" in result:
        print(result["answer"])
        print("=" * 80)


if __name__ == "__main__":
    main()
