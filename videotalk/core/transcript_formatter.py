"""
Formatting of timed caption fragments into readable transcript text.
"""

import re
from typing import Iterable, List, Union, Dict, Any

from videotalk.models.schemas import TranscriptItem, TranscriptChunk

FRAGMENT_SEPARATOR = "\n\n"

_CHUNK_PATTERN = re.compile(r"^\[(\d{2,}):(\d{2})\] (.*)$", re.DOTALL)


def format_timestamp(offset: float) -> str:
    """
    Render an offset in seconds as ``MM:SS``.

    Minutes are not rolled over into hours, so an offset of one hour
    renders as ``60:00``.

    Args:
        offset: Offset from the start of the video in seconds

    Returns:
        Zero-padded ``MM:SS`` string
    """
    minutes = int(offset // 60)
    seconds = int(offset % 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_transcript(items: Iterable[Union[TranscriptItem, Dict[str, Any]]]) -> str:
    """
    Convert caption fragments into a single text blob.

    Each fragment becomes ``[MM:SS] text`` and fragments are separated by a
    blank line.

    Args:
        items: Fragments in provider order (models or raw dicts)

    Returns:
        Formatted transcript text
    """
    lines = []
    for item in items:
        if not isinstance(item, TranscriptItem):
            item = TranscriptItem.model_validate(item)
        lines.append(f"[{format_timestamp(item.offset)}] {item.text}")
    return FRAGMENT_SEPARATOR.join(lines)


def parse_transcript(transcript: str) -> List[TranscriptChunk]:
    """
    Split a formatted transcript back into its fragments.

    Blocks without a leading ``[MM:SS]`` marker are skipped.
    """
    chunks = []
    for block in transcript.split(FRAGMENT_SEPARATOR):
        match = _CHUNK_PATTERN.match(block)
        if not match:
            continue
        minutes, seconds, text = match.groups()
        chunks.append(
            TranscriptChunk(
                timestamp=f"{minutes}:{seconds}",
                seconds=int(minutes) * 60 + int(seconds),
                text=text,
            )
        )
    return chunks
