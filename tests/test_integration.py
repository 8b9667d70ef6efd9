"""
Integration tests for the command line flow.
"""

import pytest
from unittest.mock import patch

from videotalk.core.youtube_transcript import DEMO_TRANSCRIPT
from videotalk.main import talk_to_video, main
from videotalk.utils.error_handling import ProviderUnavailableError


def test_talk_to_video_without_question(test_video_url):
    result = talk_to_video(test_video_url)

    assert result == {"transcript": DEMO_TRANSCRIPT}


def test_talk_to_video_with_question(test_video_url, echo_llm):
    result = talk_to_video(test_video_url, question="What are neural networks?")

    assert result["transcript"] == DEMO_TRANSCRIPT
    assert "What are neural networks?" in result["answer"]
    assert "[01:05] Neural networks are inspired by the human brain" in result["answer"]
    echo_llm.assert_called_once()


def test_talk_to_video_strict_without_credentials(test_video_url):
    with pytest.raises(ProviderUnavailableError):
        talk_to_video(test_video_url, strict=True)


def test_main_prints_transcript(test_video_url, capsys):
    with patch("sys.argv", ["videotalk", test_video_url]):
        main()

    assert "[00:00] Welcome to this amazing video" in capsys.readouterr().out


def test_main_reports_invalid_url(capsys):
    with patch("sys.argv", ["videotalk", "https://vimeo.com/1"]):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
    assert "Invalid YouTube URL" in capsys.readouterr().err
