"""
Video Talk application.

This application fetches the transcript of a YouTube video and lets users
hold a conversation about its content with an LLM.
"""

from videotalk.config import config

__version__ = config.APP_VERSION
