"""
Configuration settings for the Video Talk application.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Video Talk"
    APP_VERSION = "0.2.0"

    # Transcript provider (RapidAPI)
    RAPIDAPI_KEY = os.getenv("RAPIDAPI_KEY", "")
    RAPIDAPI_HOST = os.getenv("RAPIDAPI_HOST", "")
    TRANSCRIPT_LANGUAGE = os.getenv("TRANSCRIPT_LANGUAGE", "en")
    ALLOW_DEMO_TRANSCRIPT = _env_bool("ALLOW_DEMO_TRANSCRIPT", True)
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

    # Language model
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
    MODEL_PROVIDER = os.getenv("MODEL_PROVIDER", "google_genai")
    DEFAULT_CHAT_MODEL = os.getenv("DEFAULT_CHAT_MODEL", "gemini-1.5-flash")
    TEMPERATURE = float(os.getenv("TEMPERATURE", "0.7"))
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

    # Conversations idle longer than this are pruned; 0 keeps them forever
    CONVERSATION_TTL_SECONDS = int(os.getenv("CONVERSATION_TTL_SECONDS", "0"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate credentials
        if not cls.RAPIDAPI_KEY or not cls.RAPIDAPI_HOST:
            print("WARNING: RAPIDAPI_KEY or RAPIDAPI_HOST not set.")
            print("The demonstration transcript will be served for every video.")

        if not cls.GOOGLE_API_KEY:
            print("WARNING: GOOGLE_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")

    @classmethod
    def has_transcript_credentials(cls) -> bool:
        """Whether the transcript provider is configured."""
        return bool(cls.RAPIDAPI_KEY and cls.RAPIDAPI_HOST)

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Non-secret settings, for diagnostics."""
        return {
            "app_name": cls.APP_NAME,
            "app_version": cls.APP_VERSION,
            "model_provider": cls.MODEL_PROVIDER,
            "chat_model": cls.DEFAULT_CHAT_MODEL,
            "transcript_language": cls.TRANSCRIPT_LANGUAGE,
            "allow_demo_transcript": cls.ALLOW_DEMO_TRANSCRIPT,
            "transcript_provider_configured": cls.has_transcript_credentials(),
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
