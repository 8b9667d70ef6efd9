"""
Centralized error handling for the application.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from videotalk.utils.logger import logging


class VideoTalkError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(VideoTalkError):
    """A required request field is missing or empty."""

    status_code = 400


class NotFoundError(VideoTalkError):
    """Unknown session id."""

    status_code = 404


class InvalidURLError(VideoTalkError):
    """The video link does not match any known YouTube URL shape."""

    status_code = 400

    def __init__(self, message: str = "Invalid YouTube URL. Please provide a valid YouTube video URL."):
        super().__init__(message)


class NoCaptionsAvailableError(VideoTalkError):
    """The provider answered, but not with a transcript we recognize."""

    def __init__(
        self,
        message: str = "No transcript available for this video. The video might not have captions enabled.",
    ):
        super().__init__(message)


class ProviderUnavailableError(VideoTalkError):
    """The transcript provider is not configured or not reachable."""


class GenerationFailedError(VideoTalkError):
    """The language model call failed."""

    def __init__(self, message: str = "Failed to generate response"):
        super().__init__(message)


class ResponseGenerationFailedError(Exception):
    """Raised on the client side when the chat endpoint does not answer."""

    def __init__(self, message: str = "Failed to generate response. Please try again."):
        super().__init__(message)
        self.message = message


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Render every error as ``{"error": message}``.

    Args:
        app: The FastAPI application to attach the handlers to
    """

    @app.exception_handler(VideoTalkError)
    async def video_talk_error_handler(request: Request, exc: VideoTalkError):
        logging.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logging.warning(f"Malformed request body for {request.url.path}: {exc.errors()}")
        return error_response("Malformed request body", 400)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error on {request.url.path}: {exc}")
        logging.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        return error_response("Internal server error", 500)
