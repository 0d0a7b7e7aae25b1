"""Shared plain-text responses for the meeting endpoints."""

import structlog
from fastapi.responses import PlainTextResponse

logger = structlog.get_logger()


def error_response(message: str, error: Exception) -> PlainTextResponse:
    """Log a failed operation and return a generic 500.

    Callers get the fixed message only; the cause goes to the log.

    Args:
        message: Human-readable message for the caller
        error: The exception that ended the operation
    """
    logger.error(
        message,
        error=str(error),
        error_type=type(error).__name__,
        exc_info=error,
    )
    return PlainTextResponse(message, status_code=500)
