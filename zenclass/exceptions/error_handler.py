"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple

from zenclass.exceptions.exceptions import ZenClassError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Endpoint not found"
SERVER_ERROR_MESSAGE = "Internal server error"


def error_body(message: str) -> dict:
    return {"error": message}


def server_error(e: Exception) -> Tuple[dict, int]:
    """Log the cause, answer with the fixed 500 body"""
    sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
    logger.error(f"Unexpected error ({type(e).__name__}): {sanitized_error}")
    return error_body(SERVER_ERROR_MESSAGE), 500


def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, ZenClassError):
        if e.code >= 500:
            return server_error(e)
        return error_body(e.message), e.code

    elif isinstance(e, ValueError):
        return error_body(str(e)), 400

    else:
        return server_error(e)
