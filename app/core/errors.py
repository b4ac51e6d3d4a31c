"""
Translation of backend (PostgREST / Postgres / network) errors into user-facing messages and HTTP errors.
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

NETWORK_ERROR = "NETWORK_ERROR"
NETWORK_MESSAGE = "Unable to connect to the server. Please check your internet connection and try again."

_NETWORK_MARKERS = (
    "fetch",
    "networkerror",
    "network",
    "connection refused",
    "connecterror",
    "name or service not known",
    "timed out",
)

_STATUS_BY_CODE = {
    NETWORK_ERROR: 503,
    "PGRST116": 404,
    "23505": 409,
    "23503": 400,
    "23502": 400,
    "42501": 403,
}


@dataclass
class BackendError:
    message: str
    code: Optional[str] = None
    details: Optional[str] = None
    hint: Optional[str] = None


def _error_text(exc) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or exc.__class__.__name__


def _looks_like_network_error(exc) -> bool:
    text = f"{exc.__class__.__name__} {_error_text(exc)}".lower()
    return any(marker in text for marker in _NETWORK_MARKERS)


def parse_backend_error(exc) -> BackendError:
    """Map a raised exception (usually postgrest.APIError) to a BackendError."""
    if _looks_like_network_error(exc):
        return BackendError(message=NETWORK_MESSAGE, code=NETWORK_ERROR)

    code = getattr(exc, "code", None)
    message = _error_text(exc)
    details = getattr(exc, "details", None)
    hint = getattr(exc, "hint", None)

    if not code:
        return BackendError(message=message)

    if code == "PGRST116":
        return BackendError(message="Resource not found", code=code, details=details)
    if code == "23505":
        lowered = message.lower()
        if "username" in lowered:
            text = "Username already exists. Please choose a different username."
        elif "email" in lowered:
            text = "Email already exists. Please use a different email."
        else:
            text = "This record already exists."
        return BackendError(message=text, code=code, details=details)
    if code == "23503":
        return BackendError(
            message="Invalid reference. The related record does not exist.",
            code=code, details=details,
        )
    if code == "23502":
        return BackendError(message="Required field is missing.", code=code, details=details)
    if code == "42501":
        return BackendError(
            message="You do not have permission to perform this action.",
            code=code, details=details,
        )
    if code in ("42P01", "42703"):
        what = "table" if code == "42P01" else "column"
        return BackendError(
            message=f"Database {what} does not exist. Please contact support.",
            code=code, details=details,
        )
    return BackendError(
        message=message or "A database error occurred", code=code, details=details, hint=hint,
    )


def status_for(error: BackendError) -> int:
    return _STATUS_BY_CODE.get(error.code, 500)


def backend_http_error(exc, context: Optional[str] = None) -> HTTPException:
    """Build the HTTPException a service should raise for an unexpected backend error."""
    error = parse_backend_error(exc)
    if context:
        logger.error("%s: %s (code=%s)", context, error.message, error.code)
    return HTTPException(status_code=status_for(error), detail=error.message)


def is_not_found_error(exc) -> bool:
    return getattr(exc, "code", None) == "PGRST116"


def is_network_error(exc) -> bool:
    return parse_backend_error(exc).code == NETWORK_ERROR


def is_missing_column_error(exc) -> bool:
    """Schema lacks the selected/updated column (older databases without optional columns)."""
    message = str(getattr(exc, "message", None) or exc)
    return (
        getattr(exc, "code", None) in ("PGRST116", "42703", "PGRST204")
        or "column" in message
        or "does not exist" in message
    )
