"""
Translation of domain exceptions into HTTP responses.
"""

from fastapi import HTTPException, status

from focus_hub.core.exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateError,
    FocusHubError,
    ForbiddenError,
    LLMError,
    NotFoundError,
    ValidationError,
)
from focus_hub.core.logger import setup_logger

logger = setup_logger(__name__)

_STATUS_BY_ERROR: list[tuple[type[FocusHubError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (DuplicateError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def to_http_exception(exc: FocusHubError) -> HTTPException:
    """Map a domain error to the HTTPException a route should raise."""
    if isinstance(exc, LLMError):
        logger.error(f"LLM request failed: {exc.message}")
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch response from Gemini API",
        )

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=exc.message)

    logger.error(f"Unhandled domain error {type(exc).__name__}: {exc.message}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
