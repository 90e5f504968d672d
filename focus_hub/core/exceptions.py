"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class FocusHubError(Exception):
    """Base exception for Focus Hub."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(FocusHubError):
    """Resource not found, or not owned by the caller."""

    pass


class DuplicateError(FocusHubError):
    """Duplicate resource detected."""

    pass


class ValidationError(FocusHubError):
    """Malformed field, unknown selector, bad timezone or ordering violation."""

    pass


class ConflictError(FocusHubError):
    """A scheduled item overlaps an existing one of the same owner."""

    def __init__(self, message: str, conflicting_id: Optional[str] = None):
        super().__init__(message, details={"conflicting_id": conflicting_id})
        self.conflicting_id = conflicting_id


class LLMError(FocusHubError):
    """LLM-related error."""

    pass


class AuthenticationError(FocusHubError):
    """Authentication failed."""

    pass


class ForbiddenError(FocusHubError):
    """Authenticated caller asked for another user's records."""

    pass
