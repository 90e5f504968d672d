"""
Unit tests for domain error to HTTP status mapping.
"""

import pytest

from focus_hub.api.errors import to_http_exception
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


@pytest.mark.parametrize(
    "error, status_code",
    [
        (AuthenticationError("no"), 401),
        (ForbiddenError("no"), 403),
        (NotFoundError("gone"), 404),
        (ConflictError("overlap"), 400),
        (DuplicateError("dup"), 400),
        (ValidationError("bad"), 400),
    ],
)
def test_status_mapping(error, status_code):
    exc = to_http_exception(error)
    assert exc.status_code == status_code
    assert exc.detail == error.message


def test_llm_error_hides_details():
    exc = to_http_exception(LLMError("api key leaked here"))
    assert exc.status_code == 500
    assert exc.detail == "Failed to fetch response from Gemini API"


def test_unmapped_error_is_generic_500():
    exc = to_http_exception(FocusHubError("db path /secret"))
    assert exc.status_code == 500
    assert exc.detail == "Internal server error"
