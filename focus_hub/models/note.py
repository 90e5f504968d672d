"""
Note model definitions.

Note content is rich text (HTML) and is sanitized before it is stored.
Titles are stripped before their length is checked, so a blank title is
rejected.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from focus_hub.models.base import CamelModel, PartialUpdate


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class NoteCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    subject: Optional[str] = Field(None, max_length=100)
    content: str = Field("", max_length=100_000)

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, v: Any) -> Any:
        return _strip(v)


class NoteUpdate(PartialUpdate):
    non_nullable = frozenset({"title", "content"})

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    subject: Optional[str] = Field(None, max_length=100)
    content: Optional[str] = Field(None, max_length=100_000)

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, v: Any) -> Any:
        return _strip(v)


class Note(CamelModel):
    id: str
    user_email: str
    title: str
    subject: Optional[str] = None
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None
