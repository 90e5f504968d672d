"""
User models.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from focus_hub.models.base import CamelModel


class UserProfile(CamelModel):
    """Profile fields a client may send when registering."""

    display_name: Optional[str] = Field(None, max_length=255)
    photo_url: Optional[str] = Field(None, max_length=1000)


class UserRegistration(CamelModel):
    user: UserProfile = Field(default_factory=UserProfile)


class UserAccount(UserProfile):
    """Registered user."""

    id: str
    email: str
    created_at: datetime
