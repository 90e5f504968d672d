"""
Authentication provider interface.

Implementations: mock (development), Firebase ID tokens.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    """Identity established for the current request."""

    id: str
    email: str
    display_name: Optional[str] = None


class IAuthProvider(ABC):
    """Abstract interface for verifying bearer tokens."""

    @abstractmethod
    async def verify_token(self, token: str) -> User:
        """
        Verify a bearer token.

        Args:
            token: Raw token taken from the Authorization header

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        pass
