"""
User repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from focus_hub.models.user import UserAccount, UserProfile


class IUserRepository(ABC):
    """Abstract interface for registered users."""

    @abstractmethod
    async def create(self, email: str, profile: UserProfile) -> UserAccount:
        """
        Register a user.

        Raises:
            DuplicateError: If the email is already registered
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserAccount]:
        pass

    @abstractmethod
    async def list(self) -> list[UserAccount]:
        pass
