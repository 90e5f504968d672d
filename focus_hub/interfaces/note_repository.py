"""
Note repository interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from focus_hub.models.note import Note


class INoteRepository(ABC):
    """Abstract interface for note persistence."""

    @abstractmethod
    async def create(self, owner: str, title: str, subject: Optional[str], content: str) -> Note:
        """Create a note with already-sanitized content."""
        pass

    @abstractmethod
    async def get(self, owner: str, note_id: str) -> Optional[Note]:
        pass

    @abstractmethod
    async def list(self, owner: str, subject: Optional[str] = None) -> list[Note]:
        """
        List notes, newest first.

        Args:
            owner: Owner email
            subject: Exact subject to filter by, or None for all
        """
        pass

    @abstractmethod
    async def update(self, owner: str, note_id: str, changes: dict[str, Any]) -> Optional[Note]:
        pass

    @abstractmethod
    async def delete(self, owner: str, note_id: str) -> bool:
        pass
