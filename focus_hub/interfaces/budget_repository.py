"""
Budget repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from focus_hub.models.budget import Budget, BudgetUpsert


class IBudgetRepository(ABC):
    """Abstract interface for monthly budget persistence."""

    @abstractmethod
    async def upsert(self, owner: str, budget: BudgetUpsert) -> Budget:
        """
        Create or replace the budget for ``(owner, budget.month)``.

        ``created_at`` is kept from the first write; ``updated_at`` is
        refreshed every time.
        """
        pass

    @abstractmethod
    async def get(self, owner: str, month: str) -> Optional[Budget]:
        pass

    @abstractmethod
    async def list(self, owner: str) -> list[Budget]:
        pass
