"""
Expense repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from focus_hub.models.expense import Expense, ExpenseCreate


class IExpenseRepository(ABC):
    """Abstract interface for expense persistence."""

    @abstractmethod
    async def create(self, owner: str, expense: ExpenseCreate) -> Expense:
        pass

    @abstractmethod
    async def list(self, owner: str, budget_id: Optional[str] = None) -> list[Expense]:
        """List the owner's expenses, optionally limited to one budget."""
        pass
