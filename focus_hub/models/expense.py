"""
Expense model definitions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from focus_hub.models.base import CamelModel


class ExpenseCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    amount: float = Field(..., gt=0)
    category: Optional[str] = Field(None, max_length=100)
    date: Optional[datetime] = None
    budget_id: Optional[str] = Field(None, max_length=36)
    note: Optional[str] = Field(None, max_length=1000)


class Expense(ExpenseCreate):
    id: str
    user_email: str
    created_at: datetime
