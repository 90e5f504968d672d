"""
Monthly budget model definitions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from focus_hub.models.base import CamelModel

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class BudgetUpsert(CamelModel):
    """One budget per owner and month; writing again replaces the amount."""

    month: str = Field(..., pattern=MONTH_PATTERN, description="YYYY-MM")
    amount: float = Field(..., gt=0)


class Budget(BudgetUpsert):
    id: str
    user_email: str
    created_at: datetime
    updated_at: Optional[datetime] = None
