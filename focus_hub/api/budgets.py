"""
Budgets API endpoints.

One budget per user and calendar month.
"""

import re
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from focus_hub.api.deps import BudgetRepo, CurrentUser, ScopedUser
from focus_hub.models.budget import MONTH_PATTERN, Budget, BudgetUpsert

router = APIRouter(tags=["budgets"])


@router.put("/budget", response_model=Budget)
async def upsert_budget(budget: BudgetUpsert, user: CurrentUser, repo: BudgetRepo):
    """Create or replace the budget for a month."""
    return await repo.upsert(user.email, budget)


@router.get("/budget", response_model=Optional[Budget])
async def get_budget(
    user: ScopedUser,
    repo: BudgetRepo,
    month: Optional[str] = Query(None, description="YYYY-MM"),
):
    """Budget for one month, or null when none was set."""
    if not month:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="month is required")
    if not re.match(MONTH_PATTERN, month):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="month must be YYYY-MM")
    return await repo.get(user.email, month)


@router.get("/budgets", response_model=list[Budget])
async def list_budgets(user: ScopedUser, repo: BudgetRepo):
    return await repo.list(user.email)
