"""
Expenses API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from focus_hub.api.deps import CurrentUser, ExpenseRepo, ScopedUser
from focus_hub.models.expense import Expense, ExpenseCreate

router = APIRouter(tags=["expenses"])


@router.post("/expense", response_model=Expense, status_code=status.HTTP_201_CREATED)
async def create_expense(expense: ExpenseCreate, user: CurrentUser, repo: ExpenseRepo):
    """Record an expense for the signed-in user."""
    return await repo.create(user.email, expense)


@router.get("/expenses", response_model=list[Expense])
async def list_expenses(
    user: ScopedUser,
    repo: ExpenseRepo,
    budget_id: Optional[str] = Query(None, alias="budgetId"),
):
    return await repo.list(user.email, budget_id=budget_id)
