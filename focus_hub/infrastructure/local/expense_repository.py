"""
SQLite implementation of Expense repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from focus_hub.infrastructure.local.database import ExpenseORM
from focus_hub.interfaces.expense_repository import IExpenseRepository
from focus_hub.models.expense import Expense, ExpenseCreate
from focus_hub.utils.datetime_utils import ensure_utc, to_storage


class SqliteExpenseRepository(IExpenseRepository):
    """SQLite implementation of expense repository."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _orm_to_model(self, orm: ExpenseORM) -> Expense:
        return Expense(
            id=orm.id,
            user_email=orm.user_email,
            title=orm.title,
            amount=orm.amount,
            category=orm.category,
            date=ensure_utc(orm.date),
            budget_id=orm.budget_id,
            note=orm.note,
            created_at=ensure_utc(orm.created_at),
        )

    async def create(self, owner: str, expense: ExpenseCreate) -> Expense:
        async with self._session_factory() as session:
            orm = ExpenseORM(
                user_email=owner,
                title=expense.title,
                amount=expense.amount,
                category=expense.category,
                date=to_storage(expense.date),
                budget_id=expense.budget_id,
                note=expense.note,
            )
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def list(self, owner: str, budget_id: Optional[str] = None) -> list[Expense]:
        async with self._session_factory() as session:
            query = select(ExpenseORM).where(ExpenseORM.user_email == owner)
            if budget_id:
                query = query.where(ExpenseORM.budget_id == budget_id)
            query = query.order_by(ExpenseORM.created_at.desc())

            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]
