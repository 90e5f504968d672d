"""
SQLite implementation of Budget repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError

from focus_hub.infrastructure.local.database import BudgetORM, _utcnow
from focus_hub.interfaces.budget_repository import IBudgetRepository
from focus_hub.models.budget import Budget, BudgetUpsert
from focus_hub.utils.datetime_utils import ensure_utc


class SqliteBudgetRepository(IBudgetRepository):
    """SQLite implementation of budget repository."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _orm_to_model(self, orm: BudgetORM) -> Budget:
        return Budget(
            id=orm.id,
            user_email=orm.user_email,
            month=orm.month,
            amount=orm.amount,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def _find(self, session, owner: str, month: str) -> Optional[BudgetORM]:
        result = await session.execute(
            select(BudgetORM).where(and_(BudgetORM.user_email == owner, BudgetORM.month == month))
        )
        return result.scalar_one_or_none()

    async def upsert(self, owner: str, budget: BudgetUpsert) -> Budget:
        """
        Insert or replace the owner's budget for ``budget.month``.

        A concurrent first write for the same month violates the
        (owner, month) unique constraint; the write is then retried once and
        finds the row the other request inserted.
        """
        try:
            return await self._write(owner, budget)
        except IntegrityError:
            return await self._write(owner, budget)

    async def _write(self, owner: str, budget: BudgetUpsert) -> Budget:
        async with self._session_factory() as session:
            orm = await self._find(session, owner, budget.month)
            now = _utcnow()

            if orm is None:
                orm = BudgetORM(user_email=owner, month=budget.month, created_at=now)
                session.add(orm)
            orm.amount = budget.amount
            orm.updated_at = now

            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, owner: str, month: str) -> Optional[Budget]:
        async with self._session_factory() as session:
            orm = await self._find(session, owner, month)
            return self._orm_to_model(orm) if orm else None

    async def list(self, owner: str) -> list[Budget]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(BudgetORM)
                .where(BudgetORM.user_email == owner)
                .order_by(BudgetORM.month.desc())
            )
            return [self._orm_to_model(orm) for orm in result.scalars().all()]
