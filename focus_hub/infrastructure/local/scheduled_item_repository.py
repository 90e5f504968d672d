"""
SQLAlchemy implementation shared by the class and task repositories.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, Optional

from sqlalchemy import and_, delete, func, select

from focus_hub.infrastructure.local.database import _utcnow
from focus_hub.interfaces.scheduled_item_repository import IScheduledItemRepository, ItemT
from focus_hub.models.enums import WindowMode
from focus_hub.services.time_window import WindowFilter
from focus_hub.utils.datetime_utils import to_storage

_TIME_COLUMNS = ("start_time", "end_time", "date")


class SqlScheduledItemRepository(IScheduledItemRepository[ItemT], Generic[ItemT]):
    """
    Owner-scoped time ranges stored in one table.

    Subclasses set ``orm_model`` and implement ``_orm_to_model``.
    """

    orm_model: Any = None

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _orm_to_model(self, orm) -> ItemT:
        raise NotImplementedError

    def _to_columns(self, fields: dict[str, Any]) -> dict[str, Any]:
        columns = {}
        for name, value in fields.items():
            if name in _TIME_COLUMNS:
                value = to_storage(value)
            elif isinstance(value, Enum):
                value = value.value
            columns[name] = value
        return columns

    def _window_clause(self, window: WindowFilter):
        orm = self.orm_model
        now = to_storage(window.now)
        if window.mode is WindowMode.NEXT:
            time_clause = orm.end_time >= now
        else:
            time_clause = orm.end_time < now
        return and_(orm.user_email == window.owner, time_clause)

    def _order(self, ascending: bool):
        column = self.orm_model.start_time
        return column.asc() if ascending else column.desc()

    def _owned(self, owner: str, item_id: str):
        orm = self.orm_model
        return and_(orm.id == item_id, orm.user_email == owner)

    async def create(self, owner: str, fields: dict[str, Any]) -> ItemT:
        async with self._session_factory() as session:
            orm = self.orm_model(**self._to_columns(fields))
            orm.user_email = owner
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, owner: str, item_id: str) -> Optional[ItemT]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(self.orm_model).where(self._owned(owner, item_id))
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def update(self, owner: str, item_id: str, changes: dict[str, Any]) -> Optional[ItemT]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(self.orm_model).where(self._owned(owner, item_id))
            )
            orm = result.scalar_one_or_none()
            if not orm:
                return None

            for name, value in self._to_columns(changes).items():
                setattr(orm, name, value)
            orm.updated_at = _utcnow()

            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def delete(self, item_id: str, owner: Optional[str] = None) -> bool:
        async with self._session_factory() as session:
            stmt = delete(self.orm_model).where(self.orm_model.id == item_id)
            if owner is not None:
                stmt = stmt.where(self.orm_model.user_email == owner)
            result = await session.execute(stmt)
            await session.commit()
            return result.rowcount > 0

    async def find_overlapping(
        self, owner: str, start_time: datetime, end_time: datetime
    ) -> Optional[ItemT]:
        orm = self.orm_model
        async with self._session_factory() as session:
            result = await session.execute(
                select(orm)
                .where(
                    and_(
                        orm.user_email == owner,
                        orm.start_time < to_storage(end_time),
                        orm.end_time > to_storage(start_time),
                    )
                )
                .order_by(orm.start_time.asc())
                .limit(1)
            )
            found = result.scalar_one_or_none()
            return self._orm_to_model(found) if found else None

    async def count(self, window: WindowFilter) -> int:
        async with self._session_factory() as session:
            result = await session.execute(
                select(func.count()).select_from(self.orm_model).where(self._window_clause(window))
            )
            return int(result.scalar_one())

    async def list(
        self,
        window: WindowFilter,
        ascending: bool = True,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[ItemT]:
        async with self._session_factory() as session:
            query = (
                select(self.orm_model)
                .where(self._window_clause(window))
                .order_by(self._order(ascending), self.orm_model.created_at.asc())
            )
            if limit is not None:
                query = query.limit(limit)
            if offset:
                query = query.offset(offset)

            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def list_start_times(self, window: WindowFilter) -> list[datetime]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(self.orm_model.start_time).where(self._window_clause(window))
            )
            return list(result.scalars().all())

    async def list_starting_between(
        self,
        window: WindowFilter,
        start_from: datetime,
        start_before: datetime,
        ascending: bool = True,
    ) -> list[ItemT]:
        orm = self.orm_model
        async with self._session_factory() as session:
            result = await session.execute(
                select(orm)
                .where(
                    and_(
                        self._window_clause(window),
                        orm.start_time >= to_storage(start_from),
                        orm.start_time < to_storage(start_before),
                    )
                )
                .order_by(self._order(ascending), orm.created_at.asc())
            )
            return [self._orm_to_model(row) for row in result.scalars().all()]
