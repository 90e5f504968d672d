"""
SQLite implementation of Note repository.
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import and_, select

from focus_hub.infrastructure.local.database import NoteORM, _utcnow
from focus_hub.interfaces.note_repository import INoteRepository
from focus_hub.models.note import Note
from focus_hub.utils.datetime_utils import ensure_utc


class SqliteNoteRepository(INoteRepository):
    """SQLite implementation of note repository."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _orm_to_model(self, orm: NoteORM) -> Note:
        """Convert ORM object to Pydantic model."""
        return Note(
            id=orm.id,
            user_email=orm.user_email,
            title=orm.title,
            subject=orm.subject,
            content=orm.content or "",
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def _get_orm(self, session, owner: str, note_id: str) -> Optional[NoteORM]:
        result = await session.execute(
            select(NoteORM).where(and_(NoteORM.id == note_id, NoteORM.user_email == owner))
        )
        return result.scalar_one_or_none()

    async def create(self, owner: str, title: str, subject: Optional[str], content: str) -> Note:
        async with self._session_factory() as session:
            orm = NoteORM(user_email=owner, title=title, subject=subject, content=content)
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, owner: str, note_id: str) -> Optional[Note]:
        async with self._session_factory() as session:
            orm = await self._get_orm(session, owner, note_id)
            return self._orm_to_model(orm) if orm else None

    async def list(self, owner: str, subject: Optional[str] = None) -> list[Note]:
        async with self._session_factory() as session:
            query = select(NoteORM).where(NoteORM.user_email == owner)
            if subject is not None:
                query = query.where(NoteORM.subject == subject)
            query = query.order_by(NoteORM.created_at.desc())

            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def update(self, owner: str, note_id: str, changes: dict[str, Any]) -> Optional[Note]:
        async with self._session_factory() as session:
            orm = await self._get_orm(session, owner, note_id)
            if not orm:
                return None

            for name, value in changes.items():
                setattr(orm, name, value)
            orm.updated_at = _utcnow()

            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def delete(self, owner: str, note_id: str) -> bool:
        async with self._session_factory() as session:
            orm = await self._get_orm(session, owner, note_id)
            if not orm:
                return False

            await session.delete(orm)
            await session.commit()
            return True
