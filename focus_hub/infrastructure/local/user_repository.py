"""
SQLite implementation of User repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from focus_hub.core.exceptions import DuplicateError
from focus_hub.infrastructure.local.database import UserORM
from focus_hub.interfaces.user_repository import IUserRepository
from focus_hub.models.user import UserAccount, UserProfile
from focus_hub.utils.datetime_utils import ensure_utc


class SqliteUserRepository(IUserRepository):
    """SQLite implementation of user repository."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _orm_to_model(self, orm: UserORM) -> UserAccount:
        return UserAccount(
            id=orm.id,
            email=orm.email,
            display_name=orm.display_name,
            photo_url=orm.photo_url,
            created_at=ensure_utc(orm.created_at),
        )

    async def create(self, email: str, profile: UserProfile) -> UserAccount:
        async with self._session_factory() as session:
            orm = UserORM(
                email=email,
                display_name=profile.display_name,
                photo_url=profile.photo_url,
            )
            session.add(orm)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                raise DuplicateError(f"User {email} already exists") from exc
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get_by_email(self, email: str) -> Optional[UserAccount]:
        async with self._session_factory() as session:
            result = await session.execute(select(UserORM).where(UserORM.email == email))
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def list(self) -> list[UserAccount]:
        async with self._session_factory() as session:
            result = await session.execute(select(UserORM).order_by(UserORM.created_at.asc()))
            return [self._orm_to_model(orm) for orm in result.scalars().all()]
