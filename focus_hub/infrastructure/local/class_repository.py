"""
SQLite implementation of Class repository.
"""

from __future__ import annotations

from focus_hub.infrastructure.local.database import ClassORM
from focus_hub.infrastructure.local.scheduled_item_repository import SqlScheduledItemRepository
from focus_hub.interfaces.class_repository import IClassRepository
from focus_hub.models.classes import ClassItem
from focus_hub.models.enums import Weekday
from focus_hub.utils.datetime_utils import ensure_utc


class SqliteClassRepository(SqlScheduledItemRepository[ClassItem], IClassRepository):
    """SQLite implementation of class repository."""

    orm_model = ClassORM

    def _orm_to_model(self, orm: ClassORM) -> ClassItem:
        """Convert ORM object to Pydantic model."""
        return ClassItem(
            id=orm.id,
            user_email=orm.user_email,
            subject=orm.subject,
            instructor=orm.instructor,
            color=orm.color,
            day=Weekday(orm.day) if orm.day else None,
            date=ensure_utc(orm.date),
            start_time=ensure_utc(orm.start_time),
            end_time=ensure_utc(orm.end_time),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )
