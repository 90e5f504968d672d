"""
SQLite implementation of Task repository.
"""

from __future__ import annotations

from focus_hub.infrastructure.local.database import TaskORM
from focus_hub.infrastructure.local.scheduled_item_repository import SqlScheduledItemRepository
from focus_hub.interfaces.task_repository import ITaskRepository
from focus_hub.models.enums import Priority
from focus_hub.models.task import TaskItem
from focus_hub.utils.datetime_utils import ensure_utc


class SqliteTaskRepository(SqlScheduledItemRepository[TaskItem], ITaskRepository):
    """SQLite implementation of task repository."""

    orm_model = TaskORM

    def _orm_to_model(self, orm: TaskORM) -> TaskItem:
        """Convert ORM object to Pydantic model."""
        return TaskItem(
            id=orm.id,
            user_email=orm.user_email,
            title=orm.title,
            description=orm.description,
            subject=orm.subject,
            priority=Priority(orm.priority or Priority.MEDIUM.value),
            start_time=ensure_utc(orm.start_time),
            end_time=ensure_utc(orm.end_time),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )
