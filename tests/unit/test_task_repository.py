"""
Unit tests for Task repository.
"""

from datetime import datetime, timedelta, timezone

import pytest

from focus_hub.infrastructure.local.task_repository import SqliteTaskRepository
from focus_hub.models.enums import Priority, WindowMode
from focus_hub.models.task import TaskCreate
from focus_hub.services.time_window import WindowFilter

NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


def _fields(title: str, start: datetime, **extra) -> dict:
    return TaskCreate(title=title, start_time=start, end_time=start + timedelta(hours=1), **extra).model_dump()


@pytest.mark.asyncio
async def test_create_task(session_factory, test_user_email):
    """Test creating a task."""
    repo = SqliteTaskRepository(session_factory)

    task = await repo.create(test_user_email, _fields("Revise calculus", NOW, priority=Priority.HIGH))

    assert task.id is not None
    assert task.title == "Revise calculus"
    assert task.priority == Priority.HIGH
    assert task.user_email == test_user_email


@pytest.mark.asyncio
async def test_get_task_is_owner_scoped(session_factory, test_user_email):
    repo = SqliteTaskRepository(session_factory)
    created = await repo.create(test_user_email, _fields("Lab report", NOW))

    assert (await repo.get(test_user_email, created.id)).title == "Lab report"
    assert await repo.get("bob@example.com", created.id) is None


@pytest.mark.asyncio
async def test_update_task_priority(session_factory, test_user_email):
    repo = SqliteTaskRepository(session_factory)
    created = await repo.create(test_user_email, _fields("Essay", NOW))

    updated = await repo.update(test_user_email, created.id, {"priority": Priority.LOW})

    assert updated.priority == Priority.LOW


@pytest.mark.asyncio
async def test_prev_window_lists_newest_first(session_factory, test_user_email):
    repo = SqliteTaskRepository(session_factory)
    for days in (3, 1, 2):
        await repo.create(test_user_email, _fields(f"d{days}", NOW - timedelta(days=days)))

    window = WindowFilter(owner=test_user_email, mode=WindowMode.PREV, now=NOW)
    tasks = await repo.list(window, ascending=False)

    assert [t.title for t in tasks] == ["d1", "d2", "d3"]


@pytest.mark.asyncio
async def test_delete_task_requires_owner(session_factory, test_user_email):
    repo = SqliteTaskRepository(session_factory)
    created = await repo.create(test_user_email, _fields("Groceries", NOW))

    assert await repo.delete(created.id, owner="bob@example.com") is False
    assert await repo.delete(created.id, owner=test_user_email) is True
