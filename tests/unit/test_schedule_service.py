"""
Unit tests for the scheduling service, with the repository mocked.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from zoneinfo import ZoneInfo

import pytest

from focus_hub.core.exceptions import ConflictError, NotFoundError, ValidationError
from focus_hub.models.classes import ClassCreate, ClassItem, ClassUpdate
from focus_hub.models.enums import ViewMode, WindowMode
from focus_hub.services.pagination import PageRequest
from focus_hub.services.schedule_service import ScheduleQuery, ScheduleService

NOW = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
OWNER = "alice@example.com"


def _class_item(item_id: str, start: datetime, hours: int = 1) -> ClassItem:
    return ClassItem(
        id=item_id,
        user_email=OWNER,
        subject="Math",
        instructor="Prof. Karim",
        color="#3b82f6",
        start_time=start,
        end_time=start + timedelta(hours=hours),
        created_at=NOW,
    )


def _service(repo, **kwargs) -> ScheduleService[ClassItem]:
    return ScheduleService(repo, item_model=ClassItem, label="class", clock=lambda: NOW, **kwargs)


class TestScheduleQueryParse:
    def test_defaults(self):
        query = ScheduleQuery.parse()
        assert query.mode is WindowMode.NEXT
        assert query.view is ViewMode.FLAT
        assert query.timezone == ZoneInfo("Asia/Dhaka")
        assert query.page == PageRequest(1, 5)

    @pytest.mark.parametrize(
        "kwargs",
        [{"mode": "later"}, {"view": "calendar"}, {"timezone": "Mars/Olympus"}],
    )
    def test_invalid_selectors(self, kwargs):
        with pytest.raises(ValidationError):
            ScheduleQuery.parse(**kwargs)

    def test_bad_paging_falls_back(self):
        query = ScheduleQuery.parse(page="zero", limit="-1")
        assert query.page == PageRequest(1, 5)


@pytest.mark.asyncio
async def test_flat_listing_uses_separate_count():
    repo = AsyncMock()
    repo.count.return_value = 12
    repo.list.return_value = [_class_item(f"c{i}", NOW + timedelta(hours=i)) for i in range(5)]
    service = _service(repo)

    query = ScheduleQuery.parse(mode="next", view="flat", page="2", limit="5")
    response = await service.list_items(OWNER, query)

    assert response.total_count == 12
    assert response.total_pages == 3
    assert response.page == 2
    window = repo.count.await_args.args[0]
    assert window.owner == OWNER and window.now == NOW
    repo.list.assert_awaited_once_with(window, ascending=True, limit=5, offset=5)


@pytest.mark.asyncio
async def test_prev_listing_is_descending():
    repo = AsyncMock()
    repo.count.return_value = 3
    repo.list.return_value = []
    service = _service(repo)

    response = await service.list_items(OWNER, ScheduleQuery.parse(mode="prev"))

    assert response.total_pages == 1
    assert repo.list.await_args.kwargs["ascending"] is False


@pytest.mark.asyncio
async def test_page_past_the_end_skips_item_query():
    repo = AsyncMock()
    repo.count.return_value = 3
    service = _service(repo)

    response = await service.list_items(
        OWNER, ScheduleQuery.parse(page="99999999999999999999", limit="5")
    )

    assert response.items == []
    assert response.total_count == 3
    assert response.page == PageRequest.from_params("99999999999999999999", None).page
    repo.list.assert_not_awaited()


@pytest.mark.asyncio
async def test_group_listing_paginates_dates():
    # Seven distinct Dhaka dates, one class each, at 04:00Z (10:00 local).
    starts = [datetime(2024, 1, 11 + d, 4, tzinfo=timezone.utc) for d in range(7)]
    items = [_class_item(f"c{d}", start) for d, start in enumerate(starts)]

    repo = AsyncMock()
    repo.list_start_times.return_value = starts
    repo.list_starting_between.return_value = items[:4]
    service = _service(repo)

    query = ScheduleQuery.parse(view="group", page="1", limit="3", timezone="Asia/Dhaka")
    response = await service.list_items(OWNER, query)

    assert response.total_count == 7
    assert response.total_pages == 3
    assert [bucket.date for bucket in response.items] == ["2024-01-11", "2024-01-12", "2024-01-13"]
    assert all(bucket.count == 1 for bucket in response.items)
    repo.count.assert_not_awaited()


@pytest.mark.asyncio
async def test_group_listing_past_last_page_is_empty():
    repo = AsyncMock()
    repo.list_start_times.return_value = [datetime(2024, 1, 11, 4, tzinfo=timezone.utc)]
    service = _service(repo)

    query = ScheduleQuery.parse(view="group", page="5")
    response = await service.list_items(OWNER, query)

    assert response.items == []
    assert response.total_count == 1
    repo.list_starting_between.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_checks_overlap_then_persists():
    repo = AsyncMock()
    repo.find_overlapping.return_value = None
    repo.create.return_value = _class_item("new", NOW)
    service = _service(repo)

    payload = ClassCreate(
        subject="Math",
        instructor="Prof. Karim",
        start_time=NOW,
        end_time=NOW + timedelta(hours=1),
    )
    created = await service.create_item(OWNER, payload)

    assert created.id == "new"
    owner, fields = repo.create.await_args.args
    assert owner == OWNER
    assert fields["subject"] == "Math"
    assert "user_email" not in fields


@pytest.mark.asyncio
async def test_create_conflict_writes_nothing():
    repo = AsyncMock()
    repo.find_overlapping.return_value = _class_item("busy", NOW)
    service = _service(repo)

    payload = ClassCreate(
        subject="Math",
        instructor="Prof. Karim",
        start_time=NOW + timedelta(minutes=30),
        end_time=NOW + timedelta(minutes=90),
    )
    with pytest.raises(ConflictError):
        await service.create_item(OWNER, payload)

    repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_rechecks_ordering_against_stored_values():
    repo = AsyncMock()
    repo.get.return_value = _class_item("c1", NOW, hours=1)
    service = _service(repo)

    with pytest.raises(ValidationError):
        await service.update_item(OWNER, "c1", ClassUpdate(start_time=NOW + timedelta(hours=2)))

    repo.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_does_not_run_overlap_check():
    repo = AsyncMock()
    repo.get.return_value = _class_item("c1", NOW)
    repo.update.return_value = _class_item("c1", NOW)
    service = _service(repo)

    await service.update_item(OWNER, "c1", ClassUpdate(end_time=NOW + timedelta(hours=3)))

    repo.find_overlapping.assert_not_awaited()
    changes = repo.update.await_args.args[2]
    assert changes["end_time"] == NOW + timedelta(hours=3)


@pytest.mark.asyncio
async def test_update_missing_item():
    repo = AsyncMock()
    repo.get.return_value = None
    service = _service(repo)

    with pytest.raises(NotFoundError):
        await service.update_item(OWNER, "nope", ClassUpdate(subject="Art"))


@pytest.mark.asyncio
async def test_delete_scope_follows_policy():
    repo = AsyncMock()
    repo.delete.return_value = True

    await _service(repo, owner_scoped_delete=False).delete_item(OWNER, "c1")
    repo.delete.assert_awaited_with("c1", owner=None)

    await _service(repo, owner_scoped_delete=True).delete_item(OWNER, "c1")
    repo.delete.assert_awaited_with("c1", owner=OWNER)


@pytest.mark.asyncio
async def test_delete_missing_item():
    repo = AsyncMock()
    repo.delete.return_value = False

    with pytest.raises(NotFoundError):
        await _service(repo).delete_item(OWNER, "gone")
