"""
Tasks API endpoints.

Time-boxed tasks of the signed-in user. Listing supports upcoming/past
windows, flat or per-day views and pagination.
"""

from fastapi import APIRouter, Depends, status

from focus_hub.api.deps import CurrentUser, ScopedUser, TaskService
from focus_hub.api.errors import to_http_exception
from focus_hub.api.schedule_params import get_schedule_query
from focus_hub.core.exceptions import FocusHubError
from focus_hub.models.schedule import DeleteResult, ScheduleListResponse
from focus_hub.models.task import TaskCreate, TaskItem, TaskUpdate
from focus_hub.services.schedule_service import ScheduleQuery

router = APIRouter(tags=["tasks"])


@router.get("/tasks", response_model=ScheduleListResponse[TaskItem])
async def list_tasks(
    user: ScopedUser,
    service: TaskService,
    query: ScheduleQuery = Depends(get_schedule_query),
):
    """List tasks ending after now (``next``) or already ended (``prev``)."""
    try:
        return await service.list_items(user.email, query)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.post("/task", response_model=TaskItem, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: TaskCreate,
    user: CurrentUser,
    service: TaskService,
):
    """Create a task. Rejected if it overlaps another of the user's tasks."""
    try:
        return await service.create_item(user.email, payload)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/task/{task_id}", response_model=TaskItem)
async def update_task(
    task_id: str,
    update: TaskUpdate,
    user: CurrentUser,
    service: TaskService,
):
    try:
        return await service.update_item(user.email, task_id, update)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/task/{task_id}", response_model=DeleteResult)
async def delete_task(
    task_id: str,
    user: CurrentUser,
    service: TaskService,
):
    try:
        await service.delete_item(user.email, task_id)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc
    return DeleteResult(deleted_count=1)
