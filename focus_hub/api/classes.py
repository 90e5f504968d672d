"""
Classes API endpoints.

Timetable entries of the signed-in user. Listing supports upcoming/past
windows, flat or per-day views and pagination.
"""

from fastapi import APIRouter, Depends, status

from focus_hub.api.deps import ClassService, CurrentUser, ScopedUser
from focus_hub.api.errors import to_http_exception
from focus_hub.api.schedule_params import get_schedule_query
from focus_hub.core.exceptions import FocusHubError
from focus_hub.models.classes import ClassCreate, ClassItem, ClassUpdate
from focus_hub.models.schedule import DeleteResult, ScheduleListResponse
from focus_hub.services.schedule_service import ScheduleQuery

router = APIRouter(tags=["classes"])


@router.get("/classes", response_model=ScheduleListResponse[ClassItem])
async def list_classes(
    user: ScopedUser,
    service: ClassService,
    query: ScheduleQuery = Depends(get_schedule_query),
):
    """List classes ending after now (``next``) or already ended (``prev``)."""
    try:
        return await service.list_items(user.email, query)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.post("/class", response_model=ClassItem, status_code=status.HTTP_201_CREATED)
async def create_class(
    payload: ClassCreate,
    user: CurrentUser,
    service: ClassService,
):
    """Create a class. Rejected if it overlaps another of the user's classes."""
    try:
        return await service.create_item(user.email, payload)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/class/{class_id}", response_model=ClassItem)
async def update_class(
    class_id: str,
    update: ClassUpdate,
    user: CurrentUser,
    service: ClassService,
):
    try:
        return await service.update_item(user.email, class_id, update)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/class/{class_id}", response_model=DeleteResult)
async def delete_class(
    class_id: str,
    user: CurrentUser,
    service: ClassService,
):
    try:
        await service.delete_item(user.email, class_id)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc
    return DeleteResult(deleted_count=1)
