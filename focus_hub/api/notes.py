"""
Notes API endpoints.

Rich-text notes; HTML content is sanitized on every write.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from focus_hub.api.deps import CurrentUser, NoteSvc, ScopedUser
from focus_hub.api.errors import to_http_exception
from focus_hub.core.exceptions import FocusHubError
from focus_hub.models.note import Note, NoteCreate, NoteUpdate
from focus_hub.models.schedule import DeleteResult

router = APIRouter(tags=["notes"])


@router.post("/note", response_model=Note, status_code=status.HTTP_201_CREATED)
async def create_note(note: NoteCreate, user: CurrentUser, service: NoteSvc):
    return await service.create_note(user.email, note)


@router.get("/notes", response_model=list[Note])
async def list_notes(
    user: ScopedUser,
    service: NoteSvc,
    subject: Optional[str] = Query(None, description="Exact subject; 'all' disables the filter"),
):
    return await service.list_notes(user.email, subject)


@router.get("/note/{note_id}", response_model=Note)
async def get_note(note_id: str, user: CurrentUser, service: NoteSvc):
    try:
        return await service.get_note(user.email, note_id)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/note/{note_id}", response_model=Note)
async def update_note(note_id: str, update: NoteUpdate, user: CurrentUser, service: NoteSvc):
    try:
        return await service.update_note(user.email, note_id, update)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc


@router.delete("/note/{note_id}", response_model=DeleteResult)
async def delete_note(note_id: str, user: CurrentUser, service: NoteSvc):
    try:
        await service.delete_note(user.email, note_id)
    except FocusHubError as exc:
        raise to_http_exception(exc) from exc
    return DeleteResult(deleted_count=1)
