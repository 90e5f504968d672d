"""
Unit tests for the note service.
"""

from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from focus_hub.core.exceptions import NotFoundError
from focus_hub.models.note import NoteCreate, NoteUpdate
from focus_hub.services.note_service import NoteService, normalize_subject_filter


@pytest.mark.parametrize("raw", [None, "", "  ", "all", "ALL", "undefined", "null"])
def test_placeholder_subjects_disable_filter(raw):
    assert normalize_subject_filter(raw) is None


def test_real_subject_kept():
    assert normalize_subject_filter(" Physics ") == "Physics"


@pytest.mark.asyncio
async def test_create_sanitizes_content():
    repo = AsyncMock()
    service = NoteService(repo)

    await service.create_note("a@example.com", NoteCreate(title=" T ", content="<b>x</b><script>y</script>"))

    repo.create.assert_awaited_once_with("a@example.com", title="T", subject=None, content="<b>x</b>")


@pytest.mark.asyncio
async def test_update_resanitizes_content():
    repo = AsyncMock()
    service = NoteService(repo)

    await service.update_note("a@example.com", "n1", NoteUpdate(content='<a href="javascript:x">l</a>'))

    assert repo.update.await_args.args[2] == {"content": "<a>l</a>"}


@pytest.mark.asyncio
async def test_missing_note():
    repo = AsyncMock()
    repo.get.return_value = None
    repo.delete.return_value = False
    service = NoteService(repo)

    with pytest.raises(NotFoundError):
        await service.get_note("a@example.com", "n1")
    with pytest.raises(NotFoundError):
        await service.delete_note("a@example.com", "n1")


@pytest.mark.parametrize("model", [NoteCreate, NoteUpdate])
def test_whitespace_title_fails_length_check(model):
    with pytest.raises(PydanticValidationError):
        model(title="   ")


@pytest.mark.asyncio
async def test_update_stores_stripped_title():
    repo = AsyncMock()
    service = NoteService(repo)

    await service.update_note("a@example.com", "n1", NoteUpdate(title="  Final "))

    assert repo.update.await_args.args[2] == {"title": "Final"}
