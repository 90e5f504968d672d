"""
Note service: rich-text sanitization and subject filtering.
"""

from typing import Optional

from focus_hub.core.exceptions import NotFoundError
from focus_hub.interfaces.note_repository import INoteRepository
from focus_hub.models.note import Note, NoteCreate, NoteUpdate
from focus_hub.utils.html_sanitizer import sanitize_html

# Placeholder values clients send when no subject is selected.
_NO_SUBJECT_FILTER = {"", "all", "undefined", "null"}


def normalize_subject_filter(subject: Optional[str]) -> Optional[str]:
    """Return the subject to filter by, or None when the filter should be ignored."""
    if subject is None:
        return None
    subject = subject.strip()
    if subject.lower() in _NO_SUBJECT_FILTER:
        return None
    return subject


class NoteService:
    def __init__(self, repo: INoteRepository):
        self.repo = repo

    async def create_note(self, owner: str, note: NoteCreate) -> Note:
        return await self.repo.create(
            owner,
            title=note.title,
            subject=note.subject,
            content=sanitize_html(note.content),
        )

    async def list_notes(self, owner: str, subject: Optional[str] = None) -> list[Note]:
        return await self.repo.list(owner, subject=normalize_subject_filter(subject))

    async def get_note(self, owner: str, note_id: str) -> Note:
        note = await self.repo.get(owner, note_id)
        if note is None:
            raise NotFoundError(f"Note {note_id} not found")
        return note

    async def update_note(self, owner: str, note_id: str, update: NoteUpdate) -> Note:
        changes = update.changes()
        if "content" in changes:
            changes["content"] = sanitize_html(changes["content"])

        note = await self.repo.update(owner, note_id, changes)
        if note is None:
            raise NotFoundError(f"Note {note_id} not found")
        return note

    async def delete_note(self, owner: str, note_id: str) -> None:
        if not await self.repo.delete(owner, note_id):
            raise NotFoundError(f"Note {note_id} not found")
