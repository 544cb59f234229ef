"""
QuickNotes Backend: Note Service (Note access layer)
======================================================

What:  The five note operations: list, get, create, update, delete.
How:   Runs SQLAlchemy queries on the request's AsyncSession and converts
       ORM rows into NoteRead response models.
Who:   Called by route handlers; calls the database layer.

Transactions:
    The service only flushes. The commit (or rollback) happens once per
    request in `get_db_session`, so a failure anywhere in the request
    leaves the table untouched.

Error Handling Strategy:
    - Missing rows raise NotFoundError (→ 404)
    - Any other failure is logged with context and wrapped in
      DatabaseError (→ 500); the client sees a generic message only
"""

import logging
from datetime import timedelta
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quicknotes.exceptions import DatabaseError, NotFoundError
from quicknotes.models.note import Note, utcnow
from quicknotes.schemas.note import NoteCreate, NoteRead, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """
    Stateless access layer for notes.

    Responsibilities:
        - list_notes(): every note, newest first
        - get_note(): single note or NotFoundError
        - create_note(): insert with server-assigned id and timestamps
        - update_note(): partial update of the supplied fields
        - delete_note(): permanent removal
    """

    async def list_notes(self, db: AsyncSession) -> List[NoteRead]:
        """
        Return all notes ordered by created_at descending.

        Query plan:
            SELECT * FROM notes ORDER BY created_at DESC, id DESC
            → id breaks ties between notes created in the same instant
        """
        try:
            result = await db.execute(
                select(Note).order_by(Note.created_at.desc(), Note.id.desc())
            )
            return [NoteRead.model_validate(note) for note in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_note(self, db: AsyncSession, note_id: int) -> NoteRead:
        """
        Retrieve a single note by ID.

        Raises:
            NotFoundError: No note with this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        note = await self._load(db, note_id)
        return NoteRead.model_validate(note)

    async def create_note(self, db: AsyncSession, payload: NoteCreate) -> NoteRead:
        """
        Insert a new note.

        Both timestamps come from a single clock reading so a fresh note
        has created_at == updated_at exactly.
        """
        now = utcnow()
        note = Note(
            title=payload.title,
            content=payload.content,
            created_at=now,
            updated_at=now,
        )
        try:
            db.add(note)
            await db.flush()  # Assigns the auto-increment id
        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Note %s created (title_len=%d content_len=%d)",
                    note.id, len(note.title), len(note.content))
        return NoteRead.model_validate(note)

    async def update_note(
        self,
        db: AsyncSession,
        note_id: int,
        payload: NoteUpdate,
    ) -> NoteRead:
        """
        Apply a partial update.

        Only fields the client supplied are considered. A field whose new
        value equals the stored one is not a change; when nothing changes
        the row is not written and updated_at keeps its value.

        Raises:
            NotFoundError: No note with this id (→ 404)
            DatabaseError: Write failed (→ 500)
        """
        note = await self._load(db, note_id)

        changes = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if getattr(note, field) != value
        }
        if not changes:
            logger.info("Note %s update had no changes", note_id)
            return NoteRead.model_validate(note)

        for field, value in changes.items():
            setattr(note, field, value)
        # Strictly later than the previous value, even on a coarse or stepped clock
        note.updated_at = max(utcnow(), note.updated_at + timedelta(microseconds=1))

        try:
            await db.flush()
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )

        logger.info("Note %s updated (fields=%s)", note_id, sorted(changes))
        return NoteRead.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: int) -> None:
        """
        Permanently remove a note.

        Raises:
            NotFoundError: No note with this id (→ 404)
            DatabaseError: Delete failed (→ 500)
        """
        note = await self._load(db, note_id)
        try:
            await db.delete(note)
            await db.flush()
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )
        logger.info("Note %s deleted", note_id)

    async def _load(self, db: AsyncSession, note_id: int) -> Note:
        """Fetch the ORM row for `note_id` or raise NotFoundError."""
        try:
            result = await db.execute(select(Note).where(Note.id == note_id))
            note = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            )

        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
