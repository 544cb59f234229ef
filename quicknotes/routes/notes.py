"""
QuickNotes Backend: Notes Route Handlers
==========================================

What:  The five note endpoints under /api/notes.
How:   Validates bodies with Pydantic schemas, delegates to NoteService,
       wraps results in the success envelope.
Who:   Called by the QuickNotes client (or any HTTP client).

Errors never leave these handlers as return values: NotFoundError,
DatabaseError and request validation failures propagate to the global
handlers in main.py, which produce the error envelope.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from quicknotes.database import get_db_session
from quicknotes.exceptions import ValidationError
from quicknotes.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteUpdate,
)
from quicknotes.services.note_service import note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
_INVALID = {422: {"description": "Validation failed", "model": ErrorResponse}}


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    summary="List all notes",
    description="Returns every note, most recently created first. No pagination.",
)
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> NoteListEnvelope:
    notes = await note_service.list_notes(db)
    return NoteListEnvelope(data=notes, message="Notes retrieved successfully")


@router.get(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses=_NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.get_note(db, note_id)
    return NoteEnvelope(data=note, message="Note retrieved successfully")


@router.post(
    "/notes",
    response_model=NoteEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Create a note",
    description="Creates a note. `title` (max 255 chars) and `content` are required.",
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    note = await note_service.create_note(db, payload)
    return NoteEnvelope(data=note, message="Note created successfully")


@router.put(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Update a note",
    description=(
        "Partial update: only the supplied fields change. A supplied field must "
        "satisfy the same rules as on creation. Unknown fields are ignored."
    ),
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": NoteUpdate.model_json_schema()}},
        },
    },
)
async def update_note(
    note_id: int,
    payload: Any = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> NoteEnvelope:
    """
    Update a note.

    The body is taken raw and validated only after the note is found, so a
    request that is both invalid and aimed at a missing id gets 404.
    """
    await note_service.get_note(db, note_id)

    try:
        changes = NoteUpdate.model_validate({} if payload is None else payload)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e.errors()) from e

    note = await note_service.update_note(db, note_id, changes)
    return NoteEnvelope(data=note, message="Note updated successfully")


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await note_service.delete_note(db, note_id)
    return MessageResponse(message="Note deleted successfully")
