"""
QuickNotes Client: Controller
===============================

What:  The client's actions and form state machine.
How:   Each action issues at most one API call and then patches AppState
       from the server's answer. No retries, no queuing.

Form state machine:
    Idle    ──start_edit(note)──▶ Editing   draft copied from the note
    Editing ──cancel_edit()─────▶ Idle      draft cleared
    Editing ──submit() ok───────▶ Idle      note replaced with server copy
    Idle    ──submit() ok───────▶ Idle      server copy prepended, draft cleared

    submit() with an empty field opens an Alert and sends nothing.

Delete flow:
    request_delete(id) opens Confirm; confirm() sends DELETE and on success
    drops the note locally (no refetch); dismiss() cancels.

Failures (TransportError, ApiError) set `state.error` and leave the note
list and the draft untouched.
"""

import logging

from quicknotes.client.api import NotesApiClient
from quicknotes.client.state import CLOSED, Alert, AppState, Confirm, NoteDraft
from quicknotes.exceptions import ApiError, ClientError

logger = logging.getLogger(__name__)

MESSAGES = {
    "load_failed": "Failed to load notes",
    "create_failed": "Failed to create note",
    "update_failed": "Failed to update note",
    "delete_failed": "Failed to delete note",
    "fill_all_fields": "Please fill in all fields",
    "confirm_delete": "Delete this note?",
}


def describe_failure(exc: ClientError, fallback: str) -> str:
    """
    Banner text for a failed request.

    Server-side rejections keep the server's wording (and field errors);
    transport failures get the generic per-action message.
    """
    if isinstance(exc, ApiError):
        details = "; ".join(
            message for messages in exc.errors.values() for message in messages
        )
        return f"{fallback}: {details or exc.message}"
    return fallback


class NotesApp:
    """Holds AppState and performs user actions against the API."""

    def __init__(self, api: NotesApiClient):
        self.api = api
        self.state = AppState()

    # ── Loading ───────────────────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch all notes, replacing the local list."""
        self.state.loading = True
        try:
            self.state.notes = await self.api.list_notes()
            self.state.error = None
        except ClientError as e:
            logger.warning("Loading notes failed: %s", e.message)
            self.state.error = describe_failure(e, MESSAGES["load_failed"])
        finally:
            self.state.loading = False

    # ── Form ──────────────────────────────────────────────────────────────

    def start_edit(self, note_id: int) -> bool:
        """Enter Editing with the draft copied from the note. False if unknown id."""
        note = self.state.find(note_id)
        if note is None:
            return False
        self.state.is_editing = True
        self.state.current_note = NoteDraft.from_note(note)
        return True

    def cancel_edit(self) -> None:
        self._reset_form()

    def set_title(self, title: str) -> None:
        self.state.current_note.title = title

    def set_content(self, content: str) -> None:
        self.state.current_note.content = content

    async def submit(self) -> None:
        draft = self.state.current_note
        if not draft.is_complete():
            self.state.modal = Alert(MESSAGES["fill_all_fields"])
            return

        if self.state.is_editing and draft.id is not None:
            await self._update(draft.id, draft.title, draft.content)
        else:
            await self._create(draft.title, draft.content)

    async def _create(self, title: str, content: str) -> None:
        try:
            note = await self.api.create_note(title, content)
        except ClientError as e:
            logger.warning("Creating note failed: %s", e.message)
            self.state.error = describe_failure(e, MESSAGES["create_failed"])
            return
        self.state.notes = [note, *self.state.notes]
        self.state.error = None
        self._reset_form()

    async def _update(self, note_id: int, title: str, content: str) -> None:
        try:
            note = await self.api.update_note(note_id, title=title, content=content)
        except ClientError as e:
            logger.warning("Updating note %s failed: %s", note_id, e.message)
            self.state.error = describe_failure(e, MESSAGES["update_failed"])
            return
        self.state.notes = [note if n.id == note_id else n for n in self.state.notes]
        self.state.error = None
        self._reset_form()

    def _reset_form(self) -> None:
        self.state.is_editing = False
        self.state.current_note = NoteDraft()

    # ── Delete & modal ────────────────────────────────────────────────────

    def request_delete(self, note_id: int) -> bool:
        """Open the confirmation dialog. False if unknown id."""
        if self.state.find(note_id) is None:
            return False

        async def do_delete() -> None:
            await self._delete(note_id)

        self.state.modal = Confirm(MESSAGES["confirm_delete"], do_delete)
        return True

    async def _delete(self, note_id: int) -> None:
        try:
            await self.api.delete_note(note_id)
        except ClientError as e:
            logger.warning("Deleting note %s failed: %s", note_id, e.message)
            self.state.error = describe_failure(e, MESSAGES["delete_failed"])
            return
        self.state.notes = [n for n in self.state.notes if n.id != note_id]
        self.state.error = None
        if self.state.current_note.id == note_id:
            self._reset_form()

    async def confirm(self) -> None:
        """Accept the open dialog: run a Confirm action, or close an Alert."""
        modal = self.state.modal
        self.state.modal = CLOSED
        if isinstance(modal, Confirm):
            await modal.on_confirm()

    def dismiss(self) -> None:
        self.state.modal = CLOSED
