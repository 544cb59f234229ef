"""
QuickNotes Client: Application State
======================================

What:  Everything the client UI shows, as plain data.
How:   Dataclasses mutated only by `NotesApp` (controller.py) and read by
       the console view (console.py).

Modal is a tagged variant:

    Closed                      nothing on screen
    Alert(message)              informational, dismissed with OK
    Confirm(message, on_confirm) asks yes/no; `on_confirm` runs on yes
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Union

from quicknotes.schemas.note import NoteRead


@dataclass(frozen=True)
class Closed:
    """No dialog open."""


@dataclass(frozen=True)
class Alert:
    message: str


@dataclass(frozen=True)
class Confirm:
    message: str
    on_confirm: Callable[[], Awaitable[None]]


Modal = Union[Closed, Alert, Confirm]

CLOSED = Closed()


@dataclass
class NoteDraft:
    """Contents of the create/edit form. `id` is set only while editing."""
    id: Optional[int] = None
    title: str = ""
    content: str = ""

    @classmethod
    def from_note(cls, note: NoteRead) -> "NoteDraft":
        return cls(id=note.id, title=note.title, content=note.content)

    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.content)


@dataclass
class AppState:
    """
    Attributes:
        notes:        Mirrors the server's list order as of the last fetch,
                      patched locally after each successful mutation
        current_note: The form draft
        is_editing:   True while the form edits an existing note
        error:        Last failure message shown as a banner, or None
        loading:      True during the initial fetch
        modal:        Pending dialog
    """
    notes: List[NoteRead] = field(default_factory=list)
    current_note: NoteDraft = field(default_factory=NoteDraft)
    is_editing: bool = False
    error: Optional[str] = None
    loading: bool = True
    modal: Modal = CLOSED

    def find(self, note_id: int) -> Optional[NoteRead]:
        return next((note for note in self.notes if note.id == note_id), None)
