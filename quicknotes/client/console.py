"""
QuickNotes Client: Console View
=================================

What:  Draws AppState as text and turns typed commands into NotesApp actions.
How:   `render()` is a pure function of the state; `ConsoleView.handle()`
       executes one command line; `ConsoleView.run()` loops render → read →
       handle until `quit`.

Commands:
    title <text>     set the draft title
    content <text>   set the draft content
    save             create (or, while editing, update) from the draft
    edit <id>        load a note into the draft
    cancel           leave edit mode, clear the draft
    delete <id>      ask to delete a note
    yes | ok         accept the open dialog
    no               close the open dialog
    refresh          reload all notes from the server
    help             list commands
    quit             exit
"""

import asyncio
from typing import Callable, List, Optional

from quicknotes.client.controller import NotesApp
from quicknotes.client.state import Alert, AppState, Confirm

HELP_TEXT = (__doc__ or "").partition("Commands:\n")[2].rstrip()

_RULE = "─" * 60


def _local_time(note_time) -> str:
    return note_time.astimezone().strftime("%Y-%m-%d %H:%M")


def render(state: AppState) -> str:
    """Full screen for the current state."""
    if state.loading:
        return "Loading..."

    lines: List[str] = [
        "📝 My Notes",
        "A simple app for managing notes",
        _RULE,
    ]

    if state.error:
        lines += [f"! {state.error}", _RULE]

    draft = state.current_note
    heading = f"Edit note #{draft.id}" if state.is_editing else "Create a new note"
    lines += [
        heading,
        f"  Title:   {draft.title}",
        f"  Content: {draft.content}",
        "  [save]" + ("  [cancel]" if state.is_editing else ""),
        _RULE,
        f"All notes ({len(state.notes)})",
    ]

    if not state.notes:
        lines.append("  No notes yet. Create the first one!")
    for note in state.notes:
        lines += [
            f"  #{note.id}  {note.title}",
            f"      {note.content}",
            f"      Created: {_local_time(note.created_at)}",
        ]

    modal = state.modal
    if isinstance(modal, Alert):
        lines += [_RULE, f"[!] {modal.message}  (ok)"]
    elif isinstance(modal, Confirm):
        lines += [_RULE, f"[?] {modal.message}  (yes / no)"]

    return "\n".join(lines)


class ConsoleView:
    """Interactive terminal front end for NotesApp."""

    def __init__(
        self,
        app: NotesApp,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.app = app
        self._read_line = read_line
        self._write = write

    async def run(self) -> None:
        await self.app.load()
        while True:
            self._write(render(self.app.state))
            try:
                line = await asyncio.to_thread(self._read_line, "> ")
            except EOFError:
                break
            if not await self.handle(line):
                break

    async def handle(self, line: str) -> bool:
        """Execute one command line. Returns False when the user quits."""
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()

        if command in ("quit", "exit"):
            return False

        if command in ("yes", "ok"):
            await self.app.confirm()
        elif command == "no":
            self.app.dismiss()
        elif command == "title":
            self.app.set_title(argument)
        elif command == "content":
            self.app.set_content(argument)
        elif command == "save":
            await self.app.submit()
        elif command == "cancel":
            self.app.cancel_edit()
        elif command in ("edit", "delete"):
            note_id = _parse_id(argument)
            action = self.app.start_edit if command == "edit" else self.app.request_delete
            if note_id is None or not action(note_id):
                self._write(f"No note with id {argument!r}")
        elif command == "refresh":
            await self.app.load()
        elif command == "help":
            self._write(HELP_TEXT)
        elif command:
            self._write(f"Unknown command {command!r}; type 'help'")
        return True


def _parse_id(text: str) -> Optional[int]:
    try:
        return int(text.lstrip("#"))
    except ValueError:
        return None
