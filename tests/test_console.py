"""
QuickNotes: Console View Tests
================================

What:  Tests for render() and ConsoleView command handling.
How:   Real NotesApp over an AsyncMock API; output captured in a list.
"""

from unittest.mock import AsyncMock

import pytest

from quicknotes.client.console import HELP_TEXT, ConsoleView, render
from quicknotes.client.controller import NotesApp
from quicknotes.client.state import Alert, AppState


@pytest.fixture
def api(make_note):
    client = AsyncMock()
    client.list_notes.return_value = [make_note(2, "Second", "Body 2"), make_note(1, "First", "Body 1")]
    return client


@pytest.fixture
def view(api):
    output = []
    console = ConsoleView(NotesApp(api), read_line=lambda prompt: "quit", write=output.append)
    console.output = output
    return console


class TestRender:

    def test_loading(self):
        assert render(AppState()) == "Loading..."

    def test_empty_list(self):
        screen = render(AppState(loading=False))

        assert "📝 My Notes" in screen
        assert "Create a new note" in screen
        assert "All notes (0)" in screen
        assert "No notes yet. Create the first one!" in screen

    def test_notes_in_order(self, make_note):
        state = AppState(loading=False, notes=[make_note(2, "Second"), make_note(1, "First")])

        screen = render(state)

        assert "All notes (2)" in screen
        assert screen.index("#2  Second") < screen.index("#1  First")
        assert "Created: " in screen
        assert "No notes yet" not in screen

    def test_error_and_alert(self):
        state = AppState(loading=False, error="Failed to load notes", modal=Alert("Please fill in all fields"))

        screen = render(state)

        assert "! Failed to load notes" in screen
        assert "[!] Please fill in all fields  (ok)" in screen


class TestHandle:

    @pytest.mark.asyncio
    async def test_quit(self, view):
        assert await view.handle("quit") is False
        assert await view.handle("EXIT") is False

    @pytest.mark.asyncio
    async def test_create_through_commands(self, view, api, make_note):
        await view.app.load()
        api.create_note.return_value = make_note(3, "Groceries", "Milk")

        await view.handle("title Groceries")
        await view.handle("content Milk")
        await view.handle("save")

        api.create_note.assert_awaited_once_with("Groceries", "Milk")
        assert view.app.state.notes[0].id == 3

    @pytest.mark.asyncio
    async def test_edit_and_cancel(self, view):
        await view.app.load()

        await view.handle("edit #1")
        assert "Edit note #1" in render(view.app.state)

        await view.handle("cancel")
        assert view.app.state.is_editing is False

    @pytest.mark.asyncio
    async def test_delete_confirmed(self, view, api):
        await view.app.load()

        await view.handle("delete 2")
        assert "[?] Delete this note?  (yes / no)" in render(view.app.state)

        await view.handle("yes")
        api.delete_note.assert_awaited_once_with(2)
        assert [n.id for n in view.app.state.notes] == [1]

    @pytest.mark.asyncio
    async def test_delete_declined(self, view, api):
        await view.app.load()

        await view.handle("delete 2")
        await view.handle("no")

        api.delete_note.assert_not_called()
        assert len(view.app.state.notes) == 2

    @pytest.mark.asyncio
    async def test_unknown_id(self, view):
        await view.app.load()

        await view.handle("edit abc")

        assert view.output == ["No note with id 'abc'"]

    @pytest.mark.asyncio
    async def test_help_and_unknown_command(self, view):
        await view.handle("help")
        await view.handle("frobnicate")

        assert view.output[0] == HELP_TEXT
        assert "save" in HELP_TEXT
        assert view.output[1] == "Unknown command 'frobnicate'; type 'help'"

    @pytest.mark.asyncio
    async def test_run_loads_renders_and_quits(self, view, api):
        await view.run()

        api.list_notes.assert_awaited_once()
        assert "All notes (2)" in view.output[0]
