"""
QuickNotes: Client HTTP Wrapper Tests
=======================================

What:  Tests for NotesApiClient envelope handling and error mapping.
How:   httpx.MockTransport for canned responses; ASGITransport for a
       round trip through the real app.

What we test:
    ✅ `data` parsed into NoteRead objects
    ✅ success=false → ApiError with status code and field errors
    ✅ Connection failures and non-JSON bodies → TransportError
    ✅ Partial update sends only the given fields
    ✅ Full CRUD cycle against the in-process server
"""

import json

import httpx
import pytest
from httpx import ASGITransport

from quicknotes.client.api import NotesApiClient
from quicknotes.exceptions import ApiError, TransportError

NOTE = {
    "id": 7,
    "title": "Groceries",
    "content": "Milk, eggs",
    "created_at": "2026-02-12T09:00:00Z",
    "updated_at": "2026-02-12T09:30:00Z",
}


def _client(handler) -> NotesApiClient:
    return NotesApiClient("http://test/api", transport=httpx.MockTransport(handler))


class TestEnvelopeParsing:

    @pytest.mark.asyncio
    async def test_list_notes(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/api/notes"
            return httpx.Response(200, json={"success": True, "data": [NOTE], "message": "ok"})

        async with _client(handler) as api:
            notes = await api.list_notes()

        assert len(notes) == 1
        assert notes[0].id == 7
        assert notes[0].title == "Groceries"
        assert notes[0].created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_sends_only_given_fields(self):
        sent = {}

        def handler(request: httpx.Request) -> httpx.Response:
            sent["method"] = request.method
            sent["path"] = request.url.path
            sent["body"] = json.loads(request.content)
            updated = {**NOTE, "title": "X"}
            return httpx.Response(200, json={"success": True, "data": updated, "message": "ok"})

        async with _client(handler) as api:
            note = await api.update_note(7, title="X")

        assert sent == {"method": "PUT", "path": "/api/notes/7", "body": {"title": "X"}}
        assert note.title == "X"

    @pytest.mark.asyncio
    async def test_delete_returns_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"success": True, "message": "Note deleted successfully"}
            )

        async with _client(handler) as api:
            assert await api.delete_note(7) == "Note deleted successfully"


class TestErrorMapping:

    @pytest.mark.asyncio
    async def test_not_found_raises_api_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"success": False, "message": "Note not found"})

        async with _client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.get_note(999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Note not found"
        assert exc_info.value.errors == {}

    @pytest.mark.asyncio
    async def test_validation_errors_are_kept(self):
        errors = {"title": ["The title field is required."]}

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={"success": False, "message": "Validation failed", "errors": errors},
            )

        async with _client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.create_note("", "body")

        assert exc_info.value.status_code == 422
        assert exc_info.value.errors == errors

    @pytest.mark.asyncio
    async def test_connection_failure_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as api:
            with pytest.raises(TransportError):
                await api.list_notes()

    @pytest.mark.asyncio
    async def test_non_json_body_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        async with _client(handler) as api:
            with pytest.raises(TransportError) as exc_info:
                await api.list_notes()

        assert "502" in exc_info.value.message


class TestAgainstServer:

    @pytest.mark.asyncio
    async def test_crud_cycle(self, database):
        from quicknotes.main import app

        async with NotesApiClient("http://test/api", transport=ASGITransport(app=app)) as api:
            assert await api.list_notes() == []

            first = await api.create_note("First", "one")
            second = await api.create_note("Second", "two")
            assert [n.id for n in await api.list_notes()] == [second.id, first.id]

            edited = await api.update_note(first.id, content="uno")
            assert edited.title == "First"
            assert edited.content == "uno"

            assert await api.delete_note(second.id) == "Note deleted successfully"
            with pytest.raises(ApiError) as exc_info:
                await api.get_note(second.id)
            assert exc_info.value.status_code == 404
