"""
QuickNotes Client: HTTP API Client
====================================

What:  Async wrapper around the five /api/notes endpoints.
How:   httpx.AsyncClient; every response body is read as an envelope and
       the `data` payload is parsed with the server's own NoteRead schema.
Who:   Used by NotesApp (controller.py).

Failure mapping:
    - Connection errors, timeouts, non-JSON bodies → TransportError
    - Envelopes with success=false (404, 422, 500)  → ApiError
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from quicknotes.exceptions import ApiError, TransportError
from quicknotes.schemas.note import NoteRead

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"


class NotesApiClient:
    """
    Client for the QuickNotes REST API.

    Usage:
        async with NotesApiClient("http://localhost:8000/api") as api:
            notes = await api.list_notes()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ── Endpoints ─────────────────────────────────────────────────────────

    async def list_notes(self) -> List[NoteRead]:
        envelope = await self._request("GET", "/notes")
        return [NoteRead.model_validate(item) for item in envelope.get("data") or []]

    async def get_note(self, note_id: int) -> NoteRead:
        envelope = await self._request("GET", f"/notes/{note_id}")
        return NoteRead.model_validate(envelope["data"])

    async def create_note(self, title: str, content: str) -> NoteRead:
        envelope = await self._request("POST", "/notes", json={"title": title, "content": content})
        return NoteRead.model_validate(envelope["data"])

    async def update_note(self, note_id: int, **fields: str) -> NoteRead:
        """Sends only the given fields (partial update)."""
        envelope = await self._request("PUT", f"/notes/{note_id}", json=fields)
        return NoteRead.model_validate(envelope["data"])

    async def delete_note(self, note_id: int) -> str:
        """Returns the server's confirmation message."""
        envelope = await self._request("DELETE", f"/notes/{note_id}")
        return envelope.get("message", "")

    # ── Transport ─────────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(
                message=f"Could not reach the server: {e}",
                context={"method": method, "path": path},
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                message=f"Unreadable response from the server (HTTP {response.status_code})",
                context={"method": method, "path": path},
            ) from e

        if not isinstance(body, dict):
            raise TransportError(message="Unexpected response shape from the server")

        if not body.get("success"):
            raise ApiError(
                message=body.get("message") or f"Request failed (HTTP {response.status_code})",
                status_code=response.status_code,
                errors=body.get("errors"),
            )
        return body
