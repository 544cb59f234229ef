"""
QuickNotes Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between client and backend.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   Used by route handlers (request bodies, response models) and by the
       terminal client to parse server responses.

Every response is wrapped in the envelope:
    {"success": bool, "data": ..., "message": str}
Error envelopes are built by the exception handlers in main.py and may add
"errors" (per-field messages) and "request_id".
"""

from datetime import datetime
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

TITLE_MAX_LENGTH = 255

DataT = TypeVar("DataT")


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    Both fields are required non-empty strings. Surrounding whitespace is
    stripped first, so "   " is rejected like "". Unknown keys are ignored.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Note title (1-255 chars)",
    )
    content: str = Field(min_length=1, description="Note body (non-empty)")


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}: a partial update.

    Absent fields are left untouched. A field that is present must pass the
    same rules as on creation; an explicit null is rejected.

    Use `model_dump(exclude_unset=True)` to get only the supplied fields.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="New title (1-255 chars)",
    )
    content: Optional[str] = Field(default=None, min_length=1, description="New body (non-empty)")

    @field_validator("title", "content")
    @classmethod
    def reject_null(cls, value: Optional[str]) -> str:
        """None is only the "not supplied" default; a supplied null is an error."""
        if value is None:
            raise PydanticCustomError("null_not_allowed", "Field may be omitted but not null")
        return value


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteRead(BaseModel):
    """Full representation of a note, as returned in `data`."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: datetime = Field(description="Creation time (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last modification time (UTC ISO 8601)")


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Success envelope carrying a payload.

    Examples:
        ApiResponse[NoteRead]        GET/POST/PUT single note
        ApiResponse[List[NoteRead]]  GET /api/notes
    """
    success: bool = Field(default=True)
    data: DataT
    message: str = Field(description="Human-readable outcome")


class MessageResponse(BaseModel):
    """Success envelope without a payload (DELETE)."""
    success: bool = Field(default=True)
    message: str


class ErrorResponse(BaseModel):
    """
    Error envelope returned by every exception handler.

    Example:
        {
            "success": false,
            "message": "Validation failed",
            "errors": {"title": ["The title field is required."]},
            "request_id": "a1b2c3d4"
        }
    """
    success: bool = Field(default=False)
    message: str = Field(description="Human-readable error description")
    errors: Optional[Dict[str, List[str]]] = Field(
        default=None, description="Per-field validation messages (422 only)"
    )
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


NoteEnvelope = ApiResponse[NoteRead]
NoteListEnvelope = ApiResponse[List[NoteRead]]
