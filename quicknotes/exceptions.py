"""
QuickNotes: Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the server and the client.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch the server
       exceptions and return the standard JSON envelope with the right
       HTTP status code. The terminal client catches the client exceptions
       at its controller boundary and shows them as an error banner.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError   → 422 Unprocessable Entity (per-field errors)
    ├── NotFoundError     → 404 Not Found
    ├── DatabaseError     → 500 Internal Server Error
    └── ClientError       (client side, never sent over HTTP)
        ├── TransportError  network failure or unreadable response
        └── ApiError        server answered with success=false
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


# ══════════════════════════════════════════════════════════════════════════
# Server-side errors
# ══════════════════════════════════════════════════════════════════════════


class ValidationError(QuickNotesError):
    """
    Raised when client input fails validation.

    HTTP:    422 Unprocessable Entity

    `errors` maps each failing field to a list of messages:
        {
            "success": false,
            "message": "Validation failed",
            "errors": {"title": ["The title field is required."]}
        }
    """

    def __init__(
        self,
        errors: Optional[Dict[str, List[str]]] = None,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors or {}

    @classmethod
    def from_pydantic(cls, details: Sequence[Mapping[str, Any]]) -> "ValidationError":
        """
        Builds a ValidationError from Pydantic/FastAPI error details.

        Each detail has a `loc` like ("body", "title") from FastAPI, or
        ("title",) from a direct model_validate(); the last string element
        after "body" names the field. Errors on the body as a whole (not
        valid JSON, not an object, missing) are reported under "body".
        """
        errors: Dict[str, List[str]] = {}
        for detail in details:
            loc = [part for part in detail.get("loc", ()) if isinstance(part, str)]
            if loc[:1] == ["body"]:
                loc = loc[1:]
            field = loc[-1] if loc else "body"
            message = _field_message(field, detail)
            messages = errors.setdefault(field, [])
            if message not in messages:
                messages.append(message)
        return cls(errors=errors)


# Pydantic error types → human-readable messages
_REQUIRED_TYPES = {"missing", "string_too_short", "null_not_allowed"}
_STRING_TYPES = {"string_type"}
_TOO_LONG_TYPES = {"string_too_long"}
_BODY_TYPES = {"json_invalid", "json_type", "dict_type", "model_type", "model_attributes_type"}

BODY_NOT_OBJECT = "The request body must be a JSON object."


def _field_message(field: str, detail: Mapping[str, Any]) -> str:
    error_type = detail.get("type", "")
    if error_type in _BODY_TYPES:
        return BODY_NOT_OBJECT
    label = field.replace("_", " ")
    if error_type in _REQUIRED_TYPES:
        return f"The {label} field is required."
    if error_type in _STRING_TYPES:
        # Explicit null on a present field counts as "required", not "string"
        if detail.get("input", "") is None:
            return f"The {label} field is required."
        return f"The {label} field must be a string."
    if error_type in _TOO_LONG_TYPES:
        limit = (detail.get("ctx") or {}).get("max_length")
        return f"The {label} field must not be greater than {limit} characters."
    return str(detail.get("msg", "Invalid value"))


class NotFoundError(QuickNotesError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/notes/{id} with an id that has no row.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; the service layer turns
    that None into this exception so routes stay free of lookup checks.
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(QuickNotesError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Detailed error
    info is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


# ══════════════════════════════════════════════════════════════════════════
# Client-side errors
# ══════════════════════════════════════════════════════════════════════════


class ClientError(QuickNotesError):
    """Base for errors raised by the HTTP client in `quicknotes.client`."""


class TransportError(ClientError):
    """
    The request never produced a usable envelope: connection refused,
    timeout, or a response body that is not JSON.
    """


class ApiError(ClientError):
    """
    The server answered with an envelope whose `success` is false.

    Attributes:
        status_code: HTTP status of the response
        errors:      Per-field validation messages (422 only)
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message=message, context={"status_code": status_code})
        self.status_code = status_code
        self.errors = errors or {}
