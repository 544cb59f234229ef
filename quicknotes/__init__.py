"""
QuickNotes: Application Package Initializer
=============================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Used by uvicorn (`quicknotes.main:app`), Alembic, pytest and the
      terminal client (`python -m quicknotes.client`).

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, envelopes
    ├─────────────────────────────────────┤
    │         Services (Note access)      │  ← list / get / insert / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The `client` subpackage talks to the routes over HTTP only; it never
    imports the database or service layers.
"""

__version__ = "1.0.0"
