"""
QuickNotes Backend: Note SQLAlchemy Model
===========================================

What:  ORM model representing the `notes` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: Integer auto-increment primary key, allocated by the database
    - title: VARCHAR(255), mirrors the API's 255-character limit
    - content: TEXT, no length limit
    - created_at / updated_at: UTC with timezone, maintained by the ORM

    Index on created_at DESC serves the only list query:
    ORDER BY created_at DESC.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text, text
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from quicknotes.database import Base


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    TIMESTAMP WITH TIME ZONE that always round-trips as aware UTC.

    PostgreSQL keeps the offset natively. SQLite stores no offset and hands
    back naive datetimes; those are read back as UTC, since only UTC values
    are ever written.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect: Dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Note(Base):
    """
    A single note: a title/content pair with timestamps.

    Lifecycle:
        1. Inserted with created_at == updated_at
        2. Updated field by field; updated_at moves forward on each change
        3. Deleted permanently (no soft delete)

    Query Patterns:
        - List notes: SELECT ... ORDER BY created_at DESC, id DESC
          → Uses idx_notes_created_at
        - Get single note: SELECT ... WHERE id = :id
          → Uses primary key index
    """

    __tablename__ = "notes"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Auto-increment note identifier",
    )

    # ── Fields ────────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Note title, at most 255 characters",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # All storage in UTC; conversion to local time happens in the client.
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was last modified (UTC)",
    )

    # ── Indexes ───────────────────────────────────────────────────────────
    __table_args__ = (
        Index("idx_notes_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Note(id={self.id}, title={self.title!r}, updated_at='{self.updated_at}')>"
