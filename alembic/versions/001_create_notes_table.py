"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-02-12 00:00:00.000000+00:00

What:  Creates the `notes` table: auto-increment id, title, content and
       the two UTC timestamps, plus an index for newest-first listing.

Rollback: downgrade() drops the table entirely (destructive, all notes lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table. Column docs live in quicknotes/models/note.py."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Auto-increment note identifier",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Note title, at most 255 characters",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Note body",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was last modified (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "idx_notes_created_at",
        "notes",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Drop the notes table. All note data is permanently lost."""
    op.drop_index("idx_notes_created_at", table_name="notes")
    op.drop_table("notes")
