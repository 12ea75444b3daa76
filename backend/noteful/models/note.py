"""
Noteful API — Note SQLAlchemy Model
====================================

What:  ORM model representing the `notes` table and its `note_tags`
       association table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by NoteService for CRUD and search, and by Alembic for schema management.

Table Design Rationale:
    - id: ObjectId-format string so clients keep 24-hex identifiers
    - title: Required; the API rejects a missing or empty title
    - content: Free text, empty string when omitted
    - folder_id: Optional reference to a folder; cleared when the folder is deleted
    - tags: Many-to-many through note_tags, always listed by tag name;
            rows removed with the note or tag
    - created_at / updated_at: UTC timestamps; list order falls back to created_at

Query Patterns:
    - List notes in a folder: WHERE folder_id = :id   → idx_notes_folder_id
    - List notes with a tag:  EXISTS (note_tags ...)  → note_tags primary key
    - Default listing:        ORDER BY created_at     → idx_notes_created_at
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Column, ForeignKey, Index, String, Table, Text, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from noteful.database import Base
from noteful.ids import new_object_id
from noteful.models.folder import utcnow
from noteful.models.tag import Tag


# ── Association Table ─────────────────────────────────────────────────────
note_tags = Table(
    "note_tags",
    Base.metadata,
    Column(
        "note_id",
        String(24),
        ForeignKey("notes.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        String(24),
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Created by POST /api/notes (title required)
        2. Replaced field-by-field by PUT /api/notes/{id}
        3. Loses its folder reference when the folder is deleted
        4. Loses a tag reference when that tag is deleted
        5. Removed by DELETE /api/notes/{id}, together with its note_tags rows
    """

    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=new_object_id,
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    folder_id: Mapped[Optional[str]] = mapped_column(
        String(24),
        ForeignKey("folders.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    # selectin loading keeps tag population inside the async session;
    # lazy loading would trigger implicit IO after the query returns
    tags: Mapped[List[Tag]] = relationship(
        Tag,
        secondary=note_tags,
        lazy="selectin",
        order_by=Tag.name,
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', folder_id={self.folder_id})>"
