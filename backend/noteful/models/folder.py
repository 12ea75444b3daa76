"""
Noteful API — Folder SQLAlchemy Model
======================================

What:  ORM model for the `folders` table.
Why:   A note may be filed in at most one folder; folders are referenced by
       `notes.folder_id` and listed alphabetically in the UI.

Table Design Rationale:
    - id: ObjectId-format string (24 hex chars), generated in Python
    - name: Unique; a duplicate name is reported as a client error (400)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.ids import new_object_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Folder(Base):
    __tablename__ = "folders"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=new_object_id,
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
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

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
