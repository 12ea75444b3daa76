"""
Noteful API — ORM Models
=========================

Importing this package registers every table on `Base.metadata`, which is
what Alembic autogenerate, `create_schema()` and the test fixtures rely on.
"""

from noteful.models.folder import Folder
from noteful.models.note import Note, note_tags
from noteful.models.tag import Tag
from noteful.models.user import User

__all__ = ["Folder", "Note", "Tag", "User", "note_tags"]
