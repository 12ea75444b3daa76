"""
Noteful API — Note Schemas
===========================

What:  Pydantic models defining the notes API contract.
How:   FastAPI validates request bodies against NoteWrite and serializes
       NoteResponse by alias, so clients see `folderId`, `createdAt`, ...

Wire format example:
    {
        "id": "5b7c1f6e2d8a4c3e9f0a1b2c",
        "title": "5 life lessons learned from cats",
        "content": "Lorem ipsum ...",
        "folderId": "111111111111111111111100",
        "tags": [{"id": "222222222222222222222200", "name": "breed"}],
        "createdAt": "2024-01-15T12:00:00Z",
        "updatedAt": "2024-01-15T12:00:00Z",
        "score": null
    }
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from noteful.schemas.tag import TagSummary


class NoteWrite(BaseModel):
    """
    Body of POST /api/notes and PUT /api/notes/{id}.

    Field presence is checked by NoteService (missing title → 400); only
    value types are enforced here. `tags` is left untyped so that a
    non-array value is reported by the service as a 400 instead of a 422.
    """
    title: Optional[str] = Field(default=None, description="Note title (required, non-empty)")
    content: Optional[str] = Field(default=None, description="Note body")
    folder_id: Optional[str] = Field(
        default=None,
        validation_alias="folderId",
        description="Folder id, or empty string for no folder",
    )
    tags: Optional[Any] = Field(default=None, description="Array of tag ids")

    model_config = {"extra": "ignore"}


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note with populated tags.
    Who:   Returned by every notes endpoint except DELETE.

    `score` is only filled for text-search results.
    """
    id: str = Field(description="ObjectId-format identifier")
    title: str
    content: str
    folder_id: Optional[str] = Field(default=None, serialization_alias="folderId")
    tags: List[TagSummary] = Field(default_factory=list)
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
    score: Optional[float] = Field(
        default=None,
        description="Text-search relevance (null unless searchTerm was given)",
    )

    model_config = {"from_attributes": True}
