"""Folder and tag request/response schemas (both are simple named items)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NamedItemWrite(BaseModel):
    """
    Body of POST/PUT for folders and tags.

    `name` is optional at the schema level so a missing name reaches the
    service and is reported as 400 "Missing `name` in request body".
    """
    name: Optional[str] = Field(default=None, description="Display name (unique)")

    model_config = {"extra": "ignore"}


class FolderResponse(BaseModel):
    id: str = Field(description="ObjectId-format identifier")
    name: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}
