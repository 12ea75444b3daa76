"""Tag response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class TagSummary(BaseModel):
    """Populated tag reference embedded in note responses."""
    id: str
    name: str

    model_config = {"from_attributes": True}


class TagResponse(TagSummary):
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
