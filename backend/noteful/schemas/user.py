"""User response schema. The password hash is never part of a response."""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    id: str = Field(description="ObjectId-format identifier")
    fullname: str = Field(default="")
    username: str

    model_config = {"from_attributes": True}
