"""Pydantic models for validated request bodies.

Raw bodies are checked against the constraint tables in ``validation``
first, so these models only describe the shape that reaches the repository.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import StoryStatus


class CreateStoryRequest(BaseModel):
    """Fields for a new story."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    content: str
    created_by: str = Field(alias="createdBy")
    status: StoryStatus


class UpdateStoryRequest(BaseModel):
    """Partial update; only fields present in the body are set."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    content: Optional[str] = None
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    status: Optional[StoryStatus] = None

    def changes(self) -> dict:
        """Column values for the fields the client supplied."""
        return self.model_dump(exclude_unset=True, mode="json")
