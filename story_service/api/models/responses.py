"""Pydantic models for API responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import StoryStatus


class StoryResponse(BaseModel):
    """A persisted story as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    created_by: str = Field(alias="createdBy")
    status: StoryStatus
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class FieldErrorResponse(BaseModel):
    """One failed validation rule."""

    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    errors: list[FieldErrorResponse]


class MessageResponse(BaseModel):
    """Error body used by create, update and delete."""

    message: str


class ErrorResponse(BaseModel):
    """Error body used by list and get."""

    error: str
