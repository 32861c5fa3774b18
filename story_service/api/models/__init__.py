"""Pydantic models for API requests and responses."""

from .enums import StoryStatus
from .requests import CreateStoryRequest, UpdateStoryRequest
from .responses import (
    StoryResponse,
    FieldErrorResponse,
    ValidationErrorResponse,
    MessageResponse,
    ErrorResponse,
)

__all__ = [
    "StoryStatus",
    "CreateStoryRequest",
    "UpdateStoryRequest",
    "StoryResponse",
    "FieldErrorResponse",
    "ValidationErrorResponse",
    "MessageResponse",
    "ErrorResponse",
]
