"""Shared enums for API models."""

from enum import Enum


class StoryStatus(str, Enum):
    """Publication status of a story."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
