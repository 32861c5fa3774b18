"""Services for story management."""

from .story_service import StoryService

__all__ = ["StoryService"]
