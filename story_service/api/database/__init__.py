"""Database module for story persistence."""

from .db import Base, Database
from .models import Story
from .repository import StoryRepository, parse_story_id

__all__ = [
    # Connection management
    "Base",
    "Database",
    # Models
    "Story",
    # Repositories
    "StoryRepository",
    "parse_story_id",
]
