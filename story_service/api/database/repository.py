"""Repository for story CRUD operations using SQLAlchemy async sessions."""

import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import StoryPersistenceError
from ..models.enums import StoryStatus
from ..models.requests import CreateStoryRequest
from ..models.responses import StoryResponse
from .models import Story


def parse_story_id(story_id: str) -> str:
    """Normalize a story id, rejecting text that is not a UUID."""
    try:
        return str(uuid.UUID(story_id))
    except (ValueError, TypeError, AttributeError):
        raise StoryPersistenceError(
            f'Cast to UUID failed for value "{story_id}" at path "id" for model "Story"'
        ) from None


class StoryRepository:
    """Repository for story persistence operations.

    Lookups that match nothing return None. Driver failures and malformed
    ids raise StoryPersistenceError.
    """

    def __init__(self, session: AsyncSession, touch_updated_at: bool = False):
        self.session = session
        self.touch_updated_at = touch_updated_at

    @asynccontextmanager
    async def _database_errors(self) -> AsyncIterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            orig = getattr(e, "orig", None)
            raise StoryPersistenceError(str(orig or e)) from e

    async def create_story(self, request: CreateStoryRequest) -> StoryResponse:
        """Insert a new story and return it with its generated id."""
        now = datetime.now(timezone.utc)
        story = Story(
            id=str(uuid.uuid4()),
            title=request.title,
            content=request.content,
            created_by=request.created_by,
            status=request.status.value,
            created_at=now,
            updated_at=now,
        )
        async with self._database_errors():
            self.session.add(story)
            await self.session.commit()
        return self._to_response(story)

    async def list_stories(self) -> list[StoryResponse]:
        """Get every story, oldest first."""
        async with self._database_errors():
            result = await self.session.execute(select(Story).order_by(Story.created_at))
            stories = result.scalars().all()
        return [self._to_response(s) for s in stories]

    async def get_story(self, story_id: str) -> Optional[StoryResponse]:
        """Get a story by ID."""
        story = await self._find(story_id)
        if story is None:
            return None
        return self._to_response(story)

    async def update_story(self, story_id: str, changes: dict) -> Optional[StoryResponse]:
        """Apply the given column values to a story and return the result."""
        story = await self._find(story_id)
        if story is None:
            return None

        async with self._database_errors():
            for column, value in changes.items():
                setattr(story, column, value)
            if self.touch_updated_at:
                story.updated_at = datetime.now(timezone.utc)
            await self.session.commit()
        return self._to_response(story)

    async def delete_story(self, story_id: str) -> Optional[StoryResponse]:
        """Delete a story and return its state before deletion."""
        story = await self._find(story_id)
        if story is None:
            return None

        deleted = self._to_response(story)
        async with self._database_errors():
            await self.session.delete(story)
            await self.session.commit()
        return deleted

    async def _find(self, story_id: str) -> Optional[Story]:
        key = parse_story_id(story_id)
        async with self._database_errors():
            return await self.session.get(Story, key)

    def _to_response(self, story: Story) -> StoryResponse:
        """Convert ORM row to response model."""
        return StoryResponse(
            id=story.id,
            title=story.title,
            content=story.content,
            created_by=story.created_by,
            status=StoryStatus(story.status),
            created_at=story.created_at,
            updated_at=story.updated_at,
        )
