"""Story service: validation, persistence and lifecycle logging."""

from contextlib import contextmanager
from typing import Optional

from ..database.repository import StoryRepository
from ..errors import StoryPersistenceError, StoryValidationError
from ..logging import story_logger
from ..models.requests import CreateStoryRequest, UpdateStoryRequest
from ..models.responses import StoryResponse
from ..validation import CREATE_RULES, UPDATE_RULES, collect_errors, validated_fields


@contextmanager
def _log_failures(operation: str, story_id: Optional[str] = None):
    try:
        yield
    except StoryValidationError as e:
        story_logger.validation_failed(operation, len(e.errors))
        raise
    except StoryPersistenceError as e:
        story_logger.persistence_failed(operation, e, story_id)
        raise


class StoryService:
    """Service for creating and managing stories.

    Returns None where the target story does not exist; raises
    StoryValidationError or StoryPersistenceError otherwise.
    """

    def __init__(self, repo: StoryRepository):
        self.repo = repo

    async def create_story(self, body: dict) -> StoryResponse:
        """Validate a create body and insert the story."""
        with _log_failures("create"):
            fields = validated_fields(body, CREATE_RULES)
            story = await self.repo.create_story(CreateStoryRequest(**fields))

        story_logger.story_created(story.id, story.status.value)
        return story

    async def update_story(self, story_id: str, body: dict) -> Optional[StoryResponse]:
        """Apply the supplied fields of an update body to a story.

        A missing story is reported as None even when the body is invalid.
        """
        with _log_failures("update", story_id):
            errors = collect_errors(body, UPDATE_RULES)
            if errors:
                if await self._is_missing(story_id):
                    return None
                raise StoryValidationError(errors)

            changes = UpdateStoryRequest(**validated_fields(body, UPDATE_RULES)).changes()
            story = await self.repo.update_story(story_id, changes)

        if story is not None:
            story_logger.story_updated(story.id, sorted(changes))
        return story

    async def _is_missing(self, story_id: str) -> bool:
        """True only when the id is well formed and matches no story.

        A failed lookup leaves the validation errors to be reported.
        """
        try:
            return await self.repo.get_story(story_id) is None
        except StoryPersistenceError:
            return False

    async def delete_story(self, story_id: str) -> Optional[StoryResponse]:
        with _log_failures("delete", story_id):
            story = await self.repo.delete_story(story_id)

        if story is not None:
            story_logger.story_deleted(story.id)
        return story

    async def list_stories(self) -> list[StoryResponse]:
        with _log_failures("list"):
            return await self.repo.list_stories()

    async def get_story(self, story_id: str) -> Optional[StoryResponse]:
        with _log_failures("get", story_id):
            return await self.repo.get_story(story_id)
