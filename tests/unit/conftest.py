"""Pytest fixtures for API tests."""

import uuid
from datetime import datetime, timezone
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from story_service.api.config import Settings
from story_service.api.database.db import Database
from story_service.api.database.repository import StoryRepository, parse_story_id
from story_service.api.dependencies import get_repository, get_story_service
from story_service.api.main import create_app
from story_service.api.models.requests import CreateStoryRequest
from story_service.api.models.responses import StoryResponse
from story_service.api.services.story_service import StoryService


class InMemoryStoryRepository:
    """Dict-backed stand-in for StoryRepository with the same contract."""

    def __init__(self):
        self.stories: dict[str, StoryResponse] = {}

    async def create_story(self, request: CreateStoryRequest) -> StoryResponse:
        now = datetime.now(timezone.utc)
        story = StoryResponse(
            id=str(uuid.uuid4()),
            title=request.title,
            content=request.content,
            created_by=request.created_by,
            status=request.status,
            created_at=now,
            updated_at=now,
        )
        self.stories[story.id] = story
        return story

    async def list_stories(self) -> list[StoryResponse]:
        return list(self.stories.values())

    async def get_story(self, story_id: str) -> Optional[StoryResponse]:
        return self.stories.get(parse_story_id(story_id))

    async def update_story(self, story_id: str, changes: dict) -> Optional[StoryResponse]:
        key = parse_story_id(story_id)
        story = self.stories.get(key)
        if story is None:
            return None
        updated = StoryResponse(**{**story.model_dump(), **changes})
        self.stories[key] = updated
        return updated

    async def delete_story(self, story_id: str) -> Optional[StoryResponse]:
        return self.stories.pop(parse_story_id(story_id), None)


@pytest.fixture
def test_settings():
    return Settings(database_url="postgresql+asyncpg://localhost:5432/story_test", log_json=False)


@pytest.fixture
def mock_database():
    """Database handle whose connect/dispose do nothing."""
    database = MagicMock(spec=Database)
    database.connect = AsyncMock()
    database.dispose = AsyncMock()
    return database


@pytest.fixture
def app(test_settings, mock_database):
    return create_app(test_settings, mock_database)


@pytest.fixture
def mock_repository():
    """Create a mock repository for unit tests."""
    return AsyncMock(spec=StoryRepository)


@pytest.fixture
def mock_service():
    """Create a mock service for unit tests."""
    return AsyncMock(spec=StoryService)


@pytest.fixture
def client_with_mocks(app, mock_service):
    """TestClient with a mocked service."""
    app.dependency_overrides[get_story_service] = lambda: mock_service

    with TestClient(app) as client:
        yield client, mock_service

    app.dependency_overrides.clear()


@pytest.fixture
def memory_repository():
    return InMemoryStoryRepository()


@pytest.fixture
def client(app, memory_repository):
    """TestClient with the real service over an in-memory repository."""
    app.dependency_overrides[get_repository] = lambda: memory_repository

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
