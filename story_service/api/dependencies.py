"""FastAPI dependency injection for services and repositories."""

import json
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings
from .database.db import Database
from .database.repository import StoryRepository
from .errors import MalformedBodyError
from .services.story_service import StoryService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


# Database session dependency
async def get_session(
    database: Annotated[Database, Depends(get_database)]
) -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session from the app's database."""
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# Repository - requires session
def get_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> StoryRepository:
    """Get a StoryRepository instance with injected session."""
    return StoryRepository(session, touch_updated_at=settings.touch_updated_at)


# Service - depends on repository
def get_story_service(
    repo: Annotated[StoryRepository, Depends(get_repository)]
) -> StoryService:
    """Get a StoryService instance with injected repository."""
    return StoryService(repo)


async def get_json_body(request: Request) -> dict:
    """Parse a JSON request body as an object.

    Bodies that are empty or not sent as application/json count as {}.

    Raises:
        MalformedBodyError: if the body is not valid JSON or not an object
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise MalformedBodyError() from None
    if not isinstance(body, dict):
        raise MalformedBodyError()
    return body


# Type aliases for cleaner route signatures
Service = Annotated[StoryService, Depends(get_story_service)]
JSONBody = Annotated[dict, Depends(get_json_body)]
