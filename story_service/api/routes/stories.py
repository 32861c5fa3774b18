"""Story CRUD endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ..dependencies import JSONBody, Service
from ..errors import StoryPersistenceError, StoryValidationError
from ..models.responses import (
    ErrorResponse,
    MessageResponse,
    StoryResponse,
    ValidationErrorResponse,
)

router = APIRouter()

NOT_FOUND_MESSAGE = "Cannot find story by id"


def _validation_failed(error: StoryValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": error.errors})


def _not_found(key: str, text: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={key: text})


@router.post(
    "",
    response_model=StoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a story",
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": MessageResponse}},
)
async def create_story(body: JSONBody, service: Service):
    """Create a story from title, content, createdBy and status."""
    try:
        return await service.create_story(body)
    except StoryValidationError as e:
        return _validation_failed(e)
    except StoryPersistenceError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": e.message},
        )


@router.put(
    "/{story_id}",
    response_model=StoryResponse,
    summary="Update a story",
    description="Set any subset of title, content, createdBy and status. Other fields are left unchanged.",
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
async def update_story(story_id: str, body: JSONBody, service: Service):
    """Partially update a story."""
    try:
        story = await service.update_story(story_id, body)
    except StoryValidationError as e:
        return _validation_failed(e)
    except StoryPersistenceError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": e.message},
        )

    if story is None:
        return _not_found("message", NOT_FOUND_MESSAGE)
    return story


@router.delete(
    "/{story_id}",
    response_model=StoryResponse,
    summary="Delete a story",
    description="Delete a story and return the record as it was before deletion.",
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def delete_story(story_id: str, service: Service):
    """Delete a story."""
    try:
        story = await service.delete_story(story_id)
    except StoryPersistenceError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": e.message},
        )

    if story is None:
        return _not_found("message", NOT_FOUND_MESSAGE)
    return story


# List and get report lookup failures as 400 with an "error" key, unlike the
# write endpoints.
@router.get(
    "",
    response_model=list[StoryResponse],
    summary="List all stories",
    responses={400: {"model": ErrorResponse}},
)
async def list_stories(service: Service):
    """List every story."""
    try:
        return await service.list_stories()
    except StoryPersistenceError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": e.message})


@router.get(
    "/{story_id}",
    response_model=StoryResponse,
    summary="Get a story",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_story(story_id: str, service: Service):
    """Get a story by ID."""
    try:
        story = await service.get_story(story_id)
    except StoryPersistenceError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": e.message})

    if story is None:
        return _not_found("error", "Story not found")
    return story
