"""FastAPI application for the Story Service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings, load_settings
from .database.db import Database
from .errors import MalformedBodyError
from .logging import configure_logging
from .routes import stories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown.

    The database must answer before the app serves requests; a failed
    connection aborts startup.
    """
    database: Database = app.state.database
    try:
        await database.connect()
    except Exception:
        logger.exception("Database connection failed")
        raise
    logger.info("Database connected")

    yield

    await database.dispose()
    logger.info("Database connection closed")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application around an explicit settings object and database handle."""
    settings = settings or load_settings()
    database = database or Database(settings.database_url)

    app = FastAPI(
        title="Story Service API",
        description="""
Create, read, update and delete stories.

A story has a title, content, author (`createdBy`) and a status of
`draft`, `published` or `archived`.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.include_router(stories.router, prefix="/story", tags=["Stories"])

    @app.exception_handler(MalformedBodyError)
    async def malformed_body_handler(request: Request, exc: MalformedBodyError):
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    async def root():
        return "Server running successfully"

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def run(settings: Optional[Settings] = None, reload: bool = False) -> None:
    """Configure logging and serve the app with uvicorn."""
    import uvicorn

    settings = settings or load_settings()
    configure_logging(json_format=settings.log_json, level=settings.log_level_number)
    if reload:
        uvicorn.run("story_service.api.main:app", host=settings.host, port=settings.port, reload=True)
    else:
        uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


app = create_app()


if __name__ == "__main__":
    run()
