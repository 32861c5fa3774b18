"""Database connection management using SQLAlchemy async."""

from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class Database:
    """Engine and session factory for one database.

    Constructed explicitly and handed to the application factory, so each
    app (and each test) owns its own connection pool.
    """

    def __init__(self, url: str, engine: Optional[AsyncEngine] = None, **engine_kwargs):
        self.url = url
        if engine is None:
            engine_kwargs.setdefault("pool_pre_ping", True)  # Verify connections before use
            engine = create_async_engine(url, echo=False, **engine_kwargs)
        self.engine = engine
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def connect(self) -> None:
        """Check the connection and create missing tables.

        Raises whatever the driver raises when the database is unreachable.
        """
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
