"""
Async SQLite storage wiring.

The engine and session factory belong to the application instance: the
lifespan hook in `main.py` opens them on startup, stores them on `app.state`
and disposes the engine on shutdown. Request handlers receive a session
through the `get_db` dependency.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, future=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> bool:
    """
    Create the `ads` table if it is missing.

    Returns False when the database cannot be opened. Startup goes on either
    way; handlers then fail per request.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Error opening database: %s", exc)
        return False
    logger.info("Connected to SQLite database.")
    return True


async def close_engine(engine: AsyncEngine) -> None:
    try:
        await engine.dispose()
    except SQLAlchemyError as exc:
        logger.error("Error closing database: %s", exc)
    logger.info("Database connection closed.")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    sessionmaker: async_sessionmaker[AsyncSession] = request.app.state.sessionmaker
    async with sessionmaker() as session:
        yield session
