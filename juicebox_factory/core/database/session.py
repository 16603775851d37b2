"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates all tables from the ORM metadata when ``DATABASE__AUTO_CREATE``
    is enabled. Existing tables are left untouched.
    """
    if not settings.database.auto_create:
        logger.info("Database auto-create disabled; expecting tables to exist")
        return
    await create_all(engine)
    logger.info("Database tables created")
