"""Shared fixtures for unit tests.

Every test gets a fresh in-memory SQLite database with all tables created,
plus small factories for catalog rows.
"""

from __future__ import annotations

from typing import AsyncGenerator, Dict, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.pool import StaticPool

import juicebox_factory.core.database.entities  # noqa: F401  (registers tables)
from juicebox_factory.core.database.entities import Category, Review, Tool, ToolScore
from juicebox_factory.core.database.repositories import SqlRepoBundle, build_sql_repos

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async_session_maker = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:  # type: ignore[attr-defined]
        yield session


@pytest.fixture
def repos(session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos(session=session)


@pytest.fixture
def make_category(repos: SqlRepoBundle):
    """Factory persisting a category."""

    async def _make(name: str = "Web Development", **fields) -> Category:
        return await repos.categories.create(Category(name=name, **fields))

    return _make


@pytest.fixture
def make_tool(repos: SqlRepoBundle):
    """Factory persisting a tool and, when ``overall`` or ``scores`` is given, its score row."""

    async def _make(
        name: str,
        overall: Optional[float] = None,
        scores: Optional[Dict[str, float]] = None,
        **fields,
    ) -> Tool:
        tool = await repos.tools.create(Tool(name=name, **fields))
        if overall is not None or scores:
            values = dict(scores or {})
            if overall is not None:
                values["overall_score"] = overall
            await repos.scores.create(ToolScore(tool_id=tool.id, **values))
        return tool

    return _make


@pytest.fixture
def make_review(repos: SqlRepoBundle):
    """Factory persisting a review."""

    async def _make(tool_id: int, user_id: str, rating: int = 4, **fields) -> Review:
        return await repos.reviews.create(Review(tool_id=tool_id, user_id=user_id, rating=rating, **fields))

    return _make
