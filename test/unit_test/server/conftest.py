"""Fixtures for API tests.

The app runs against the per-test in-memory database from the parent
conftest. Process-wide services are replaced with offline ones: heuristic AI,
static discovery samples, a fresh notification broker and a GitHub client
answering from an httpx mock transport.
"""

from typing import AsyncGenerator, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from juicebox_factory.ai import HeuristicAIService
from juicebox_factory.core.database import get_session
from juicebox_factory.core.database.repositories import build_sql_repos
from juicebox_factory.discovery import DiscoveryPipeline, GitHubClient, StaticDiscoverySource
from juicebox_factory.notifications import NotificationBroker
from juicebox_factory.scoring import ToolScoringEngine
from juicebox_factory.server.main import app
from juicebox_factory.server.services.deps import (
    get_ai_service,
    get_broker,
    get_discovery_pipeline,
    get_github_client,
    get_scoring_engine,
)

GITHUB_REPO = {
    "id": 7,
    "name": "widget",
    "full_name": "acme/widget",
    "description": "Widgets for everyone",
    "html_url": "https://github.com/acme/widget",
    "stargazers_count": 1200,
    "language": "TypeScript",
    "topics": ["react"],
}


@pytest.fixture
def broker() -> NotificationBroker:
    return NotificationBroker(queue_size=10)


@pytest.fixture
def github_requests() -> List[httpx.Request]:
    return []


@pytest_asyncio.fixture
async def github_client(github_requests) -> AsyncGenerator[GitHubClient, None]:
    """GitHub client whose search endpoint returns one repository; ``q=fail`` answers 503."""

    def handler(request: httpx.Request) -> httpx.Response:
        github_requests.append(request)
        if request.url.params.get("q") == "fail":
            return httpx.Response(503)
        return httpx.Response(200, json={"total_count": 1, "items": [GITHUB_REPO]})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        yield GitHubClient(base_url="http://mock-github", http_client=http_client)


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session: AsyncSession,
    broker: NotificationBroker,
    github_client: GitHubClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden dependencies."""

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_ai_service] = HeuristicAIService
    app.dependency_overrides[get_broker] = lambda: broker
    app.dependency_overrides[get_github_client] = lambda: github_client
    app.dependency_overrides[get_discovery_pipeline] = lambda: DiscoveryPipeline(
        [StaticDiscoverySource("github"), StaticDiscoverySource("npm")]
    )
    app.dependency_overrides[get_scoring_engine] = lambda: ToolScoringEngine(
        build_sql_repos(session=session), batch_delay=0
    )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
