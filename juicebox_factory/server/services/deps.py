"""
Service Dependencies.

Provides request-scoped engines bound to the request's database session and
process-wide singletons (AI service, notification broker, discovery pipeline,
GitHub client) for API endpoints.
"""

from typing import Annotated, Optional

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from juicebox_factory.ai import AIService, build_ai_service
from juicebox_factory.comparison import ComparisonEngine
from juicebox_factory.core.database import get_session
from juicebox_factory.core.database.repositories import SqlRepoBundle, build_sql_repos
from juicebox_factory.discovery import DiscoveryPipeline, GitHubClient, build_discovery_sources
from juicebox_factory.notifications import NotificationBroker, NotificationService
from juicebox_factory.scoring import ToolScoringEngine
from juicebox_factory.search import SearchService
from juicebox_factory.server.core.config import settings

SessionDep = Annotated[AsyncSession, Depends(get_session)]

_ai_service: Optional[AIService] = None
_broker: Optional[NotificationBroker] = None
_http_client: Optional[httpx.AsyncClient] = None
_github_client: Optional[GitHubClient] = None
_discovery_pipeline: Optional[DiscoveryPipeline] = None


def get_repos(session: SessionDep) -> SqlRepoBundle:
    return build_sql_repos(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


def get_scoring_engine(repos: ReposDep) -> ToolScoringEngine:
    return ToolScoringEngine(repos, batch_delay=settings.scoring.batch_delay_seconds)


def get_comparison_engine(repos: ReposDep) -> ComparisonEngine:
    return ComparisonEngine(repos)


def get_search_service(repos: ReposDep) -> SearchService:
    return SearchService(repos, default_limit=settings.search.default_limit)


def get_ai_service() -> AIService:
    global _ai_service
    if _ai_service is None:
        _ai_service = build_ai_service(settings)
    return _ai_service


def get_broker() -> NotificationBroker:
    global _broker
    if _broker is None:
        _broker = NotificationBroker(queue_size=settings.notifications.queue_size)
    return _broker


def get_http_client() -> httpx.AsyncClient:
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient()
    return _http_client


def get_github_client() -> GitHubClient:
    global _github_client
    if _github_client is None:
        _github_client = GitHubClient(
            base_url=settings.github.api_url,
            token=settings.github.token,
            timeout=settings.github.timeout,
            http_client=get_http_client(),
        )
    return _github_client


def get_discovery_pipeline() -> DiscoveryPipeline:
    global _discovery_pipeline
    if _discovery_pipeline is None:
        _discovery_pipeline = DiscoveryPipeline(build_discovery_sources(settings, get_http_client()))
    return _discovery_pipeline


async def close_http_client() -> None:
    """Close the shared HTTP client on shutdown."""
    global _http_client, _github_client, _discovery_pipeline
    if _http_client is not None:
        await _http_client.aclose()
    _http_client = None
    _github_client = None
    _discovery_pipeline = None


def get_notification_service(
    repos: ReposDep,
    broker: Annotated[NotificationBroker, Depends(get_broker)],
) -> NotificationService:
    return NotificationService(repos, broker)


ScoringEngineDep = Annotated[ToolScoringEngine, Depends(get_scoring_engine)]
ComparisonEngineDep = Annotated[ComparisonEngine, Depends(get_comparison_engine)]
SearchServiceDep = Annotated[SearchService, Depends(get_search_service)]
AIServiceDep = Annotated[AIService, Depends(get_ai_service)]
BrokerDep = Annotated[NotificationBroker, Depends(get_broker)]
GitHubClientDep = Annotated[GitHubClient, Depends(get_github_client)]
DiscoveryPipelineDep = Annotated[DiscoveryPipeline, Depends(get_discovery_pipeline)]
NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]
