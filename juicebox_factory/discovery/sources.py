"""
Discovery sources.

A source yields ``DiscoveredTool`` candidates. Live sources talk to GitHub
and the NPM registry; the static source serves a fixed sample set and is
used whenever a live source is not configured.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

import httpx

from juicebox_factory.core.errors import UpstreamError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import PricingModel, Timeframe
from juicebox_factory.core.models.io.discovery import DiscoveredTool, GitHubRepository, NpmPackage
from juicebox_factory.server.core.config import Settings

from .github import DEFAULT_TOPICS, GitHubClient
from .signals import (
    DOWNLOAD_SATURATION,
    calculate_npm_confidence,
    categorize_from_topics,
    normalize_repository_url,
    trending_score,
)

logger = get_logger(__name__)

DEFAULT_NPM_QUERY = "keywords:developer-tools"

SAMPLE_GITHUB_REPOSITORIES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "shadcn/ui",
        "full_name": "shadcn/ui",
        "description": "Beautifully designed components built with Radix UI and Tailwind CSS.",
        "html_url": "https://github.com/shadcn/ui",
        "stargazers_count": 45000,
        "language": "TypeScript",
        "topics": ["react", "tailwindcss", "components", "ui"],
        "created_at": "2023-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    },
    {
        "id": 2,
        "name": "microsoft/playwright",
        "full_name": "microsoft/playwright",
        "description": "Playwright is a framework for Web Testing and Automation.",
        "html_url": "https://github.com/microsoft/playwright",
        "stargazers_count": 55000,
        "language": "TypeScript",
        "topics": ["testing", "automation", "browser", "e2e"],
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    },
]

SAMPLE_NPM_PACKAGES: List[Dict[str, Any]] = [
    {
        "name": "vite",
        "description": "Next generation frontend tooling. It's fast!",
        "homepage": "https://vitejs.dev",
        "repository_url": "https://github.com/vitejs/vite",
        "keywords": ["frontend", "hmr", "dev-server", "build-tool", "vite"],
        "weekly_downloads": 15_000_000,
    },
    {
        "name": "prisma",
        "description": "Next-generation Node.js and TypeScript ORM",
        "homepage": "https://prisma.io",
        "repository_url": "https://github.com/prisma/prisma",
        "keywords": ["orm", "database", "typescript", "nodejs"],
        "weekly_downloads": 2_000_000,
    },
]


def npm_package_to_tool(package: NpmPackage) -> DiscoveredTool:
    """Turn an NPM package into a discovery candidate."""
    return DiscoveredTool(
        name=package.name,
        description=package.description or "",
        website_url=package.homepage,
        github_url=normalize_repository_url(package.repository_url),
        category=categorize_from_topics(package.keywords),
        tags=list(package.keywords),
        pricing_model=PricingModel.open_source,
        source="npm",
        confidence_score=calculate_npm_confidence(package),
        downloads=package.weekly_downloads,
        trending_score=trending_score(package.weekly_downloads, DOWNLOAD_SATURATION),
    )


class DiscoverySource(ABC):
    """Producer of discovery candidates."""

    name: str = "source"

    @abstractmethod
    async def discover(self) -> List[DiscoveredTool]:
        """Return candidates; an unreachable upstream yields an empty list."""


class GitHubDiscoverySource(DiscoverySource):
    """Trending repositories from the GitHub search API."""

    name = "github"

    def __init__(
        self,
        client: GitHubClient,
        topics: List[str] | None = None,
        timeframe: Timeframe = Timeframe.weekly,
    ) -> None:
        self.client = client
        self.topics = topics or list(DEFAULT_TOPICS)
        self.timeframe = timeframe

    async def discover(self) -> List[DiscoveredTool]:
        try:
            repos = await self.client.get_trending_repos(self.topics, self.timeframe)
        except UpstreamError as e:
            logger.error(f"GitHub discovery failed: {e.message}")
            return []
        return [self.client.process_repo_for_tool(repo) for repo in repos]


class NpmDiscoverySource(DiscoverySource):
    """Packages from the NPM registry search, enriched with weekly download counts."""

    name = "npm"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        registry_url: str = "https://registry.npmjs.org",
        downloads_url: str = "https://api.npmjs.org",
        query: str = DEFAULT_NPM_QUERY,
        size: int = 20,
        timeout: float = 10.0,
    ) -> None:
        self.http_client = http_client
        self.registry_url = registry_url.rstrip("/")
        self.downloads_url = downloads_url.rstrip("/")
        self.query = query
        self.size = size
        self.timeout = timeout

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = await self.http_client.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise UpstreamError("NPM registry", str(e), cause=e) from e
        return response.json()

    async def _weekly_downloads(self, name: str) -> int:
        try:
            payload = await self._get(f"{self.downloads_url}/downloads/point/last-week/{name}")
        except UpstreamError as e:
            logger.warning(f"Download count unavailable for {name}: {e.message}")
            return 0
        return int(payload.get("downloads") or 0)

    async def search_packages(self) -> List[NpmPackage]:
        payload = await self._get(f"{self.registry_url}/-/v1/search", {"text": self.query, "size": self.size})
        documents = [item.get("package", {}) for item in payload.get("objects", [])]
        downloads = await asyncio.gather(*(self._weekly_downloads(doc["name"]) for doc in documents))

        packages = []
        for doc, weekly in zip(documents, downloads):
            links = doc.get("links") or {}
            packages.append(
                NpmPackage(
                    name=doc["name"],
                    description=doc.get("description"),
                    homepage=links.get("homepage"),
                    repository_url=links.get("repository"),
                    keywords=doc.get("keywords") or [],
                    weekly_downloads=weekly,
                )
            )
        return packages

    async def discover(self) -> List[DiscoveredTool]:
        try:
            packages = await self.search_packages()
        except UpstreamError as e:
            logger.error(f"NPM discovery failed: {e.message}")
            return []
        return [npm_package_to_tool(package) for package in packages]


class StaticDiscoverySource(DiscoverySource):
    """Fixed sample candidates standing in for an unconfigured live source."""

    def __init__(self, source: Literal["github", "npm"], now: Optional[datetime] = None) -> None:
        self.name = source
        self.now = now

    async def discover(self) -> List[DiscoveredTool]:
        if self.name == "github":
            now = self.now or datetime.now(timezone.utc)
            return [
                GitHubClient.process_repo_for_tool(GitHubRepository.model_validate(sample), now)
                for sample in SAMPLE_GITHUB_REPOSITORIES
            ]
        return [npm_package_to_tool(NpmPackage.model_validate(sample)) for sample in SAMPLE_NPM_PACKAGES]


def build_discovery_sources(settings: Settings, http_client: httpx.AsyncClient) -> List[DiscoverySource]:
    """Pick a live or static source for GitHub and NPM from configuration.

    Args:
        settings: Application settings
        http_client: Shared HTTP client for live sources

    Returns:
        The GitHub source followed by the NPM source
    """
    sources: List[DiscoverySource] = []

    if settings.github.token:
        github = GitHubClient(
            base_url=settings.github.api_url,
            token=settings.github.token,
            timeout=settings.github.timeout,
            http_client=http_client,
        )
        sources.append(GitHubDiscoverySource(github))
    else:
        logger.info("GITHUB__TOKEN not set; GitHub discovery serves sample data")
        sources.append(StaticDiscoverySource("github"))

    if settings.npm.live:
        sources.append(
            NpmDiscoverySource(
                http_client,
                registry_url=settings.npm.registry_url,
                downloads_url=settings.npm.downloads_url,
                timeout=settings.npm.timeout,
            )
        )
    else:
        sources.append(StaticDiscoverySource("npm"))
    return sources
