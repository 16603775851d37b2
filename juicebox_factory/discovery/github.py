"""
GitHub REST client.

Thin async wrapper over the endpoints discovery needs, built on httpx.
Transport and non-2xx failures surface as ``UpstreamError``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence

import httpx

from juicebox_factory.core.errors import UpstreamError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import PricingModel, Timeframe
from juicebox_factory.core.models.io.discovery import (
    DiscoveredTool,
    GitHubRepository,
    GitHubSearchResult,
)

from .signals import (
    STAR_SATURATION,
    calculate_github_confidence,
    categorize_from_topics,
    trending_score,
)

logger = get_logger(__name__)

DEFAULT_TOPICS = ("javascript", "typescript", "react", "vue", "angular", "nodejs")
USER_AGENT = "JuiceBox-Factory/1.0"

_TIMEFRAME_DAYS = {
    Timeframe.daily: 1,
    Timeframe.weekly: 7,
    Timeframe.monthly: 30,
}


def build_trending_query(topics: Sequence[str], timeframe: Timeframe, today: Optional[date] = None) -> str:
    """Search query for repositories on ``topics`` created within ``timeframe`` with some traction."""
    threshold = (today or date.today()) - timedelta(days=_TIMEFRAME_DAYS[timeframe])
    topic_query = " OR ".join(f"topic:{topic}" for topic in topics)
    return f"{topic_query} created:>{threshold.isoformat()} stars:>10"


class GitHubClient:
    """Async client for the GitHub REST API."""

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        token: Optional[str] = None,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            base_url: API base URL
            token: Personal access token; anonymous requests when unset
            timeout: Request timeout in seconds
            http_client: Shared client; a private one is created when omitted
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json", "User-Agent": USER_AGENT}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            response = await self._http().get(url, params=params, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"GitHub API error {e.response.status_code} for {endpoint}")
            raise UpstreamError("GitHub API", f"{e.response.status_code} {e.response.reason_phrase}", cause=e) from e
        except httpx.HTTPError as e:
            logger.warning(f"GitHub API request failed for {endpoint}: {e}")
            raise UpstreamError("GitHub API", str(e), cause=e) from e
        return response.json()

    async def search_repositories(
        self,
        query: str,
        sort: str = "stars",
        order: str = "desc",
        per_page: int = 30,
        page: int = 1,
    ) -> GitHubSearchResult:
        params = {"q": query, "sort": sort, "order": order, "per_page": per_page, "page": page}
        payload = await self._request("/search/repositories", params)
        return GitHubSearchResult.model_validate(payload)

    async def get_trending_repos(
        self,
        topics: Sequence[str] = DEFAULT_TOPICS,
        timeframe: Timeframe = Timeframe.weekly,
        today: Optional[date] = None,
    ) -> List[GitHubRepository]:
        """Most-starred recent repositories on any of ``topics``."""
        query = build_trending_query(topics, timeframe, today)
        result = await self.search_repositories(query, sort="stars", order="desc", per_page=50)
        return result.items

    async def get_repository(self, owner: str, repo: str) -> Optional[GitHubRepository]:
        """Repository details, or None when GitHub answers 404."""
        try:
            payload = await self._request(f"/repos/{owner}/{repo}")
        except UpstreamError as e:
            cause = e.cause
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                return None
            raise
        return GitHubRepository.model_validate(payload)

    @staticmethod
    def process_repo_for_tool(repo: GitHubRepository, now: Optional[datetime] = None) -> DiscoveredTool:
        """Turn a repository into a discovery candidate."""
        return DiscoveredTool(
            name=repo.name.split("/")[-1],
            description=repo.description or f"{repo.name} - A {repo.language or 'development'} tool",
            website_url=repo.homepage or repo.html_url,
            github_url=repo.html_url,
            category=categorize_from_topics(repo.topics),
            tags=list(repo.topics),
            pricing_model=PricingModel.open_source if repo.license else PricingModel.unknown,
            language=repo.language,
            source="github",
            confidence_score=calculate_github_confidence(repo, now),
            stars=repo.stargazers_count,
            trending_score=trending_score(repo.stargazers_count, STAR_SATURATION),
        )
