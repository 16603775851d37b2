"""
Discovery Endpoints.

Run the discovery pipeline, submit confident candidates to the catalog and
query GitHub directly.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from juicebox_factory.core.catalog import load_tool_views
from juicebox_factory.core.database.entities.tools import Tool
from juicebox_factory.core.models.io.discovery import (
    AutoSubmitRequest,
    DiscoveryRunResult,
    GitHubRepository,
    GitHubSearchQuery,
    GitHubTrendingQuery,
)
from juicebox_factory.core.models.io.tools import ToolRead
from juicebox_factory.server.services.deps import DiscoveryPipelineDep, GitHubClientDep, ReposDep

router = APIRouter()


@router.post(
    "/run",
    response_model=DiscoveryRunResult,
    summary="Run Discovery",
    description="Collect candidates from GitHub and NPM, dedupe them by name and rank them.",
    response_description="Ranked discovery candidates.",
)
async def run_discovery(
    pipeline: DiscoveryPipelineDep,
    limit: Optional[int] = Query(default=25, ge=1, le=200),
) -> DiscoveryRunResult:
    discovered = await pipeline.run_discovery_pipeline(limit=limit)
    return DiscoveryRunResult(discovered=discovered, total=len(discovered))


@router.post(
    "/auto-submit",
    response_model=List[ToolRead],
    status_code=201,
    summary="Auto-submit Discovered Tools",
    description=(
        "Add candidates above the confidence threshold to the catalog. Known names and "
        "categories missing from the catalog are skipped."
    ),
    response_description="The tools that were created.",
)
async def auto_submit(
    request_in: AutoSubmitRequest,
    pipeline: DiscoveryPipelineDep,
    repos: ReposDep,
) -> List[ToolRead]:
    created: List[Tool] = await pipeline.auto_submit_discovered_tools(
        repos,
        tools=request_in.tools,
        min_confidence=request_in.min_confidence,
        submitted_by=request_in.submitted_by,
    )
    return await load_tool_views(repos, created)


@router.get(
    "/github/search",
    response_model=List[GitHubRepository],
    summary="Search GitHub",
    description="Search GitHub repositories.",
    responses={502: {"description": "GitHub API failed"}},
)
async def search_github(
    github: GitHubClientDep,
    q: str = Query(min_length=1),
    sort: str = Query(default="stars", pattern="^(stars|forks|updated)$"),
    per_page: int = Query(default=30, ge=1, le=100),
) -> List[GitHubRepository]:
    query = GitHubSearchQuery(query=q, sort=sort, per_page=per_page)
    result = await github.search_repositories(query.query, sort=query.sort, per_page=query.per_page)
    return result.items


@router.post(
    "/github/trending",
    response_model=List[GitHubRepository],
    summary="Trending GitHub Repositories",
    description="Most-starred repositories on the given topics created within the timeframe.",
    responses={502: {"description": "GitHub API failed"}},
)
async def trending_github(query_in: GitHubTrendingQuery, github: GitHubClientDep) -> List[GitHubRepository]:
    return await github.get_trending_repos(query_in.topics, query_in.timeframe)
