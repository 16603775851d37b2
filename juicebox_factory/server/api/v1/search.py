"""
Search Endpoints.

Keyword/semantic search over the catalog with filters and per-field boosts,
plus query suggestions and trending searches.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from juicebox_factory.core.models.domain.enums import PricingModel
from juicebox_factory.core.models.io.search import (
    AutocompleteResponse,
    SearchFilters,
    SearchResponse,
    SemanticSearchRequest,
)
from juicebox_factory.server.services.deps import SearchServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=SearchResponse,
    summary="Search Tools",
    description="Rank catalog tools against a free-text query with optional filters.",
    response_description="Ranked results with relevance scores and match reasons.",
)
async def search_tools(
    service: SearchServiceDep,
    q: str = Query(min_length=1, description="Search query"),
    categories: List[str] = Query(default=[], description="Category ids or names"),
    pricing: List[PricingModel] = Query(default=[], description="Pricing models"),
    free_tier: Optional[bool] = Query(default=None),
    min_score: Optional[float] = Query(default=None, ge=0.0, le=5.0),
    has_github: Optional[bool] = Query(default=None),
    languages: List[str] = Query(default=[]),
    tags: List[str] = Query(default=[]),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
) -> SearchResponse:
    filters = SearchFilters(
        categories=categories,
        pricing_models=pricing,
        free_tier=free_tier,
        min_score=min_score,
        has_github=has_github,
        languages=languages,
        tags=tags,
    )
    results = await service.search(q, filters=filters, limit=limit)
    return SearchResponse(query=q, results=results, total=len(results))


@router.post(
    "/semantic",
    response_model=SearchResponse,
    summary="Semantic Search",
    description="Search with explicit filters and per-field boost factors.",
    response_description="Ranked results with relevance scores and match reasons.",
)
async def semantic_search(search_in: SemanticSearchRequest, service: SearchServiceDep) -> SearchResponse:
    results = await service.search(
        search_in.query,
        filters=search_in.filters,
        boosts=search_in.boost_factors,
        limit=search_in.limit,
    )
    return SearchResponse(query=search_in.query, results=results, total=len(results))


@router.get(
    "/suggestions",
    response_model=List[str],
    summary="Search Suggestions",
    description="Up to eight canned queries containing the partial query.",
)
async def search_suggestions(service: SearchServiceDep, q: str = Query(default="")) -> List[str]:
    return await service.get_suggestions(q)


@router.get(
    "/trending",
    response_model=List[str],
    summary="Trending Searches",
    description="Popular search queries.",
)
async def trending_searches(service: SearchServiceDep) -> List[str]:
    return await service.get_trending_searches()


@router.get(
    "/autocomplete",
    response_model=AutocompleteResponse,
    summary="Autocomplete",
    description="Top results, suggestions and trending searches for a partial query in one call.",
)
async def autocomplete(
    service: SearchServiceDep,
    q: str = Query(min_length=1),
    limit: int = Query(default=5, ge=1, le=20),
) -> AutocompleteResponse:
    return await service.search_with_autocomplete(q, limit)
