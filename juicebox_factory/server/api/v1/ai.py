"""
AI Endpoints.

Thin HTTP layer over the configured AI service. Tool ids in requests are
resolved against the catalog; every answer comes from either the live LLM
or the heuristic fallback, so these endpoints do not fail on provider
outages.
"""

from typing import List, Sequence

from fastapi import APIRouter

from juicebox_factory.core.catalog import load_tool_views
from juicebox_factory.core.database.entities.tools import Tool
from juicebox_factory.core.database.repositories import SqlRepoBundle
from juicebox_factory.core.errors import NotFoundError, ValidationFailedError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.io.ai import (
    AIComparisonRequest,
    AIRecommendationRequest,
    AIRecommendationResponse,
    CategorizationResult,
    CategorizeRequest,
    DescriptionRequest,
    GeneratedContent,
    ProsCons,
    SentimentRequest,
    SentimentResult,
    ToolProfile,
    ToolSignals,
    TrendAnalysis,
    TrendsRequest,
)
from juicebox_factory.server.services.deps import AIServiceDep, ReposDep

logger = get_logger(__name__)
router = APIRouter()

UNCATEGORIZED = "Uncategorized"


async def _load_tools(repos: SqlRepoBundle, tool_ids: Sequence[int]) -> List[Tool]:
    found = {tool.id: tool for tool in await repos.tools.get_by_ids(tool_ids)}
    missing = [tool_id for tool_id in tool_ids if tool_id not in found]
    if missing:
        raise NotFoundError("Tool", ", ".join(str(tool_id) for tool_id in missing))
    return [found[tool_id] for tool_id in tool_ids]


@router.post(
    "/categorize",
    response_model=CategorizationResult,
    summary="Categorize Tool",
    description="Suggest a catalog category for a tool from its name, description and links.",
)
async def categorize_tool(request_in: CategorizeRequest, ai: AIServiceDep, repos: ReposDep) -> CategorizationResult:
    """
    Categorize a tool.

    ``category_id`` is filled in when the suggested category exists in the catalog.
    """
    result = await ai.categorize_tool(
        request_in.tool_name,
        request_in.description,
        request_in.website_url,
        request_in.github_url,
    )
    category = await repos.categories.get_by_name(result.category)
    return result.model_copy(update={"category_id": category.id if category else None})


@router.post(
    "/description",
    response_model=GeneratedContent,
    summary="Generate Description",
    description="Rewrite a basic description into a richer one. With tool_id, the tool is updated.",
    responses={404: {"description": "Tool not found"}},
)
async def generate_description(request_in: DescriptionRequest, ai: AIServiceDep, repos: ReposDep) -> GeneratedContent:
    tool = None
    if request_in.tool_id is not None:
        tool = await repos.tools.get_by_id(request_in.tool_id)
        if tool is None:
            raise NotFoundError("Tool", request_in.tool_id)

    content = await ai.generate_tool_description(
        request_in.tool_name,
        request_in.description,
        request_in.category,
        request_in.features,
    )
    if tool is not None:
        tool.description = content.content
        await repos.tools.update(tool)
        logger.info(f"Updated description of tool {tool.id} from generated content")
    return content


@router.post(
    "/sentiment",
    response_model=SentimentResult,
    summary="Analyze Sentiment",
    description="Classify free text, or all review text of a tool, as positive, negative or neutral.",
    responses={400: {"description": "Neither text nor a tool with review text was given"}},
)
async def analyze_sentiment(request_in: SentimentRequest, ai: AIServiceDep, repos: ReposDep) -> SentimentResult:
    text = request_in.text
    if not text and request_in.tool_id is not None:
        if await repos.tools.get_by_id(request_in.tool_id) is None:
            raise NotFoundError("Tool", request_in.tool_id)
        reviews = await repos.reviews.list(filters={"tool_id": request_in.tool_id})
        text = " ".join(
            part for review in reviews for part in (review.review_text, review.pros, review.cons) if part
        )
    if not text:
        raise ValidationFailedError("Either text or a tool with review text is required")
    return await ai.analyze_sentiment(text)


@router.post(
    "/pros-cons",
    response_model=ProsCons,
    summary="Generate Pros and Cons",
    description="List balanced pros and cons of a tool.",
)
async def generate_pros_cons(profile: ToolProfile, ai: AIServiceDep) -> ProsCons:
    return await ai.generate_pros_cons(profile.name, profile.description, profile.category)


@router.post(
    "/comparison",
    response_model=GeneratedContent,
    summary="Generate Comparison",
    description="Write a prose comparison of the given tools (profiles or catalog ids).",
    responses={404: {"description": "A tool was not found"}},
)
async def generate_comparison(request_in: AIComparisonRequest, ai: AIServiceDep, repos: ReposDep) -> GeneratedContent:
    profiles = list(request_in.tools)
    if request_in.tool_ids:
        views = await load_tool_views(repos, await _load_tools(repos, request_in.tool_ids))
        profiles.extend(
            ToolProfile(
                name=view.name,
                description=view.description or "",
                category=view.category_name or UNCATEGORIZED,
            )
            for view in views
        )
    return await ai.generate_tool_comparison(profiles)


@router.post(
    "/recommendations",
    response_model=AIRecommendationResponse,
    summary="AI Recommendations",
    description="Suggest tool names for a user profile and resolve the ones present in the catalog.",
)
async def ai_recommendations(
    request_in: AIRecommendationRequest,
    ai: AIServiceDep,
    repos: ReposDep,
) -> AIRecommendationResponse:
    names = await ai.generate_personalized_recommendations(request_in.preferences, request_in.history)
    matched: dict[int, Tool] = {}
    for name in names:
        tool = await repos.tools.get_by_name(name)
        if tool is not None:
            matched.setdefault(tool.id, tool)
    tools = await load_tool_views(repos, list(matched.values())[: request_in.limit])
    return AIRecommendationResponse(suggested_names=names, tools=tools)


@router.post(
    "/trends",
    response_model=List[TrendAnalysis],
    summary="Analyze Trends",
    description=(
        "Give a trend verdict per tool. Catalog tools contribute their review count as "
        "recent mentions and their average rating as sentiment."
    ),
    responses={404: {"description": "A tool was not found"}},
)
async def analyze_trends(request_in: TrendsRequest, ai: AIServiceDep, repos: ReposDep) -> List[TrendAnalysis]:
    signals = list(request_in.tools)
    if request_in.tool_ids:
        views = await load_tool_views(repos, await _load_tools(repos, request_in.tool_ids))
        for view in views:
            ratings = await repos.reviews.ratings_for_tool(view.id)
            average = sum(ratings) / len(ratings) if ratings else 3.0
            signals.append(
                ToolSignals(
                    name=view.name,
                    category=view.category_name or UNCATEGORIZED,
                    recent_mentions=len(ratings),
                    sentiment_score=(average - 3.0) / 2.0,
                )
            )
    return await ai.analyze_trends(signals)
