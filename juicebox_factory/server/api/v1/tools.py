"""
Tool Endpoints.

Catalog CRUD for tools plus the per-tool operations built on top of it:
score lookup and recomputation, side-by-side comparison and similar tools.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Response

from juicebox_factory.core.catalog import load_tool_views
from juicebox_factory.core.database.entities.tool_scores import ToolScore
from juicebox_factory.core.database.entities.tools import Tool
from juicebox_factory.core.errors import NotFoundError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.io.comparison import CompareRequest, ComparisonMatrix, SimilarTool
from juicebox_factory.core.models.io.scores import ScoreRead
from juicebox_factory.core.models.io.tools import ToolCreate, ToolRead, ToolUpdate
from juicebox_factory.server.services.deps import ComparisonEngineDep, ReposDep, ScoringEngineDep

logger = get_logger(__name__)
router = APIRouter()


async def _require_category(repos, category_id: Optional[int]) -> None:
    if category_id is not None and await repos.categories.get_by_id(category_id) is None:
        raise NotFoundError("Category", category_id)


@router.get(
    "",
    response_model=List[ToolRead],
    summary="List Tools",
    description="List tools newest first, optionally filtered by category, pricing or a search term.",
    response_description="List of tools with their scores.",
)
async def list_tools(
    repos: ReposDep,
    category: Optional[int] = Query(default=None, description="Category id"),
    pricing: Optional[str] = Query(default=None, description="Pricing model, or 'free_tier'"),
    search: Optional[str] = Query(default=None, description="Substring of name or description"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> List[ToolRead]:
    tools = await repos.tools.browse(category_id=category, pricing=pricing, search=search, limit=limit, offset=offset)
    return await load_tool_views(repos, tools)


@router.post(
    "",
    response_model=ToolRead,
    status_code=201,
    summary="Create Tool",
    description="Add a tool to the catalog. The tool starts with a neutral score of 3.0 in every dimension.",
    response_description="The created tool.",
    responses={404: {"description": "Category not found"}},
)
async def create_tool(tool_in: ToolCreate, repos: ReposDep) -> ToolRead:
    """
    Create a tool.

    A score record with neutral values is created alongside; call the score
    endpoint to compute real values.
    """
    await _require_category(repos, tool_in.category_id)
    tool = await repos.tools.create(Tool(**tool_in.model_dump(mode="json")))
    await repos.scores.create(ToolScore(tool_id=tool.id))
    logger.info(f"Created tool {tool.id} ({tool.name})")
    (view,) = await load_tool_views(repos, [tool])
    return view


@router.post(
    "/compare",
    response_model=ComparisonMatrix,
    summary="Compare Tools",
    description="Build a feature-by-tool comparison matrix for 2 to 5 distinct tools.",
    response_description="The comparison matrix with best-of picks.",
    responses={
        400: {"description": "Fewer than 2, more than 5 or repeated tool ids"},
        404: {"description": "A tool was not found"},
    },
)
async def compare_tools(compare_in: CompareRequest, engine: ComparisonEngineDep) -> ComparisonMatrix:
    return await engine.compare_tools(compare_in.tool_ids)


@router.get(
    "/compare/similar",
    response_model=List[SimilarTool],
    summary="Similar Tools",
    description="Tools from the same category ranked by similarity to the given tool.",
    response_description="Similar tools, most similar first.",
)
async def similar_tools(
    engine: ComparisonEngineDep,
    tool_id: int = Query(description="Reference tool id"),
    limit: int = Query(default=5, ge=1, le=50),
) -> List[SimilarTool]:
    """
    Find similar tools.

    An unknown reference tool yields an empty list rather than an error.
    """
    try:
        return await engine.find_similar_tools(tool_id, limit)
    except NotFoundError:
        return []


@router.get(
    "/{tool_id}",
    response_model=ToolRead,
    summary="Get Tool",
    description="Retrieve a tool with its category name and score.",
    response_description="The tool.",
    responses={404: {"description": "Tool not found"}},
)
async def get_tool(tool_id: int, repos: ReposDep) -> ToolRead:
    tool = await repos.tools.get_by_id(tool_id)
    if tool is None:
        raise NotFoundError("Tool", tool_id)
    (view,) = await load_tool_views(repos, [tool])
    return view


@router.patch(
    "/{tool_id}",
    response_model=ToolRead,
    summary="Update Tool",
    description="Partially update a tool. Only provided fields are changed.",
    response_description="The updated tool.",
    responses={404: {"description": "Tool or category not found"}},
)
async def update_tool(tool_id: int, tool_in: ToolUpdate, repos: ReposDep) -> ToolRead:
    tool = await repos.tools.get_by_id(tool_id)
    if tool is None:
        raise NotFoundError("Tool", tool_id)

    changes = tool_in.model_dump(mode="json", exclude_unset=True)
    if "category_id" in changes:
        await _require_category(repos, changes["category_id"])
    for key, value in changes.items():
        setattr(tool, key, value)
    tool = await repos.tools.update(tool)
    (view,) = await load_tool_views(repos, [tool])
    return view


@router.delete(
    "/{tool_id}",
    status_code=204,
    summary="Delete Tool",
    description="Delete a tool together with its score and reviews.",
    responses={404: {"description": "Tool not found"}},
)
async def delete_tool(tool_id: int, repos: ReposDep) -> Response:
    if not await repos.tools.delete(tool_id):
        raise NotFoundError("Tool", tool_id)
    return Response(status_code=204)


@router.get(
    "/{tool_id}/score",
    response_model=ScoreRead,
    summary="Get Tool Score",
    description="Retrieve the stored score record of a tool.",
    response_description="The score record.",
    responses={404: {"description": "Tool or score not found"}},
)
async def get_tool_score(tool_id: int, repos: ReposDep) -> ToolScore:
    score = await repos.scores.get_by_id(tool_id)
    if score is None:
        raise NotFoundError("Score", tool_id)
    return score


@router.post(
    "/{tool_id}/score",
    response_model=ScoreRead,
    summary="Score Tool",
    description="Recompute and store the score of a tool from its attributes and reviews.",
    response_description="The new score record.",
    responses={404: {"description": "Tool not found"}},
)
async def score_tool(tool_id: int, engine: ScoringEngineDep) -> ToolScore:
    return await engine.score_tool(tool_id)
