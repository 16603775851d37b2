"""
Catalog seeding.

A seed is a category plus the tools that belong to it. Seeding is
idempotent: the category is reused when a category of the same name exists
and tools whose name is already in the catalog are skipped. New tools get a
neutral score record, like tools created through the API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from juicebox_factory.core.database.entities.categories import Category
from juicebox_factory.core.database.entities.tool_scores import ToolScore
from juicebox_factory.core.database.entities.tools import Tool
from juicebox_factory.core.database.repositories import SqlRepoBundle
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import PricingModel
from juicebox_factory.core.models.io.categories import CatalogSeedSummary, CategoryCreate, CategoryRead
from juicebox_factory.core.models.io.tools import ToolCreate

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogSeed:
    category: CategoryCreate
    tools: List[ToolCreate] = field(default_factory=list)


async def seed_catalog(repos: SqlRepoBundle, seed: CatalogSeed) -> CatalogSeedSummary:
    """
    Add ``seed`` to the catalog, skipping what is already there.

    Args:
        repos: Repository bundle bound to the request session
        seed: Category and tools to add

    Returns:
        The category and the names of the created and skipped tools
    """
    category = await repos.categories.get_by_name(seed.category.name)
    category_created = category is None
    if category is None:
        category = await repos.categories.create(Category(**seed.category.model_dump()))
        logger.info(f"Seeded category {category.id} ({category.name})")

    created: List[str] = []
    skipped: List[str] = []
    for tool_in in seed.tools:
        if await repos.tools.get_by_name(tool_in.name) is not None:
            skipped.append(tool_in.name)
            continue
        values = tool_in.model_dump(mode="json")
        values["category_id"] = category.id
        tool = await repos.tools.create(Tool(**values))
        await repos.scores.create(ToolScore(tool_id=tool.id))
        created.append(tool.name)

    logger.info(f"Seeded {category.name}: {len(created)} tools created, {len(skipped)} already present")
    return CatalogSeedSummary(
        category=CategoryRead.model_validate(category),
        category_created=category_created,
        created=created,
        skipped=skipped,
    )


def _collaboration_tool(name: str, description: str, website_url: str, tags: List[str], **fields) -> ToolCreate:
    fields.setdefault("pricing_model", PricingModel.freemium)
    fields.setdefault("free_tier", True)
    return ToolCreate(name=name, description=description, website_url=website_url, tags=tags, **fields)


PRODUCT_COLLABORATION_SEED = CatalogSeed(
    category=CategoryCreate(
        name="Product Team Collaboration AI",
        description=(
            "AI-powered tools for fast-paced, high-fidelity collaboration and prototyping between "
            "product managers, UX designers and engineers, with integrations for planning tools "
            "such as JIRA and Confluence."
        ),
        color_theme="#FF6B6B",
    ),
    tools=[
        _collaboration_tool(
            "Figma AI",
            "AI-powered design collaboration platform with real-time prototyping, design systems "
            "and developer handoff.",
            "https://figma.com",
            ["design", "prototyping", "collaboration", "ai", "handoff", "jira-integration"],
            logo_url="https://cdn.worldvectorlogo.com/logos/figma-1.svg",
        ),
        _collaboration_tool(
            "Miro AI",
            "AI-enhanced collaborative whiteboarding with intelligent diagramming and automated "
            "user story mapping.",
            "https://miro.com",
            ["whiteboarding", "collaboration", "ai", "user-stories", "planning", "integration"],
            logo_url="https://cdn.worldvectorlogo.com/logos/miro-2.svg",
        ),
        _collaboration_tool(
            "Notion AI",
            "All-in-one workspace with AI writing assistance for product requirements, "
            "specifications and team collaboration.",
            "https://notion.so",
            ["documentation", "ai-writing", "requirements", "collaboration", "planning"],
            logo_url="https://cdn.worldvectorlogo.com/logos/notion-logo-1.svg",
        ),
        _collaboration_tool(
            "Linear",
            "AI-enhanced issue tracking and project management with intelligent prioritization "
            "and automated workflows.",
            "https://linear.app",
            ["project-management", "issue-tracking", "ai", "automation", "development"],
            github_url="https://github.com/linearapp",
            logo_url="https://linear.app/favicon.ico",
        ),
        _collaboration_tool(
            "Framer AI",
            "AI-powered web design and prototyping tool that generates production-ready code.",
            "https://framer.com",
            ["prototyping", "ai", "code-generation", "design-to-code", "collaboration"],
        ),
        _collaboration_tool(
            "Codeium",
            "AI code completion with context-aware suggestions and team knowledge sharing.",
            "https://codeium.com",
            ["ai-coding", "code-completion", "collaboration", "productivity", "development"],
            github_url="https://github.com/Exafunction/codeium",
        ),
        _collaboration_tool(
            "Whimsical AI",
            "AI-enhanced diagramming and wireframing that generates user flows, wireframes and "
            "system diagrams from requirements.",
            "https://whimsical.com",
            ["diagramming", "wireframing", "ai", "user-flows", "product-planning"],
        ),
        _collaboration_tool(
            "Gamma AI",
            "AI-powered presentations and documentation that turn brief inputs into decks, "
            "specifications and project updates.",
            "https://gamma.app",
            ["presentations", "ai-content", "documentation", "product-specs", "collaboration"],
        ),
        _collaboration_tool(
            "Productboard AI",
            "AI-enhanced product management that prioritizes features, analyzes user feedback "
            "and builds roadmaps.",
            "https://productboard.com",
            ["product-management", "ai", "roadmapping", "feedback-analysis", "prioritization"],
            pricing_model=PricingModel.paid,
            free_tier=False,
        ),
        _collaboration_tool(
            "Zeplin AI",
            "AI-powered design handoff that generates specs, assets and code snippets from designs.",
            "https://zeplin.io",
            ["design-handoff", "ai", "code-generation", "collaboration", "specifications"],
        ),
    ],
)

SEEDS = {"product-collaboration": PRODUCT_COLLABORATION_SEED}
