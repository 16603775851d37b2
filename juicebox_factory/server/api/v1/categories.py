"""
Category Endpoints.

Tool categories are the top-level grouping of the catalog. Names are unique
(case-insensitively).
Named seeds add a predefined category with its tools.
"""

from typing import List

from fastapi import APIRouter

from juicebox_factory.core.database.entities.categories import Category
from juicebox_factory.core.errors import DuplicateSubmissionError, NotFoundError
from juicebox_factory.core.models.io.categories import CatalogSeedSummary, CategoryCreate, CategoryRead
from juicebox_factory.core.seed import SEEDS, seed_catalog
from juicebox_factory.server.services.deps import ReposDep

router = APIRouter()


@router.get(
    "",
    response_model=List[CategoryRead],
    summary="List Categories",
    description="List all categories ordered by name.",
    response_description="List of categories.",
)
async def list_categories(repos: ReposDep) -> List[Category]:
    return await repos.categories.list()


@router.post(
    "",
    response_model=CategoryRead,
    status_code=201,
    summary="Create Category",
    description="Create a new category. Category names must be unique.",
    response_description="The created category.",
    responses={409: {"description": "A category with this name already exists"}},
)
async def create_category(category_in: CategoryCreate, repos: ReposDep) -> Category:
    """
    Create a category.

    The name is checked case-insensitively against existing categories.
    """
    if await repos.categories.get_by_name(category_in.name) is not None:
        raise DuplicateSubmissionError(f"Category already exists: {category_in.name}")
    return await repos.categories.create(Category(**category_in.model_dump()))


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get Category",
    description="Retrieve a category by id.",
    response_description="The category.",
    responses={404: {"description": "Category not found"}},
)
async def get_category(category_id: int, repos: ReposDep) -> Category:
    category = await repos.categories.get_by_id(category_id)
    if category is None:
        raise NotFoundError("Category", category_id)
    return category


@router.post(
    "/seed/{seed_name}",
    response_model=CatalogSeedSummary,
    summary="Seed Category",
    description=f"Add a predefined category and its tools. Available seeds: {', '.join(SEEDS)}.",
    response_description="The category and which tools were created or already present.",
    responses={404: {"description": "Unknown seed"}},
)
async def seed_category(seed_name: str, repos: ReposDep) -> CatalogSeedSummary:
    """
    Seed a category.

    Running a seed again creates nothing new: the existing category is reused
    and tools already in the catalog (by name, case-insensitively) are skipped.
    """
    seed = SEEDS.get(seed_name)
    if seed is None:
        raise NotFoundError("Seed", seed_name)
    return await seed_catalog(repos, seed)
