"""
Recommendation Endpoints.

Personalized tool recommendations from category, pricing and feature
priority preferences.
"""

from typing import List

from fastapi import APIRouter

from juicebox_factory.core.models.io.comparison import PersonalizedRecommendationRequest
from juicebox_factory.core.models.io.tools import ToolRead
from juicebox_factory.server.services.deps import ComparisonEngineDep

router = APIRouter()


@router.post(
    "/personalized",
    response_model=List[ToolRead],
    summary="Personalized Recommendations",
    description=(
        "Tools in the preferred categories matching the pricing preference, ordered by the "
        "prioritized sub-scores or by overall score."
    ),
    response_description="Recommended tools, best first.",
)
async def personalized_recommendations(
    request_in: PersonalizedRecommendationRequest,
    engine: ComparisonEngineDep,
) -> List[ToolRead]:
    return await engine.get_personalized_recommendations(request_in.preferences, request_in.limit)
