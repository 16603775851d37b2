"""
Score Endpoints.

Catalog-wide score maintenance.
"""

from fastapi import APIRouter

from juicebox_factory.core.models.io.scores import ScoreRecomputeSummary
from juicebox_factory.server.services.deps import ScoringEngineDep

router = APIRouter()


@router.post(
    "/recompute-all",
    response_model=ScoreRecomputeSummary,
    summary="Recompute All Scores",
    description="Rescore every tool sequentially with a short pause between tools.",
    response_description="How many tools were scored and which failed.",
)
async def recompute_all_scores(engine: ScoringEngineDep) -> ScoreRecomputeSummary:
    """
    Rescore the whole catalog.

    Failures on individual tools are reported in the summary and do not stop
    the batch.
    """
    return await engine.score_all_tools()
