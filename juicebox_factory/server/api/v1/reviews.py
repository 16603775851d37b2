"""
Review Endpoints.

Users rate tools from 1 to 5 with optional text. Each user may review a
tool once. A new review notifies the tool's submitter.
"""

from typing import List, Optional

from fastapi import APIRouter, Query
from sqlalchemy.exc import SQLAlchemyError

from juicebox_factory.core.database.entities.reviews import Review
from juicebox_factory.core.errors import DuplicateSubmissionError, JuiceBoxError, NotFoundError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import ToolEvent
from juicebox_factory.core.models.io.reviews import ReviewCreate, ReviewRead
from juicebox_factory.server.services.deps import NotificationServiceDep, ReposDep

logger = get_logger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=List[ReviewRead],
    summary="List Reviews",
    description="List reviews newest first, optionally for a single tool.",
    response_description="List of reviews.",
)
async def list_reviews(
    repos: ReposDep,
    tool_id: Optional[int] = Query(default=None, description="Only reviews of this tool"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> List[Review]:
    filters = {"tool_id": tool_id} if tool_id is not None else None
    return await repos.reviews.list(limit=limit, offset=offset, filters=filters)


@router.post(
    "",
    response_model=ReviewRead,
    status_code=201,
    summary="Create Review",
    description="Review a tool. A user can review each tool only once.",
    response_description="The created review.",
    responses={
        404: {"description": "Tool not found"},
        409: {"description": "The user already reviewed this tool"},
    },
)
async def create_review(
    review_in: ReviewCreate,
    repos: ReposDep,
    notifications: NotificationServiceDep,
) -> Review:
    """
    Create a review.

    The tool's submitter is notified unless they reviewed their own tool.
    A failed notification is logged and the stored review is still returned.
    """
    tool = await repos.tools.get_by_id(review_in.tool_id)
    if tool is None:
        raise NotFoundError("Tool", review_in.tool_id)
    if await repos.reviews.get_by_tool_and_user(review_in.tool_id, review_in.user_id) is not None:
        raise DuplicateSubmissionError("You have already reviewed this tool")

    review = await repos.reviews.create(Review(**review_in.model_dump()))
    logger.info(f"User {review.user_id} reviewed tool {review.tool_id} ({review.rating}/5)")
    try:
        await notifications.notify_tool_event(tool.id, ToolEvent.new_review, {"reviewer_id": review.user_id})
    except (JuiceBoxError, SQLAlchemyError) as e:
        logger.error(f"Failed to notify about review {review.id} of tool {tool.id}: {e}", exc_info=True)
    return review
