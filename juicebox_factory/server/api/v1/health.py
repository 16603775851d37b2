"""
Server Status Endpoints.

``/health`` answers for load balancers and reports whether the database
accepts queries; ``/version`` reports the API and schema versions.
"""

from fastapi import APIRouter, Response
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.io.system import HealthStatus, VersionInfo
from juicebox_factory.server.core import constant
from juicebox_factory.server.services.deps import SessionDep

logger = get_logger(__name__)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthStatus,
    summary="Health Check",
    description="Report whether the server is up and its database answers.",
    responses={503: {"model": HealthStatus, "description": "The database is unreachable"}},
)
async def health_check(session: SessionDep, response: Response) -> HealthStatus:
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check query failed: {e}")
        response.status_code = 503
        return HealthStatus(status="degraded", database="unavailable")
    return HealthStatus(status="ok", database="ok")


@router.get(
    "/version",
    response_model=VersionInfo,
    summary="Get Version",
    description="API version and request/response schema version.",
)
async def version() -> VersionInfo:
    return VersionInfo(version=constant.API_VERSION, schema_version=constant.SCHEMA_VERSION)
