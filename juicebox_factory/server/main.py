"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from juicebox_factory.core.database import init_db
from juicebox_factory.core.logging_config import get_logger, setup_logging
from juicebox_factory.core.monitoring import initialize_logfire

from .api.v1 import (
    ai,
    categories,
    discovery,
    health,
    notifications,
    recommendations,
    reviews,
    scores,
    search,
    tools,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.deps import close_http_client

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the database tables on startup and closes the shared HTTP client
    on shutdown.
    """
    # Startup
    try:
        logger.info("Starting up JuiceBox Factory Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down JuiceBox Factory Server...")
    await close_http_client()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    JuiceBox Factory Server API

    This API backs a curated directory of developer tools. It supports browsing and
    reviewing the catalog, computing tool scores, comparing and searching tools,
    AI-assisted content, automated tool discovery and user notifications.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, prefix=constant.API_V1_STR, tags=["health"])
app.include_router(categories.router, prefix=f"{constant.API_V1_STR}/categories", tags=["categories"])
app.include_router(tools.router, prefix=f"{constant.API_V1_STR}/tools", tags=["tools"])
app.include_router(scores.router, prefix=f"{constant.API_V1_STR}/scores", tags=["scores"])
app.include_router(reviews.router, prefix=f"{constant.API_V1_STR}/reviews", tags=["reviews"])
app.include_router(search.router, prefix=f"{constant.API_V1_STR}/search", tags=["search"])
app.include_router(
    recommendations.router, prefix=f"{constant.API_V1_STR}/recommendations", tags=["recommendations"]
)
app.include_router(ai.router, prefix=f"{constant.API_V1_STR}/ai", tags=["ai"])
app.include_router(discovery.router, prefix=f"{constant.API_V1_STR}/discovery", tags=["discovery"])
app.include_router(notifications.router, prefix=f"{constant.API_V1_STR}/notifications", tags=["notifications"])
