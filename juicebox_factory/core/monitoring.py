"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of JuiceBox Factory, including:
- API endpoint tracing
- Database operation monitoring
- Outbound HTTP calls (GitHub, NPM)
- LLM calls made through pydantic-ai
- Error tracking

Every helper degrades to a debug log when Logfire is disabled or unavailable.
"""

import logging
import os
from typing import Any, Optional

from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "juicebox-factory")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

# Feature flags
LOGFIRE_TRACE_PYDANTIC_AI = os.getenv("LOGFIRE_TRACE_PYDANTIC_AI", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")


def initialize_logfire(app: Optional[FastAPI] = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Instrumentation is applied for pydantic-ai, SQLAlchemy, HTTPX and,
    when ``app`` is given, FastAPI. Each instrumentation failure is logged
    and skipped.

    Args:
        app: FastAPI application instance for endpoint tracing (optional).

    Returns:
        True when Logfire was configured, False otherwise.
    """
    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning("Logfire is enabled but LOGFIRE_TOKEN is not set. Monitoring will not work.")
        return False

    try:
        import logfire

        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )

        instrumentations = [
            (LOGFIRE_TRACE_PYDANTIC_AI, "Pydantic AI", logfire.instrument_pydantic_ai, {}),
            (LOGFIRE_TRACE_SQLALCHEMY, "SQLAlchemy", logfire.instrument_sqlalchemy, {}),
            (LOGFIRE_TRACE_HTTPX, "HTTPX", logfire.instrument_httpx, {}),
        ]
        if app is not None:
            instrumentations.append((LOGFIRE_TRACE_FASTAPI, "FastAPI", logfire.instrument_fastapi, {"app": app}))

        for enabled, name, instrument, kwargs in instrumentations:
            if not enabled:
                continue
            try:
                instrument(**kwargs)
                logger.info(f"Logfire: {name} instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument {name}: {e}")

        logger.info(
            f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}"
        )
        return True
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False


def log_event(name: str, **attributes: Any) -> None:
    """
    Log a domain event (tool scored, discovery run, notification sent).

    Args:
        name: Short event name
        **attributes: Structured attributes attached to the event
    """
    try:
        import logfire

        logfire.info(name, **attributes)
    except Exception:
        logger.debug(f"Could not log event to Logfire: {name}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    try:
        import logfire

        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_llm_call(model: str, operation: str, succeeded: bool) -> None:
    """
    Log an LLM call made by the AI service.

    Args:
        model: The model identifier
        operation: The AI operation (categorize, sentiment, ...)
        succeeded: False when the call failed and the heuristic fallback answered
    """
    try:
        import logfire

        logfire.info("LLM call completed", model=model, operation=operation, succeeded=succeeded)
    except Exception:
        logger.debug(f"Could not log LLM call to Logfire: model={model}")


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    try:
        import logfire

        logfire.error(f"{error_type}: {error_message}", **(context or {}))
    except Exception:
        logger.debug(f"Could not log error to Logfire: {error_type}")
