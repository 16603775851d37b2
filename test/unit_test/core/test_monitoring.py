"""
Unit tests for the Logfire monitoring module.

This test suite covers:
- Logfire initialization with various configurations
- Instrumentation feature flags
- Event, API request, LLM call and error logging helpers
- Graceful degradation when Logfire fails
"""

import sys
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from juicebox_factory.core import monitoring

MODULE = "juicebox_factory.core.monitoring"


@pytest.fixture
def mock_logfire():
    """Stand-in for the logfire module imported lazily by the helpers."""
    logfire = MagicMock()
    with patch.dict(sys.modules, {"logfire": logfire}):
        yield logfire


class TestInitializeLogfire:
    """Test Logfire initialization function."""

    def test_disabled(self, mock_logfire):
        """Test nothing is configured when Logfire is disabled."""
        with patch(f"{MODULE}.LOGFIRE_ENABLED", False):
            assert monitoring.initialize_logfire() is False
        mock_logfire.configure.assert_not_called()

    def test_enabled_without_token(self, mock_logfire):
        """Test a missing token disables monitoring."""
        with patch(f"{MODULE}.LOGFIRE_ENABLED", True), patch(f"{MODULE}.LOGFIRE_TOKEN", ""):
            assert monitoring.initialize_logfire() is False
        mock_logfire.configure.assert_not_called()

    def test_configures_and_instruments(self, mock_logfire):
        """Test configure and every instrumentation run when enabled."""
        app = FastAPI()
        with patch(f"{MODULE}.LOGFIRE_ENABLED", True), patch(f"{MODULE}.LOGFIRE_TOKEN", "token"):
            assert monitoring.initialize_logfire(app) is True

        mock_logfire.configure.assert_called_once()
        assert mock_logfire.configure.call_args.kwargs["token"] == "token"
        mock_logfire.instrument_pydantic_ai.assert_called_once_with()
        mock_logfire.instrument_sqlalchemy.assert_called_once_with()
        mock_logfire.instrument_httpx.assert_called_once_with()
        mock_logfire.instrument_fastapi.assert_called_once_with(app=app)

    def test_fastapi_needs_app(self, mock_logfire):
        """Test FastAPI instrumentation is skipped without an app."""
        with patch(f"{MODULE}.LOGFIRE_ENABLED", True), patch(f"{MODULE}.LOGFIRE_TOKEN", "token"):
            monitoring.initialize_logfire()
        mock_logfire.instrument_fastapi.assert_not_called()

    def test_feature_flags(self, mock_logfire):
        """Test disabled instrumentations are skipped."""
        with patch(f"{MODULE}.LOGFIRE_ENABLED", True), patch(f"{MODULE}.LOGFIRE_TOKEN", "token"), patch(
            f"{MODULE}.LOGFIRE_TRACE_SQLALCHEMY", False
        ), patch(f"{MODULE}.LOGFIRE_TRACE_HTTPX", False):
            monitoring.initialize_logfire()

        mock_logfire.instrument_pydantic_ai.assert_called_once()
        mock_logfire.instrument_sqlalchemy.assert_not_called()
        mock_logfire.instrument_httpx.assert_not_called()

    def test_instrumentation_failure_is_skipped(self, mock_logfire):
        """Test one failing instrumentation does not stop the others."""
        mock_logfire.instrument_pydantic_ai.side_effect = RuntimeError("not installed")
        with patch(f"{MODULE}.LOGFIRE_ENABLED", True), patch(f"{MODULE}.LOGFIRE_TOKEN", "token"):
            assert monitoring.initialize_logfire() is True
        mock_logfire.instrument_httpx.assert_called_once()

    def test_configure_failure(self, mock_logfire):
        """Test a configure error disables monitoring."""
        mock_logfire.configure.side_effect = RuntimeError("bad token")
        with patch(f"{MODULE}.LOGFIRE_ENABLED", True), patch(f"{MODULE}.LOGFIRE_TOKEN", "token"):
            assert monitoring.initialize_logfire() is False


class TestLoggingHelpers:
    """Test the custom logging helpers."""

    def test_log_event(self, mock_logfire):
        monitoring.log_event("Tool scored", tool_id=1, overall_score=4.2)
        mock_logfire.info.assert_called_once_with("Tool scored", tool_id=1, overall_score=4.2)

    def test_log_api_request(self, mock_logfire):
        monitoring.log_api_request("GET", "/api/v1/tools", 200, 12.5)
        mock_logfire.info.assert_called_once_with(
            "API request completed", method="GET", path="/api/v1/tools", status_code=200, duration_ms=12.5
        )

    def test_log_llm_call(self, mock_logfire):
        monitoring.log_llm_call("gpt-4o-mini", "categorize", succeeded=False)
        mock_logfire.info.assert_called_once_with(
            "LLM call completed", model="gpt-4o-mini", operation="categorize", succeeded=False
        )

    def test_log_error(self, mock_logfire):
        monitoring.log_error("UpstreamError", "GitHub API failed", {"path": "/x"})
        mock_logfire.error.assert_called_once_with("UpstreamError: GitHub API failed", path="/x")

    @pytest.mark.parametrize(
        "call",
        [
            lambda: monitoring.log_event("event"),
            lambda: monitoring.log_api_request("GET", "/", 200, 1.0),
            lambda: monitoring.log_llm_call("m", "op", succeeded=True),
            lambda: monitoring.log_error("E", "msg"),
        ],
    )
    def test_helpers_never_raise(self, mock_logfire, call):
        """Test Logfire failures degrade to a debug log."""
        mock_logfire.info.side_effect = RuntimeError("exporter down")
        mock_logfire.error.side_effect = RuntimeError("exporter down")

        call()
