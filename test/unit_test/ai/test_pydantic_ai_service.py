"""Unit tests for PydanticAIService with the pydantic-ai Agent mocked out."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from juicebox_factory.ai import HeuristicAIService, PydanticAIService
from juicebox_factory.ai.pydantic_ai_service import SYSTEM_PROMPT, _WrittenText
from juicebox_factory.core.models.io.ai import (
    CategorizationResult,
    ProsCons,
    SentimentResult,
    ToolProfile,
    ToolSignals,
    UserAIPreferences,
    UserHistory,
)

AGENT_PATH = "juicebox_factory.ai.pydantic_ai_service.Agent"


def agent_returning(output):
    agent_cls = MagicMock()
    agent_cls.return_value.run = AsyncMock(return_value=SimpleNamespace(output=output))
    return agent_cls


def agent_failing(error: Exception):
    agent_cls = MagicMock()
    agent_cls.return_value.run = AsyncMock(side_effect=error)
    return agent_cls


@pytest.fixture
def service():
    return PydanticAIService("test-model", model_name="gpt-test", timeout=5.0)


class TestLiveAnswers:
    """The agent's typed output is returned."""

    async def test_categorize_tool(self, service):
        output = CategorizationResult(category="Testing & QA", confidence=0.9, reasoning="Runs tests", category_id=7)
        agent_cls = agent_returning(output)

        with patch(AGENT_PATH, agent_cls):
            result = await service.categorize_tool("Vitest", "Unit test runner")

        assert result.category == "Testing & QA"
        assert result.confidence == 0.9
        assert result.category_id is None
        agent_cls.assert_called_once_with("test-model", output_type=CategorizationResult, system_prompt=SYSTEM_PROMPT)
        prompt = agent_cls.return_value.run.await_args.args[0]
        assert "Name: Vitest" in prompt
        assert "- Testing & QA" in prompt

    async def test_unknown_category_is_coerced(self, service):
        output = CategorizationResult(category="Quantum Tools", confidence=0.8, reasoning="?")

        with patch(AGENT_PATH, agent_returning(output)):
            result = await service.categorize_tool("Qiskit", "Quantum SDK")

        assert result.category == "Web Development"
        assert result.confidence == 0.8

    async def test_model_settings(self, service):
        agent_cls = agent_returning(SentimentResult(sentiment="positive", score=0.9, summary="Happy"))

        with patch(AGENT_PATH, agent_cls):
            await service.analyze_sentiment("great")

        settings = agent_cls.return_value.run.await_args.kwargs["model_settings"]
        assert settings["temperature"] == 0.3
        assert settings["timeout"] == 5.0

    async def test_written_text_is_converted(self, service):
        output = _WrittenText(content="Vite is fast.", tone="enthusiastic", keywords=["speed"])

        with patch(AGENT_PATH, agent_returning(output)):
            result = await service.generate_tool_description("Vite", "Bundler", features=["HMR"])

        assert result.content == "Vite is fast."
        assert result.metadata.tone == "enthusiastic"
        assert result.metadata.length == len("Vite is fast.")
        assert result.metadata.keywords == ["speed"]

    async def test_recommendations(self, service):
        with patch(AGENT_PATH, agent_returning(["Astro", "Bun"])):
            names = await service.generate_personalized_recommendations(UserAIPreferences(), UserHistory())

        assert names == ["Astro", "Bun"]

    async def test_pros_cons(self, service):
        output = ProsCons(pros=["Fast"], cons=["Young"], summary="Promising")

        with patch(AGENT_PATH, agent_returning(output)):
            result = await service.generate_pros_cons("Bun", "JS runtime")

        assert result == output

    @patch("juicebox_factory.ai.pydantic_ai_service.log_llm_call")
    async def test_success_is_logged(self, mock_log, service):
        with patch(AGENT_PATH, agent_returning([])):
            await service.analyze_trends([])

        mock_log.assert_called_once_with("gpt-test", "trends", succeeded=True)


class TestFallback:
    """Provider failures fall back to the heuristic answer."""

    @patch("juicebox_factory.ai.pydantic_ai_service.log_llm_call")
    async def test_categorize_falls_back(self, mock_log, service):
        with patch(AGENT_PATH, agent_failing(RuntimeError("provider down"))):
            result = await service.categorize_tool("Cypress", "End-to-end test automation")

        assert result.category == "Testing & QA"
        assert result.reasoning == "Keyword-based categorization"
        mock_log.assert_called_once_with("gpt-test", "categorize", succeeded=False)

    async def test_sentiment_falls_back(self, service):
        with patch(AGENT_PATH, agent_failing(TimeoutError())):
            result = await service.analyze_sentiment("awful and useless")

        assert result.sentiment == "negative"

    async def test_comparison_falls_back(self, service):
        tools = [ToolProfile(name="Vite"), ToolProfile(name="Webpack")]

        with patch(AGENT_PATH, agent_failing(ValueError("bad output"))):
            result = await service.generate_tool_comparison(tools)

        assert result.content.startswith("Comparison between Vite vs Webpack")

    async def test_agent_construction_failure_falls_back(self, service):
        with patch(AGENT_PATH, MagicMock(side_effect=RuntimeError("unknown model"))):
            trends = await service.analyze_trends([ToolSignals(name="Vite")])

        assert trends[0].trend_strength == 0.5

    async def test_custom_fallback(self):
        fallback = HeuristicAIService()
        fallback.generate_personalized_recommendations = AsyncMock(return_value=["Custom"])
        service = PydanticAIService("test-model", fallback=fallback)

        with patch(AGENT_PATH, agent_failing(RuntimeError("down"))):
            names = await service.generate_personalized_recommendations(UserAIPreferences(), UserHistory())

        assert names == ["Custom"]
