"""Unit tests for DiscoveryPipeline."""

from datetime import datetime, timezone
from typing import List

import pytest

from juicebox_factory.core.models.io.discovery import DiscoveredTool
from juicebox_factory.discovery import DiscoveryPipeline, DiscoverySource, StaticDiscoverySource, dedupe_tools

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def candidate(name: str, confidence: float = 0.8, trending: float = 0.0, **fields) -> DiscoveredTool:
    return DiscoveredTool(
        name=name,
        source=fields.pop("source", "github"),
        confidence_score=confidence,
        trending_score=trending,
        **fields,
    )


class ListSource(DiscoverySource):
    def __init__(self, tools: List[DiscoveredTool]) -> None:
        self.tools = tools

    async def discover(self) -> List[DiscoveredTool]:
        return list(self.tools)


class TestDedupeTools:
    """Tests for dedupe_tools."""

    def test_first_occurrence_wins_case_insensitively(self):
        tools = [candidate("Vite", source="github"), candidate("vite", source="npm"), candidate("Bun")]

        unique = dedupe_tools(tools)

        assert [(tool.name, tool.source) for tool in unique] == [("Vite", "github"), ("Bun", "github")]


class TestRunDiscoveryPipeline:
    """Tests for run_discovery_pipeline."""

    async def test_static_samples_ranked(self):
        pipeline = DiscoveryPipeline([StaticDiscoverySource("github", now=NOW), StaticDiscoverySource("npm")])

        tools = await pipeline.run_discovery_pipeline()

        assert [tool.name for tool in tools] == ["vite", "prisma", "playwright", "ui"]

    async def test_merges_sources_and_dedupes(self):
        pipeline = DiscoveryPipeline(
            [
                ListSource([candidate("alpha", 0.5), candidate("beta", 0.9)]),
                ListSource([candidate("Alpha", 1.0, source="npm"), candidate("gamma", 0.5, trending=60.0)]),
            ]
        )

        tools = await pipeline.run_discovery_pipeline()

        assert [(tool.name, tool.source) for tool in tools] == [
            ("gamma", "github"),
            ("beta", "github"),
            ("alpha", "github"),
        ]

    async def test_limit(self):
        pipeline = DiscoveryPipeline([ListSource([candidate(f"tool-{i}", i / 10) for i in range(5)])])

        tools = await pipeline.run_discovery_pipeline(limit=2)

        assert [tool.name for tool in tools] == ["tool-4", "tool-3"]

    async def test_no_sources(self):
        assert await DiscoveryPipeline([]).run_discovery_pipeline() == []


class TestAutoSubmit:
    """Tests for auto_submit_discovered_tools."""

    async def test_submits_confident_candidates(self, repos, make_category):
        web = await make_category("Web Development")
        await make_category("Testing & QA")
        pipeline = DiscoveryPipeline([StaticDiscoverySource("github", now=NOW), StaticDiscoverySource("npm")])

        created = await pipeline.auto_submit_discovered_tools(repos, submitted_by="bot")

        # prisma maps to "Database & Storage", which is not in the catalog
        assert [tool.name for tool in created] == ["vite", "playwright", "ui"]
        vite = created[0]
        assert vite.category_id == web.id
        assert vite.pricing_model == "freemium"
        assert vite.free_tier is True
        assert vite.submitted_by == "bot"
        assert "frontend" in vite.tags

        score = await repos.scores.get_by_id(vite.id)
        assert score.overall_score == 3.0

    async def test_skips_low_confidence_and_existing(self, repos, make_category, make_tool):
        await make_category("Web Development")
        await make_tool("Existing")
        tools = [
            candidate("existing", 0.95),
            candidate("shaky", 0.69),
            candidate("solid", 0.7),
            candidate("SOLID", 0.9),
        ]

        created = await DiscoveryPipeline([]).auto_submit_discovered_tools(repos, tools=tools)

        assert [tool.name for tool in created] == ["solid"]
        assert await repos.tools.existing_names() == {"existing", "solid"}

    async def test_custom_threshold(self, repos, make_category):
        await make_category("Web Development")

        created = await DiscoveryPipeline([]).auto_submit_discovered_tools(
            repos, tools=[candidate("low", 0.2)], min_confidence=0.1
        )

        assert [tool.name for tool in created] == ["low"]

    async def test_nothing_to_submit(self, repos):
        assert await DiscoveryPipeline([]).auto_submit_discovered_tools(repos, tools=[]) == []
