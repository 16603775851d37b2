"""Unit tests for relevance scoring and ranking."""

import pytest

from juicebox_factory.core.models.io.search import BoostFactors
from juicebox_factory.search import match_reasons, rank_tools, relevance_score


@pytest.fixture
def react(tool_view):
    return tool_view(
        1,
        "React",
        overall=4.0,
        description="A JavaScript library for building UIs",
        category_name="Web Development",
        tags=["frontend"],
    )


class TestRelevanceScore:
    """Tests for relevance_score."""

    def test_direct_related_and_popularity(self, react):
        semantic = {"react": ["reactjs", "jsx", "javascript", "frontend"]}
        # name 3.0 + javascript 1.5 * 0.7 + frontend 2.5 * 0.7 + popularity 4.0
        assert relevance_score(react, ["react"], semantic) == pytest.approx(9.8)

    def test_unscored_tool_gets_no_popularity(self, tool_view):
        tool = tool_view(2, "Jest", description="Delightful testing")
        assert relevance_score(tool, ["testing"], {"testing": []}) == pytest.approx(1.5)

    def test_custom_boosts(self, react):
        boosts = BoostFactors(name_match=10.0, popularity=0.0)
        assert relevance_score(react, ["react"], {"react": []}, boosts) == pytest.approx(10.0)

    def test_term_counted_once_per_field(self, tool_view):
        tool = tool_view(3, "Vue", description="vue vue vue", tags=["vue"])
        # name 3.0 + description 1.5 + tags 2.5
        assert relevance_score(tool, ["vue"], {"vue": []}) == pytest.approx(7.0)

    def test_no_terms_leaves_popularity(self, react):
        assert relevance_score(react, [], {}) == pytest.approx(4.0)


class TestMatchReasons:
    """Tests for match_reasons."""

    def test_reasons_for_direct_and_related_terms(self, react):
        semantic = {"react": ["reactjs", "jsx", "javascript", "frontend"]}
        assert match_reasons(react, ["react"], semantic) == [
            'Name contains "react"',
            'Related to "react" (javascript)',
            'Related to "react" (frontend)',
        ]

    def test_each_field_has_its_template(self, tool_view):
        tool = tool_view(
            4,
            "Design kit",
            description="design tokens",
            category_name="Design & Prototyping",
            tags=["design"],
        )
        assert match_reasons(tool, ["design"], {"design": []}) == [
            'Name contains "design"',
            'Description mentions "design"',
            'Category matches "design"',
            'Tagged with "design"',
        ]

    def test_duplicate_terms_give_unique_reasons(self, react):
        assert match_reasons(react, ["react", "react"], {"react": []}) == ['Name contains "react"']

    @pytest.mark.parametrize(
        "fields",
        [
            {"category_name": "Testing & QA"},
            {"tags": ["unit-test"]},
            {"description": "Runs every test in parallel"},
        ],
    )
    def test_related_term_in_any_field_gives_reason(self, tool_view, fields):
        tool = tool_view(5, "Cypress", **fields)
        assert match_reasons(tool, ["check"], {"check": ["test"]}) == ['Related to "check" (test)']

    def test_related_reason_agrees_with_score(self, tool_view):
        tool = tool_view(6, "Cypress", category_name="Testing & QA")
        semantic = {"qa": ["testing"]}
        assert relevance_score(tool, [], semantic) == pytest.approx(2.0 * 0.7)
        assert match_reasons(tool, [], semantic) == ['Related to "qa" (testing)']


class TestRankTools:
    """Tests for rank_tools."""

    def test_most_relevant_first(self, tool_view, react):
        vue = tool_view(2, "Vue", overall=4.5, description="Progressive JavaScript framework")

        results = rank_tools([vue, react], "react")

        assert [result.id for result in results] == [1, 2]
        assert results[0].relevance_score > results[1].relevance_score
        assert results[1].match_reasons == ['Related to "react" (javascript)']

    def test_ties_keep_input_order(self, tool_view):
        tools = [tool_view(i, f"tool {i}") for i in (3, 1, 2)]
        results = rank_tools(tools, "nothing matches")
        assert [result.id for result in results] == [3, 1, 2]
        assert all(result.relevance_score == 0.0 for result in results)

    def test_limit(self, tool_view):
        tools = [tool_view(i, f"tool {i}", overall=float(i)) for i in range(1, 5)]
        results = rank_tools(tools, "tool", limit=2)
        assert [result.id for result in results] == [4, 3]

    def test_empty_candidates(self):
        assert rank_tools([], "react") == []

    @pytest.mark.parametrize("query", ["react", "javascript testing", "design tools", "nothing matches", ""])
    def test_ranking_is_repeatable(self, tool_view, react, query):
        tools = [
            react,
            tool_view(2, "Vue", overall=4.5, description="Progressive JavaScript framework", tags=["frontend"]),
            tool_view(3, "Jest", overall=4.0, description="Delightful JavaScript testing", category_name="Testing"),
            tool_view(4, "Figma", overall=4.0, description="Collaborative design tool", tags=["design"]),
            tool_view(5, "Unscored", description="design and testing"),
        ]

        first = rank_tools(tools, query)
        second = rank_tools(tools, query)

        assert [(r.id, r.relevance_score, r.match_reasons) for r in first] == [
            (r.id, r.relevance_score, r.match_reasons) for r in second
        ]
