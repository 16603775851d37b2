"""Unit tests for the similarity ranker."""

import pytest

from juicebox_factory.comparison import rank_similar_tools, similarity_score


class TestSimilarityScore:
    """Tests for similarity_score."""

    def test_identical_tools_score_one(self, tool_view):
        a = tool_view(1, overall=4.0, pricing_model="free", free_tier=True, github_url="https://github.com/a/a")
        b = tool_view(2, overall=4.0, pricing_model="free", free_tier=True, github_url="https://github.com/b/b")
        assert similarity_score(a, b) == pytest.approx(1.0)

    def test_score_component_shrinks_with_distance(self, tool_view):
        a = tool_view(1, overall=4.5)
        b = tool_view(2, overall=2.0)
        # pricing, free tier and github parity all match: 0.6 + (0.4 - 2.5 / 5 * 0.4)
        assert similarity_score(a, b) == pytest.approx(0.8)

    def test_score_component_needs_both_scores(self, tool_view):
        assert similarity_score(tool_view(1, overall=4.0), tool_view(2)) == pytest.approx(0.6)

    def test_github_parity_counts_when_neither_has_link(self, tool_view):
        a = tool_view(1, pricing_model="paid")
        b = tool_view(2, pricing_model="free", free_tier=True)
        assert similarity_score(a, b) == pytest.approx(0.1)

    def test_completely_different_tools_score_zero(self, tool_view):
        a = tool_view(1, overall=5.0, pricing_model="paid", github_url="https://github.com/a/a")
        b = tool_view(2, overall=0.0, pricing_model="free", free_tier=True)
        assert similarity_score(a, b) == 0.0

    def test_is_symmetric(self, tool_view):
        a = tool_view(1, overall=4.2, pricing_model="freemium", free_tier=True)
        b = tool_view(2, overall=3.1, pricing_model="freemium", github_url="https://github.com/b/b")
        assert similarity_score(a, b) == similarity_score(b, a)


class TestRankSimilarTools:
    """Tests for rank_similar_tools."""

    def test_orders_by_similarity(self, tool_view):
        reference = tool_view(1, overall=4.0, pricing_model="free")
        far = tool_view(2, overall=4.0, pricing_model="paid", free_tier=True)
        near = tool_view(3, overall=4.0, pricing_model="free")

        ranked = rank_similar_tools(reference, [far, near])

        assert [tool.id for tool, _ in ranked] == [3, 2]
        assert ranked[0][1] > ranked[1][1]

    def test_ties_keep_input_order(self, tool_view):
        reference = tool_view(1)
        candidates = [tool_view(5), tool_view(3), tool_view(4)]

        ranked = rank_similar_tools(reference, candidates)

        assert [tool.id for tool, _ in ranked] == [5, 3, 4]

    def test_no_candidates(self, tool_view):
        assert rank_similar_tools(tool_view(1), []) == []
