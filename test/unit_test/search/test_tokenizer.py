"""Unit tests for query tokenization and synonym expansion."""

import pytest

from juicebox_factory.search import SYNONYMS, expand_query_semantics, tokenize_query


class TestTokenizeQuery:
    """Tests for tokenize_query."""

    def test_lowercases_and_strips_punctuation(self):
        assert tokenize_query("The best React-based tools, for API!") == ["best", "react-based", "tools", "api"]

    @pytest.mark.parametrize("query", ["", "   ", "js ts ai", "the and of with"])
    def test_drops_short_tokens_and_stop_words(self, query):
        assert tokenize_query(query) == []

    def test_keeps_duplicates(self):
        assert tokenize_query("react REACT react") == ["react", "react", "react"]

    def test_underscores_are_word_characters(self):
        assert tokenize_query("snake_case:tools") == ["snake_case", "tools"]

    def test_non_ascii_letters_split_tokens(self):
        assert tokenize_query("café tools") == ["caf", "tools"]


class TestExpandQuerySemantics:
    """Tests for expand_query_semantics."""

    def test_maps_known_terms_to_synonyms(self):
        expanded = expand_query_semantics(["python"])
        assert expanded == {"python": ["py", "django", "flask", "fastapi"]}

    def test_unknown_terms_have_no_related_terms(self):
        assert expand_query_semantics(["juicebox"]) == {"juicebox": []}

    def test_distinct_terms_in_first_seen_order(self):
        expanded = expand_query_semantics(["vue", "testing", "vue"])
        assert list(expanded) == ["vue", "testing"]

    def test_returns_copies(self):
        expanded = expand_query_semantics(["react"])
        expanded["react"].append("mutated")
        assert "mutated" not in SYNONYMS["react"]
