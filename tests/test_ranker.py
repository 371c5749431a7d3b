"""Tests for candidate ranking."""

import pytest

from research_aggregator.collect.ranker import rank_results, score_result, topic_terms
from research_aggregator.models import Platform, SearchResult


def _result(platform=Platform.WEB, title="Unrelated heading", **fields):
    values = dict(platform=platform, title=title, url=f"https://example.com/{abs(hash(title))}", relevance_score=0.5)
    values.update(fields)
    return SearchResult(**values)


class TestTopicTerms:
    def test_short_words_dropped(self):
        assert topic_terms("Impact of AI on Software Development") == ["impact", "software", "development"]

    def test_no_terms(self):
        assert topic_terms("AI ML") == []
        assert topic_terms("") == []


class TestScoreResult:
    def test_rich_content_bonus_is_exact(self):
        """Test that inline content over 500 chars adds exactly 0.08."""
        terms = topic_terms("quantum computing")
        plain = _result(title="Nothing relevant")
        rich = _result(title="Nothing relevant", content="z" * 501)

        assert score_result(rich, terms) - score_result(plain, terms) == pytest.approx(0.08)

    def test_content_at_threshold_gets_no_bonus(self):
        terms = topic_terms("quantum computing")
        assert score_result(_result(content="z" * 500), terms) == pytest.approx(0.5)

    def test_title_and_snippet_match(self):
        terms = topic_terms("quantum computing")
        half_title = _result(title="Quantum news")
        full = _result(title="Quantum computing today", snippet="all about quantum computing")

        assert score_result(half_title, terms) == pytest.approx(0.5 + 0.125)
        assert score_result(full, terms) == pytest.approx(0.5 + 0.25 + 0.10)

    def test_platform_bonus(self):
        terms = []
        assert score_result(_result(Platform.ACADEMIC), terms) == pytest.approx(0.70)
        assert score_result(_result(Platform.NEWS), terms) == pytest.approx(0.62)
        assert score_result(_result(Platform.HACKERNEWS), terms) == pytest.approx(0.60)
        assert score_result(_result(Platform.REDDIT), terms) == pytest.approx(0.50)

    def test_popularity_bonus(self):
        assert score_result(_result(score=101), []) == pytest.approx(0.55)
        assert score_result(_result(score=100), []) == pytest.approx(0.50)

    def test_clamped_to_one(self):
        terms = topic_terms("quantum computing")
        best = _result(
            Platform.ACADEMIC,
            title="Quantum computing",
            snippet="quantum computing",
            content="q" * 900,
            score=1000,
            relevance_score=0.95,
        )
        assert score_result(best, terms) == 1.0

    def test_zero_terms_contribute_nothing(self):
        """Test that a topic without long words only uses priors and bonuses."""
        assert score_result(_result(title="AI ML"), topic_terms("AI ML")) == pytest.approx(0.5)


class TestRankResults:
    def test_sorted_descending(self):
        results = [
            _result(Platform.REDDIT, title="a"),
            _result(Platform.ACADEMIC, title="b"),
            _result(Platform.NEWS, title="c"),
        ]
        ranked = rank_results(results, "topic")
        assert [r.platform for r in ranked] == [Platform.ACADEMIC, Platform.NEWS, Platform.REDDIT]
        assert all(0 <= r.final_score <= 1 for r in ranked)

    def test_ties_keep_input_order(self):
        results = [_result(title=f"item {i}") for i in range(6)]
        ranked = rank_results(results, "unmatched words here")
        assert [r.title for r in ranked] == [f"item {i}" for i in range(6)]

    def test_deterministic(self):
        results = [
            _result(Platform.WEB, title="Rust memory safety", snippet="rust"),
            _result(Platform.HACKERNEWS, title="Memory safety in C", score=300),
            _result(Platform.GITHUB, title="rust-lang/rust", content="r" * 800),
        ]
        first = rank_results(results, "Rust memory safety")
        second = rank_results(results, "Rust memory safety")
        assert [(r.title, r.final_score) for r in first] == [(r.title, r.final_score) for r in second]

    def test_input_not_mutated(self):
        original = _result(title="keep me")
        ranked = rank_results([original], "unrelated topic")
        assert ranked[0].final_score == pytest.approx(0.5)
        assert not hasattr(original, "final_score")
        assert ranked[0].url == original.url

    def test_empty(self):
        assert rank_results([], "anything") == []
