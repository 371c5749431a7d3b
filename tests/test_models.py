"""Test result and source models."""

import pytest
from pydantic import ValidationError

from research_aggregator.models import Platform, RankedResult, ResearchSource, SearchResult


def test_title_required():
    with pytest.raises(ValidationError):
        SearchResult(platform=Platform.WEB, title="   ", url="https://example.com")


def test_relative_url_rejected():
    with pytest.raises(ValidationError):
        SearchResult(platform=Platform.WEB, title="t", url="/relative/path")


def test_blank_url_becomes_none():
    r = SearchResult(platform=Platform.REDDIT, title="t", url="  ", content="body")
    assert r.url is None
    assert r.is_usable()


def test_usability():
    assert SearchResult(platform=Platform.WEB, title="t", url="https://example.com").is_usable()
    assert not SearchResult(platform=Platform.WEB, title="t").is_usable()
    assert not SearchResult(platform=Platform.WEB, title="t", content="   ").is_usable()


def test_platform_parsed_from_string():
    r = SearchResult(platform="academic", title="Paper", url="https://arxiv.org/abs/1")
    assert r.platform is Platform.ACADEMIC
    with pytest.raises(ValidationError):
        SearchResult(platform="twitter", title="Tweet", url="https://x.com/1")


def test_scores_bounded():
    with pytest.raises(ValidationError):
        SearchResult(platform=Platform.WEB, title="t", url="https://e.com", relevance_score=1.5)
    with pytest.raises(ValidationError):
        RankedResult(platform=Platform.WEB, title="t", url="https://e.com", final_score=-0.1)


def test_source_from_ranked():
    ranked = RankedResult(
        platform=Platform.GITHUB, title="acme/tool", url="https://github.com/acme/tool",
        snippet="A tool", score=10, metadata={"language": "Go"}, final_score=0.8,
    )

    ok = ResearchSource.from_ranked(ranked, "Full readme text")
    failed = ResearchSource.from_ranked(ranked, "A tool", extraction_error=True)

    assert ok.content == "Full readme text"
    assert ok.metadata == {"language": "Go"}
    assert ok.extracted_at is not None and ok.extracted_at.tzinfo is not None
    assert failed.extraction_error is True
    assert failed.extracted_at is None
