"""
Candidate ranking by topical match and platform credibility
"""

from typing import Dict, List, Optional, Sequence

from ..models import Platform, RankedResult, SearchResult

TITLE_WEIGHT = 0.25
SNIPPET_WEIGHT = 0.10
RICH_CONTENT_CHARS = 500
RICH_CONTENT_BONUS = 0.08
POPULARITY_THRESHOLD = 100
POPULARITY_BONUS = 0.05

PLATFORM_BONUS: Dict[Platform, float] = {
    Platform.ACADEMIC: 0.20,
    Platform.NEWS: 0.12,
    Platform.HACKERNEWS: 0.10,
}


def topic_terms(topic: str) -> List[str]:
    """Lowercase topic words longer than three characters."""
    return [w for w in (topic or "").lower().split() if len(w) > 3]


def _match_ratio(terms: Sequence[str], text: Optional[str]) -> float:
    if not terms:
        return 0.0
    haystack = (text or "").lower()
    return sum(1 for t in terms if t in haystack) / len(terms)


def score_result(result: SearchResult, terms: Sequence[str]) -> float:
    """
    Score one candidate against pre-tokenized topic terms.
    Returns a score clamped to at most 1.0.
    """
    score = result.relevance_score
    score += _match_ratio(terms, result.title) * TITLE_WEIGHT
    score += _match_ratio(terms, result.snippet) * SNIPPET_WEIGHT
    score += PLATFORM_BONUS.get(result.platform, 0.0)

    if result.content and len(result.content) > RICH_CONTENT_CHARS:
        score += RICH_CONTENT_BONUS

    if result.score is not None and result.score > POPULARITY_THRESHOLD:
        score += POPULARITY_BONUS

    return min(score, 1.0)


def rank_results(results: Sequence[SearchResult], topic: str) -> List[RankedResult]:
    """
    Rank candidates for a topic, highest final score first.
    Ties keep their input order.
    """
    terms = topic_terms(topic)
    ranked = [
        RankedResult(**r.model_dump(), final_score=score_result(r, terms))
        for r in results
    ]
    return sorted(ranked, key=lambda r: r.final_score, reverse=True)
