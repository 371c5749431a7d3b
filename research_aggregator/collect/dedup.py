"""
Candidate deduplication by canonical URL
"""

from typing import List, Optional, Sequence, Set

from ..models import SearchResult
from ..tools.url_norm import canonicalize_url


def dedup_key(result: SearchResult) -> str:
    """Canonical URL, or platform plus title for link-less results."""
    if result.url:
        return canonicalize_url(result.url)
    return f"{result.platform.value}:{result.title.lower()}"


def dedup_results(results: Sequence[Optional[SearchResult]]) -> List[SearchResult]:
    """
    Drop empty entries and later duplicates, keeping merge order.
    The first occurrence of a URL wins.
    """
    seen: Set[str] = set()
    out: List[SearchResult] = []
    for r in results:
        if not r:
            continue
        key = dedup_key(r)
        if key in seen:
            continue
        seen.add(key)
        out.append(r)
    return out
