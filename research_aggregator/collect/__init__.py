"""Candidate pool processing: deduplication and ranking."""

from .dedup import dedup_results
from .ranker import rank_results, score_result

__all__ = ["dedup_results", "rank_results", "score_result"]
