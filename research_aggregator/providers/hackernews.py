"""Hacker News stories via the Algolia search API."""

from __future__ import annotations
from typing import Any, Dict, List, Optional

import httpx

from ..models import Platform, SearchResult
from .base import BaseAdapter

_SEARCH = "https://hn.algolia.com/api/v1/search"
_ITEM = "https://news.ycombinator.com/item?id={id}"


class HackerNewsAdapter(BaseAdapter):
    platform = Platform.HACKERNEWS
    prior = 0.78
    accept = "application/json"

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {"query": topic, "tags": "story", "hitsPerPage": limit}
        data = self._get_json(client, _SEARCH, params=params)
        return self._collect((data or {}).get("hits") or [], self._parse_hit, limit)

    def _parse_hit(self, hit: Dict[str, Any]) -> Optional[SearchResult]:
        object_id = hit.get("objectID")
        discussion = _ITEM.format(id=object_id) if object_id else None
        points = int(hit.get("points") or 0)
        comments = int(hit.get("num_comments") or 0)
        story_text = hit.get("story_text") or ""
        return self._make_result(
            title=hit.get("title") or hit.get("story_title"),
            # Ask/Show HN posts have no outbound link
            url=hit.get("url") or discussion,
            snippet=story_text or f"{points} points and {comments} comments on Hacker News",
            content=story_text,
            author=hit.get("author"),
            score=points,
            date=hit.get("created_at"),
            metadata={"num_comments": comments, "hn_url": discussion},
        )
