"""Reddit provider using the public search.json endpoint."""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from ..models import Platform, SearchResult
from .base import BaseAdapter

_BASE = "https://www.reddit.com"
_SEARCH = f"{_BASE}/search.json"


def _iso_from_epoch(value: Any) -> Optional[str]:
    if value in (None, ""):
        return None
    return datetime.fromtimestamp(float(value), tz=timezone.utc).isoformat()


class RedditAdapter(BaseAdapter):
    platform = Platform.REDDIT
    prior = 0.75
    base_url = _BASE
    accept = "application/json"

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {"q": topic, "limit": limit, "sort": "relevance", "type": "link"}
        data = self._get_json(client, _SEARCH, params=params)
        children = ((data or {}).get("data") or {}).get("children") or []
        return self._collect(children, self._parse_post, limit)

    def _parse_post(self, child: Dict[str, Any]) -> Optional[SearchResult]:
        post = child.get("data") or {}
        selftext = post.get("selftext") or ""
        permalink = post.get("permalink")
        return self._make_result(
            title=post.get("title"),
            url=permalink or post.get("url"),
            snippet=selftext,
            content=selftext,
            author=post.get("author"),
            score=int(post.get("score") or 0),
            date=_iso_from_epoch(post.get("created_utc")),
            metadata={
                "subreddit": post.get("subreddit"),
                "num_comments": int(post.get("num_comments") or 0),
            },
        )
