"""DEV Community articles via the public dev.to API."""

from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Optional

import httpx

from ..models import Platform, SearchResult
from .base import BaseAdapter

logger = logging.getLogger(__name__)

_ARTICLES = "https://dev.to/api/articles"


def topic_tag(topic: str) -> Optional[str]:
    """dev.to searches by tag only; use the first meaningful keyword."""
    words = re.findall(r"[a-z0-9]+", (topic or "").lower())
    for w in words:
        if len(w) > 3:
            return w
    return words[0] if words else None


class DevToAdapter(BaseAdapter):
    platform = Platform.DEVTO
    prior = 0.70
    accept = "application/json"

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        tag = topic_tag(topic)
        if not tag:
            logger.debug(f"No usable dev.to tag in topic '{topic}'")
            return []
        data = self._get_json(client, _ARTICLES, params={"tag": tag, "per_page": limit})
        return self._collect(data if isinstance(data, list) else [], self._parse_article, limit)

    def _parse_article(self, article: Dict[str, Any]) -> Optional[SearchResult]:
        reactions = article.get("public_reactions_count", article.get("positive_reactions_count"))
        return self._make_result(
            title=article.get("title"),
            url=article.get("url") or article.get("canonical_url"),
            snippet=article.get("description"),
            author=(article.get("user") or {}).get("name"),
            score=int(reactions or 0),
            date=article.get("published_at"),
            metadata={
                "tags": article.get("tag_list") or [],
                "num_comments": int(article.get("comments_count") or 0),
                "reading_time_minutes": article.get("reading_time_minutes"),
            },
        )
