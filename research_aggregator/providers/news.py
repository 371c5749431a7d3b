"""News provider: keyed NewsAPI/GNews when configured, Google News RSS always."""

from __future__ import annotations
import logging
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, List, Optional

import httpx

from ..exceptions import AdapterError
from ..models import Platform, SearchResult
from ..tools.url_norm import canonicalize_url
from .base import BaseAdapter

logger = logging.getLogger(__name__)

_RSS = "https://news.google.com/rss/search"
_NEWSAPI = "https://newsapi.org/v2/everything"
_GNEWS = "https://gnews.io/api/v4/search"

NEWSAPI_PRIOR = 0.90
GNEWS_PRIOR = 0.88
RSS_PRIOR = 0.85


class NewsAdapter(BaseAdapter):
    platform = Platform.NEWS
    prior = RSS_PRIOR

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        sources: List[Callable[[httpx.Client, str, int], List[SearchResult]]] = []
        if self.settings.NEWSAPI_KEY:
            sources.append(self._search_newsapi)
        if self.settings.GNEWS_API_KEY:
            sources.append(self._search_gnews)
        sources.append(self._search_rss)

        results: List[SearchResult] = []
        seen = set()
        for source in sources:
            if len(results) >= limit:
                break
            try:
                found = source(client, topic, limit)
            except (AdapterError, ET.ParseError) as e:
                logger.warning(f"News source {source.__name__} failed for '{topic}': {e}")
                continue
            for r in found:
                key = canonicalize_url(r.url or "") or r.title.lower()
                if key in seen:
                    continue
                seen.add(key)
                results.append(r)
        return results[:limit]

    def _search_newsapi(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {"q": topic, "pageSize": limit, "sortBy": "relevancy", "language": "en"}
        data = self._get_json(client, _NEWSAPI, params=params, headers={"X-Api-Key": self.settings.NEWSAPI_KEY})
        return self._collect((data or {}).get("articles") or [], self._parse_newsapi, limit)

    def _parse_newsapi(self, article: Dict[str, Any]) -> Optional[SearchResult]:
        return self._make_result(
            title=article.get("title"),
            url=article.get("url"),
            snippet=article.get("description"),
            author=article.get("author"),
            date=article.get("publishedAt"),
            relevance_score=NEWSAPI_PRIOR,
            metadata={"provider": "newsapi", "source_name": (article.get("source") or {}).get("name")},
        )

    def _search_gnews(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {"q": topic, "max": limit, "lang": "en", "apikey": self.settings.GNEWS_API_KEY}
        data = self._get_json(client, _GNEWS, params=params)
        return self._collect((data or {}).get("articles") or [], self._parse_gnews, limit)

    def _parse_gnews(self, article: Dict[str, Any]) -> Optional[SearchResult]:
        return self._make_result(
            title=article.get("title"),
            url=article.get("url"),
            snippet=article.get("description"),
            content=article.get("content"),
            date=article.get("publishedAt"),
            relevance_score=GNEWS_PRIOR,
            metadata={"provider": "gnews", "source_name": (article.get("source") or {}).get("name")},
        )

    def _search_rss(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {"q": topic, "hl": "en-US", "gl": "US", "ceid": "US:en"}
        root = ET.fromstring(self._get_text(client, _RSS, params=params))
        return self._collect(root.iter("item"), self._parse_rss_item, limit)

    def _parse_rss_item(self, item: ET.Element) -> Optional[SearchResult]:
        source = item.find("source")
        return self._make_result(
            title=item.findtext("title", default=""),
            url=(item.findtext("link", default="") or "").strip(),
            snippet=item.findtext("description", default=""),
            date=item.findtext("pubDate"),
            relevance_score=RSS_PRIOR,
            metadata={
                "provider": "google_news",
                "source_name": source.text if source is not None else None,
            },
        )
