"""General web search via DuckDuckGo HTML results, with Bing as fallback engine."""

from __future__ import annotations
import logging
from typing import List, Optional

import httpx

from ..exceptions import AdapterError
from ..extraction.html_cleaner import parse_html
from ..models import Platform, SearchResult
from .base import BaseAdapter

logger = logging.getLogger(__name__)

_DDG_URL = "https://html.duckduckgo.com/html/"
_DDG_BASE = "https://duckduckgo.com"
_BING_URL = "https://www.bing.com/search"
_BING_BASE = "https://www.bing.com"


class WebSearchAdapter(BaseAdapter):
    """Scrapes a search engine results page; retries once on the fallback engine."""

    platform = Platform.WEB
    prior = 0.85
    fallback_prior = 0.82

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        try:
            results = self._search_duckduckgo(client, topic, limit)
        except AdapterError as e:
            logger.warning(f"DuckDuckGo search failed for '{topic}': {e}")
            results = []

        if results:
            return results

        logger.info(f"DuckDuckGo returned no results for '{topic}', trying Bing")
        return self._search_bing(client, topic, limit)

    def _search_duckduckgo(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        html = self._get_text(client, _DDG_URL, params={"q": topic})
        soup = parse_html(html)
        items = [el for el in soup.select(".result") if "result--ad" not in (el.get("class") or [])]
        return self._collect(items, self._parse_duckduckgo, limit)

    def _parse_duckduckgo(self, elem) -> Optional[SearchResult]:
        link = elem.select_one("a.result__a") or elem.select_one(".result__title a")
        title_el = link or elem.select_one(".result__title")
        href = link.get("href") if link is not None else None
        if not href:
            url_el = elem.select_one("a.result__url")
            href = url_el.get("href") if url_el is not None else None
        snippet_el = elem.select_one(".result__snippet")
        return self._make_result(
            title=title_el.get_text(" ", strip=True) if title_el is not None else "",
            url=href,
            snippet=snippet_el.get_text(" ", strip=True) if snippet_el is not None else "",
            base_url=_DDG_BASE,
            metadata={"engine": "duckduckgo"},
        )

    def _search_bing(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        html = self._get_text(client, _BING_URL, params={"q": topic, "count": max(limit, 10)})
        soup = parse_html(html)
        return self._collect(soup.select("li.b_algo"), self._parse_bing, limit)

    def _parse_bing(self, elem) -> Optional[SearchResult]:
        link = elem.select_one("h2 a")
        if link is None:
            return None
        snippet_el = elem.select_one(".b_caption p") or elem.select_one("p")
        return self._make_result(
            title=link.get_text(" ", strip=True),
            url=link.get("href"),
            snippet=snippet_el.get_text(" ", strip=True) if snippet_el is not None else "",
            relevance_score=self.fallback_prior,
            base_url=_BING_BASE,
            metadata={"engine": "bing"},
        )
