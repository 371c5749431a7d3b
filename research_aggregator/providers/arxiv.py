"""arXiv provider for preprints and scientific papers."""

from __future__ import annotations
from typing import List, Optional
import xml.etree.ElementTree as ET
import httpx

from ..extraction.html_cleaner import normalize_whitespace
from ..models import Platform, SearchResult
from .base import BaseAdapter

_BASE = "https://export.arxiv.org/api/query"
_NS = {"a": "http://www.w3.org/2005/Atom"}


class ArxivAdapter(BaseAdapter):
    """Searches the arXiv Atom API; abstracts are returned as inline content."""

    platform = Platform.ACADEMIC
    prior = 0.95
    accept = "application/atom+xml"

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {
            "search_query": f"all:{topic}",
            "start": 0,
            "max_results": limit,
            "sortBy": "relevance",
        }
        root = ET.fromstring(self._get_text(client, _BASE, params=params))
        return self._collect(root.findall("a:entry", _NS), self._parse_entry, limit)

    def _parse_entry(self, entry: ET.Element) -> Optional[SearchResult]:
        title = normalize_whitespace(entry.findtext("a:title", default="", namespaces=_NS))
        summary = normalize_whitespace(entry.findtext("a:summary", default="", namespaces=_NS))

        # Find HTML link
        link = None
        for l in entry.findall("a:link", _NS):
            if l.attrib.get("type") == "text/html":
                link = l.attrib.get("href")
                break

        if not link:
            link = entry.findtext("a:id", default="", namespaces=_NS) or ""

        arxiv_id = link.split("/abs/")[-1] if "arxiv.org/abs/" in link else None
        authors = [
            normalize_whitespace(a.findtext("a:name", default="", namespaces=_NS))
            for a in entry.findall("a:author", _NS)
        ]

        return self._make_result(
            title=title,
            url=link,
            snippet=summary,
            content=summary,
            author=", ".join(a for a in authors if a) or None,
            date=entry.findtext("a:published", default=None, namespaces=_NS),
            metadata={"arxiv_id": arxiv_id},
        )
