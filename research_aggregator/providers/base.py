"""Common adapter behaviour shared by every platform provider."""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

import httpx
from pydantic import ValidationError

from ..config.settings import Settings
from ..exceptions import AdapterError
from ..extraction.html_cleaner import clean_extracted_content, strip_tags, truncate
from ..models import Platform, SearchResult
from ..monitoring_metrics import SEARCH_ERRORS, SEARCH_LATENCY, SEARCH_REQUESTS
from ..net.http import build_client
from ..tools.url_norm import resolve_url

logger = logging.getLogger(__name__)


class BaseAdapter:
    """
    Turns a topic into a bounded list of SearchResult for one platform.

    Subclasses implement ``_search``; ``search`` wraps it so that any failure
    becomes an empty list and a warning, never an exception.
    """

    platform: Platform
    prior: float = 0.5
    base_url: Optional[str] = None
    accept: Optional[str] = None

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings or Settings()
        self.transport = transport

    @property
    def name(self) -> str:
        return self.platform.value

    def search(self, topic: str, limit: int) -> List[SearchResult]:
        """Search the platform; returns at most ``limit`` results and never raises."""
        if limit <= 0:
            return []

        SEARCH_REQUESTS.labels(platform=self.name).inc()
        with SEARCH_LATENCY.labels(platform=self.name).time():
            try:
                with self._client() as client:
                    raw = self._search(client, topic, limit)
            except Exception as e:
                logger.warning(f"{self.name} search failed for '{topic}': {e}")
                SEARCH_ERRORS.labels(platform=self.name).inc()
                return []

        results = [r for r in raw if r is not None and r.is_usable()][:limit]
        logger.info(f"{self.name} search returned {len(results)} results for '{topic}'")
        return results

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        raise NotImplementedError

    # HTTP helpers

    def _headers(self) -> Dict[str, str]:
        return {"Accept": self.accept} if self.accept else {}

    def _client(self) -> httpx.Client:
        return build_client(
            self.settings.HTTP_TIMEOUT_SECONDS,
            user_agent=self.settings.user_agent,
            headers=self._headers(),
            transport=self.transport,
        )

    def _get(self, client: httpx.Client, url: str, params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        try:
            r = client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            raise AdapterError(f"{self.name} request failed: {e}", platform=self.name) from e
        if not (200 <= r.status_code < 300):
            raise AdapterError(f"{self.name} returned HTTP {r.status_code}", platform=self.name, status_code=r.status_code)
        return r

    def _get_json(self, client: httpx.Client, url: str, params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> Any:
        r = self._get(client, url, params=params, headers=headers)
        try:
            return r.json()
        except ValueError as e:
            raise AdapterError(f"{self.name} returned invalid JSON: {e}", platform=self.name) from e

    def _get_text(self, client: httpx.Client, url: str, params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> str:
        return self._get(client, url, params=params, headers=headers).text

    # Normalization

    def _snippet(self, text: Optional[str]) -> str:
        plain = strip_tags(text or "")
        limit = self.settings.snippet_max_chars
        if len(plain) <= limit:
            return plain
        return truncate(plain, limit - 3) + "..."

    def _make_result(
        self,
        *,
        title: Optional[str],
        url: Optional[str] = None,
        snippet: Optional[str] = None,
        content: Optional[str] = None,
        relevance_score: Optional[float] = None,
        base_url: Optional[str] = None,
        **fields: Any,
    ) -> Optional[SearchResult]:
        """Build a normalized SearchResult, or None when the raw item is unusable."""
        title = strip_tags(title or "")
        resolved = None
        if url:
            resolved = resolve_url(url, base_url or self.base_url)
            if resolved is None:
                logger.debug(f"Dropping {self.name} result with malformed URL: {url!r}")
                return None

        body = clean_extracted_content(strip_tags(content or ""))
        try:
            result = SearchResult(
                platform=self.platform,
                title=title,
                url=resolved,
                snippet=self._snippet(snippet),
                content=truncate(body, self.settings.max_content_chars) or None,
                relevance_score=self.prior if relevance_score is None else relevance_score,
                **fields,
            )
        except ValidationError as e:
            logger.debug(f"Dropping invalid {self.name} result: {e}")
            return None
        return result if result.is_usable() else None

    def _collect(self, items: Iterable[Any], parse: Callable[[Any], Optional[SearchResult]],
                 limit: int) -> List[SearchResult]:
        """Parse raw items until ``limit`` usable results are collected."""
        out: List[SearchResult] = []
        for item in items:
            if len(out) >= limit:
                break
            try:
                result = parse(item)
            except Exception as e:
                logger.debug(f"Failed to parse {self.name} result: {e}")
                continue
            if result is not None:
                out.append(result)
        return out
