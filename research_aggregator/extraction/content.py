"""
Turns ranked candidates into research sources with full text.

Inline content that is already long enough is reused; otherwise the page
is fetched and its main content extracted. Any failure falls back to the
snippet and flags the source, without raising.
"""

from __future__ import annotations
import logging
from typing import Optional

import httpx

from ..config.settings import Settings
from ..exceptions import ExtractionError
from ..models import RankedResult, ResearchSource
from ..monitoring_metrics import EXTRACTIONS
from ..net.http import fetch_text
from .html_cleaner import clean_extracted_content, extract_main_content, truncate

logger = logging.getLogger(__name__)


class ContentExtractor:
    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings or Settings()
        self.transport = transport

    def fetch(self, url: str) -> str:
        return fetch_text(
            url,
            timeout=self.settings.EXTRACTION_TIMEOUT_SECONDS,
            user_agent=self.settings.user_agent,
            verify=self.settings.verify_tls_for_extraction,
            transport=self.transport,
        )

    def snippet_fallback(self, ranked: RankedResult) -> ResearchSource:
        EXTRACTIONS.labels(outcome="snippet").inc()
        return ResearchSource.from_ranked(ranked, clean_extracted_content(ranked.snippet), extraction_error=True)

    def _fetch_and_extract(self, url: str) -> str:
        html = self.fetch(url)
        if not html:
            raise ExtractionError(f"No fetchable HTML at {url}")
        text = extract_main_content(html, self.settings.max_content_chars)
        if not text:
            raise ExtractionError(f"No readable content at {url}")
        return text

    def extract(self, ranked: RankedResult) -> ResearchSource:
        inline = clean_extracted_content(ranked.content or "")
        if len(inline) > self.settings.content_reuse_min_chars:
            EXTRACTIONS.labels(outcome="reused").inc()
            return ResearchSource.from_ranked(ranked, truncate(inline, self.settings.max_content_chars))

        if not ranked.url:
            return self.snippet_fallback(ranked)

        try:
            text = self._fetch_and_extract(ranked.url)
        except ExtractionError as e:
            logger.debug(f"{e}, using snippet")
            return self.snippet_fallback(ranked)

        EXTRACTIONS.labels(outcome="fetched").inc()
        return ResearchSource.from_ranked(ranked, text)
