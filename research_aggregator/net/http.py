"""HTTP utilities: browser-like clients and a page fetch that never raises."""

from __future__ import annotations
import httpx
import logging
from typing import Dict, Optional

from ..config.settings import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5

# Content types worth running through the HTML extractor
TEXT_CONTENT_TYPES = ("text/html", "application/xhtml+xml", "text/plain")


def browser_headers(user_agent: str = DEFAULT_USER_AGENT, accept: Optional[str] = None) -> Dict[str, str]:
    """Request headers that look like a desktop browser."""
    return {
        "User-Agent": user_agent,
        "Accept": accept or "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


def build_client(
    timeout: float,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    verify: bool = True,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create a redirect-following client with a bounded timeout."""
    merged = browser_headers(user_agent)
    if headers:
        merged.update(headers)
    return httpx.Client(
        timeout=httpx.Timeout(timeout, connect=min(5.0, timeout)),
        headers=merged,
        follow_redirects=True,
        max_redirects=MAX_REDIRECTS,
        verify=verify,
        transport=transport,
    )


def fetch_text(
    url: str,
    *,
    timeout: float = 15.0,
    user_agent: str = DEFAULT_USER_AGENT,
    verify: bool = False,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """
    Fetch a page body for content extraction.

    Returns "" on timeout, DNS or TLS failure, non-2xx status and non-text
    content types, so callers can apply one fallback path.
    """
    try:
        with build_client(timeout, user_agent=user_agent, verify=verify, transport=transport) as client:
            r = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, ValueError) as e:
        logger.debug(f"Fetch failed for {url}: {e}")
        return ""

    if not (200 <= r.status_code < 300):
        logger.debug(f"Fetch for {url} returned HTTP {r.status_code}")
        return ""

    ct = (r.headers.get("content-type") or "").lower()
    if ct and not any(t in ct for t in TEXT_CONTENT_TYPES):
        logger.debug(f"Skipping non-text content ({ct}) at {url}")
        return ""

    return r.text or ""
