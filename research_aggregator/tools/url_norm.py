"""
URL normalization: redirect unwrapping, absolute-URL enforcement and
canonical keys for deduplication.
"""

from __future__ import annotations
import base64
import binascii
import urllib.parse as _up
from typing import Optional

from w3lib.url import canonicalize_url as _canon

from ..models import is_absolute_http_url

# Tracking parameters that never change page identity
TRACKING_PARAMS = {
    "utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content",
    "gclid", "fbclid", "ref", "ref_src",
}


def _query_param(url: str, name: str) -> Optional[str]:
    values = _up.parse_qs(_up.urlparse(url).query).get(name)
    return values[0] if values else None


def _decode_bing(u: str) -> Optional[str]:
    # Bing wraps targets as "a1" + urlsafe base64 without padding
    if not u.startswith("a1"):
        return None
    payload = u[2:]
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.urlsafe_b64decode(payload).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None


def unwrap_redirect(url: str) -> str:
    """Return the real destination of a search-engine outbound redirect."""
    if not url:
        return url
    try:
        parsed = _up.urlparse(url)
    except ValueError:
        return url
    host = parsed.netloc.lower()

    if "uddg=" in parsed.query:
        target = _query_param(url, "uddg")
        if target:
            return target
    if host.endswith("bing.com") and parsed.path.startswith("/ck/"):
        target = _decode_bing(_query_param(url, "u") or "")
        if target:
            return target
    if host.endswith("google.com") and parsed.path == "/url":
        target = _query_param(url, "q") or _query_param(url, "url")
        if target:
            return target
    return url


def resolve_url(href: Optional[str], base: Optional[str] = None) -> Optional[str]:
    """
    Resolve a raw href to an absolute http(s) URL.

    Protocol-relative links get https, relative links are joined to base,
    redirect wrappers are unwrapped. Returns None when no absolute http(s)
    URL can be produced.
    """
    href = (href or "").strip()
    if not href or href.startswith(("#", "javascript:", "mailto:")):
        return None
    if href.startswith("//"):
        href = "https:" + href
    elif base and not _up.urlparse(href).scheme:
        href = _up.urljoin(base, href)

    href = unwrap_redirect(href)
    if href.startswith("//"):
        href = "https:" + href
    return href if is_absolute_http_url(href) else None


def canonicalize_url(url: str) -> str:
    """Canonical key for deduplication: sorted query, no tracking, no fragment."""
    try:
        u = (url or "").strip()
        if not u:
            return ""
        p = _up.urlparse(_canon(u))
        query = _up.urlencode(
            [(k, v) for k, v in _up.parse_qsl(p.query, keep_blank_values=True) if k.lower() not in TRACKING_PARAMS]
        )
        host = p.netloc.lower()
        if host.startswith("www."):
            host = host[4:]
        path = p.path.rstrip("/") or "/"
        return _up.urlunparse(("https" if p.scheme in ("http", "https") else p.scheme, host, path, "", query, ""))
    except ValueError:
        return (url or "").strip()
