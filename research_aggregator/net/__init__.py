"""Network helpers."""

from .http import browser_headers, build_client, fetch_text

__all__ = ["browser_headers", "build_client", "fetch_text"]
