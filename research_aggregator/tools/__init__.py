"""
Shared helpers for adapters and the orchestrator
"""

from .url_norm import canonicalize_url, resolve_url, unwrap_redirect

__all__ = [
    "canonicalize_url",
    "resolve_url",
    "unwrap_redirect",
]
