"""Unified configuration and settings module.

Single source of truth for timeouts, credentials, per-platform limits and
the quality bounds applied by the orchestrator.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import os

from ..exceptions import ConfigurationError
from ..models import Platform


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# Per-platform candidate budget for one research run (~18 raw candidates)
PLATFORM_LIMITS: Dict[str, int] = {
    Platform.WEB.value: 4,
    Platform.REDDIT.value: 3,
    Platform.HACKERNEWS.value: 2,
    Platform.NEWS.value: 3,
    Platform.ACADEMIC.value: 2,
    Platform.DEVTO.value: 2,
    Platform.GITHUB.value: 2,
}


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _platforms_from_env() -> Tuple[str, ...]:
    raw = os.getenv("RA_PLATFORMS", "")
    if not raw.strip():
        return tuple(p.value for p in Platform)
    return tuple(p.strip().lower() for p in raw.split(",") if p.strip())


@dataclass(frozen=True)
class Settings:
    """Global application settings."""

    # Timeout settings
    HTTP_TIMEOUT_SECONDS: float = field(default_factory=lambda: _env_number("HTTP_TIMEOUT_SECONDS", "12", float))
    EXTRACTION_TIMEOUT_SECONDS: float = field(default_factory=lambda: _env_number("EXTRACTION_TIMEOUT_SECONDS", "15", float))
    PROVIDER_TIMEOUT_SEC: float = field(default_factory=lambda: _env_number("PROVIDER_TIMEOUT_SEC", "30", float))

    # Optional credentials; absence only narrows coverage
    NEWSAPI_KEY: Optional[str] = field(default_factory=lambda: _optional_env("NEWSAPI_KEY"))
    GNEWS_API_KEY: Optional[str] = field(default_factory=lambda: _optional_env("GNEWS_API_KEY"))
    GITHUB_TOKEN: Optional[str] = field(default_factory=lambda: _optional_env("GITHUB_TOKEN"))

    user_agent: str = field(default_factory=lambda: os.getenv("RA_USER_AGENT", DEFAULT_USER_AGENT))
    enabled_platforms: Tuple[str, ...] = field(default_factory=_platforms_from_env)
    platform_limits: Dict[str, int] = field(default_factory=lambda: dict(PLATFORM_LIMITS))

    # Result-set bounds
    max_ranked_results: int = field(default_factory=lambda: _env_number("RA_MAX_RANKED", "12", int))
    content_reuse_min_chars: int = 400
    min_content_chars: int = 80
    max_content_chars: int = field(default_factory=lambda: _env_number("RA_MAX_CONTENT_CHARS", "5000", int))
    snippet_max_chars: int = 300

    # Extraction fetches hit arbitrary hosts; API calls always verify
    verify_tls_for_extraction: bool = field(default_factory=lambda: os.getenv("RA_VERIFY_TLS", "false").lower() == "true")

    def __post_init__(self):
        known = {p.value for p in Platform}
        unknown = [p for p in self.enabled_platforms if p not in known]
        if unknown:
            raise ConfigurationError(f"Unknown platforms in configuration: {', '.join(unknown)}")
        if self.max_ranked_results < 1:
            raise ConfigurationError("max_ranked_results must be positive")

    def limit_for(self, platform: str) -> int:
        """Per-platform candidate limit for one run."""
        key = platform.value if isinstance(platform, Platform) else str(platform)
        return self.platform_limits.get(key, 2)

    def to_dict(self) -> Dict[str, object]:
        """Loggable view of the settings with credentials masked."""
        return {
            "http_timeout": self.HTTP_TIMEOUT_SECONDS,
            "extraction_timeout": self.EXTRACTION_TIMEOUT_SECONDS,
            "provider_timeout": self.PROVIDER_TIMEOUT_SEC,
            "platforms": list(self.enabled_platforms),
            "max_ranked_results": self.max_ranked_results,
            "newsapi": bool(self.NEWSAPI_KEY),
            "gnews": bool(self.GNEWS_API_KEY),
            "github_token": bool(self.GITHUB_TOKEN),
        }
