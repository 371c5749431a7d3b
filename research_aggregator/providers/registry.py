"""Registry of platform adapters."""

from __future__ import annotations
from typing import Dict, List, Optional, Type
import logging

import httpx

from ..config.settings import Settings
from ..models import Platform
from .arxiv import ArxivAdapter
from .base import BaseAdapter
from .devto import DevToAdapter
from .github import GitHubAdapter
from .hackernews import HackerNewsAdapter
from .news import NewsAdapter
from .reddit import RedditAdapter
from .web import WebSearchAdapter

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, Type[BaseAdapter]] = {
    Platform.WEB.value: WebSearchAdapter,
    Platform.REDDIT.value: RedditAdapter,
    Platform.HACKERNEWS.value: HackerNewsAdapter,
    Platform.NEWS.value: NewsAdapter,
    Platform.ACADEMIC.value: ArxivAdapter,
    Platform.DEVTO.value: DevToAdapter,
    Platform.GITHUB.value: GitHubAdapter,
}


def get_provider(name: str) -> Optional[Type[BaseAdapter]]:
    """Get adapter class by platform name."""
    return PROVIDERS.get(name)


def build_adapters(settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> List[BaseAdapter]:
    """Instantiate an adapter for every enabled platform, in configuration order."""
    adapters = []
    for name in settings.enabled_platforms:
        cls = get_provider(name)
        if cls is None:
            logger.warning(f"No adapter registered for platform '{name}'")
            continue
        adapters.append(cls(settings, transport=transport))
    return adapters
