"""Shared fixtures: deterministic settings and canned HTTP transports."""

from typing import Callable, Dict, List

import httpx
import pytest

from research_aggregator.config.settings import Settings
from research_aggregator.models import Platform


def make_settings(**overrides) -> Settings:
    """Settings independent of the caller's environment."""
    values = dict(
        HTTP_TIMEOUT_SECONDS=5.0,
        EXTRACTION_TIMEOUT_SECONDS=5.0,
        PROVIDER_TIMEOUT_SEC=10.0,
        NEWSAPI_KEY=None,
        GNEWS_API_KEY=None,
        GITHUB_TOKEN=None,
        enabled_platforms=tuple(p.value for p in Platform),
        max_ranked_results=12,
        max_content_chars=5000,
        verify_tls_for_extraction=False,
    )
    values.update(overrides)
    return Settings(**values)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def host_router(routes: Dict[str, Callable[[httpx.Request], httpx.Response]]) -> RecordingTransport:
    """Dispatch by request host; unknown hosts get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.host)
        if route is None:
            return httpx.Response(404, text="not found")
        return route(request)

    return RecordingTransport(handler)


def failing_transport(exc: Exception = None) -> RecordingTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc or httpx.ConnectError("connection refused", request=request)

    return RecordingTransport(handler)


@pytest.fixture
def settings():
    return make_settings()
