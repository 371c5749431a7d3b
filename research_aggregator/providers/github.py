"""GitHub repository search, bearer-authenticated when a token is configured."""

from __future__ import annotations
from typing import Any, Dict, List, Optional

import httpx

from ..models import Platform, SearchResult
from .base import BaseAdapter

_SEARCH = "https://api.github.com/search/repositories"


class GitHubAdapter(BaseAdapter):
    platform = Platform.GITHUB
    prior = 0.72
    accept = "application/vnd.github+json"

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["X-GitHub-Api-Version"] = "2022-11-28"
        if self.settings.GITHUB_TOKEN:
            headers["Authorization"] = f"Bearer {self.settings.GITHUB_TOKEN}"
        return headers

    def _search(self, client: httpx.Client, topic: str, limit: int) -> List[SearchResult]:
        params = {"q": topic, "sort": "stars", "order": "desc", "per_page": limit}
        data = self._get_json(client, _SEARCH, params=params)
        return self._collect((data or {}).get("items") or [], self._parse_repo, limit)

    def _parse_repo(self, repo: Dict[str, Any]) -> Optional[SearchResult]:
        description = repo.get("description") or ""
        return self._make_result(
            title=repo.get("full_name") or repo.get("name"),
            url=repo.get("html_url"),
            snippet=description,
            author=(repo.get("owner") or {}).get("login"),
            score=int(repo.get("stargazers_count") or 0),
            date=repo.get("updated_at"),
            metadata={
                "language": repo.get("language"),
                "topics": repo.get("topics") or [],
                "forks": int(repo.get("forks_count") or 0),
            },
        )
