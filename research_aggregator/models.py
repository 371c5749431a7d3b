from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from enum import Enum
from urllib.parse import urlparse


class Platform(str, Enum):
    """Source platforms queried by the adapters"""
    WEB = "web"
    REDDIT = "reddit"
    HACKERNEWS = "hackernews"
    NEWS = "news"
    ACADEMIC = "academic"
    DEVTO = "devto"
    GITHUB = "github"


def is_absolute_http_url(url: Optional[str]) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url:
        return False
    try:
        p = urlparse(url)
    except ValueError:
        return False
    return p.scheme in ("http", "https") and bool(p.netloc)


class SearchResult(BaseModel):
    """Candidate result from one platform adapter, before extraction."""

    platform: Platform
    title: str
    url: Optional[str] = None
    snippet: str = ""
    content: Optional[str] = None
    author: Optional[str] = None
    relevance_score: float = Field(default=0.5, ge=0, le=1)

    # Popularity signal: upvotes, points, stars or reactions
    score: Optional[int] = None
    date: Optional[str] = None

    # Platform-specific extension fields (subreddit, num_comments, language, ...)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator("url")
    @classmethod
    def _url_absolute(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not is_absolute_http_url(v):
            raise ValueError(f"url must be an absolute http(s) URL: {v!r}")
        return v

    def is_usable(self) -> bool:
        """A result needs a title plus a URL or inline content."""
        return bool(self.title) and (bool(self.url) or bool((self.content or "").strip()))


class RankedResult(SearchResult):
    """SearchResult with the ranker's final score attached."""

    final_score: float = Field(ge=0, le=1)


class ResearchSource(RankedResult):
    """Final unit handed to the synthesis step. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    content: str
    extracted_at: Optional[datetime] = None
    extraction_error: bool = False

    @classmethod
    def from_ranked(cls, ranked: RankedResult, content: str, *, extraction_error: bool = False) -> "ResearchSource":
        data = ranked.model_dump()
        data["content"] = content
        data["extraction_error"] = extraction_error
        data["extracted_at"] = None if extraction_error else datetime.now(timezone.utc)
        return cls(**data)

    def to_synthesis_dict(self) -> Dict[str, Any]:
        """Fields consumed by the report synthesis collaborator."""
        return {
            "title": self.title,
            "platform": self.platform.value,
            "content": self.content,
            "url": self.url,
            "author": self.author,
            "date": self.date,
        }
