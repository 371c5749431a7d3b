"""
Research Aggregator - multi-source evidence collection for research topics
"""

__version__ = "1.0.0"
__author__ = "Research Aggregator Team"

__all__ = [
    "ResearchOrchestrator",
    "ResearchSource",
    "SearchResult",
    "Settings",
    "conduct_research",
    "__version__",
    "__author__",
]

def __getattr__(name: str):
    """Lazy import to avoid import-time side effects."""
    if name == "ResearchOrchestrator":
        from .orchestrator import ResearchOrchestrator
        return ResearchOrchestrator
    elif name == "conduct_research":
        from .orchestrator import conduct_research
        return conduct_research
    elif name == "ResearchSource":
        from .models import ResearchSource
        return ResearchSource
    elif name == "SearchResult":
        from .models import SearchResult
        return SearchResult
    elif name == "Settings":
        from research_aggregator.config.settings import Settings
        return Settings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
