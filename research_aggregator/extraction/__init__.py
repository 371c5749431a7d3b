"""Content extraction and HTML cleaning."""

from .content import ContentExtractor
from .html_cleaner import extract_main_content, strip_tags

__all__ = ["ContentExtractor", "extract_main_content", "strip_tags"]
