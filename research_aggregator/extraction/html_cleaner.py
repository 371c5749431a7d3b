"""HTML cleaning and main-content extraction.

Non-content elements are removed first, then an ordered chain of
strategies is tried: structural selectors, paragraph concatenation and
finally the full page text.
"""

from __future__ import annotations
import re
from typing import Callable, List, Optional

from bs4 import BeautifulSoup, FeatureNotFound

# Tags that never carry article text
NON_CONTENT_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "aside", "iframe", "form"]
NON_CONTENT_SELECTORS = [".ad", ".ads", ".advertisement", "[role=navigation]"]

# Ordered; the first selector whose text clears SELECTOR_MIN_CHARS wins
CONTENT_SELECTORS = [
    "article",
    '[role="main"]',
    ".article-content",
    ".post-content",
    ".entry-content",
    "main",
    "#content",
]

SELECTOR_MIN_CHARS = 200
PARAGRAPH_MIN_CHARS = 40
MAX_CONTENT_CHARS = 5000

_WS = re.compile(r"\s+")
_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_TAG = re.compile(r"<[^>]+>")

Strategy = Callable[[BeautifulSoup], Optional[str]]


def parse_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (including newlines) to one space."""
    return _WS.sub(" ", text or "").strip()


def clean_extracted_content(text: str) -> str:
    """Drop control characters and normalize whitespace."""
    return normalize_whitespace(_CONTROL.sub("", text or ""))


def truncate(text: str, max_chars: int) -> str:
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    return text[:max_chars].rstrip()


def strip_tags(fragment: str) -> str:
    """Plain text of an HTML fragment, entities decoded."""
    if not fragment:
        return ""
    if "<" not in fragment and "&" not in fragment:
        return normalize_whitespace(fragment)
    text = BeautifulSoup(fragment, "html.parser").get_text(" ")
    # Escaped markup inside feeds survives one parse
    return normalize_whitespace(_TAG.sub(" ", text))


def remove_non_content(soup: BeautifulSoup) -> BeautifulSoup:
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    for selector in NON_CONTENT_SELECTORS:
        for tag in soup.select(selector):
            tag.decompose()
    return soup


def _selector_strategy(selector: str) -> Strategy:
    def run(soup: BeautifulSoup) -> Optional[str]:
        matches = soup.select(selector)
        if not matches:
            return None
        text = normalize_whitespace(" ".join(el.get_text(" ") for el in matches))
        return text if len(text) > SELECTOR_MIN_CHARS else None
    run.__name__ = f"selector[{selector}]"
    return run


def _paragraph_strategy(soup: BeautifulSoup) -> Optional[str]:
    blocks = []
    for p in soup.find_all("p"):
        text = normalize_whitespace(p.get_text(" "))
        if len(text) > PARAGRAPH_MIN_CHARS:
            blocks.append(text)
    return "\n\n".join(blocks) or None


def _full_text_strategy(soup: BeautifulSoup) -> Optional[str]:
    root = soup.body or soup
    return normalize_whitespace(root.get_text(" ")) or None


STRATEGIES: List[Strategy] = [_selector_strategy(s) for s in CONTENT_SELECTORS] + [
    _paragraph_strategy,
    _full_text_strategy,
]


def extract_main_content(html: str, max_chars: int = MAX_CONTENT_CHARS) -> str:
    """
    Extract the main readable text of an HTML document.

    Args:
        html: Raw HTML string
        max_chars: Truncation bound for the returned text

    Returns:
        Whitespace-normalized text, or "" when nothing readable was found
    """
    if not html:
        return ""

    soup = remove_non_content(parse_html(html))
    for strategy in STRATEGIES:
        text = strategy(soup)
        if text:
            return truncate(clean_extracted_content(text), max_chars)
    return ""
