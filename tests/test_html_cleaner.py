"""Tests for main-content extraction and text cleaning."""

from research_aggregator.extraction.html_cleaner import (
    clean_extracted_content,
    extract_main_content,
    normalize_whitespace,
    strip_tags,
    truncate,
)

ARTICLE_TEXT = "Artificial intelligence assistants are reshaping how teams write software. " * 5


def test_article_selector_wins():
    """Test that a long <article> is preferred over surrounding text."""
    html = f"""
    <html><body>
      <nav>Home | About | Contact</nav>
      <div class="sidebar">Sidebar chatter that is not the article</div>
      <article><h1>Title</h1><p>{ARTICLE_TEXT}</p></article>
      <footer>Copyright 2024</footer>
    </body></html>
    """
    text = extract_main_content(html)
    assert text.startswith("Title Artificial intelligence assistants")
    assert "Sidebar" not in text
    assert "Copyright" not in text


def test_short_article_falls_through_to_main():
    html = f"""
    <html><body>
      <article>Too short</article>
      <main><p>{ARTICLE_TEXT}</p></main>
    </body></html>
    """
    assert extract_main_content(html).startswith("Artificial intelligence")


def test_paragraph_fallback_keeps_order():
    """Test that paragraphs are joined in document order without structural containers."""
    paragraphs = [f"Paragraph number {i} explains one more aspect of the topic." for i in range(1, 6)]
    html = "<html><body><div>" + "".join(f"<p>{p}</p>" for p in paragraphs) + "<p>short</p></div></body></html>"

    text = extract_main_content(html)

    positions = [text.index(f"Paragraph number {i}") for i in range(1, 6)]
    assert positions == sorted(positions)
    assert "short" not in text


def test_full_text_fallback():
    html = "<html><body><div>Just a few words in a div.</div><span>And a span.</span></body></html>"
    assert extract_main_content(html) == "Just a few words in a div. And a span."


def test_non_content_elements_removed():
    """Test that scripts, styles and navigation never leak into the text."""
    html = """
    <html><head><style>body { color: red; }</style></head><body>
      <script>var tracking = "secret";</script>
      <header>Site header</header>
      <div class="ad">Buy things</div>
      <div>Visible body text</div>
      <aside>Related links</aside>
    </body></html>
    """
    text = extract_main_content(html)
    assert text == "Visible body text"


def test_empty_and_unreadable_input():
    assert extract_main_content("") == ""
    assert extract_main_content("<html><body><script>x()</script></body></html>") == ""


def test_truncated_to_max_chars():
    html = f"<article>{ARTICLE_TEXT * 10}</article>"
    assert len(extract_main_content(html, max_chars=300)) <= 300


def test_clean_extracted_content_strips_control_characters():
    assert clean_extracted_content("a\x00b\x07c \n\n\t d") == "abc d"


def test_normalize_whitespace():
    assert normalize_whitespace("  one\n\ntwo\tthree  ") == "one two three"


def test_strip_tags_decodes_entities():
    assert strip_tags("Tom &amp; Jerry <b>bold</b>") == "Tom & Jerry bold"
    assert strip_tags("plain text") == "plain text"
    assert strip_tags("") == ""


def test_truncate():
    assert truncate("abcdef", 3) == "abc"
    assert truncate("abc", 10) == "abc"
