"""Shared fixtures."""

import json

import pytest

from analyzers import PageData

ARTICLE_URL = "https://example.com/blog/growing-tomatoes"

# 55 characters with a " | " brand separator
ARTICLE_TITLE = "Seven Practical Ways to Grow Tomatoes | Garden Journals"

# 155 characters, 26 words, ending in punctuation
ARTICLE_META = (
    "Learn simple steps to grow healthy tomatoes at home with advice on soil, watering, "
    "pruning, feeding and harvest timing for small gardens and a sunny patio."
)

# 10 words per sentence, 10 sentences per paragraph
SENTENCE = "tomato plants need steady water and warm sun every day."
PARAGRAPH = " ".join([SENTENCE] * 10)


def build_article_html(
    title: str = ARTICLE_TITLE,
    meta: str = ARTICLE_META,
    paragraphs: int = 9,
) -> str:
    """A blog post: byline, /contact link, one skipped heading level, Article JSON-LD,
    no FAQ content, 3 of 5 images with alt text."""
    article_schema = json.dumps(
        {
            "@context": "https://schema.org",
            "@type": "Article",
            "headline": "Growing tomatoes at home",
        }
    )
    body = "\n".join(f"<p>{PARAGRAPH}</p>" for _ in range(paragraphs))
    return f"""<!DOCTYPE html>
<html>
<head>
  <title>{title}</title>
  <meta name="description" content="{meta}">
  <script type="application/ld+json">{article_schema}</script>
</head>
<body>
  <nav><a href="/">Home</a> <a href="/contact">Reach out</a></nav>
  <h1>Growing Tomatoes at Home</h1>
  <p class="byline">Written by Jane Doe</p>
  <h2>Choosing Good Varieties</h2>
  <h4>Cherry Tomato Types</h4>
  <h2>Watering Schedule Basics</h2>
  {body}
  <img src="/img/1.jpg" alt="Ripe red tomatoes on the vine">
  <img src="/img/2.jpg" alt="Seedlings in small peat pots">
  <img src="/img/3.jpg" alt="Watering can beside raised bed">
  <img src="/img/4.jpg">
  <img src="/img/5.jpg">
</body>
</html>"""


@pytest.fixture
def article_html() -> str:
    return build_article_html()


@pytest.fixture
def article_page(article_html) -> PageData:
    return PageData.from_html(ARTICLE_URL, article_html)


@pytest.fixture
def make_page():
    """Build PageData from a body fragment."""

    def _make(body: str = "", url: str = "https://example.com/", head: str = "") -> PageData:
        html = f"<html><head>{head}</head><body>{body}</body></html>"
        return PageData.from_html(url, html)

    return _make
