"""Fetched page data and the parsed markup view analyzers read from."""

import json
import re
from dataclasses import dataclass
from functools import cached_property
from typing import NamedTuple

from bs4 import BeautifulSoup, NavigableString

# Elements whose text is never visible content
NON_CONTENT_TAGS = {"script", "style", "noscript", "template", "title", "head", "svg"}

HEADING_TAG = re.compile(r"^h[1-6]$")

UTILITY_HINTS = re.compile(
    r"\b(calculator|converter|generator|tool|login|log in|sign in|sign up|checkout|cart|"
    r"search results|dashboard)\b",
    re.IGNORECASE,
)

ARTICLE_TYPES = {"Article", "BlogPosting", "NewsArticle", "TechArticle", "Report"}


class Heading(NamedTuple):
    level: int
    text: str


class Image(NamedTuple):
    src: str
    alt: str | None  # None when the attribute is missing, "" when decorative


class MarkupView:
    """
    Typed extraction over raw HTML.

    Backed by BeautifulSoup with the lxml parser. Every method tolerates
    empty or malformed markup and returns empty collections instead of failing.
    """

    def __init__(self, html: str):
        self.html = html or ""
        self.soup = BeautifulSoup(self.html, "lxml")

    def headings(self) -> list[Heading]:
        """Heading elements in document order."""
        return [
            Heading(int(tag.name[1]), tag.get_text(" ", strip=True))
            for tag in self.soup.find_all(HEADING_TAG)
        ]

    def links(self) -> list[str]:
        """All anchor hrefs, stripped."""
        return [a.get("href", "").strip() for a in self.soup.find_all("a", href=True)]

    def structured_data_blocks(self) -> list[str]:
        """Raw text of every JSON-LD script block."""
        blocks = []
        for script in self.soup.find_all("script"):
            script_type = (script.get("type") or "").strip().lower()
            if script_type == "application/ld+json":
                blocks.append(script.get_text().strip())
        return blocks

    @cached_property
    def structured_data(self) -> tuple[list, int]:
        """Parsed JSON-LD documents and the number of blocks that failed to parse."""
        return parse_json_ld(self.structured_data_blocks())

    def images(self) -> list[Image]:
        return [Image(img.get("src", ""), img.get("alt")) for img in self.soup.find_all("img")]

    def text(self) -> str:
        """Visible text with scripts, styles and other non-content elements removed."""
        return " ".join(self._visible_strings)

    def lines(self) -> str:
        """Visible text with one line per text node, so phrases never run across elements."""
        return "\n".join(self._visible_strings)

    @cached_property
    def _visible_strings(self) -> list[str]:
        strings = []
        for string in self.soup.find_all(string=True):
            # Comments, doctypes and CDATA are NavigableString subclasses
            if type(string) is not NavigableString:
                continue
            if string.parent is not None and string.parent.name in NON_CONTENT_TAGS:
                continue
            cleaned = " ".join(string.split())
            if cleaned:
                strings.append(cleaned)
        return strings

    def paragraphs(self) -> list[str]:
        return [p.get_text(" ", strip=True) for p in self.soup.find_all("p")]

    def has_microdata(self) -> bool:
        return any(
            self.soup.find(attrs={attr: True}) is not None
            for attr in ("itemscope", "itemtype", "itemprop")
        )

    def meta_tags(self, prefix: str) -> dict[str, str]:
        """Meta tags whose property or name starts with the given prefix (e.g. "og:")."""
        tags = {}
        for meta in self.soup.find_all("meta"):
            key = meta.get("property") or meta.get("name") or ""
            if key.lower().startswith(prefix):
                tags[key] = meta.get("content", "")
        return tags

    def author_hints(self) -> list[str]:
        """Author names declared in markup rather than prose."""
        hints = []
        meta = self.soup.find("meta", attrs={"name": re.compile(r"^author$", re.I)})
        if meta and meta.get("content"):
            hints.append(meta["content"].strip())
        for tag in self.soup.find_all(attrs={"rel": "author"}):
            hints.append(tag.get_text(" ", strip=True))
        for tag in self.soup.find_all(attrs={"itemprop": "author"}):
            name = tag.find(attrs={"itemprop": "name"})
            hints.append((name or tag).get_text(" ", strip=True))
        for tag in self.soup.find_all(class_=re.compile(r"\b(author-name|byline-name)\b")):
            hints.append(tag.get_text(" ", strip=True))
        return [hint for hint in hints if hint]

    def schema_types(self) -> list[str]:
        """Every distinct @type in the parsed JSON-LD, including nested and @graph entries."""
        documents, _ = self.structured_data
        return collect_schema_types(documents)

    def has_element(self, name: str) -> bool:
        return self.soup.find(name) is not None

    def page_kind(self, title: str = "") -> str:
        """
        Classify the page as "article", "utility" or "general".

        Articles are marked up as such (an <article> element or an
        article schema type). Utility pages are form-driven or named like tools.
        """
        if self.has_element("article") or ARTICLE_TYPES & set(self.schema_types()):
            return "article"
        inputs = self.soup.find_all(["input", "select", "textarea"])
        visible_inputs = [i for i in inputs if (i.get("type") or "").lower() != "hidden"]
        if len(visible_inputs) >= 3 or UTILITY_HINTS.search(title or ""):
            return "utility"
        return "general"


def parse_json_ld(blocks: list[str]) -> tuple[list, int]:
    """Parse raw JSON-LD blocks, counting the ones that are not valid JSON."""
    documents = []
    invalid = 0
    for block in blocks:
        try:
            documents.append(json.loads(block))
        except (json.JSONDecodeError, TypeError):
            invalid += 1
    return documents, invalid


def collect_schema_types(node, found: list[str] | None = None) -> list[str]:
    """Walk JSON-LD documents and collect distinct @type values in first-seen order."""
    if found is None:
        found = []
    if isinstance(node, list):
        for item in node:
            collect_schema_types(item, found)
    elif isinstance(node, dict):
        schema_type = node.get("@type")
        for value in schema_type if isinstance(schema_type, list) else [schema_type]:
            if isinstance(value, str) and value and value not in found:
                found.append(value)
        for key, value in node.items():
            if key != "@type" and isinstance(value, (dict, list)):
                collect_schema_types(value, found)
    return found


@dataclass(frozen=True)
class PageData:
    """Raw markup plus the title and meta description extracted from it."""

    url: str
    title: str = ""
    meta_description: str = ""
    raw_markup: str = ""

    @classmethod
    def from_html(cls, url: str, html: str) -> "PageData":
        """Build page data, extracting title and meta description from the markup."""
        soup = BeautifulSoup(html or "", "lxml")
        title_tag = soup.find("title")
        title = title_tag.get_text(strip=True) if title_tag else ""
        meta = soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
        description = (meta.get("content") or "").strip() if meta else ""
        return cls(url=url, title=title, meta_description=description, raw_markup=html or "")

    @cached_property
    def view(self) -> MarkupView:
        return MarkupView(self.raw_markup)
