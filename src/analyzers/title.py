"""Title tag optimization."""

import re

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData

BRAND_SEPARATOR = re.compile(r"\s[|\-–—:·•]\s")
ENGAGEMENT_WORDS = re.compile(
    r"\b(how|what|why|best|guide|tips|complete|ultimate|review|checklist)\b", re.IGNORECASE
)
DISTINCTIVE_PUNCTUATION = re.compile(r"[?!★☆✓✗→⚡⭐]")


def score_title(title: str) -> Finding:
    """
    Score a page title.

    Length carries most of the weight (50-60 characters is ideal), with
    bonuses for a readable word count, a brand separator, engagement
    keywords, digits and distinctive punctuation. Capped at 100.
    """
    title = (title or "").strip()
    finding = Finding(confidence=100)

    if not title:
        finding.evidence.append("No title tag found")
        finding.recommend("Add a descriptive title tag to improve SEO")
        finding.recommend("Keep title between 50-60 characters for optimal display")
        return finding

    length = len(title)
    finding.evidence.append(f"Title length: {length} characters")
    finding.evidence.append(f'Title: "{title}"')

    if 50 <= length <= 60:
        finding.add(40, "Title length is optimal for search results")
    elif 40 <= length <= 70:
        finding.add(30, "Title length is acceptable")
    elif 30 <= length <= 80:
        finding.add(20, "Title length could be optimized")
        if length < 40:
            finding.recommend("Consider making title longer for better keyword coverage")
        if length > 70:
            finding.recommend("Consider shortening title to prevent truncation in search results")
    else:
        finding.add(10, "Title length is not optimal")
        if length < 30:
            finding.recommend("Title is too short - add more descriptive keywords")
        if length > 80:
            finding.recommend("Title is too long - will be truncated in search results")

    word_count = len(title.split())
    if 3 <= word_count <= 12:
        finding.add(20, "Good word count for readability")
    else:
        finding.add(10)
        if word_count < 3:
            finding.recommend("Add more descriptive words to title")
        else:
            finding.recommend("Simplify title for better readability")

    if BRAND_SEPARATOR.search(title):
        finding.add(10, "Uses a brand separator")

    if ENGAGEMENT_WORDS.search(title):
        finding.add(15, "Contains high-value keywords")

    if re.search(r"\d", title):
        finding.add(15, "Includes numbers for specificity")

    if DISTINCTIVE_PUNCTUATION.search(title):
        finding.add(10, "Uses engaging punctuation")

    finding.score = min(finding.score, 100)

    if finding.score >= 80:
        finding.evidence.append("Excellent title optimization")
    elif finding.score >= 60:
        finding.evidence.append("Good title, minor improvements possible")
        finding.recommend("Consider adding numbers or power words for better engagement")
    elif finding.score >= 40:
        finding.evidence.append("Average title, several improvements needed")
        finding.recommend("Optimize title length and add engaging elements")
    else:
        finding.evidence.append("Title needs significant optimization")
        finding.recommend("Rewrite title with proper length and engaging keywords")

    return finding


class TitleAnalyzer(FactorAnalyzer):
    factor_id = "AI.1.2"
    factor_name = "Title Optimization"
    pillar = Pillar.AI

    def evaluate(self, page: PageData) -> Finding:
        return score_title(page.title)
