"""Word count and content depth."""

import re

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData

# (minimum words, score, label), checked from the top
DEPTH_BANDS = [
    (2000, 95, "comprehensive"),
    (1000, 80, "in-depth"),
    (600, 65, "good"),
    (300, 50, "moderate"),
    (150, 30, "thin"),
    (0, 10, "insufficient"),
]

SENTENCE_SPLIT = re.compile(r"[.!?]+")
SUBSTANTIAL_PARAGRAPH = 20
UTILITY_CAP = 60


def score_content(text: str, paragraphs: list[str] | None = None, page_kind: str = "general") -> Finding:
    """
    Score content depth from visible text.

    Args:
        text: Visible page text
        paragraphs: Text of each paragraph element
        page_kind: "article", "utility" or "general"
    """
    words = (text or "").split()
    word_count = len(words)
    finding = Finding(confidence=85)
    finding.evidence.append(f"Word count: {word_count}")

    for minimum, points, label in DEPTH_BANDS:
        if word_count >= minimum:
            finding.add(points, f"Content depth: {label}")
            break

    if word_count < 300:
        finding.recommend("Expand the content to at least 300 words to cover the topic")

    cap = 100
    if page_kind == "utility":
        if word_count >= 1000:
            cap = UTILITY_CAP
            finding.evidence.append("Utility page: long copy may bury the tool")
            finding.recommend("Keep utility pages focused; move long copy to supporting articles")
        elif word_count >= 150 and word_count < 600:
            finding.add(10, "Concise copy suits a utility page")
    elif page_kind == "article":
        if word_count >= 1000:
            finding.add(5, "Long-form article depth")
        elif word_count < 300:
            finding.add(-10, "Article is too short to be authoritative")

    sentences = [s for s in SENTENCE_SPLIT.split(text or "") if s.split()]
    if sentences:
        average = word_count / len(sentences)
        if 10 <= average <= 25:
            finding.add(5, f"Average sentence length: {average:.1f} words")
        else:
            finding.evidence.append(f"Average sentence length: {average:.1f} words")
            finding.recommend("Aim for an average of 10-25 words per sentence")

    substantial = [p for p in paragraphs or [] if len(p.split()) >= SUBSTANTIAL_PARAGRAPH]
    if len(substantial) >= 3:
        finding.add(5, f"{len(substantial)} substantial paragraphs")
    else:
        finding.recommend("Organise content into at least 3 well-developed paragraphs")

    finding.score = min(finding.score, cap)
    return finding.clamp()


class ContentDepthAnalyzer(FactorAnalyzer):
    factor_id = "S.3.1"
    factor_name = "Content Depth"
    pillar = Pillar.STRUCTURE

    def evaluate(self, page: PageData) -> Finding:
        view = page.view
        return score_content(view.text(), view.paragraphs(), view.page_kind(page.title))
