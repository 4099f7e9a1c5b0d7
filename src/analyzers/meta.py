"""Meta description quality."""

import re

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData

CALL_TO_ACTION = re.compile(
    r"\b(learn|discover|find|get|download|read|explore|see|try|start|join|visit|click)\b",
    re.IGNORECASE,
)
QUESTION_WORDS = re.compile(r"\b(how|what|why|when|where|who)\b", re.IGNORECASE)


def score_meta_description(description: str) -> Finding:
    """Score a meta description: length centred on 150-160 characters plus content bonuses."""
    description = (description or "").strip()
    finding = Finding(confidence=100)

    if not description:
        finding.evidence.append("No meta description found")
        finding.recommend("Add a meta description between 150-160 characters")
        finding.recommend("Include target keywords and call-to-action")
        return finding

    length = len(description)
    finding.evidence.append(f"Meta description length: {length} characters")
    finding.evidence.append(f'Meta description: "{description}"')

    if 150 <= length <= 160:
        finding.add(50, "Meta description length is optimal")
    elif 140 <= length <= 170:
        finding.add(40, "Meta description length is good")
    elif 120 <= length <= 180:
        finding.add(30, "Meta description length is acceptable")
        if length < 140:
            finding.recommend("Consider expanding meta description for better keyword coverage")
        if length > 160:
            finding.recommend("Consider shortening to prevent truncation in search results")
    else:
        finding.add(15, "Meta description length needs optimization")
        if length < 120:
            finding.recommend("Meta description is too short - expand with more details")
        if length > 180:
            finding.recommend("Meta description is too long - will be truncated")

    word_count = len(description.split())
    if 20 <= word_count <= 30:
        finding.add(20, "Good word count for meta description")
    else:
        finding.add(10)
        if word_count < 20:
            finding.recommend("Add more descriptive content to meta description")
        else:
            finding.recommend("Simplify meta description for better readability")

    if CALL_TO_ACTION.search(description):
        finding.add(15, "Contains call-to-action words")
    else:
        finding.recommend("Add call-to-action words to encourage clicks")

    if re.search(r"\d", description):
        finding.add(10, "Includes specific numbers or data")

    if QUESTION_WORDS.search(description):
        finding.add(5, "Uses question words for engagement")

    if description[-1] in ".!?":
        finding.add(5, "Properly punctuated")
    else:
        finding.recommend("End meta description with proper punctuation")

    finding.score = min(finding.score, 100)

    if finding.score >= 85:
        finding.evidence.append("Excellent meta description optimization")
    elif finding.score >= 70:
        finding.evidence.append("Good meta description, minor improvements possible")
    elif finding.score >= 50:
        finding.evidence.append("Average meta description, several improvements needed")
    else:
        finding.evidence.append("Meta description needs significant optimization")
        finding.recommend("Rewrite meta description with proper length and engaging content")

    return finding


class MetaDescriptionAnalyzer(FactorAnalyzer):
    factor_id = "AI.1.3"
    factor_name = "Meta Description"
    pillar = Pillar.AI

    def evaluate(self, page: PageData) -> Finding:
        return score_meta_description(page.meta_description)
