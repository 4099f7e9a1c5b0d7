"""FAQ content and FAQPage schema detection."""

import re

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import Heading, PageData

FAQ_HEADING = re.compile(
    r"\bfaqs?\b|frequently asked|questions?\s+(?:and|&)\s+answers?|\bq\s*&\s*a\b", re.I
)
FAQ_CONTEXT = re.compile(r"\bfaqs?\b|frequently asked|\bquestions\b|\bq\s*&\s*a\b|\banswers\b", re.I)
QUESTION = re.compile(
    r"\b(?:how|what|why|when|where|who|which|can|does|do|is|are|should)\b[^?.!]{3,150}\?",
    re.I,
)
MIN_INCIDENTAL_QUESTIONS = 5
LONG_ANSWER = 100


def find_faq_pages(node, found: list[dict] | None = None) -> list[dict]:
    """FAQPage objects anywhere in the JSON-LD, including @graph and nested entries."""
    if found is None:
        found = []
    if isinstance(node, list):
        for item in node:
            find_faq_pages(item, found)
    elif isinstance(node, dict):
        schema_type = node.get("@type")
        types = schema_type if isinstance(schema_type, list) else [schema_type]
        if "FAQPage" in types:
            found.append(node)
        for value in node.values():
            if isinstance(value, (dict, list)):
                find_faq_pages(value, found)
    return found


def _as_list(value) -> list:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def _answer_text(question: dict) -> str:
    texts = []
    for answer in _as_list(question.get("acceptedAnswer")) + _as_list(
        question.get("suggestedAnswer")
    ):
        if isinstance(answer, dict):
            texts.append(str(answer.get("text") or ""))
        elif isinstance(answer, str):
            texts.append(answer)
    return max(texts, key=len, default="")


def score_faq(
    documents: list,
    headings: list[Heading] | None = None,
    has_faq_section: bool = False,
    text: str = "",
) -> Finding:
    """
    Score FAQ content.

    Args:
        documents: Parsed JSON-LD documents
        headings: Page headings in document order
        has_faq_section: Whether an element's class or id marks an FAQ section
        text: Visible page text
    """
    finding = Finding(confidence=75)
    text = text or ""

    faq_pages = find_faq_pages(documents or [])
    questions = []
    for page in faq_pages:
        questions.extend(q for q in _as_list(page.get("mainEntity")) if isinstance(q, dict))

    if faq_pages:
        finding.confidence = 90
        finding.add(40, f"FAQPage schema found with {len(questions)} question(s)")
        if len(questions) >= 3:
            finding.add(15)
        if len(questions) >= 5:
            finding.add(10)
        if len(questions) >= 10:
            finding.add(10, "Extensive FAQ coverage")
        if len(questions) < 3:
            finding.recommend("Add at least 3 questions to the FAQPage schema")
        if any(len(_answer_text(q)) > LONG_ANSWER for q in questions):
            finding.add(10, "FAQ answers are detailed")
        else:
            finding.recommend("Give FAQ answers more detail (over 100 characters)")

    faq_heading = any(FAQ_HEADING.search(h.text) for h in headings or [])
    if faq_heading or has_faq_section:
        finding.add(15, "FAQ section detected in page markup")

    question_count = len(QUESTION.findall(text))
    if question_count:
        if FAQ_CONTEXT.search(text) or question_count >= MIN_INCIDENTAL_QUESTIONS:
            finding.add(10, f"{question_count} question-style phrase(s) found")
        else:
            finding.evidence.append(
                f"{question_count} incidental question(s) found without FAQ context"
            )

    if finding.score == 0:
        finding.evidence.append("No FAQ content detected")
        finding.recommend("Add an FAQ section answering common customer questions")
        finding.recommend("Mark up FAQs with FAQPage schema so AI answers can cite them")
    elif not faq_pages:
        finding.recommend("Add FAQPage structured data to your FAQ content")

    finding.score = min(finding.score, 100)
    return finding


class FAQAnalyzer(FactorAnalyzer):
    factor_id = "AI.2.3"
    factor_name = "FAQ Content"
    pillar = Pillar.AI

    def evaluate(self, page: PageData) -> Finding:
        view = page.view
        documents, _ = view.structured_data
        faq_section = view.soup.find(attrs={"class": re.compile(r"faq", re.I)}) or view.soup.find(
            id=re.compile(r"faq", re.I)
        )
        return score_faq(
            documents,
            headings=view.headings(),
            has_faq_section=faq_section is not None,
            text=view.text(),
        )
