"""Structured data (JSON-LD, microdata, social metadata) detection."""

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData, collect_schema_types, parse_json_ld

HIGH_VALUE_TYPES = {
    "Article",
    "BlogPosting",
    "NewsArticle",
    "Review",
    "Product",
    "Organization",
    "LocalBusiness",
    "Person",
    "Event",
    "FAQPage",
    "HowTo",
    "Recipe",
    "Course",
}


def score_structured_data(
    blocks: list[str],
    has_microdata: bool = False,
    has_open_graph: bool = False,
    has_twitter_card: bool = False,
) -> Finding:
    """
    Score structured data coverage.

    Malformed blocks are reported but never stop the valid ones from
    being counted.
    """
    finding = Finding(confidence=85)
    documents, invalid = parse_json_ld(blocks or [])

    if documents:
        finding.add(40, f"{len(documents)} JSON-LD structured data block(s) found")

        types = collect_schema_types(documents)
        if types:
            finding.add(30, f"Schemas: {', '.join(types)}")
            finding.add(5 * min(len(types) - 1, 3))

            if len(types) >= 4:
                finding.add(10, "Comprehensive schema coverage")

            if HIGH_VALUE_TYPES.intersection(types):
                finding.add(20, "Contains high-value schema types")

    if invalid:
        finding.evidence.append(f"Invalid JSON-LD found ({invalid} block(s))")
        finding.recommend("Fix JSON-LD syntax errors for better AI understanding")

    if has_microdata:
        finding.add(10, "Microdata markup detected")

    if has_open_graph:
        finding.add(5, "Open Graph metadata found")

    if has_twitter_card:
        finding.add(5, "Twitter Card metadata found")

    if finding.score == 0:
        finding.evidence.append("No structured data found")
        finding.recommend("Add JSON-LD structured data to help AI understand your content")
        finding.recommend("Consider implementing schema.org markup for better search visibility")
    elif finding.score < 50:
        finding.recommend("Expand structured data with additional schema types")

    finding.score = min(finding.score, 100)
    return finding


class StructuredDataAnalyzer(FactorAnalyzer):
    factor_id = "AI.2.1"
    factor_name = "Structured Data"
    pillar = Pillar.AI

    def evaluate(self, page: PageData) -> Finding:
        view = page.view
        return score_structured_data(
            view.structured_data_blocks(),
            has_microdata=view.has_microdata(),
            has_open_graph=bool(view.meta_tags("og:") or view.meta_tags("fb:")),
            has_twitter_card=bool(view.meta_tags("twitter:")),
        )
