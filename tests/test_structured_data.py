import json

from analyzers import StructuredDataAnalyzer
from analyzers.structured_data import score_structured_data


def ld(document) -> str:
    return json.dumps(document)


def test_single_article_block():
    finding = score_structured_data([ld({"@context": "https://schema.org", "@type": "Article"})])
    # 40 block + 30 types + 20 high value
    assert finding.score == 90
    assert finding.confidence == 85
    assert "1 JSON-LD structured data block(s) found" in finding.evidence
    assert "Schemas: Article" in finding.evidence


def test_nothing_found():
    finding = score_structured_data([])
    assert finding.score == 0
    assert "No structured data found" in finding.evidence
    assert len(finding.recommendations) == 2


def test_invalid_blocks_do_not_hide_valid_ones():
    finding = score_structured_data([ld({"@type": "Organization"}), "{not json"])
    assert finding.score == 90
    assert "Invalid JSON-LD found (1 block(s))" in finding.evidence
    assert "Fix JSON-LD syntax errors for better AI understanding" in finding.recommendations


def test_graph_types_are_collected():
    graph = {
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "WebSite"},
            {"@type": "Organization"},
            {"@type": "BreadcrumbList"},
            {"@type": "Article"},
        ],
    }
    finding = score_structured_data([ld(graph)])
    assert "Schemas: WebSite, Organization, BreadcrumbList, Article" in finding.evidence
    assert "Comprehensive schema coverage" in finding.evidence
    assert finding.score == 100


def test_untyped_block():
    finding = score_structured_data([ld({"name": "Untyped"})])
    assert finding.score == 40
    assert "Expand structured data with additional schema types" in finding.recommendations


def test_social_metadata_alone():
    finding = score_structured_data([], has_open_graph=True, has_twitter_card=True)
    assert finding.score == 10
    assert "No structured data found" not in finding.evidence


def test_analyzer_detects_microdata_and_social_tags(make_page):
    page = make_page(
        body='<div itemscope itemtype="https://schema.org/Recipe"><span itemprop="name">Salsa</span></div>',
        head='<meta property="og:title" content="Salsa"><meta name="twitter:card" content="summary">',
    )
    result = StructuredDataAnalyzer().analyze(page)
    assert result.score == 20
    assert "Microdata markup detected" in result.evidence
    assert "Open Graph metadata found" in result.evidence
    assert "Twitter Card metadata found" in result.evidence
