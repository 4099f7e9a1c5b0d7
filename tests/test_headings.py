from analyzers import Heading, HeadingAnalyzer
from analyzers.headings import find_hierarchy_breaks, score_headings


def h(level, text="Section Heading Text"):
    return Heading(level, text)


def test_no_headings():
    finding = score_headings([])
    assert finding.score == 0
    assert finding.evidence == ["No headings found"]
    assert len(finding.recommendations) == 1


def test_optimal_structure():
    finding = score_headings([h(1), h(2), h(3), h(2)])
    # 30 H1 + 30 hierarchy + 10 bonus + 15 length + 15 count
    assert finding.score == 100
    assert "Optimal heading hierarchy" in finding.evidence


def test_skipped_level_costs_hierarchy_points():
    finding = score_headings([h(1), h(2), h(4), h(2)])
    # One break in three transitions: 30 - 10
    assert finding.score == 80
    assert "Hierarchy break: H2 → H4" in finding.evidence
    assert "Optimal heading hierarchy" not in finding.evidence


def test_missing_h1():
    finding = score_headings([h(2), h(3), h(2)])
    assert finding.score == 60
    assert "No H1 heading found" in finding.evidence


def test_multiple_h1():
    finding = score_headings([h(1), h(1), h(2)])
    assert finding.score == 75
    assert "Multiple H1 headings found (2)" in finding.evidence


def test_flat_structure_penalty():
    finding = score_headings([h(1)] + [h(2)] * 6)
    assert finding.score == 95
    assert "Most headings share one level - structure looks flat" in finding.evidence


def test_fragmented_h2s():
    finding = score_headings([h(1)] + [h(2), h(3)] * 11)
    assert "11 H2 headings - content may be fragmented" in finding.evidence


def test_find_hierarchy_breaks():
    assert find_hierarchy_breaks([h(1), h(3), h(4), h(6), h(2)]) == [(1, 3), (4, 6)]


def test_analyzer(make_page):
    page = make_page(body="<h1>Tomatoes</h1><h2>Soil Choice</h2><h3>Compost Mix</h3>")
    result = HeadingAnalyzer().analyze(page)
    assert result.factor_id == "S.1.1"
    assert result.confidence == 90
    # Average of 1.67 words loses the length points down to 8
    assert result.score == 93
