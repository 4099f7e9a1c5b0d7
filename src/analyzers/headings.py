"""Heading hierarchy analysis."""

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import Heading, PageData

H1_POINTS = 30
HIERARCHY_POINTS = 30
OPTIMAL_BONUS = 10
WORDS_POINTS = 15
COUNT_POINTS = 15


def find_hierarchy_breaks(headings: list[Heading]) -> list[tuple[int, int]]:
    """Transitions that descend more than one level, e.g. H1 -> H3."""
    breaks = []
    for previous, current in zip(headings, headings[1:]):
        if current.level - previous.level > 1:
            breaks.append((previous.level, current.level))
    return breaks


def score_headings(headings: list[Heading]) -> Finding:
    """
    Score heading structure.

    Components: a single H1 (30), hierarchy continuity (30), an optimal
    structure bonus (10), average heading length (15) and total heading
    count (15).
    """
    headings = [Heading(int(h[0]), str(h[1])) for h in headings or []]
    finding = Finding(confidence=90)

    if not headings:
        finding.evidence.append("No headings found")
        finding.recommend("Add a heading structure: one H1 followed by H2/H3 sections")
        return finding

    counts = {level: 0 for level in range(1, 7)}
    for heading in headings:
        counts[heading.level] += 1
    summary = ", ".join(f"H{level}: {count}" for level, count in counts.items() if count)
    finding.evidence.append(f"{len(headings)} headings found ({summary})")

    # H1 presence
    h1_count = counts[1]
    if h1_count == 1:
        finding.add(H1_POINTS, "Single H1 heading found")
    elif h1_count == 0:
        finding.evidence.append("No H1 heading found")
        finding.recommend("Add a single H1 heading that states the page topic")
    else:
        finding.add(H1_POINTS // 2, f"Multiple H1 headings found ({h1_count})")
        finding.recommend("Use only one H1 heading per page; demote the others to H2")

    # Hierarchy continuity
    breaks = find_hierarchy_breaks(headings)
    hierarchy = HIERARCHY_POINTS
    if breaks:
        transitions = max(len(headings) - 1, 1)
        hierarchy -= max(1, round(HIERARCHY_POINTS * len(breaks) / transitions))
        for before, after in breaks:
            finding.evidence.append(f"Hierarchy break: H{before} → H{after}")
        finding.recommend("Avoid skipping heading levels (e.g. H1 followed directly by H3)")
    else:
        finding.evidence.append("Heading levels are nested without skips")

    deepest_share = max(counts[level] for level in range(2, 7)) / len(headings)
    if len(headings) >= 5 and deepest_share > 0.8:
        hierarchy -= 5
        finding.evidence.append("Most headings share one level - structure looks flat")
        finding.recommend("Group related sections under parent headings to add depth")

    if counts[2] > 10:
        hierarchy -= 5
        finding.evidence.append(f"{counts[2]} H2 headings - content may be fragmented")
        finding.recommend("Consolidate H2 sections or nest some under H3")

    finding.add(max(hierarchy, 0))

    if h1_count == 1 and not breaks:
        finding.add(OPTIMAL_BONUS, "Optimal heading hierarchy")

    # Heading length
    average_words = sum(len(h.text.split()) for h in headings) / len(headings)
    if 2 <= average_words <= 8:
        finding.add(WORDS_POINTS, f"Average heading length is {average_words:.1f} words")
    elif 1 <= average_words <= 12:
        finding.add(8, f"Average heading length is {average_words:.1f} words")
        finding.recommend("Keep headings descriptive but concise (2-8 words)")
    else:
        finding.evidence.append(f"Average heading length is {average_words:.1f} words")
        finding.recommend("Keep headings descriptive but concise (2-8 words)")

    # Heading count
    total = len(headings)
    if 3 <= total <= 15:
        finding.add(COUNT_POINTS, "Healthy number of headings")
    elif 16 <= total <= 25:
        finding.add(10, "High number of headings")
    elif total < 3:
        finding.add(8)
        finding.recommend("Break content into more sections with descriptive headings")
    else:
        finding.add(5)
        finding.recommend("Reduce the number of headings; too many dilute the outline")

    finding.score = min(finding.score, 100)
    return finding


class HeadingAnalyzer(FactorAnalyzer):
    factor_id = "S.1.1"
    factor_name = "Heading Hierarchy"
    pillar = Pillar.STRUCTURE

    def evaluate(self, page: PageData) -> Finding:
        return score_headings(page.view.headings())
