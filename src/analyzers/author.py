"""Author byline and credibility detection."""

import re

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData

# Optional title, then 1-4 capitalised tokens, e.g. "Jane Doe" or "Dr. Mary-Kate O'Neil"
HONORIFIC = r"(?:Mrs|Mr|Ms|Dr|Prof)\.?[ \t]+"
NAME = rf"(?:{HONORIFIC})?[A-Z][a-zA-Z'\-]+(?:[ \t]+(?:[A-Z]\.|[A-Z][a-zA-Z'\-]+)){0,3}"

BYLINE_PATTERNS = [
    re.compile(rf"(?i:\b(?:written|created|posted|reviewed|edited)\s+by)\s+({NAME})"),
    re.compile(rf"(?i:\bby)\s+({NAME})"),
    re.compile(rf"(?i:\bauthor)\s*[:\-]?\s+({NAME})"),
]

NAME_SHAPE = re.compile(rf"^{NAME}$")
LEADING_HONORIFIC = re.compile(rf"^{HONORIFIC}")

# Words that follow "by" or "author" without naming a person
FALSE_POSITIVES = {
    "the", "and", "or", "but", "with", "from", "about", "this", "that", "our", "your", "their",
    "his", "her", "its", "a", "an", "news", "blog", "post", "article", "page", "site", "home",
    "contact", "login", "register", "category", "date", "default", "admin", "staff", "editor",
    "team", "unknown", "anonymous", "google", "wordpress", "shopify", "squarespace", "wix",
    "cloudflare", "using", "clicking", "continuing", "email", "dr", "mr", "mrs", "ms",
}

AUTHOR_BIO = re.compile(r"author bio|about the author|biography|credentials|expertise", re.I)
AUTHOR_LINKS = re.compile(r"author profile|author page|more by|other articles", re.I)
EXPERTISE = re.compile(
    r"\b(expert|specialist|certified|ph\.?d|m\.?d|professor|director|founder|ceo)\b", re.I
)
CONTACT_HINTS = re.compile(r"\b(contact|email|twitter|linkedin|social)\b", re.I)


def is_plausible_name(candidate: str) -> bool:
    # The title is not part of the name; "Dr" on its own is rejected below
    name = LEADING_HONORIFIC.sub("", candidate)
    tokens = name.split()
    if not tokens or len(tokens) > 4:
        return False
    if tokens[0].lower() in FALSE_POSITIVES or name.lower() in FALSE_POSITIVES:
        return False
    return bool(NAME_SHAPE.match(candidate))


def find_authors(text: str, hints: list[str] | None = None) -> list[str]:
    """Distinct author names from markup hints and bylines in visible text."""
    authors = []
    for hint in hints or []:
        hint = " ".join(hint.split())
        if is_plausible_name(hint) and hint not in authors:
            authors.append(hint)

    for pattern in BYLINE_PATTERNS:
        for match in pattern.finditer(text or ""):
            candidate = match.group(1).strip()
            # Stop at a trailing stop word ("Jane Doe And ...")
            tokens = candidate.split()
            while tokens and tokens[-1].lower() in FALSE_POSITIVES:
                tokens.pop()
            candidate = " ".join(tokens)
            if is_plausible_name(candidate) and candidate not in authors:
                authors.append(candidate)

    return authors


def score_author(text: str, hints: list[str] | None = None) -> Finding:
    """
    Score author presence and credibility signals.

    Args:
        text: Visible page text, one line per text node (scripts and JSON-LD removed)
        hints: Names declared in markup (meta author, rel=author, itemprop)
    """
    text = text or ""
    finding = Finding(confidence=90)
    authors = find_authors(text, hints)

    if not authors:
        finding.evidence.append("No author information detected")
        finding.recommend("Add clear author bylines to establish credibility")
        finding.recommend("Include author bio or credentials")
        finding.recommend('Consider adding "About the Author" section')
        return finding

    finding.add(40, f"Found {len(authors)} potential author(s): {', '.join(authors)}")

    if len(authors) > 1:
        finding.add(15, "Multiple authors detected - good for collaborative authority")

    if AUTHOR_BIO.search(text):
        finding.add(20, "Author bio or credentials found")
    else:
        finding.recommend("Add author bio to establish expertise")

    if AUTHOR_LINKS.search(text):
        finding.add(15, "Author profile links detected")
    else:
        finding.recommend("Link to author profile or other articles")

    if EXPERTISE.search(text):
        finding.add(15, "Author expertise indicators found")

    if CONTACT_HINTS.search(text):
        finding.add(10, "Author contact information available")
    else:
        finding.recommend("Provide author contact or social media links")

    finding.score = min(finding.score, 100)

    if finding.score >= 80:
        finding.evidence.append("Excellent author information and credibility")
    elif finding.score >= 60:
        finding.evidence.append("Good author presence, minor improvements possible")
    else:
        finding.evidence.append("Basic author information present")

    return finding


class AuthorAnalyzer(FactorAnalyzer):
    factor_id = "A.2.1"
    factor_name = "Author Information"
    pillar = Pillar.AUTHORITY

    def evaluate(self, page: PageData) -> Finding:
        view = page.view
        return score_author(view.lines(), view.author_hints())
