"""Contact information detection across links and page text."""

import re
from urllib.parse import urlparse

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData

CONTACT_PAGE = re.compile(r"^/(?:contact|contact-us|get-in-touch|reach-us)/?$", re.IGNORECASE)

# Conservative grammar: no empty parts, no consecutive dots, dotted domain
EMAIL = re.compile(
    r"^(?:mailto:)?"
    r"[A-Za-z0-9_%+\-]+(?:\.[A-Za-z0-9_%+\-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)

PHONE_CHARS = re.compile(r"^\+?[\d\s().\-]+$")
BARE_PHONE = re.compile(r"^(?:\+|\(\d{3}\)|\d{3}[\s.\-]\d{3}[\s.\-]\d{4}$)")

STREET_SUFFIXES = (
    "Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Drive|Dr|Lane|Ln|Way|Court|Ct|"
    "Place|Pl|Terrace|Parkway|Pkwy|Highway|Hwy|Square|Sq|Circle|Cir"
)

ADDRESS_PATTERNS = [
    # 123 Main Street, 1600 Pennsylvania Avenue, 88 Colin P Kelly Jr St
    re.compile(rf"\b\d{{1,6}}\s+(?:[A-Z0-9][\w'.\-]*\s+){{1,4}}(?:{STREET_SUFFIXES})\b"),
    # 12 rue de Rivoli, 5 Calle Mayor, 10 Via Roma
    re.compile(
        r"\b\d{1,5},?\s+(?:rue|avenue|boulevard|calle|carrer|avenida|via|viale|piazza|rua)"
        r"\s+(?:de\s+|del\s+|la\s+|da\s+|do\s+)?[A-Z]",
        re.IGNORECASE,
    ),
    # Hauptstraße 5, Kerkstraat 12, Storgatan 3
    re.compile(
        r"\b[A-ZÄÖÜ][a-zäöüß]+(?:straße|strasse|str\.|weg|gasse|platz|allee|straat|laan|"
        r"gracht|vej|gatan|gata|veien)\s+\d{1,5}\b"
    ),
]


def is_email_link(link: str) -> bool:
    target = link.split("?", 1)[0]
    return bool(EMAIL.match(target))


def is_phone_link(link: str) -> bool:
    if link[:4].lower() == "tel:":
        number = link[4:].strip()
    elif BARE_PHONE.match(link):
        number = link
    else:
        return False
    if not PHONE_CHARS.match(number):
        return False
    digits = sum(ch.isdigit() for ch in number)
    return 7 <= digits <= 15


def _site_host(url: str) -> str:
    host = urlparse(url).hostname or ""
    return host.removeprefix("www.")


def site_path(link: str, page_url: str | None = None) -> str:
    """Reduce an absolute link on the page's own site to its path; other links are unchanged."""
    parsed = urlparse(link)
    if not page_url or not parsed.netloc or parsed.scheme not in ("", "http", "https"):
        return link
    if _site_host(link) != _site_host(page_url):
        return link
    return parsed.path or "/"


def has_address(content: str) -> bool:
    return any(pattern.search(content) for pattern in ADDRESS_PATTERNS)


def score_contact(links, content: str | None = None, page_url: str | None = None) -> Finding:
    """
    Score contact signals.

    Each channel contributes a flat amount once: contact page 40, email 30,
    phone 20, physical address 10. Capped at 100.

    Args:
        links: Link targets (hrefs) found on the page
        content: Visible page text, searched for street addresses
        page_url: URL of the analyzed page; absolute links to the same site count by path
    """
    safe_links = [link.strip() for link in links if isinstance(link, str)] if isinstance(
        links, (list, tuple)
    ) else []
    safe_content = content if isinstance(content, str) else ""
    finding = Finding(confidence=80)

    if any(CONTACT_PAGE.match(site_path(link, page_url)) for link in safe_links):
        finding.add(40, "Contact page link found")

    emails = [link for link in safe_links if is_email_link(link)]
    if emails:
        finding.add(30, f"{len(emails)} email contact(s) found")

    phones = [link for link in safe_links if is_phone_link(link)]
    if phones:
        finding.add(20, f"{len(phones)} phone contact(s) found")

    if has_address(safe_content):
        finding.add(10, "Address information detected")

    if finding.score == 0:
        finding.evidence.append("No contact information found")
        finding.recommend("Add a contact page to improve trust signals")
        finding.recommend("Include email contact information")
        finding.recommend("Consider adding phone number for direct contact")
    elif finding.score < 80:
        finding.recommend("Add more contact methods for better accessibility")

    finding.score = min(finding.score, 100)
    return finding


class ContactAnalyzer(FactorAnalyzer):
    factor_id = "A.3.2"
    factor_name = "Contact Information"
    pillar = Pillar.AUTHORITY

    def evaluate(self, page: PageData) -> Finding:
        view = page.view
        return score_contact(view.links(), view.text(), page_url=page.url)
