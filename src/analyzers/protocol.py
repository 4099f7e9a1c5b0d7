"""HTTPS protocol check."""

from urllib.parse import urlparse

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import PageData


def check_protocol(url: str) -> Finding:
    """Score 100 for an https URL, 0 otherwise. The protocol is never ambiguous."""
    is_https = urlparse(url or "").scheme.lower() == "https"

    if is_https:
        return Finding(
            score=100,
            confidence=100,
            evidence=["Site uses HTTPS protocol", "Secure connection established"],
        )

    return Finding(
        score=0,
        confidence=100,
        evidence=["Site uses HTTP protocol", "Insecure connection detected"],
        recommendations=[
            "Enable HTTPS for improved security and SEO",
            "Configure SSL/TLS certificate",
            "Implement HTTP to HTTPS redirects",
        ],
    )


class ProtocolAnalyzer(FactorAnalyzer):
    factor_id = "AI.1.1"
    factor_name = "HTTPS Security"
    pillar = Pillar.AI

    def evaluate(self, page: PageData) -> Finding:
        return check_protocol(page.url)
