"""Factor analyzers package."""

from analyzers.author import AuthorAnalyzer
from analyzers.base import FactorAnalyzer, FactorResult, Finding, Phase, Pillar
from analyzers.contact import ContactAnalyzer
from analyzers.content import ContentDepthAnalyzer
from analyzers.faq import FAQAnalyzer
from analyzers.headings import HeadingAnalyzer
from analyzers.images import ImageAltAnalyzer
from analyzers.meta import MetaDescriptionAnalyzer
from analyzers.page import Heading, Image, MarkupView, PageData
from analyzers.protocol import ProtocolAnalyzer
from analyzers.structured_data import StructuredDataAnalyzer
from analyzers.title import TitleAnalyzer


def default_analyzers() -> list[FactorAnalyzer]:
    """The ten instant factors in their fixed execution order."""
    return [
        ProtocolAnalyzer(),
        TitleAnalyzer(),
        MetaDescriptionAnalyzer(),
        AuthorAnalyzer(),
        ContactAnalyzer(),
        HeadingAnalyzer(),
        StructuredDataAnalyzer(),
        FAQAnalyzer(),
        ImageAltAnalyzer(),
        ContentDepthAnalyzer(),
    ]


__all__ = [
    "AuthorAnalyzer",
    "ContactAnalyzer",
    "ContentDepthAnalyzer",
    "FAQAnalyzer",
    "FactorAnalyzer",
    "FactorResult",
    "Finding",
    "HeadingAnalyzer",
    "Heading",
    "Image",
    "ImageAltAnalyzer",
    "MarkupView",
    "MetaDescriptionAnalyzer",
    "PageData",
    "Phase",
    "Pillar",
    "ProtocolAnalyzer",
    "StructuredDataAnalyzer",
    "TitleAnalyzer",
    "default_analyzers",
]
