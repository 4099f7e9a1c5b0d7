"""Image alt text accessibility."""

from analyzers.base import FactorAnalyzer, Finding, Pillar
from analyzers.page import Image, PageData

IDEAL_ALT_LENGTH = (10, 125)
STUFFING_MIN_WORDS = 8
STUFFING_DIVERSITY = 0.5


def is_keyword_stuffed(alt: str) -> bool:
    """Long alt text that repeats the same few words."""
    words = alt.lower().split()
    if len(words) < STUFFING_MIN_WORDS:
        return False
    return len(set(words)) / len(words) < STUFFING_DIVERSITY


def score_images(images: list[Image], article_like: bool = False) -> Finding:
    """
    Score alt text coverage and quality.

    Decorative images (alt="") are counted separately and do not lower
    coverage; images with no alt attribute at all do.
    """
    images = [Image(*img) for img in images or []]
    finding = Finding(confidence=90)

    if not images:
        finding.confidence = 70
        finding.evidence.append("No images found")
        if article_like:
            finding.score = 60
            finding.recommend("Add relevant images with descriptive alt text to support the article")
        else:
            finding.score = 85
        return finding

    total = len(images)
    decorative = [img for img in images if img.alt is not None and not img.alt.strip()]
    missing = [img for img in images if img.alt is None]
    described = [img.alt.strip() for img in images if img.alt and img.alt.strip()]

    finding.evidence.append(f"{len(described)} of {total} images have alt text")
    if decorative:
        finding.evidence.append(f"{len(decorative)} decorative image(s) marked with empty alt")

    meaningful = total - len(decorative)
    coverage = len(described) / meaningful if meaningful else 1.0

    if coverage == 1.0:
        finding.add(100, "All meaningful images have alt text")
    elif coverage >= 0.8:
        finding.add(80)
    elif coverage >= 0.6:
        finding.add(60)
    else:
        finding.add(round(coverage * 60))

    if missing:
        finding.recommend(f"Add alt text to {len(missing)} image(s) missing the alt attribute")

    if described:
        low, high = IDEAL_ALT_LENGTH
        well_sized = [alt for alt in described if low <= len(alt) <= high]
        if len(well_sized) / len(described) < 0.5:
            finding.add(-10, "Most alt text is too short or too long")
            finding.recommend(f"Write alt text between {low} and {high} characters")
        too_long = sum(len(alt) > high for alt in described)
        if too_long:
            finding.evidence.append(f"{too_long} alt text(s) exceed {high} characters")

        stuffed = [alt for alt in described if is_keyword_stuffed(alt)]
        if stuffed:
            finding.add(-10, f"{len(stuffed)} alt text(s) look keyword-stuffed")
            finding.recommend("Describe images naturally instead of repeating keywords")

    return finding.clamp()


class ImageAltAnalyzer(FactorAnalyzer):
    factor_id = "M.2.3"
    factor_name = "Image Alt Text"
    pillar = Pillar.MACHINE_READABILITY

    def evaluate(self, page: PageData) -> Finding:
        view = page.view
        return score_images(view.images(), article_like=view.page_kind(page.title) == "article")
