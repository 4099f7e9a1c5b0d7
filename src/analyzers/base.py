"""Base factor analyzer interface and the result record every factor produces."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from enum import Enum

from analyzers.page import PageData

logger = logging.getLogger(__name__)


class Pillar(str, Enum):
    """Scoring category a factor belongs to."""

    AI = "AI"
    AUTHORITY = "A"
    MACHINE_READABILITY = "M"
    STRUCTURE = "S"


class Phase(str, Enum):
    """When a factor is evaluated. Only instant factors exist today."""

    INSTANT = "instant"
    BACKGROUND = "background"


@dataclass(frozen=True)
class FactorResult:
    """Scored outcome of a single factor analyzer."""

    factor_id: str
    factor_name: str
    pillar: Pillar
    score: int  # 0-100
    confidence: int  # 0-100, how much the analyzer trusts its score
    weight: float = 1.0
    evidence: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    phase: Phase = Phase.INSTANT
    processing_time_ms: int = 0

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"{self.factor_id}: score {self.score} outside 0-100")
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"{self.factor_id}: confidence {self.confidence} outside 0-100")
        if self.weight <= 0:
            raise ValueError(f"{self.factor_id}: weight must be positive")
        # Accept lists from callers but store immutable sequences
        object.__setattr__(self, "evidence", tuple(self.evidence))
        object.__setattr__(self, "recommendations", tuple(self.recommendations))

    def to_dict(self) -> dict:
        data = asdict(self)
        data["pillar"] = self.pillar.value
        data["phase"] = self.phase.value
        data["evidence"] = list(self.evidence)
        data["recommendations"] = list(self.recommendations)
        return data


@dataclass
class Finding:
    """Mutable accumulator the scoring functions fill in."""

    score: int = 0
    confidence: int = 100
    evidence: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def add(self, points: int, evidence: str | None = None) -> None:
        self.score += points
        if evidence:
            self.evidence.append(evidence)

    def recommend(self, text: str) -> None:
        self.recommendations.append(text)

    def clamp(self) -> "Finding":
        self.score = max(0, min(int(self.score), 100))
        self.confidence = max(0, min(int(self.confidence), 100))
        return self


class FactorAnalyzer(ABC):
    """Abstract base class for all factor analyzers."""

    factor_id: str
    factor_name: str
    pillar: Pillar
    weight: float = 1.0

    @abstractmethod
    def evaluate(self, page: PageData) -> Finding:
        """
        Score the page for this factor.

        Args:
            page: Fetched page data (may be empty)

        Returns:
            Finding with score, confidence, evidence and recommendations
        """
        pass

    def compute(self, page: PageData) -> FactorResult:
        """Run the analyzer and build its result. Errors propagate."""
        start = time.perf_counter()
        finding = self.evaluate(page).clamp()
        return self._build(finding, start)

    def analyze(self, page: PageData) -> FactorResult:
        """Run the analyzer, converting any internal error into a zero-score result."""
        start = time.perf_counter()
        try:
            return self.compute(page)
        except Exception as e:
            logger.exception(f"{self.factor_name} analysis failed: {e}")
            finding = Finding(
                score=0,
                confidence=0,
                evidence=[f"Error analyzing {self.factor_name.lower()}: {e}"],
                recommendations=[f"Unable to analyze {self.factor_name} - please check manually"],
            )
            return self._build(finding, start)

    def fallback(self, reason: str = "Circuit breaker activated") -> FactorResult:
        """Degraded result used when the analyzer fails, times out or its circuit is open."""
        return FactorResult(
            factor_id=self.factor_id,
            factor_name=self.factor_name,
            pillar=self.pillar,
            score=0,
            confidence=0,
            weight=self.weight,
            evidence=(reason,),
            recommendations=(f"Unable to analyze {self.factor_name} - please check manually",),
        )

    def _build(self, finding: Finding, start: float) -> FactorResult:
        return FactorResult(
            factor_id=self.factor_id,
            factor_name=self.factor_name,
            pillar=self.pillar,
            score=finding.score,
            confidence=finding.confidence,
            weight=self.weight,
            evidence=finding.evidence,
            recommendations=finding.recommendations,
            processing_time_ms=int((time.perf_counter() - start) * 1000),
        )
