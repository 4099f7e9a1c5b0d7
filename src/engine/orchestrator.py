"""Analysis orchestration: fetch, run factors under the circuit breaker, report progress."""

import asyncio
import inspect
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Protocol
from urllib.parse import urlparse

from analyzers import FactorAnalyzer, FactorResult, PageData, default_analyzers
from config import settings
from engine.circuit_breaker import CircuitBreaker
from engine.fetcher import PageFetcher
from engine.scoring import calculate_overall_score

logger = logging.getLogger(__name__)

# Percentage bands: 0-10 initialization, 10-90 factors, 90-100 persistence by the caller
INIT_SHARE = 10
FACTOR_SHARE = 80

EDUCATIONAL_TEXT = {
    "AI.1.1": "HTTPS is a baseline trust signal for search engines and AI assistants.",
    "AI.1.2": "Titles of 50-60 characters display fully in results and summarise the page for AI.",
    "AI.1.3": "A 150-160 character description with a call to action is what gets quoted and clicked.",
    "A.2.1": "Named, credentialed authors help AI systems judge expertise and trust.",
    "A.3.2": "Visible contact details show a real organisation stands behind the content.",
    "S.1.1": "A single H1 with nested H2/H3 sections gives machines a clean outline of your page.",
    "AI.2.1": "JSON-LD schema tells AI exactly what your page is about.",
    "AI.2.3": "FAQ content maps directly onto the questions people ask AI assistants.",
    "M.2.3": "Alt text makes images understandable to screen readers and AI alike.",
    "S.3.1": "Comprehensive, well-structured content is more likely to be cited as a source.",
}


class ProgressReporter(Protocol):
    """Sync or async callback receiving progress events in order."""

    def __call__(
        self, stage_id: str, percent_complete: int, message: str, educational_text: str
    ) -> Awaitable[None] | None: ...


PageSource = Callable[[str], Awaitable[PageData]]


class CancellationToken:
    """Checked between factors; cancelling stops the run before the next factor."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass
class AnalysisResult:
    """Outcome of one analysis run."""

    factors: list[FactorResult] = field(default_factory=list)
    overall_score: int = 0
    processing_time_ms: int = 0
    success: bool = True
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "factors": [factor.to_dict() for factor in self.factors],
            "overall_score": self.overall_score,
            "processing_time_ms": self.processing_time_ms,
            "success": self.success,
            "error": self.error,
        }


def progress_percent(factor_index: int, factor_count: int = 10) -> int:
    """Percentage reported after the factor at 1-based `factor_index` completes."""
    return math.floor(factor_index / factor_count * FACTOR_SHARE + 0.5) + INIT_SHARE


class AnalysisOrchestrator:
    """
    Runs the instant factors in a fixed order.

    Order: protocol, title, meta description, author, contact, headings,
    structured data, FAQ, images, word count. Every factor goes through
    the circuit breaker; a failing factor contributes its zero-score
    fallback and the run continues.
    """

    def __init__(
        self,
        fetch_page: PageSource | None = None,
        breaker: CircuitBreaker | None = None,
        analyzers: list[FactorAnalyzer] | None = None,
        progress_delay: float = settings.progress_delay,
    ):
        self.fetch_page = fetch_page or PageFetcher()
        self.breaker = breaker or CircuitBreaker()
        self.analyzers = analyzers if analyzers is not None else default_analyzers()
        self.progress_delay = progress_delay

    async def analyze(
        self,
        url: str,
        progress: ProgressReporter | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> AnalysisResult:
        """
        Analyze the page at `url`.

        Never raises: run-level failures come back as success=False.
        """
        start = time.perf_counter()
        logger.info(f"Starting instant analysis for {url}")

        parsed = urlparse(url or "")
        if not parsed.scheme or not parsed.netloc:
            logger.error(f"Rejecting invalid URL: {url!r}")
            return self._failure(start, f"Invalid URL: {url!r}")

        await self._emit(progress, "initializing", 0, "Fetching page", "Retrieving the page markup.")

        try:
            page = await self.fetch_page(url)
        except Exception as e:
            logger.exception(f"Page fetch failed for {url}: {e}")
            return self._failure(start, str(e) or "Page fetch failed")

        await self._emit(
            progress, "fetched", INIT_SHARE, "Page fetched", "Analyzing the page factor by factor."
        )

        factors: list[FactorResult] = []
        count = len(self.analyzers)

        for index, analyzer in enumerate(self.analyzers, start=1):
            if cancel_token is not None and cancel_token.cancelled:
                logger.info(f"Analysis of {url} cancelled after {len(factors)} factors")
                return self._failure(start, "Analysis cancelled", factors)

            result = await self._run_factor(analyzer, page)
            factors.append(result)

            await self._emit(
                progress,
                analyzer.factor_id,
                progress_percent(index, count),
                f"{analyzer.factor_name}: {result.score}/100",
                EDUCATIONAL_TEXT.get(analyzer.factor_id, ""),
            )

            if self.progress_delay > 0 and index < count:
                await asyncio.sleep(self.progress_delay)

        overall_score = calculate_overall_score(factors)
        processing_time_ms = int((time.perf_counter() - start) * 1000)

        logger.info(
            f"Instant analysis completed in {processing_time_ms}ms: "
            f"{len(factors)} factors, overall score {overall_score}"
        )

        await self._emit(
            progress,
            "complete",
            100,
            f"Analysis complete - overall score {overall_score}/100",
            f"Scored {len(factors)} factors.",
        )

        return AnalysisResult(
            factors=factors,
            overall_score=overall_score,
            processing_time_ms=processing_time_ms,
            success=True,
        )

    async def _run_factor(self, analyzer: FactorAnalyzer, page: PageData) -> FactorResult:
        fallback = analyzer.fallback(f"{analyzer.factor_name} analysis failed or timed out")
        return await self.breaker.execute(
            analyzer.factor_id,
            lambda: analyzer.compute(page),
            fallback,
        )

    async def _emit(
        self,
        progress: ProgressReporter | None,
        stage_id: str,
        percent: int,
        message: str,
        educational_text: str,
    ) -> None:
        if progress is None:
            return
        try:
            outcome = progress(stage_id, percent, message, educational_text)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            logger.exception(f"Progress update failed at {stage_id} ({percent}%): {e}")

    def _failure(
        self, start: float, error: str, factors: list[FactorResult] | None = None
    ) -> AnalysisResult:
        return AnalysisResult(
            factors=list(factors or []),
            overall_score=0,
            processing_time_ms=int((time.perf_counter() - start) * 1000),
            success=False,
            error=error,
        )
