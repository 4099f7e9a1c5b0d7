"""Analysis engine: circuit breaker, scoring and orchestration."""

from engine.circuit_breaker import CircuitBreaker, CircuitState, CircuitStatus, FaultRegistry
from engine.fetcher import PageFetcher, PageFetchError
from engine.orchestrator import (
    AnalysisOrchestrator,
    AnalysisResult,
    CancellationToken,
    ProgressReporter,
    progress_percent,
)
from engine.scoring import calculate_overall_score

__all__ = [
    "AnalysisOrchestrator",
    "AnalysisResult",
    "CancellationToken",
    "CircuitBreaker",
    "CircuitState",
    "CircuitStatus",
    "FaultRegistry",
    "PageFetchError",
    "PageFetcher",
    "ProgressReporter",
    "calculate_overall_score",
    "progress_percent",
]
