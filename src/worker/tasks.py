"""Celery tasks for running page analyses."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from celery.utils.log import get_task_logger

from config import settings
from engine import AnalysisOrchestrator, CircuitBreaker, FaultRegistry
from worker.celery_app import celery_app

# Logger for tasks
logger = get_task_logger(__name__)

# Fault memory lives as long as the worker process, across analyses
fault_registry = FaultRegistry()

# Analyzer threads also live with the process. asyncio.run only joins the
# loop's default executor, so a timed-out analyzer never holds up a task.
factor_executor = ThreadPoolExecutor(max_workers=settings.factor_workers, thread_name_prefix="factor")


def build_orchestrator() -> AnalysisOrchestrator:
    """Orchestrator wired to this worker's fault registry and analyzer threads."""
    return AnalysisOrchestrator(
        breaker=CircuitBreaker(registry=fault_registry, executor=factor_executor)
    )


@celery_app.task(bind=True, name="worker.tasks.run_page_analysis")
def run_page_analysis(self, url: str) -> dict:
    """
    Run the instant factor analysis for a URL.

    Progress is published as task state "PROGRESS" so API clients can
    poll it; the final result is the serialised AnalysisResult.
    """
    logger.info(f"Starting page analysis for {url}")

    def report_progress(stage_id: str, percent: int, message: str, educational_text: str) -> None:
        self.update_state(
            state="PROGRESS",
            meta={
                "stage_id": stage_id,
                "percent_complete": percent,
                "message": message,
                "educational_text": educational_text,
            },
        )

    result = asyncio.run(build_orchestrator().analyze(url, progress=report_progress))

    if result.success:
        logger.info(f"Analysis of {url} completed with overall score {result.overall_score}")
    else:
        logger.error(f"Analysis of {url} failed: {result.error}")

    return result.to_dict()


@celery_app.task(name="worker.tasks.circuit_states")
def circuit_states() -> dict:
    """Snapshot of this worker's circuit states, for monitoring."""
    return fault_registry.snapshot()


@celery_app.task(name="worker.tasks.reset_circuits")
def reset_circuits(factor_id: str | None = None) -> dict:
    """Operator action: clear one circuit or all of them."""
    fault_registry.reset(factor_id)
    return fault_registry.snapshot()
