"""Analysis API endpoints."""

from celery.result import AsyncResult
from fastapi import APIRouter, status

from api.schemas import (
    AnalysisCreatedResponse,
    AnalysisResultResponse,
    AnalysisCreateRequest,
    AnalysisStatusResponse,
    ProgressResponse,
)
from worker.celery_app import celery_app
from worker.tasks import run_page_analysis

router = APIRouter(prefix="/analyses", tags=["Analyses"])


@router.post(
    "",
    response_model=AnalysisCreatedResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Queue a page analysis",
    description="Queue an instant factor analysis. Returns immediately with a task ID.",
)
async def create_analysis(request: AnalysisCreateRequest) -> AnalysisCreatedResponse:
    """
    Queue an analysis job.

    Poll GET /analyses/{task_id} for progress and the final result.
    """
    url = str(request.url)
    task = run_page_analysis.delay(url)

    return AnalysisCreatedResponse(task_id=task.id, url=url, status="queued")


@router.get(
    "/{task_id}",
    response_model=AnalysisStatusResponse,
    summary="Get analysis status",
    description="Get progress while the analysis runs, and the result once it finishes.",
)
async def get_analysis(task_id: str) -> AnalysisStatusResponse:
    """Get the state of a queued analysis."""
    task = AsyncResult(task_id, app=celery_app)
    response = AnalysisStatusResponse(task_id=task_id, status=task.state.lower())

    if task.state == "PROGRESS" and isinstance(task.info, dict):
        response.progress = ProgressResponse(**task.info)
    elif task.state == "SUCCESS":
        response.result = AnalysisResultResponse.model_validate(task.result)
    elif task.state == "FAILURE":
        response.error = str(task.info)

    return response
