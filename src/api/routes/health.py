"""Liveness endpoint."""

from fastapi import APIRouter

from analyzers import default_analyzers
from api.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report that the API is up and which instant factors it scores.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(factors=[analyzer.factor_id for analyzer in default_analyzers()])
