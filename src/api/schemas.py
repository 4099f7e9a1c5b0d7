"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field, HttpUrl


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AnalysisCreateRequest(BaseModel):
    """Request body for queueing a page analysis."""

    url: HttpUrl = Field(
        ...,
        description="The URL of the page to analyze",
        examples=["https://example.com/blog/post"],
    )


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class FactorResultResponse(BaseModel):
    """A single scored factor."""

    factor_id: str
    factor_name: str
    pillar: str
    phase: str
    score: int = Field(..., ge=0, le=100)
    confidence: int = Field(..., ge=0, le=100)
    weight: float
    evidence: list[str]
    recommendations: list[str]
    processing_time_ms: int


class AnalysisResultResponse(BaseModel):
    """Complete analysis outcome."""

    factors: list[FactorResultResponse]
    overall_score: int = Field(..., ge=0, le=100)
    processing_time_ms: int
    success: bool
    error: str | None = None


class ProgressResponse(BaseModel):
    """Latest progress event published by the worker."""

    stage_id: str
    percent_complete: int
    message: str
    educational_text: str


class AnalysisCreatedResponse(BaseModel):
    """Response when an analysis is successfully queued."""

    task_id: str
    url: str
    status: str
    message: str = "Analysis queued successfully"


class AnalysisStatusResponse(BaseModel):
    """Current state of a queued analysis."""

    task_id: str
    status: str
    progress: ProgressResponse | None = None
    result: AnalysisResultResponse | None = None
    error: str | None = None


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Liveness plus the factor ids this build scores."""

    status: str = "healthy"
    service: str = "factorscope"
    version: str = "0.1.0"
    factors: list[str] = []
