"""FactorScope API - queue page analyses and poll their progress."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from analyzers import default_analyzers
from api.routes import analyses_router, health_router
from config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    factor_ids = [analyzer.factor_id for analyzer in default_analyzers()]
    logger.info(f"Starting {settings.app_name} with {len(factor_ids)} factors: {', '.join(factor_ids)}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="FactorScope API",
    description=(
        "Scores a web page against ten instant AI-search optimization factors. "
        "Analyses run on a Celery worker; clients queue a URL and poll for progress."
    ),
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api/v1")
app.include_router(analyses_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    return {
        "service": "FactorScope API",
        "docs": "/docs",
        "health": "/api/v1/health",
        "analyses": "/api/v1/analyses",
    }
