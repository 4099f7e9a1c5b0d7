"""Celery application for the analysis worker."""

from celery import Celery

from config import settings

celery_app = Celery(
    "factorscope",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["worker.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Analyses and circuit maintenance share one queue so operator
    # tasks reach the same worker processes that hold the fault registry
    task_default_queue="analyses",
    task_routes={
        "worker.tasks.*": {"queue": "analyses"},
    },

    # PROGRESS states are published between STARTED and SUCCESS
    task_track_started=True,
    task_time_limit=settings.analysis_time_limit,
    task_soft_time_limit=max(settings.analysis_time_limit - 5, 1),

    # Each run is short and CPU-bound on parsing; keep one in flight per process
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,

    # Polling clients read results for an hour after completion
    result_expires=3600,

    broker_connection_retry_on_startup=True,
)
