"""Health check endpoint. No database access; used for liveness probes."""

from fastapi import APIRouter, Request

from app.core.config import get_settings
from app.schemas.health import DetachedQueueStats, HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok plus detached queue counters when the queue is running."""
    queue = getattr(request.app.state, "detached_tasks", None)
    return HealthResponse(
        version=get_settings().app_version,
        detached_queue=DetachedQueueStats(**queue.stats()) if queue is not None else None,
    )
