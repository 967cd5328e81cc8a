"""Health check API schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class DetachedQueueStats(CamelModel):
    running: bool
    pending: int
    completed: int
    failed: int
    dropped: int
    retried: int


class HealthResponse(CamelModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    version: str | None = None
    detached_queue: DetachedQueueStats | None = None
