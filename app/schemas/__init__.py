"""Pydantic request/response schemas for the API."""

from app.schemas.application import (
    ApplicationResponse,
    ApplicationStatusResponse,
    ArchiveRequest,
    ArchiveResponse,
    DeleteApplicationResponse,
    DeletionInfo,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from app.schemas.common import CamelModel
from app.schemas.health import DetachedQueueStats, HealthResponse
from app.schemas.workflow import (
    ClientWorkflowProgressResponse,
    OriginalDocumentsProgressResponse,
    StageProgressResponse,
    WorkflowProgressResponse,
)

__all__ = [
    "ApplicationResponse",
    "ApplicationStatusResponse",
    "ArchiveRequest",
    "ArchiveResponse",
    "CamelModel",
    "ClientWorkflowProgressResponse",
    "DeleteApplicationResponse",
    "DeletionInfo",
    "DetachedQueueStats",
    "HealthResponse",
    "OriginalDocumentsProgressResponse",
    "StageProgressResponse",
    "StatusUpdateRequest",
    "StatusUpdateResponse",
    "WorkflowProgressResponse",
]
