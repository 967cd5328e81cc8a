"""Application DTOs (no ORM dependency)."""

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.application.dtos.application import (
    ApplicationResult,
    ApplicationStatusUpdate,
    StatusChange,
    StatusHistoryEntry,
    StatusInfo,
)
from app.application.dtos.deletion import CascadeStepResult, DeletionSummary
from app.application.dtos.principal import AdvisorPrincipal, ClientPrincipal
from app.application.dtos.task import TaskCreate, TaskResult
from app.application.dtos.workflow import (
    ApplicationDocumentRow,
    ApplicationWorkflow,
    ClientDocumentView,
    DocumentRequirementRow,
    DocumentReviewRow,
    OriginalDocumentsProgress,
    StageProgressCacheRow,
    StageProgressResult,
    WorkflowProgressCacheRow,
    WorkflowProgressResult,
    WorkflowStageRow,
    WorkflowTemplateRow,
)

__all__ = [
    "ActivityLogCreate",
    "ActivityLogResult",
    "AdvisorPrincipal",
    "ApplicationDocumentRow",
    "ApplicationResult",
    "ApplicationStatusUpdate",
    "ApplicationWorkflow",
    "CascadeStepResult",
    "ClientDocumentView",
    "ClientPrincipal",
    "DeletionSummary",
    "DocumentRequirementRow",
    "DocumentReviewRow",
    "OriginalDocumentsProgress",
    "StageProgressCacheRow",
    "StageProgressResult",
    "StatusChange",
    "StatusHistoryEntry",
    "StatusInfo",
    "TaskCreate",
    "TaskResult",
    "WorkflowProgressCacheRow",
    "WorkflowProgressResult",
    "WorkflowStageRow",
    "WorkflowTemplateRow",
]
