"""DTOs for workflow progress: row snapshots in, computed progress out.

The calculator works on these plain snapshots so that it holds no session
and its output depends only on the rows passed in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import ReviewStatus, StageStatus


@dataclass(frozen=True)
class WorkflowTemplateRow:
    id: str
    program_id: str
    template_name: str
    description: str | None
    total_stages: int
    estimated_time_months: int | None
    version: int


@dataclass(frozen=True)
class WorkflowStageRow:
    id: str
    template_id: str
    stage_order: int
    stage_name: str
    description: str | None
    estimated_days: int | None
    is_required: bool
    can_skip: bool
    auto_progress: bool


@dataclass(frozen=True)
class DocumentRequirementRow:
    id: str
    stage_id: str
    document_name: str
    is_required: bool


@dataclass(frozen=True)
class ApplicationDocumentRow:
    id: str
    application_id: str
    document_requirement_id: str | None
    filename: str
    file_path: str
    status: str
    uploaded_at: datetime


@dataclass(frozen=True)
class DocumentReviewRow:
    id: str
    document_id: str
    status: ReviewStatus
    reviewed_at: datetime


@dataclass(frozen=True)
class StageProgressCacheRow:
    """Best-effort cached stage timestamps; read only, never authoritative for progress."""

    stage_id: str
    started_at: datetime | None
    completed_at: datetime | None


@dataclass(frozen=True)
class WorkflowProgressCacheRow:
    """Best-effort cached workflow state; read only."""

    status: str
    started_at: datetime | None
    completed_at: datetime | None


@dataclass(frozen=True)
class OriginalDocumentsProgress:
    """Progress of physical originals shipped by courier for one application."""

    total_requested: int
    shipped: int
    received: int
    verified: int
    completion_percentage: int
    status: StageStatus
    can_complete_stage: bool


@dataclass(frozen=True)
class StageProgressResult:
    id: str
    stage_order: int
    stage_name: str
    description: str | None
    estimated_days: int | None
    is_required: bool
    can_skip: bool
    auto_progress: bool
    status: StageStatus
    progress: int
    started_at: datetime | None
    completed_at: datetime | None
    document_count: int
    completed_documents: int
    required_documents: int
    required_completed: int


@dataclass(frozen=True)
class WorkflowProgressResult:
    """Computed progress for an application against its program's active template."""

    overall_progress: int
    current_stage_id: str | None
    stages: list[StageProgressResult] = field(default_factory=list)


@dataclass(frozen=True)
class ClientDocumentView:
    """Document listed in the client-scoped workflow view with its latest review outcome."""

    id: str
    filename: str
    document_requirement_id: str | None
    uploaded_at: datetime
    review_status: ReviewStatus | None


@dataclass(frozen=True)
class ApplicationWorkflow:
    """Outcome of GetWorkflowProgressUseCase."""

    template: WorkflowTemplateRow
    progress: WorkflowProgressResult
    status: str
    started_at: datetime | None
    completed_at: datetime | None
    documents: list[ClientDocumentView] | None = None
