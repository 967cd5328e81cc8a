"""Workflow progress API schemas."""

from datetime import datetime

from pydantic import Field

from app.domain.enums import ReviewStatus, StageStatus
from app.schemas.common import CamelModel


class StageProgressResponse(CamelModel):
    id: str
    stage_order: int
    stage_name: str
    description: str | None
    estimated_days: int | None
    is_required: bool
    can_skip: bool
    auto_progress: bool
    status: StageStatus
    progress: int = Field(..., ge=0, le=100)
    started_at: datetime | None
    completed_at: datetime | None
    document_count: int
    completed_documents: int
    required_documents: int
    required_completed: int


class ClientDocumentResponse(CamelModel):
    id: str
    filename: str
    document_requirement_id: str | None
    uploaded_at: datetime
    review_status: ReviewStatus | None


class WorkflowProgressResponse(CamelModel):
    """Response for GET /applications/{id}/workflow.

    id is the template id; progress is recomputed on every request.
    """

    id: str
    template_name: str
    description: str | None
    total_stages: int
    estimated_time_months: int | None
    current_stage_id: str | None
    overall_progress: int = Field(..., ge=0, le=100)
    status: str
    started_at: datetime | None
    completed_at: datetime | None
    stages: list[StageProgressResponse]


class ClientWorkflowProgressResponse(WorkflowProgressResponse):
    """Client view: the workflow plus the client's uploaded documents."""

    documents: list[ClientDocumentResponse] = Field(default_factory=list)


class OriginalDocumentsProgressResponse(CamelModel):
    total_requested: int
    shipped: int
    received: int
    verified: int
    completion_percentage: int = Field(..., ge=0, le=100)
    status: StageStatus
    can_complete_stage: bool


def workflow_response(result, response_cls=WorkflowProgressResponse):
    """Flatten an ApplicationWorkflow (template + computed progress) into the response shape."""
    template = result.template
    data = {
        "id": template.id,
        "template_name": template.template_name,
        "description": template.description,
        "total_stages": template.total_stages,
        "estimated_time_months": template.estimated_time_months,
        "current_stage_id": result.progress.current_stage_id,
        "overall_progress": result.progress.overall_progress,
        "status": result.status,
        "started_at": result.started_at,
        "completed_at": result.completed_at,
        "stages": [StageProgressResponse.model_validate(s) for s in result.progress.stages],
    }
    if response_cls is ClientWorkflowProgressResponse:
        data["documents"] = [
            ClientDocumentResponse.model_validate(d) for d in (result.documents or [])
        ]
    return response_cls(**data)
