"""Application lifecycle API schemas (status, archive, deletion)."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from app.domain.enums import ApplicationStatus
from app.schemas.common import CamelModel


class ApplicationResponse(CamelModel):
    """Application with joined display names."""

    id: str
    firm_id: str
    client_id: str
    program_id: str
    assigned_advisor_id: str | None
    application_number: str
    status: ApplicationStatus
    priority: str
    investment_amount: Decimal | None
    investment_type: str | None
    submitted_at: datetime | None
    decision_expected_at: datetime | None
    decided_at: datetime | None
    notes: str | None
    internal_notes: str | None
    created_at: datetime
    updated_at: datetime
    client_name: str | None = None
    program_name: str | None = None
    advisor_name: str | None = None


class StatusUpdateRequest(CamelModel):
    """Body for PATCH /applications/{id}/status."""

    status: ApplicationStatus
    notes: str | None = Field(default=None, max_length=5000)
    trigger_workflow: bool = True


class StatusChangeResponse(CamelModel):
    from_status: ApplicationStatus = Field(alias="from")
    to_status: ApplicationStatus = Field(alias="to")
    changed_by: str
    changed_by_name: str | None = None
    changed_at: datetime
    workflow_triggered: bool


class StatusUpdateResponse(CamelModel):
    application: ApplicationResponse
    status_change: StatusChangeResponse
    valid_transitions: list[ApplicationStatus]


class StatusHistoryItem(CamelModel):
    from_status: str | None = Field(default=None, alias="from")
    to_status: str | None = Field(default=None, alias="to")
    changed_by: str | None = None
    notes: str | None = None
    changed_at: datetime


class StatusInfoResponse(CamelModel):
    current_status: ApplicationStatus
    valid_transitions: list[ApplicationStatus]
    can_edit: bool
    status_history: list[StatusHistoryItem] = Field(default_factory=list)


class ApplicationStatusResponse(CamelModel):
    """Response for GET /applications/{id}/status."""

    application: ApplicationResponse
    status_info: StatusInfoResponse


class ArchiveRequest(CamelModel):
    """Body for PATCH /applications/{id}/archive."""

    archived: bool
    notes: str | None = Field(default=None, max_length=5000)


class ArchiveResponse(CamelModel):
    application: ApplicationResponse
    message: str


class DeletionInfo(CamelModel):
    application_id: str
    application_number: str
    client_name: str | None
    program_name: str | None
    deleted_by: str
    deleted_at: datetime
    documents_deleted: int
    conversations_deleted: int
    files_scheduled_for_cleanup: int


class DeleteApplicationResponse(CamelModel):
    """Response for DELETE /applications/{id}/delete."""

    success: bool = True
    message: str
    deletion_info: DeletionInfo
