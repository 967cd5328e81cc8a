"""DTOs for applications (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from app.domain.enums import ApplicationStatus


@dataclass(frozen=True)
class ApplicationResult:
    """Application read-model with the joined client/program/advisor names used in responses and audit snapshots."""

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


@dataclass(frozen=True)
class ApplicationStatusUpdate:
    """Fields written by a status change (single-row update)."""

    status: ApplicationStatus
    submitted_at: datetime | None
    decided_at: datetime | None
    internal_notes: str | None


@dataclass(frozen=True)
class StatusChange:
    """Outcome of UpdateApplicationStatusUseCase."""

    application: ApplicationResult
    from_status: ApplicationStatus
    to_status: ApplicationStatus
    changed_by: str
    changed_by_name: str | None
    changed_at: datetime
    workflow_triggered: bool
    valid_transitions: list[ApplicationStatus]


@dataclass(frozen=True)
class StatusHistoryEntry:
    """One status_changed activity row, as shown in the status view."""

    from_status: str | None
    to_status: str | None
    changed_by: str | None
    notes: str | None
    changed_at: datetime


@dataclass(frozen=True)
class StatusInfo:
    """Outcome of GetApplicationStatusUseCase."""

    application: ApplicationResult
    current_status: ApplicationStatus
    valid_transitions: list[ApplicationStatus]
    can_edit: bool
    status_history: list[StatusHistoryEntry]
