"""DTOs for the cascading deletion of an application."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CascadeStepResult:
    """One completed cascade step: name and rows affected (0 when nothing referenced the application)."""

    step: str
    affected: int


@dataclass(frozen=True)
class DeletionSummary:
    """Outcome of DeleteApplicationUseCase."""

    application_id: str
    application_number: str
    client_name: str | None
    program_name: str | None
    deleted_by: str
    deleted_at: datetime
    documents_deleted: int
    conversations_deleted: int
    files_scheduled_for_cleanup: int
    steps: list[CascadeStepResult]


@dataclass(frozen=True)
class DocumentFileRef:
    """Document id and object-store key, gathered before the document rows are deleted."""

    document_id: str
    file_path: str
