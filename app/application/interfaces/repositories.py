"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.

Write methods commit per statement: the lifecycle engine never relies on a
multi-statement transaction, so each write is its own commit point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
    from app.application.dtos.application import (
        ApplicationResult,
        ApplicationStatusUpdate,
    )
    from app.application.dtos.deletion import DocumentFileRef
    from app.application.dtos.task import TaskCreate, TaskResult
    from app.application.dtos.workflow import (
        ApplicationDocumentRow,
        DocumentRequirementRow,
        DocumentReviewRow,
        StageProgressCacheRow,
        WorkflowProgressCacheRow,
        WorkflowStageRow,
        WorkflowTemplateRow,
    )


# Application repository interface
class IApplicationRepository(Protocol):
    """Protocol for reading and status-updating applications."""

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        """Return the application with client/program/advisor names, or None."""

    async def update_status(
        self, application_id: str, update: ApplicationStatusUpdate
    ) -> ApplicationResult | None:
        """Write status, stamps and internal notes in one statement; None if the row is gone."""


# Activity log repository interface
class IActivityLogRepository(Protocol):
    """Protocol for the append-only activity log."""

    async def create(self, entry: ActivityLogCreate) -> ActivityLogResult:
        """Append one row."""

    async def list_for_application(
        self, application_id: str, action: str, *, limit: int = 50
    ) -> list[ActivityLogResult]:
        """Rows for one application and action, newest first."""


# Workflow definition repository interface
class IWorkflowRepository(Protocol):
    """Protocol for workflow templates/stages/requirements and the read-side progress caches."""

    async def get_active_template(self, program_id: str) -> WorkflowTemplateRow | None:
        """Active template with the highest version for the program."""

    async def list_stages(self, template_id: str) -> list[WorkflowStageRow]:
        """Stages ordered by stage_order."""

    async def list_requirements(
        self, stage_ids: list[str]
    ) -> list[DocumentRequirementRow]:
        """Document requirements for the given stages."""

    async def list_stage_progress_cache(
        self, application_id: str
    ) -> list[StageProgressCacheRow]:
        """Cached stage timestamps (may be empty or stale)."""

    async def get_workflow_progress_cache(
        self, application_id: str, template_id: str
    ) -> WorkflowProgressCacheRow | None:
        """Cached workflow status row, if any."""


# Application document repository interface
class IDocumentRepository(Protocol):
    """Protocol for application documents and their reviews."""

    async def list_documents(self, application_id: str) -> list[ApplicationDocumentRow]:
        """All documents uploaded for the application."""

    async def list_reviews(self, document_ids: list[str]) -> list[DocumentReviewRow]:
        """All reviews for the given documents (any order)."""


# Original (physical) document repository interface
class IOriginalDocumentRepository(Protocol):
    """Protocol for courier-tracked original documents."""

    async def list_statuses(self, application_id: str) -> list[str]:
        """Status of every original document requested for the application."""


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for tasks created by workflow automation."""

    async def exists_pending(self, application_id: str, title: str) -> bool:
        """True when a pending task with this title already exists for the application."""

    async def create(self, data: TaskCreate) -> TaskResult:
        """Insert one task."""


# User lookup interface
class IUserRepository(Protocol):
    """Protocol for firm user lookups used by task assignment."""

    async def find_active_admin_id(self, firm_id: str) -> str | None:
        """First active admin in the firm, or None."""


# Cascading deletion repository interface
class ICascadeDeletionRepository(Protocol):
    """Protocol for the per-step deletes of an application's dependents.

    Every delete is a single statement and its own commit point. Deletes keyed
    by an id list are no-ops (return 0, issue no statement) when the list is empty.
    """

    async def list_conversation_ids(self, application_id: str) -> list[str]: ...

    async def list_message_ids(self, conversation_ids: list[str]) -> list[str]: ...

    async def delete_message_notifications(self, message_ids: list[str]) -> int: ...

    async def delete_message_participants(self, conversation_ids: list[str]) -> int: ...

    async def delete_messages(self, conversation_ids: list[str]) -> int: ...

    async def delete_conversations(self, conversation_ids: list[str]) -> int: ...

    async def list_document_files(self, application_id: str) -> list[DocumentFileRef]: ...

    async def delete_document_reviews(self, document_ids: list[str]) -> int: ...

    async def delete_application_documents(self, application_id: str) -> int: ...

    async def delete_custom_requirements(self, application_id: str) -> int: ...

    async def delete_original_documents(self, application_id: str) -> int: ...

    async def delete_stage_progress(self, application_id: str) -> int: ...

    async def delete_workflow_progress(self, application_id: str) -> int: ...

    async def delete_tasks(self, application_id: str) -> int: ...

    async def delete_communications(self, application_id: str) -> int: ...

    async def delete_activity_logs(self, application_id: str) -> int: ...

    async def delete_application(self, application_id: str) -> int: ...
