"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.activity_log_repo import (
    ActivityLogRepository,
)
from app.infrastructure.persistence.repositories.application_repo import (
    ApplicationRepository,
)
from app.infrastructure.persistence.repositories.cascade_deletion_repo import (
    CascadeDeletionRepository,
)
from app.infrastructure.persistence.repositories.document_repo import DocumentRepository
from app.infrastructure.persistence.repositories.original_document_repo import (
    OriginalDocumentRepository,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository
from app.infrastructure.persistence.repositories.workflow_repo import WorkflowRepository

__all__ = [
    "ActivityLogRepository",
    "ApplicationRepository",
    "CascadeDeletionRepository",
    "DocumentRepository",
    "OriginalDocumentRepository",
    "TaskRepository",
    "UserRepository",
    "WorkflowRepository",
]
