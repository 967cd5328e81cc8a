"""Application use cases: one entry point per lifecycle operation."""

from app.application.use_cases.applications import (
    DeleteApplicationUseCase,
    GetApplicationStatusUseCase,
    SetApplicationArchivedUseCase,
    UpdateApplicationStatusUseCase,
)
from app.application.use_cases.workflow import (
    GetOriginalDocumentsProgressUseCase,
    GetWorkflowProgressUseCase,
)

__all__ = [
    "DeleteApplicationUseCase",
    "GetApplicationStatusUseCase",
    "GetOriginalDocumentsProgressUseCase",
    "GetWorkflowProgressUseCase",
    "SetApplicationArchivedUseCase",
    "UpdateApplicationStatusUseCase",
]
