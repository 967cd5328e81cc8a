"""Workflow progress use cases."""

from app.application.use_cases.workflow.get_original_documents_progress import (
    GetOriginalDocumentsProgressUseCase,
)
from app.application.use_cases.workflow.get_workflow_progress import (
    GetWorkflowProgressUseCase,
)

__all__ = [
    "GetOriginalDocumentsProgressUseCase",
    "GetWorkflowProgressUseCase",
]
