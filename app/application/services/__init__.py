"""Application services: transition rules, lifecycle policy, progress, audit, automation."""

from app.application.services.activity_logger import ActivityLogger
from app.application.services.original_documents_progress import (
    OriginalDocumentsProgressService,
    summarize_original_documents,
)
from app.application.services.status_transition_validator import (
    VALID_TRANSITIONS,
    is_valid_transition,
    valid_transitions,
    validate_transition,
)
from app.application.services.workflow_automation import TaskAutomationService
from app.application.services.workflow_progress_calculator import compute_progress

__all__ = [
    "ActivityLogger",
    "OriginalDocumentsProgressService",
    "TaskAutomationService",
    "VALID_TRANSITIONS",
    "compute_progress",
    "is_valid_transition",
    "summarize_original_documents",
    "valid_transitions",
    "validate_transition",
]
