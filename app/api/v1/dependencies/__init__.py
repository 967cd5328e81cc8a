"""Presentation-layer dependency injection (composition root).

Use cases are built from infrastructure implementations here; routes
depend only on these providers. Tests swap them via app.dependency_overrides.
"""

from app.api.v1.dependencies.applications import (
    get_archive_use_case,
    get_delete_application_use_case,
    get_original_documents_progress_use_case,
    get_status_use_case,
    get_update_status_use_case,
    get_workflow_progress_use_case,
)
from app.api.v1.dependencies.auth import (
    CurrentAdvisor,
    CurrentClient,
    get_current_advisor,
    get_current_client,
)
from app.api.v1.dependencies.services import (
    get_activity_logger,
    get_automation_trigger,
    get_detached_task_queue,
    get_storage_service,
)

__all__ = [
    "CurrentAdvisor",
    "CurrentClient",
    "get_activity_logger",
    "get_archive_use_case",
    "get_automation_trigger",
    "get_current_advisor",
    "get_current_client",
    "get_delete_application_use_case",
    "get_detached_task_queue",
    "get_original_documents_progress_use_case",
    "get_status_use_case",
    "get_storage_service",
    "get_update_status_use_case",
    "get_workflow_progress_use_case",
]
