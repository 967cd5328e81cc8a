"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.detached_tasks import DetachedJob, DetachedTaskQueue
from app.infrastructure.services.workflow_automation_job import (
    SessionScopedAutomationTrigger,
)

__all__ = [
    "DetachedJob",
    "DetachedTaskQueue",
    "SessionScopedAutomationTrigger",
]
