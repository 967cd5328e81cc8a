"""Service interfaces (ports) for the application layer.

Protocols define contracts for application and collaborator services (DIP).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.activity_log import ActivityLogResult
    from app.application.dtos.workflow import OriginalDocumentsProgress


# Activity logger interface
class IActivityLogger(Protocol):
    """Protocol for appending lifecycle audit rows."""

    async def record(
        self,
        *,
        firm_id: str,
        user_id: str | None,
        action: str,
        entity_type: str,
        entity_id: str,
        old_values: dict[str, Any] | None = None,
        new_values: dict[str, Any] | None = None,
        application_id: str | None = None,
        client_id: str | None = None,
    ) -> ActivityLogResult:
        """Append exactly one row stamped with the current request context."""


# Detached (fire-and-forget) task dispatcher interface
class IDetachedTaskDispatcher(Protocol):
    """Protocol for running side effects after the caller has returned.

    submit() never raises; it returns False when the job could not be queued.
    """

    def submit(
        self,
        name: str,
        job: Callable[[], Awaitable[Any]],
        **context: str,
    ) -> bool:
        """Queue job for background execution with retry."""


# Workflow automation trigger interface
class IWorkflowAutomationTrigger(Protocol):
    """Protocol for status-change automation (task generation). Raises on failure."""

    async def trigger_status_change(
        self,
        application_id: str,
        old_status: str,
        new_status: str,
        firm_id: str,
        actor_id: str | None,
    ) -> None:
        """Generate follow-up work for a committed status change."""


# Original documents sub-progress interface
class IOriginalDocumentsProgressService(Protocol):
    """Protocol for progress of the courier-shipped originals stage."""

    async def get_progress(self, application_id: str) -> OriginalDocumentsProgress:
        """Counts and status of the application's original documents."""
