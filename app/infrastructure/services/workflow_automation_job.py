"""Workflow automation run from the detached queue with its own session."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.workflow_automation import TaskAutomationService
from app.infrastructure.persistence.database import session_scope
from app.infrastructure.persistence.repositories.application_repo import (
    ApplicationRepository,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository


class SessionScopedAutomationTrigger:
    """Implements IWorkflowAutomationTrigger.

    The request session is closed by the time the job runs, so every
    invocation opens a fresh one.
    """

    def __init__(
        self,
        scope: Callable[[], AbstractAsyncContextManager[AsyncSession]] = session_scope,
    ) -> None:
        self._scope = scope

    async def trigger_status_change(
        self,
        application_id: str,
        old_status: str,
        new_status: str,
        firm_id: str,
        actor_id: str | None,
    ) -> None:
        async with self._scope() as session:
            service = TaskAutomationService(
                task_repo=TaskRepository(session),
                application_repo=ApplicationRepository(session),
                user_repo=UserRepository(session),
            )
            await service.trigger_status_change(
                application_id, old_status, new_status, firm_id, actor_id
            )
