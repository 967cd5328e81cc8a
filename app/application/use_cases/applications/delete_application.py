"""Delete application use case: status-gated, audited, ordered cascade with no enclosing transaction.

Each cascade step is a single statement and its own commit point, ordered
leaf-to-root with respect to foreign keys. A crash between two steps leaves
only rows whose parents still exist, so retrying the whole deletion is safe.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.application.dtos.deletion import (
    CascadeStepResult,
    DeletionSummary,
    DocumentFileRef,
)
from app.application.services import lifecycle_policy
from app.application.use_cases.applications._scoping import load_application_in_firm
from app.domain.enums import ActivityAction
from app.domain.exceptions import CascadeStepFailedException
from app.shared.context import get_correlation_id
from app.shared.telemetry.tracing import start_step_span, traced
from app.shared.utils.datetime import isoformat_utc, utc_now

if TYPE_CHECKING:
    from app.application.dtos.principal import AdvisorPrincipal
    from app.application.interfaces.repositories import (
        IApplicationRepository,
        ICascadeDeletionRepository,
    )
    from app.application.interfaces.services import (
        IActivityLogger,
        IDetachedTaskDispatcher,
    )
    from app.application.interfaces.storage import IStorageService

logger = logging.getLogger(__name__)


@dataclass
class CascadeState:
    """Ids resolved by earlier steps and consumed by later ones."""

    application_id: str
    conversation_ids: list[str] = field(default_factory=list)
    message_ids: list[str] = field(default_factory=list)
    document_files: list[DocumentFileRef] = field(default_factory=list)

    @property
    def document_ids(self) -> list[str]:
        return [f.document_id for f in self.document_files]


StepFn = Callable[[CascadeState], Awaitable[int]]


class ApplicationCascade:
    """The ordered list of deletion steps for one application.

    Steps that resolve ids return how many were found; delete steps return
    rows affected. Every delete keyed by an id list is a no-op on an empty list.
    """

    def __init__(self, cascade_repo: ICascadeDeletionRepository) -> None:
        self._repo = cascade_repo

    def steps(self) -> list[tuple[str, StepFn]]:
        r = self._repo
        return [
            ("resolve_conversations", self._resolve_conversations),
            ("delete_message_notifications", self._delete_message_notifications),
            ("delete_message_participants", lambda s: r.delete_message_participants(s.conversation_ids)),
            ("delete_messages", lambda s: r.delete_messages(s.conversation_ids)),
            ("delete_conversations", lambda s: r.delete_conversations(s.conversation_ids)),
            ("delete_document_reviews", self._delete_document_reviews),
            ("delete_application_documents", lambda s: r.delete_application_documents(s.application_id)),
            ("delete_custom_document_requirements", lambda s: r.delete_custom_requirements(s.application_id)),
            ("delete_original_documents", lambda s: r.delete_original_documents(s.application_id)),
            ("delete_stage_progress", lambda s: r.delete_stage_progress(s.application_id)),
            ("delete_workflow_progress", lambda s: r.delete_workflow_progress(s.application_id)),
            ("delete_tasks", lambda s: r.delete_tasks(s.application_id)),
            ("delete_communications", lambda s: r.delete_communications(s.application_id)),
            ("delete_activity_logs", lambda s: r.delete_activity_logs(s.application_id)),
            ("delete_application", lambda s: r.delete_application(s.application_id)),
        ]

    async def _resolve_conversations(self, state: CascadeState) -> int:
        state.conversation_ids = await self._repo.list_conversation_ids(state.application_id)
        return len(state.conversation_ids)

    async def _delete_message_notifications(self, state: CascadeState) -> int:
        state.message_ids = await self._repo.list_message_ids(state.conversation_ids)
        return await self._repo.delete_message_notifications(state.message_ids)

    async def _delete_document_reviews(self, state: CascadeState) -> int:
        # File paths must be captured here: the document rows are gone after the next step.
        state.document_files = await self._repo.list_document_files(state.application_id)
        return await self._repo.delete_document_reviews(state.document_ids)

    async def run(self, state: CascadeState) -> list[CascadeStepResult]:
        """Run every step in order; raise CascadeStepFailedException at the first failure."""
        correlation_id = get_correlation_id()
        completed: list[CascadeStepResult] = []
        for name, fn in self.steps():
            log_fields = {
                "cascade_step": name,
                "application_id": state.application_id,
                "correlation_id": correlation_id,
            }
            logger.info(
                "cascade.step.start step=%s application_id=%s",
                name,
                state.application_id,
                extra=log_fields,
            )
            try:
                with start_step_span(
                    f"cascade.{name}", application_id=state.application_id
                ) as span:
                    affected = await fn(state)
                    span.set_attribute("cascade.affected", affected)
            except Exception as e:
                logger.error(
                    "cascade.step.failed step=%s application_id=%s completed=%s error=%s",
                    name,
                    state.application_id,
                    [c.step for c in completed],
                    e,
                    extra=log_fields,
                    exc_info=True,
                )
                raise CascadeStepFailedException(
                    application_id=state.application_id,
                    step=name,
                    completed_steps=[c.step for c in completed],
                    correlation_id=correlation_id,
                    cause=str(e),
                ) from e
            completed.append(CascadeStepResult(step=name, affected=affected))
            logger.info(
                "cascade.step.done step=%s application_id=%s affected=%d",
                name,
                state.application_id,
                affected,
                extra={**log_fields, "affected": affected},
            )
        return completed


class DeleteApplicationUseCase:
    """Deletes an application and everything it owns.

    Preconditions (firm scope, status-gated authorization) are checked before
    any mutation. The pre-deletion snapshot is written firm-scoped so that it
    survives the activity-log step of the cascade. Object-store cleanup is
    queued only after the rows are gone and never fails the deletion.
    """

    def __init__(
        self,
        application_repo: IApplicationRepository,
        cascade_repo: ICascadeDeletionRepository,
        activity_logger: IActivityLogger,
        dispatcher: IDetachedTaskDispatcher,
        storage: IStorageService,
    ) -> None:
        self._application_repo = application_repo
        self._cascade = ApplicationCascade(cascade_repo)
        self._activity_logger = activity_logger
        self._dispatcher = dispatcher
        self._storage = storage

    @traced("applications.delete")
    async def execute(
        self,
        *,
        application_id: str,
        actor: AdvisorPrincipal,
        reason: str | None = None,
    ) -> DeletionSummary:
        """Run the cascade.

        Raises:
            ResourceNotFoundException: Application absent.
            AccessDeniedException: Application belongs to another firm.
            ForbiddenException: Blocked by the status-gated deletion policy.
            CascadeStepFailedException: A step failed; earlier steps stay applied.
        """
        application = await load_application_in_firm(
            self._application_repo, application_id, actor.firm_id, "delete"
        )
        lifecycle_policy.authorize_delete(actor, application)

        deleted_at = utc_now()
        await self._activity_logger.record(
            firm_id=application.firm_id,
            user_id=actor.id,
            action=ActivityAction.APPLICATION_DELETED.value,
            entity_type="application",
            entity_id=application_id,
            old_values={
                "applicationNumber": application.application_number,
                "status": application.status.value,
                "clientName": application.client_name,
                "programName": application.program_name,
            },
            new_values={
                "deletedBy": actor.id,
                "deletedAt": isoformat_utc(deleted_at),
                "reason": reason,
            },
            application_id=None,
            client_id=application.client_id,
        )

        state = CascadeState(application_id=application_id)
        results = await self._cascade.run(state)
        affected = {r.step: r.affected for r in results}

        paths = sorted({f.file_path for f in state.document_files if f.file_path})
        scheduled = 0
        if paths and self._dispatcher.submit(
            "storage.batch_delete",
            lambda: self._storage.batch_delete(paths),
            application_id=application_id,
            file_count=str(len(paths)),
        ):
            scheduled = len(paths)
        elif paths:
            logger.warning(
                "Object-store cleanup not queued for %d files of deleted application %s",
                len(paths),
                application_id,
            )

        logger.info(
            "cascade.complete application_id=%s documents=%d conversations=%d files=%d",
            application_id,
            affected.get("delete_application_documents", 0),
            affected.get("delete_conversations", 0),
            scheduled,
        )
        return DeletionSummary(
            application_id=application_id,
            application_number=application.application_number,
            client_name=application.client_name,
            program_name=application.program_name,
            deleted_by=actor.id,
            deleted_at=deleted_at,
            documents_deleted=affected.get("delete_application_documents", 0),
            conversations_deleted=affected.get("delete_conversations", 0),
            files_scheduled_for_cleanup=scheduled,
            steps=results,
        )
