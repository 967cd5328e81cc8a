"""Update application status use case: validate, authorize, persist, audit, then trigger automation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.application import ApplicationStatusUpdate, StatusChange
from app.application.services import lifecycle_policy
from app.application.services.status_transition_validator import (
    valid_transitions,
    validate_transition,
)
from app.application.use_cases.applications._scoping import (
    append_internal_note,
    load_application_in_firm,
)
from app.domain.enums import ActivityAction, ApplicationStatus
from app.domain.exceptions import ResourceNotFoundException
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import isoformat_utc, utc_now

if TYPE_CHECKING:
    from app.application.dtos.principal import AdvisorPrincipal
    from app.application.interfaces.repositories import IApplicationRepository
    from app.application.interfaces.services import (
        IActivityLogger,
        IDetachedTaskDispatcher,
        IWorkflowAutomationTrigger,
    )

logger = logging.getLogger(__name__)


class UpdateApplicationStatusUseCase:
    """Applies one status transition.

    Order: load (firm-scoped), transition legality, actor authorization, single-row
    write of status and stamps, activity row, then the automation trigger on the
    detached queue. Nothing is written unless both checks pass; a trigger failure
    never affects the committed status.
    """

    def __init__(
        self,
        application_repo: IApplicationRepository,
        activity_logger: IActivityLogger,
        dispatcher: IDetachedTaskDispatcher,
        automation: IWorkflowAutomationTrigger,
    ) -> None:
        self._application_repo = application_repo
        self._activity_logger = activity_logger
        self._dispatcher = dispatcher
        self._automation = automation

    @traced("applications.update_status")
    async def execute(
        self,
        *,
        application_id: str,
        target_status: ApplicationStatus,
        actor: AdvisorPrincipal,
        notes: str | None = None,
        trigger_workflow: bool = True,
    ) -> StatusChange:
        """Move the application to target_status.

        Raises:
            ResourceNotFoundException: Application absent.
            AccessDeniedException: Application belongs to another firm.
            InvalidTransitionException: target not reachable (carries validTransitions).
            ForbiddenException: actor not allowed by the lifecycle policy.
        """
        application = await load_application_in_firm(
            self._application_repo, application_id, actor.firm_id, "update_status"
        )
        old_status = application.status
        validate_transition(old_status, target_status)
        lifecycle_policy.authorize_transition(actor, application, target_status)

        now = utc_now()
        submitted_at = application.submitted_at
        decided_at = application.decided_at
        if target_status == ApplicationStatus.SUBMITTED_TO_GOVERNMENT and submitted_at is None:
            submitted_at = now
        if target_status in (ApplicationStatus.APPROVED, ApplicationStatus.REJECTED) and decided_at is None:
            decided_at = now

        updated = await self._application_repo.update_status(
            application_id,
            ApplicationStatusUpdate(
                status=target_status,
                submitted_at=submitted_at,
                decided_at=decided_at,
                internal_notes=append_internal_note(
                    application.internal_notes, isoformat_utc(now), notes
                ),
            ),
        )
        if updated is None:
            # Deleted concurrently between load and write.
            raise ResourceNotFoundException("application", application_id)
        add_span_attributes(old_status=old_status.value, new_status=target_status.value)

        await self._activity_logger.record(
            firm_id=application.firm_id,
            user_id=actor.id,
            action=ActivityAction.STATUS_CHANGED.value,
            entity_type="application",
            entity_id=application_id,
            old_values={"status": old_status.value},
            new_values={
                "status": target_status.value,
                "changedBy": actor.id,
                "notes": notes,
                "timestamp": isoformat_utc(now),
            },
            application_id=application_id,
            client_id=application.client_id,
        )

        workflow_triggered = False
        if trigger_workflow:
            workflow_triggered = self._dispatcher.submit(
                "workflow_automation.status_change",
                lambda: self._automation.trigger_status_change(
                    application_id,
                    old_status.value,
                    target_status.value,
                    application.firm_id,
                    actor.id,
                ),
                application_id=application_id,
                transition=f"{old_status.value}->{target_status.value}",
            )
            if not workflow_triggered:
                logger.warning(
                    "Workflow automation not queued for %s (%s -> %s)",
                    application_id,
                    old_status.value,
                    target_status.value,
                )

        logger.info(
            "Application %s status changed %s -> %s by %s",
            application_id,
            old_status.value,
            target_status.value,
            actor.id,
        )
        return StatusChange(
            application=updated,
            from_status=old_status,
            to_status=target_status,
            changed_by=actor.id,
            changed_by_name=actor.name,
            changed_at=now,
            workflow_triggered=workflow_triggered,
            valid_transitions=valid_transitions(target_status),
        )
