"""Archive / unarchive application use case.

Archiving is the sanctioned way to retire an application that may not be
deleted (e.g. approved). It sits outside the transition table, which keeps
'archived' terminal; unarchiving restarts the application at 'started'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.application import ApplicationResult, ApplicationStatusUpdate
from app.application.services import lifecycle_policy
from app.application.use_cases.applications._scoping import (
    append_internal_note,
    load_application_in_firm,
)
from app.domain.enums import ActivityAction, ApplicationStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import isoformat_utc, utc_now

if TYPE_CHECKING:
    from app.application.dtos.principal import AdvisorPrincipal
    from app.application.interfaces.repositories import IApplicationRepository
    from app.application.interfaces.services import IActivityLogger


class SetApplicationArchivedUseCase:
    def __init__(
        self,
        application_repo: IApplicationRepository,
        activity_logger: IActivityLogger,
    ) -> None:
        self._application_repo = application_repo
        self._activity_logger = activity_logger

    @traced("applications.set_archived")
    async def execute(
        self,
        *,
        application_id: str,
        archived: bool,
        actor: AdvisorPrincipal,
        notes: str | None = None,
    ) -> ApplicationResult:
        """Archive or unarchive.

        Raises:
            ResourceNotFoundException: Application absent.
            AccessDeniedException: Application belongs to another firm.
            ForbiddenException: Actor is neither admin nor the assigned advisor.
            ValidationException: Draft archive, or archive/unarchive with no effect.
        """
        application = await load_application_in_firm(
            self._application_repo, application_id, actor.firm_id, "archive"
        )
        lifecycle_policy.authorize_archive(actor, application)

        old_status = application.status
        if archived:
            if old_status == ApplicationStatus.DRAFT:
                raise ValidationException(
                    "Draft applications cannot be archived. Use delete instead.",
                    field="archived",
                )
            if old_status == ApplicationStatus.ARCHIVED:
                raise ValidationException("Application is already archived", field="archived")
            new_status = ApplicationStatus.ARCHIVED
        else:
            if old_status != ApplicationStatus.ARCHIVED:
                raise ValidationException("Application is not archived", field="archived")
            new_status = ApplicationStatus.STARTED

        now = utc_now()
        updated = await self._application_repo.update_status(
            application_id,
            ApplicationStatusUpdate(
                status=new_status,
                submitted_at=application.submitted_at,
                decided_at=application.decided_at,
                internal_notes=append_internal_note(
                    application.internal_notes, isoformat_utc(now), notes
                ),
            ),
        )
        if updated is None:
            raise ResourceNotFoundException("application", application_id)

        action = (
            ActivityAction.APPLICATION_ARCHIVED
            if archived
            else ActivityAction.APPLICATION_UNARCHIVED
        )
        await self._activity_logger.record(
            firm_id=application.firm_id,
            user_id=actor.id,
            action=action.value,
            entity_type="application",
            entity_id=application_id,
            old_values={"status": old_status.value},
            new_values={
                "status": new_status.value,
                "notes": notes,
                "timestamp": isoformat_utc(now),
            },
            application_id=application_id,
            client_id=application.client_id,
        )
        return updated
