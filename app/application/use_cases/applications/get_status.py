"""Get application status use case: current status, legal next states, edit rights, history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.application import StatusHistoryEntry, StatusInfo
from app.application.services import lifecycle_policy
from app.application.services.status_transition_validator import valid_transitions
from app.application.use_cases.applications._scoping import load_application_in_firm
from app.domain.enums import ActivityAction

if TYPE_CHECKING:
    from app.application.dtos.principal import AdvisorPrincipal
    from app.application.interfaces.repositories import (
        IActivityLogRepository,
        IApplicationRepository,
    )


class GetApplicationStatusUseCase:
    def __init__(
        self,
        application_repo: IApplicationRepository,
        activity_repo: IActivityLogRepository,
    ) -> None:
        self._application_repo = application_repo
        self._activity_repo = activity_repo

    async def execute(self, *, application_id: str, actor: AdvisorPrincipal) -> StatusInfo:
        application = await load_application_in_firm(
            self._application_repo, application_id, actor.firm_id, "read_status"
        )
        rows = await self._activity_repo.list_for_application(
            application_id, ActivityAction.STATUS_CHANGED.value
        )
        history = [
            StatusHistoryEntry(
                from_status=(row.old_values or {}).get("status"),
                to_status=(row.new_values or {}).get("status"),
                changed_by=row.user_id,
                notes=(row.new_values or {}).get("notes"),
                changed_at=row.created_at,
            )
            for row in rows
        ]
        return StatusInfo(
            application=application,
            current_status=application.status,
            valid_transitions=valid_transitions(application.status),
            can_edit=lifecycle_policy.can_edit(actor, application),
            status_history=history,
        )
