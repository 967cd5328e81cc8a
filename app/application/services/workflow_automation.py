"""Task generation on application status changes (implements IWorkflowAutomationTrigger).

Templates are keyed by "<old>_to_<new>". A template is skipped when a pending
task with the same title already exists for the application, so re-running a
trigger (detached retries) does not duplicate work.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from app.application.dtos.task import TaskCreate
from app.domain.enums import ApplicationStatus as S
from app.domain.enums import TaskPriority
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.dtos.application import ApplicationResult
    from app.application.interfaces.repositories import (
        IApplicationRepository,
        ITaskRepository,
        IUserRepository,
    )

logger = logging.getLogger(__name__)

ASSIGNED_ADVISOR = "assigned_advisor"
SENIOR_ADVISOR = "senior_advisor"


@dataclass(frozen=True)
class TaskTemplate:
    title: str
    description: str
    task_type: str
    priority: TaskPriority
    due_days: int
    assignment: str = ASSIGNED_ADVISOR


def _key(old: S, new: S) -> str:
    return f"{old.value}_to_{new.value}"


TASK_TEMPLATES: dict[str, tuple[TaskTemplate, ...]] = {
    _key(S.DRAFT, S.STARTED): (
        TaskTemplate(
            "Initial client consultation",
            "Walk the client through the program requirements and timeline.",
            "client_communication",
            TaskPriority.HIGH,
            3,
        ),
        TaskTemplate(
            "Document collection checklist",
            "Send the client the checklist of required documents for this program.",
            "document_review",
            TaskPriority.HIGH,
            2,
        ),
    ),
    _key(S.STARTED, S.SUBMITTED): (
        TaskTemplate(
            "Application compilation and review",
            "Compile the application package and review it for completeness.",
            "application_preparation",
            TaskPriority.HIGH,
            5,
            SENIOR_ADVISOR,
        ),
    ),
    _key(S.SUBMITTED, S.READY_FOR_SUBMISSION): (
        TaskTemplate(
            "Final compliance check",
            "Confirm due diligence and translations before government submission.",
            "compliance_check",
            TaskPriority.URGENT,
            3,
            SENIOR_ADVISOR,
        ),
    ),
    _key(S.READY_FOR_SUBMISSION, S.SUBMITTED_TO_GOVERNMENT): (
        TaskTemplate(
            "Confirm government receipt",
            "Obtain the acknowledgement of receipt from the government unit.",
            "follow_up",
            TaskPriority.HIGH,
            7,
        ),
    ),
    _key(S.SUBMITTED_TO_GOVERNMENT, S.UNDER_REVIEW): (
        TaskTemplate(
            "Client progress update",
            "Let the client know the application is under government review.",
            "client_communication",
            TaskPriority.MEDIUM,
            14,
        ),
    ),
    _key(S.UNDER_REVIEW, S.APPROVED): (
        TaskTemplate(
            "Notify client of approval",
            "Share the decision and next steps (investment completion, passport issuance).",
            "client_communication",
            TaskPriority.URGENT,
            1,
        ),
    ),
    _key(S.UNDER_REVIEW, S.REJECTED): (
        TaskTemplate(
            "Review rejection grounds with client",
            "Explain the grounds for rejection and the options for reapplying.",
            "client_communication",
            TaskPriority.URGENT,
            2,
            SENIOR_ADVISOR,
        ),
    ),
    _key(S.REJECTED, S.STARTED): (
        TaskTemplate(
            "Remediation plan for resubmission",
            "Address the rejection grounds before restarting the application.",
            "application_preparation",
            TaskPriority.HIGH,
            7,
            SENIOR_ADVISOR,
        ),
    ),
}

UNDER_REVIEW_FOLLOW_UP = TaskTemplate(
    "Weekly status check with government authorities",
    "Contact the processing unit for a status update on the application.",
    "follow_up",
    TaskPriority.MEDIUM,
    7,
)


def templates_for(old_status: str, new_status: str) -> list[TaskTemplate]:
    """Templates to instantiate for a status change (may be empty)."""
    templates = list(TASK_TEMPLATES.get(f"{old_status}_to_{new_status}", ()))
    if new_status == S.UNDER_REVIEW.value:
        templates.append(UNDER_REVIEW_FOLLOW_UP)
    return templates


class TaskAutomationService:
    """Creates follow-up tasks for a committed status change."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        application_repo: IApplicationRepository,
        user_repo: IUserRepository,
    ) -> None:
        self._task_repo = task_repo
        self._application_repo = application_repo
        self._user_repo = user_repo

    async def _assignee(
        self, template: TaskTemplate, application: ApplicationResult
    ) -> str | None:
        if template.assignment == SENIOR_ADVISOR:
            admin_id = await self._user_repo.find_active_admin_id(application.firm_id)
            if admin_id:
                return admin_id
        return application.assigned_advisor_id

    async def trigger_status_change(
        self,
        application_id: str,
        old_status: str,
        new_status: str,
        firm_id: str,
        actor_id: str | None,
    ) -> None:
        application = await self._application_repo.get_by_id(application_id)
        if application is None or application.firm_id != firm_id:
            # Deleted between the status change and this job; nothing to do.
            logger.info(
                "Skipping task generation for missing application %s", application_id
            )
            return
        created = 0
        now = utc_now()
        for template in templates_for(old_status, new_status):
            if await self._task_repo.exists_pending(application_id, template.title):
                logger.debug("Task already exists, skipping: %s", template.title)
                continue
            await self._task_repo.create(
                TaskCreate(
                    firm_id=firm_id,
                    application_id=application_id,
                    client_id=application.client_id,
                    created_by_id=actor_id,
                    assigned_to_id=await self._assignee(template, application),
                    title=template.title,
                    description=template.description,
                    priority=template.priority.value,
                    task_type=template.task_type,
                    due_date=now + timedelta(days=template.due_days),
                )
            )
            created += 1
        logger.info(
            "Generated %d tasks for %s status change: %s -> %s",
            created,
            application_id,
            old_status,
            new_status,
        )
