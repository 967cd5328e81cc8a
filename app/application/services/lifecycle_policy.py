"""Who may act on an application, keyed by its status.

One declarative table drives three gates: deleting, moving a status out of
or into a given value, and archiving. The status-update use case and the
deletion orchestrator both consult LIFECYCLE_POLICY, so a rule change is a
one-line edit here.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from app.application.dtos.application import ApplicationResult
from app.application.dtos.principal import AdvisorPrincipal
from app.domain.enums import ApplicationStatus as S
from app.domain.exceptions import ForbiddenException


@dataclass(frozen=True)
class ActorRule:
    """Named predicate over (actor, application)."""

    name: str
    predicate: Callable[[AdvisorPrincipal, ApplicationResult], bool]

    def allows(self, actor: AdvisorPrincipal, application: ApplicationResult) -> bool:
        return self.predicate(actor, application)


ADMIN_ONLY = ActorRule("admin_only", lambda actor, app: actor.is_admin)
ADMIN_OR_ASSIGNED = ActorRule(
    "admin_or_assigned",
    lambda actor, app: actor.is_admin
    or (app.assigned_advisor_id is not None and actor.id == app.assigned_advisor_id),
)
NOBODY = ActorRule("nobody", lambda actor, app: False)

# Rules ranked from most to least permissive.
_STRICTNESS = {ADMIN_OR_ASSIGNED.name: 0, ADMIN_ONLY.name: 1, NOBODY.name: 2}


@dataclass(frozen=True)
class Gate:
    rule: ActorRule
    reason: str

    def check(
        self, actor: AdvisorPrincipal, application: ApplicationResult, action: str
    ) -> None:
        if not self.rule.allows(actor, application):
            raise ForbiddenException(
                self.reason, action=action, status=application.status.value
            )


@dataclass(frozen=True)
class StatusPolicy:
    """Gates for one status: deleting while in it, leaving it, entering it."""

    delete: Gate
    leave: Gate
    enter: Gate


_NOT_DELETABLE = Gate(NOBODY, "Application cannot be deleted in its current status.")
_ADVISOR_TRANSITION = Gate(
    ADMIN_OR_ASSIGNED,
    "Only the assigned advisor or admin can change the status of this application.",
)


def _admin_transition(status: S) -> Gate:
    return Gate(
        ADMIN_ONLY,
        f"Only administrators can move an application into or out of '{status.value}'.",
    )


def _terminal(status: S) -> Gate:
    return Gate(NOBODY, f"Applications in '{status.value}' cannot change status.")


LIFECYCLE_POLICY: Mapping[S, StatusPolicy] = MappingProxyType({
    S.DRAFT: StatusPolicy(
        delete=Gate(
            ADMIN_OR_ASSIGNED,
            "Only the assigned advisor or admin can delete draft or started applications.",
        ),
        leave=_ADVISOR_TRANSITION,
        enter=_ADVISOR_TRANSITION,
    ),
    S.STARTED: StatusPolicy(
        delete=Gate(
            ADMIN_OR_ASSIGNED,
            "Only the assigned advisor or admin can delete draft or started applications.",
        ),
        leave=_ADVISOR_TRANSITION,
        enter=_ADVISOR_TRANSITION,
    ),
    S.SUBMITTED: StatusPolicy(
        delete=Gate(
            ADMIN_ONLY,
            "Only administrators can delete submitted or under-review applications.",
        ),
        leave=_ADVISOR_TRANSITION,
        enter=_ADVISOR_TRANSITION,
    ),
    S.READY_FOR_SUBMISSION: StatusPolicy(
        delete=_NOT_DELETABLE,
        leave=_ADVISOR_TRANSITION,
        enter=_ADVISOR_TRANSITION,
    ),
    S.SUBMITTED_TO_GOVERNMENT: StatusPolicy(
        delete=_NOT_DELETABLE,
        leave=_admin_transition(S.SUBMITTED_TO_GOVERNMENT),
        enter=_admin_transition(S.SUBMITTED_TO_GOVERNMENT),
    ),
    S.UNDER_REVIEW: StatusPolicy(
        delete=Gate(
            ADMIN_ONLY,
            "Only administrators can delete submitted or under-review applications.",
        ),
        leave=_ADVISOR_TRANSITION,
        enter=_ADVISOR_TRANSITION,
    ),
    S.APPROVED: StatusPolicy(
        delete=Gate(
            NOBODY,
            "Approved applications cannot be deleted. Use archive functionality instead.",
        ),
        leave=_terminal(S.APPROVED),
        enter=_admin_transition(S.APPROVED),
    ),
    S.REJECTED: StatusPolicy(
        delete=Gate(
            ADMIN_OR_ASSIGNED,
            "Only the assigned advisor or admin can delete rejected applications.",
        ),
        leave=_admin_transition(S.REJECTED),
        enter=_admin_transition(S.REJECTED),
    ),
    S.ARCHIVED: StatusPolicy(
        delete=_NOT_DELETABLE,
        leave=_terminal(S.ARCHIVED),
        enter=_terminal(S.ARCHIVED),
    ),
})

ARCHIVE_GATE = Gate(
    ADMIN_OR_ASSIGNED,
    "Only the assigned advisor or admin can archive or unarchive applications.",
)


def _policy(status: S) -> StatusPolicy | None:
    return LIFECYCLE_POLICY.get(status)


def authorize_delete(actor: AdvisorPrincipal, application: ApplicationResult) -> None:
    """Raise ForbiddenException unless the actor may delete the application in its current status."""
    policy = _policy(application.status)
    gate = policy.delete if policy else _NOT_DELETABLE
    gate.check(actor, application, "delete")


def authorize_transition(
    actor: AdvisorPrincipal, application: ApplicationResult, target: S
) -> None:
    """Raise ForbiddenException unless the actor may move the application to target.

    The gate for leaving the current status and the gate for entering target
    must both pass. Checking the stricter one first only decides which reason
    is reported when both fail.
    """
    leave = LIFECYCLE_POLICY[S(application.status)].leave
    enter = LIFECYCLE_POLICY[S(target)].enter
    first, second = leave, enter
    if _STRICTNESS[enter.rule.name] > _STRICTNESS[leave.rule.name]:
        first, second = enter, leave
    first.check(actor, application, "update_status")
    second.check(actor, application, "update_status")


def authorize_archive(actor: AdvisorPrincipal, application: ApplicationResult) -> None:
    ARCHIVE_GATE.check(actor, application, "archive")


def can_edit(actor: AdvisorPrincipal, application: ApplicationResult) -> bool:
    """Whether the actor may act on the application at all (admin or assigned advisor)."""
    return ADMIN_OR_ASSIGNED.allows(actor, application)
