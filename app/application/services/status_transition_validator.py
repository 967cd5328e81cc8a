"""Status transition state machine for applications.

Transition legality is purely data-driven. Who may perform a transition is
decided separately by app.application.services.lifecycle_policy; both checks
must pass before a status is written.
"""

from __future__ import annotations

from types import MappingProxyType

from app.domain.enums import ApplicationStatus as S
from app.domain.exceptions import InvalidTransitionException

# Order within each tuple is the order exposed to clients as validTransitions.
VALID_TRANSITIONS: MappingProxyType[S, tuple[S, ...]] = MappingProxyType({
    S.DRAFT: (S.STARTED,),
    S.STARTED: (S.SUBMITTED, S.DRAFT),
    S.SUBMITTED: (S.READY_FOR_SUBMISSION, S.STARTED),
    S.READY_FOR_SUBMISSION: (S.SUBMITTED_TO_GOVERNMENT, S.SUBMITTED),
    S.SUBMITTED_TO_GOVERNMENT: (S.UNDER_REVIEW, S.READY_FOR_SUBMISSION),
    S.UNDER_REVIEW: (S.APPROVED, S.REJECTED, S.SUBMITTED_TO_GOVERNMENT),
    S.APPROVED: (),
    S.REJECTED: (S.STARTED,),
    S.ARCHIVED: (),
})

TERMINAL_STATUSES = frozenset(s for s, targets in VALID_TRANSITIONS.items() if not targets)


def valid_transitions(current: S | str) -> list[S]:
    """Statuses reachable in one step from current (empty for terminal or unknown statuses)."""
    try:
        status = S(current)
    except ValueError:
        return []
    return list(VALID_TRANSITIONS.get(status, ()))


def is_valid_transition(current: S | str, target: S | str) -> bool:
    try:
        return S(target) in valid_transitions(current)
    except ValueError:
        return False


def _value(status: S | str) -> str:
    return status.value if isinstance(status, S) else str(status)


def validate_transition(current: S | str, target: S | str) -> None:
    """Raise InvalidTransitionException (with the legal next states) unless current -> target is allowed."""
    if not is_valid_transition(current, target):
        raise InvalidTransitionException(
            current_status=_value(current),
            target_status=_value(target),
            valid_transitions=[s.value for s in valid_transitions(current)],
        )
