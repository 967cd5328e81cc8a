"""Tests for the status-keyed lifecycle policy (delete, transition, archive gates)."""

import pytest

from app.application.services import lifecycle_policy
from app.application.services.lifecycle_policy import LIFECYCLE_POLICY
from app.domain.enums import ApplicationStatus as S
from app.domain.enums import UserRole
from app.domain.exceptions import ForbiddenException
from tests.fakes import OUTSIDER_ID, admin, advisor, make_application

ASSIGNED = advisor()
OUTSIDER = advisor(user_id=OUTSIDER_ID)
ADMIN = admin()


def test_policy_covers_every_status() -> None:
    assert set(LIFECYCLE_POLICY) == set(S)


@pytest.mark.parametrize("status", [S.DRAFT, S.STARTED, S.REJECTED])
def test_assigned_advisor_may_delete_early_or_rejected(status: S) -> None:
    application = make_application(status=status)
    lifecycle_policy.authorize_delete(ASSIGNED, application)
    lifecycle_policy.authorize_delete(ADMIN, application)
    with pytest.raises(ForbiddenException):
        lifecycle_policy.authorize_delete(OUTSIDER, application)


@pytest.mark.parametrize("status", [S.SUBMITTED, S.UNDER_REVIEW])
def test_only_admin_may_delete_submitted_or_under_review(status: S) -> None:
    application = make_application(status=status)
    lifecycle_policy.authorize_delete(ADMIN, application)
    with pytest.raises(ForbiddenException, match="Only administrators"):
        lifecycle_policy.authorize_delete(ASSIGNED, application)


def test_approved_cannot_be_deleted_even_by_admin() -> None:
    application = make_application(status=S.APPROVED)
    with pytest.raises(ForbiddenException, match="Use archive functionality instead") as exc_info:
        lifecycle_policy.authorize_delete(ADMIN, application)
    assert exc_info.value.error_code == "FORBIDDEN"
    assert exc_info.value.details == {"action": "delete", "status": "approved"}


@pytest.mark.parametrize(
    "status", [S.READY_FOR_SUBMISSION, S.SUBMITTED_TO_GOVERNMENT, S.ARCHIVED]
)
def test_statuses_that_cannot_be_deleted(status: S) -> None:
    with pytest.raises(ForbiddenException, match="cannot be deleted"):
        lifecycle_policy.authorize_delete(ADMIN, make_application(status=status))


def test_assigned_advisor_may_start_draft() -> None:
    lifecycle_policy.authorize_transition(ASSIGNED, make_application(), S.STARTED)


def test_outsider_may_not_change_status() -> None:
    with pytest.raises(ForbiddenException, match="assigned advisor or admin"):
        lifecycle_policy.authorize_transition(OUTSIDER, make_application(), S.STARTED)


def test_unassigned_application_is_admin_only() -> None:
    application = make_application(assigned_advisor_id=None)
    lifecycle_policy.authorize_transition(ADMIN, application, S.STARTED)
    with pytest.raises(ForbiddenException):
        lifecycle_policy.authorize_transition(ASSIGNED, application, S.STARTED)


def test_entering_approved_is_admin_only() -> None:
    application = make_application(status=S.UNDER_REVIEW)
    lifecycle_policy.authorize_transition(ADMIN, application, S.APPROVED)
    with pytest.raises(ForbiddenException, match="Only administrators") as exc_info:
        lifecycle_policy.authorize_transition(ASSIGNED, application, S.APPROVED)
    assert exc_info.value.details["action"] == "update_status"


def test_leaving_rejected_is_admin_only() -> None:
    application = make_application(status=S.REJECTED)
    with pytest.raises(ForbiddenException, match="'rejected'"):
        lifecycle_policy.authorize_transition(ASSIGNED, application, S.STARTED)


def test_stricter_gate_reported_first() -> None:
    # outsider fails both gates; the admin-only reason wins
    application = make_application(status=S.UNDER_REVIEW)
    with pytest.raises(ForbiddenException, match="Only administrators"):
        lifecycle_policy.authorize_transition(OUTSIDER, application, S.APPROVED)


def test_stricter_leave_gate_reported_first() -> None:
    application = make_application(status=S.SUBMITTED_TO_GOVERNMENT)
    with pytest.raises(ForbiddenException, match="'submitted_to_government'"):
        lifecycle_policy.authorize_transition(OUTSIDER, application, S.READY_FOR_SUBMISSION)
    with pytest.raises(ForbiddenException, match="Only administrators"):
        lifecycle_policy.authorize_transition(ASSIGNED, application, S.READY_FOR_SUBMISSION)
    lifecycle_policy.authorize_transition(ADMIN, application, S.READY_FOR_SUBMISSION)


def test_archive_gate() -> None:
    application = make_application(status=S.APPROVED)
    lifecycle_policy.authorize_archive(ASSIGNED, application)
    with pytest.raises(ForbiddenException, match="archive"):
        lifecycle_policy.authorize_archive(OUTSIDER, application)


def test_can_edit() -> None:
    application = make_application()
    assert lifecycle_policy.can_edit(ASSIGNED, application)
    assert lifecycle_policy.can_edit(ADMIN, application)
    assert not lifecycle_policy.can_edit(OUTSIDER, application)
    assert not lifecycle_policy.can_edit(advisor(user_id=OUTSIDER_ID, role=UserRole.JUNIOR), application)
