"""Tests for UpdateApplicationStatusUseCase and GetApplicationStatusUseCase."""

import itertools
from datetime import UTC, datetime

import pytest

from app.application.services.activity_logger import ActivityLogger
from app.application.services.status_transition_validator import is_valid_transition
from app.application.use_cases.applications import (
    GetApplicationStatusUseCase,
    UpdateApplicationStatusUseCase,
)
from app.domain.enums import ApplicationStatus as S
from app.domain.exceptions import (
    AccessDeniedException,
    DependencyFailureException,
    ForbiddenException,
    InvalidTransitionException,
    ResourceNotFoundException,
)
from app.shared.context import clear_request_context, set_client_info, set_correlation_id
from tests.fakes import (
    OTHER_FIRM_ID,
    OUTSIDER_ID,
    FakeActivityLogRepository,
    FakeApplicationRepository,
    FakeAutomation,
    FakeDispatcher,
    admin,
    advisor,
    make_application,
)


def build(*applications, automation=None, dispatcher=None):
    app_repo = FakeApplicationRepository(*applications)
    activity_repo = FakeActivityLogRepository()
    dispatcher = dispatcher or FakeDispatcher()
    automation = automation or FakeAutomation()
    use_case = UpdateApplicationStatusUseCase(
        application_repo=app_repo,
        activity_logger=ActivityLogger(activity_repo),
        dispatcher=dispatcher,
        automation=automation,
    )
    return use_case, app_repo, activity_repo, dispatcher, automation


async def test_valid_transition_persists_and_audits() -> None:
    use_case, app_repo, activity_repo, dispatcher, automation = build(make_application())

    set_correlation_id("cid-123")
    set_client_info("203.0.113.9", "pytest-agent")
    try:
        change = await use_case.execute(
            application_id="app-1",
            target_status=S.STARTED,
            actor=advisor(),
            notes="Kick-off call done",
        )
    finally:
        clear_request_context()

    assert change.from_status == S.DRAFT
    assert change.to_status == S.STARTED
    assert change.application.status == S.STARTED
    assert change.valid_transitions == [S.SUBMITTED, S.DRAFT]
    assert change.workflow_triggered is True
    assert change.changed_by_name == "Alex Advisor"

    assert len(activity_repo.created) == 1
    entry = activity_repo.created[0]
    assert entry.action == "status_changed"
    assert entry.application_id == "app-1"
    assert entry.old_values == {"status": "draft"}
    assert entry.new_values["status"] == "started"
    assert entry.new_values["notes"] == "Kick-off call done"
    assert entry.correlation_id == "cid-123"
    assert entry.ip_address == "203.0.113.9"
    assert entry.user_agent == "pytest-agent"

    assert change.application.internal_notes.endswith("Kick-off call done")
    assert change.application.internal_notes.startswith("[")

    assert [name for name, _, _ in dispatcher.jobs] == ["workflow_automation.status_change"]
    await dispatcher.run_all()
    assert automation.calls == [("app-1", "draft", "started", "firm-1", "user-advisor")]


async def test_notes_are_appended_to_existing_internal_notes() -> None:
    use_case, *_ = build(make_application(internal_notes="[2026-01-01T00:00:00Z] first"))
    change = await use_case.execute(
        application_id="app-1", target_status=S.STARTED, actor=advisor(), notes="second"
    )
    lines = change.application.internal_notes.splitlines()
    assert lines[0] == "[2026-01-01T00:00:00Z] first"
    assert lines[1].endswith("] second")


async def test_invalid_transition_writes_nothing() -> None:
    use_case, app_repo, activity_repo, dispatcher, _ = build(make_application())
    with pytest.raises(InvalidTransitionException) as exc_info:
        await use_case.execute(application_id="app-1", target_status=S.APPROVED, actor=admin())
    assert exc_info.value.details["validTransitions"] == ["started"]
    assert app_repo.updates == []
    assert activity_repo.created == []
    assert dispatcher.jobs == []
    assert app_repo.rows["app-1"].status == S.DRAFT


ILLEGAL_PAIRS = [
    (current, target)
    for current, target in itertools.product(S, S)
    if not is_valid_transition(current, target)
]


@pytest.mark.parametrize(("current", "target"), ILLEGAL_PAIRS)
async def test_every_illegal_transition_is_rejected_without_writes(
    current: S, target: S
) -> None:
    use_case, app_repo, activity_repo, dispatcher, _ = build(make_application(status=current))
    with pytest.raises(InvalidTransitionException) as exc_info:
        await use_case.execute(application_id="app-1", target_status=target, actor=admin())
    assert exc_info.value.details["currentStatus"] == current.value
    assert app_repo.updates == []
    assert activity_repo.created == []
    assert dispatcher.jobs == []
    assert app_repo.rows["app-1"].status == current


async def test_forbidden_actor_writes_nothing() -> None:
    use_case, app_repo, activity_repo, _, _ = build(make_application())
    with pytest.raises(ForbiddenException):
        await use_case.execute(
            application_id="app-1", target_status=S.STARTED, actor=advisor(user_id=OUTSIDER_ID)
        )
    assert app_repo.updates == []
    assert activity_repo.created == []


async def test_missing_application_is_not_found() -> None:
    use_case, app_repo, _, _, _ = build()
    with pytest.raises(ResourceNotFoundException):
        await use_case.execute(application_id="app-1", target_status=S.STARTED, actor=admin())
    assert app_repo.updates == []


async def test_other_firm_is_access_denied() -> None:
    use_case, app_repo, activity_repo, _, _ = build(make_application(firm_id=OTHER_FIRM_ID))
    with pytest.raises(AccessDeniedException) as exc_info:
        await use_case.execute(application_id="app-1", target_status=S.STARTED, actor=admin())
    assert exc_info.value.message == "Access denied"
    assert exc_info.value.error_code == "FORBIDDEN"
    assert app_repo.updates == []
    assert activity_repo.created == []


async def test_submitted_to_government_stamps_submitted_at_once() -> None:
    use_case, app_repo, *_ = build(make_application(status=S.READY_FOR_SUBMISSION))
    first = await use_case.execute(
        application_id="app-1", target_status=S.SUBMITTED_TO_GOVERNMENT, actor=admin()
    )
    stamped = first.application.submitted_at
    assert stamped is not None

    await use_case.execute(
        application_id="app-1", target_status=S.READY_FOR_SUBMISSION, actor=admin()
    )
    again = await use_case.execute(
        application_id="app-1", target_status=S.SUBMITTED_TO_GOVERNMENT, actor=admin()
    )
    assert again.application.submitted_at == stamped


async def test_decision_stamps_decided_at() -> None:
    use_case, *_ = build(make_application(status=S.UNDER_REVIEW))
    change = await use_case.execute(
        application_id="app-1", target_status=S.APPROVED, actor=admin()
    )
    assert change.application.decided_at is not None
    assert change.valid_transitions == []


async def test_existing_decided_at_is_kept() -> None:
    decided = datetime(2025, 12, 1, tzinfo=UTC)
    use_case, *_ = build(make_application(status=S.UNDER_REVIEW, decided_at=decided))
    change = await use_case.execute(
        application_id="app-1", target_status=S.REJECTED, actor=admin()
    )
    assert change.application.decided_at == decided


async def test_trigger_disabled() -> None:
    use_case, _, _, dispatcher, _ = build(make_application())
    change = await use_case.execute(
        application_id="app-1", target_status=S.STARTED, actor=advisor(), trigger_workflow=False
    )
    assert change.workflow_triggered is False
    assert dispatcher.jobs == []


async def test_trigger_not_queued_keeps_status_change() -> None:
    use_case, app_repo, _, _, _ = build(
        make_application(), dispatcher=FakeDispatcher(accept=False)
    )
    change = await use_case.execute(
        application_id="app-1", target_status=S.STARTED, actor=advisor()
    )
    assert change.workflow_triggered is False
    assert app_repo.rows["app-1"].status == S.STARTED


async def test_trigger_failure_does_not_touch_committed_status() -> None:
    automation = FakeAutomation(error=DependencyFailureException("automation", "boom"))
    use_case, app_repo, activity_repo, dispatcher, _ = build(
        make_application(), automation=automation
    )
    change = await use_case.execute(
        application_id="app-1", target_status=S.STARTED, actor=advisor()
    )
    assert change.application.status == S.STARTED
    with pytest.raises(DependencyFailureException):
        await dispatcher.run_all()
    assert app_repo.rows["app-1"].status == S.STARTED
    assert len(activity_repo.created) == 1


async def test_status_view_lists_history_newest_first() -> None:
    use_case, app_repo, activity_repo, _, _ = build(make_application())
    await use_case.execute(application_id="app-1", target_status=S.STARTED, actor=advisor())
    await use_case.execute(
        application_id="app-1", target_status=S.SUBMITTED, actor=advisor(), notes="ready"
    )

    view = GetApplicationStatusUseCase(app_repo, activity_repo)
    info = await view.execute(application_id="app-1", actor=advisor())
    assert info.current_status == S.SUBMITTED
    assert info.valid_transitions == [S.READY_FOR_SUBMISSION, S.STARTED]
    assert info.can_edit is True
    assert [(h.from_status, h.to_status) for h in info.status_history] == [
        ("started", "submitted"),
        ("draft", "started"),
    ]
    assert info.status_history[0].notes == "ready"

    outsider_view = await view.execute(application_id="app-1", actor=advisor(user_id=OUTSIDER_ID))
    assert outsider_view.can_edit is False
