"""Tests for the advisor and client workflow progress views."""

from datetime import UTC, datetime

import pytest

from app.application.dtos.workflow import (
    ApplicationDocumentRow,
    DocumentRequirementRow,
    DocumentReviewRow,
    WorkflowProgressCacheRow,
    WorkflowStageRow,
    WorkflowTemplateRow,
)
from app.application.dtos.principal import ClientPrincipal
from app.application.services.original_documents_progress import (
    OriginalDocumentsProgressService,
)
from app.application.use_cases.workflow import (
    GetOriginalDocumentsProgressUseCase,
    GetWorkflowProgressUseCase,
)
from app.domain.enums import ReviewStatus, StageStatus
from app.domain.exceptions import ResourceNotFoundException
from tests.fakes import (
    CLIENT_ID,
    OTHER_FIRM_ID,
    FakeApplicationRepository,
    FakeDocumentRepository,
    FakeOriginalDocumentRepository,
    FakeWorkflowRepository,
    advisor,
    make_application,
)

T0 = datetime(2026, 3, 1, tzinfo=UTC)

TEMPLATE = WorkflowTemplateRow(
    id="tpl-1",
    program_id="program-1",
    template_name="St. Kitts CBI",
    description=None,
    total_stages=2,
    estimated_time_months=6,
    version=2,
)


def _stage(stage_id: str, order: int, name: str) -> WorkflowStageRow:
    return WorkflowStageRow(
        id=stage_id,
        template_id="tpl-1",
        stage_order=order,
        stage_name=name,
        description=None,
        estimated_days=None,
        is_required=True,
        can_skip=False,
        auto_progress=False,
    )


def build(application=None, workflow_cache=None, original_statuses=()):
    application = application or make_application()
    workflow_repo = FakeWorkflowRepository(
        TEMPLATE,
        stages=[_stage("s1", 1, "Consultation"), _stage("s2", 2, "Documents")],
        requirements=[
            DocumentRequirementRow(id="r1", stage_id="s2", document_name="Passport", is_required=True),
            DocumentRequirementRow(id="r2", stage_id="s2", document_name="Birth", is_required=True),
        ],
        workflow_cache=workflow_cache,
    )
    document_repo = FakeDocumentRepository(
        documents=[
            ApplicationDocumentRow(
                id="d1",
                application_id="app-1",
                document_requirement_id="r1",
                filename="passport.pdf",
                file_path="app-1/passport.pdf",
                status="uploaded",
                uploaded_at=T0,
            )
        ],
        reviews=[
            DocumentReviewRow(id="v1", document_id="d1", status=ReviewStatus.APPROVED, reviewed_at=T0)
        ],
    )
    originals = OriginalDocumentsProgressService(FakeOriginalDocumentRepository(original_statuses))
    app_repo = FakeApplicationRepository(application)
    use_case = GetWorkflowProgressUseCase(app_repo, workflow_repo, document_repo, originals)
    return use_case, app_repo, workflow_repo, originals


async def test_advisor_view() -> None:
    use_case, *_ = build()
    result = await use_case.execute(application_id="app-1", actor=advisor())
    assert result.template.id == "tpl-1"
    assert result.status == "not_started"
    assert result.documents is None
    assert [s.status for s in result.progress.stages] == [
        StageStatus.IN_PROGRESS,
        StageStatus.IN_PROGRESS,
    ]
    assert result.progress.stages[1].progress == 50
    assert result.progress.current_stage_id == "s1"


async def test_cached_workflow_status_is_passed_through() -> None:
    cache = WorkflowProgressCacheRow(status="in_progress", started_at=T0, completed_at=None)
    use_case, *_ = build(workflow_cache=cache)
    result = await use_case.execute(application_id="app-1", actor=advisor())
    assert result.status == "in_progress"
    assert result.started_at == T0


async def test_advisor_other_firm_not_found() -> None:
    use_case, *_ = build(make_application(firm_id=OTHER_FIRM_ID))
    with pytest.raises(ResourceNotFoundException):
        await use_case.execute(application_id="app-1", actor=advisor())


async def test_missing_template_not_found() -> None:
    use_case, _, workflow_repo, _ = build()
    workflow_repo.template = None
    with pytest.raises(ResourceNotFoundException, match="workflow_template"):
        await use_case.execute(application_id="app-1", actor=advisor())


async def test_client_view_includes_documents() -> None:
    use_case, *_ = build()
    result = await use_case.execute_for_client(
        application_id="app-1", client=ClientPrincipal(client_id=CLIENT_ID, firm_id="firm-1")
    )
    assert [d.id for d in result.documents] == ["d1"]
    assert result.documents[0].review_status == ReviewStatus.APPROVED


async def test_client_cannot_read_someone_elses_application() -> None:
    use_case, *_ = build()
    with pytest.raises(ResourceNotFoundException):
        await use_case.execute_for_client(
            application_id="app-1", client=ClientPrincipal(client_id="client-9", firm_id="firm-1")
        )


async def test_original_documents_progress_use_case() -> None:
    _, app_repo, _, originals = build(original_statuses=["originals_verified", "requested"])
    use_case = GetOriginalDocumentsProgressUseCase(app_repo, originals)
    progress = await use_case.execute(application_id="app-1", actor=advisor())
    assert progress.completion_percentage == 50
    assert progress.status == StageStatus.IN_PROGRESS

    with pytest.raises(ResourceNotFoundException):
        await use_case.execute(application_id="missing", actor=advisor())
