"""Tests for the workflow progress calculator (pure functions over row snapshots)."""

import random
from datetime import UTC, datetime, timedelta

from app.application.dtos.workflow import (
    ApplicationDocumentRow,
    DocumentRequirementRow,
    DocumentReviewRow,
    OriginalDocumentsProgress,
    StageProgressCacheRow,
    WorkflowStageRow,
)
from app.application.services.workflow_progress_calculator import (
    compute_progress,
    is_original_documents_stage,
    latest_review_status,
)
from app.domain.enums import ReviewStatus, StageStatus

T0 = datetime(2026, 2, 1, tzinfo=UTC)


def stage(stage_id: str, order: int, name: str | None = None) -> WorkflowStageRow:
    return WorkflowStageRow(
        id=stage_id,
        template_id="tpl-1",
        stage_order=order,
        stage_name=name or f"Stage {order}",
        description=None,
        estimated_days=7,
        is_required=True,
        can_skip=False,
        auto_progress=False,
    )


def req(req_id: str, stage_id: str, required: bool = True) -> DocumentRequirementRow:
    return DocumentRequirementRow(
        id=req_id, stage_id=stage_id, document_name=req_id, is_required=required
    )


def doc(doc_id: str, req_id: str | None) -> ApplicationDocumentRow:
    return ApplicationDocumentRow(
        id=doc_id,
        application_id="app-1",
        document_requirement_id=req_id,
        filename=f"{doc_id}.pdf",
        file_path=f"app-1/{doc_id}.pdf",
        status="uploaded",
        uploaded_at=T0,
    )


def review(
    review_id: str, doc_id: str, status: ReviewStatus, minutes: int = 0
) -> DocumentReviewRow:
    return DocumentReviewRow(
        id=review_id,
        document_id=doc_id,
        status=status,
        reviewed_at=T0 + timedelta(minutes=minutes),
    )


def test_two_of_three_required_approved() -> None:
    stages = [stage("s1", 1), stage("s2", 2)]
    requirements = [req("r1", "s2"), req("r2", "s2"), req("r3", "s2")]
    documents = [doc("d1", "r1"), doc("d2", "r2")]
    reviews = [
        review("v1", "d1", ReviewStatus.APPROVED),
        review("v2", "d2", ReviewStatus.APPROVED),
    ]

    result = compute_progress(stages, requirements, documents, reviews)

    second = result.stages[1]
    assert second.progress == 67
    assert second.status == StageStatus.IN_PROGRESS
    assert second.required_documents == 3
    assert second.required_completed == 2
    assert second.document_count == 2
    assert second.completed_documents == 2


def test_first_stage_without_requirements_defaults_to_half() -> None:
    result = compute_progress([stage("s1", 1), stage("s2", 2)], [], [], [])
    assert result.stages[0].status == StageStatus.IN_PROGRESS
    assert result.stages[0].progress == 50
    assert result.stages[1].status == StageStatus.PENDING
    assert result.stages[1].progress == 0
    assert result.current_stage_id == "s1"
    assert result.overall_progress == 0


def test_stage_with_required_docs_but_no_uploads_is_pending() -> None:
    result = compute_progress(
        [stage("s1", 1), stage("s2", 2)], [req("r1", "s2")], [], []
    )
    assert result.stages[1].status == StageStatus.PENDING
    assert result.stages[1].progress == 0


def test_optional_requirements_do_not_count() -> None:
    requirements = [req("r1", "s2"), req("opt", "s2", required=False)]
    documents = [doc("d1", "r1")]
    reviews = [review("v1", "d1", ReviewStatus.APPROVED)]
    result = compute_progress([stage("s1", 1), stage("s2", 2)], requirements, documents, reviews)
    assert result.stages[1].status == StageStatus.COMPLETED
    assert result.stages[1].progress == 100


def test_latest_review_wins() -> None:
    reviews = [
        review("v1", "d1", ReviewStatus.APPROVED, minutes=0),
        review("v2", "d1", ReviewStatus.NEEDS_CLARIFICATION, minutes=5),
    ]
    assert latest_review_status(reviews) == {"d1": ReviewStatus.NEEDS_CLARIFICATION}

    result = compute_progress(
        [stage("s1", 1)], [req("r1", "s1")], [doc("d1", "r1")], reviews
    )
    assert result.stages[0].progress == 0
    assert result.stages[0].status == StageStatus.IN_PROGRESS


def test_review_tie_broken_by_id() -> None:
    reviews = [
        review("v-b", "d1", ReviewStatus.APPROVED),
        review("v-a", "d1", ReviewStatus.REJECTED),
    ]
    assert latest_review_status(reviews) == {"d1": ReviewStatus.APPROVED}
    assert latest_review_status(list(reversed(reviews))) == {"d1": ReviewStatus.APPROVED}


def test_each_approved_upload_counts_toward_required() -> None:
    stages = [stage("s1", 1), stage("s2", 2)]
    requirements = [req("r1", "s2"), req("r2", "s2"), req("r3", "s2")]
    documents = [doc("d1", "r1"), doc("d2", "r1")]
    reviews = [
        review("v1", "d1", ReviewStatus.APPROVED),
        review("v2", "d2", ReviewStatus.APPROVED),
    ]

    second = compute_progress(stages, requirements, documents, reviews).stages[1]

    assert second.required_completed == 2
    assert second.progress == 67
    assert second.status == StageStatus.IN_PROGRESS


def test_surplus_approved_uploads_cap_progress_at_100() -> None:
    documents = [doc("d1", "r1"), doc("d2", "r1"), doc("d3", "r1")]
    reviews = [
        review("v1", "d1", ReviewStatus.APPROVED),
        review("v2", "d2", ReviewStatus.APPROVED),
        review("v3", "d3", ReviewStatus.APPROVED),
    ]
    result = compute_progress(
        [stage("s1", 1)], [req("r1", "s1"), req("r2", "s1")], documents, reviews
    )
    assert result.stages[0].required_completed == 3
    assert result.stages[0].progress == 100
    assert result.stages[0].status == StageStatus.COMPLETED
    assert result.stages[0].completed_documents == 3


def test_overall_progress_and_current_stage() -> None:
    stages = [stage("s1", 1), stage("s2", 2), stage("s3", 3)]
    requirements = [req("r1", "s1"), req("r2", "s2")]
    documents = [doc("d1", "r1"), doc("d2", "r2")]
    reviews = [
        review("v1", "d1", ReviewStatus.APPROVED),
        review("v2", "d2", ReviewStatus.PENDING),
    ]
    result = compute_progress(stages, requirements, documents, reviews)
    assert [s.status for s in result.stages] == [
        StageStatus.COMPLETED,
        StageStatus.IN_PROGRESS,
        StageStatus.PENDING,
    ]
    assert result.overall_progress == 33
    assert result.current_stage_id == "s2"


def test_result_independent_of_row_order() -> None:
    stages = [stage(f"s{i}", i) for i in range(1, 5)]
    requirements = [req(f"r{i}", f"s{1 + i % 4}") for i in range(8)]
    documents = [doc(f"d{i}", f"r{i}") for i in range(8)]
    reviews = [
        review(f"v{i}", f"d{i}", ReviewStatus.APPROVED if i % 3 else ReviewStatus.REJECTED, i)
        for i in range(8)
    ]
    expected = compute_progress(stages, requirements, documents, reviews)

    rng = random.Random(7)
    for _ in range(5):
        shuffled = [list(x) for x in (stages, requirements, documents, reviews)]
        for rows in shuffled:
            rng.shuffle(rows)
        assert compute_progress(*shuffled) == expected


def test_cache_supplies_timestamps_only() -> None:
    cache = [StageProgressCacheRow(stage_id="s1", started_at=T0, completed_at=T0)]
    result = compute_progress([stage("s1", 1)], [req("r1", "s1")], [], [], stage_cache=cache)
    first = result.stages[0]
    assert first.started_at == T0
    assert first.completed_at == T0
    # a stale "completed" timestamp does not make the stage complete
    assert first.status == StageStatus.IN_PROGRESS
    assert first.progress == 0


def test_original_documents_stage_uses_sub_progress() -> None:
    stages = [stage("s1", 1), stage("s4", 4, "Original Documents Collection")]
    originals = OriginalDocumentsProgress(
        total_requested=4,
        shipped=3,
        received=2,
        verified=1,
        completion_percentage=25,
        status=StageStatus.IN_PROGRESS,
        can_complete_stage=False,
    )
    result = compute_progress(stages, [], [], [], original_documents=originals)
    originals_stage = result.stages[1]
    assert originals_stage.progress == 25
    assert originals_stage.status == StageStatus.IN_PROGRESS
    assert originals_stage.required_documents == 4
    assert originals_stage.required_completed == 1


def test_original_documents_stage_detection() -> None:
    assert is_original_documents_stage(stage("a", 4, "original documents collection"))
    assert is_original_documents_stage(stage("b", 4, "Originals Courier"))
    assert not is_original_documents_stage(stage("c", 2, "Originals Courier"))
    assert not is_original_documents_stage(stage("d", 4, "Due Diligence"))


def test_empty_template() -> None:
    result = compute_progress([], [], [], [])
    assert result.overall_progress == 0
    assert result.current_stage_id is None
    assert result.stages == []
