"""Derives per-stage and overall workflow progress from document review state.

Pure functions over row snapshots: no session, no cache, no clock. Two calls
with the same rows return equal results regardless of the order the rows
were fetched in.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping

from app.application.dtos.workflow import (
    ApplicationDocumentRow,
    DocumentRequirementRow,
    DocumentReviewRow,
    OriginalDocumentsProgress,
    StageProgressCacheRow,
    StageProgressResult,
    WorkflowProgressResult,
    WorkflowStageRow,
)
from app.domain.enums import ReviewStatus, StageStatus
from app.shared.utils.numbers import percentage

ORIGINAL_DOCUMENTS_STAGE_NAME = "Original Documents Collection"
ORIGINAL_DOCUMENTS_STAGE_ORDER = 4
FIRST_STAGE_DEFAULT_PROGRESS = 50


def is_original_documents_stage(stage: WorkflowStageRow) -> bool:
    """Matched by name; templates that renamed the stage keep it at order 4."""
    name = stage.stage_name.strip().lower()
    if name == ORIGINAL_DOCUMENTS_STAGE_NAME.lower():
        return True
    return stage.stage_order == ORIGINAL_DOCUMENTS_STAGE_ORDER and "original" in name


def latest_review_status(
    reviews: Iterable[DocumentReviewRow],
) -> dict[str, ReviewStatus]:
    """Current status per document: the review with the greatest (reviewed_at, id) wins."""
    latest: dict[str, DocumentReviewRow] = {}
    for review in reviews:
        current = latest.get(review.document_id)
        if current is None or (review.reviewed_at, review.id) > (
            current.reviewed_at,
            current.id,
        ):
            latest[review.document_id] = review
    return {doc_id: review.status for doc_id, review in latest.items()}


def _stage_result(
    stage: WorkflowStageRow,
    status: StageStatus,
    progress: int,
    cache: StageProgressCacheRow | None,
    *,
    document_count: int,
    completed_documents: int,
    required_documents: int,
    required_completed: int,
) -> StageProgressResult:
    return StageProgressResult(
        id=stage.id,
        stage_order=stage.stage_order,
        stage_name=stage.stage_name,
        description=stage.description,
        estimated_days=stage.estimated_days,
        is_required=stage.is_required,
        can_skip=stage.can_skip,
        auto_progress=stage.auto_progress,
        status=status,
        progress=progress,
        started_at=cache.started_at if cache else None,
        completed_at=cache.completed_at if cache else None,
        document_count=document_count,
        completed_documents=completed_documents,
        required_documents=required_documents,
        required_completed=required_completed,
    )


def compute_stage(
    stage: WorkflowStageRow,
    requirements: list[DocumentRequirementRow],
    documents_by_requirement: Mapping[str, list[ApplicationDocumentRow]],
    review_status: Mapping[str, ReviewStatus],
    cache: StageProgressCacheRow | None = None,
    original_documents: OriginalDocumentsProgress | None = None,
) -> StageProgressResult:
    """Progress of one stage.

    Every uploaded document on a required requirement whose latest review is
    approved counts toward progress. Several approved uploads on one requirement
    all count, so the ratio is capped at 100.
    """
    stage_docs = [d for r in requirements for d in documents_by_requirement.get(r.id, [])]
    approved_docs = [
        d for d in stage_docs if review_status.get(d.id) == ReviewStatus.APPROVED
    ]

    if original_documents is not None and is_original_documents_stage(stage):
        return _stage_result(
            stage,
            original_documents.status,
            original_documents.completion_percentage,
            cache,
            document_count=len(stage_docs),
            completed_documents=len(approved_docs),
            required_documents=original_documents.total_requested,
            required_completed=original_documents.verified,
        )

    required = [r for r in requirements if r.is_required]
    approved_required = sum(
        1
        for r in required
        for d in documents_by_requirement.get(r.id, [])
        if review_status.get(d.id) == ReviewStatus.APPROVED
    )

    if not required:
        if stage.stage_order == 1:
            status, progress = StageStatus.IN_PROGRESS, FIRST_STAGE_DEFAULT_PROGRESS
        else:
            status, progress = StageStatus.PENDING, 0
    else:
        progress = percentage(min(approved_required, len(required)), len(required))
        if progress == 100:
            status = StageStatus.COMPLETED
        elif stage_docs or stage.stage_order == 1:
            status = StageStatus.IN_PROGRESS
        else:
            status = StageStatus.PENDING

    return _stage_result(
        stage,
        status,
        progress,
        cache,
        document_count=len(stage_docs),
        completed_documents=len(approved_docs),
        required_documents=len(required),
        required_completed=approved_required,
    )


def compute_progress(
    stages: Iterable[WorkflowStageRow],
    requirements: Iterable[DocumentRequirementRow],
    documents: Iterable[ApplicationDocumentRow],
    reviews: Iterable[DocumentReviewRow],
    stage_cache: Iterable[StageProgressCacheRow] = (),
    original_documents: OriginalDocumentsProgress | None = None,
) -> WorkflowProgressResult:
    """Overall and per-stage progress for one application.

    overall_progress is the rounded share of completed stages; the current
    stage is the first one in progress, else the first stage.
    """
    ordered_stages = sorted(stages, key=lambda s: (s.stage_order, s.id))

    requirements_by_stage: dict[str, list[DocumentRequirementRow]] = defaultdict(list)
    for req in sorted(requirements, key=lambda r: r.id):
        requirements_by_stage[req.stage_id].append(req)

    documents_by_requirement: dict[str, list[ApplicationDocumentRow]] = defaultdict(list)
    for doc in sorted(documents, key=lambda d: d.id):
        if doc.document_requirement_id is not None:
            documents_by_requirement[doc.document_requirement_id].append(doc)

    review_status = latest_review_status(reviews)
    cache_by_stage = {c.stage_id: c for c in stage_cache}

    results = [
        compute_stage(
            stage,
            requirements_by_stage.get(stage.id, []),
            documents_by_requirement,
            review_status,
            cache_by_stage.get(stage.id),
            original_documents,
        )
        for stage in ordered_stages
    ]

    completed = sum(1 for r in results if r.status == StageStatus.COMPLETED)
    current = next(
        (r for r in results if r.status == StageStatus.IN_PROGRESS),
        results[0] if results else None,
    )
    return WorkflowProgressResult(
        overall_progress=percentage(completed, len(results)),
        current_stage_id=current.id if current else None,
        stages=results,
    )
