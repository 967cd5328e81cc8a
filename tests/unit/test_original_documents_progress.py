"""Tests for the original (courier-shipped) documents progress summary."""

from app.application.services.original_documents_progress import (
    OriginalDocumentsProgressService,
    summarize_original_documents,
)
from app.domain.enums import StageStatus
from tests.fakes import FakeOriginalDocumentRepository


def test_no_originals_requested() -> None:
    progress = summarize_original_documents([])
    assert progress.total_requested == 0
    assert progress.completion_percentage == 0
    assert progress.status == StageStatus.PENDING
    assert progress.can_complete_stage is True


def test_counts_are_cumulative_along_courier_steps() -> None:
    progress = summarize_original_documents(
        ["requested", "originals_shipped", "originals_received", "originals_verified"]
    )
    assert progress.total_requested == 4
    assert progress.shipped == 3
    assert progress.received == 2
    assert progress.verified == 1
    assert progress.completion_percentage == 25
    assert progress.status == StageStatus.IN_PROGRESS
    assert progress.can_complete_stage is False


def test_all_requested_is_pending() -> None:
    progress = summarize_original_documents(["requested", "requested"])
    assert progress.status == StageStatus.PENDING
    assert progress.completion_percentage == 0


def test_all_verified_completes_stage() -> None:
    progress = summarize_original_documents(["originals_verified"] * 3)
    assert progress.status == StageStatus.COMPLETED
    assert progress.completion_percentage == 100
    assert progress.can_complete_stage is True


def test_percentage_rounds_half_up() -> None:
    statuses = ["originals_verified"] + ["requested"] * 7
    assert summarize_original_documents(statuses).completion_percentage == 13


async def test_service_reads_statuses_from_repository() -> None:
    service = OriginalDocumentsProgressService(
        FakeOriginalDocumentRepository(["originals_verified", "originals_shipped"])
    )
    progress = await service.get_progress("app-1")
    assert progress.verified == 1
    assert progress.shipped == 2
    assert progress.completion_percentage == 50
