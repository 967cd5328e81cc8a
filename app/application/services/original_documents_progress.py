"""Progress of the physical originals (courier-shipped) workflow stage."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from app.application.dtos.workflow import OriginalDocumentsProgress
from app.domain.enums import OriginalDocumentStatus as O
from app.domain.enums import StageStatus
from app.shared.utils.numbers import percentage

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IOriginalDocumentRepository

_SHIPPED = frozenset(
    {O.ORIGINALS_SHIPPED.value, O.ORIGINALS_RECEIVED.value, O.ORIGINALS_VERIFIED.value}
)
_RECEIVED = frozenset({O.ORIGINALS_RECEIVED.value, O.ORIGINALS_VERIFIED.value})


def summarize_original_documents(statuses: Iterable[str]) -> OriginalDocumentsProgress:
    """Completion is measured by verification, the last courier step.

    With no originals requested the stage has nothing to wait for, so it may
    be completed but still reports pending/0.
    """
    items = [s.value if isinstance(s, O) else str(s) for s in statuses]
    total = len(items)
    if total == 0:
        return OriginalDocumentsProgress(
            total_requested=0,
            shipped=0,
            received=0,
            verified=0,
            completion_percentage=0,
            status=StageStatus.PENDING,
            can_complete_stage=True,
        )
    shipped = sum(1 for s in items if s in _SHIPPED)
    received = sum(1 for s in items if s in _RECEIVED)
    verified = sum(1 for s in items if s == O.ORIGINALS_VERIFIED)
    if verified == total:
        status = StageStatus.COMPLETED
    elif shipped > 0 or received > 0:
        status = StageStatus.IN_PROGRESS
    else:
        status = StageStatus.PENDING
    return OriginalDocumentsProgress(
        total_requested=total,
        shipped=shipped,
        received=received,
        verified=verified,
        completion_percentage=percentage(verified, total),
        status=status,
        can_complete_stage=status == StageStatus.COMPLETED,
    )


class OriginalDocumentsProgressService:
    """Implements IOriginalDocumentsProgressService over the original_document table."""

    def __init__(self, original_repo: IOriginalDocumentRepository) -> None:
        self._original_repo = original_repo

    async def get_progress(self, application_id: str) -> OriginalDocumentsProgress:
        statuses = await self._original_repo.list_statuses(application_id)
        return summarize_original_documents(statuses)
