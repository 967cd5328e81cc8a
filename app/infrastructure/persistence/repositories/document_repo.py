"""Application document repository: uploads and their reviews. Implements IDocumentRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.workflow import ApplicationDocumentRow, DocumentReviewRow
from app.domain.enums import ReviewStatus
from app.infrastructure.persistence.models.document import (
    ApplicationDocument,
    DocumentReview,
)


class DocumentRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_documents(self, application_id: str) -> list[ApplicationDocumentRow]:
        result = await self.db.execute(
            select(ApplicationDocument)
            .where(ApplicationDocument.application_id == application_id)
            .order_by(ApplicationDocument.uploaded_at, ApplicationDocument.id)
        )
        return [
            ApplicationDocumentRow(
                id=d.id,
                application_id=d.application_id,
                document_requirement_id=d.document_requirement_id,
                filename=d.filename,
                file_path=d.file_path or "",
                status=d.status,
                uploaded_at=d.uploaded_at,
            )
            for d in result.scalars().all()
        ]

    async def list_reviews(self, document_ids: list[str]) -> list[DocumentReviewRow]:
        if not document_ids:
            return []
        result = await self.db.execute(
            select(DocumentReview).where(DocumentReview.document_id.in_(document_ids))
        )
        return [
            DocumentReviewRow(
                id=r.id,
                document_id=r.document_id,
                status=ReviewStatus(r.status),
                reviewed_at=r.reviewed_at,
            )
            for r in result.scalars().all()
        ]
