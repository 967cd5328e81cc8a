"""Original document repository. Implements IOriginalDocumentRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.original_document import OriginalDocument


class OriginalDocumentRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_statuses(self, application_id: str) -> list[str]:
        result = await self.db.execute(
            select(OriginalDocument.status).where(
                OriginalDocument.application_id == application_id
            )
        )
        return list(result.scalars().all())
