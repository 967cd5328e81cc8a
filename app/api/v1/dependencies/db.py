"""Repository dependencies bound to the request session (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    ActivityLogRepository,
    ApplicationRepository,
    CascadeDeletionRepository,
    DocumentRepository,
    OriginalDocumentRepository,
    WorkflowRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_application_repo(db: DbSession) -> ApplicationRepository:
    return ApplicationRepository(db)


async def get_activity_log_repo(db: DbSession) -> ActivityLogRepository:
    return ActivityLogRepository(db)


async def get_cascade_deletion_repo(db: DbSession) -> CascadeDeletionRepository:
    return CascadeDeletionRepository(db)


async def get_workflow_repo(db: DbSession) -> WorkflowRepository:
    return WorkflowRepository(db)


async def get_document_repo(db: DbSession) -> DocumentRepository:
    return DocumentRepository(db)


async def get_original_document_repo(db: DbSession) -> OriginalDocumentRepository:
    return OriginalDocumentRepository(db)
