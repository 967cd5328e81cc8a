"""Collaborator services (composition root): activity logger, detached queue, storage, automation."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from app.application.services.activity_logger import ActivityLogger
from app.application.services.original_documents_progress import (
    OriginalDocumentsProgressService,
)
from app.api.v1.dependencies.db import (
    get_activity_log_repo,
    get_original_document_repo,
)
from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.protocol import StorageProtocol
from app.infrastructure.persistence.repositories import (
    ActivityLogRepository,
    OriginalDocumentRepository,
)
from app.infrastructure.services.detached_tasks import DetachedTaskQueue
from app.infrastructure.services.workflow_automation_job import (
    SessionScopedAutomationTrigger,
)

logger = logging.getLogger(__name__)

# Stand-in when the lifespan has not started a queue: submit() drops and warns.
_idle_queue = DetachedTaskQueue(maxsize=1)


def get_detached_task_queue(request: Request) -> DetachedTaskQueue:
    """Process-wide queue started in the lifespan (app.state.detached_tasks)."""
    queue = getattr(request.app.state, "detached_tasks", None)
    if queue is None:
        logger.warning("Detached task queue not started; side effects will be dropped")
        return _idle_queue
    return queue


@lru_cache
def get_storage_service() -> StorageProtocol:
    """Object store for uploaded document files (backend from settings)."""
    return StorageFactory.create_storage_service()


def get_automation_trigger() -> SessionScopedAutomationTrigger:
    return SessionScopedAutomationTrigger()


async def get_activity_logger(
    activity_repo: Annotated[ActivityLogRepository, Depends(get_activity_log_repo)],
) -> ActivityLogger:
    return ActivityLogger(activity_repo)


async def get_original_documents_service(
    original_repo: Annotated[OriginalDocumentRepository, Depends(get_original_document_repo)],
) -> OriginalDocumentsProgressService:
    return OriginalDocumentsProgressService(original_repo)
