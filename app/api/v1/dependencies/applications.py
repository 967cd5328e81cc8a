"""Use-case builders for application lifecycle and workflow routes (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.api.v1.dependencies.db import (
    get_activity_log_repo,
    get_application_repo,
    get_cascade_deletion_repo,
    get_document_repo,
    get_workflow_repo,
)
from app.api.v1.dependencies.services import (
    get_activity_logger,
    get_automation_trigger,
    get_detached_task_queue,
    get_original_documents_service,
    get_storage_service,
)
from app.application.services.activity_logger import ActivityLogger
from app.application.services.original_documents_progress import (
    OriginalDocumentsProgressService,
)
from app.application.use_cases.applications import (
    DeleteApplicationUseCase,
    GetApplicationStatusUseCase,
    SetApplicationArchivedUseCase,
    UpdateApplicationStatusUseCase,
)
from app.application.use_cases.workflow import (
    GetOriginalDocumentsProgressUseCase,
    GetWorkflowProgressUseCase,
)
from app.infrastructure.external.storage.protocol import StorageProtocol
from app.infrastructure.persistence.repositories import (
    ActivityLogRepository,
    ApplicationRepository,
    CascadeDeletionRepository,
    DocumentRepository,
    WorkflowRepository,
)
from app.infrastructure.services.detached_tasks import DetachedTaskQueue
from app.infrastructure.services.workflow_automation_job import (
    SessionScopedAutomationTrigger,
)

ApplicationRepo = Annotated[ApplicationRepository, Depends(get_application_repo)]
Logger = Annotated[ActivityLogger, Depends(get_activity_logger)]
Dispatcher = Annotated[DetachedTaskQueue, Depends(get_detached_task_queue)]
OriginalDocs = Annotated[OriginalDocumentsProgressService, Depends(get_original_documents_service)]


async def get_update_status_use_case(
    application_repo: ApplicationRepo,
    activity_logger: Logger,
    dispatcher: Dispatcher,
    automation: Annotated[SessionScopedAutomationTrigger, Depends(get_automation_trigger)],
) -> UpdateApplicationStatusUseCase:
    return UpdateApplicationStatusUseCase(
        application_repo=application_repo,
        activity_logger=activity_logger,
        dispatcher=dispatcher,
        automation=automation,
    )


async def get_status_use_case(
    application_repo: ApplicationRepo,
    activity_repo: Annotated[ActivityLogRepository, Depends(get_activity_log_repo)],
) -> GetApplicationStatusUseCase:
    return GetApplicationStatusUseCase(application_repo=application_repo, activity_repo=activity_repo)


async def get_delete_application_use_case(
    application_repo: ApplicationRepo,
    cascade_repo: Annotated[CascadeDeletionRepository, Depends(get_cascade_deletion_repo)],
    activity_logger: Logger,
    dispatcher: Dispatcher,
    storage: Annotated[StorageProtocol, Depends(get_storage_service)],
) -> DeleteApplicationUseCase:
    return DeleteApplicationUseCase(
        application_repo=application_repo,
        cascade_repo=cascade_repo,
        activity_logger=activity_logger,
        dispatcher=dispatcher,
        storage=storage,
    )


async def get_archive_use_case(
    application_repo: ApplicationRepo,
    activity_logger: Logger,
) -> SetApplicationArchivedUseCase:
    return SetApplicationArchivedUseCase(
        application_repo=application_repo, activity_logger=activity_logger
    )


async def get_workflow_progress_use_case(
    application_repo: ApplicationRepo,
    workflow_repo: Annotated[WorkflowRepository, Depends(get_workflow_repo)],
    document_repo: Annotated[DocumentRepository, Depends(get_document_repo)],
    original_documents: OriginalDocs,
) -> GetWorkflowProgressUseCase:
    return GetWorkflowProgressUseCase(
        application_repo=application_repo,
        workflow_repo=workflow_repo,
        document_repo=document_repo,
        original_documents=original_documents,
    )


async def get_original_documents_progress_use_case(
    application_repo: ApplicationRepo,
    original_documents: OriginalDocs,
) -> GetOriginalDocumentsProgressUseCase:
    return GetOriginalDocumentsProgressUseCase(
        application_repo=application_repo, original_documents=original_documents
    )
