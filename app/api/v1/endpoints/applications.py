"""Application lifecycle API: status transitions, status read, archive, cascading delete, progress.

Thin routes delegating to the use cases in app.application.use_cases; domain
exceptions are mapped to HTTP responses by app.core.exception_handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    CurrentAdvisor,
    get_archive_use_case,
    get_delete_application_use_case,
    get_original_documents_progress_use_case,
    get_status_use_case,
    get_update_status_use_case,
    get_workflow_progress_use_case,
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
from app.core.limiter import limit_deletes, limit_writes
from app.schemas.application import (
    ApplicationResponse,
    ApplicationStatusResponse,
    ArchiveRequest,
    ArchiveResponse,
    DeleteApplicationResponse,
    DeletionInfo,
    StatusChangeResponse,
    StatusHistoryItem,
    StatusInfoResponse,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from app.schemas.workflow import (
    OriginalDocumentsProgressResponse,
    WorkflowProgressResponse,
    workflow_response,
)

router = APIRouter()


@router.patch("/{application_id}/status", response_model=StatusUpdateResponse)
@limit_writes
async def update_application_status(
    request: Request,
    application_id: str,
    body: StatusUpdateRequest,
    actor: CurrentAdvisor,
    use_case: Annotated[UpdateApplicationStatusUseCase, Depends(get_update_status_use_case)],
):
    """Apply a status transition (legal per the transition table and allowed for the actor)."""
    change = await use_case.execute(
        application_id=application_id,
        target_status=body.status,
        actor=actor,
        notes=body.notes,
        trigger_workflow=body.trigger_workflow,
    )
    return StatusUpdateResponse(
        application=ApplicationResponse.model_validate(change.application),
        status_change=StatusChangeResponse(
            from_status=change.from_status,
            to_status=change.to_status,
            changed_by=change.changed_by,
            changed_by_name=change.changed_by_name,
            changed_at=change.changed_at,
            workflow_triggered=change.workflow_triggered,
        ),
        valid_transitions=change.valid_transitions,
    )


@router.get("/{application_id}/status", response_model=ApplicationStatusResponse)
async def get_application_status(
    application_id: str,
    actor: CurrentAdvisor,
    use_case: Annotated[GetApplicationStatusUseCase, Depends(get_status_use_case)],
):
    """Current status, legal next states, whether the caller may act, and history."""
    info = await use_case.execute(application_id=application_id, actor=actor)
    return ApplicationStatusResponse(
        application=ApplicationResponse.model_validate(info.application),
        status_info=StatusInfoResponse(
            current_status=info.current_status,
            valid_transitions=info.valid_transitions,
            can_edit=info.can_edit,
            status_history=[
                StatusHistoryItem(
                    from_status=h.from_status,
                    to_status=h.to_status,
                    changed_by=h.changed_by,
                    notes=h.notes,
                    changed_at=h.changed_at,
                )
                for h in info.status_history
            ],
        ),
    )


@router.delete("/{application_id}/delete", response_model=DeleteApplicationResponse)
@limit_deletes
async def delete_application(
    request: Request,
    application_id: str,
    actor: CurrentAdvisor,
    use_case: Annotated[DeleteApplicationUseCase, Depends(get_delete_application_use_case)],
    reason: Annotated[str | None, Query(max_length=1000)] = None,
):
    """Delete the application and everything it owns (status-gated)."""
    summary = await use_case.execute(
        application_id=application_id, actor=actor, reason=reason
    )
    return DeleteApplicationResponse(
        success=True,
        message=f"Application {summary.application_number} deleted",
        deletion_info=DeletionInfo.model_validate(summary),
    )


@router.patch("/{application_id}/archive", response_model=ArchiveResponse)
@limit_writes
async def set_application_archived(
    request: Request,
    application_id: str,
    body: ArchiveRequest,
    actor: CurrentAdvisor,
    use_case: Annotated[SetApplicationArchivedUseCase, Depends(get_archive_use_case)],
):
    """Archive (approved/rejected/etc.) or restore an archived application to started."""
    application = await use_case.execute(
        application_id=application_id,
        archived=body.archived,
        actor=actor,
        notes=body.notes,
    )
    message = (
        "Application archived successfully"
        if body.archived
        else "Application unarchived successfully"
    )
    return ArchiveResponse(
        application=ApplicationResponse.model_validate(application), message=message
    )


@router.get("/{application_id}/workflow", response_model=WorkflowProgressResponse)
async def get_application_workflow(
    application_id: str,
    actor: CurrentAdvisor,
    use_case: Annotated[GetWorkflowProgressUseCase, Depends(get_workflow_progress_use_case)],
):
    """Workflow progress recomputed from document reviews."""
    result = await use_case.execute(application_id=application_id, actor=actor)
    return workflow_response(result)


@router.get(
    "/{application_id}/original-documents/progress",
    response_model=OriginalDocumentsProgressResponse,
)
async def get_original_documents_progress(
    application_id: str,
    actor: CurrentAdvisor,
    use_case: Annotated[
        GetOriginalDocumentsProgressUseCase, Depends(get_original_documents_progress_use_case)
    ],
):
    """Courier-shipped originals: shipped/received/verified counts."""
    progress = await use_case.execute(application_id=application_id, actor=actor)
    return OriginalDocumentsProgressResponse.model_validate(progress)
