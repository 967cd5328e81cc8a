"""Client portal API: read-only views of the client's own applications."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import CurrentClient, get_workflow_progress_use_case
from app.application.use_cases.workflow import GetWorkflowProgressUseCase
from app.schemas.workflow import ClientWorkflowProgressResponse, workflow_response

router = APIRouter()


@router.get("/{application_id}/workflow", response_model=ClientWorkflowProgressResponse)
async def get_client_application_workflow(
    application_id: str,
    client: CurrentClient,
    use_case: Annotated[GetWorkflowProgressUseCase, Depends(get_workflow_progress_use_case)],
):
    """Workflow progress plus uploaded documents; 404 unless the client owns the application."""
    result = await use_case.execute_for_client(application_id=application_id, client=client)
    return workflow_response(result, ClientWorkflowProgressResponse)
