"""Get workflow progress use case: advisor (firm-scoped) and client (ownership-scoped) views.

Progress is recomputed from requirement, document and review rows on every
call. The stage_progress and application_workflow_progress tables are read
only for timestamps and the coarse workflow status, never for progress.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.workflow import ApplicationWorkflow, ClientDocumentView
from app.application.services.workflow_progress_calculator import (
    compute_progress,
    latest_review_status,
)
from app.domain.exceptions import ResourceNotFoundException
from app.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from app.application.dtos.application import ApplicationResult
    from app.application.dtos.principal import AdvisorPrincipal, ClientPrincipal
    from app.application.interfaces.repositories import (
        IApplicationRepository,
        IDocumentRepository,
        IWorkflowRepository,
    )
    from app.application.interfaces.services import IOriginalDocumentsProgressService

NOT_STARTED = "not_started"


class GetWorkflowProgressUseCase:
    def __init__(
        self,
        application_repo: IApplicationRepository,
        workflow_repo: IWorkflowRepository,
        document_repo: IDocumentRepository,
        original_documents: IOriginalDocumentsProgressService,
    ) -> None:
        self._application_repo = application_repo
        self._workflow_repo = workflow_repo
        self._document_repo = document_repo
        self._original_documents = original_documents

    @traced("workflow.get_progress")
    async def execute(
        self, *, application_id: str, actor: AdvisorPrincipal
    ) -> ApplicationWorkflow:
        """Progress for an advisor of the application's firm.

        Raises:
            ResourceNotFoundException: No application in the firm, or no active template.
        """
        application = await self._application_repo.get_by_id(application_id)
        if application is None or application.firm_id != actor.firm_id:
            raise ResourceNotFoundException("application", application_id)
        return await self._build(application, include_documents=False)

    @traced("workflow.get_client_progress")
    async def execute_for_client(
        self, *, application_id: str, client: ClientPrincipal
    ) -> ApplicationWorkflow:
        """Progress for the client who owns the application, with their document list."""
        application = await self._application_repo.get_by_id(application_id)
        if (
            application is None
            or application.client_id != client.client_id
            or application.firm_id != client.firm_id
        ):
            raise ResourceNotFoundException("application", application_id)
        return await self._build(application, include_documents=True)

    async def _build(
        self, application: ApplicationResult, *, include_documents: bool
    ) -> ApplicationWorkflow:
        template = await self._workflow_repo.get_active_template(application.program_id)
        if template is None:
            raise ResourceNotFoundException("workflow_template", application.program_id)

        stages = await self._workflow_repo.list_stages(template.id)
        requirements = await self._workflow_repo.list_requirements([s.id for s in stages])
        documents = await self._document_repo.list_documents(application.id)
        reviews = await self._document_repo.list_reviews([d.id for d in documents])
        stage_cache = await self._workflow_repo.list_stage_progress_cache(application.id)
        workflow_cache = await self._workflow_repo.get_workflow_progress_cache(
            application.id, template.id
        )
        originals = await self._original_documents.get_progress(application.id)

        progress = compute_progress(
            stages,
            requirements,
            documents,
            reviews,
            stage_cache=stage_cache,
            original_documents=originals,
        )

        document_views = None
        if include_documents:
            status_by_doc = latest_review_status(reviews)
            document_views = [
                ClientDocumentView(
                    id=d.id,
                    filename=d.filename,
                    document_requirement_id=d.document_requirement_id,
                    uploaded_at=d.uploaded_at,
                    review_status=status_by_doc.get(d.id),
                )
                for d in sorted(documents, key=lambda d: (d.uploaded_at, d.id))
            ]

        return ApplicationWorkflow(
            template=template,
            progress=progress,
            status=workflow_cache.status if workflow_cache else NOT_STARTED,
            started_at=workflow_cache.started_at if workflow_cache else None,
            completed_at=workflow_cache.completed_at if workflow_cache else None,
            documents=document_views,
        )
