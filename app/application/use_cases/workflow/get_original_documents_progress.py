"""Get original documents progress use case (firm-scoped)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.workflow import OriginalDocumentsProgress
from app.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from app.application.dtos.principal import AdvisorPrincipal
    from app.application.interfaces.repositories import IApplicationRepository
    from app.application.interfaces.services import IOriginalDocumentsProgressService


class GetOriginalDocumentsProgressUseCase:
    def __init__(
        self,
        application_repo: IApplicationRepository,
        original_documents: IOriginalDocumentsProgressService,
    ) -> None:
        self._application_repo = application_repo
        self._original_documents = original_documents

    async def execute(
        self, *, application_id: str, actor: AdvisorPrincipal
    ) -> OriginalDocumentsProgress:
        application = await self._application_repo.get_by_id(application_id)
        if application is None or application.firm_id != actor.firm_id:
            raise ResourceNotFoundException("application", application_id)
        return await self._original_documents.get_progress(application_id)
