"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IActivityLogRepository,
    IApplicationRepository,
    ICascadeDeletionRepository,
    IDocumentRepository,
    IOriginalDocumentRepository,
    ITaskRepository,
    IUserRepository,
    IWorkflowRepository,
)
from app.application.interfaces.services import (
    IActivityLogger,
    IDetachedTaskDispatcher,
    IOriginalDocumentsProgressService,
    IWorkflowAutomationTrigger,
)
from app.application.interfaces.storage import IStorageService

__all__ = [
    "IActivityLogRepository",
    "IActivityLogger",
    "IApplicationRepository",
    "ICascadeDeletionRepository",
    "IDetachedTaskDispatcher",
    "IDocumentRepository",
    "IOriginalDocumentRepository",
    "IOriginalDocumentsProgressService",
    "IStorageService",
    "ITaskRepository",
    "IUserRepository",
    "IWorkflowAutomationTrigger",
    "IWorkflowRepository",
]
