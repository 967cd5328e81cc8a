"""Application lifecycle use cases: status change, status read, archive, cascading delete."""

from app.application.use_cases.applications.archive_application import (
    SetApplicationArchivedUseCase,
)
from app.application.use_cases.applications.delete_application import (
    ApplicationCascade,
    CascadeState,
    DeleteApplicationUseCase,
)
from app.application.use_cases.applications.get_status import GetApplicationStatusUseCase
from app.application.use_cases.applications.update_status import (
    UpdateApplicationStatusUseCase,
)

__all__ = [
    "ApplicationCascade",
    "CascadeState",
    "DeleteApplicationUseCase",
    "GetApplicationStatusUseCase",
    "SetApplicationArchivedUseCase",
    "UpdateApplicationStatusUseCase",
]
