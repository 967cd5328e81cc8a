"""Persistence models: ORM entities and mixins.

Importing this package registers every table on Base.metadata (Alembic
autogenerate and the integration tests rely on that).
"""

from app.infrastructure.persistence.models.activity_log import ActivityLog
from app.infrastructure.persistence.models.application import Application
from app.infrastructure.persistence.models.client import Client
from app.infrastructure.persistence.models.communication import Communication
from app.infrastructure.persistence.models.conversation import (
    Conversation,
    Message,
    MessageNotification,
    MessageParticipant,
)
from app.infrastructure.persistence.models.document import (
    ApplicationDocument,
    CustomDocumentRequirement,
    DocumentReview,
)
from app.infrastructure.persistence.models.firm import Firm, User
from app.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    FirmMixin,
    FirmScopedModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.original_document import OriginalDocument
from app.infrastructure.persistence.models.program import CrbiProgram
from app.infrastructure.persistence.models.progress import (
    ApplicationWorkflowProgress,
    StageProgress,
)
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.workflow import (
    DocumentRequirement,
    WorkflowStage,
    WorkflowTemplate,
)

__all__ = [
    "ActivityLog",
    "Application",
    "ApplicationDocument",
    "ApplicationWorkflowProgress",
    "Client",
    "Communication",
    "Conversation",
    "CrbiProgram",
    "CustomDocumentRequirement",
    "DocumentRequirement",
    "DocumentReview",
    "Firm",
    "Message",
    "MessageNotification",
    "MessageParticipant",
    "OriginalDocument",
    "StageProgress",
    "Task",
    "User",
    "WorkflowStage",
    "WorkflowTemplate",
    "CreatedAtMixin",
    "CuidMixin",
    "FirmMixin",
    "FirmScopedModel",
    "TimestampMixin",
]
