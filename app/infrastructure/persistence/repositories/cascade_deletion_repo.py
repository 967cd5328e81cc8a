"""Per-step deletes for the application cascade. Implements ICascadeDeletionRepository.

Every method issues at most one statement and commits it before returning,
so the cascade has a commit point after each step. Deletes keyed by an id
list return 0 without touching the database when the list is empty.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Delete, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.deletion import DocumentFileRef
from app.infrastructure.persistence.models.activity_log import ActivityLog
from app.infrastructure.persistence.models.application import Application
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
from app.infrastructure.persistence.models.original_document import OriginalDocument
from app.infrastructure.persistence.models.progress import (
    ApplicationWorkflowProgress,
    StageProgress,
)
from app.infrastructure.persistence.models.task import Task


class CascadeDeletionRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _delete(self, stmt: Delete) -> int:
        # Bulk delete: bypasses unit-of-work listeners and never loads rows.
        result: Any = await self.db.execute(
            stmt.execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount or 0

    async def list_conversation_ids(self, application_id: str) -> list[str]:
        result = await self.db.execute(
            select(Conversation.id)
            .where(Conversation.application_id == application_id)
            .order_by(Conversation.id)
        )
        return list(result.scalars().all())

    async def list_message_ids(self, conversation_ids: list[str]) -> list[str]:
        if not conversation_ids:
            return []
        result = await self.db.execute(
            select(Message.id)
            .where(Message.conversation_id.in_(conversation_ids))
            .order_by(Message.id)
        )
        return list(result.scalars().all())

    async def delete_message_notifications(self, message_ids: list[str]) -> int:
        if not message_ids:
            return 0
        return await self._delete(
            delete(MessageNotification).where(MessageNotification.message_id.in_(message_ids))
        )

    async def delete_message_participants(self, conversation_ids: list[str]) -> int:
        if not conversation_ids:
            return 0
        return await self._delete(
            delete(MessageParticipant).where(
                MessageParticipant.conversation_id.in_(conversation_ids)
            )
        )

    async def delete_messages(self, conversation_ids: list[str]) -> int:
        if not conversation_ids:
            return 0
        return await self._delete(
            delete(Message).where(Message.conversation_id.in_(conversation_ids))
        )

    async def delete_conversations(self, conversation_ids: list[str]) -> int:
        if not conversation_ids:
            return 0
        return await self._delete(delete(Conversation).where(Conversation.id.in_(conversation_ids)))

    async def list_document_files(self, application_id: str) -> list[DocumentFileRef]:
        result = await self.db.execute(
            select(ApplicationDocument.id, ApplicationDocument.file_path)
            .where(ApplicationDocument.application_id == application_id)
            .order_by(ApplicationDocument.id)
        )
        return [
            DocumentFileRef(document_id=row.id, file_path=row.file_path or "")
            for row in result.all()
        ]

    async def delete_document_reviews(self, document_ids: list[str]) -> int:
        if not document_ids:
            return 0
        return await self._delete(
            delete(DocumentReview).where(DocumentReview.document_id.in_(document_ids))
        )

    async def delete_application_documents(self, application_id: str) -> int:
        return await self._delete(
            delete(ApplicationDocument).where(
                ApplicationDocument.application_id == application_id
            )
        )

    async def delete_custom_requirements(self, application_id: str) -> int:
        return await self._delete(
            delete(CustomDocumentRequirement).where(
                CustomDocumentRequirement.application_id == application_id
            )
        )

    async def delete_original_documents(self, application_id: str) -> int:
        return await self._delete(
            delete(OriginalDocument).where(OriginalDocument.application_id == application_id)
        )

    async def delete_stage_progress(self, application_id: str) -> int:
        return await self._delete(
            delete(StageProgress).where(StageProgress.application_id == application_id)
        )

    async def delete_workflow_progress(self, application_id: str) -> int:
        return await self._delete(
            delete(ApplicationWorkflowProgress).where(
                ApplicationWorkflowProgress.application_id == application_id
            )
        )

    async def delete_tasks(self, application_id: str) -> int:
        return await self._delete(delete(Task).where(Task.application_id == application_id))

    async def delete_communications(self, application_id: str) -> int:
        return await self._delete(
            delete(Communication).where(Communication.application_id == application_id)
        )

    async def delete_activity_logs(self, application_id: str) -> int:
        """Application-scoped rows only; firm-scoped snapshots have application_id NULL."""
        return await self._delete(
            delete(ActivityLog).where(ActivityLog.application_id == application_id)
        )

    async def delete_application(self, application_id: str) -> int:
        return await self._delete(delete(Application).where(Application.id == application_id))
