"""In-memory stand-ins for the repository and service ports used by the use cases."""

from __future__ import annotations

import dataclasses
import itertools
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.application.dtos.application import ApplicationResult, ApplicationStatusUpdate
from app.application.dtos.deletion import DocumentFileRef
from app.application.dtos.principal import AdvisorPrincipal
from app.application.dtos.task import TaskCreate, TaskResult
from app.application.dtos.workflow import (
    ApplicationDocumentRow,
    DocumentRequirementRow,
    DocumentReviewRow,
    StageProgressCacheRow,
    WorkflowProgressCacheRow,
    WorkflowStageRow,
    WorkflowTemplateRow,
)
from app.domain.enums import ApplicationStatus, UserRole

FIRM_ID = "firm-1"
OTHER_FIRM_ID = "firm-2"
ADVISOR_ID = "user-advisor"
ADMIN_ID = "user-admin"
OUTSIDER_ID = "user-outsider"
CLIENT_ID = "client-1"

_BASE_TIME = datetime(2026, 1, 5, 9, 0, tzinfo=UTC)
_ids = itertools.count(1)


def next_id(prefix: str) -> str:
    return f"{prefix}-{next(_ids)}"


def advisor(
    user_id: str = ADVISOR_ID,
    role: UserRole = UserRole.ADVISOR,
    firm_id: str = FIRM_ID,
    name: str | None = "Alex Advisor",
) -> AdvisorPrincipal:
    return AdvisorPrincipal(id=user_id, firm_id=firm_id, role=role, name=name)


def admin(user_id: str = ADMIN_ID, firm_id: str = FIRM_ID) -> AdvisorPrincipal:
    return AdvisorPrincipal(id=user_id, firm_id=firm_id, role=UserRole.ADMIN, name="Dana Admin")


def make_application(**overrides: Any) -> ApplicationResult:
    values: dict[str, Any] = {
        "id": "app-1",
        "firm_id": FIRM_ID,
        "client_id": CLIENT_ID,
        "program_id": "program-1",
        "assigned_advisor_id": ADVISOR_ID,
        "application_number": "APP-0001",
        "status": ApplicationStatus.DRAFT,
        "priority": "medium",
        "investment_amount": None,
        "investment_type": None,
        "submitted_at": None,
        "decision_expected_at": None,
        "decided_at": None,
        "notes": None,
        "internal_notes": None,
        "created_at": _BASE_TIME,
        "updated_at": _BASE_TIME,
        "client_name": "Jordan Investor",
        "program_name": "St. Kitts SISC",
        "advisor_name": "Alex Advisor",
    }
    values.update(overrides)
    return ApplicationResult(**values)


class FakeApplicationRepository:
    def __init__(self, *applications: ApplicationResult) -> None:
        self.rows: dict[str, ApplicationResult] = {a.id: a for a in applications}
        self.updates: list[tuple[str, ApplicationStatusUpdate]] = []

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        return self.rows.get(application_id)

    async def update_status(
        self, application_id: str, update: ApplicationStatusUpdate
    ) -> ApplicationResult | None:
        self.updates.append((application_id, update))
        current = self.rows.get(application_id)
        if current is None:
            return None
        updated = dataclasses.replace(
            current,
            status=update.status,
            submitted_at=update.submitted_at,
            decided_at=update.decided_at,
            internal_notes=update.internal_notes,
            updated_at=current.updated_at + timedelta(minutes=1),
        )
        self.rows[application_id] = updated
        return updated


class FakeActivityLogRepository:
    def __init__(self) -> None:
        self.rows: list[ActivityLogResult] = []
        self.created: list[ActivityLogCreate] = []

    async def create(self, entry: ActivityLogCreate) -> ActivityLogResult:
        self.created.append(entry)
        row = ActivityLogResult(
            id=next_id("log"),
            firm_id=entry.firm_id,
            user_id=entry.user_id,
            action=entry.action,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            old_values=entry.old_values,
            new_values=entry.new_values,
            application_id=entry.application_id,
            correlation_id=entry.correlation_id,
            created_at=_BASE_TIME + timedelta(seconds=len(self.rows)),
        )
        self.rows.append(row)
        return row

    async def list_for_application(
        self, application_id: str, action: str, *, limit: int = 50
    ) -> list[ActivityLogResult]:
        matching = [
            r for r in self.rows if r.application_id == application_id and r.action == action
        ]
        return sorted(matching, key=lambda r: (r.created_at, r.id), reverse=True)[:limit]


class FakeDispatcher:
    """Records submitted jobs; run_all() awaits them in order."""

    def __init__(self, accept: bool = True) -> None:
        self.accept = accept
        self.jobs: list[tuple[str, Callable[[], Awaitable[Any]], dict[str, str]]] = []

    def submit(self, name: str, job: Callable[[], Awaitable[Any]], **context: str) -> bool:
        if not self.accept:
            return False
        self.jobs.append((name, job, context))
        return True

    async def run_all(self) -> None:
        for _, job, _ in self.jobs:
            await job()


class FakeAutomation:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, str, str, str, str | None]] = []
        self.error = error

    async def trigger_status_change(
        self,
        application_id: str,
        old_status: str,
        new_status: str,
        firm_id: str,
        actor_id: str | None,
    ) -> None:
        self.calls.append((application_id, old_status, new_status, firm_id, actor_id))
        if self.error is not None:
            raise self.error


class FakeStorage:
    def __init__(self, error: Exception | None = None) -> None:
        self.deleted: list[str] = []
        self.error = error

    async def delete(self, storage_ref: str) -> bool:
        self.deleted.append(storage_ref)
        return True

    async def batch_delete(self, storage_refs: list[str]) -> int:
        if self.error is not None:
            raise self.error
        self.deleted.extend(storage_refs)
        return len(storage_refs)


class FakeCascadeDeletionRepository:
    """Tables keyed the way the real schema links them to an application.

    calls records (method, argument) in order; fail_on names a method that raises.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[str, Any]] = []
        self.applications: set[str] = set()
        # conversation id -> application id
        self.conversations: dict[str, str] = {}
        # message id -> conversation id
        self.messages: dict[str, str] = {}
        self.participants: list[str] = []  # conversation ids
        self.notifications: list[str] = []  # message ids
        # document id -> (application id, file path)
        self.documents: dict[str, tuple[str, str]] = {}
        self.reviews: list[str] = []  # document ids
        self.custom_requirements: list[str] = []
        self.original_documents: list[str] = []
        self.stage_progress: list[str] = []
        self.workflow_progress: list[str] = []
        self.tasks: list[str] = []
        self.communications: list[str] = []
        self.activity_logs: list[str | None] = []

    def seed_application(self, application_id: str, *, files: list[str] = ()) -> None:
        self.applications.add(application_id)
        conv = next_id("conv")
        self.conversations[conv] = application_id
        self.participants += [conv, conv]
        for _ in range(2):
            msg = next_id("msg")
            self.messages[msg] = conv
            self.notifications.append(msg)
        for path in files:
            doc = next_id("doc")
            self.documents[doc] = (application_id, path)
            self.reviews.append(doc)
        for table in (
            self.custom_requirements,
            self.original_documents,
            self.stage_progress,
            self.workflow_progress,
            self.tasks,
            self.communications,
            self.activity_logs,
        ):
            table.append(application_id)

    def _record(self, method: str, arg: Any) -> None:
        self.calls.append((method, arg))
        if method == self.fail_on:
            raise RuntimeError(f"{method} failed")

    @staticmethod
    def _remove(rows: list, keys) -> int:
        keys = set(keys)
        before = len(rows)
        rows[:] = [r for r in rows if r not in keys]
        return before - len(rows)

    async def list_conversation_ids(self, application_id: str) -> list[str]:
        self._record("list_conversation_ids", application_id)
        return sorted(c for c, a in self.conversations.items() if a == application_id)

    async def list_message_ids(self, conversation_ids: list[str]) -> list[str]:
        self._record("list_message_ids", list(conversation_ids))
        return sorted(m for m, c in self.messages.items() if c in conversation_ids)

    async def delete_message_notifications(self, message_ids: list[str]) -> int:
        self._record("delete_message_notifications", list(message_ids))
        return self._remove(self.notifications, message_ids)

    async def delete_message_participants(self, conversation_ids: list[str]) -> int:
        self._record("delete_message_participants", list(conversation_ids))
        return self._remove(self.participants, conversation_ids)

    async def delete_messages(self, conversation_ids: list[str]) -> int:
        self._record("delete_messages", list(conversation_ids))
        gone = [m for m, c in self.messages.items() if c in conversation_ids]
        for m in gone:
            del self.messages[m]
        return len(gone)

    async def delete_conversations(self, conversation_ids: list[str]) -> int:
        self._record("delete_conversations", list(conversation_ids))
        gone = [c for c in self.conversations if c in conversation_ids]
        for c in gone:
            del self.conversations[c]
        return len(gone)

    async def list_document_files(self, application_id: str) -> list[DocumentFileRef]:
        self._record("list_document_files", application_id)
        return [
            DocumentFileRef(document_id=d, file_path=path)
            for d, (a, path) in sorted(self.documents.items())
            if a == application_id
        ]

    async def delete_document_reviews(self, document_ids: list[str]) -> int:
        self._record("delete_document_reviews", list(document_ids))
        return self._remove(self.reviews, document_ids)

    async def delete_application_documents(self, application_id: str) -> int:
        self._record("delete_application_documents", application_id)
        gone = [d for d, (a, _) in self.documents.items() if a == application_id]
        for d in gone:
            del self.documents[d]
        return len(gone)

    async def delete_custom_requirements(self, application_id: str) -> int:
        self._record("delete_custom_requirements", application_id)
        return self._remove(self.custom_requirements, [application_id])

    async def delete_original_documents(self, application_id: str) -> int:
        self._record("delete_original_documents", application_id)
        return self._remove(self.original_documents, [application_id])

    async def delete_stage_progress(self, application_id: str) -> int:
        self._record("delete_stage_progress", application_id)
        return self._remove(self.stage_progress, [application_id])

    async def delete_workflow_progress(self, application_id: str) -> int:
        self._record("delete_workflow_progress", application_id)
        return self._remove(self.workflow_progress, [application_id])

    async def delete_tasks(self, application_id: str) -> int:
        self._record("delete_tasks", application_id)
        return self._remove(self.tasks, [application_id])

    async def delete_communications(self, application_id: str) -> int:
        self._record("delete_communications", application_id)
        return self._remove(self.communications, [application_id])

    async def delete_activity_logs(self, application_id: str) -> int:
        self._record("delete_activity_logs", application_id)
        return self._remove(self.activity_logs, [application_id])

    async def delete_application(self, application_id: str) -> int:
        self._record("delete_application", application_id)
        if application_id in self.applications:
            self.applications.remove(application_id)
            return 1
        return 0

    def rows_referencing(self, application_id: str) -> int:
        """Rows still linked (directly or through a parent) to the application."""
        convs = {c for c, a in self.conversations.items() if a == application_id}
        msgs = {m for m, c in self.messages.items() if c in convs}
        docs = {d for d, (a, _) in self.documents.items() if a == application_id}
        return (
            len(convs)
            + len(msgs)
            + sum(1 for c in self.participants if c in convs)
            + sum(1 for m in self.notifications if m in msgs)
            + len(docs)
            + sum(1 for d in self.reviews if d in docs)
            + sum(
                table.count(application_id)
                for table in (
                    self.custom_requirements,
                    self.original_documents,
                    self.stage_progress,
                    self.workflow_progress,
                    self.tasks,
                    self.communications,
                    self.activity_logs,
                )
            )
            + (1 if application_id in self.applications else 0)
        )


class FakeWorkflowRepository:
    def __init__(
        self,
        template: WorkflowTemplateRow | None,
        stages: list[WorkflowStageRow] = (),
        requirements: list[DocumentRequirementRow] = (),
        stage_cache: list[StageProgressCacheRow] = (),
        workflow_cache: WorkflowProgressCacheRow | None = None,
    ) -> None:
        self.template = template
        self.stages = list(stages)
        self.requirements = list(requirements)
        self.stage_cache = list(stage_cache)
        self.workflow_cache = workflow_cache

    async def get_active_template(self, program_id: str) -> WorkflowTemplateRow | None:
        if self.template is None or self.template.program_id != program_id:
            return None
        return self.template

    async def list_stages(self, template_id: str) -> list[WorkflowStageRow]:
        return sorted(
            (s for s in self.stages if s.template_id == template_id), key=lambda s: s.stage_order
        )

    async def list_requirements(self, stage_ids: list[str]) -> list[DocumentRequirementRow]:
        return [r for r in self.requirements if r.stage_id in stage_ids]

    async def list_stage_progress_cache(self, application_id: str) -> list[StageProgressCacheRow]:
        return list(self.stage_cache)

    async def get_workflow_progress_cache(
        self, application_id: str, template_id: str
    ) -> WorkflowProgressCacheRow | None:
        return self.workflow_cache


class FakeDocumentRepository:
    def __init__(
        self,
        documents: list[ApplicationDocumentRow] = (),
        reviews: list[DocumentReviewRow] = (),
    ) -> None:
        self.documents = list(documents)
        self.reviews = list(reviews)

    async def list_documents(self, application_id: str) -> list[ApplicationDocumentRow]:
        return [d for d in self.documents if d.application_id == application_id]

    async def list_reviews(self, document_ids: list[str]) -> list[DocumentReviewRow]:
        return [r for r in self.reviews if r.document_id in document_ids]


class FakeOriginalDocumentRepository:
    def __init__(self, statuses: list[str] = ()) -> None:
        self.statuses = list(statuses)

    async def list_statuses(self, application_id: str) -> list[str]:
        return list(self.statuses)


class FakeTaskRepository:
    def __init__(self) -> None:
        self.tasks: list[TaskResult] = []

    async def exists_pending(self, application_id: str, title: str) -> bool:
        return any(
            t.application_id == application_id and t.title == title and t.status == "pending"
            for t in self.tasks
        )

    async def create(self, data: TaskCreate) -> TaskResult:
        task = TaskResult(
            id=next_id("task"),
            firm_id=data.firm_id,
            application_id=data.application_id,
            assigned_to_id=data.assigned_to_id,
            title=data.title,
            priority=data.priority,
            status="pending",
            task_type=data.task_type,
            due_date=data.due_date,
        )
        self.tasks.append(task)
        return task


class FakeUserRepository:
    def __init__(self, admin_id: str | None = ADMIN_ID) -> None:
        self.admin_id = admin_id

    async def find_active_admin_id(self, firm_id: str) -> str | None:
        return self.admin_id
