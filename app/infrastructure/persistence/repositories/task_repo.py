"""Task repository for workflow automation. Implements ITaskRepository."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import TaskCreate, TaskResult
from app.domain.enums import TaskStatus
from app.infrastructure.persistence.models.task import Task


def _to_result(t: Task) -> TaskResult:
    return TaskResult(
        id=t.id,
        firm_id=t.firm_id,
        application_id=t.application_id,
        assigned_to_id=t.assigned_to_id,
        title=t.title,
        priority=t.priority,
        status=t.status,
        task_type=t.task_type or "",
        due_date=t.due_date,
    )


class TaskRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def exists_pending(self, application_id: str, title: str) -> bool:
        result = await self.db.execute(
            select(
                exists().where(
                    Task.application_id == application_id,
                    Task.title == title,
                    Task.status == TaskStatus.PENDING.value,
                )
            )
        )
        return bool(result.scalar())

    async def create(self, data: TaskCreate) -> TaskResult:
        """Insert one pending task and commit."""
        task = Task(
            firm_id=data.firm_id,
            application_id=data.application_id,
            client_id=data.client_id,
            created_by_id=data.created_by_id,
            assigned_to_id=data.assigned_to_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            status=TaskStatus.PENDING.value,
            task_type=data.task_type,
            due_date=data.due_date,
        )
        self.db.add(task)
        await self.db.flush()
        await self.db.refresh(task)
        await self.db.commit()
        return _to_result(task)
