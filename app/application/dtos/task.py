"""DTOs for tasks generated by workflow automation (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TaskCreate:
    firm_id: str
    application_id: str
    client_id: str
    created_by_id: str | None
    assigned_to_id: str | None
    title: str
    description: str
    priority: str
    task_type: str
    due_date: datetime


@dataclass(frozen=True)
class TaskResult:
    id: str
    firm_id: str
    application_id: str | None
    assigned_to_id: str | None
    title: str
    priority: str
    status: str
    task_type: str
    due_date: datetime | None
