"""DTOs for the append-only activity log (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ActivityLogCreate:
    """Input for appending one activity row. Request context fields are stamped by ActivityLogger."""

    firm_id: str
    user_id: str | None
    action: str
    entity_type: str
    entity_id: str
    old_values: dict[str, Any] | None = None
    new_values: dict[str, Any] | None = None
    application_id: str | None = None
    client_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    correlation_id: str | None = None


@dataclass(frozen=True)
class ActivityLogResult:
    id: str
    firm_id: str
    user_id: str | None
    action: str
    entity_type: str
    entity_id: str
    old_values: dict[str, Any] | None
    new_values: dict[str, Any] | None
    application_id: str | None
    correlation_id: str | None
    created_at: datetime
