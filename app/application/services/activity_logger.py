"""Appends lifecycle audit rows (implements IActivityLogger).

Rows are written and never read back by the engine. Each row is stamped
with the request correlation id and the caller's IP and user agent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.shared.context import get_request_context

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IActivityLogRepository

logger = logging.getLogger(__name__)


class ActivityLogger:
    """Writes one ActivityLog row per lifecycle mutation."""

    def __init__(self, activity_repo: IActivityLogRepository) -> None:
        self._activity_repo = activity_repo

    async def record(
        self,
        *,
        firm_id: str,
        user_id: str | None,
        action: str,
        entity_type: str,
        entity_id: str,
        old_values: dict[str, Any] | None = None,
        new_values: dict[str, Any] | None = None,
        application_id: str | None = None,
        client_id: str | None = None,
    ) -> ActivityLogResult:
        ctx = get_request_context()
        row = await self._activity_repo.create(
            ActivityLogCreate(
                firm_id=firm_id,
                user_id=user_id,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                old_values=old_values,
                new_values=new_values,
                application_id=application_id,
                client_id=client_id,
                ip_address=ctx.ip_address,
                user_agent=ctx.user_agent,
                correlation_id=ctx.correlation_id,
            )
        )
        logger.info(
            "activity.recorded action=%s entity=%s:%s",
            action,
            entity_type,
            entity_id,
            extra={"activity_id": row.id, "firm_id": firm_id},
        )
        return row
