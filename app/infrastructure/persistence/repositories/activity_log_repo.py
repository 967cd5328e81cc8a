"""Activity log repository. Append-only; implements IActivityLogRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.infrastructure.persistence.models.activity_log import ActivityLog
from app.shared.utils.generators import generate_cuid


def _orm_to_result(row: ActivityLog) -> ActivityLogResult:
    return ActivityLogResult(
        id=row.id,
        firm_id=row.firm_id,
        user_id=row.user_id,
        action=row.action,
        entity_type=row.entity_type,
        entity_id=row.entity_id,
        old_values=row.old_values,
        new_values=row.new_values,
        application_id=row.application_id,
        correlation_id=row.correlation_id,
        created_at=row.created_at,
    )


class ActivityLogRepository:
    """No update/delete through the unit of work; see the model's listeners."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, entry: ActivityLogCreate) -> ActivityLogResult:
        """Append one row and commit."""
        row = ActivityLog(
            id=generate_cuid(),
            firm_id=entry.firm_id,
            user_id=entry.user_id,
            client_id=entry.client_id,
            application_id=entry.application_id,
            action=entry.action,
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            old_values=entry.old_values,
            new_values=entry.new_values,
            ip_address=entry.ip_address,
            user_agent=entry.user_agent,
            correlation_id=entry.correlation_id,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        await self.db.commit()
        return _orm_to_result(row)

    async def list_for_application(
        self, application_id: str, action: str, *, limit: int = 50
    ) -> list[ActivityLogResult]:
        result = await self.db.execute(
            select(ActivityLog)
            .where(
                ActivityLog.application_id == application_id,
                ActivityLog.action == action,
            )
            .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
            .limit(limit)
        )
        return [_orm_to_result(r) for r in result.scalars().all()]
