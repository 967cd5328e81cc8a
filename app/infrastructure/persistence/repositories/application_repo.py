"""Application repository. Implements IApplicationRepository."""

from __future__ import annotations

from sqlalchemy import Row, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.application import ApplicationResult, ApplicationStatusUpdate
from app.domain.enums import ApplicationStatus
from app.infrastructure.persistence.models.application import Application
from app.infrastructure.persistence.models.client import Client
from app.infrastructure.persistence.models.firm import User
from app.infrastructure.persistence.models.program import CrbiProgram


def _to_result(row: Row) -> ApplicationResult:
    """Map the joined row (application, client names, program name, advisor name) to the DTO."""
    app: Application = row.Application
    client_name = " ".join(p for p in (row.first_name, row.last_name) if p) or None
    return ApplicationResult(
        id=app.id,
        firm_id=app.firm_id,
        client_id=app.client_id,
        program_id=app.program_id,
        assigned_advisor_id=app.assigned_advisor_id,
        application_number=app.application_number,
        status=ApplicationStatus(app.status),
        priority=app.priority,
        investment_amount=app.investment_amount,
        investment_type=app.investment_type,
        submitted_at=app.submitted_at,
        decision_expected_at=app.decision_expected_at,
        decided_at=app.decided_at,
        notes=app.notes,
        internal_notes=app.internal_notes,
        created_at=app.created_at,
        updated_at=app.updated_at,
        client_name=client_name,
        program_name=row.program_name,
        advisor_name=row.advisor_name,
    )


class ApplicationRepository:
    """Reads applications with display names; writes status changes as one committed statement."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _select(self):
        return (
            select(
                Application,
                Client.first_name,
                Client.last_name,
                CrbiProgram.program_name,
                User.name.label("advisor_name"),
            )
            .outerjoin(Client, Client.id == Application.client_id)
            .outerjoin(CrbiProgram, CrbiProgram.id == Application.program_id)
            .outerjoin(User, User.id == Application.assigned_advisor_id)
        )

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        result = await self.db.execute(
            self._select().where(Application.id == application_id)
        )
        row = result.one_or_none()
        return _to_result(row) if row is not None else None

    async def update_status(
        self, application_id: str, update_data: ApplicationStatusUpdate
    ) -> ApplicationResult | None:
        """Single UPDATE, committed immediately. None when the row no longer exists."""
        result = await self.db.execute(
            update(Application)
            .where(Application.id == application_id)
            .values(
                status=update_data.status.value,
                submitted_at=update_data.submitted_at,
                decided_at=update_data.decided_at,
                internal_notes=update_data.internal_notes,
            )
            .returning(Application.id)
        )
        updated = result.scalar_one_or_none()
        await self.db.commit()
        if updated is None:
            return None
        # populate_existing: the identity map still holds the pre-update row.
        result = await self.db.execute(
            self._select()
            .where(Application.id == application_id)
            .execution_options(populate_existing=True)
        )
        row = result.one_or_none()
        return _to_result(row) if row is not None else None
