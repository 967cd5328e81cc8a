"""User lookups for task assignment. Implements IUserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.enums import UserRole
from app.infrastructure.persistence.models.firm import User


class UserRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_active_admin_id(self, firm_id: str) -> str | None:
        """Oldest active admin in the firm."""
        result = await self.db.execute(
            select(User.id)
            .where(
                User.firm_id == firm_id,
                User.role == UserRole.ADMIN.value,
                User.is_active.is_(True),
            )
            .order_by(User.created_at, User.id)
            .limit(1)
        )
        return result.scalar_one_or_none()
