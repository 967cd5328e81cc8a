"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, FirmMixin, TimestampMixin, CreatedAtMixin and the
combined FirmScopedModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """CUID2 string primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class FirmMixin:
    """Tenant column: firm_id FK to firm. Immutable once written."""

    @declared_attr
    def firm_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("firm.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class CreatedAtMixin:
    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )


class TimestampMixin(CreatedAtMixin):
    """created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class FirmScopedModel(CuidMixin, FirmMixin, TimestampMixin):
    """CUID + firm_id + created_at/updated_at."""

    __abstract__ = True
