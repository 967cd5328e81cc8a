"""Application ORM model: the central lifecycle entity."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import ApplicationStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import FirmScopedModel

_STATUS_VALUES = ", ".join(f"'{s}'" for s in ApplicationStatus.values())


class Application(FirmScopedModel, Base):
    """CRBI application. Never soft-deleted; removed by the deletion cascade. Table: application."""

    __tablename__ = "application"

    client_id: Mapped[str] = mapped_column(
        String, ForeignKey("client.id"), nullable=False, index=True
    )
    program_id: Mapped[str] = mapped_column(
        String, ForeignKey("crbi_program.id"), nullable=False, index=True
    )
    assigned_advisor_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    application_number: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, server_default=text("'draft'")
    )
    priority: Mapped[str] = mapped_column(
        String(16), nullable=False, server_default=text("'medium'")
    )
    investment_amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    investment_type: Mapped[str | None] = mapped_column(String, nullable=True)
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    decision_expected_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    decided_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    internal_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="application_status_check"),
        Index("ix_application_firm_status", "firm_id", "status"),
    )
