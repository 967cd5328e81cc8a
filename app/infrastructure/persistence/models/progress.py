"""Read-side progress caches. Nothing in this service writes them."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class StageProgress(CuidMixin, TimestampMixin, Base):
    __tablename__ = "stage_progress"

    application_id: Mapped[str] = mapped_column(
        String, ForeignKey("application.id"), nullable=False, index=True
    )
    stage_id: Mapped[str] = mapped_column(
        String, ForeignKey("workflow_stage.id", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, server_default=text("'pending'")
    )
    progress: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint("application_id", "stage_id", name="uq_stage_progress_application_stage"),
    )


class ApplicationWorkflowProgress(CuidMixin, TimestampMixin, Base):
    __tablename__ = "application_workflow_progress"

    application_id: Mapped[str] = mapped_column(
        String, ForeignKey("application.id"), nullable=False, index=True
    )
    template_id: Mapped[str] = mapped_column(
        String, ForeignKey("workflow_template.id", ondelete="CASCADE"), nullable=False
    )
    current_stage_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("workflow_stage.id", ondelete="SET NULL"), nullable=True
    )
    overall_progress: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0")
    )
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, server_default=text("'not_started'")
    )
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "application_id", "template_id", name="uq_workflow_progress_application_template"
        ),
    )
