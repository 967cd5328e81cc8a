"""Workflow definition ORM models: template, stage, document requirement.

Read-only configuration for the lifecycle engine (seeded per program).
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class WorkflowTemplate(CuidMixin, TimestampMixin, Base):
    """Versioned stage list for a program; the active one with the highest version applies."""

    __tablename__ = "workflow_template"

    program_id: Mapped[str] = mapped_column(
        String, ForeignKey("crbi_program.id", ondelete="CASCADE"), nullable=False, index=True
    )
    template_name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_stages: Mapped[int] = mapped_column(Integer, nullable=False)
    estimated_time_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    version: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("1"))

    __table_args__ = (
        UniqueConstraint("program_id", "version", name="uq_workflow_template_program_version"),
    )


class WorkflowStage(CuidMixin, TimestampMixin, Base):
    __tablename__ = "workflow_stage"

    template_id: Mapped[str] = mapped_column(
        String, ForeignKey("workflow_template.id", ondelete="CASCADE"), nullable=False, index=True
    )
    stage_order: Mapped[int] = mapped_column(Integer, nullable=False)
    stage_name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimated_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    can_skip: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    auto_progress: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )

    __table_args__ = (
        UniqueConstraint("template_id", "stage_order", name="uq_workflow_stage_template_order"),
    )


class DocumentRequirement(CuidMixin, TimestampMixin, Base):
    """Document a stage needs; is_required distinguishes mandatory from optional."""

    __tablename__ = "document_requirement"

    stage_id: Mapped[str] = mapped_column(
        String, ForeignKey("workflow_stage.id", ondelete="CASCADE"), nullable=False, index=True
    )
    document_name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
