"""Application-owned document models: custom requirements, uploads, reviews.

Foreign keys to application rows carry no ON DELETE action; removal is
ordered by the deletion cascade.
"""

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    TimestampMixin,
)


class CustomDocumentRequirement(CuidMixin, TimestampMixin, Base):
    """Per-application requirement added by an advisor on top of the template."""

    __tablename__ = "custom_document_requirement"

    application_id: Mapped[str] = mapped_column(
        String, ForeignKey("application.id"), nullable=False, index=True
    )
    stage_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("workflow_stage.id", ondelete="SET NULL"), nullable=True
    )
    document_name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    created_by_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )


class ApplicationDocument(CuidMixin, TimestampMixin, Base):
    """Uploaded file. file_path is the object-store key."""

    __tablename__ = "application_document"

    application_id: Mapped[str] = mapped_column(
        String, ForeignKey("application.id"), nullable=False, index=True
    )
    document_requirement_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("document_requirement.id", ondelete="SET NULL"), nullable=True, index=True
    )
    custom_requirement_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("custom_document_requirement.id"), nullable=True
    )
    filename: Mapped[str] = mapped_column(String, nullable=False)
    file_path: Mapped[str | None] = mapped_column(String, nullable=True)
    file_size: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    mime_type: Mapped[str | None] = mapped_column(String(128), nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, server_default=text("'uploaded'")
    )
    uploaded_by_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class DocumentReview(CuidMixin, CreatedAtMixin, Base):
    """One review decision; the latest by (reviewed_at, id) is the document's status."""

    __tablename__ = "document_review"

    document_id: Mapped[str] = mapped_column(
        String, ForeignKey("application_document.id"), nullable=False
    )
    reviewer_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    reviewed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("ix_document_review_document_reviewed", "document_id", "reviewed_at"),
    )
