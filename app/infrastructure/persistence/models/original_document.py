"""Original (courier-shipped) document tracking."""

from sqlalchemy import ForeignKey, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class OriginalDocument(CuidMixin, TimestampMixin, Base):
    __tablename__ = "original_document"

    application_id: Mapped[str] = mapped_column(
        String, ForeignKey("application.id"), nullable=False, index=True
    )
    document_name: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, server_default=text("'requested'")
    )
    courier: Mapped[str | None] = mapped_column(String, nullable=True)
    tracking_number: Mapped[str | None] = mapped_column(String, nullable=True)
