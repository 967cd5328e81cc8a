"""Activity log ORM model. Append-only record of lifecycle actions."""

from datetime import datetime
from typing import Any

from sqlalchemy import Connection, DateTime, ForeignKey, Index, String, Text, event, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from app.infrastructure.persistence.database import Base
from app.shared.utils.generators import generate_cuid


class ActivityLog(Base):
    """Who did what to which entity, and when.

    application_id is NULL for firm-scoped entries such as the pre-deletion
    snapshot, which therefore outlive the application's own rows.
    """

    __tablename__ = "activity_log"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    firm_id: Mapped[str] = mapped_column(
        String, ForeignKey("firm.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    client_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("client.id", ondelete="SET NULL"), nullable=True
    )
    application_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("application.id"), nullable=True
    )
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(64), nullable=False)
    entity_id: Mapped[str] = mapped_column(String, nullable=False)
    old_values: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    new_values: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String, nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    correlation_id: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("now()"), nullable=False
    )

    __table_args__ = (
        Index("ix_activity_log_application_action", "application_id", "action", "created_at"),
    )


@event.listens_for(ActivityLog, "before_update")
def _prevent_activity_log_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: ActivityLog
) -> None:
    raise ValueError("Activity log entries are immutable and cannot be updated.")


@event.listens_for(ActivityLog, "before_delete")
def _prevent_activity_log_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: ActivityLog
) -> None:
    """Unit-of-work deletes are refused; the deletion cascade uses a bulk statement."""
    raise ValueError("Activity log entries cannot be deleted individually.")
