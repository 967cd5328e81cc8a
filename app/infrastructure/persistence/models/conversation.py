"""Messaging models. Only the deletion cascade touches them in this service."""

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    FirmScopedModel,
)


class Conversation(FirmScopedModel, Base):
    __tablename__ = "conversation"

    application_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("application.id"), nullable=True, index=True
    )
    subject: Mapped[str | None] = mapped_column(String, nullable=True)


class Message(CuidMixin, CreatedAtMixin, Base):
    __tablename__ = "message"

    conversation_id: Mapped[str] = mapped_column(
        String, ForeignKey("conversation.id"), nullable=False, index=True
    )
    sender_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)


class MessageParticipant(CuidMixin, CreatedAtMixin, Base):
    __tablename__ = "message_participant"

    conversation_id: Mapped[str] = mapped_column(
        String, ForeignKey("conversation.id"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("conversation_id", "user_id", name="uq_message_participant"),
    )


class MessageNotification(CuidMixin, CreatedAtMixin, Base):
    __tablename__ = "message_notification"

    message_id: Mapped[str] = mapped_column(
        String, ForeignKey("message.id"), nullable=False, index=True
    )
    recipient_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
