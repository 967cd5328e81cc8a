"""Firm (tenant) and firm user ORM models."""

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    FirmScopedModel,
    TimestampMixin,
)


class Firm(CuidMixin, TimestampMixin, Base):
    """Advisory firm. Table: firm."""

    __tablename__ = "firm"

    name: Mapped[str] = mapped_column(String, nullable=False)


class User(FirmScopedModel, Base):
    """Firm staff member. Table: app_user."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(
        String(16), nullable=False, server_default=text("'advisor'")
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
