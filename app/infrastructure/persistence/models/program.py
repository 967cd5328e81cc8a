"""CRBI program ORM model (global reference data, not firm-scoped)."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class CrbiProgram(CuidMixin, TimestampMixin, Base):
    """Citizenship/residency-by-investment program. Table: crbi_program."""

    __tablename__ = "crbi_program"

    country_code: Mapped[str] = mapped_column(String(2), nullable=False)
    country_name: Mapped[str] = mapped_column(String, nullable=False)
    program_type: Mapped[str] = mapped_column(String(32), nullable=False)
    program_name: Mapped[str] = mapped_column(String, nullable=False)
    min_investment: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    processing_time_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
