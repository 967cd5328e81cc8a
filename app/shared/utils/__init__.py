"""Shared utilities: datetime, generators, numbers."""

from app.shared.utils.datetime import ensure_utc, isoformat_utc, utc_now
from app.shared.utils.generators import generate_cuid, new_correlation_id
from app.shared.utils.numbers import percentage

__all__ = [
    "generate_cuid",
    "new_correlation_id",
    "utc_now",
    "ensure_utc",
    "isoformat_utc",
    "percentage",
]
