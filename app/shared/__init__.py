"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import (
    RequestContext,
    clear_request_context,
    get_correlation_id,
    get_request_context,
    set_client_info,
    set_correlation_id,
)
from app.shared.utils import (
    ensure_utc,
    generate_cuid,
    isoformat_utc,
    new_correlation_id,
    percentage,
    utc_now,
)

__all__ = [
    "RequestContext",
    "clear_request_context",
    "get_correlation_id",
    "get_request_context",
    "set_client_info",
    "set_correlation_id",
    "generate_cuid",
    "new_correlation_id",
    "utc_now",
    "ensure_utc",
    "isoformat_utc",
    "percentage",
]
