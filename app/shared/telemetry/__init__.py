"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from app.shared.telemetry.logging import (
    CorrelationIdFilter,
    get_logger,
    setup_logging,
)
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from app.shared.telemetry.tracing import (
    add_span_attributes,
    set_span_error,
    start_step_span,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "CorrelationIdFilter",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "set_span_error",
    "start_step_span",
]
