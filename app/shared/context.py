"""Request context management using contextvars.

Async-safe storage for request-scoped data: the correlation id that keys
structured log records, the request id, and client network details stamped
onto activity log rows.

Usage:
    set_correlation_id("abc")
    correlation_id = get_correlation_id()
"""

from contextvars import ContextVar
from dataclasses import dataclass

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)
_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_ip_address: ContextVar[str | None] = ContextVar("ip_address", default=None)
_user_agent: ContextVar[str | None] = ContextVar("user_agent", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request context."""

    correlation_id: str | None
    request_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


def set_correlation_id(value: str | None) -> None:
    """Set the correlation id for the current task (middleware or detached job)."""
    _correlation_id.set(value)


def get_correlation_id() -> str | None:
    """Return the current correlation id, or None outside a request."""
    return _correlation_id.get()


def set_request_id(value: str | None) -> None:
    _request_id.set(value)


def get_request_id() -> str | None:
    return _request_id.get()


def set_client_info(ip_address: str | None, user_agent: str | None) -> None:
    """Record caller network details for audit rows."""
    _ip_address.set(ip_address)
    _user_agent.set(user_agent)


def get_request_context() -> RequestContext:
    """Return a snapshot of the current request context.

    Detached jobs capture this at submit time and restore the correlation id
    when they run, so their log records join the originating request.
    """
    return RequestContext(
        correlation_id=_correlation_id.get(),
        request_id=_request_id.get(),
        ip_address=_ip_address.get(),
        user_agent=_user_agent.get(),
    )


def clear_request_context() -> None:
    """Reset all request-scoped values."""
    _correlation_id.set(None)
    _request_id.set(None)
    _ip_address.set(None)
    _user_agent.set(None)
