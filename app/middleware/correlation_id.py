"""Correlation ID middleware.

The correlation id keys every log record of a request (see
app.shared.telemetry.logging) and is copied into activity log rows and
cascade failure details. It is forwarded from X-Correlation-ID when safe,
else taken from the request id, else generated. The caller's IP address and
user agent are recorded alongside it. Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

from app.middleware._headers import get_header, new_id, sanitize_id
from app.shared.context import clear_request_context, set_client_info, set_correlation_id


def _client_ip(scope: dict) -> str | None:
    """First hop of X-Forwarded-For, else the socket peer."""
    forwarded = get_header(scope, "x-forwarded-for")
    if forwarded and forwarded.split(",")[0].strip():
        return forwarded.split(",")[0].strip()
    client = scope.get("client")
    return client[0] if client else None


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Bind the correlation id and client info to the request context. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        correlation_id = (
            sanitize_id(get_header(scope, header_name))
            or state.get("request_id")
            or new_id()
        )
        state["correlation_id"] = correlation_id
        set_correlation_id(correlation_id)
        set_client_info(_client_ip(scope), get_header(scope, "user-agent"))

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((header_name.encode(), correlation_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            clear_request_context()

    return asgi_app
