"""Request ID middleware.

Generates or forwards X-Request-ID, stores it on scope state and in the
request context, and echoes it on the response. Client-provided values are
sanitized to prevent log injection. Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

from app.middleware._headers import get_header, new_id, sanitize_id
from app.shared.context import set_request_id


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward X-Request-ID on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_id(get_header(scope, header_name)) or new_id()
        scope.setdefault("state", {})["request_id"] = request_id
        set_request_id(request_id)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((header_name.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
