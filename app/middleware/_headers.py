"""Header helpers shared by the raw ASGI middlewares."""

import re
import uuid

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
ID_MAX_LENGTH = 64
ID_ALLOWED_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$")


def get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_id(raw: str | None) -> str | None:
    """Client-supplied id if it is log-safe, else None."""
    if not raw:
        return None
    value = raw.strip()
    return value if ID_ALLOWED_PATTERN.match(value) else None


def new_id() -> str:
    return uuid.uuid4().hex
