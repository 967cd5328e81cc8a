"""JWT creation and verification for advisor and client principals.

Tokens are issued by the identity service; this module decodes them into
the principals the use cases authorize against. Token creation is kept for
tests and local tooling (scripts/seed_dev_data.py).
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.application.dtos.principal import AdvisorPrincipal, ClientPrincipal
from app.core.config import get_settings
from app.domain.enums import UserRole

CLIENT_TOKEN_KIND = "client"


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Encode claims with an exp (settings.access_token_expire_minutes by default)."""
    settings = get_settings()
    to_encode = data.copy()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + ttl
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def create_advisor_token(
    user_id: str,
    firm_id: str,
    role: UserRole | str,
    name: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    claims: dict[str, Any] = {
        "sub": user_id,
        "firm_id": firm_id,
        "role": role.value if isinstance(role, UserRole) else role,
    }
    if name:
        claims["name"] = name
    return create_access_token(claims, expires_delta)


def create_client_token(
    client_id: str, firm_id: str, expires_delta: timedelta | None = None
) -> str:
    return create_access_token(
        {"sub": client_id, "client_id": client_id, "firm_id": firm_id, "kind": CLIENT_TOKEN_KIND},
        expires_delta,
    )


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Raises:
        ValueError: If token is invalid, expired, or missing exp/sub/firm_id.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    for claim in ("sub", "firm_id"):
        if not payload.get(claim):
            raise ValueError(f"Token missing required claim: {claim}")
    return payload


def is_client_token(payload: dict[str, Any]) -> bool:
    return payload.get("kind") == CLIENT_TOKEN_KIND


def advisor_from_claims(payload: dict[str, Any]) -> AdvisorPrincipal:
    """Raises ValueError for client tokens or an unknown role."""
    if is_client_token(payload):
        raise ValueError("Client token cannot be used on advisor routes")
    try:
        role = UserRole(payload.get("role", ""))
    except ValueError as e:
        raise ValueError(f"Unknown role claim: {payload.get('role')!r}") from e
    return AdvisorPrincipal(
        id=payload["sub"],
        firm_id=payload["firm_id"],
        role=role,
        name=payload.get("name"),
    )


def client_from_claims(payload: dict[str, Any]) -> ClientPrincipal:
    if not is_client_token(payload):
        raise ValueError("Advisor token cannot be used on client routes")
    return ClientPrincipal(
        client_id=payload.get("client_id") or payload["sub"],
        firm_id=payload["firm_id"],
    )
