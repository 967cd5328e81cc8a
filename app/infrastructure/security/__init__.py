"""Security: JWT decoding into advisor and client principals."""

from app.infrastructure.security.jwt import (
    advisor_from_claims,
    client_from_claims,
    create_access_token,
    create_advisor_token,
    create_client_token,
    verify_token,
)

__all__ = [
    "advisor_from_claims",
    "client_from_claims",
    "create_access_token",
    "create_advisor_token",
    "create_client_token",
    "verify_token",
]
