"""Tests for bearer token decoding into principals."""

from datetime import timedelta

import pytest

from app.domain.enums import UserRole
from app.infrastructure.security.jwt import (
    advisor_from_claims,
    client_from_claims,
    create_access_token,
    create_advisor_token,
    create_client_token,
    verify_token,
)


def test_advisor_token_round_trip() -> None:
    payload = verify_token(create_advisor_token("user-1", "firm-1", UserRole.ADMIN, "Dana"))
    principal = advisor_from_claims(payload)
    assert principal.id == "user-1"
    assert principal.firm_id == "firm-1"
    assert principal.is_admin
    assert principal.name == "Dana"


def test_client_token_rejected_on_advisor_routes() -> None:
    payload = verify_token(create_client_token("client-1", "firm-1"))
    with pytest.raises(ValueError, match="Client token"):
        advisor_from_claims(payload)
    assert client_from_claims(payload).client_id == "client-1"


def test_advisor_token_rejected_on_client_routes() -> None:
    payload = verify_token(create_advisor_token("user-1", "firm-1", "advisor"))
    with pytest.raises(ValueError, match="Advisor token"):
        client_from_claims(payload)


def test_unknown_role_rejected() -> None:
    payload = verify_token(create_advisor_token("user-1", "firm-1", "superuser"))
    with pytest.raises(ValueError, match="Unknown role"):
        advisor_from_claims(payload)


def test_expired_token_rejected() -> None:
    token = create_advisor_token(
        "user-1", "firm-1", "advisor", expires_delta=timedelta(seconds=-30)
    )
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_missing_firm_claim_rejected() -> None:
    token = create_access_token({"sub": "user-1", "role": "advisor"})
    with pytest.raises(ValueError, match="firm_id"):
        verify_token(token)


def test_garbage_rejected() -> None:
    with pytest.raises(ValueError):
        verify_token("not-a-jwt")
