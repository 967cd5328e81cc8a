"""Bearer-token principals (composition root).

Tokens are treated as pre-validated by the identity service: signature and
expiry are checked, then the claims become an AdvisorPrincipal or a
ClientPrincipal. Anything else is a 401.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.principal import AdvisorPrincipal, ClientPrincipal
from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import (
    advisor_from_claims,
    client_from_claims,
    verify_token,
)

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


def _claims(credentials: HTTPAuthorizationCredentials | None) -> dict:
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Not authenticated")
    try:
        return verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise AuthenticationException("Invalid or expired token") from e


async def get_current_advisor(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> AdvisorPrincipal:
    """Firm user from the bearer token; 401 if missing, invalid, or a client token."""
    payload = _claims(credentials)
    try:
        return advisor_from_claims(payload)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e


async def get_current_client(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> ClientPrincipal:
    """Client portal user from the bearer token; 401 unless kind=client."""
    payload = _claims(credentials)
    try:
        return client_from_claims(payload)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e


CurrentAdvisor = Annotated[AdvisorPrincipal, Depends(get_current_advisor)]
CurrentClient = Annotated[ClientPrincipal, Depends(get_current_client)]
