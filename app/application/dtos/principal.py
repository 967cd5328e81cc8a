"""Authenticated principals (resolved from bearer tokens by the API layer)."""

from dataclasses import dataclass

from app.domain.enums import UserRole


@dataclass(frozen=True)
class AdvisorPrincipal:
    """Firm user acting on applications (admin, advisor, or junior)."""

    id: str
    firm_id: str
    role: UserRole
    name: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class ClientPrincipal:
    """Client portal user; may only read applications they own."""

    client_id: str
    firm_id: str
