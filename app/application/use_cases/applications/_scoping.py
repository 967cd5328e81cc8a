"""Firm-scoped application loading shared by the lifecycle use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.exceptions import AccessDeniedException, ResourceNotFoundException

if TYPE_CHECKING:
    from app.application.dtos.application import ApplicationResult
    from app.application.interfaces.repositories import IApplicationRepository


async def load_application_in_firm(
    application_repo: IApplicationRepository,
    application_id: str,
    firm_id: str,
    action: str | None = None,
) -> ApplicationResult:
    """Return the application.

    Raises:
        ResourceNotFoundException: No row with that id.
        AccessDeniedException: The row belongs to another firm.
    """
    application = await application_repo.get_by_id(application_id)
    if application is None:
        raise ResourceNotFoundException("application", application_id)
    if application.firm_id != firm_id:
        raise AccessDeniedException(action=action)
    return application


def append_internal_note(existing: str | None, stamped_at: str, notes: str | None) -> str | None:
    """Append "[<timestamp>] <notes>" as a new line; unchanged when notes is empty."""
    if not notes or not notes.strip():
        return existing
    entry = f"[{stamped_at}] {notes.strip()}"
    return f"{existing}\n{entry}" if existing else entry
