"""Domain layer: enums and exceptions for the application lifecycle.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    ActivityAction,
    ApplicationStatus,
    OriginalDocumentStatus,
    ReviewStatus,
    StageStatus,
    UserRole,
)
from app.domain.exceptions import (
    AuthenticationException,
    CascadeStepFailedException,
    CaseworkException,
    DependencyFailureException,
    ForbiddenException,
    InvalidTransitionException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "ActivityAction",
    "ApplicationStatus",
    "OriginalDocumentStatus",
    "ReviewStatus",
    "StageStatus",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "CascadeStepFailedException",
    "CaseworkException",
    "DependencyFailureException",
    "ForbiddenException",
    "InvalidTransitionException",
    "ResourceNotFoundException",
    "ValidationException",
]
