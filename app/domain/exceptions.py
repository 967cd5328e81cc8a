"""Domain exceptions for advisory casework.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. The
presentation layer maps them to HTTP responses in exception handlers
(app.core.exception_handlers) by error_code.
"""

from typing import Any


class CaseworkException(Exception):
    """Base exception for all casework application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id, validTransitions).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(CaseworkException):
    """Raised when input is malformed or an operation is not allowed for the record's state."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CaseworkException):
    """Raised when the bearer token is missing, invalid, or of the wrong kind."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ForbiddenException(CaseworkException):
    """Raised when role, ownership, or a status gate blocks the operation.

    The message carries the specific policy reason so clients can show it as-is.
    """

    def __init__(
        self,
        message: str,
        action: str | None = None,
        status: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if action:
            details["action"] = action
        if status:
            details["status"] = status
        super().__init__(message, "FORBIDDEN", details)


class AccessDeniedException(ForbiddenException):
    """Raised when a record exists but belongs to another firm."""

    def __init__(self, action: str | None = None) -> None:
        super().__init__("Access denied", action=action)


class ResourceNotFoundException(CaseworkException):
    """Raised when a requested resource is absent or outside the caller's scope.

    Workflow and client portal scoping failures are reported as not found so
    that the existence of other firms' records is not leaked.
    """

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class InvalidTransitionException(CaseworkException):
    """Raised when the target status is not reachable from the current status."""

    def __init__(
        self,
        current_status: str,
        target_status: str,
        valid_transitions: list[str],
    ) -> None:
        super().__init__(
            "Invalid status transition",
            "INVALID_TRANSITION",
            {
                "currentStatus": current_status,
                "requestedStatus": target_status,
                "validTransitions": valid_transitions,
            },
        )
        self.valid_transitions = valid_transitions


class DependencyFailureException(CaseworkException):
    """Raised by best-effort collaborators (object store, automation trigger).

    Callers in the lifecycle engine catch and log this; it is never surfaced
    from a status change or deletion.
    """

    def __init__(self, dependency: str, message: str) -> None:
        super().__init__(
            f"{dependency} failed: {message}",
            "DEPENDENCY_FAILURE",
            {"dependency": dependency},
        )


class CascadeStepFailedException(CaseworkException):
    """Raised when a cascading deletion step fails mid-sequence.

    Completed steps are not rolled back; retrying the deletion is safe.
    """

    def __init__(
        self,
        application_id: str,
        step: str,
        completed_steps: list[str],
        correlation_id: str | None,
        cause: str,
    ) -> None:
        super().__init__(
            f"Application deletion failed at step '{step}'; deletion may be partially "
            "applied and is safe to retry",
            "CASCADE_STEP_FAILED",
            {
                "applicationId": application_id,
                "step": step,
                "completedSteps": completed_steps,
                "correlationId": correlation_id,
                "cause": cause,
            },
        )
        self.step = step
        self.completed_steps = completed_steps


class SqlNotConfiguredException(CaseworkException):
    """Raised when the SQL engine cannot be created (DATABASE_URL missing)."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SQL_NOT_CONFIGURED",
        )
