"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    AuthenticationException,
    CascadeStepFailedException,
    CaseworkException,
    DependencyFailureException,
    ForbiddenException,
    InvalidTransitionException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.infrastructure.exceptions import StorageBatchDeleteError, StoragePermissionError


def test_casework_exception_default_error_code() -> None:
    """Base CaseworkException uses class name as error_code when not provided."""
    exc = CaseworkException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CaseworkException"
    assert exc.details == {}
    assert exc.to_dict() == {"error": "CaseworkException", "message": "Something failed"}


def test_to_dict_includes_details() -> None:
    exc = CaseworkException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="archived")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "archived"}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_forbidden_exception_keeps_policy_reason() -> None:
    exc = ForbiddenException("Only administrators can delete.", action="delete", status="submitted")
    assert exc.message == "Only administrators can delete."
    assert exc.error_code == "FORBIDDEN"
    assert exc.details == {"action": "delete", "status": "submitted"}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("application", "app-1")
    assert exc.message == "application not found: app-1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "application", "resource_id": "app-1"}


def test_invalid_transition() -> None:
    exc = InvalidTransitionException("draft", "approved", ["started"])
    assert exc.message == "Invalid status transition"
    assert exc.valid_transitions == ["started"]
    assert exc.details["validTransitions"] == ["started"]


def test_dependency_failure() -> None:
    exc = DependencyFailureException("object_store", "timeout")
    assert exc.error_code == "DEPENDENCY_FAILURE"
    assert exc.details == {"dependency": "object_store"}
    assert "timeout" in exc.message


def test_cascade_step_failed() -> None:
    exc = CascadeStepFailedException(
        application_id="app-1",
        step="delete_tasks",
        completed_steps=["resolve_conversations"],
        correlation_id="cid",
        cause="deadlock detected",
    )
    assert exc.error_code == "CASCADE_STEP_FAILED"
    assert "safe to retry" in exc.message
    assert exc.details["completedSteps"] == ["resolve_conversations"]
    assert exc.details["correlationId"] == "cid"


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SQL_NOT_CONFIGURED"


def test_storage_exceptions_are_casework_exceptions() -> None:
    batch = StorageBatchDeleteError({"a.pdf": "denied"}, deleted=2)
    assert isinstance(batch, CaseworkException)
    assert batch.details == {"failed": {"a.pdf": "denied"}, "deleted": 2}
    perm = StoragePermissionError("../etc/passwd", "path_validation")
    assert perm.error_code == "STORAGE_PERMISSION_ERROR"
