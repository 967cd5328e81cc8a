"""Infrastructure exceptions for storage operations.

Storage errors extend CaseworkException so they carry an error code and
details like every other failure. The lifecycle engine only raises them
inside detached cleanup jobs, where they are retried and then logged.
"""

from app.domain.exceptions import CaseworkException


class StorageException(CaseworkException):
    """Base exception for storage operations."""


class StorageDeleteError(StorageException):
    """Object deletion failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete file: {file_path}",
            "STORAGE_DELETE_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class StorageBatchDeleteError(StorageException):
    """Some objects of a batch could not be deleted."""

    def __init__(self, failed: dict[str, str], deleted: int) -> None:
        super().__init__(
            f"Failed to delete {len(failed)} file(s); {deleted} deleted",
            "STORAGE_DELETE_ERROR",
            {"failed": failed, "deleted": deleted},
        )
        self.failed = failed
        self.deleted = deleted


class StoragePermissionError(StorageException):
    """Path escapes the storage root or access was denied."""

    def __init__(self, file_path: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {file_path}",
            "STORAGE_PERMISSION_ERROR",
            {"file_path": file_path, "operation": operation},
        )
