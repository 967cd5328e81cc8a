"""Storage service protocol (DIP). Implementations: LocalStorageService, S3StorageService."""

from typing import Protocol


class StorageProtocol(Protocol):
    """Protocol for object storage backends (local, S3-compatible).

    Only removal is needed here: uploads happen in the document service.
    """

    async def delete(self, storage_ref: str) -> bool:
        """Delete file. Returns True if deleted, False if not found."""
        ...

    async def batch_delete(self, storage_refs: list[str]) -> int:
        """Delete many files; return how many existed and were removed.

        Missing files are not errors. Raises StorageBatchDeleteError when any
        file could not be removed, after attempting all of them.
        """
        ...

    async def exists(self, storage_ref: str) -> bool:
        """Return True if file exists."""
        ...
