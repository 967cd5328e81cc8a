"""Storage service interface (port) for uploaded document bytes."""

from typing import Protocol


class IStorageService(Protocol):
    """Subset of the object-store contract the lifecycle engine consumes."""

    async def delete(self, storage_ref: str) -> bool:
        """Delete one object. Returns True if deleted, False if it did not exist."""

    async def batch_delete(self, storage_refs: list[str]) -> int:
        """Delete many objects; returns how many were removed. Raises StorageDeleteError on failure."""
