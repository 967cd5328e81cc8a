"""Local filesystem storage with path validation."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles.os

from app.infrastructure.exceptions import (
    StorageBatchDeleteError,
    StorageDeleteError,
    StoragePermissionError,
)

logger = logging.getLogger(__name__)


class LocalStorageService:
    """Files under storage_root; refs are relative paths.

    Paths are validated against storage_root. Empty parent directories are
    pruned after a delete.
    """

    def __init__(self, storage_root: str) -> None:
        self.storage_root = Path(storage_root).resolve()

    def _get_full_path(self, storage_ref: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / storage_ref).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(storage_ref, "path_validation") from e
        return full_path

    def _prune_empty_parents(self, file_path: Path) -> None:
        parent = file_path.parent
        while parent != self.storage_root:
            try:
                if any(parent.iterdir()):
                    break
                parent.rmdir()
            except OSError:
                break
            parent = parent.parent

    async def delete(self, storage_ref: str) -> bool:
        """Delete file. Returns True if deleted, False if it was already gone."""
        file_path = self._get_full_path(storage_ref)
        try:
            await aiofiles.os.remove(file_path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageDeleteError(storage_ref, str(e)) from e
        self._prune_empty_parents(file_path)
        return True

    async def batch_delete(self, storage_refs: list[str]) -> int:
        deleted = 0
        failed: dict[str, str] = {}
        for ref in storage_refs:
            try:
                if await self.delete(ref):
                    deleted += 1
            except (StorageDeleteError, StoragePermissionError) as e:
                failed[ref] = e.message
        if failed:
            raise StorageBatchDeleteError(failed, deleted)
        logger.debug("Deleted %d of %d local files", deleted, len(storage_refs))
        return deleted

    async def exists(self, storage_ref: str) -> bool:
        try:
            return await aiofiles.os.path.exists(self._get_full_path(storage_ref))
        except StoragePermissionError:
            return False
