"""Tests for the local filesystem storage backend used by file cleanup."""

import pytest

from app.infrastructure.exceptions import StorageBatchDeleteError, StoragePermissionError
from app.infrastructure.external.storage.local_storage import LocalStorageService


def _write(root, ref: str) -> None:
    path = root / ref
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"%PDF-1.7")


async def test_delete_removes_file_and_empty_parents(tmp_path) -> None:
    storage = LocalStorageService(str(tmp_path))
    _write(tmp_path, "firm-1/app-1/passport.pdf")

    assert await storage.delete("firm-1/app-1/passport.pdf") is True
    assert not (tmp_path / "firm-1").exists()
    assert tmp_path.exists()


async def test_delete_missing_file_returns_false(tmp_path) -> None:
    storage = LocalStorageService(str(tmp_path))
    assert await storage.delete("nope.pdf") is False


async def test_path_traversal_rejected(tmp_path) -> None:
    storage = LocalStorageService(str(tmp_path / "root"))
    with pytest.raises(StoragePermissionError):
        await storage.delete("../outside.pdf")
    assert await storage.exists("../outside.pdf") is False


async def test_batch_delete_counts_removed(tmp_path) -> None:
    storage = LocalStorageService(str(tmp_path))
    _write(tmp_path, "a/1.pdf")
    _write(tmp_path, "a/2.pdf")
    assert await storage.batch_delete(["a/1.pdf", "a/2.pdf", "a/missing.pdf"]) == 2
    assert await storage.exists("a/1.pdf") is False


async def test_batch_delete_attempts_all_then_raises(tmp_path) -> None:
    storage = LocalStorageService(str(tmp_path / "root"))
    _write(tmp_path / "root", "ok.pdf")
    with pytest.raises(StorageBatchDeleteError) as exc_info:
        await storage.batch_delete(["../escape.pdf", "ok.pdf"])
    assert exc_info.value.deleted == 1
    assert list(exc_info.value.failed) == ["../escape.pdf"]
    assert not (tmp_path / "root" / "ok.pdf").exists()


def test_factory_builds_local_backend(tmp_path) -> None:
    from app.core.config import get_settings
    from app.infrastructure.external.storage.factory import StorageFactory

    settings = get_settings().model_copy(update={"storage_root": str(tmp_path)})
    storage = StorageFactory.create_storage_service(settings)
    assert isinstance(storage, LocalStorageService)
    assert storage.storage_root == tmp_path.resolve()


def test_factory_rejects_unknown_backend() -> None:
    from app.core.config import get_settings
    from app.infrastructure.external.storage.factory import StorageFactory

    settings = get_settings().model_copy(update={"storage_backend": "ftp"})
    with pytest.raises(ValueError, match="Unknown storage backend"):
        StorageFactory.create_storage_service(settings)
