"""Builds the object store that holds uploaded application documents.

The lifecycle engine only removes files (deletion cleanup), so a backend is
anything satisfying StorageProtocol. boto3 is imported only when the s3
backend is selected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from app.infrastructure.external.storage.protocol import StorageProtocol

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def _local(settings: Settings) -> StorageProtocol:
    from app.infrastructure.external.storage.local_storage import LocalStorageService

    if not settings.storage_root:
        raise ValueError("STORAGE_ROOT required for local backend")
    return LocalStorageService(storage_root=settings.storage_root)


def _s3(settings: Settings) -> StorageProtocol:
    from app.infrastructure.external.storage.s3_storage import S3StorageService

    if not settings.s3_bucket:
        raise ValueError("S3_BUCKET required for s3 backend")
    secret = settings.s3_secret_key
    return S3StorageService(
        bucket=settings.s3_bucket,
        region=settings.s3_region,
        endpoint_url=settings.s3_endpoint_url,
        access_key=settings.s3_access_key,
        secret_key=secret.get_secret_value() if secret else None,
    )


BACKENDS: dict[str, Callable[[Settings], StorageProtocol]] = {
    "local": _local,
    "s3": _s3,
}


class StorageFactory:
    @staticmethod
    def create_storage_service(settings: Settings | None = None) -> StorageProtocol:
        """Backend named by settings.storage_backend.

        Raises:
            ValueError: Unknown backend or missing backend config.
        """
        if settings is None:
            from app.core.config import get_settings

            settings = get_settings()
        name = settings.storage_backend.lower()
        builder = BACKENDS.get(name)
        if builder is None:
            raise ValueError(
                f"Unknown storage backend: {name}. Supported: {', '.join(sorted(BACKENDS))}"
            )
        storage = builder(settings)
        logger.info("Document storage backend: %s", name)
        return storage
