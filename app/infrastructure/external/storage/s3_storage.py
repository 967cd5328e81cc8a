"""S3-compatible object storage (AWS S3, Cloudflare R2, MinIO)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.infrastructure.exceptions import StorageBatchDeleteError, StorageDeleteError

logger = logging.getLogger(__name__)

# DeleteObjects accepts at most this many keys per request.
MAX_KEYS_PER_DELETE = 1000


class S3StorageService:
    """S3-compatible storage.

    Uses boto3 (sync) via asyncio.to_thread for async API.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "auto",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
    ) -> None:
        """Initialize S3 client.

        Args:
            bucket: Bucket name.
            region: Region ("auto" for R2).
            endpoint_url: Custom endpoint (R2/MinIO).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
        """
        self.bucket = bucket
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            **extra,
        )

    async def delete(self, storage_ref: str) -> bool:
        """Delete object. Returns True if it existed."""

        def _delete() -> bool:
            try:
                self._client.head_object(Bucket=self.bucket, Key=storage_ref)
            except ClientError as e:
                if e.response["Error"]["Code"] in ("404", "NoSuchKey", "NotFound"):
                    return False
                raise
            self._client.delete_object(Bucket=self.bucket, Key=storage_ref)
            return True

        try:
            return await asyncio.to_thread(_delete)
        except (ClientError, BotoCoreError) as e:
            raise StorageDeleteError(storage_ref, str(e)) from e

    async def batch_delete(self, storage_refs: list[str]) -> int:
        """DeleteObjects in chunks. S3 reports missing keys as deleted, so the count is of keys sent minus errors."""
        if not storage_refs:
            return 0

        def _delete_chunk(keys: list[str]) -> dict[str, Any]:
            return self._client.delete_objects(
                Bucket=self.bucket,
                Delete={"Objects": [{"Key": k} for k in keys], "Quiet": True},
            )

        deleted = 0
        failed: dict[str, str] = {}
        for start in range(0, len(storage_refs), MAX_KEYS_PER_DELETE):
            chunk = storage_refs[start : start + MAX_KEYS_PER_DELETE]
            try:
                response = await asyncio.to_thread(_delete_chunk, chunk)
            except (ClientError, BotoCoreError) as e:
                failed.update({k: str(e) for k in chunk})
                continue
            errors = {
                err["Key"]: err.get("Message") or err.get("Code", "unknown")
                for err in response.get("Errors", [])
            }
            failed.update(errors)
            deleted += len(chunk) - len(errors)
        if failed:
            raise StorageBatchDeleteError(failed, deleted)
        logger.debug("Deleted %d objects from bucket %s", deleted, self.bucket)
        return deleted

    async def exists(self, storage_ref: str) -> bool:
        def _exists() -> bool:
            try:
                self._client.head_object(Bucket=self.bucket, Key=storage_ref)
                return True
            except ClientError:
                return False

        return await asyncio.to_thread(_exists)
