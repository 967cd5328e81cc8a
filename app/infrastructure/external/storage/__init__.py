"""Storage: local filesystem and S3-compatible backends.

StorageFactory picks the backend from app.core.config; boto3 is only
imported when the s3 backend is selected.
"""

from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.protocol import StorageProtocol

__all__ = [
    "StorageFactory",
    "StorageProtocol",
]
