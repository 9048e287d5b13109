"""
store.py — The object-store collaborator used by the transfer layer.

S3ObjectStore is a thin wrapper over a boto3 S3 client. All multipart
chunking, retries and checksums happen inside boto3's managed transfer
(download_fileobj / upload_fileobj); nothing here retries.

Dependencies:
  - boto3 / botocore (AWS SDK for Python), s3transfer (its managed transfer layer)
  - AWS credentials must be configured in environment or via ~/.aws/credentials
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
from typing import Any, BinaryIO, Dict, Optional, Protocol

# ── External deps ─────────────────────────────────────────────────────────────
import boto3
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError
from s3transfer.exceptions import (
    RetriesExceededError,
    S3DownloadFailedError,
    S3UploadFailedError,
)

from s3tools.config import ToolConfig
from s3tools.errors import RemoteTransferError

REDUCED_REDUNDANCY = "REDUCED_REDUNDANCY"

# Everything boto3 and its managed transfer (s3transfer) raise for a failed call.
SDK_ERRORS = (
    ClientError,
    BotoCoreError,
    Boto3Error,
    RetriesExceededError,
    S3DownloadFailedError,
    S3UploadFailedError,
)


def s3_uri(bucket: str, key: str) -> str:
    """Join bucket + key into an s3:// URI string."""
    return f"s3://{bucket}/{key}"


class ObjectStore(Protocol):
    """What the transfer layer needs from a remote object store."""

    def get(self, bucket: str, key: str, fileobj: BinaryIO) -> int:
        """Stream the object into ``fileobj``; return bytes written."""
        ...

    def put(
        self,
        bucket: str,
        key: str,
        fileobj: BinaryIO,
        storage_class: Optional[str] = None,
    ) -> str:
        """Stream ``fileobj`` into the object; return its location."""
        ...

    def delete(self, bucket: str, key: str) -> Dict[str, Any]:
        """Delete the object; return the raw service response."""
        ...


# ──────────────────────────────────────────────────────────────────────────────
# boto3-backed implementation
# ──────────────────────────────────────────────────────────────────────────────
class S3ObjectStore:
    def __init__(self, client: Any):
        self._client = client

    @classmethod
    def from_config(cls, config: ToolConfig) -> "S3ObjectStore":
        try:
            session = boto3.Session(region_name=config.region)
            client = session.client("s3", endpoint_url=config.endpoint_url)
        except SDK_ERRORS as exc:
            raise RemoteTransferError(f"Failed to create S3 client, error was: {exc}") from exc
        return cls(client)

    def get(self, bucket: str, key: str, fileobj: BinaryIO) -> int:
        start = fileobj.tell()
        try:
            self._client.download_fileobj(bucket, key, fileobj)
        except SDK_ERRORS as exc:
            raise RemoteTransferError(
                f"Failed to download {s3_uri(bucket, key)}, error from S3 was: {exc}"
            ) from exc
        return fileobj.tell() - start

    def put(
        self,
        bucket: str,
        key: str,
        fileobj: BinaryIO,
        storage_class: Optional[str] = None,
    ) -> str:
        extra_args = {"StorageClass": storage_class} if storage_class else None
        try:
            self._client.upload_fileobj(fileobj, bucket, key, ExtraArgs=extra_args)
        except SDK_ERRORS as exc:
            raise RemoteTransferError(
                f"Failed to upload to {s3_uri(bucket, key)}, error from S3 was: {exc}"
            ) from exc
        return s3_uri(bucket, key)

    def delete(self, bucket: str, key: str) -> Dict[str, Any]:
        try:
            return self._client.delete_object(Bucket=bucket, Key=key)
        except SDK_ERRORS as exc:
            raise RemoteTransferError(
                f"Failed to remove {s3_uri(bucket, key)}, error from S3 was: {exc}"
            ) from exc


def build_store(config: ToolConfig) -> ObjectStore:
    """Factory used by the CLIs; tests monkeypatch this."""
    return S3ObjectStore.from_config(config)
