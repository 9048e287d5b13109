"""s3tools — scp-style copy and remove for single S3 objects."""

from s3tools.errors import (
    InvalidOperation,
    InvalidPath,
    LocalIOError,
    RemoteTransferError,
    S3ToolsError,
)
from s3tools.paths import RemotePath, is_remote_path, parse_remote_path

__version__ = "0.1.0"

__all__ = [
    "InvalidOperation",
    "InvalidPath",
    "LocalIOError",
    "RemotePath",
    "RemoteTransferError",
    "S3ToolsError",
    "is_remote_path",
    "parse_remote_path",
]
