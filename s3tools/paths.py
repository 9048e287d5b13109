"""
paths.py — Parse scp-style remote paths.

Remote objects are written as:

    s3:<bucket>:<key>        e.g. s3:mybucket:/folder/file.ext

The bucket is everything between the first two colons (no colons allowed),
the key is the rest of the string and may contain anything, including colons.
Anything that does not match is treated as a local filesystem path.
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import re
from dataclasses import dataclass

from s3tools.errors import InvalidPath

PREFIX = "s3"

# DOTALL so a key may contain any character, newlines included.
REMOTE_PATH_RE = re.compile(r"^s3:([^:]+):(.+)$", re.DOTALL)


@dataclass(frozen=True)
class RemotePath:
    """A bucket/key pair parsed from an s3:bucket:key string."""

    bucket: str
    key: str

    def __post_init__(self):
        if not self.bucket or not self.key or ":" in self.bucket:
            raise InvalidPath(
                f"Invalid bucket {self.bucket!r} / key {self.key!r}, "
                "must be in the form s3:bucket:/path/to/file"
            )

    @property
    def basename(self) -> str:
        # "" when the key names a folder (trailing slash)
        return self.key.rsplit("/", 1)[-1]

    def with_key(self, key: str) -> "RemotePath":
        return RemotePath(bucket=self.bucket, key=key)

    def __str__(self) -> str:
        return f"{PREFIX}:{self.bucket}:{self.key}"


def _match(s):
    if not isinstance(s, str):
        return None
    return REMOTE_PATH_RE.fullmatch(s)


def is_remote_path(s) -> bool:
    """Return True if ``s`` is a well-formed remote path."""
    return _match(s) is not None


def parse_remote_path(s) -> RemotePath:
    """
    Split ``s`` into a RemotePath.

    Raises InvalidPath when the string does not match, or when the match is
    missing a bucket or a key.
    """
    m = _match(s)
    if m is None or m.lastindex != 2:
        raise InvalidPath(
            f"The path '{s}' is invalid, must be in the form s3:bucket:/path/to/file"
        )

    bucket, key = m.group(1), m.group(2)
    if not bucket or not key:
        raise InvalidPath(
            f"The path '{s}' is invalid, must be in the form s3:bucket:/path/to/file"
        )

    return RemotePath(bucket=bucket, key=key)
