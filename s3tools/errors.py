"""
errors.py — Error taxonomy shared by s3cp / s3rm.

Every failure is terminal for the current invocation; the CLI maps any
S3ToolsError to exit code 1.
"""


class S3ToolsError(Exception):
    """Base class for all errors surfaced to the user."""


class InvalidPath(S3ToolsError):
    """A path is not in the form s3:bucket:/path/to/file."""


class InvalidOperation(S3ToolsError):
    """Copy direction is ambiguous (both or neither side is remote)."""


class LocalIOError(S3ToolsError):
    """The local file could not be opened, created or written."""


class RemoteTransferError(S3ToolsError):
    """The object store rejected a get/put/delete call."""
