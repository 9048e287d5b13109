"""
transfer.py — Decide copy direction and hand the work to the object store.

Flow for one invocation:
    parse -> validate direction -> delegate to store -> report

Exactly one side of a copy must be a remote path (s3:bucket:key). Every
operation is a single attempt on a single object; retries and multipart
handling belong to the store.
"""

# ── Stdlib imports ─────────────────────────────────────────────────────────────
import enum
import os
from dataclasses import dataclass

from s3tools.config import ToolConfig
from s3tools.errors import InvalidOperation, InvalidPath, LocalIOError
from s3tools.log import get_logger
from s3tools.paths import RemotePath, is_remote_path, parse_remote_path
from s3tools.store import REDUCED_REDUNDANCY, ObjectStore

log = get_logger("transfer")


class Direction(enum.Enum):
    DOWNLOAD = "download"
    UPLOAD = "upload"


@dataclass(frozen=True)
class TransferPlan:
    direction: Direction
    remote: RemotePath
    local: str


# ──────────────────────────────────────────────────────────────────────────────
# Direction
# ──────────────────────────────────────────────────────────────────────────────
def plan_copy(source: str, destination: str) -> TransferPlan:
    """
    Work out whether ``source -> destination`` is a download or an upload.

    Raises InvalidOperation when both or neither side is remote.
    """
    src_remote = is_remote_path(source)
    dst_remote = is_remote_path(destination)

    if src_remote and not dst_remote:
        return TransferPlan(Direction.DOWNLOAD, parse_remote_path(source), destination)
    if dst_remote and not src_remote:
        return TransferPlan(Direction.UPLOAD, parse_remote_path(destination), source)

    if src_remote:
        raise InvalidOperation(
            f"Both '{source}' and '{destination}' are s3 paths; one side must be local"
        )
    raise InvalidOperation(
        f"Neither '{source}' nor '{destination}' is an s3 path; one side must be s3:bucket:/path"
    )


# ──────────────────────────────────────────────────────────────────────────────
# Local path helpers
# ──────────────────────────────────────────────────────────────────────────────
def resolve_download_target(remote: RemotePath, local_path: str) -> str:
    """
    Return the file to write for a download.

    A destination that is an existing directory, or ends with a separator,
    receives the key's final path segment as its file name.
    """
    is_dir = os.path.isdir(local_path) or local_path.endswith(("/", os.sep))
    if not is_dir:
        return local_path

    name = remote.basename
    if not name:
        raise InvalidPath(
            f"Cannot derive a file name from '{remote}' to place in directory '{local_path}'"
        )
    return os.path.join(local_path, name)


def resolve_upload_key(remote: RemotePath, local_path: str) -> RemotePath:
    # "s3:bucket:/folder/" means "into folder", keep the local file name
    if remote.key.endswith("/"):
        return remote.with_key(remote.key + os.path.basename(local_path))
    return remote


# ──────────────────────────────────────────────────────────────────────────────
# Operations
# ──────────────────────────────────────────────────────────────────────────────
def download(remote: RemotePath, local_path: str, store: ObjectStore) -> str:
    """
    Download ``remote`` to ``local_path`` and return the path written.

    Raises LocalIOError if the local file can't be created and
    RemoteTransferError if the object can't be fetched. A failed fetch
    removes the partially written file.
    """
    target = resolve_download_target(remote, local_path)

    try:
        writer = open(target, "wb")
    except OSError as exc:
        raise LocalIOError(f"Failed to open file '{target}', error was: {exc}") from exc

    try:
        with writer:
            nbytes = store.get(remote.bucket, remote.key, writer)
    except Exception:
        _discard(target)
        raise

    log.debug(f"Downloaded '{remote}', {nbytes} bytes retrieved")
    return target


def upload(
    local_path: str,
    remote: RemotePath,
    store: ObjectStore,
    reduced_redundancy: bool = False,
) -> str:
    """
    Upload ``local_path`` to ``remote`` and return the object location.

    Raises LocalIOError if the local file isn't readable and
    RemoteTransferError if the store rejects the write.
    """
    remote = resolve_upload_key(remote, local_path)
    storage_class = REDUCED_REDUNDANCY if reduced_redundancy else None

    try:
        reader = open(local_path, "rb")
    except OSError as exc:
        raise LocalIOError(f"Failed to open file '{local_path}', error was: {exc}") from exc

    with reader:
        location = store.put(remote.bucket, remote.key, reader, storage_class=storage_class)

    log.debug(f"Post-upload file destination URL:='{location}'")
    return location


def copy(source: str, destination: str, store: ObjectStore, config: ToolConfig) -> TransferPlan:
    """Copy one file between the local filesystem and the object store."""
    plan = plan_copy(source, destination)

    if plan.direction is Direction.DOWNLOAD:
        log.debug("Calling download")
        download(plan.remote, plan.local, store)
    else:
        log.debug(f"Calling upload (reduced_redundancy={config.reduced_redundancy})")
        upload(plan.local, plan.remote, store, reduced_redundancy=config.reduced_redundancy)

    return plan


def remove(path: str, store: ObjectStore) -> None:
    """Delete the object named by ``path``; it must be an s3 path."""
    target = parse_remote_path(path)
    log.debug("Calling remove")
    result = store.delete(target.bucket, target.key)
    log.debug(f"Removed item '{result}'")


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        log.warning(f"Could not remove partial download '{path}': {exc}")
