import logging

import pytest

from s3tools import store as store_mod
from s3tools.errors import RemoteTransferError
from s3tools.log import LOGGER_NAME
from s3tools.store import s3_uri


class FakeStore:
    """In-memory ObjectStore; records calls and file handles it was given."""

    def __init__(self):
        self.objects = {}
        self.storage_classes = {}
        self.handles = []
        self.fail = False
        self.partial = b""

    def get(self, bucket, key, fileobj):
        self.handles.append(fileobj)
        if self.fail:
            fileobj.write(self.partial)
            raise RemoteTransferError(f"Failed to download {s3_uri(bucket, key)}")
        try:
            data = self.objects[(bucket, key)]
        except KeyError:
            raise RemoteTransferError(f"Failed to download {s3_uri(bucket, key)}: NoSuchKey")
        fileobj.write(data)
        return len(data)

    def put(self, bucket, key, fileobj, storage_class=None):
        self.handles.append(fileobj)
        if self.fail:
            raise RemoteTransferError(f"Failed to upload to {s3_uri(bucket, key)}")
        self.objects[(bucket, key)] = fileobj.read()
        self.storage_classes[(bucket, key)] = storage_class
        return s3_uri(bucket, key)

    def delete(self, bucket, key):
        if self.fail:
            raise RemoteTransferError(f"Failed to remove {s3_uri(bucket, key)}")
        self.objects.pop((bucket, key), None)
        return {"ResponseMetadata": {"HTTPStatusCode": 204}}


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def cli_store(monkeypatch, fake_store):
    """Route the CLIs' store factory to the fake; exposes the configs it saw."""
    fake_store.configs = []

    def _build(config):
        fake_store.configs.append(config)
        return fake_store

    monkeypatch.setattr(store_mod, "build_store", _build)
    monkeypatch.delenv("S3TOOLS_REGION", raising=False)
    monkeypatch.delenv("S3TOOLS_ENDPOINT_URL", raising=False)
    return fake_store


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
    log.propagate = True
