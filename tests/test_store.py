import io

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from s3transfer.exceptions import (
    RetriesExceededError,
    S3DownloadFailedError,
    S3UploadFailedError,
)

from s3tools import s3cp
from s3tools import store as store_mod
from s3tools.config import ToolConfig
from s3tools.errors import RemoteTransferError
from s3tools.store import REDUCED_REDUNDANCY, S3ObjectStore


def _client_error(code, operation):
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeS3Client:
    """Stands in for a boto3 S3 client; records the calls it receives."""

    def __init__(self, body=b"", error=None):
        self.body = body
        self.error = error
        self.calls = []

    def download_fileobj(self, bucket, key, fileobj):
        self.calls.append(("download_fileobj", bucket, key))
        if self.error:
            raise self.error
        fileobj.write(self.body)

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None):
        self.calls.append(("upload_fileobj", bucket, key, ExtraArgs, fileobj.read()))
        if self.error:
            raise self.error

    def delete_object(self, Bucket, Key):
        self.calls.append(("delete_object", Bucket, Key))
        if self.error:
            raise self.error
        return {"DeleteMarker": False, "ResponseMetadata": {"HTTPStatusCode": 204}}


def test_get_returns_bytes_written():
    client = FakeS3Client(body=b"0123456789")
    buf = io.BytesIO()

    n = S3ObjectStore(client).get("b", "/k", buf)

    assert n == 10
    assert buf.getvalue() == b"0123456789"
    assert client.calls == [("download_fileobj", "b", "/k")]


def test_get_wraps_client_error():
    client = FakeS3Client(error=_client_error("404", "HeadObject"))
    with pytest.raises(RemoteTransferError) as excinfo:
        S3ObjectStore(client).get("b", "/k", io.BytesIO())
    assert isinstance(excinfo.value.__cause__, ClientError)
    assert "s3://b//k" in str(excinfo.value)


def test_get_wraps_connection_error():
    client = FakeS3Client(error=EndpointConnectionError(endpoint_url="http://localhost:9"))
    with pytest.raises(RemoteTransferError):
        S3ObjectStore(client).get("b", "k", io.BytesIO())


def test_put_without_storage_class():
    client = FakeS3Client()
    location = S3ObjectStore(client).put("b", "k", io.BytesIO(b"data"))

    assert location == "s3://b/k"
    assert client.calls == [("upload_fileobj", "b", "k", None, b"data")]


def test_put_with_reduced_redundancy():
    client = FakeS3Client()
    S3ObjectStore(client).put("b", "k", io.BytesIO(b"data"), storage_class=REDUCED_REDUNDANCY)

    assert client.calls[0][3] == {"StorageClass": "REDUCED_REDUNDANCY"}


def test_put_wraps_client_error():
    client = FakeS3Client(error=_client_error("AccessDenied", "PutObject"))
    with pytest.raises(RemoteTransferError) as excinfo:
        S3ObjectStore(client).put("b", "k", io.BytesIO(b"data"))
    assert "AccessDenied" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ClientError)


@pytest.mark.parametrize(
    "error",
    [
        RetriesExceededError(ConnectionResetError("reset")),
        S3DownloadFailedError("Failed to download: reset"),
    ],
)
def test_get_wraps_transfer_errors(error):
    client = FakeS3Client(error=error)
    with pytest.raises(RemoteTransferError) as excinfo:
        S3ObjectStore(client).get("b", "k", io.BytesIO())
    assert excinfo.value.__cause__ is error


@pytest.mark.parametrize(
    "error",
    [
        RetriesExceededError(ConnectionResetError("reset")),
        S3UploadFailedError("Failed to upload: reset"),
    ],
)
def test_put_wraps_transfer_errors(error):
    client = FakeS3Client(error=error)
    with pytest.raises(RemoteTransferError) as excinfo:
        S3ObjectStore(client).put("b", "k", io.BytesIO(b"data"))
    assert excinfo.value.__cause__ is error


def test_delete_returns_response():
    client = FakeS3Client()
    result = S3ObjectStore(client).delete("b", "k")

    assert result["ResponseMetadata"]["HTTPStatusCode"] == 204
    assert client.calls == [("delete_object", "b", "k")]


def test_delete_wraps_client_error():
    client = FakeS3Client(error=_client_error("AccessDenied", "DeleteObject"))
    with pytest.raises(RemoteTransferError):
        S3ObjectStore(client).delete("b", "k")


def test_from_config_uses_region_and_endpoint():
    config = ToolConfig(region="eu-west-2", endpoint_url="http://localhost:9000")
    store = S3ObjectStore.from_config(config)

    assert store._client.meta.region_name == "eu-west-2"
    assert store._client.meta.endpoint_url == "http://localhost:9000"


def test_from_config_unknown_profile(monkeypatch, tmp_path):
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_PROFILE", "no-such-profile")

    with pytest.raises(RemoteTransferError) as excinfo:
        S3ObjectStore.from_config(ToolConfig())
    assert "no-such-profile" in str(excinfo.value)


def test_cli_reports_retries_exceeded(monkeypatch, tmp_path, capsys):
    client = FakeS3Client(error=RetriesExceededError(ConnectionResetError("reset")))
    monkeypatch.setattr(store_mod, "build_store", lambda config: S3ObjectStore(client))

    rc = s3cp.main(["s3:b:/k", str(tmp_path / "out")])

    assert rc == 1
    assert "Failed to download s3://b//k" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()
