import hashlib

import pytest
import requests

from mcserver_installer.errors import DownloadError
from mcserver_installer.lib import download
from mcserver_installer.lib.download import DownloadRequest, fetch_file


class FakeResponse:
    def __init__(self, chunks, *, status=200, content_length=None, fail_after=None):
        self.chunks = chunks
        self.status = status
        self.headers = {}
        if content_length is not None:
            self.headers["Content-Length"] = str(content_length)
        self.fail_after = fail_after

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Error")

    def iter_content(self, chunk_size=1):
        for i, c in enumerate(self.chunks):
            if self.fail_after is not None and i >= self.fail_after:
                raise requests.ConnectionError("connection reset")
            yield c


def patch_get(monkeypatch, response):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        return response

    monkeypatch.setattr(download.requests, "get", fake_get)
    return calls


def test_download_writes_file(tmp_path, monkeypatch):
    body = [b"abc", b"def"]
    calls = patch_get(monkeypatch, FakeResponse(body, content_length=6))
    dest = tmp_path / "srv" / "server.jar"

    fetch_file(DownloadRequest(url="https://example.invalid/server.jar", dest=dest, sha1=hashlib.sha1(b"abcdef").hexdigest()))

    assert dest.read_bytes() == b"abcdef"
    assert not (tmp_path / "srv" / "server.jar.part").exists()
    assert calls[0][1]["stream"] is True


def test_http_error_leaves_nothing_behind(tmp_path, monkeypatch):
    patch_get(monkeypatch, FakeResponse([], status=404))
    dest = tmp_path / "server.jar"

    with pytest.raises(DownloadError):
        fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest))

    assert list(tmp_path.iterdir()) == []


def test_interrupted_download_leaves_nothing_behind(tmp_path, monkeypatch):
    patch_get(monkeypatch, FakeResponse([b"abc", b"def"], fail_after=1))
    dest = tmp_path / "server.jar"

    with pytest.raises(DownloadError):
        fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest))

    assert list(tmp_path.iterdir()) == []


def test_short_body_is_rejected(tmp_path, monkeypatch):
    patch_get(monkeypatch, FakeResponse([b"abc"], content_length=10))
    dest = tmp_path / "server.jar"

    with pytest.raises(DownloadError, match="Truncated"):
        fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest))

    assert list(tmp_path.iterdir()) == []


def test_checksum_mismatch_keeps_old_file(tmp_path, monkeypatch):
    patch_get(monkeypatch, FakeResponse([b"evil"]))
    dest = tmp_path / "server.jar"
    dest.write_bytes(b"good")

    with pytest.raises(DownloadError, match="Checksum"):
        fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest, overwrite=True, sha1="0" * 40))

    assert dest.read_bytes() == b"good"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["server.jar"]


def test_existing_file_needs_overwrite(tmp_path, monkeypatch):
    calls = patch_get(monkeypatch, FakeResponse([b"new"]))
    dest = tmp_path / "server.jar"
    dest.write_bytes(b"old")

    with pytest.raises(FileExistsError):
        fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest))

    assert calls == []
    assert dest.read_bytes() == b"old"


def test_dry_run_does_not_touch_network(tmp_path, monkeypatch):
    calls = patch_get(monkeypatch, FakeResponse([b"x"]))

    fetch_file(DownloadRequest(url="https://example.invalid/x", dest=tmp_path / "server.jar"), dry_run=True)

    assert calls == []
    assert list(tmp_path.iterdir()) == []


def test_encoded_body_is_not_length_checked(tmp_path, monkeypatch):
    body = b"x" * 5000
    resp = FakeResponse([body[:2500], body[2500:]], content_length=120)
    resp.headers["Content-Encoding"] = "gzip"
    patch_get(monkeypatch, resp)
    dest = tmp_path / "server.jar"

    fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest, sha1=hashlib.sha1(body).hexdigest()))

    assert dest.read_bytes() == body


def test_encoded_body_still_checksummed(tmp_path, monkeypatch):
    resp = FakeResponse([b"decoded"], content_length=3)
    resp.headers["Content-Encoding"] = "gzip"
    patch_get(monkeypatch, resp)
    dest = tmp_path / "server.jar"

    with pytest.raises(DownloadError, match="Checksum"):
        fetch_file(DownloadRequest(url="https://example.invalid/x", dest=dest, sha1="0" * 40))

    assert list(tmp_path.iterdir()) == []
