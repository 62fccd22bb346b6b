"""Tests for source and destination channels, including HTTP via a mock transport."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from biodownload import channels, engine
from biodownload.config import Config
from biodownload.errors import ConnectError


def _mock_client(monkeypatch: pytest.MonkeyPatch, handler: object) -> list[httpx.Client]:
    clients: list[httpx.Client] = []

    def fake_build_client(config: Config) -> httpx.Client:
        client = httpx.Client(
            transport=httpx.MockTransport(handler),  # type: ignore[arg-type]
            headers={"User-Agent": config.user_agent},
            follow_redirects=True,
        )
        clients.append(client)
        return client

    monkeypatch.setattr(channels, "_build_client", fake_build_client)
    return clients


def test_build_client_uses_config() -> None:
    cfg = Config(user_agent="biodownload-test/1.0", timeout_seconds=7.5)
    with channels._build_client(cfg) as client:
        assert client.headers["User-Agent"] == "biodownload-test/1.0"
        assert client.timeout.read == 7.5
        assert client.follow_redirects is True


def test_http_transfer_streams_body(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    body = bytes(range(256)) * 40
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=body)

    clients = _mock_client(monkeypatch, handler)
    dest = tmp_path / "go.obo"

    result = engine.transfer("http://purl.obolibrary.org/obo/go.obo", dest)

    assert result.read_bytes() == body
    assert seen[0].method == "GET"
    assert seen[0].headers["User-Agent"].startswith("biodownload/")
    assert clients[0].is_closed


def test_http_follows_redirects(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/obo/hp.obo":
            return httpx.Response(302, headers={"Location": "https://mirror.example.org/hp.obo"})
        return httpx.Response(200, content=b"format-version: 1.2\n")

    _mock_client(monkeypatch, handler)

    result = engine.transfer("http://purl.obolibrary.org/obo/hp.obo", tmp_path / "hp.obo")

    assert result.read_bytes() == b"format-version: 1.2\n"


def test_http_error_status_is_connect_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    clients = _mock_client(monkeypatch, lambda request: httpx.Response(404, content=b"missing"))
    dest = tmp_path / "mondo.json"

    with pytest.raises(ConnectError) as excinfo:
        engine.transfer("http://purl.obolibrary.org/mondo/mondo.json", dest)

    assert isinstance(excinfo.value.cause, httpx.HTTPStatusError)
    assert not dest.exists()
    assert clients[0].is_closed


def test_http_network_failure_is_connect_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    clients = _mock_client(monkeypatch, handler)

    with pytest.raises(ConnectError) as excinfo:
        engine.transfer("https://raw.githubusercontent.com/x/maxo.owl", tmp_path / "maxo.owl")

    assert isinstance(excinfo.value.cause, httpx.ConnectError)
    assert clients[0].is_closed


def test_http_source_reads_requested_chunk_size(monkeypatch: pytest.MonkeyPatch) -> None:
    _mock_client(monkeypatch, lambda request: httpx.Response(200, content=b"x" * 25))

    source = channels.open_source("http://example.org/data", Config())
    try:
        chunks = [source.read(10), source.read(10), source.read(10), source.read(10)]
    finally:
        source.close()

    assert chunks == [b"x" * 10, b"x" * 10, b"x" * 5, b""]


def test_file_source_reads_until_empty(tmp_path: Path) -> None:
    path = tmp_path / "local.txt"
    path.write_bytes(b"abcdef")

    source = channels.open_source(path.as_uri(), Config())
    try:
        assert source.read(4) == b"abcd"
        assert source.read(4) == b"ef"
        assert source.read(4) == b""
    finally:
        source.close()


def test_open_destination_truncates(tmp_path: Path) -> None:
    path = tmp_path / "out.bin"
    path.write_bytes(b"previous contents")

    target = channels.open_destination(path)
    try:
        assert target.write(memoryview(b"new")) == 3
    finally:
        target.close()

    assert path.read_bytes() == b"new"
