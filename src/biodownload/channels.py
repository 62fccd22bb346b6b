"""Readable and writable byte channels used by the transfer engine.

HTTP(S) sources are streamed through an httpx client; FTP and file sources go
through ``urllib.request``, which speaks both protocols. Destinations are
unbuffered binary files, so a write may accept fewer bytes than offered and the
caller is expected to resubmit the remainder.
"""

from __future__ import annotations

import logging
import urllib.request
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol
from urllib.parse import urlsplit

import httpx

from .config import Config

logger = logging.getLogger(__name__)

IO_ERRORS: tuple[type[Exception], ...] = (
    OSError,
    ValueError,
    httpx.HTTPError,
    httpx.InvalidURL,
    httpx.StreamError,
)
"""Exceptions raised by channels for connection, read, write and close failures."""


class SourceChannel(Protocol):
    def read(self, size: int) -> bytes: ...

    def close(self) -> None: ...


class DestinationChannel(Protocol):
    def write(self, data: memoryview) -> int: ...

    def close(self) -> None: ...


def _build_client(config: Config) -> httpx.Client:
    headers = {"User-Agent": config.user_agent}
    return httpx.Client(timeout=config.timeout_seconds, headers=headers, follow_redirects=True)


class HttpSource:
    """Streamed body of an HTTP(S) GET response."""

    def __init__(self, client: httpx.Client, response: httpx.Response) -> None:
        self._client = client
        self._response = response
        self._chunks: Iterator[bytes] | None = None

    def read(self, size: int) -> bytes:
        if self._chunks is None:
            self._chunks = self._response.iter_bytes(chunk_size=size)
        return next(self._chunks, b"")

    def close(self) -> None:
        try:
            self._response.close()
        finally:
            self._client.close()


class UrllibSource:
    """Stream opened with ``urllib.request.urlopen`` (ftp and file URLs)."""

    def __init__(self, stream: object) -> None:
        self._stream = stream

    def read(self, size: int) -> bytes:
        return self._stream.read(size)  # type: ignore[attr-defined,no-any-return]

    def close(self) -> None:
        self._stream.close()  # type: ignore[attr-defined]


def _open_http(url: str, config: Config) -> HttpSource:
    client = _build_client(config)
    try:
        request = client.build_request("GET", url)
        response = client.send(request, stream=True)
    except BaseException:
        client.close()
        raise
    try:
        response.raise_for_status()
    except BaseException:
        response.close()
        client.close()
        raise
    return HttpSource(client, response)


def _open_urllib(url: str, config: Config) -> UrllibSource:
    request = urllib.request.Request(url, headers={"User-Agent": config.user_agent})
    return UrllibSource(urllib.request.urlopen(request, timeout=config.timeout_seconds))


def open_source(url: str, config: Config) -> SourceChannel:
    """Open a readable channel for ``url``.

    Args:
        url: Validated http, https, ftp or file URL.
        config: Supplies timeout and User-Agent.

    Returns:
        An open source channel. The caller owns it and must close it.

    Raises:
        httpx.HTTPError: On HTTP connection failures or non-2xx responses.
        OSError: On FTP/file failures (``urllib.error.URLError`` included).
    """
    scheme = urlsplit(url).scheme.lower()
    logger.debug("Opening %s source %s", scheme, url)
    if scheme in ("http", "https"):
        return _open_http(url, config)
    return _open_urllib(url, config)


def open_destination(path: Path) -> DestinationChannel:
    """Open ``path`` for writing, creating it or truncating an existing file."""
    return path.open("wb", buffering=0)
