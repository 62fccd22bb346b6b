"""Streaming transfer of a remote resource to a local file.

A transfer opens a source channel for the URL and a destination channel for the
local path, copies bytes through a fixed-size buffer until the source is
exhausted, and closes both channels exactly once on every exit path.

Key functions:
    - transfer(): Copy any supported URL to a destination path
    - download(): Copy a catalog resource into a download directory
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .catalog import get_resource
from .channels import IO_ERRORS, DestinationChannel, SourceChannel, open_destination, open_source
from .config import Config, get_config, get_download_dir
from .errors import (
    CloseError,
    ConnectError,
    MissingArgumentError,
    OpenDestinationError,
    ReadError,
    TransferError,
    WriteError,
)
from .resources import Resource, parse_url
from .types import TransferState

logger = logging.getLogger(__name__)


class _Session:
    """Handles and lifecycle state of one transfer call."""

    def __init__(self, url: str, destination: Path) -> None:
        self.url = url
        self.destination = destination
        self.state: TransferState = "idle"
        self.source: SourceChannel | None = None
        self.target: DestinationChannel | None = None

    def _enter(self, state: TransferState) -> None:
        logger.debug("Transfer %s -> %s: %s -> %s", self.url, self.destination, self.state, state)
        self.state = state

    def _error(
        self, error_type: type[TransferError], message: str, cause: BaseException
    ) -> TransferError:
        error = error_type(message, url=self.url, destination=self.destination, cause=cause)
        error.state = self.state
        return error

    def connect(self, config: Config) -> None:
        self._enter("connecting")
        try:
            self.source = open_source(self.url, config)
        except IO_ERRORS as exc:
            error = self._error(ConnectError, f"Problem connecting to {self.url}", exc)
            self._enter("failed")
            raise error from exc

    def open_target(self) -> None:
        # Still "connecting": channels are being acquired until the copy starts.
        try:
            self.target = open_destination(self.destination)
        except IO_ERRORS as exc:
            raise self._error(
                OpenDestinationError, f"Cannot open {self.destination} for writing", exc
            ) from exc

    def copy(self, chunk_size: int) -> int:
        assert self.source is not None and self.target is not None
        self._enter("copying")
        total = 0
        while True:
            try:
                chunk = self.source.read(chunk_size)
            except IO_ERRORS as exc:
                raise self._error(ReadError, f"Problem reading from {self.url}", exc) from exc
            if not chunk:
                return total

            remaining = memoryview(chunk)
            while remaining:
                try:
                    written = self.target.write(remaining)
                except IO_ERRORS as exc:
                    raise self._error(
                        WriteError, f"Problem writing to {self.destination}", exc
                    ) from exc
                if not written:
                    raise self._error(
                        WriteError,
                        f"Destination {self.destination} accepted no bytes",
                        OSError(f"write returned {written!r}"),
                    )
                remaining = remaining[written:]
            total += len(chunk)

    def close(self, primary: BaseException | None = None) -> None:
        """Close both channels once.

        A close failure is raised only when no earlier error is in flight;
        otherwise it is logged and recorded on ``primary.suppressed``.
        """
        self._enter("closing")
        errors: list[TransferError] = []
        handles = (("source", self.source), ("destination", self.target))
        self.source = None
        self.target = None
        for label, handle in handles:
            if handle is None:
                continue
            try:
                handle.close()
            except Exception as exc:  # noqa: BLE001
                errors.append(self._error(CloseError, f"Problem closing {label} channel", exc))

        if primary is not None:
            for error in errors:
                logger.warning("Ignoring close failure after %r: %s", primary, error)
                if isinstance(primary, TransferError):
                    primary.suppressed.append(error)
            self._enter("failed")
            return
        if errors:
            first, *rest = errors
            first.suppressed.extend(rest)
            self._enter("failed")
            raise first from first.cause
        self._enter("done")


def _source_url(source: str | Resource | None) -> str:
    if isinstance(source, Resource):
        return source.url
    if source is None or source == "":
        raise MissingArgumentError("URL required for transfer source")
    return parse_url(source)


def transfer(
    source: str | Resource | None,
    destination: str | os.PathLike[str] | None,
    *,
    config: Config | None = None,
) -> Path:
    """Copy the full byte stream of ``source`` into ``destination``.

    The destination is created if absent and overwritten if present. A failed
    transfer may leave a partially written file behind.

    Args:
        source: http, https, ftp or file URL, or a catalog Resource.
        destination: Local file path to write.
        config: Overrides the global configuration for this call.

    Returns:
        The destination path.

    Raises:
        MissingArgumentError: If source or destination is missing; no I/O is attempted.
        InvalidURLError: If the source URL is malformed; no I/O is attempted.
        ConnectError: If the source cannot be opened.
        OpenDestinationError: If the destination cannot be opened.
        ReadError: If reading from the source fails.
        WriteError: If writing to the destination fails.
        CloseError: If closing a channel fails and nothing failed before it.
    """
    url = _source_url(source)
    if destination is None or str(destination) == "":
        raise MissingArgumentError("Destination path required for transfer")
    target = Path(destination)
    cfg = config or get_config()

    session = _Session(url, target)
    logger.info("Starting download from %s", url)
    session.connect(cfg)
    try:
        session.open_target()
        total = session.copy(cfg.chunk_size)
    except BaseException as exc:
        session.close(exc)
        raise
    session.close()
    logger.info("Transfer completed: %d bytes from %s to %s", total, url, target)
    return target


def download(
    resource: str | Resource,
    dest_dir: str | os.PathLike[str] | None = None,
    *,
    config: Config | None = None,
) -> Path:
    """Download a catalog resource into ``dest_dir``.

    Args:
        resource: Catalog name (e.g. ``"hp.obo"``) or Resource.
        dest_dir: Target directory. Defaults to ``get_download_dir()``.
        config: Overrides the global configuration for this call.

    Returns:
        Path of the downloaded file, ``dest_dir / resource.name``.

    Example:
        >>> import biodownload as bd
        >>> bd.download("hp.obo", "data")  # doctest: +SKIP
        PosixPath('data/hp.obo')
    """
    if isinstance(resource, str):
        resource = get_resource(resource)
    out_dir = Path(dest_dir) if dest_dir is not None else get_download_dir()
    out_dir.mkdir(parents=True, exist_ok=True)
    return transfer(resource, out_dir / resource.filename, config=config)
