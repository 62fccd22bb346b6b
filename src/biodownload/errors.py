"""Exception types raised by biodownload.

Provides:
- BioDownloadError base carrying a cause and debugging context
- Catalog construction errors (invalid URL, invalid resource, aggregated catalog failure)
- Transfer errors tagged with the phase in which they occurred
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from .types import TransferPhase, TransferState


class BioDownloadError(Exception):
    """
    Base exception for all biodownload errors.

    Attributes:
        message: Human-readable error description
        cause: Original exception if wrapping
        context: Additional context dict for debugging
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.cause = cause
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)


# =============================================================================
# Catalog Errors
# =============================================================================


class InvalidURLError(BioDownloadError, ValueError):
    """URL string is empty, malformed, or uses an unsupported scheme."""


class InvalidResourceError(BioDownloadError, ValueError):
    """Resource name is missing, empty, or not a plain file name."""


class CatalogError(BioDownloadError):
    """One or more catalog entries could not be constructed.

    Attributes:
        errors: Every entry failure, in table order.
    """

    def __init__(self, errors: list[BioDownloadError]) -> None:
        self.errors = list(errors)
        lines = "; ".join(str(error) for error in self.errors)
        super().__init__(f"Invalid resource catalog ({len(self.errors)} bad entries): {lines}")


# =============================================================================
# Transfer Errors
# =============================================================================


class MissingArgumentError(BioDownloadError, ValueError):
    """Source URL or destination path was not supplied."""


class TransferError(BioDownloadError):
    """
    Base class for failures while moving bytes from a source to a destination.

    Attributes:
        phase: Step of the transfer that failed
        url: Source URL of the transfer
        destination: Local destination path
        state: State the transfer was in when it failed. Failures while opening
            the destination report "connecting", since no byte has been copied yet
        suppressed: Secondary errors raised while cleaning up after this one
    """

    phase: ClassVar[TransferPhase]

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        destination: Path | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            cause=cause,
            context={"url": url, "destination": destination, "phase": self.phase},
        )
        self.url = url
        self.destination = destination
        self.state: TransferState | None = None
        self.suppressed: list[BaseException] = []


class ConnectError(TransferError):
    """Source stream could not be opened."""

    phase = "connect"


class OpenDestinationError(TransferError):
    """Destination file could not be opened or created."""

    phase = "open_destination"


class ReadError(TransferError):
    """Reading from the source failed mid-transfer."""

    phase = "read"


class WriteError(TransferError):
    """Writing to the destination failed mid-transfer."""

    phase = "write"


class CloseError(TransferError):
    """Releasing a source or destination handle failed."""

    phase = "close"


__all__ = [
    "BioDownloadError",
    "CatalogError",
    "CloseError",
    "ConnectError",
    "InvalidResourceError",
    "InvalidURLError",
    "MissingArgumentError",
    "OpenDestinationError",
    "ReadError",
    "TransferError",
    "WriteError",
]
