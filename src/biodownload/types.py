"""Type definitions for biodownload package."""

from __future__ import annotations

from typing import Literal

Scheme = Literal["http", "https", "ftp", "file"]
"""URL schemes a source channel can be opened for."""

TransferPhase = Literal["connect", "open_destination", "read", "write", "close"]
"""Step of a transfer in which a failure occurred.

- "connect": Opening the remote source stream
- "open_destination": Creating or opening the local file
- "read" / "write": Moving bytes during the copy loop
- "close": Releasing either handle during cleanup
"""

TransferState = Literal["idle", "connecting", "copying", "closing", "done", "failed"]
"""Lifecycle state of a single transfer call."""
