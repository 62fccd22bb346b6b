from __future__ import annotations

from .catalog import CATALOG, build_catalog, get_resource, list_resources
from .config import Config, configure, get_config, get_download_dir
from .errors import (
    BioDownloadError,
    CatalogError,
    CloseError,
    ConnectError,
    InvalidResourceError,
    InvalidURLError,
    MissingArgumentError,
    OpenDestinationError,
    ReadError,
    TransferError,
    WriteError,
)
from .resources import Resource, parse_url
from .engine import download, transfer
from .types import TransferPhase, TransferState

__all__ = [
    "CATALOG",
    "BioDownloadError",
    "CatalogError",
    "CloseError",
    "Config",
    "ConnectError",
    "InvalidResourceError",
    "InvalidURLError",
    "MissingArgumentError",
    "OpenDestinationError",
    "ReadError",
    "Resource",
    "TransferError",
    "TransferPhase",
    "TransferState",
    "WriteError",
    "build_catalog",
    "configure",
    "download",
    "get_config",
    "get_download_dir",
    "get_resource",
    "list_resources",
    "parse_url",
    "transfer",
]

__version__ = "0.1.0"
