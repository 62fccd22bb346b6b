"""Downloadable resource values.

A resource pairs the local file name a dataset is saved under with the URL it is
fetched from. Resources are validated on construction, so a resource with a
missing name or malformed URL never exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast
from urllib.parse import urlsplit

from .errors import InvalidResourceError, InvalidURLError
from .types import Scheme

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = frozenset({"http", "https", "ftp", "file"})
NETWORK_SCHEMES = frozenset({"http", "https", "ftp"})
_PATH_SEPARATORS = ("/", "\\")


def parse_url(url: str | None) -> str:
    """Validate a URL string.

    Args:
        url: URL of a remote (http, https, ftp) or local (file) source.

    Returns:
        The URL with surrounding whitespace removed.

    Raises:
        InvalidURLError: If the URL is empty, cannot be parsed, uses an
            unsupported scheme, or names no host for a network scheme.

    Example:
        >>> parse_url("http://purl.obolibrary.org/obo/go.obo")
        'http://purl.obolibrary.org/obo/go.obo'
    """
    if url is None or not str(url).strip():
        raise InvalidURLError("URL must not be empty")
    text = str(url).strip()
    try:
        parts = urlsplit(text)
        # Accessing the port validates it.
        _ = parts.port
    except ValueError as exc:
        raise InvalidURLError(f"Malformed URL: {text!r}", cause=exc) from exc

    scheme = parts.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise InvalidURLError(
            f"Unsupported URL scheme {parts.scheme!r} in {text!r}; "
            f"expected one of {sorted(SUPPORTED_SCHEMES)}"
        )
    if scheme in NETWORK_SCHEMES and not parts.hostname:
        raise InvalidURLError(f"Malformed URL: {text!r} has no host")
    if scheme == "file" and not parts.path:
        raise InvalidURLError(f"Malformed URL: {text!r} has no path")

    logger.debug("Created url from %s: %s", url, text)
    return text


@dataclass(frozen=True)
class Resource:
    """A named remote dataset.

    Attributes:
        name: File name the resource is stored under locally (e.g. ``go.obo``).
        url: Source URL of the resource.
    """

    name: str
    url: str

    def __post_init__(self) -> None:
        if self.name is None or not str(self.name).strip():
            raise InvalidResourceError(f"Resource name must not be empty (url={self.url!r})")
        # The name is used as a file name inside the download directory.
        if self.name in (".", "..") or any(sep in self.name for sep in _PATH_SEPARATORS):
            raise InvalidResourceError(f"Resource name must be a plain file name: {self.name!r}")
        object.__setattr__(self, "url", parse_url(self.url))

    @classmethod
    def create(cls, name: str, url: str) -> Resource:
        """Build a resource, raising ``InvalidURLError`` for a malformed URL."""
        return cls(name=name, url=url)

    @property
    def filename(self) -> str:
        return self.name

    @property
    def scheme(self) -> Scheme:
        return cast(Scheme, urlsplit(self.url).scheme.lower())

    def __str__(self) -> str:
        return f"Resource(name={self.name!r}, url={self.url})"
