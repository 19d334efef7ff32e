"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts adapters must satisfy so the document and the
composition root can orchestrate behaviour without depending on concrete
implementations.

Contents
--------
* :class:`FileStore` – reads and writes whole hosts files as bytes.
* :class:`PathResolver` – yields the hosts file location for a platform.
* :class:`EnvLoader` – materialises prefixed environment variables.
* :class:`RecordLoader` – parses bulk import files into records.

System Role
-----------
These protocols keep the dependency rule intact: the application layer asks
for behaviour through them, adapters implement them.
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class FileStore(Protocol):
    """Read and persist hosts file bytes.

    Both operations are treated as atomic; the store raises
    :class:`~lib_hostsfile.domain.errors.ReadError` or
    :class:`~lib_hostsfile.domain.errors.WriteError` on failure.
    """

    def read(self, path: str) -> bytes:
        """Return the full contents of *path*."""

    def write(self, path: str, data: bytes) -> None:
        """Replace the contents of *path* with *data*."""


@runtime_checkable
class PathResolver(Protocol):
    """Resolve the hosts file location."""

    def hosts_path(self) -> str:
        """Return the explicit override or the platform default path."""


@runtime_checkable
class EnvLoader(Protocol):
    """Translate prefixed environment variables into a flat mapping."""

    def load(self, prefix: str) -> Mapping[str, str]:
        """Return variables that match *prefix*, keyed by lower-cased suffix."""


@runtime_checkable
class RecordLoader(Protocol):
    """Parse a bulk import file into hosts records."""

    def load(self, path: str) -> Sequence[Mapping[str, object]]:
        """Read *path* and return records or raise ``InvalidFormat``."""
