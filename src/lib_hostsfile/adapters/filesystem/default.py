"""Filesystem adapter for hosts file bytes.

Purpose
-------
Implement :class:`lib_hostsfile.application.ports.FileStore` on top of
:mod:`pathlib`. Translating :class:`OSError` into the domain taxonomy happens
here so the document never inspects errno values.
"""

from __future__ import annotations

from pathlib import Path

from ...domain.errors import ReadError, WriteError
from ...observability import log_debug, log_error

PRIVILEGE_HINT = "Maybe you need to sudo?"


class DefaultFileStore:
    """Read and write whole files as bytes."""

    def read(self, path: str) -> bytes:
        """Return the bytes stored at *path*.

        Raises
        ------
        ReadError
            When the file is missing or unreadable.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b"127.0.0.1 localhost\\n")
        >>> tmp.close()
        >>> DefaultFileStore().read(tmp.name)[:9]
        b'127.0.0.1'
        >>> Path(tmp.name).unlink()
        """

        try:
            payload = Path(path).read_bytes()
        except OSError as exc:
            log_error("hostsfile_unreadable", stage="load", path=path, error=str(exc))
            raise ReadError(f"Can't read {path}: {exc}") from exc
        log_debug("hostsfile_read", stage="load", path=path, size=len(payload))
        return payload

    def write(self, path: str, data: bytes) -> None:
        """Replace the contents of *path* with *data*.

        Raises
        ------
        WriteError
            When the file cannot be written; the message carries the
            privilege hint.
        """

        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            log_error("hostsfile_unwritable", stage="save", path=path, error=str(exc))
            raise WriteError(f"Unable to write to {path}. {PRIVILEGE_HINT} (error: {exc})") from exc
        log_debug("hostsfile_written", stage="save", path=path, size=len(data))
