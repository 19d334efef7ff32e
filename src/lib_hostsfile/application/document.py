"""Hosts file document lifecycle.

Purpose
-------
Bind a :class:`HostList` to a file path and drive the
``load -> parse -> mutate -> save`` lifecycle. The raw bytes of the last load
are kept so :meth:`HostsFile.save` can skip writing a file that is already
canonical.

Contents
--------
* :class:`HostsFile` – the document.
"""

from __future__ import annotations

from ..domain.collection import HostList
from ..domain.config import LAYOUT_FLAT, normalize_layout
from ..domain.errors import EntryError
from ..observability import log_debug, log_info, make_event
from .parser import parse_line, split_lines
from .ports import FileStore


class HostsFile:
    """A hosts file: path, parsed entries and the last loaded bytes.

    Parameters
    ----------
    path:
        Location of the backing file, resolved by the caller.
    layout:
        Output layout passed to :meth:`HostList.format`.
    store:
        :class:`~lib_hostsfile.application.ports.FileStore` used for I/O;
        the composition root injects
        :class:`~lib_hostsfile.adapters.filesystem.default.DefaultFileStore`.

    Examples
    --------
    >>> from lib_hostsfile.adapters.filesystem.default import DefaultFileStore
    >>> doc = HostsFile("/dev/null", store=DefaultFileStore())
    >>> doc.data = b"127.0.0.1 localhost\\n# 9.9.9.9 off\\n"
    >>> doc.parse()
    []
    >>> doc.format()
    b'127.0.0.1 localhost\\n# 9.9.9.9 off\\n'
    """

    def __init__(self, path: str, *, store: FileStore, layout: str = LAYOUT_FLAT) -> None:
        self.path = path
        self.layout = normalize_layout(layout)
        self.hosts = HostList()
        self.data = b""
        self._store = store

    def load(self) -> bytes:
        """Read the backing file into :attr:`data`; raises ``ReadError``."""

        self.data = self._store.read(self.path)
        return self.data

    def parse(self) -> list[EntryError]:
        """Add every entry found in :attr:`data` to :attr:`hosts`.

        Duplicates and conflicts do not stop parsing; they are returned in the
        order they were found so callers can decide how to react.
        """

        errors: list[EntryError] = []
        for line in split_lines(self.data):
            for entry in parse_line(line):
                try:
                    self.hosts.add(entry)
                except EntryError as exc:
                    log_debug("entry_rejected", **make_event("parse", self.path, reason=str(exc)))
                    errors.append(exc)
        log_info("hostsfile_parsed", **make_event("parse", self.path, entries=len(self.hosts), errors=len(errors)))
        return errors

    def format(self) -> bytes:
        return self.hosts.format(self.layout)

    def is_canonical(self) -> bool:
        """Return ``True`` when :attr:`data` already equals :meth:`format`."""

        return self.format() == self.data

    def save(self) -> bool:
        """Write the canonical form unless the file already holds it.

        Returns ``True`` when bytes were written. Write failures propagate as
        :class:`~lib_hostsfile.domain.errors.WriteError`.
        """

        output = self.format()
        if output == self.data:
            log_debug("hostsfile_unchanged", **make_event("save", self.path, entries=len(self.hosts)))
            return False
        self._store.write(self.path, output)
        self.data = output
        log_info("hostsfile_saved", **make_event("save", self.path, entries=len(self.hosts), size=len(output)))
        return True
