"""Ordered, de-duplicated collection of hosts entries.

Purpose
-------
Hold the entries of a hosts file while enforcing the collection rules:

* IPv4 and IPv6 entries for the same domain may coexist.
* A domain appears at most once per address family.
* No two entries are equal (same domain and address).

The collection also owns the canonical sort order and the serialisation into
hosts file bytes.

Contents
--------
* :class:`HostList` – the collection.
* :func:`sort_key` – total ordering used by :meth:`HostList.sort`.

System Role
-----------
:class:`lib_hostsfile.application.document.HostsFile` fills a ``HostList``
while parsing; the CLI workflows mutate it; :meth:`HostList.format` produces
the bytes that are written back.
"""

from __future__ import annotations

import json
from typing import Iterable, Iterator, overload

from .config import LAYOUT_FLAT, LAYOUT_GROUPED, normalize_layout
from .entry import Address, HostEntry, make_surrogate_address, parse_address
from .errors import ConflictingEntry, DuplicateEntry, InvalidAddressFamily

_LOCALHOST = "localhost"


def _check_version(version: int) -> None:
    if version not in (4, 6):
        raise InvalidAddressFamily(version)


def sort_key(entry: HostEntry) -> tuple[bool, bool, bytes, bytes]:
    """Return the ordering key for *entry*.

    1. ``localhost`` before any other domain.
    2. IPv4 before IPv6.
    3. Addresses compared byte-wise, with loopback IPv4 remapped so every
       ``127.*`` alias precedes the rest of the IPv4 block.
    4. Domains compared byte-wise (a strict prefix sorts first).
    """

    surrogate = make_surrogate_address(entry.address)
    packed = surrogate.packed if surrogate is not None else b""
    return (entry.domain != _LOCALHOST, entry.ipv6, packed, entry.domain.encode("utf-8"))


class HostList:
    """A list of :class:`HostEntry` objects following the collection rules.

    Methods with a ``_v`` suffix take an address family selector ``version``
    (``4`` or ``6``); any other value raises :class:`InvalidAddressFamily`.

    Examples
    --------
    >>> hosts = HostList()
    >>> hosts.add(HostEntry.new("google.com", "127.0.0.1", False))
    >>> hosts.add(HostEntry.new("google.com", "::1", True))
    >>> print(hosts.format().decode(), end="")
    # 127.0.0.1 google.com
    ::1 google.com
    """

    def __init__(self, entries: Iterable[HostEntry] = ()) -> None:
        self._entries: list[HostEntry] = []
        for entry in entries:
            self.add(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HostEntry]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> HostEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[HostEntry]: ...

    def __getitem__(self, index: int | slice) -> HostEntry | list[HostEntry]:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"HostList({self._entries!r})"

    # -- lookups -----------------------------------------------------------

    def contains(self, entry: HostEntry) -> bool:
        """Return ``True`` if an equal entry is present."""

        return any(found == entry for found in self._entries)

    def contains_domain(self, domain: str, version: int | None = None) -> bool:
        """Return ``True`` if *domain* is present (in *version* when given)."""

        if version is None:
            return any(found.domain == domain for found in self._entries)
        return self.index_of_domain_v(domain, version) > -1

    def contains_address(self, address: Address | str) -> bool:
        """Return ``True`` if any entry points at *address* (object or text)."""

        if isinstance(address, str):
            address = parse_address(address)
        return any(found.equal_address(address) for found in self._entries)

    def index_of(self, entry: HostEntry) -> int:
        """Return the index of an entry equal to *entry*, or ``-1``."""

        for index, found in enumerate(self._entries):
            if found == entry:
                return index
        return -1

    def index_of_domain_v(self, domain: str, version: int) -> int:
        """Return the index of *domain* in family *version*, or ``-1``."""

        _check_version(version)
        for index, found in enumerate(self._entries):
            if found.domain == domain and found.version == version:
                return index
        return -1

    def filter_by_domain(self, domain: str) -> "HostList":
        return self._filtered(found for found in self._entries if found.domain == domain)

    def filter_by_address(self, address: Address | str) -> "HostList":
        if isinstance(address, str):
            address = parse_address(address)
        return self._filtered(found for found in self._entries if found.equal_address(address))

    def filter_by_version(self, version: int) -> "HostList":
        _check_version(version)
        return self._filtered(found for found in self._entries if found.version == version)

    def _filtered(self, entries: Iterable[HostEntry]) -> "HostList":
        subset = HostList()
        subset._entries = list(entries)
        return subset

    # -- mutation ----------------------------------------------------------

    def add(self, entry: HostEntry) -> None:
        """Append *entry* unless it collides with an existing entry.

        Raises
        ------
        DuplicateEntry
            An equal entry exists. The list is unchanged.
        ConflictingEntry
            The domain is already bound to another address of the same
            family. The list is unchanged; replacing the old binding is left
            to the caller (see :func:`lib_hostsfile.application.merge.add_or_update`).
        """

        for found in self._entries:
            if found == entry:
                raise DuplicateEntry(
                    f"Duplicate hostname entry for {entry.domain} -> {entry.ip}",
                    entry=entry,
                    existing=found,
                )
            if found.domain == entry.domain and found.ipv6 == entry.ipv6:
                raise ConflictingEntry(
                    f"Conflicting hostname entries for {entry.domain} -> {entry.ip} and -> {found.ip}",
                    entry=entry,
                    existing=found,
                )
        self._entries.append(entry)

    def remove(self, index: int) -> int:
        """Delete the entry at *index*; out-of-range indexes (e.g. ``-1``) are ignored.

        Returns the number of removed entries (``0`` or ``1``) so
        ``remove(index_of(...))`` composes without an existence check.
        """

        if 0 <= index < len(self._entries):
            del self._entries[index]
            return 1
        return 0

    def remove_domain(self, domain: str) -> int:
        """Remove both the IPv4 and the IPv6 entry for *domain*."""

        return self.remove_domain_v(domain, 4) + self.remove_domain_v(domain, 6)

    def remove_domain_v(self, domain: str, version: int) -> int:
        return self.remove(self.index_of_domain_v(domain, version))

    def enable(self, domain: str) -> None:
        self._set_enabled(domain, None, True)

    def enable_v(self, domain: str, version: int) -> None:
        _check_version(version)
        self._set_enabled(domain, version, True)

    def disable(self, domain: str) -> None:
        self._set_enabled(domain, None, False)

    def disable_v(self, domain: str, version: int) -> None:
        _check_version(version)
        self._set_enabled(domain, version, False)

    def _set_enabled(self, domain: str, version: int | None, enabled: bool) -> None:
        for found in self._entries:
            if found.domain == domain and (version is None or found.version == version):
                found.enabled = enabled

    # -- ordering and output -------------------------------------------------

    def sort(self) -> None:
        """Sort in place; see :func:`sort_key` for the ordering rules."""

        self._entries.sort(key=sort_key)

    def format(self, layout: str = LAYOUT_FLAT) -> bytes:
        """Sort, then render the collection as hosts file bytes.

        ``flat`` emits one line per entry. ``grouped`` emits, per address in
        sorted order, one line with the enabled domains and one commented line
        with the disabled domains.
        """

        self.sort()
        if normalize_layout(layout) == LAYOUT_GROUPED:
            lines = self._grouped_lines()
        else:
            lines = [entry.format() for entry in self._entries]
        return "".join(line + "\n" for line in lines).encode("utf-8")

    def _grouped_lines(self) -> list[str]:
        groups: dict[str, tuple[list[str], list[str]]] = {}
        for entry in self._entries:
            enabled, disabled = groups.setdefault(entry.ip, ([], []))
            (enabled if entry.enabled else disabled).append(entry.domain)
        lines: list[str] = []
        for ip, (enabled, disabled) in groups.items():
            if enabled:
                lines.append(" ".join([ip, *enabled]))
            if disabled:
                lines.append("# " + " ".join([ip, *disabled]))
        return lines

    def to_records(self) -> list[dict[str, object]]:
        """Return the entries as JSON-ready ``{"domain", "ip", "enabled"}`` records."""

        return [entry.to_record() for entry in self._entries]

    def dump(self, indent: int | None = 2) -> str:
        """Serialise :meth:`to_records` as JSON text."""

        return json.dumps(self.to_records(), indent=indent)
