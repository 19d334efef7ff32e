"""Application-layer merge policy for new entries.

Purpose
-------
:meth:`HostList.add` reports duplicates and conflicts without touching the
list. User-facing workflows want idempotent "add or update" semantics
instead: re-running the same add leaves the same final state, and a new
address for a known domain replaces the old binding. This module implements
that policy once so the CLI ``add`` and ``apply`` commands behave alike.

Contents
    - ``add_or_update``: merge one entry, returning what happened.
    - ``apply_records``: validate and merge a batch of import records.
    - ``ApplyReport``: counts returned by ``apply_records``.
    - ``checked_entry``: build an entry from user input or raise ``InvalidFormat``.
    - ``_validate_record`` / ``_entry_from_record``: record helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Literal, Mapping

from ..domain.collection import HostList
from ..domain.entry import HostEntry, looks_like_domain
from ..domain.errors import ConflictingEntry, DuplicateEntry, InvalidFormat

Outcome = Literal["added", "updated", "unchanged"]

ADDED: Final[Outcome] = "added"
UPDATED: Final[Outcome] = "updated"
UNCHANGED: Final[Outcome] = "unchanged"


@dataclass(frozen=True, slots=True)
class ApplyReport:
    """Summary of an :func:`apply_records` run."""

    added: int = 0
    updated: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.added + self.updated + self.unchanged


def add_or_update(hosts: HostList, entry: HostEntry) -> Outcome:
    """Merge *entry* into *hosts* with last-write-wins semantics.

    * New ``(domain, family)`` key: appended, returns ``"added"``.
    * Same domain and address: the enabled flag of *entry* wins; returns
      ``"updated"`` if the flag changed, else ``"unchanged"``.
    * Same ``(domain, family)`` with another address: the old binding is
      replaced; returns ``"updated"``.

    Examples
    --------
    >>> hosts = HostList()
    >>> add_or_update(hosts, HostEntry.new("x", "1.2.3.4"))
    'added'
    >>> add_or_update(hosts, HostEntry.new("x", "5.6.7.8"))
    'updated'
    >>> [entry.format() for entry in hosts]
    ['5.6.7.8 x']
    """

    try:
        hosts.add(entry)
    except DuplicateEntry as exc:
        if exc.existing.enabled == entry.enabled:
            return UNCHANGED
        if entry.enabled:
            hosts.enable_v(entry.domain, entry.version)
        else:
            hosts.disable_v(entry.domain, entry.version)
        return UPDATED
    except ConflictingEntry:
        hosts.remove_domain_v(entry.domain, entry.version)
        hosts.add(entry)
        return UPDATED
    return ADDED


def apply_records(hosts: HostList, records: Iterable[Mapping[str, object]]) -> ApplyReport:
    """Merge import *records* into *hosts*.

    Every record is validated before the first mutation so a malformed batch
    leaves *hosts* untouched.

    Raises
    ------
    InvalidFormat
        When a record is not a mapping with string ``domain``, string ``ip``
        and boolean ``enabled`` fields, or when its domain or address could
        not be written back to a hosts file.
    """

    entries = [_entry_from_record(index, record) for index, record in enumerate(records)]
    counts = {ADDED: 0, UPDATED: 0, UNCHANGED: 0}
    for entry in entries:
        counts[add_or_update(hosts, entry)] += 1
    return ApplyReport(added=counts[ADDED], updated=counts[UPDATED], unchanged=counts[UNCHANGED])


def checked_entry(domain: str, ip: str, enabled: bool = True) -> HostEntry:
    """Build an entry that can be written and parsed back unchanged.

    Raises
    ------
    InvalidFormat
        When *domain* is not a single token, or *ip* is not an address the
        parser accepts (scoped and IPv4-mapped IPv6 spellings are refused).

    Examples
    --------
    >>> checked_entry("router", "fe80::1%eth0")
    Traceback (most recent call last):
    ...
    lib_hostsfile.domain.errors.InvalidFormat: 'fe80::1%eth0' is not a valid IP address
    """

    if not looks_like_domain(domain):
        raise InvalidFormat(f"{domain!r} is not a valid domain")
    entry = HostEntry.new(domain, ip, enabled)
    if not entry.is_writable():
        raise InvalidFormat(f"{ip!r} is not a valid IP address")
    return entry


def _entry_from_record(index: int, record: object) -> HostEntry:
    """Build an entry from a validated record."""

    valid = _validate_record(index, record)
    try:
        return checked_entry(str(valid["domain"]), str(valid["ip"]), bool(valid["enabled"]))
    except InvalidFormat as exc:
        raise InvalidFormat(f"Record {index}: {exc}") from exc


def _validate_record(index: int, record: object) -> Mapping[str, object]:
    """Return *record* or raise :class:`InvalidFormat` when it breaks the record schema."""

    if not isinstance(record, Mapping):
        raise InvalidFormat(f"Record {index} is not an object")
    for field, expected in (("domain", str), ("ip", str), ("enabled", bool)):
        if field not in record:
            raise InvalidFormat(f"Record {index} is missing {field!r}")
        if not isinstance(record[field], expected):
            raise InvalidFormat(f"Record {index} field {field!r} must be {expected.__name__}")
    return record
