from __future__ import annotations

from lib_hostsfile.domain.entry import HostEntry
from lib_hostsfile.domain.errors import (
    ConfigError,
    ConflictingEntry,
    DuplicateEntry,
    EntryError,
    HostsError,
    InvalidAddressFamily,
    InvalidFormat,
    NotFound,
    ParseErrors,
    ReadError,
    WriteError,
)


def test_error_hierarchy() -> None:
    assert issubclass(DuplicateEntry, EntryError)
    assert issubclass(ConflictingEntry, EntryError)
    for error_type in (EntryError, ParseErrors, ReadError, WriteError, InvalidFormat, NotFound, ConfigError):
        assert issubclass(error_type, HostsError)


def test_invalid_address_family_is_a_contract_violation() -> None:
    error = InvalidAddressFamily(5)
    assert isinstance(error, ValueError)
    assert not isinstance(error, HostsError)
    assert error.version == 5
    assert "must be 4 or 6" in str(error)


def test_entry_error_carries_both_entries() -> None:
    entry = HostEntry.new("a", "10.0.0.2")
    existing = HostEntry.new("a", "10.0.0.1")
    error = ConflictingEntry("conflict", entry=entry, existing=existing)
    assert error.entry is entry
    assert error.existing is existing


def test_parse_errors_keeps_order() -> None:
    first = DuplicateEntry("one", entry=HostEntry.new("a", "::1"), existing=HostEntry.new("a", "::1"))
    second = ConflictingEntry("two", entry=HostEntry.new("a", "::2"), existing=HostEntry.new("a", "::1"))
    error = ParseErrors("Errors while parsing hostsfile", (first, second))
    assert error.errors == [first, second]
    assert str(error) == "Errors while parsing hostsfile"
