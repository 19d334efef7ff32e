"""Public package surface for ``lib_hostsfile``.

Re-export the hosts model, the document and the composition root helpers so
``import lib_hostsfile`` is enough for scripted hosts file edits::

    from lib_hostsfile import HostEntry, load_hostsfile

    hostsfile, errors = load_hostsfile()
    hostsfile.hosts.add(HostEntry.new("dev.example", "127.0.0.1"))
    hostsfile.save()
"""

from __future__ import annotations

from .application.document import HostsFile
from .application.merge import ApplyReport, add_or_update, apply_records
from .core import load_hostsfile, open_hostsfile, resolve_settings
from .domain.collection import HostList
from .domain.config import LAYOUT_FLAT, LAYOUT_GROUPED, HostsSettings
from .domain.entry import HostEntry, looks_like_ipv4, looks_like_ipv6, make_surrogate_address
from .domain.errors import (
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
from .observability import bind_trace_id, get_logger

__all__ = [
    "ApplyReport",
    "ConfigError",
    "ConflictingEntry",
    "DuplicateEntry",
    "EntryError",
    "HostEntry",
    "HostList",
    "HostsError",
    "HostsFile",
    "HostsSettings",
    "InvalidAddressFamily",
    "InvalidFormat",
    "LAYOUT_FLAT",
    "LAYOUT_GROUPED",
    "NotFound",
    "ParseErrors",
    "ReadError",
    "WriteError",
    "add_or_update",
    "apply_records",
    "bind_trace_id",
    "get_logger",
    "load_hostsfile",
    "looks_like_ipv4",
    "looks_like_ipv6",
    "make_surrogate_address",
    "open_hostsfile",
    "resolve_settings",
]
