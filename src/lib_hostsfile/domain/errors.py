"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the hosts model, the document
lifecycle, adapters, and the CLI. The hierarchy lives in the domain layer so
outer layers may depend on it without the domain importing anything back.

Contents
--------
* :class:`HostsError` – umbrella base class for recoverable library errors.
* :class:`EntryError` – data-level problems raised by :meth:`HostList.add`,
  refined into :class:`DuplicateEntry` and :class:`ConflictingEntry`.
* :class:`ParseErrors` – aggregate of entry errors found while parsing.
* :class:`ReadError` / :class:`WriteError` – fatal hosts file I/O failures.
* :class:`InvalidFormat` / :class:`NotFound` – problems with record files used
  by ``apply``.
* :class:`ConfigError` – unusable configuration values.
* :class:`InvalidAddressFamily` – contract violation (not a ``HostsError``).

System Role
-----------
Callers catch :class:`HostsError` to handle every expected failure uniformly.
:class:`InvalidAddressFamily` sits outside that family: passing
a family selector other than ``4`` or ``6`` is a programming error and must
surface as a traceback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .entry import HostEntry


class HostsError(Exception):
    """Base type for all recoverable exceptions emitted by ``lib_hostsfile``."""


class EntryError(HostsError):
    """Raised when an entry cannot join a :class:`HostList`.

    What
    ----
    Carries the rejected ``entry`` and the ``existing`` entry it collided with
    so callers can decide whether the collision is fatal.
    """

    def __init__(self, message: str, *, entry: "HostEntry", existing: "HostEntry") -> None:
        super().__init__(message)
        self.entry = entry
        self.existing = existing


class DuplicateEntry(EntryError):
    """The same domain is already bound to the same address."""


class ConflictingEntry(EntryError):
    """The domain is already bound to another address of the same family."""


class ParseErrors(HostsError):
    """Raised when a hosts file parsed with entry errors and force is off.

    The individual :class:`EntryError` instances are kept on ``errors`` in the
    order they were found.
    """

    def __init__(self, message: str, errors: Sequence[EntryError]) -> None:
        super().__init__(message)
        self.errors = list(errors)


class ReadError(HostsError):
    """The hosts file could not be read."""


class WriteError(HostsError):
    """The hosts file could not be written (often missing privileges)."""


class InvalidFormat(HostsError):
    """Raised when a record file cannot be parsed into hosts records.

    Typical Sources
    ---------------
    :mod:`json` and :mod:`yaml` decoding errors, or records whose fields have
    the wrong type.
    """


class NotFound(HostsError):
    """A record file (or an optional loader dependency) is missing."""


class ConfigError(HostsError):
    """A configuration value (environment or CLI) cannot be used."""


class InvalidAddressFamily(ValueError):
    """Raised when an address family selector is not ``4`` or ``6``."""

    def __init__(self, version: object) -> None:
        super().__init__(f"Version argument must be 4 or 6, got {version!r}")
        self.version = version
