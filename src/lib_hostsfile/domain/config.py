"""Domain-level configuration value objects.

Purpose
-------
Anchor the immutable :class:`HostsSettings` value object that carries the
resolved hosts file location and serialisation layout from the composition
root into the document. This module contains no I/O; environment and platform
lookups live in the adapters.

Contents
--------
* :data:`LAYOUT_FLAT` / :data:`LAYOUT_GROUPED` – supported output layouts.
* :data:`LAYOUT_CHOICES` – canonical layout names, in CLI order.
* :func:`normalize_layout` – map user spellings (``unix``, ``windows``) onto
  canonical layout names.
* :class:`HostsSettings` – frozen settings record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import ConfigError

LAYOUT_FLAT: Final[str] = "flat"
"""One physical line per entry (the baseline format)."""

LAYOUT_GROUPED: Final[str] = "grouped"
"""Domains sharing one address and state are joined on a single line."""

LAYOUT_CHOICES: Final[tuple[str, ...]] = (LAYOUT_FLAT, LAYOUT_GROUPED)

_LAYOUT_ALIASES: Final[dict[str, str]] = {
    "flat": LAYOUT_FLAT,
    "windows": LAYOUT_FLAT,
    "win": LAYOUT_FLAT,
    "grouped": LAYOUT_GROUPED,
    "unix": LAYOUT_GROUPED,
    "posix": LAYOUT_GROUPED,
}


def normalize_layout(value: str | None) -> str:
    """Return the canonical layout for *value*, defaulting to :data:`LAYOUT_FLAT`.

    Raises
    ------
    ConfigError
        When *value* is not a known layout or alias.

    Examples
    --------
    >>> normalize_layout("unix"), normalize_layout(None), normalize_layout(" Windows ")
    ('grouped', 'flat', 'flat')
    """

    if value is None:
        return LAYOUT_FLAT
    alias = value.strip().lower()
    if not alias:
        return LAYOUT_FLAT
    try:
        return _LAYOUT_ALIASES[alias]
    except KeyError as exc:
        choices = ", ".join(sorted(_LAYOUT_ALIASES))
        raise ConfigError(f"Unknown hosts file format {value!r}; expected one of: {choices}") from exc


@dataclass(frozen=True, slots=True)
class HostsSettings:
    """Resolved settings for one hosts file session.

    Attributes
    ----------
    path:
        Location of the hosts file.
    layout:
        Canonical layout name used by :meth:`HostList.format`.
    """

    path: str
    layout: str = LAYOUT_FLAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "layout", normalize_layout(self.layout))
