"""Hosts entry value type.

Purpose
-------
Model one domain-to-address binding as found in a hosts file, together with
its enabled (uncommented) state and address family. The module is pure: it
performs no I/O and owns the two address-shape heuristics used by the parser.

Contents
--------
* :func:`looks_like_ipv4` / :func:`looks_like_ipv6` – permissive shape checks.
* :func:`looks_like_address` / :func:`looks_like_domain` – what a line can carry.
* :func:`parse_address` – text to :mod:`ipaddress` object (``None`` if invalid).
* :func:`make_surrogate_address` – loopback remapping used for sorting.
* :class:`HostEntry` – the entry value type.

System Role
-----------
:class:`lib_hostsfile.domain.collection.HostList` stores and orders entries;
:func:`lib_hostsfile.application.parser.parse_line` creates them.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Final, Union

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_IPV4_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?:[0-9]{1,3}\.){3}[0-9]{1,3}$")
_IPV6_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9a-fA-F:]+$")
_LOOPBACK_OCTET: Final[int] = 127


def looks_like_ipv4(text: str) -> bool:
    """Return ``True`` when *text* is shaped like a dotted IPv4 address.

    Octet ranges are not validated.

    Examples
    --------
    >>> looks_like_ipv4("127.0.0.1"), looks_like_ipv4("999.999.999.999")
    (True, True)
    >>> looks_like_ipv4("1234.1.1.1"), looks_like_ipv4("12.12")
    (False, False)
    """

    return _IPV4_PATTERN.match(text) is not None


def looks_like_ipv6(text: str) -> bool:
    """Return ``True`` when *text* contains ``:`` and only hex digits or ``:``.

    Examples
    --------
    >>> looks_like_ipv6("::1"), looks_like_ipv6("ff02::2")
    (True, True)
    >>> looks_like_ipv6("fe80::1%lo0"), looks_like_ipv6("localhost")
    (False, False)
    """

    if ":" not in text:
        return False
    return _IPV6_PATTERN.match(text) is not None


def looks_like_address(text: str) -> bool:
    """Return ``True`` when *text* passes either address shape check.

    This is the test :func:`~lib_hostsfile.application.parser.parse_line`
    applies to the first token of a line, so only addresses passing it can be
    written and read back.

    Examples
    --------
    >>> looks_like_address("10.0.0.1"), looks_like_address("::1")
    (True, True)
    >>> looks_like_address("fe80::1%eth0"), looks_like_address("::ffff:1.2.3.4")
    (False, False)
    """

    return looks_like_ipv4(text) or looks_like_ipv6(text)


def looks_like_domain(text: str) -> bool:
    """Return ``True`` when *text* is a single hosts file token.

    Empty text, whitespace and ``#`` would split or comment out the line.

    Examples
    --------
    >>> looks_like_domain("dev.example"), looks_like_domain(""), looks_like_domain("a b"), looks_like_domain("a#b")
    (True, False, False, False)
    """

    return bool(text) and "#" not in text and not any(character.isspace() for character in text)


def parse_address(text: str) -> Address | None:
    """Parse *text* into an address object, returning ``None`` when invalid."""

    try:
        return ipaddress.ip_address(text.strip())
    except ValueError:
        return None


def make_surrogate_address(address: Address | None) -> Address | None:
    """Zero the first octet of loopback IPv4 addresses; leave others untouched.

    Sorting on the surrogate pulls every ``127.*`` alias to the front of the
    IPv4 block while keeping the relative order of loopback addresses.

    Examples
    --------
    >>> str(make_surrogate_address(ipaddress.ip_address("127.0.1.1")))
    '0.0.1.1'
    >>> str(make_surrogate_address(ipaddress.ip_address("10.20.30.40")))
    '10.20.30.40'
    """

    if isinstance(address, ipaddress.IPv4Address) and address.packed[0] == _LOOPBACK_OCTET:
        return ipaddress.IPv4Address(b"\x00" + address.packed[1:])
    return address


class HostEntry:
    """One ``domain -> address`` binding.

    Identity (``domain``, ``address``, ``ipv6``) is fixed at construction.
    ``enabled`` is the only mutable field and is changed by :class:`HostList`
    methods; code outside the collection should not assign it directly.

    Equality and hashing use ``domain`` and ``address`` only.

    Examples
    --------
    >>> HostEntry.new("localhost", "127.0.0.1").format()
    '127.0.0.1 localhost'
    >>> HostEntry.new("a", "10.0.0.1", False) == HostEntry.new("a", "10.0.0.1", True)
    True
    """

    __slots__ = ("_domain", "_address", "_address_text", "_ipv6", "enabled")

    def __init__(self, domain: str, address: Address | None, address_text: str, ipv6: bool, enabled: bool) -> None:
        self._domain = domain
        self._address = address
        self._address_text = address_text
        self._ipv6 = ipv6
        self.enabled = enabled

    @classmethod
    def new(cls, domain: str, address_text: str, enabled: bool = True) -> "HostEntry":
        """Build an entry from raw text.

        An unparseable address produces an entry for which :meth:`is_valid`
        returns ``False`` instead of raising. The family flag (``:`` present)
        is derived from the input text because parsing may normalise it.
        """

        return cls(domain, parse_address(address_text), address_text, ":" in address_text, enabled)

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def address(self) -> Address | None:
        return self._address

    @property
    def ipv6(self) -> bool:
        return self._ipv6

    @property
    def version(self) -> int:
        """Address family selector (``4`` or ``6``) for this entry."""

        return 6 if self._ipv6 else 4

    @property
    def ip(self) -> str:
        """Canonical text of the address, or the raw input when it did not parse."""

        if self._address is None:
            return self._address_text
        if isinstance(self._address, ipaddress.IPv6Address) and self._address.ipv4_mapped is not None:
            # dotted tail of a mapped address fails looks_like_ipv6
            return self._address.exploded
        return str(self._address)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostEntry):
            return NotImplemented
        return self._domain == other._domain and self._address == other._address

    def __hash__(self) -> int:
        return hash((self._domain, self._address))

    def __repr__(self) -> str:
        return f"HostEntry(domain={self._domain!r}, ip={self.ip!r}, enabled={self.enabled!r})"

    def equal_address(self, address: Address | str | None) -> bool:
        """Return ``True`` when *address* (object or text) matches this entry."""

        if isinstance(address, str):
            address = parse_address(address)
        return self._address == address

    def is_valid(self) -> bool:
        """Spot-check that the domain is not blank and the address parsed."""

        return self._domain != "" and self._address is not None

    def is_writable(self) -> bool:
        """Return ``True`` when the rendered line parses back into this entry.

        Stricter than :meth:`is_valid`: the domain must be one token and the
        address text must pass the parser's shape checks, which scoped
        (``fe80::1%eth0``) and IPv4-mapped (``::ffff:1.2.3.4``) spellings fail.

        Examples
        --------
        >>> HostEntry.new("router", "fe80::1").is_writable(), HostEntry.new("router", "fe80::1%eth0").is_writable()
        (True, False)
        """

        return (
            self.is_valid()
            and looks_like_domain(self._domain)
            and looks_like_address(self._address_text)
            and looks_like_address(self.ip)
        )

    def format(self) -> str:
        """Render the hosts file line, commented out when disabled.

        Examples
        --------
        >>> HostEntry.new("blah.example.com", "127.0.0.1", False).format()
        '# 127.0.0.1 blah.example.com'
        """

        line = f"{self.ip} {self._domain}"
        if not self.enabled:
            line = "# " + line
        return line

    def format_enabled(self) -> str:
        return "(On)" if self.enabled else "(Off)"

    def format_human(self) -> str:
        """Render ``domain -> address (On|Off)`` for listings.

        Examples
        --------
        >>> HostEntry.new("blah.example.com", "127.0.0.1", False).format_human()
        'blah.example.com -> 127.0.0.1 (Off)'
        """

        return f"{self._domain} -> {self.ip} {self.format_enabled()}"

    def to_record(self) -> dict[str, object]:
        """Return the JSON-ready ``{"domain", "ip", "enabled"}`` record."""

        return {"domain": self._domain, "ip": self.ip, "enabled": self.enabled}
