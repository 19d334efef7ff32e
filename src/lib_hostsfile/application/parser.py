"""Hosts file line parser.

Purpose
-------
Turn one line of a hosts file into zero or more :class:`HostEntry` objects.
The parser is stateless and permissive: anything that does not start with an
address-shaped token is treated as a comment and yields nothing.

Contents
--------
* :func:`parse_line` – the parser.
* :func:`split_lines` – split raw bytes into text lines.
"""

from __future__ import annotations

from ..domain.entry import HostEntry, looks_like_address

_TRIM_CHARACTERS = " \n\t"


def parse_line(line: str) -> list[HostEntry]:
    """Return the entries described by *line*; never raises.

    A leading ``#`` marks the entries disabled and the rest of the line is
    trimmed. Any later ``#`` starts an inline comment. Tabs become spaces,
    runs of spaces collapse, and the line is split on single spaces. The
    first token must look like an IPv4 or IPv6 address; every following
    non-empty token is a domain bound to that address. An enabled line with
    leading whitespace therefore has an empty address token and yields
    nothing.

    Examples
    --------
    >>> [entry.format() for entry in parse_line("127.0.0.1 a b")]
    ['127.0.0.1 a', '127.0.0.1 b']
    >>> [entry.format() for entry in parse_line("#10.0.0.1 x")]
    ['# 10.0.0.1 x']
    >>> parse_line("# just a comment"), parse_line("  127.0.0.1 indented")
    ([], [])
    """

    if not line:
        return []

    enabled = True
    if line.startswith("#"):
        enabled = False
        line = line[1:].strip(_TRIM_CHARACTERS)

    line = line.split("#", 1)[0].replace("\t", " ")
    while "  " in line:
        line = line.replace("  ", " ")

    address, *domains = line.split(" ")
    if not looks_like_address(address):
        return []
    return [HostEntry.new(domain, address, enabled) for domain in domains if domain]


def split_lines(data: bytes) -> list[str]:
    """Decode *data* and split it into lines, dropping a trailing ``\\r`` from each.

    Undecodable bytes are replaced so a stray byte cannot abort parsing.
    """

    return [line.removesuffix("\r") for line in data.decode("utf-8", errors="replace").split("\n")]
