"""Hosts entry behaviour: address heuristics, equality and rendering."""

from __future__ import annotations

import ipaddress

import pytest

from lib_hostsfile.domain.entry import (
    HostEntry,
    looks_like_address,
    looks_like_domain,
    looks_like_ipv4,
    looks_like_ipv6,
    make_surrogate_address,
)


@pytest.mark.parametrize("text", ["127.0.0.1", "127.0.1.1", "10.200.30.50", "99.99.99.99", "999.999.999.999", "0.1.1.0"])
def test_looks_like_ipv4_accepts_dotted_quads(text: str) -> None:
    assert looks_like_ipv4(text)


@pytest.mark.parametrize("text", ["1234.1.1.1", "123.5.6", "12.12", "76.76.67.67.45", "localhost", "::1"])
def test_looks_like_ipv4_rejects_other_shapes(text: str) -> None:
    assert not looks_like_ipv4(text)


@pytest.mark.parametrize("text", ["::1", "fe00::0", "ff02::2", "2001:DB8::1"])
def test_looks_like_ipv6_accepts_hex_and_colons(text: str) -> None:
    assert looks_like_ipv6(text)


@pytest.mark.parametrize("text", ["abc", "127.0.0.1", "fe80::1%lo0", "::ffff:1.2.3.4", ""])
def test_looks_like_ipv6_requires_colon_and_hex_only(text: str) -> None:
    assert not looks_like_ipv6(text)


def test_surrogate_zeroes_loopback_first_octet() -> None:
    loopback = ipaddress.ip_address("127.0.1.1")
    assert make_surrogate_address(loopback) == ipaddress.ip_address("0.0.1.1")
    assert loopback == ipaddress.ip_address("127.0.1.1")


@pytest.mark.parametrize("text", ["10.20.30.40", "::1", "128.0.0.1"])
def test_surrogate_leaves_other_addresses_alone(text: str) -> None:
    address = ipaddress.ip_address(text)
    assert make_surrogate_address(address) == address


def test_surrogate_of_missing_address_is_none() -> None:
    assert make_surrogate_address(None) is None


def test_new_entry_fields() -> None:
    entry = HostEntry.new("localhost", "127.0.0.1")
    assert entry.domain == "localhost"
    assert entry.ip == "127.0.0.1"
    assert entry.enabled is True
    assert entry.ipv6 is False
    assert entry.version == 4


def test_family_follows_colon_in_text() -> None:
    assert HostEntry.new("localhost", "::1").version == 6
    assert HostEntry.new("localhost", "::1").ipv6 is True


def test_equality_ignores_enabled_flag() -> None:
    assert HostEntry.new("localhost", "127.0.0.1", True) == HostEntry.new("localhost", "127.0.0.1", False)
    assert HostEntry.new("localhost", "127.0.0.1") != HostEntry.new("localhost", "127.0.1.1")
    assert HostEntry.new("localhost", "127.0.0.1") != HostEntry.new("localhost2", "127.0.0.1")


def test_equality_compares_parsed_addresses() -> None:
    assert HostEntry.new("lo", "fe00::0") == HostEntry.new("lo", "fe00::")
    assert len({HostEntry.new("lo", "fe00::0"), HostEntry.new("lo", "fe00::")}) == 1


def test_equal_address_accepts_text_or_object() -> None:
    entry = HostEntry.new("localhost", "127.0.0.1")
    assert entry.equal_address("127.0.0.1")
    assert entry.equal_address(ipaddress.ip_address("127.0.0.1"))
    assert not entry.equal_address("127.0.1.1")


def test_is_valid() -> None:
    assert HostEntry.new("localhost", "127.0.0.1").is_valid()
    assert not HostEntry.new("", "127.0.0.1").is_valid()
    assert not HostEntry.new("localhost", "localhost").is_valid()
    assert not HostEntry.new("localhost", "999.999.999.999").is_valid()


@pytest.mark.parametrize("text", ["fe80::1%eth0", "::ffff:1.2.3.4"])
def test_parseable_but_unwritable_addresses(text: str) -> None:
    entry = HostEntry.new("router", text)
    assert entry.is_valid()
    assert not entry.is_writable()


def test_is_writable_requires_single_token_domain() -> None:
    assert HostEntry.new("router", "10.0.0.1").is_writable()
    assert not HostEntry.new("", "10.0.0.1").is_writable()
    assert not HostEntry.new("my router", "10.0.0.1").is_writable()
    assert not HostEntry.new("a#b", "10.0.0.1").is_writable()
    assert not looks_like_domain("tab\tdomain")


def test_hex_mapped_address_renders_exploded() -> None:
    entry = HostEntry.new("mapped", "::ffff:102:304")
    assert entry.ip == "0000:0000:0000:0000:0000:ffff:0102:0304"
    assert looks_like_address(entry.ip)
    assert entry.is_writable()
    assert HostEntry.new("mapped", entry.ip) == entry


def test_invalid_address_renders_raw_text() -> None:
    entry = HostEntry.new("broken", "999.999.999.999")
    assert entry.ip == "999.999.999.999"
    assert entry.format() == "999.999.999.999 broken"


def test_format_and_human_output() -> None:
    disabled = HostEntry.new("blah.example.com", "127.0.0.1", False)
    enabled = HostEntry.new("blah.example.com", "127.0.0.1", True)
    assert disabled.format() == "# 127.0.0.1 blah.example.com"
    assert enabled.format() == "127.0.0.1 blah.example.com"
    assert enabled.format_human() == "blah.example.com -> 127.0.0.1 (On)"
    assert disabled.format_enabled() == "(Off)"


def test_ipv6_is_rendered_canonically() -> None:
    assert HostEntry.new("ip6-localnet", "fe00::0").format() == "fe00:: ip6-localnet"


def test_to_record() -> None:
    record = HostEntry.new("dev.example", "::1", False).to_record()
    assert record == {"domain": "dev.example", "ip": "::1", "enabled": False}
