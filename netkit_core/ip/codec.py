"""
IP Codec
========
Conversion between IP text and 16-byte binary form, and client IP
extraction from forwarded-for style headers.
"""

import ipaddress
from typing import Tuple, Union

import structlog

from ..exceptions import InvalidAddressError, ParseError
from .desensitize import desensitize_ip

logger = structlog.get_logger(__name__)

BINARY_LENGTH = 16

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _parse_addr(text: str) -> IPAddress:
    """Parse a bare address. An IPv6 zone is kept on the result."""
    if not isinstance(text, str):
        raise ParseError(f"expected address text, got {type(text).__name__}", value=text)
    try:
        return ipaddress.ip_address(text)
    except ValueError as exc:
        raise ParseError(f"invalid IP address: {text!r}", value=text) from exc


def _format_addr(addr: IPAddress) -> str:
    """Render an address, always writing IPv4-mapped tails in dotted form."""
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        text = f"::ffff:{addr.ipv4_mapped}"
        if addr.scope_id:
            text = f"{text}%{addr.scope_id}"
        return text
    return str(addr)


def ip_to_binary(text: str) -> bytes:
    """
    Convert IP text to its 16-byte form.

    IPv4 addresses are stored IPv4-mapped (::ffff:a.b.c.d). An IPv6 zone
    is accepted and dropped, since the 16-byte form cannot carry it.

    Args:
        text: Bare IPv4 or IPv6 address, no brackets or port

    Returns:
        16 bytes

    Raises:
        ParseError: If text is not a valid address
    """
    addr = _parse_addr(text)
    if isinstance(addr, ipaddress.IPv4Address):
        return b"\x00" * 10 + b"\xff\xff" + addr.packed
    return addr.packed


def binary_to_ip(data: bytes) -> str:
    """
    Convert a 16-byte address back to canonical text.

    Callers must pass exactly 16 bytes. Shorter input is zero-filled at
    the end and longer input is cut to 16, so the result describes a
    different address rather than failing.
    """
    if len(data) != BINARY_LENGTH:
        logger.debug("Binary address has unexpected length", length=len(data))

    buf = bytes(data[:BINARY_LENGTH]).ljust(BINARY_LENGTH, b"\x00")
    addr = ipaddress.IPv6Address(buf)
    if addr.ipv4_mapped is not None:
        return str(addr.ipv4_mapped)
    return str(addr)


def _parse_port(text: str, value: str) -> int:
    if not text.isdigit() or not text.isascii():
        raise ParseError(f"invalid port in {value!r}", value=value)
    port = int(text)
    if port > 65535:
        raise ParseError(f"port out of range in {value!r}", value=value)
    return port


def parse_addr_port(value: str) -> Tuple[IPAddress, int]:
    """
    Parse "address[:port]".

    Accepts a.b.c.d, a.b.c.d:port, bare IPv6, [ipv6] and [ipv6]:port.
    The port is 0 when absent.

    Raises:
        ParseError: If value is not a valid address with optional port
    """
    if value.startswith("["):
        end = value.find("]")
        if end < 0:
            raise ParseError(f"missing ']' in {value!r}", value=value)
        host, rest = value[1:end], value[end + 1:]
        addr = _parse_addr(host)
        if addr.version != 6:
            raise ParseError(f"brackets are only valid around IPv6: {value!r}", value=value)
        if not rest:
            return addr, 0
        if not rest.startswith(":"):
            raise ParseError(f"unexpected text after ']' in {value!r}", value=value)
        return addr, _parse_port(rest[1:], value)

    if value.count(":") == 1:
        host, port_text = value.split(":")
        addr = _parse_addr(host)
        if addr.version != 4:
            raise ParseError(f"IPv6 with port must use brackets: {value!r}", value=value)
        return addr, _parse_port(port_text, value)

    return _parse_addr(value), 0


def get_ip_from_header(header_value: str) -> str:
    """
    Extract the client IP from a forwarded-for style header.

    The last comma-separated entry wins, since it is the one appended by
    the closest proxy. Any port is dropped; an IPv6 zone is kept.

    Args:
        header_value: e.g. "10.0.0.1:1234, 203.0.113.5:80"

    Returns:
        Address text (e.g., "203.0.113.5")

    Raises:
        ParseError: If the last entry is not address[:port]
        InvalidAddressError: If the address is the unspecified address
    """
    entry = header_value.split(",")[-1].strip()
    try:
        addr, _ = parse_addr_port(entry)
    except ParseError:
        logger.debug("Unparseable client IP header entry", entry=desensitize_ip(entry))
        raise

    if addr.is_unspecified:
        raise InvalidAddressError(f"unspecified address in header: {entry!r}", value=entry)
    return _format_addr(addr)
