"""
Address classification and socket address parsing.

A socket address is written as ``[transport:]address[:port]``, for example
``udp:10.0.0.1:5060``, ``tls:[2001:db8::1]:5061`` or ``example.com``.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from ._types import AddressKind, ParseError, ParserDefaults, Transport
from ._utils import DEFAULTS, logger


# ============================================================================
# Address Classifier
# ============================================================================


def classify_address(text: str) -> AddressKind:
    """
    Classify an unbracketed address.

    Examples:
        >>> classify_address("10.0.0.1")
        <AddressKind.IPV4: 2>
        >>> classify_address("::1")
        <AddressKind.IPV6: 3>
        >>> classify_address("example.com")
        <AddressKind.HOSTNAME: 4>
    """
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return AddressKind.HOSTNAME
    for char in text:
        if char == ".":
            return AddressKind.IPV4
        if char == ":":
            return AddressKind.IPV6
    return AddressKind.NONE


def classify_address_bracket_aware(text: str) -> AddressKind:
    """Classify an address that may be an IPv6 literal in square brackets."""
    if not text.startswith("["):
        return classify_address(text)
    if len(text) < 2 or not text.endswith("]"):
        return AddressKind.NONE
    if classify_address(text[1:-1]) is not AddressKind.IPV6:
        return AddressKind.NONE
    return AddressKind.IPV6


# ============================================================================
# Socket Address
# ============================================================================


@dataclass(frozen=True)
class SocketAddress:
    """
    Parsed socket address.

    Attributes:
        raw: Text the address was built from
        transport: Transport, udp when not given
        host: Host, IPv6 literals keep their brackets
        port: Port as written
        port_number: Port as integer
        address_kind: Classification of the host
    """

    raw: str
    host: str
    transport: Transport = Transport.UDP
    port: str = "5060"
    port_number: int = 5060
    address_kind: AddressKind = AddressKind.NONE

    def __str__(self) -> str:
        return self.raw


def parse_port(text: str) -> int:
    """Parse a port token, which must be a decimal integer in 1..65535."""
    if not text.isdigit() or not text.isascii():
        raise ParseError(f"Invalid port: {text!r}")
    number = int(text)
    if not 0 < number <= 65535:
        raise ParseError(f"Port out of range: {text!r}")
    return number


def parse_socket_address(
    text: str, *, defaults: ParserDefaults = DEFAULTS
) -> SocketAddress:
    """
    Parse ``[transport:]address[:port]`` into a SocketAddress.

    Missing transport and port are filled from ``defaults``. A first token
    that is not a transport keyword is read as part of the address.

    Raises:
        ParseError: On malformed brackets, bad ports, or a bracketed
            literal that is not IPv6
    """
    if not text:
        raise ParseError("Empty socket address")

    if text.startswith("[") and text.endswith("]"):
        # Bare IPv6 literal
        if classify_address_bracket_aware(text) is not AddressKind.IPV6:
            raise ParseError(f"Invalid IPv6 literal: {text!r}")
        return SocketAddress(
            raw=text,
            host=text,
            transport=defaults.transport,
            port=defaults.port,
            port_number=defaults.port_number,
            address_kind=AddressKind.IPV6,
        )

    first, sep, rest = text.partition(":")
    if not sep:
        return SocketAddress(
            raw=text,
            host=text,
            transport=defaults.transport,
            port=defaults.port,
            port_number=defaults.port_number,
            address_kind=classify_address(text),
        )

    transport = Transport.match(first)
    if transport is None:
        # Not a transport prefix, read as address:port
        transport = defaults.transport
        addr_port = text
        has_transport = False
    else:
        addr_port = rest
        has_transport = True

    if addr_port.startswith("["):
        literal, sep, after = addr_port.partition("]")
        if not sep:
            raise ParseError(f"Unterminated IPv6 literal: {text!r}")
        host = literal + "]"
        if not after:
            if not has_transport:
                raise ParseError(f"Missing port after IPv6 literal: {text!r}")
            port = defaults.port
            port_number = defaults.port_number
        elif after.startswith(":"):
            port = after[1:]
            port_number = parse_port(port)
        else:
            raise ParseError(f"Unexpected text after IPv6 literal: {text!r}")
        if classify_address_bracket_aware(host) is not AddressKind.IPV6:
            raise ParseError(f"Invalid IPv6 literal: {host!r}")
        address_kind = AddressKind.IPV6
    else:
        host, sep, port = addr_port.partition(":")
        if sep:
            port_number = parse_port(port)
        else:
            port = defaults.port
            port_number = defaults.port_number
        if not host:
            raise ParseError(f"Empty host in socket address: {text!r}")
        address_kind = classify_address(host)

    logger.debug(f"Parsed socket address {text!r} as {transport.value}:{host}:{port}")
    return SocketAddress(
        raw=text,
        host=host,
        transport=transport,
        port=port,
        port_number=port_number,
        address_kind=address_kind,
    )


__all__ = [
    "classify_address",
    "classify_address_bracket_aware",
    "SocketAddress",
    "parse_port",
    "parse_socket_address",
]
