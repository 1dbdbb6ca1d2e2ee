"""
SIP URI model and parser.

Handles URIs of the form ``scheme:[user[;user-params]@]host[:port][;params]``
for the sip, sips and tel schemes, and conversion between URIs and socket
addresses.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._address import (
    SocketAddress,
    classify_address,
    classify_address_bracket_aware,
    parse_port,
)
from .._types import (
    AddressKind,
    ParseError,
    ParserDefaults,
    Scheme,
    Transport,
    TransportMode,
)
from .._utils import DEFAULTS, logger
from ._params import extract_parameter


# ============================================================================
# URI Model
# ============================================================================


@dataclass
class Uri:
    """
    Parsed SIP URI.

    Attributes:
        raw: URI text
        scheme: sip, sips or tel
        user: User part; when user parameters follow, the ``;`` separator
            stays at the end of the user (``alice;``)
        host: Host, IPv6 literals keep their brackets
        port: Port as written, default when absent
        port_number: Port as integer
        address_kind: Classification of the host
        params: URI parameters without the leading ``;``
        user_params: Parameters of the user part
        transport: From the ``transport`` parameter, udp when absent
    """

    raw: str
    scheme: Scheme
    host: str
    user: str = ""
    port: str = "5060"
    port_number: int = 5060
    address_kind: AddressKind = AddressKind.NONE
    params: str = ""
    user_params: str = ""
    transport: Transport = Transport.UDP

    def __str__(self) -> str:
        return self.raw


# ============================================================================
# URI Parser
# ============================================================================


def _scan_delimiters(text: str, delimiters: str) -> dict[str, int]:
    """
    Find the first position of each delimiter in one forward pass.

    Delimiters that do not occur map to -1.
    """
    found = dict.fromkeys(delimiters, -1)
    pending = len(found)
    for index, char in enumerate(text):
        if char in found and found[char] < 0:
            found[char] = index
            pending -= 1
            if not pending:
                break
    return found


def _first_of(text: str, delimiters: str) -> int:
    """Return the position of the first char of ``delimiters`` in text, or -1."""
    positions = [pos for pos in _scan_delimiters(text, delimiters).values() if pos >= 0]
    return min(positions) if positions else -1


def _classify_host(host: str, uri_text: str) -> AddressKind:
    """Classify a URI host; a bracketed host must be an IPv6 literal."""
    kind = classify_address_bracket_aware(host)
    if host.startswith("[") and kind is not AddressKind.IPV6:
        raise ParseError(f"Invalid IPv6 host in URI: {uri_text!r}")
    return kind


class UriParser:
    """
    Parser for SIP URIs.

    Example:
        >>> uri = UriParser.parse("sip:alice@atlanta.com:5070;transport=tcp")
        >>> uri.user, uri.host, uri.port_number, uri.transport
        ('alice', 'atlanta.com', 5070, <Transport.TCP: 'tcp'>)
    """

    @staticmethod
    def parse(text: str, *, defaults: ParserDefaults = DEFAULTS) -> Uri:
        """
        Parse a URI.

        Args:
            text: URI text
            defaults: Port and transport used when the URI leaves them out

        Returns:
            Uri instance

        Raises:
            ParseError: If the scheme is unknown, the user part is empty, the
                host or port is malformed, or the transport is unknown
        """
        scheme_token, sep, rest = text.partition(":")
        if not sep:
            raise ParseError(f"Missing scheme in URI: {text!r}")
        scheme = Scheme.match(scheme_token)
        if scheme is None:
            raise ParseError(f"Unsupported URI scheme: {scheme_token!r}")
        if not rest:
            raise ParseError(f"Empty URI after scheme: {text!r}")

        uri = Uri(
            raw=text,
            scheme=scheme,
            host="",
            port=defaults.port,
            port_number=defaults.port_number,
            transport=defaults.transport,
        )

        positions = _scan_delimiters(rest, "@:;")
        at_pos = positions["@"]
        if at_pos == 0:
            raise ParseError(f"Empty user part in URI: {text!r}")
        if at_pos < 0 and positions[":"] < 0 and positions[";"] < 0:
            # No user, no port, no params
            uri.host = rest
            uri.address_kind = _classify_host(rest, text)
            return uri

        if at_pos > 0:
            user = rest[:at_pos]
            host_port_params = rest[at_pos + 1 :]
            user_sc = user.find(";")
            if user_sc == 0:
                raise ParseError(f"Empty user part in URI: {text!r}")
            if user_sc < 0:
                uri.user = user
            else:
                uri.user = user[: user_sc + 1]
                uri.user_params = user[user_sc + 1 :]
        else:
            host_port_params = rest

        if not host_port_params:
            raise ParseError(f"Empty host in URI: {text!r}")

        if _first_of(host_port_params, ":;") < 0:
            # No port, no params
            uri.host = host_port_params
            uri.address_kind = _classify_host(uri.host, text)
            return uri

        if host_port_params.startswith("["):
            if host_port_params.endswith("]"):
                # Only an IPv6 literal
                uri.host = host_port_params
                uri.address_kind = classify_address_bracket_aware(uri.host)
                if uri.address_kind is not AddressKind.IPV6:
                    raise ParseError(f"Invalid IPv6 host in URI: {text!r}")
                return uri
            literal, sep, port_params = host_port_params.partition("]")
            if not sep:
                raise ParseError(f"Unterminated IPv6 host in URI: {text!r}")
            uri.host = literal + "]"
            uri.address_kind = classify_address_bracket_aware(uri.host)
            if uri.address_kind is not AddressKind.IPV6:
                raise ParseError(f"Invalid IPv6 host in URI: {text!r}")
        else:
            split_pos = _first_of(host_port_params, ":;")
            uri.host = host_port_params[:split_pos]
            if not uri.host:
                raise ParseError(f"Empty host in URI: {text!r}")
            uri.address_kind = classify_address(uri.host)
            port_params = host_port_params[split_pos:]

        if port_params.startswith(":"):
            sc_pos = port_params.find(";")
            port = port_params[1:] if sc_pos < 0 else port_params[1:sc_pos]
            uri.port_number = parse_port(port)
            uri.port = port
            if sc_pos < 0:
                return uri
            params = port_params[sc_pos:]
        elif port_params.startswith(";"):
            params = port_params
        else:
            raise ParseError(f"Unexpected text after host in URI: {text!r}")

        uri.params = params[1:]
        if ";transport=" not in params:
            return uri
        transport_param = extract_parameter(params, "transport")
        if transport_param is not None:
            transport = Transport.match(transport_param.value)
            if transport is None:
                logger.debug(f"Rejecting URI {text!r}: unknown transport")
                raise ParseError(
                    f"Unknown transport in URI: {transport_param.value!r}"
                )
            uri.transport = transport
        return uri

    @staticmethod
    def to_socket_address(
        uri: Uri, *, defaults: ParserDefaults = DEFAULTS
    ) -> SocketAddress:
        """
        Build the socket address a URI points at.

        Missing host, port and transport fall back to ``defaults``.
        """
        transport = uri.transport or defaults.transport
        host = uri.host or defaults.host
        if uri.port:
            port, port_number = uri.port, uri.port_number
        else:
            port, port_number = defaults.port, defaults.port_number
        return SocketAddress(
            raw=f"{transport.value}:{host}:{port}",
            host=host,
            transport=transport,
            port=port,
            port_number=port_number,
            address_kind=classify_address_bracket_aware(host),
        )

    @staticmethod
    def from_socket_address(
        address: SocketAddress,
        user: str = "",
        transport_mode: TransportMode | int = TransportMode.EXPLICIT,
        *,
        defaults: ParserDefaults = DEFAULTS,
    ) -> Uri:
        """
        Build a sip URI for a socket address.

        Args:
            address: Target socket address
            user: Optional user part
            transport_mode: IMPLICIT_UDP (0) leaves ``;transport=udp`` out;
                other transports are always written

        Example:
            >>> addr = parse_socket_address("tcp:10.0.0.1:5070")
            >>> UriParser.from_socket_address(addr, "bob").raw
            'sip:bob@10.0.0.1:5070;transport=tcp'
        """
        transport = address.transport or defaults.transport
        host = address.host or defaults.host
        if address.port:
            port, port_number = address.port, address.port_number
        else:
            port, port_number = defaults.port, defaults.port_number

        user_part = f"{user}@" if user else ""
        raw = f"{defaults.scheme.value}:{user_part}{host}:{port}"
        params = ""
        if transport_mode != TransportMode.IMPLICIT_UDP or transport is not Transport.UDP:
            params = f"transport={transport.value}"
            raw += f";{params}"

        return Uri(
            raw=raw,
            scheme=defaults.scheme,
            host=host,
            user=user,
            port=port,
            port_number=port_number,
            address_kind=classify_address_bracket_aware(host),
            params=params,
            transport=transport,
        )


# Module-level entry points
parse_uri = UriParser.parse
uri_to_socket_address = UriParser.to_socket_address
socket_address_to_uri = UriParser.from_socket_address


__all__ = [
    "Uri",
    "UriParser",
    "parse_uri",
    "uri_to_socket_address",
    "socket_address_to_uri",
]
