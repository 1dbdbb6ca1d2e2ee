"""
Unit tests for address classification and socket address parsing.
"""

import pytest

from sipwire import (
    AddressKind,
    ParseError,
    ParserDefaults,
    Transport,
    classify_address,
    classify_address_bracket_aware,
    parse_socket_address,
)


class TestClassifyAddress:
    """Tests for classify_address and its bracket aware variant."""

    @pytest.mark.parametrize(
        "text, kind",
        [
            ("192.168.1.10", AddressKind.IPV4),
            ("::1", AddressKind.IPV6),
            ("2001:db8::7", AddressKind.IPV6),
            ("atlanta.com", AddressKind.HOSTNAME),
            ("localhost", AddressKind.HOSTNAME),
            ("300.1.1.1", AddressKind.HOSTNAME),
            ("", AddressKind.HOSTNAME),
        ],
    )
    def test_classify(self, text: str, kind: AddressKind):
        """Test plain address classification."""
        assert classify_address(text) is kind

    def test_bracketed_ipv6(self):
        """Test that a bracketed IPv6 literal is IPv6."""
        assert classify_address_bracket_aware("[::1]") is AddressKind.IPV6
        assert classify_address_bracket_aware("[2001:db8::7]") is AddressKind.IPV6

    def test_bracketed_not_ipv6(self):
        """Test that brackets around a non IPv6 value are rejected."""
        assert classify_address_bracket_aware("[10.0.0.1]") is AddressKind.NONE
        assert classify_address_bracket_aware("[example.com]") is AddressKind.NONE

    def test_unbalanced_brackets(self):
        """Test that a missing closing bracket is rejected."""
        assert classify_address_bracket_aware("[::1") is AddressKind.NONE
        assert classify_address_bracket_aware("[") is AddressKind.NONE

    def test_unbracketed_delegates(self):
        """Test that unbracketed input uses the plain classifier."""
        assert classify_address_bracket_aware("10.0.0.1") is AddressKind.IPV4
        assert classify_address_bracket_aware("biloxi.com") is AddressKind.HOSTNAME


class TestParseSocketAddress:
    """Tests for parse_socket_address."""

    @pytest.mark.parametrize("text", ["10.0.0.1", "biloxi.com", "localhost"])
    def test_defaults_without_transport_and_port(self, text: str):
        """Test that transport and port default to udp and 5060."""
        addr = parse_socket_address(text)

        assert addr.raw == text
        assert addr.host == text
        assert addr.transport is Transport.UDP
        assert addr.port == "5060"
        assert addr.port_number == 5060

    def test_bare_ipv6_literal(self):
        """Test a bracketed IPv6 literal on its own."""
        addr = parse_socket_address("[::1]")

        assert addr.host == "[::1]"
        assert addr.address_kind is AddressKind.IPV6
        assert addr.transport is Transport.UDP
        assert addr.port_number == 5060

    def test_bare_bracketed_non_ipv6(self):
        """Test that a bracketed IPv4 literal is rejected."""
        with pytest.raises(ParseError):
            parse_socket_address("[10.0.0.1]")

    def test_transport_host_port(self):
        """Test a fully specified address."""
        addr = parse_socket_address("tcp:10.0.0.1:5070")

        assert addr.transport is Transport.TCP
        assert addr.host == "10.0.0.1"
        assert addr.port == "5070"
        assert addr.port_number == 5070
        assert addr.address_kind is AddressKind.IPV4

    def test_transport_is_case_insensitive(self):
        """Test upper and mixed case transport keywords."""
        assert parse_socket_address("TLS:example.com:5061").transport is Transport.TLS
        assert parse_socket_address("Wss:example.com").transport is Transport.WSS

    def test_transport_without_port(self):
        """Test that a missing port defaults after a transport prefix."""
        addr = parse_socket_address("sctp:example.com")

        assert addr.transport is Transport.SCTP
        assert addr.host == "example.com"
        assert addr.port_number == 5060
        assert addr.address_kind is AddressKind.HOSTNAME

    def test_host_and_port_without_transport(self):
        """Test that an unknown first token is read as the host."""
        addr = parse_socket_address("biloxi.com:5080")

        assert addr.transport is Transport.UDP
        assert addr.host == "biloxi.com"
        assert addr.port_number == 5080

    def test_ipv6_with_port(self):
        """Test a bracketed IPv6 literal followed by a port."""
        addr = parse_socket_address("[2001:db8::7]:5062")

        assert addr.host == "[2001:db8::7]"
        assert addr.port_number == 5062
        assert addr.transport is Transport.UDP
        assert addr.address_kind is AddressKind.IPV6

    def test_ipv6_with_transport_and_port(self):
        """Test transport, IPv6 literal and port together."""
        addr = parse_socket_address("tls:[::1]:5061")

        assert addr.transport is Transport.TLS
        assert addr.host == "[::1]"
        assert addr.port_number == 5061

    def test_ipv6_with_transport_without_port(self):
        """Test that the port defaults after transport and IPv6 literal."""
        addr = parse_socket_address("tcp:[::1]")

        assert addr.transport is Transport.TCP
        assert addr.host == "[::1]"
        assert addr.port_number == 5060

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "udp:[::1",
            "[::1]x5060",
            "tcp:[::1]5060",
            "udp:[10.0.0.1]:5060",
            "udp:10.0.0.1:abc",
            "udp:10.0.0.1:0",
            "udp:10.0.0.1:70000",
            "udp::5060",
            "10.0.0.1:",
        ],
    )
    def test_malformed(self, text: str):
        """Test that malformed addresses are rejected."""
        with pytest.raises(ParseError):
            parse_socket_address(text)

    def test_custom_defaults(self):
        """Test that defaults can be replaced per call."""
        defaults = ParserDefaults(port="5080", transport=Transport.TCP)
        addr = parse_socket_address("example.com", defaults=defaults)

        assert addr.transport is Transport.TCP
        assert addr.port == "5080"
        assert addr.port_number == 5080

    def test_str_is_raw(self):
        """Test that str() returns the parsed text."""
        assert str(parse_socket_address("udp:10.0.0.1:5060")) == "udp:10.0.0.1:5060"
