"""
Unit tests for header block parsing.
"""

import pytest

from sipwire import (
    Header,
    HeaderMode,
    HeaderParser,
    ParseError,
    is_valid_header_name,
    parse_headers,
)


class TestParseHeaders:
    """Tests for parse_headers."""

    def test_full_message(self, sample_response: str):
        """Test that the start line is skipped and order is preserved."""
        headers = parse_headers(sample_response)

        assert [h.name for h in headers] == [
            "Via",
            "To",
            "From",
            "Call-ID",
            "CSeq",
            "Content-Length",
        ]
        assert headers[4] == Header("CSeq", "314159 INVITE")
        assert headers[1].body == "Bob <sip:bob@biloxi.com>;tag=a6c85cf"

    def test_headers_only(self):
        """Test input that begins with the first header."""
        data = "\r\n  Via: SIP/2.0/UDP pc33.atlanta.com\r\nMax-Forwards: 70\r\n\r\n"
        headers = parse_headers(data, HeaderMode.HEADERS_ONLY)

        assert headers == [
            Header("Via", "SIP/2.0/UDP pc33.atlanta.com"),
            Header("Max-Forwards", "70"),
        ]

    def test_lf_line_endings(self, sample_options: str):
        """Test a message using bare LF line endings."""
        headers = parse_headers(sample_options)

        assert len(headers) == 5
        assert headers[-1] == Header("CSeq", "63104 OPTIONS")

    def test_value_with_colons(self):
        """Test that only the first colon separates name and body."""
        headers = parse_headers("Contact: <sip:alice@10.0.0.1:5060>\r\n", HeaderMode.HEADERS_ONLY)

        assert headers[0].body == "<sip:alice@10.0.0.1:5060>"

    def test_folded_header(self):
        """Test that continuation lines join into one body."""
        data = (
            "Subject: I know you're there,\r\n"
            "   pick up the phone\r\n"
            "\tand talk to me!\r\n"
            "Call-ID: abc\r\n"
            "\r\n"
        )
        headers = parse_headers(data, HeaderMode.HEADERS_ONLY)

        assert headers == [
            Header("Subject", "I know you're there, pick up the phone and talk to me!"),
            Header("Call-ID", "abc"),
        ]

    def test_duplicates_are_kept(self):
        """Test that repeated header names are all kept in order."""
        data = "Via: first\r\nVia: second\r\n\r\n"
        headers = parse_headers(data, HeaderMode.HEADERS_ONLY)

        assert [h.body for h in headers] == ["first", "second"]

    def test_name_is_kept_exactly(self):
        """Test that the header name is stored as written."""
        headers = parse_headers("X-Trace-1: on\r\n", HeaderMode.HEADERS_ONLY)

        assert headers == [Header("X-Trace-1", "on")]

    def test_compact_names(self):
        """Test single letter header names."""
        headers = parse_headers("i: abc\r\ns: 1 INVITE\r\n", HeaderMode.HEADERS_ONLY)

        assert headers == [Header("i", "abc"), Header("s", "1 INVITE")]

    def test_ends_without_blank_line(self):
        """Test a header block that ends at end of input."""
        headers = parse_headers("Via: x\r\n", HeaderMode.HEADERS_ONLY)

        assert headers == [Header("Via", "x")]

    @pytest.mark.parametrize(
        "data",
        [
            "",
            "\r\n",
            "Via SIP/2.0/UDP host\r\n",
            ": no name\r\n",
            "Via:",
            "1Via: x\r\n",
            "Via Header: x\r\n",
            "Via_x: y\r\n",
            "Via: x",
            "Via: x\r\nCall-ID: y",
        ],
    )
    def test_malformed(self, data: str):
        """Test that malformed header blocks are rejected."""
        with pytest.raises(ParseError):
            parse_headers(data, HeaderMode.HEADERS_ONLY)

    def test_full_message_without_headers(self):
        """Test that a start line alone has no header section."""
        with pytest.raises(ParseError):
            parse_headers("SIP/2.0 200 OK")
        with pytest.raises(ParseError):
            parse_headers("SIP/2.0 200 OK\r\n\r\n")

    def test_to_string(self):
        """Test serializing headers back to lines."""
        headers = [Header("Via", "x"), Header("CSeq", "1 INVITE")]

        assert HeaderParser.to_string(headers) == "Via: x\r\nCSeq: 1 INVITE\r\n"


class TestHeaderName:
    """Tests for is_valid_header_name."""

    @pytest.mark.parametrize("name", ["Via", "Call-ID", "X-Custom-1", "s", "P-Asserted-Identity"])
    def test_valid(self, name: str):
        assert is_valid_header_name(name)

    @pytest.mark.parametrize("name", ["", "1abc", "-Via", "Via ", "Vi a", "Via:", "Víä"])
    def test_invalid(self, name: str):
        assert not is_valid_header_name(name)
