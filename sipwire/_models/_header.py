"""
SIP header model and header block parser.

Headers are kept as an ordered list of name/body pairs. Names are compared
exactly and duplicates are allowed; lookups address the first match.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import HeaderMode, ParseError
from .._utils import EOL

_STRIP = " \t\r"
_FOLD = (" ", "\t")


@dataclass
class Header:
    """A header line as a name and its (unfolded) body."""

    name: str
    body: str

    def to_line(self) -> str:
        """Return the header as 'Name: Body'."""
        return f"{self.name}: {self.body}"


def is_valid_header_name(name: str) -> bool:
    """Check ``ALPHA *(ALPHA / DIGIT / "-")``."""
    if not name or not (name[0].isascii() and name[0].isalpha()):
        return False
    return all(char.isascii() and (char.isalnum() or char == "-") for char in name[1:])


def _at_end_of_headers(text: str) -> bool:
    return not text or text[0] in "\r\n"


class HeaderParser:
    """
    Parser for SIP header blocks.

    Handles line folding (RFC 3261 Section 7.3.1): a line starting with a
    space or tab continues the previous header body.
    """

    @staticmethod
    def parse(text: str, mode: HeaderMode = HeaderMode.FULL_MESSAGE) -> list[Header]:
        """
        Parse the header block of ``text``.

        Args:
            text: Full message (FULL_MESSAGE) or header lines (HEADERS_ONLY)
            mode: Whether to skip the start line first

        Returns:
            Headers in message order

        Raises:
            ParseError: If there are no headers, a name is invalid, a body is
                empty, or a header line is not terminated

        Example:
            >>> data = "Via: SIP/2.0/UDP pc33.atlanta.com\\r\\nCSeq: 1 INVITE\\r\\n\\r\\n"
            >>> [h.name for h in HeaderParser.parse(data, HeaderMode.HEADERS_ONLY)]
            ['Via', 'CSeq']
        """
        if mode is HeaderMode.FULL_MESSAGE:
            _, sep, remaining = text.partition("\n")
            if not sep:
                raise ParseError("Message has no header section")
        else:
            remaining = text.lstrip(" \t\r\n")

        if _at_end_of_headers(remaining):
            raise ParseError("Empty header section")

        headers: list[Header] = []
        while True:
            name, sep, rest = remaining.partition(":")
            if not sep or not name or not rest:
                raise ParseError(f"Malformed header line: {remaining[:40]!r}")
            if not is_valid_header_name(name):
                raise ParseError(f"Invalid header name: {name!r}")

            segments: list[str] = []
            while True:
                segment, sep, rest = rest.partition("\n")
                if not sep:
                    raise ParseError(f"Unterminated header: {name!r}")
                segments.append(segment.rstrip("\r"))
                if not rest.startswith(_FOLD):
                    break

            # Folded lines join with a single space
            body = " ".join(segment.strip(_STRIP) for segment in segments)
            headers.append(Header(name=name, body=body.strip(_STRIP)))

            remaining = rest
            if _at_end_of_headers(remaining):
                break

        return headers

    @staticmethod
    def to_string(headers: list[Header]) -> str:
        """Serialize headers as 'Name: Body' lines, each ending in CRLF."""
        return "".join(header.to_line() + EOL for header in headers)


# Module-level entry point
parse_headers = HeaderParser.parse


__all__ = ["Header", "HeaderParser", "is_valid_header_name", "parse_headers"]
