"""
SIP message model, parser and serializer.

A Message aggregates the start line, the parsed Request-URI (requests only),
the ordered header list and the body. Header helpers operate on the message
in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .._types import NotFoundError, ParseError, SIPError, StartLineKind
from .._utils import CSEQ_HEADERS, EOL, logger
from ._body import Body, parse_body
from ._header import Header, HeaderParser
from ._start_line import StartLine, parse_start_line
from ._uri import Uri, UriParser


# ============================================================================
# Message Model
# ============================================================================


@dataclass
class Message:
    """
    Structured SIP message.

    Attributes:
        raw: Text the message was parsed from, empty for built messages
        start_line: Request line or status line
        request_uri: Parsed Request-URI, None for responses
        headers: Headers in message order
        body: Message body
    """

    start_line: StartLine
    headers: list[Header] = field(default_factory=list)
    body: Body = field(default_factory=Body)
    request_uri: Uri | None = None
    raw: str = ""

    @property
    def is_request(self) -> bool:
        """True if this is a request."""
        return self.start_line.kind is StartLineKind.REQUEST

    @property
    def is_response(self) -> bool:
        """True if this is a response."""
        return self.start_line.kind is StartLineKind.RESPONSE

    def get_header(self, name: str) -> str | None:
        return get_header(self, name)

    def set_header(self, name: str, body: str) -> None:
        set_header(self, name, body)

    def update_sequence_number(self, delta: int) -> None:
        update_sequence_number(self, delta)

    def to_string(self) -> str:
        return serialize_message(self)

    def __repr__(self) -> str:
        return f"<Message [{self.start_line.raw}] headers={len(self.headers)}>"


# ============================================================================
# Header Helpers
# ============================================================================


def get_header(message: Message, name: str) -> str | None:
    """Return the body of the first header named exactly ``name``, or None."""
    for header in message.headers:
        if header.name == name:
            return header.body
    return None


def set_header(message: Message, name: str, body: str) -> None:
    """
    Set a header body.

    The first header named exactly ``name`` is updated in place; if there is
    none, a new header is appended.
    """
    body = body.strip(" \t\r")
    for header in message.headers:
        if header.name == name:
            header.body = body
            return
    message.headers.append(Header(name=name.strip(" \t\r"), body=body))


def update_sequence_number(message: Message, delta: int) -> None:
    """
    Add ``delta`` to the number of the CSeq header (or its alias ``s``).

    Example:
        CSeq: 314159 INVITE  --(delta=1)-->  CSeq: 314160 INVITE

    Raises:
        NotFoundError: If the message has no CSeq header
        ParseError: If the CSeq body is not '<number> <method>'
    """
    for header in message.headers:
        if header.name not in CSEQ_HEADERS:
            continue
        parts = header.body.split(" ", 1)
        if len(parts) != 2:
            raise ParseError(f"Malformed CSeq: {header.body!r}")
        number, method = parts
        digits = number[1:] if number[:1] in "+-" else number
        if not (digits.isascii() and digits.isdigit()):
            raise ParseError(f"Non-numeric CSeq number: {number!r}")
        sequence = int(number)
        header.body = f"{sequence + delta} {method}"
        return
    raise NotFoundError("Message has no CSeq header")


# ============================================================================
# Message Parser
# ============================================================================


class MessageParser:
    """
    SIP message parser and serializer.

    Runs the start line, Request-URI, header and body parsers in order; the
    first failing step aborts the parse with its own error.
    """

    @staticmethod
    def parse(data: str | bytes, *, strict: bool = False) -> Message:
        """
        Parse a SIP message.

        Args:
            data: Raw message, bytes are decoded as UTF-8
            strict: Raise when there is no blank line before the body; by
                default such a message parses with an empty body

        Returns:
            Message instance

        Example:
            >>> msg = MessageParser.parse(
            ...     "INVITE sip:bob@biloxi.com SIP/2.0\\r\\nCSeq: 1 INVITE\\r\\n\\r\\n"
            ... )
            >>> msg.request_uri.host
            'biloxi.com'
        """
        if isinstance(data, bytes):
            try:
                text = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(f"Message is not valid UTF-8: {exc}") from exc
        else:
            text = data

        start_line = parse_start_line(text)
        request_uri = None
        if start_line.kind is StartLineKind.REQUEST:
            request_uri = UriParser.parse(start_line.request_uri)
        headers = HeaderParser.parse(text)

        try:
            body = parse_body(text)
        except ParseError:
            if strict:
                raise
            logger.debug("No body separator found, using an empty body")
            body = Body()

        message = Message(
            start_line=start_line,
            headers=headers,
            body=body,
            request_uri=request_uri,
            raw=text,
        )
        content_type = get_header(message, "Content-Type")
        if content_type is not None:
            body.content_type = content_type
        return message

    @staticmethod
    def to_string(message: Message) -> str:
        """
        Serialize a message to wire text.

        Content-Length (and Content-Type, when known) are set from the body
        when it is not empty.

        Raises:
            SIPError: If the message has no start line or no headers
        """
        if not message.start_line.raw or not message.headers:
            raise SIPError("Message needs a start line and at least one header")

        if message.body.length > 0:
            set_header(message, "Content-Length", str(message.body.length))
            if message.body.content_type:
                set_header(message, "Content-Type", message.body.content_type)

        parts = [message.start_line.raw, EOL, HeaderParser.to_string(message.headers), EOL]
        if message.body.length > 0:
            parts.append(message.body.content)
        return "".join(parts)


# Module-level entry points
parse_message = MessageParser.parse
serialize_message = MessageParser.to_string


__all__ = [
    "Message",
    "MessageParser",
    "get_header",
    "set_header",
    "update_sequence_number",
    "parse_message",
    "serialize_message",
]
