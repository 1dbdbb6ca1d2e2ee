"""
SIP Models Package.

This package contains models and parsers for SIP URIs, parameters, start
lines, headers, bodies and whole messages.
"""

from ._auth import parse_digest_auth_params
from ._body import Body, parse_body
from ._header import Header, HeaderParser, is_valid_header_name, parse_headers
from ._message import (
    Message,
    MessageParser,
    get_header,
    parse_message,
    serialize_message,
    set_header,
    update_sequence_number,
)
from ._params import Parameter, extract_parameter
from ._start_line import StartLine, parse_start_line
from ._uri import (
    Uri,
    UriParser,
    parse_uri,
    socket_address_to_uri,
    uri_to_socket_address,
)

__all__ = [
    # Parameters
    "Parameter",
    "extract_parameter",
    # URIs
    "Uri",
    "UriParser",
    "parse_uri",
    "uri_to_socket_address",
    "socket_address_to_uri",
    # Start line
    "StartLine",
    "parse_start_line",
    # Headers
    "Header",
    "HeaderParser",
    "is_valid_header_name",
    "parse_headers",
    # Body
    "Body",
    "parse_body",
    # Messages
    "Message",
    "MessageParser",
    "get_header",
    "set_header",
    "update_sequence_number",
    "parse_message",
    "serialize_message",
    # Authentication
    "parse_digest_auth_params",
]
