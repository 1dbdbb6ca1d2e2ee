"""sipwire - SIP (Session Initiation Protocol) wire element parser for Python."""

from __future__ import annotations

# Addresses
from ._address import (
    SocketAddress,
    classify_address,
    classify_address_bracket_aware,
    parse_port,
    parse_socket_address,
)

# Message models and parsers
from ._models import (
    Body,
    Header,
    HeaderParser,
    Message,
    MessageParser,
    Parameter,
    StartLine,
    Uri,
    UriParser,
    extract_parameter,
    get_header,
    is_valid_header_name,
    parse_body,
    parse_digest_auth_params,
    parse_headers,
    parse_message,
    parse_start_line,
    parse_uri,
    serialize_message,
    set_header,
    socket_address_to_uri,
    update_sequence_number,
    uri_to_socket_address,
)

# Types
from ._types import (
    AddressKind,
    ErrorCode,
    HeaderMode,
    NotFoundError,
    ParamFormatError,
    ParamMode,
    ParseError,
    ParserDefaults,
    RequestLineFormatError,
    ResponseLineFormatError,
    ResponseLineShortError,
    Scheme,
    SIPError,
    StartLineError,
    StartLineFormatError,
    StartLineKind,
    StartLineShortError,
    StatusCodeError,
    Transport,
    TransportMode,
)

# Utilities
from ._utils import (
    CSEQ_HEADERS,
    DEFAULTS,
    EOL,
    REASON_PHRASES,
    SIP_VERSION,
    console,
    logger,
    show_message,
)

__version__ = "0.1.0"

__all__ = [
    # Addresses
    "classify_address",
    "classify_address_bracket_aware",
    "parse_port",
    "parse_socket_address",
    "SocketAddress",
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
    # Enums
    "AddressKind",
    "HeaderMode",
    "ParamMode",
    "Scheme",
    "StartLineKind",
    "Transport",
    "TransportMode",
    # Configuration
    "ParserDefaults",
    "DEFAULTS",
    # Errors
    "ErrorCode",
    "SIPError",
    "ParseError",
    "NotFoundError",
    "StartLineError",
    "StartLineShortError",
    "StartLineFormatError",
    "ResponseLineShortError",
    "ResponseLineFormatError",
    "StatusCodeError",
    "RequestLineFormatError",
    "ParamFormatError",
    # Utilities - Console & Logging
    "console",
    "logger",
    "show_message",
    # Constants
    "EOL",
    "SIP_VERSION",
    "CSEQ_HEADERS",
    "REASON_PHRASES",
    # Metadata
    "__version__",
]
