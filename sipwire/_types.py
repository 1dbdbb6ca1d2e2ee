"""
Type definitions for SIP wire elements.

This module centralizes the enums, the error taxonomy and the parser
configuration value shared by every parser in the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


# =============================================================================
# Enumerations
# =============================================================================


class Transport(str, Enum):
    """Transport used to reach a SIP endpoint."""

    UDP = "udp"
    TCP = "tcp"
    TLS = "tls"
    SCTP = "sctp"
    WS = "ws"
    WSS = "wss"

    @classmethod
    def match(cls, token: str) -> Transport | None:
        """Match a transport keyword case-insensitively, None if unknown."""
        try:
            return cls(token.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class Scheme(str, Enum):
    """URI scheme."""

    SIP = "sip"
    SIPS = "sips"
    TEL = "tel"

    @classmethod
    def match(cls, token: str) -> Scheme | None:
        """Match a scheme token case-insensitively, None if unknown."""
        try:
            return cls(token.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class AddressKind(Enum):
    """Kind of a textual address."""

    NONE = auto()  # Malformed or unclassifiable
    IPV4 = auto()
    IPV6 = auto()
    HOSTNAME = auto()


class ParamMode(Enum):
    """How a parameter value was written."""

    BARE = auto()  # ;name or ;name=value
    QUOTED = auto()  # ;name="value"


class StartLineKind(Enum):
    """Kind of SIP message, from its first line."""

    REQUEST = auto()
    RESPONSE = auto()


class HeaderMode(Enum):
    """Where the header block starts in the parser input."""

    FULL_MESSAGE = auto()  # Skip the start line first
    HEADERS_ONLY = auto()  # Input begins with the first header


class TransportMode(IntEnum):
    """Whether a generated URI spells out ;transport=udp."""

    IMPLICIT_UDP = 0
    EXPLICIT = 1


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class ParserDefaults:
    """Values filled in when the parsed text leaves them out."""

    port: str = "5060"
    transport: Transport = Transport.UDP
    host: str = "127.0.0.1"
    scheme: Scheme = Scheme.SIP

    @property
    def port_number(self) -> int:
        return int(self.port)


# =============================================================================
# Exceptions
# =============================================================================


class ErrorCode(IntEnum):
    """Categorical error codes carried by every SIPError."""

    ERROR = -1
    NOT_FOUND = -2

    # Start line
    FLINE_SHORT = -100
    FLINE_FORMAT = -101
    FLINE_RESPONSE_SHORT = -102
    FLINE_RESPONSE_FORMAT = -103
    FLINE_RESPONSE_CODE = -104
    FLINE_REQUEST_FORMAT = -120

    # Parameters
    PARAM_FORMAT = -150


class SIPError(Exception):
    """Base exception for SIP wire element errors."""

    code: ErrorCode = ErrorCode.ERROR


class ParseError(SIPError, ValueError):
    """Raised when text does not match the expected structure."""

    code = ErrorCode.ERROR


class NotFoundError(SIPError, LookupError):
    """Raised when a required element is absent."""

    code = ErrorCode.NOT_FOUND


class StartLineError(ParseError):
    """Base exception for start line errors."""

    pass


class StartLineShortError(StartLineError):
    """Raised when the first line is too short to be a start line."""

    code = ErrorCode.FLINE_SHORT


class StartLineFormatError(StartLineError):
    """Raised when the first line is neither a request nor a status line."""

    code = ErrorCode.FLINE_FORMAT


class ResponseLineShortError(StartLineError):
    """Raised when a status line has no room for code and reason."""

    code = ErrorCode.FLINE_RESPONSE_SHORT


class ResponseLineFormatError(StartLineError):
    """Raised when a status line cannot be split into code and reason."""

    code = ErrorCode.FLINE_RESPONSE_FORMAT


class StatusCodeError(StartLineError):
    """Raised when a status code is not an integer in 100..999."""

    code = ErrorCode.FLINE_RESPONSE_CODE


class RequestLineFormatError(StartLineError):
    """Raised when a request line lacks a usable method or URI."""

    code = ErrorCode.FLINE_REQUEST_FORMAT


class ParamFormatError(ParseError):
    """Raised when a quoted parameter value is found but not allowed."""

    code = ErrorCode.PARAM_FORMAT


__all__ = [
    # Enums
    "Transport",
    "Scheme",
    "AddressKind",
    "ParamMode",
    "StartLineKind",
    "HeaderMode",
    "TransportMode",
    # Configuration
    "ParserDefaults",
    # Exceptions
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
]
