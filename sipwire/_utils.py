"""Utilities and constants for SIP wire elements."""

from __future__ import annotations

import logging
import typing

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from ._types import ParserDefaults, SIPError

if typing.TYPE_CHECKING:
    from ._models._message import Message

# Rich Console for pretty printing
console = Console()
_default_console = console

# Configure logging with RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
)

# Get logger for the package
logger = logging.getLogger("sipwire")

EOL = "\r\n"
SCHEME = "SIP"
VERSION = "2.0"
SIP_VERSION = f"{SCHEME}/{VERSION}"

# Defaults shared by every parser
DEFAULTS = ParserDefaults()

# Header names addressed as the sequence number header (exact match)
CSEQ_HEADERS = ("CSeq", "s")

# Standard SIP response reason phrases (RFC 3261)
REASON_PHRASES = {
    100: "Trying",
    180: "Ringing",
    181: "Call Is Being Forwarded",
    182: "Queued",
    183: "Session Progress",
    200: "OK",
    202: "Accepted",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Moved Temporarily",
    305: "Use Proxy",
    380: "Alternative Service",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    410: "Gone",
    413: "Request Entity Too Large",
    414: "Request-URI Too Long",
    415: "Unsupported Media Type",
    416: "Unsupported URI Scheme",
    420: "Bad Extension",
    421: "Extension Required",
    423: "Interval Too Brief",
    480: "Temporarily Unavailable",
    481: "Call/Transaction Does Not Exist",
    482: "Loop Detected",
    483: "Too Many Hops",
    484: "Address Incomplete",
    485: "Ambiguous",
    486: "Busy Here",
    487: "Request Terminated",
    488: "Not Acceptable Here",
    491: "Request Pending",
    493: "Undecipherable",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Server Time-out",
    505: "Version Not Supported",
    513: "Message Too Large",
    600: "Busy Everywhere",
    603: "Decline",
    604: "Does Not Exist Anywhere",
    606: "Not Acceptable",
}


def show_message(message: Message, console: Console | None = None) -> None:
    """
    Print a message's wire text inside a rich panel.

    Serializing sets Content-Length the way serialize_message does. Messages
    that cannot be serialized (no start line or no headers) are shown as the
    raw text they were parsed from.
    """
    out = console if console is not None else _default_console
    try:
        text = message.to_string()
    except SIPError:
        logger.debug("Showing unserializable message as raw text")
        text = message.raw
    title = Text(message.start_line.raw or "SIP message")
    out.print(Panel(Text(text.rstrip(EOL)), title=title))
