"""
SIP start line (request line / status line) model and parser.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import (
    RequestLineFormatError,
    ResponseLineFormatError,
    ResponseLineShortError,
    StartLineFormatError,
    StartLineKind,
    StartLineShortError,
    StatusCodeError,
)
from .._utils import REASON_PHRASES, SIP_VERSION

_STRIP = " \t\r"
_RESPONSE_PREFIX = f"{SIP_VERSION} "
_REQUEST_SUFFIX = f" {SIP_VERSION}"
_MIN_LENGTH = len(_RESPONSE_PREFIX)


@dataclass
class StartLine:
    """
    First line of a SIP message.

    Requests fill ``method`` and ``request_uri``; responses fill
    ``status_code``, ``status_token`` (the code exactly as written) and
    ``reason_phrase``.
    """

    raw: str
    kind: StartLineKind
    method: str = ""
    request_uri: str = ""
    status_code: int = 0
    status_token: str = ""
    reason_phrase: str = ""

    @classmethod
    def request(cls, method: str, request_uri: str) -> StartLine:
        """Build a request line."""
        return cls(
            raw=f"{method} {request_uri}{_REQUEST_SUFFIX}",
            kind=StartLineKind.REQUEST,
            method=method,
            request_uri=request_uri,
        )

    @classmethod
    def response(cls, status_code: int, reason_phrase: str | None = None) -> StartLine:
        """Build a status line, with the standard reason phrase by default."""
        if not 100 <= status_code <= 999:
            raise StatusCodeError(f"Status code out of range: {status_code}")
        if reason_phrase is None:
            reason_phrase = REASON_PHRASES.get(status_code, "Unknown")
        token = str(status_code)
        return cls(
            raw=f"{_RESPONSE_PREFIX}{token} {reason_phrase}",
            kind=StartLineKind.RESPONSE,
            status_code=status_code,
            status_token=token,
            reason_phrase=reason_phrase,
        )

    @property
    def is_request(self) -> bool:
        return self.kind is StartLineKind.REQUEST

    @property
    def is_response(self) -> bool:
        return self.kind is StartLineKind.RESPONSE

    def __str__(self) -> str:
        return self.raw


def parse_start_line(text: str) -> StartLine:
    """
    Parse the first line of ``text`` as a request line or a status line.

    Example:
        >>> line = parse_start_line("SIP/2.0 200 OK\\r\\nVia: ...")
        >>> line.kind, line.status_code, line.reason_phrase
        (<StartLineKind.RESPONSE: 2>, 200, 'OK')

    Raises:
        StartLineShortError: Line shorter than 8 characters
        StartLineFormatError: Neither ``SIP/2.0 `` prefix nor `` SIP/2.0`` suffix
        ResponseLineShortError: Status line without room for code and reason
        ResponseLineFormatError: Code token missing or not 3 characters
        StatusCodeError: Code not an integer in 100..999
        RequestLineFormatError: Method shorter than 3 or URI shorter than 5
    """
    line = text.split("\n", 1)[0].strip(_STRIP)
    if len(line) < _MIN_LENGTH:
        raise StartLineShortError(f"Start line too short: {line!r}")

    if line.startswith(_RESPONSE_PREFIX):
        code_reason = line[len(_RESPONSE_PREFIX) :]
        if len(code_reason) < 5:
            raise ResponseLineShortError(f"Status line too short: {line!r}")
        token, sep, reason = code_reason.partition(" ")
        if not sep or len(token) != 3:
            raise ResponseLineFormatError(f"Malformed status line: {line!r}")
        if not (token.isascii() and token.isdigit()):
            raise StatusCodeError(f"Invalid status code: {token!r}")
        code = int(token)
        if not 100 <= code <= 999:
            raise StatusCodeError(f"Status code out of range: {token!r}")
        return StartLine(
            raw=line,
            kind=StartLineKind.RESPONSE,
            status_code=code,
            status_token=token,
            reason_phrase=reason.strip(_STRIP),
        )

    if not line.endswith(_REQUEST_SUFFIX):
        raise StartLineFormatError(f"Not a SIP start line: {line!r}")

    method, sep, request_uri = line[: -len(_REQUEST_SUFFIX)].partition(" ")
    if not sep or len(method) < 3 or len(request_uri) < 5:
        raise RequestLineFormatError(f"Malformed request line: {line!r}")
    return StartLine(
        raw=line,
        kind=StartLineKind.REQUEST,
        method=method.strip(_STRIP),
        request_uri=request_uri.strip(_STRIP),
    )


__all__ = ["StartLine", "parse_start_line"]
