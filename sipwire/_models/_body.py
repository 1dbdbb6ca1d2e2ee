"""
SIP message body model and extractor.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import ParseError

_SEPARATORS = ("\r\n\r\n", "\n\n")


@dataclass
class Body:
    """
    Message body.

    ``length`` is the UTF-8 byte length of ``content``; it is never checked
    against a Content-Length header.
    """

    content: str = ""
    length: int = 0
    content_type: str = ""

    @classmethod
    def from_content(cls, content: str, content_type: str = "") -> Body:
        """Build a body, computing its length."""
        return cls(
            content=content,
            length=len(content.encode("utf-8")),
            content_type=content_type,
        )


def parse_body(text: str) -> Body:
    """
    Extract the body following the first blank line.

    Raises:
        ParseError: If the text has no blank line separating headers and body
    """
    for separator in _SEPARATORS:
        _, sep, content = text.partition(separator)
        if sep:
            return Body.from_content(content)
    raise ParseError("No blank line between headers and body")


__all__ = ["Body", "parse_body"]
