"""
Digest authentication header parsing.

Reads the parameters of a WWW-Authenticate / Proxy-Authenticate header body
such as ``Digest realm="atlanta.com", nonce="84a4cc6f", algorithm=MD5``.
"""

from __future__ import annotations

_TRIM = '" '


def _split_items(text: str) -> list[str]:
    """Split on commas that are not inside double quotes."""
    items: list[str] = []
    current = ""
    in_quotes = False
    for char in text:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            items.append(current)
            current = ""
            continue
        current += char
    items.append(current)
    return items


def parse_digest_auth_params(header_body: str) -> dict[str, str] | None:
    """
    Parse the parameters of a Digest challenge.

    Args:
        header_body: Header body, starting with the scheme token

    Returns:
        Parameter names mapped to values with quotes removed, or None if the
        scheme is not exactly ``Digest``

    Example:
        >>> parse_digest_auth_params('Digest realm="atlanta.com", qop="auth"')
        {'realm': 'atlanta.com', 'qop': 'auth'}
    """
    scheme, sep, rest = header_body.strip(" ").partition(" ")
    if not sep or scheme != "Digest":
        return None

    params: dict[str, str] = {}
    for item in _split_items(rest):
        key, sep, value = item.partition("=")
        if not sep:
            continue
        params[key.strip(_TRIM)] = value.strip(_TRIM)
    return params


__all__ = ["parse_digest_auth_params"]
