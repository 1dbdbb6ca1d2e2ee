"""
SIP parameter extraction.

Looks up one ``;name=value`` or ``;name`` token in a parameter string such
as ``transport=tcp;lr;maddr="a;b"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import ParamFormatError, ParamMode


@dataclass(frozen=True)
class Parameter:
    """
    One extracted parameter.

    Attributes:
        name: Parameter name
        value: Value as written; quoted values keep their quotes
        mode: BARE for ``;name`` and ``;name=value``, QUOTED for ``;name="value"``
    """

    name: str
    value: str = ""
    mode: ParamMode = ParamMode.BARE

    @property
    def unquoted(self) -> str:
        """Return the value without surrounding double quotes."""
        if (
            self.mode is ParamMode.QUOTED
            and len(self.value) >= 2
            and self.value.endswith('"')
        ):
            return self.value[1:-1]
        return self.value


def extract_parameter(
    param_string: str, name: str, allow_quoted: bool = False
) -> Parameter | None:
    """
    Extract the parameter ``name`` from ``param_string``.

    Args:
        param_string: Parameters separated by ``;``, leading ``;`` optional
        name: Parameter name (case-sensitive)
        allow_quoted: Accept values in double quotes

    Returns:
        Parameter, or None if the parameter is not present

    Raises:
        ParamFormatError: If the value is quoted and quoting is not allowed

    Example:
        >>> extract_parameter(";transport=tcp;lr", "transport")
        Parameter(name='transport', value='tcp', mode=<ParamMode.BARE: 1>)
        >>> extract_parameter(";transport=tcp;lr", "lr").value
        ''
    """
    if not param_string or len(param_string) < len(name):
        return None

    text = param_string
    if not text.startswith(";"):
        text = ";" + text
    appended = not text.endswith(";")
    if appended:
        text = text + ";"

    if f";{name};" in text:
        return Parameter(name=name, value="", mode=ParamMode.BARE)

    _, sep, segment = text.partition(f";{name}=")
    if not sep:
        return None

    if segment.startswith('"'):
        if not allow_quoted:
            raise ParamFormatError(f"Quoted value not allowed for parameter {name!r}")
        mode = ParamMode.QUOTED
        end = segment.find('";')
        if end >= 0:
            # Keep the closing quote
            end += 1
    else:
        mode = ParamMode.BARE
        end = segment.find(";")

    if end >= 0:
        value = segment[:end]
    elif appended:
        value = segment[:-1]
    else:
        value = segment
    return Parameter(name=name, value=value, mode=mode)


__all__ = ["Parameter", "extract_parameter"]
