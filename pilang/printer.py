"""Rendering of values for the `echo` form."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from pilang.types.value import Value

REPLACEMENT_CHAR = "\ufffd"


def codepoint_to_char(cp: int) -> str:
    """Character for code point `cp`, or U+FFFD when it is not a Unicode scalar value."""
    if 0 <= cp <= 0x10FFFF and not 0xD800 <= cp <= 0xDFFF:
        return chr(cp)
    return REPLACEMENT_CHAR


def _write_value(buffer: StringIO, value: Value, line: Optional[int]) -> None:
    if value.is_number:
        buffer.write(str(value.number))
    elif value.is_list:
        buffer.write("[ list ")
        for item in value.elements:
            _write_value(buffer, item, line)
            buffer.write(" ")
        buffer.write("] ")
    else:
        buffer.write(f"Unprintable Value: {value.function} line: {line}")


def render(value: Value, line: Optional[int] = None) -> str:
    """
    Render a value the way `echo` shows it.

    Numbers are decimal; lists are "[ list v1 v2 ... ] " with every element
    followed by a space; functions produce an "Unprintable Value" diagnostic.
    """
    with StringIO() as buffer:
        _write_value(buffer, value, line)
        return buffer.getvalue()
