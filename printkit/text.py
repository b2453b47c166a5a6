"""Renderers for character and string conversions."""

from __future__ import annotations

from .bits import bits_to_hex, twos_complement_bits

_PLAIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_ROTATED = "NOPQRSTUVWXYZABCDEFGHIJKLMnopqrstuvwxyzabcdefghijklm"
_ROT13 = str.maketrans(_PLAIN, _ROTATED)

NULL_STRING = "(null)"
NULL_REVERSED = "(llun)"
NULL_ROT13 = "(avyy)"


def format_char(value: str | int) -> str:
    """Render a single character, given as a one-character string or a code.

    Integer codes are truncated to a byte, as a C ``char`` would be.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(value).__name__}")


def format_string(value: str | None) -> str:
    """Render a string; ``None`` becomes ``(null)``."""
    if value is None:
        return NULL_STRING
    return str(value)


def format_reversed(value: str | None) -> str:
    """Render a string backwards; ``None`` becomes ``(llun)``."""
    if value is None:
        return NULL_REVERSED
    return str(value)[::-1]


def format_rot13(value: str | None) -> str:
    """Render a string with ASCII letters rotated by 13; ``None`` becomes ``(avyy)``."""
    if value is None:
        return NULL_ROT13
    return str(value).translate(_ROT13)


def format_percent(value: object = None) -> str:
    """Render a literal percent sign; the argument is ignored."""
    return "%"


def _escape_byte(byte: int) -> str:
    if byte < 32 or byte >= 127:
        return "\\x" + bits_to_hex(twos_complement_bits(byte, 8), upper=True)
    return chr(byte)


def format_escaped(value: str | bytes) -> str:
    r"""Render a string with non-printable bytes shown as ``\xHH``.

    Text is encoded as UTF-8 first; bytes below 32 or from 127 upward are
    written as a backslash, ``x`` and two upper-case hexadecimal digits.
    """
    if value is None:
        raise TypeError("format_escaped needs a string, got None")
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return "".join(_escape_byte(byte) for byte in data)