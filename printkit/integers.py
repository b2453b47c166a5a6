"""Renderers for decimal and binary integer conversions."""

from __future__ import annotations

from .bits import strip_leading_zeros, twos_complement_bits

_SIGNS = ("", "+", " ")


def _check_width(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def _wrap_signed(value: int, bits: int) -> int:
    unsigned = value & ((1 << bits) - 1)
    if unsigned >= 1 << (bits - 1):
        unsigned -= 1 << bits
    return unsigned


def format_signed(value: int, bits: int = 32, sign: str = "") -> str:
    """Render ``value`` as a signed decimal of ``bits`` width.

    ``sign`` is what precedes a non-negative number: nothing, ``+`` or a
    space. Negative numbers always carry ``-``. Values outside the width
    wrap around as a C integer of that size would.
    """
    _check_width(bits)
    if sign not in _SIGNS:
        raise ValueError(f"sign must be one of {_SIGNS!r}, got {sign!r}")
    number = _wrap_signed(value, bits)
    if number < 0:
        return f"-{-number}"
    return f"{sign}{number}"


def format_unsigned(value: int, bits: int = 32) -> str:
    """Render ``value`` as an unsigned decimal of ``bits`` width."""
    _check_width(bits)
    return str(value & ((1 << bits) - 1))


def format_binary(value: int) -> str:
    """Render ``value`` as a 32-bit binary number without leading zeros.

    Negative numbers appear in two's complement.
    """
    return strip_leading_zeros(twos_complement_bits(value, 32))