"""Fixed-width bit strings and their hexadecimal and octal renderings."""

from __future__ import annotations

_BINARY_DIGITS = frozenset("01")


def _check_bits(bits: str) -> None:
    if not bits:
        raise ValueError("bit string must not be empty")
    if not set(bits) <= _BINARY_DIGITS:
        raise ValueError(f"not a bit string: {bits!r}")


def twos_complement_bits(value: int, width: int) -> str:
    """Return ``value`` as a ``width``-bit two's complement bit string.

    Values outside the range of ``width`` bits are truncated to their low
    ``width`` bits.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    mask = (1 << width) - 1
    return format(value & mask, f"0{width}b")


def bits_to_hex(bits: str, upper: bool = False) -> str:
    """Convert a bit string to hexadecimal, one digit per four bits.

    The result keeps leading zeros, so its length is ``len(bits) // 4``.
    """
    _check_bits(bits)
    if len(bits) % 4:
        raise ValueError(f"bit string length {len(bits)} is not a multiple of 4")
    digits = format(int(bits, 2), f"0{len(bits) // 4}x")
    return digits.upper() if upper else digits


def bits_to_octal(bits: str) -> str:
    """Convert a bit string to octal, one digit per three bits.

    Bits are grouped from the least significant end; the most significant
    digit takes whatever bits remain. Leading zeros are kept.
    """
    _check_bits(bits)
    width = -(-len(bits) // 3)
    return format(int(bits, 2), f"0{width}o")


def strip_leading_zeros(digits: str) -> str:
    """Drop leading ``0`` characters, leaving ``"0"`` for an all-zero string."""
    return digits.lstrip("0") or "0"