"""Renderers for hexadecimal, octal and pointer conversions."""

from __future__ import annotations

from .bits import bits_to_hex, bits_to_octal, strip_leading_zeros, twos_complement_bits

NULL_ADDRESS = "(nil)"
ADDRESS_BITS = 64


def _check_width(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def format_hex(
    value: int, bits: int = 32, upper: bool = False, alternate: bool = False
) -> str:
    """Render ``value`` in hexadecimal as an integer of ``bits`` width.

    Negative numbers appear in two's complement. With ``alternate`` a
    non-zero result is prefixed with ``0x`` (or ``0X`` when ``upper``);
    zero is always rendered as a bare ``0``.
    """
    _check_width(bits)
    if bits % 4:
        raise ValueError(f"bit width {bits} is not a multiple of 4")
    pattern = twos_complement_bits(value, bits)
    if "1" not in pattern:
        return "0"
    digits = strip_leading_zeros(bits_to_hex(pattern, upper=upper))
    if alternate:
        return ("0X" if upper else "0x") + digits
    return digits


def format_octal(value: int, bits: int = 32, alternate: bool = False) -> str:
    """Render ``value`` in octal as an integer of ``bits`` width.

    Negative numbers appear in two's complement. With ``alternate`` a
    non-zero result is prefixed with ``0``; zero is rendered as ``0``.
    """
    _check_width(bits)
    pattern = twos_complement_bits(value, bits)
    if "1" not in pattern:
        return "0"
    digits = strip_leading_zeros(bits_to_octal(pattern))
    return "0" + digits if alternate else digits


def format_address(value: int | None) -> str:
    """Render a pointer value as ``0x`` and lower-case hexadecimal digits.

    ``None`` and zero, the null pointer, become ``(nil)``.
    """
    if value is None:
        return NULL_ADDRESS
    if not isinstance(value, int):
        raise TypeError(f"expected an integer address, got {type(value).__name__}")
    pattern = twos_complement_bits(value, ADDRESS_BITS)
    if "1" not in pattern:
        return NULL_ADDRESS
    return "0x" + strip_leading_zeros(bits_to_hex(pattern))