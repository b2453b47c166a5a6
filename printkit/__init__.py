"""printf-style conversions for integers, radixes, addresses and strings, plus a buffered writer."""

__version__ = "0.1.0"
__all__ = ["bits", "output", "text", "integers", "radix"]