import pytest

from printkit.radix import format_address, format_hex, format_octal

WIDTHS = [16, 32, 64]
VALUES = [1, 7, 8, 255, 4096, 0x7FFF, 2147484671, -1, -762534, -(2**31)]


@pytest.mark.parametrize("bits", WIDTHS)
@pytest.mark.parametrize("value", VALUES)
def test_hex_round_trip(value, bits):
    mask = (1 << bits) - 1
    assert int(format_hex(value, bits), 16) == value & mask


@pytest.mark.parametrize("bits", WIDTHS)
@pytest.mark.parametrize("value", VALUES)
def test_octal_round_trip(value, bits):
    mask = (1 << bits) - 1
    assert int(format_octal(value, bits), 8) == value & mask


@pytest.mark.parametrize("bits", WIDTHS)
@pytest.mark.parametrize("value", VALUES)
def test_no_leading_zeros(value, bits):
    result = format_hex(value, bits)
    if value & ((1 << bits) - 1):
        assert not result.startswith("0")
    assert not format_octal(value, bits).startswith("0") or format_octal(value, bits) == "0"


@pytest.mark.parametrize("value", VALUES)
def test_upper_matches_lower(value):
    assert format_hex(value, 32, upper=True) == format_hex(value, 32).upper()


@pytest.mark.parametrize("bits", WIDTHS)
def test_zero_is_bare(bits):
    assert format_hex(0, bits, alternate=True) == "0"
    assert format_hex(0, bits, upper=True, alternate=True) == "0"
    assert format_octal(0, bits, alternate=True) == "0"


@pytest.mark.parametrize("value", VALUES)
def test_alternate_prefixes(value):
    assert format_hex(value, 32, alternate=True) == "0x" + format_hex(value, 32)
    assert format_hex(value, 32, upper=True, alternate=True) == "0X" + format_hex(
        value, 32, upper=True
    )
    assert format_octal(value, 32, alternate=True) == "0" + format_octal(value, 32)


def test_negative_is_twos_complement():
    assert int(format_hex(-1, 32), 16) == 2**32 - 1
    assert int(format_hex(-1, 16), 16) == 2**16 - 1
    assert int(format_octal(-1, 64), 8) == 2**64 - 1
    assert len(format_hex(-1, 64)) == 16


def test_short_width_truncates():
    assert format_hex(0x12345, 16) == format_hex(0x2345, 16)
    assert format_octal(0x10000, 16) == "0"


def test_unsigned_value_from_source_test():
    ui = 2147483647 + 1024
    assert int(format_hex(ui, 32), 16) == ui
    assert int(format_octal(ui, 32), 8) == ui
    assert format_hex(ui, 32, upper=True).isupper()


def test_small_values():
    assert format_hex(255, 32) == "ff"
    assert format_hex(255, 32, upper=True, alternate=True) == "0XFF"
    assert format_octal(8, 32, alternate=True) == "010"


def test_hex_width_must_be_multiple_of_four():
    with pytest.raises(ValueError):
        format_hex(1, 30)


@pytest.mark.parametrize("bits", [0, -8])
def test_width_must_be_positive(bits):
    with pytest.raises(ValueError):
        format_hex(1, bits)
    with pytest.raises(ValueError):
        format_octal(1, bits)


def test_address_from_source_test():
    assert format_address(0x7FFE637541F0) == "0x7ffe637541f0"


def test_null_address():
    assert format_address(None) == "(nil)"
    assert format_address(0) == "(nil)"


def test_address_round_trip_and_negative():
    for addr in (1, 0xDEADBEEF, 2**63 + 5):
        assert int(format_address(addr), 16) == addr
    result = format_address(-1)
    assert result.startswith("0x")
    assert int(result, 16) == 2**64 - 1


def test_address_rejects_non_integer():
    with pytest.raises(TypeError):
        format_address("0x10")