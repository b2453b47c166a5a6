# printkit

Building blocks for printf-style output. Each conversion is a plain
function that turns one value into the text a C `printf` conversion
would produce for it. Integers wrap to a fixed bit width, negative
numbers show in two's complement, and `None` stands in for a null
pointer. There is also a small buffered writer for text streams.

## Installing

```
pip install .
```

## Integers: `printkit.integers`

```python
from printkit.integers import format_signed, format_unsigned, format_binary

format_signed(-762534)           # "-762534"
format_signed(5, sign="+")       # "+5"
format_signed(5, sign=" ")       # " 5"
format_signed(40000, bits=16)    # "-25536"  (wraps as a 16-bit int)
format_unsigned(-1)              # "4294967295"
format_binary(98)                # "1100010"
```

- `format_signed(value, bits=32, sign="")`: signed decimal. `sign` is
  `""`, `"+"` or `" "` and goes before non-negative numbers. Any other
  sign raises `ValueError`.
- `format_unsigned(value, bits=32)`: unsigned decimal of that width.
- `format_binary(value)`: 32-bit binary with no leading zeros.

## Hexadecimal, octal, addresses: `printkit.radix`

```python
from printkit.radix import format_hex, format_octal, format_address

format_hex(255)                              # "ff"
format_hex(-1, 16, True, False)              # "FFFF"
format_hex(255, upper=True, alternate=True)  # "0XFF"
format_octal(8, alternate=True)              # "010"
format_address(0x7FFE637541F0)               # "0x7ffe637541f0"
format_address(None)                         # "(nil)"
```

- `format_hex(value, bits=32, upper=False, alternate=False)`: `bits`
  must be a multiple of 4. With `alternate`, non-zero results get a
  `0x` or `0X` prefix. Zero always prints as `0`.
- `format_octal(value, bits=32, alternate=False)`: with `alternate`,
  non-zero results get a leading `0`.
- `format_address(value)`: a 64-bit address in lower-case hex. `None`
  and `0` give `(nil)`.

## Characters and strings: `printkit.text`

```python
from printkit.text import (
    format_char, format_string, format_reversed,
    format_rot13, format_percent, format_escaped,
)

format_char("H")                  # "H"
format_char(72)                   # "H"
format_string(None)               # "(null)"
format_reversed("abc")            # "cba"
format_reversed(None)             # "(llun)"
format_rot13("Hello")             # "Uryyb"
format_rot13(None)                # "(avyy)"
format_percent()                  # "%"
format_escaped("Best\nSchool")    # "Best\\x0ASchool"
```

`format_escaped` accepts `str`, which it encodes as UTF-8, or `bytes`.
It writes each byte below 32, or 127 and above, as `\x` followed by two
upper-case hex digits.

## Bit strings: `printkit.bits`

Lower-level helpers used by the renderers above:

- `twos_complement_bits(value, width)`: for example
  `twos_complement_bits(-1, 8)` gives `"11111111"`.
- `bits_to_hex(bits, upper=False)` and `bits_to_octal(bits)`: both keep
  leading zeros.
- `strip_leading_zeros(digits)`: an all-zero string gives `"0"`.

## Buffered output: `printkit.output`

`OutputBuffer(stream=None, size=1024)` holds up to `size` characters.
It writes them to `stream` (default `sys.stdout`) when it fills, when
`flush()` is called, or when it leaves a `with` block.

```python
import io
from printkit.output import OutputBuffer

out = io.StringIO()
with OutputBuffer(out) as buf:
    buf.put("[")
    buf.write("ok")
    buf.put("]")
out.getvalue()   # "[ok]"
```

## What it does not do

printkit has no format-string interpreter. There is no `printf`
function that reads `%d` or `%s` directives from a template, and there
is no command-line program. To format a whole line, call the conversion
functions and join the results yourself, or write them through an
`OutputBuffer`.

## Running the tests

```
pip install .[test]
pytest
```