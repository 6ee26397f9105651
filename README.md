# printfkit

A compact `printf` with a small, fixed set of conversions, plus the helpers it
sits beside: ASCII character classification, number parsing, C-style string
and byte-buffer routines, a singly linked list and simple stream output.

## Installation

```
pip install printfkit
```

## Formatting

`printfkit.printf.render` builds the formatted text. `printfkit.printf.printf`
writes it to a stream (standard output unless `stream=` is given) and returns
the number of characters written.

```python
from printfkit.printf import render, printf

render("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

printf("%c%c %u%%\n", "o", "k", 100)
# prints "ok 100%" and a newline, returns 8
```

The conversions are:

| spec | meaning                                                        |
|------|----------------------------------------------------------------|
| `%c` | one character: a one-character string, or a code reduced to 0-255 |
| `%s` | a string up to its first NUL; `None` prints as `(null)`        |
| `%p` | `0x` and an unsigned 64-bit address in hex; `0` or `None` is `(nil)` |
| `%d` | a signed 32-bit integer (larger values wrap)                   |
| `%i` | the same as `%d`                                               |
| `%u` | an unsigned 32-bit integer                                     |
| `%x` | lower-case hexadecimal, unsigned 32-bit                        |
| `%X` | upper-case hexadecimal, unsigned 32-bit                        |
| `%%` | a literal percent sign                                         |

Flags, widths and precisions are not understood. A `%` not followed by one of
the characters above is copied through unchanged, and the format string ends
at its first NUL character. Extra arguments are ignored.

`FormatError` (a subclass of `ValueError`) is raised when the format needs
more arguments than were given, or when `convert` is asked for a conversion
character it does not support. Passing a non-integer to an integer
conversion raises `TypeError`.

A single value can be formatted with `convert`:

```python
from printfkit.printf import convert

convert("X", 48879)   # 'BEEF'
```

The converters it uses live in `printfkit.conversions` and can be called
directly: `format_char`, `format_string`, `format_pointer`,
`format_unsigned`, `format_hex(n, upper=False)` and `format_int`.

## Helpers

- `printfkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`. Each takes an integer code or a
  one-character string; the case conversions return the same kind.
- `printfkit.numbers`: `atoi` parses a leading decimal integer after
  whitespace and an optional sign; `itoa` renders an integer. Both wrap to
  the signed 32-bit range.
- `printfkit.strings`: `strchr`, `strrchr`, `strncmp` and `strnstr` work on
  `str` and return indices (or `None`); `strlcpy` and `strlcat` write
  NUL-terminated bytes into a `bytearray` and return the length they tried
  to build.
- `printfkit.text`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`.
- `printfkit.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memset`, and `memmove(buf, dest, src, n)`, which copies within one buffer
  between offsets that may overlap. `calloc` raises `MemoryError` when the
  size would overflow 64 bits.
- `printfkit.lists`: `Node` and `LinkedList`, with `push_front`, `append`,
  `last`, `for_each`, `map`, `clear`, `len()` and iteration. `clear` and
  `map` accept an optional deleter that is handed each discarded value.
- `printfkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, which
  write to any text stream, standard output by default.

```python
from printfkit.text import split, strtrim
from printfkit.lists import LinkedList

split("a,,b,c", ",")          # ['a', 'b', 'c']
strtrim("--hello--", "-")     # 'hello'

items = LinkedList()
items.append(1)
items.append(2)
items.push_front(0)
list(items)                   # [0, 1, 2]
```

## What it does not do

printfkit is a library only: it installs no command-line program. Its
`printf` has no field widths, padding, precision or floating-point
conversions.

## Running the tests

```
pip install printfkit[test]
pytest
```