# ftlib

Small helpers for characters, numbers, byte buffers, strings, linked lists,
stream output, printf-style formatting and reading lines from file
descriptors. There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftlib.chars`: ASCII classification and case conversion. `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and `to_upper`
  take an integer code or a one-character string; the case converters return
  the same type they were given. Only ASCII letters count as letters.
- `ftlib.numbers`: `atoi` and `atof` parse a leading number, skipping leading
  whitespace and allowing one sign only when a digit follows it; text without
  a number gives `0` / `0.0`. `atof` has no exponent notation. `itoa` returns
  the decimal form of an integer.
- `ftlib.memory`: byte-buffer operations `memset`, `bzero`, `calloc`,
  `memchr` (returns an index or `None`), `memcmp`, `memcpy` and `memmove`
  (which copies between two offsets inside one buffer, overlap allowed).
  Counts larger than a buffer raise `IndexError`; negative counts raise
  `ValueError`.
- `ftlib.strings`: `strchr`, `strrchr`, `strnstr` return indexes or `None`;
  `strncmp` returns the difference of the first differing codes;
  `strlcpy` and `strlcat` return a `(text, length)` pair; and `substr`,
  `strjoin`, `strtrim`, `split` (drops empty pieces), `strmapi` and
  `striteri` (replaces items in a mutable sequence when the function
  returns something other than `None`).
- `ftlib.linked`: a singly linked `LinkedList` of `Node` objects with
  `push_front`, `push_back`, `last`, `iterate`, `map`, `clear`, `len()` and
  iteration over the contents.
- `ftlib.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, standard output by default.
- `ftlib.printf`: `format_printf` and `printf` support `%c %s %p %d %i %u %x
  %X %%`; any other character after `%` prints a single `%`. Integers follow
  32-bit wrapping. `format_unsigned` writes a number in a given digit set and
  `format_address` writes `0x…` or `(nil)`.
- `ftlib.lines`: `LineReader` reads a file descriptor a buffer at a time and
  yields lines as `bytes`, newline kept; `get_next_line` keeps one reader per
  descriptor and returns `None` at the end of the data.

## Examples

```python
from ftlib.numbers import atoi, itoa
from ftlib.strings import split, strtrim
from ftlib.printf import format_printf
from ftlib.linked import LinkedList

atoi("  -42abc")                 # -42
itoa(-2147483648)                # "-2147483648"
split("  hello  world ", " ")    # ["hello", "world"]
strtrim("xxhixx", "x")           # "hi"
format_printf("%d in hex is %x", 255, 255)   # "255 in hex is ff"

items = LinkedList([1, 2, 3])
list(items.map(lambda x: x * 2))  # [2, 4, 6]
```

Reading a file line by line:

```python
import os
from ftlib.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```