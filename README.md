# ftkit

A compact toolkit of everyday helpers in plain Python, with no outside dependencies.

## Modules

- `ftkit.chars`: ASCII character tests and case conversion: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each takes an integer
  character code or a one-character string. The case converters return the same kind
  of value they were given.
- `ftkit.memory`: byte-buffer operations on `bytearray` and bytes-like objects:
  `memset`, `bzero`, `memcpy`, `memmove` (offsets within one buffer, overlap-safe),
  `memchr` (index or `None`), `memcmp`, `calloc`, `realloc`. A byte count beyond a
  buffer's length raises `ValueError`.
- `ftkit.strings`: `strlen`, `strdup`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`. The search functions return indexes or `None`. `strlcpy` and
  `strlcat` return a `(text, length)` pair.
- `ftkit.transform`: `atoi` (C-style, wraps to 32 bits), `itoa`, `substr`, `strjoin`,
  `strtrim`, `split` (drops empty pieces), `strmapi`, `striteri` (updates a mutable
  sequence of characters in place).
- `ftkit.output`: writes characters, strings, lines and integers to a raw file
  descriptor: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
- `ftkit.lists`: a singly linked list. `Node` is one link. `LinkedList` has
  `push_front`, `push_back`, `last`, `len()`, iteration, `clear`, `for_each` and `map`.
- `ftkit.lines`: line reading from file descriptors. It provides `LineReader` with
  `next_line` and `lines`, and a module-level `get_next_line` that uses a shared reader.
- `ftkit.printf`: `format_string`, `printf`, `uitoa`, `to_hex`, `format_pointer`.

String functions in `strings` and `transform` treat text as NUL-terminated. Everything
from the first `"\0"` onwards is ignored.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Examples

```python
from ftkit.transform import atoi, split, strtrim
from ftkit.printf import format_string, printf
from ftkit.lists import LinkedList
from ftkit.lines import LineReader

atoi("   -42abc")              # -42
split("  hello  world ", " ")  # ['hello', 'world']
strtrim("xxabcxx", "x")        # 'abc'

format_string("%d items at %x", 12, 255)  # '12 items at ff'
printf("%s!\n", "hi")                      # writes to standard output, returns 4

lst = LinkedList([1, 2, 3])
lst.push_front(0)
doubled = lst.map(lambda x: x * 2, None)
list(doubled)                  # [0, 2, 4, 6]

import os
fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=64)
for line in reader.lines(fd):
    print(line.decode(), end="")
os.close(fd)
```

`LineReader` returns lines as `bytes` with their trailing newline. The last line of a
file comes back without a newline if the data has none. Once the descriptor is
exhausted, `next_line` returns `None`. Data read past a line's end is kept separately
for each descriptor. The default buffer size is 1 byte.

`LinkedList.map` raises `ValueError` if the mapping function returns `None`. It first
passes the contents already produced to `delete`, when one is given.
`LinkedList.clear` does nothing without a `delete` function.

## What the printf module does not do

`format_string` and `printf` understand only the bare conversions
`%c %s %p %d %i %u %x %X`. They do not interpret flags, field widths, precision or
length modifiers.

Any other character after `%` is emitted as it is. So `%%` gives `%`, and `%5d` gives
`5d`.

Integer conversions follow 32-bit semantics:

- `%d` and `%i` are signed.
- `%u`, `%x` and `%X` are unsigned.
- `%p` takes an integer address and prints `(nil)` for `None` or 0.
- `%s` prints `(null)` for `None`.

The following raise errors:

- A format that ends in a lone `%` raises `ValueError`.
- Too few arguments raise `TypeError`.

The module does not produce floating-point output.