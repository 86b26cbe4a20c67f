# ftkit

A small collection of everyday helpers with precise, well-defined edge-case
behaviour. It is a library only: it has no command-line program.

## Modules

- `ftkit.chars`: ASCII character classification and case conversion:
  `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`,
  `to_upper`. Each accepts a one-character string or an integer code point;
  the converters return the same kind they were given.
- `ftkit.memory`: byte-buffer operations: `zero`, `allocate_zeroed`,
  `mem_find`, `mem_compare`, `mem_copy`, `mem_move`, `mem_set`. Functions
  that write need a mutable buffer such as a `bytearray`. A length that
  reaches past the end of a buffer raises `ValueError`. `allocate_zeroed`
  raises `OverflowError` when the total size would not fit in 64 bits.
- `ftkit.strings`: string helpers: `split`, `strtrim`, `substr`, `strjoin`,
  `find_char`, `rfind_char`, `find_within`, `compare_prefix`,
  `bounded_copy`, `bounded_concat`, `map_indexed`, `iter_indexed`. The
  searches return an index, or `None` when nothing is found. The bounded
  copies return a `(text, length)` pair.
- `ftkit.numbers`: `atoi` and `itoa` with 32-bit signed integer semantics.
  `atoi` wraps around on overflow. `itoa` raises `OverflowError` outside the
  32-bit range.
- `ftkit.output`: writers to a text stream, which is standard output by
  default: `put_char`, `put_str`, `put_endl`, `put_number`. A small
  printf-style formatter supports `%c %s %p %d %i %u %x %X %%`. `render`
  returns the text and `printf` writes it and returns its length.
  `format_number` writes a number in any base given by its digit symbols.
  `format_pointer` writes an address as `0x…` hex, or `(nil)` for zero or
  `None`. `render` raises `ValueError` for an unknown conversion, a lone
  trailing `%`, or a missing argument.
- `ftkit.line_reader`: `LineReader`, which reads a binary or text stream
  line by line through a fixed-size read buffer. The buffer size defaults
  to 42. Lines keep their trailing newline. `read_line` returns `None` at
  the end of the stream, and iterating the reader yields every line.
- `ftkit.linked_list`: a singly linked `LinkedList` of `Node`s. It offers
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()`
  and iteration.

## Installation

```
pip install .
```

## Examples

```python
import io

from ftkit.line_reader import LineReader
from ftkit.linked_list import LinkedList
from ftkit.numbers import atoi, itoa
from ftkit.output import render
from ftkit.strings import find_char, split, strtrim

split("  hello  world ", " ")      # ['hello', 'world']
strtrim("xxhixx", "x")             # 'hi'
find_char("hello", "l")            # 2
atoi("  -42abc")                   # -42
itoa(-2147483648)                  # '-2147483648'
render("%s has %d items (%x)", "box", 255, 255)  # 'box has 255 items (ff)'

reader = LineReader(io.StringIO("one\ntwo\n"), 42)
list(reader)                       # ['one\n', 'two\n']

items = LinkedList([1, 2])
items.push_front(0)
items.push_back(3)
list(items)                        # [0, 1, 2, 3]
len(items)                         # 4
```

## Running the tests

```
pip install .[test]
pytest
```