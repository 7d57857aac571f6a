# ftkit

A small collection of everyday helpers in plain Python, with no
dependencies outside the standard library.

## Modules

- `ftkit.memory`: operations on mutable byte buffers (`bytearray` or a
  writable `memoryview`): `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memccpy`, `memcpy` and `memmove`. Positions come back as indices, or
  `None` where nothing was found. A length that is negative or runs past a
  buffer raises `ValueError`. `realloc(text, extra)` returns a copy of a
  string cut to `len(text) + extra` characters, or `None` for `None`.
- `ftkit.convert`: `atoi` reads a leading decimal integer after optional
  whitespace and one sign, and wraps around like a 32-bit `int`. `itoa`
  writes an integer in decimal. `itoa_base` writes a signed integer with the
  symbols of a given base string. `ulitoa_base` does the same for the value
  taken as an unsigned 64-bit integer.
- `ftkit.chars`: character checks `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii` and `is_print`, which take a one-character string or an integer
  code. Their whole-string forms are `all_alpha`, `all_digit`, `all_alnum`,
  `all_ascii` and `all_print`. `strchr` and `strrchr` return the index of the
  first or last occurrence, or `None`. These functions treat a string as
  ending at its first NUL character, and a search for NUL returns that
  position.
- `ftkit.printf`: a compact printf with the conversions
  `%c %s %p %d %i %u %x %X %%`, the `-` and `0` flags, width, precision and
  `*`. Integer arguments are taken as 32-bit values. `format_string` returns
  the text and `printf` writes it to standard output and returns its length.
  The pieces are also available on their own: `parse_spec` produces a
  `FormatSpec`, `render_value` produces the bare text and `apply_flags`
  pads it. Missing arguments and arguments of the wrong type raise
  `TypeError`. Unknown or incomplete conversions raise `ValueError`.
- `ftkit.btree`: an unbalanced binary search tree of `BTreeNode` objects.
  It provides `insert`, which returns the root, and `search`. The walks are
  `apply_prefix`, `apply_infix`, `apply_suffix` and `apply_by_level`, which
  calls `func(item, level, is_first)`. `level_count` gives the number of
  levels. `render` draws the tree sideways as a string and `print_tree`
  writes that drawing to standard output.
- `ftkit.debug`: `format_str_1d` renders a list as `[ "a", "b" ]` and
  `format_str_2d` renders a list of lists, one row per line. `debug_str_1d`
  and `debug_str_2d` write the same text to standard output.
- `ftkit.linereader`: `LineReader(buffer_size)` and `get_next_line(fd)` read
  one line at a time from a raw file descriptor. Each call returns
  `(line, ended_by_newline)`. Bytes read past the newline are kept for the
  next call on the same descriptor.
- `ftkit.linkedlist`: a doubly linked `LinkedList` of `Node` objects with
  these operations:
  - `add_back` and `add_front`, which return the new node;
  - `clear`;
  - `for_each`;
  - `last`;
  - `map`, which returns a new list;
  - `remove_if`, which returns the number of nodes removed;
  - iteration and `len()`.

## Installation

```
pip install ftkit
```

## Examples

```python
from ftkit.convert import atoi, itoa_base
from ftkit.printf import format_string

atoi("   -42abc")                     # -42
itoa_base(255, "0123456789abcdef")    # "ff"
format_string("[%-5d|%05d]", 42, -7)  # "[42   |-0007]"
```

```python
from ftkit.btree import insert, apply_infix

root = None
for word in ["m", "c", "x", "a"]:
    root = insert(root, word, lambda a, b: (a > b) - (a < b))

seen = []
apply_infix(root, seen.append)
seen  # ["a", "c", "m", "x"]
```

```python
from ftkit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
list(items.map(lambda x: x * 10))  # [0, 10, 20, 30]
len(items)                         # 4
```

```python
import os
from ftkit.linereader import LineReader

read_end, write_end = os.pipe()
os.write(write_end, b"first\nsecond")
os.close(write_end)

reader = LineReader(buffer_size=4)
reader.read_line(read_end)  # ("first", True)
reader.read_line(read_end)  # ("second", False)
```

## What it does not do

`ftkit` is a library only. It installs no command, and the trees are not
rebalanced.

## Running the tests

```
pip install "ftkit[test]"
pytest
```