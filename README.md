# cub3d

`cub3d` currently provides one sub-package, `cub3d.libft`. It holds small,
dependency-free helpers for working with text, byte buffers, linked lists,
`printf`-style formatting and line-by-line reading. They are the building
blocks a `.cub` map reader is built on.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `cub3d.libft.chars`

The module classifies ASCII characters. Each function accepts a one-character
string or an integer code point.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` and `is_space`
  return a `bool`.
- `to_lower` and `to_upper` change the case of ASCII letters only. They return
  the same kind of value they were given.

### `cub3d.libft.convert`

- `atoi(text)` skips leading whitespace and reads one optional sign. It then
  reads digits until the first non-digit. The result wraps like a 32-bit signed
  int. Text with no digits gives `0`.
- `atol(text)` works the same way but wraps at 64 bits.
- `itoa(n)` returns the decimal text of `n`.

```python
from cub3d.libft.convert import atoi

assert atoi("  -42abc") == -42
assert atoi("2147483648") == -2147483648
```

### `cub3d.libft.strings`

- `split(text, sep)` splits and drops the empty pieces.
- `strchr` and `strrchr` find a character. The result is an index, or `None`
  when the character is absent.
- `strcmp`, `strncmp` and `strnstr` compare and search.
- `strtrim`, `substr`, `strjoin`, `strdup` and `strlen` build and measure
  strings.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair:
  `(resulting text, length the full result would have had)`.
- `strmapi(text, func)` builds a new string from `func(index, char)`.
- `striteri(seq, func)` does the same in place on a mutable sequence.

```python
from cub3d.libft.strings import split, strtrim, strlcpy

assert split("NO  ./north.xpm", " ") == ["NO", "./north.xpm"]
assert strtrim("--hi--", "-") == "hi"
assert strlcpy("hello", 3) == ("he", 5)
```

### `cub3d.libft.memory`

These helpers work on `bytes` and `bytearray` buffers.

- `bzero` and `memset` fill the start of a buffer.
- `calloc(count, size)` returns a zeroed `bytearray`. It returns `None` when the
  total is over 4294967295 bytes or either argument is negative.
- `memchr` and `memcmp` search and compare.
- `memcpy(dest, src, n)` copies between buffers.
- `memmove(buffer, dest_offset, src_offset, n)` copies within one buffer and
  handles overlapping regions.

```python
from cub3d.libft.memory import memmove

assert memmove(bytearray(b"abcdef"), 2, 0, 3) == bytearray(b"ababcf")
```

### `cub3d.libft.lists`

`Node` and `LinkedList` make up a singly linked list. A `LinkedList` can be
built from any iterable, and it supports `len()` and iteration. It has these
methods:

- `push_front` and `push_back` add a node at either end.
- `last` returns the final node.
- `clear(delete)` empties the list.
- `for_each(func)` calls `func` on each content.
- `map(func, delete)` returns a new list of `func(content)`. If `func` raises,
  the contents already produced are passed to `delete`.

### `cub3d.libft.printf`

- `sprintf(fmt, *args)` supports the conversions `%c %s %p %d %i %u %x %X %%`.
  - Integers are reduced to 32-bit int or unsigned int. `%p` uses a 64-bit
    address.
  - `None` prints as `(null)` for `%s` and as `(nil)` for `%p`.
  - An unknown conversion is dropped.
- `printf(fmt, *args)` writes to standard output and returns the number of
  characters written. It returns `-1` and writes nothing when `fmt` is `None` or
  standard input is not a terminal.
- `format_int`, `format_unsigned`, `format_hex` and `format_pointer` expose the
  individual conversions.

```python
from cub3d.libft.printf import sprintf

assert sprintf("%d %x %s", -1, 255, None) == "-1 ff (null)"
```

### `cub3d.libft.linereader`

`LineReader(source, buffer_size=42)` reads lines in chunks of `buffer_size`.
`source` is either a file descriptor or an object with a `read` method.

- Lines keep their trailing newline.
- `read_line()` returns `None` at the end.
- Iterating over the reader yields every line.

`get_next_line(fd)` keeps one reader per file descriptor between calls. It
returns `None` at end of file or for a negative descriptor.

```python
import io
from cub3d.libft.linereader import LineReader

assert list(LineReader(io.BytesIO(b"a\nb"))) == ["a\n", "b"]
```

## What the package does not do

The package has no command-line program. It does not:

- open or validate `.cub` map files,
- load textures,
- store floor and ceiling colours,
- open a window.

Only the helper sub-package described above is included.