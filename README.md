# cstrkit

The classic C string and memory routines, written for Python `str` values and
byte buffers, along with a small C-style `sprintf`.

## Installation

```
pip install cstrkit
```

To run the test suite:

```
pip install "cstrkit[test]"
pytest
```

## Modules

### `cstrkit.memory`

These functions work on byte sequences. `memcpy` and `memset` need a mutable
buffer such as a `bytearray`.

- `memchr(data, c, n)` returns the offset of byte `c` within the first `n`
  bytes, or `None` if it is not there. A match on the zero byte is reported
  at offset 0.
- `memcmp(a, b, n)` returns the difference between the first pair of unequal
  bytes, or 0 if the ranges are equal.
- `memcpy(dest, src, n)` copies `n` bytes into `dest` and returns `dest`.
- `memset(buf, c, n)` fills the first `n` bytes with `c` and returns `buf`.

A negative count raises `ValueError`. So does a count that would read or
write past the end of a buffer.

### `cstrkit.strings`

Every string is read up to its first `"\0"`, which acts as the terminator.
The search functions return an index, or `None` when there is no match.

- `strlen(s)`
- `strchr(s, c)`, `strrchr(s, c)`: searching for `"\0"` finds the terminator.
- `strstr(haystack, needle)`
- `strpbrk(s, accept)`, `strcspn(s, reject)`
- `strncmp(a, b, n)` returns the difference in character codes at the first
  mismatch, or 0.
- `strncpy(dest, src, n)` and `strncat(dest, src, n)` return new strings.
  `strncpy` pads the copied part with `"\0"`.

### `cstrkit.transform`

Each function returns a new string. A non-`str` argument raises `TypeError`.

- `to_lower(s)`, `to_upper(s)` change ASCII letters only.
- `trim(src, trim_chars)` strips characters in `trim_chars` from both ends.
- `insert(src, s, start_index)` raises `IndexError` if the index lies
  outside `0..len(src)`.

### `cstrkit.formatting`

`sprintf(fmt, *args)` returns the formatted string. It supports the
conversions `%c %d %i %u %o %x %X %f %s %n %%`, the flags `- + space # 0`, a
width, a precision and the length modifiers `h hh l ll L`. Integers are
reduced to the C type that the length modifier selects. For `%n`, pass a
`Counter`: its `value` is set to the number of characters written so far.
A missing argument or one of the wrong type raises `TypeError`.

## Example

```python
from cstrkit.transform import trim, insert
from cstrkit.formatting import sprintf

trim("** *Hello, world!\n*  *", "* ")   # 'Hello, world!\n'
insert("hello world", "my ", 6)         # 'hello my world'
sprintf("age is %d...", 17)             # 'age is 17...'
```

## Not included

There is no tokenizer in the style of `strtok`, and no table of error-number
messages in the style of `strerror`.