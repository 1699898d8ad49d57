"""A printf-style formatter with C conversion specifications.

Supported conversions are ``c d i u o x X f s n`` and ``%%``, with the flags
``- + space # 0``, a width, a precision and the length modifiers ``h hh l ll L``.
Integers are reduced to the C type that the length modifier selects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d*)(?:\.(?P<precision>\d*))?"
    r"(?P<length>hh|h|ll|l|L)?(?P<conv>.?)",
    re.DOTALL,
)

_LENGTHS = {"hh": "H", "h": "h", "ll": "L", "l": "l", "L": "L", None: ""}


@dataclass
class Counter:
    """Receives the number of characters written so far when passed to ``%n``."""

    value: int = 0


class _Output:
    """Character buffer with a movable write position."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self.pos = 0

    def _store(self, ch: str) -> None:
        if self.pos < len(self._chars):
            self._chars[self.pos] = ch
        else:
            self._chars.append(ch)

    def write(self, text: str) -> None:
        for ch in text:
            self._store(ch)
            self.pos += 1

    def put_back(self, ch: str) -> None:
        """Store ``ch`` at the current position, then step one position back."""
        self._store(ch)
        self.pos = max(self.pos - 1, 0)

    def result(self) -> str:
        return "".join(self._chars[: self.pos])


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _signed_value(value: int, length: str) -> int:
    bits = {"h": 16, "H": 8}.get(length, 32)
    return _wrap_signed(value, bits)


def _unsigned_value(value: int, length: str) -> int:
    bits = {"h": 16, "H": 8}.get(length, 32)
    return value & ((1 << bits) - 1)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(args: Iterator[Any]) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise TypeError(f"integer expected, not {type(value).__name__}")
    return value


def _fixed(value: float, precision: int) -> str:
    """Render ``value`` with ``precision`` fraction digits, rounding on the next digit."""
    int_part = int(value)
    fraction = abs(value - int_part)
    chars: list[str] = []
    if value < 0:
        chars.append("-")
        int_part = -int_part
    chars.extend(str(int_part))
    chars.append(".")
    for _ in range(precision):
        fraction *= 10
        digit = int(fraction)
        chars.append(chr(ord("0") + digit))
        fraction -= digit
    fraction *= 10
    if int(fraction) >= 5:
        k = len(chars) - 1
        while k >= 0 and chars[k] == "9":
            chars[k] = "0"
            k -= 1
        if k >= 0 and chars[k] != ".":
            chars[k] = chr(ord(chars[k]) + 1)
    return "".join(chars)


def _char_text(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        ch = value
    elif isinstance(value, int):
        ch = chr(value & 0xFF)
    else:
        raise TypeError(f"%c requires a character, not {type(value).__name__}")
    return "" if ch == "\0" else ch


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the C-style format string ``fmt``.

    The length of the returned string is the count the formatter reports.
    ``%n`` stores the number of characters written so far into a ``Counter``.
    """
    fmt = fmt.partition("\0")[0]
    arg_iter = iter(args)
    out = _Output()
    written = 0
    last_int = 0
    pos = 0

    while pos < len(fmt):
        start = fmt.find("%", pos)
        if start == -1:
            out.write(fmt[pos:])
            written += len(fmt) - pos
            break
        out.write(fmt[pos:start])
        written += start - pos

        if fmt.startswith("%%", start):
            out.write("%")
            written += 1
            pos = start + 2
            continue

        spec = _SPEC.match(fmt, start)
        pos = spec.end()
        conv = spec.group("conv")
        if not conv:
            break

        flags = spec.group("flags")
        left_align = "-" in flags
        plus_sign = "+" in flags
        space_sign = " " in flags
        hash_flag = "#" in flags
        zero_padding = "0" in flags
        width = int(spec.group("width") or 0)
        precision_text = spec.group("precision")
        precision = -1 if precision_text is None else int(precision_text or 0)
        length = _LENGTHS[spec.group("length")]

        if conv in "di":
            value = _signed_value(_int_arg(arg_iter), length)
            if value < 0:
                out.write("-")
                written += 1
                value = _wrap_signed(-value, 32)
            elif space_sign or plus_sign:
                out.write(" ")
                written += 1
            if plus_sign:
                out.put_back(" ")
                if value > 0:
                    out.put_back(" ")
            last_int = value
            text = str(value)
        elif conv == "u":
            text = str(_unsigned_value(_int_arg(arg_iter), length))
        elif conv == "o":
            value = _unsigned_value(_int_arg(arg_iter), length)
            if hash_flag and value:
                out.write("0")
                written += 1
            text = format(value, "o")
        elif conv in "xX":
            value = _unsigned_value(_int_arg(arg_iter), length)
            if hash_flag and value:
                out.write("0" + conv)
                written += 2
            text = format(value, conv)
        elif conv == "f":
            number = _next_arg(arg_iter)
            if not isinstance(number, (int, float)):
                raise TypeError(f"%f requires a number, not {type(number).__name__}")
            text = _fixed(float(number), 6 if precision == -1 else precision)
        elif conv == "s":
            value = _next_arg(arg_iter)
            if not isinstance(value, str):
                raise TypeError(f"%s requires a str, not {type(value).__name__}")
            text = value.partition("\0")[0]
            if precision >= 0:
                text = text[:precision]
        elif conv == "c":
            text = _char_text(_next_arg(arg_iter))
        elif conv == "n":
            counter = _next_arg(arg_iter)
            if not isinstance(counter, Counter):
                raise TypeError("%n requires a Counter")
            counter.value = written
            continue
        else:
            text = ""

        padding = max(width - len(text), 0)
        if not left_align:
            out.write(("0" if zero_padding else " ") * padding)
        if last_int > 0 and plus_sign:
            out.write("+")
            written += 1
        out.write(text)
        if left_align:
            out.write(" " * padding)
        written += padding + len(text)

    return out.result()