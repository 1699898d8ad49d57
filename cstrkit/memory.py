"""Operations on raw byte buffers: search, compare, copy and fill."""

from __future__ import annotations


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")


def _check_fits(n: int, *buffers) -> None:
    _check_count(n)
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memchr(data, c: int, n: int) -> int | None:
    """Return the offset of byte ``c`` within the first ``n`` bytes of ``data``.

    ``c`` is reduced to a single byte. Returns ``None`` when it is absent.
    A match on the zero byte is reported at offset 0, the start of the buffer.
    """
    _check_fits(n, data)
    target = c & 0xFF
    offset = bytes(data[:n]).find(bytes([target]))
    if offset == -1:
        return None
    return 0 if c == 0 else offset


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0 when the
    compared ranges are equal. Comparison stops at the first difference, so a
    shorter buffer is only an error when the comparison has to read past it.
    """
    _check_count(n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    if n > min(len(a), len(b)):
        raise ValueError("byte count exceeds buffer length")
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into the writable buffer ``dest``; return ``dest``."""
    _check_fits(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with byte ``c``; return ``buf``."""
    _check_fits(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf