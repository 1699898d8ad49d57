"""Search, compare and copy operations on NUL-terminated strings.

Every string argument is read up to its first ``"\\0"``, which acts as the
terminator. Search functions return an index, or ``None`` when nothing matches.
"""

from __future__ import annotations

from itertools import chain, islice, repeat

NUL = "\0"


def _terminated(s: str) -> str:
    return s.partition(NUL)[0]


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("count must not be negative")


def strlen(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``; the terminator itself can be found."""
    _check_char(c)
    text = _terminated(s)
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``; the terminator itself can be found."""
    _check_char(c)
    text = _terminated(s)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index == -1 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Return the index where ``needle`` first occurs in ``haystack``."""
    index = _terminated(haystack).find(_terminated(needle))
    return None if index == -1 else index


def strpbrk(s: str, accept: str) -> int | None:
    """Return the index of the first character of ``s`` that appears in ``accept``."""
    wanted = set(_terminated(accept))
    return next(
        (index for index, ch in enumerate(_terminated(s)) if ch in wanted), None
    )


def strcspn(s: str, reject: str) -> int:
    """Return the length of the leading run of ``s`` free of characters in ``reject``."""
    index = strpbrk(s, reject)
    return strlen(s) if index is None else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    _check_count(n)
    pairs = zip(
        chain(_terminated(a), repeat(NUL)), chain(_terminated(b), repeat(NUL))
    )
    for ca, cb in islice(pairs, n):
        if ca != cb or ca == NUL:
            return ord(ca) - ord(cb)
    return 0


def strncpy(dest: str, src: str, n: int) -> str:
    """Return ``dest`` with its first ``n`` characters replaced by ``src``.

    The copied part is padded with terminators when ``src`` is shorter than ``n``.
    """
    _check_count(n)
    return _terminated(src)[:n].ljust(n, NUL) + dest[n:]


def strncat(dest: str, src: str, n: int) -> str:
    """Return ``dest`` followed by at most ``n`` characters of ``src``."""
    _check_count(n)
    return _terminated(dest) + _terminated(src)[:n]