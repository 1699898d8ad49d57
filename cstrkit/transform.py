"""Functions that build new strings: case conversion, trimming and insertion."""

from __future__ import annotations

import string

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value.partition("\0")[0]


def to_lower(s: str) -> str:
    """Return ``s`` with ASCII capital letters turned into small ones."""
    return _require_str(s, "s").translate(_LOWER)


def to_upper(s: str) -> str:
    """Return ``s`` with ASCII small letters turned into capital ones."""
    return _require_str(s, "s").translate(_UPPER)


def trim(src: str, trim_chars: str) -> str:
    """Return ``src`` without leading and trailing characters from ``trim_chars``."""
    text = _require_str(src, "src")
    chars = _require_str(trim_chars, "trim_chars")
    return text.strip(chars) if chars else text


def insert(src: str, s: str, start_index: int) -> str:
    """Return ``src`` with ``s`` inserted at ``start_index``.

    Raises IndexError when the index lies outside ``0..len(src)``.
    """
    text = _require_str(src, "src")
    addition = _require_str(s, "s")
    if not 0 <= start_index <= len(text):
        raise IndexError(f"start index {start_index} out of range for length {len(text)}")
    return text[:start_index] + addition + text[start_index:]