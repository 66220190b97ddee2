"""Common string searching, splitting and clean-up helpers.

Whitespace means the six ASCII whitespace characters
(space, tab, newline, vertical tab, form feed, carriage return).
Searches for substrings scan left to right without overlapping matches.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

WHITESPACE = " \t\n\v\f\r"
DEFAULT_SPLIT_CHARS = " \n\r\f\v\t"
LINE_BREAKS = "\n\r\f"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_sub(sub: str) -> None:
    if not sub:
        raise ValueError("substring must not be empty")


def _str_positions(s: str, sub: str) -> Iterator[int]:
    """Start positions of non-overlapping occurrences of ``sub``."""
    _check_sub(sub)
    pos = s.find(sub)
    while pos != -1:
        yield pos
        pos = s.find(sub, pos + len(sub))


def _any_positions(s: str, chars: str) -> Iterator[int]:
    """Positions of every character of ``s`` that is in ``chars``."""
    wanted = set(chars)
    return (i for i, ch in enumerate(s) if ch in wanted)


def _nth(positions: Iterator[int], idx: int) -> int:
    """The ``idx``-th (1 based) position, or -1."""
    if idx < 1:
        return -1
    for count, pos in enumerate(positions, start=1):
        if count == idx:
            return pos
    return -1


def reverse(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def trim(s: str) -> str:
    """Return ``s`` without leading and trailing whitespace."""
    return s.strip(WHITESPACE)


def standardize_whitespace(s: str, c: str) -> str:
    """Replace every whitespace character in ``s`` with ``c``."""
    return s.translate({ord(ch): c for ch in WHITESPACE})


def remove_unwanted_chars(s: str, unwanted: str) -> str:
    """Drop every character of ``s`` that appears in ``unwanted``."""
    return s.translate({ord(ch): None for ch in unwanted})


def replace_unwanted_chars(s: str, unwanted: str, c: str) -> str:
    """Replace every character of ``s`` that appears in ``unwanted`` with ``c``."""
    return s.translate({ord(ch): c for ch in unwanted})


def find(s: str, c: str) -> int:
    """Index of the first ``c`` in ``s``, or -1."""
    _check_char(c)
    return s.find(c)


def find_reverse(s: str, c: str) -> int:
    """Index of the last ``c`` in ``s``, or -1."""
    _check_char(c)
    return s.rfind(c)


def find_str(s: str, sub: str) -> int:
    """Index of the first occurrence of ``sub`` in ``s``, or -1."""
    return s.find(sub)


def find_str_reverse(s: str, sub: str) -> int:
    """Index of the last non-overlapping occurrence of ``sub``, or -1."""
    last = -1
    for pos in _str_positions(s, sub):
        last = pos
    return last


def find_any(s: str, chars: str) -> int:
    """Index of the first character of ``s`` found in ``chars``, or -1."""
    return next(_any_positions(s, chars), -1)


def find_any_reverse(s: str, chars: str) -> int:
    """Index of the last character of ``s`` found in ``chars``, or -1."""
    wanted = set(chars)
    for i in range(len(s) - 1, -1, -1):
        if s[i] in wanted:
            return i
    return -1


def find_cnt(s: str, c: str) -> int:
    """Number of times ``c`` occurs in ``s``."""
    _check_char(c)
    return s.count(c)


def find_cnt_str(s: str, sub: str) -> int:
    """Number of non-overlapping occurrences of ``sub`` in ``s``."""
    return sum(1 for _ in _str_positions(s, sub))


def find_cnt_any(s: str, chars: str) -> int:
    """Number of characters of ``s`` that appear in ``chars``."""
    return sum(1 for _ in _any_positions(s, chars))


def find_alt(s: str, c: str, idx: int) -> int:
    """Index of the ``idx``-th (1 based) ``c`` in ``s``, or -1."""
    _check_char(c)
    return _nth(_any_positions(s, c), idx)


def find_alt_str(s: str, sub: str, idx: int) -> int:
    """Index of the ``idx``-th (1 based) non-overlapping ``sub``, or -1."""
    return _nth(_str_positions(s, sub), idx)


def find_alt_any(s: str, chars: str, idx: int) -> int:
    """Index of the ``idx``-th (1 based) character found in ``chars``, or -1."""
    return _nth(_any_positions(s, chars), idx)


def concat(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def compare(s1: Optional[str], s2: Optional[str], case_sensitive: bool = True) -> int:
    """Compare two strings, returning -1, 0 or 1.

    ``None`` sorts before any string. Case folding, when asked for,
    covers ASCII letters only.
    """
    if s1 is s2:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    if not case_sensitive:
        s1 = s1.translate(_ASCII_LOWER)
        s2 = s2.translate(_ASCII_LOWER)
    return (s1 > s2) - (s1 < s2)


def extract_substring(s: str, start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``s`` from ``start``.

    Returns None when ``start`` is not inside ``s``.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(s):
        return None
    return s[start:start + length]


def extract_substring_str(s: str, sub: str, length: int) -> Optional[str]:
    """Up to ``length`` characters starting where ``sub`` first occurs."""
    start = find_str(s, sub)
    if start == -1:
        return None
    return extract_substring(s, start, length)


def extract_substring_c(s: str, c: str, length: int) -> Optional[str]:
    """Up to ``length`` characters starting where ``c`` first occurs."""
    start = find(s, c)
    if start == -1:
        return None
    return extract_substring(s, start, length)


def split_string_c(s: str, c: str) -> list[str]:
    """Split ``s`` on ``c``, dropping empty pieces."""
    _check_char(c)
    return [piece for piece in s.split(c) if piece]


def split_string_str(s: str, sub: str) -> list[str]:
    """Split ``s`` on ``sub``, dropping empty pieces."""
    _check_sub(sub)
    return [piece for piece in s.split(sub) if piece]


def split_string_any(s: str, chars: Optional[str] = None) -> list[str]:
    """Split ``s`` on any character in ``chars``, dropping empty pieces.

    With ``chars`` of None, splits on whitespace.
    """
    if chars is None:
        chars = DEFAULT_SPLIT_CHARS
    if not chars:
        return [s] if s else []
    pattern = "[" + "".join(re.escape(ch) for ch in chars) + "]"
    return [piece for piece in re.split(pattern, s) if piece]


def split_lines(s: str) -> list[str]:
    """Split ``s`` on newline, carriage return and form feed, dropping empty lines."""
    return split_string_any(s, LINE_BREAKS)


def single_space(s: str) -> str:
    """Trim ``s`` and collapse each run of whitespace to one space."""
    return " ".join(split_string_any(s, WHITESPACE))