"""Character classes and string helpers used by the shell."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

Scanner = Callable[[str, int], int]

_SPACES = frozenset(" \t\n\v\f\r")


def _single(c: str) -> bool:
    return len(c) == 1


def is_alpha(c: str) -> bool:
    """True for an ASCII letter."""
    return _single(c) and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_digit(c: str) -> bool:
    """True for an ASCII decimal digit."""
    return _single(c) and "0" <= c <= "9"


def is_alnum(c: str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_space(c: str) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _single(c) and c in _SPACES


def is_print(c: str) -> bool:
    """True for a printable ASCII character, space included."""
    return _single(c) and " " <= c <= "~"


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits.

    Parsing stops at the first character that is not a digit; a string
    without digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise TypeError("strtrim needs a string and a set of characters")
    first = 0
    last = len(text)
    while first < last and text[first] in chars:
        first += 1
    while last > first and text[last - 1] in chars:
        last -= 1
    return text[first:last]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if text is None:
        raise TypeError("split needs a string")
    return [word for word in text.split(sep) if word]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters, or None."""
    if not needle:
        return 0
    found = haystack[: max(length, 0)].find(needle)
    return None if found < 0 else found


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` bytes; the sign of the result orders the strings."""
    if n <= 0:
        return 0
    left = first.encode()[:n]
    right = second.encode()[:n]
    for x, y in zip_longest(left, right, fillvalue=0):
        if x != y or x == 0:
            return x - y
    return 0


def no_skip(text: str, pos: int) -> int:
    """Separator scanner that skips nothing; the position must lie within the text."""
    if not 0 <= pos <= len(text):
        raise IndexError(f"position {pos} outside text of length {len(text)}")
    return pos


def skip_space(text: str, pos: int) -> int:
    """Separator scanner that skips whitespace."""
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    return pos


def ultra_split(text: str, skip: Scanner, next_word: Scanner) -> list[str]:
    """Split ``text`` with pluggable scanners.

    ``skip`` moves past a separator and ``next_word`` moves past a word;
    both take the text and a position and return the new position.
    """
    if text is None:
        raise TypeError("ultra_split needs a string")
    words: list[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        pos = skip(text, pos)
        if pos >= length:
            break
        end = next_word(text, pos)
        if end <= pos:
            raise ValueError(f"word scanner did not advance at position {pos}")
        words.append(text[pos:end])
        pos = end
    return words