"""String helpers: splitting, trimming, bounded search, copy and concatenation."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"expected a single character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty words."""
    sep = _single_char(sep)
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove every character found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find needle wholly within the first limit characters of haystack.

    Returns the index of the first match, or None. An empty needle always
    matches at index 0.
    """
    _non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the code difference of the first differing pair, where the end
    of the shorter string counts as code 0, or 0 when no difference is found.
    """
    _non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of text.
    """
    c = _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of text.
    """
    c = _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size slots, one of them kept for the terminator.

    Returns the copied text and the full length of src, so that truncation
    shows as a length greater than or equal to size.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size slots.

    Returns the resulting text and the length the full result would have
    had: min(len(dest), size) plus len(src). When dest already fills the
    buffer it is returned unchanged.
    """
    _non_negative(size, "size")
    kept = min(len(dest), size)
    if kept < size:
        result = dest + src[: size - 1 - kept]
    else:
        result = dest
    return result, kept + len(src)


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def each_indexed(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) for every character of text.

    A return value other than None replaces that character in the result;
    None leaves it as it was.
    """
    pieces = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        pieces.append(char if replacement is None else replacement)
    return "".join(pieces)