"""String helpers: splitting, trimming, searching, comparing and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name}: expected a single character, got {c!r}")
    return c


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty pieces."""
    _single_char(sep, "split")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start at or past the end of s gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: negative start or length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first needle lying wholly within the first length characters.

    An empty needle is found at 0; otherwise None when there is no match.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters, stopping at a NUL or the end of a string.

    Returns the difference of the first unequal character codes, the end of
    a string counting as code 0, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("strncmp: negative length")
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s; a NUL is found at len(s); otherwise None."""
    _single_char(c, "strchr")
    index = s.find(c)
    if index >= 0:
        return index
    if c == _NUL:
        return len(s)
    return None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s; a NUL is found at len(s); otherwise None."""
    _single_char(c, "strrchr")
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of s."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply func(index, char) to each item of chars in place.

    A returned character replaces the item; None leaves it unchanged.
    The same sequence is returned.
    """
    for i, ch in enumerate(chars):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement
    return chars