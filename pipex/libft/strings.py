"""String helpers: splitting, searching, bounded copies and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_TERMINATOR = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative")
    return value


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    sep = _single_char(c)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _single_char(c)
    if ch == _TERMINATOR:
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _single_char(c)
    index = s.rfind(ch)
    if index >= 0:
        return index
    if ch == _TERMINATOR:
        return len(s)
    return None


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``; a result
    length equal to or above ``size`` means the copy was truncated.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have.
    When ``dst`` already fills the buffer it is returned unchanged together
    with ``len(src) + size``.
    """
    _non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` on each character in place.

    A non-None return value replaces the character at that index.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, a shorter string
    comparing as if followed by NUL, or 0 when the prefixes match.
    """
    _non_negative(n, "n")
    for a, b in zip(s1[:n].ljust(n, _TERMINATOR), s2[:n].ljust(n, _TERMINATOR)):
        if a == _TERMINATOR and b == _TERMINATOR:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Return the index of ``little`` in the first ``n`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _non_negative(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Strip every character of ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end of ``s`` yields the empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]