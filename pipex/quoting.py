"""Splitting a command line into words, honouring quotes and backslashes."""

from __future__ import annotations

_SPACES = " \t\n\v\f\r"
_QUOTES = "\"'"
_ESCAPE = "\\"


def is_space(c: int | str) -> bool:
    """Return True for space, tab, newline, vertical tab, form feed or carriage return."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c in _SPACES
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return 0 <= c < 0x110000 and chr(c) in _SPACES


def count_words_quoted(s: str) -> int:
    """Count the words of ``s`` the way the quoted splitter sees them.

    A quoted section belongs to the word it appears in. After a backslash
    escape the character following the escaped one is passed over as well.
    """
    count = 0
    in_word = False
    pos, end = 0, len(s)
    while pos < end:
        ch = s[pos]
        if not in_word and not is_space(ch):
            in_word = True
            count += 1
        if not in_word:
            pos += 1
            continue
        if ch == _ESCAPE and pos + 1 < end:
            pos += 2
        elif ch in _QUOTES:
            closing = s.find(ch, pos + 1)
            pos = end if closing < 0 else closing
        elif is_space(ch):
            in_word = False
        if pos < end:
            pos += 1
    return count


def _skip_spaces(s: str, pos: int) -> int:
    while pos < len(s) and is_space(s[pos]):
        pos += 1
    return pos


def _read_word(s: str, pos: int) -> tuple[str, int]:
    pieces: list[str] = []
    end = len(s)
    while pos < end and not is_space(s[pos]):
        ch = s[pos]
        if ch == _ESCAPE and pos + 1 < end:
            pieces.append(s[pos + 1])
            pos += 2
        elif ch in _QUOTES:
            closing = s.find(ch, pos + 1)
            if closing < 0:
                pieces.append(s[pos + 1:])
                pos = end
            else:
                pieces.append(s[pos + 1:closing])
                pos = closing + 1
        else:
            pieces.append(ch)
            pos += 1
    return "".join(pieces), pos


def split_quoted(s: str) -> list[str]:
    """Split ``s`` into words, removing quotes and resolving backslash escapes.

    Exactly ``count_words_quoted(s)`` words are returned.
    """
    words: list[str] = []
    pos = 0
    for _ in range(count_words_quoted(s)):
        pos = _skip_spaces(s, pos)
        word, pos = _read_word(s, pos)
        words.append(word)
        pos = _skip_spaces(s, pos)
    return words