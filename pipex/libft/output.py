"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import NoReturn, TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    _target(stream).write(str(n))


def error(msg: str | None) -> NoReturn:
    """Print ``msg`` on standard output and exit with status 0."""
    put_endl(msg, sys.stdout)
    sys.stdout.flush()
    raise SystemExit(0)