"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

CONVERSIONS = "cspdiuxX%"
DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def itoa_base(num: int, base: str) -> str:
    """Write the non-negative integer ``num`` using the digits of ``base``."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"expected an integer, got {num!r}")
    if num < 0:
        raise ValueError("number must not be negative")
    radix = len(base)
    digits = []
    while True:
        num, digit = divmod(num, radix)
        digits.append(base[digit])
        if num == 0:
            break
    return "".join(reversed(digits))


def format_pointer(ptr: int | None) -> str:
    """Render an address as ``0x`` followed by lower-case hex; null is ``(nil)``."""
    if not ptr:
        return "(nil)"
    if isinstance(ptr, bool) or not isinstance(ptr, int):
        raise TypeError(f"expected an address, got {ptr!r}")
    return "0x" + itoa_base(ptr & _ULONG_MASK, HEX_LOWER)


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return int(value)


def _to_int32(value: Any) -> int:
    n = _require_int(value) & _UINT32_MASK
    return n - (1 << 32) if n >= 1 << 31 else n


def _to_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_require_int(value) & 0xFF)


def _to_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {value!r}")
    return value


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    arg = _next_arg(values, spec)
    if spec == "c":
        return _to_char(arg)
    if spec == "s":
        return _to_str(arg)
    if spec == "p":
        return format_pointer(arg)
    if spec in "di":
        return str(_to_int32(arg))
    unsigned = _require_int(arg) & _UINT32_MASK
    if spec == "u":
        return itoa_base(unsigned, DECIMAL)
    if spec == "x":
        return itoa_base(unsigned, HEX_LOWER)
    return itoa_base(unsigned, HEX_UPPER)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled from ``args``.

    Unknown conversions and a trailing ``%`` produce no output.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in CONVERSIONS:
            pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)