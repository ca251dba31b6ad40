"""Conversions between decimal text and 32-bit integers."""

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = " \t\n\v\f\r"


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Raises OverflowError when the value leaves the 32-bit
    signed range.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            raise OverflowError("Error")
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    return str(n)