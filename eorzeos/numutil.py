"""Integer helpers: truncating division and decimal conversion."""

from __future__ import annotations

__all__ = ["trunc_div", "trunc_mod", "parse_int", "format_int"]


def trunc_div(a: int, b: int) -> int:
    """Divide ``a`` by ``b``, rounding toward zero. Division by zero gives 0."""
    if b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching :func:`trunc_div`, so ``a == q * b + r``. Zero divisor gives 0."""
    if b == 0:
        return 0
    return a - trunc_div(a, b) * b


def parse_int(text: str) -> int:
    """Read a decimal integer with an optional leading sign.

    Conversion stops at the first character that is not a digit; text without
    any leading digits reads as 0.
    """
    sign = 1
    body = text
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]

    value = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def format_int(num: int) -> str:
    """Render an integer in decimal, with a leading minus sign when negative."""
    if num == 0:
        return "0"
    digits = []
    magnitude = abs(num)
    while magnitude > 0:
        digits.append(chr(ord("0") + trunc_mod(magnitude, 10)))
        magnitude = trunc_div(magnitude, 10)
    sign = "-" if num < 0 else ""
    return sign + "".join(reversed(digits))