# formatting.py
"""
Plain-text rendering of numbers and linear terms.

Generators and the equivalence checker both go through these helpers so a
value always reads the same way in a question, a worked solution and the
canonical answer (no "0.30000000000000004", no "1e-05").
"""
from __future__ import annotations

import math
from typing import Union

from sympy import Rational, floor

Number = Union[int, float]

_DISPLAY_PLACES = 10


def clean_number(x: Number, places: int = 6) -> Number:
    """Round away float noise and collapse integral floats to int."""
    if isinstance(x, int):
        return x
    x = round(float(x), places)
    if x.is_integer():
        return int(x)
    return x


def round_half_up(num: int, den: int, places: int) -> Number:
    """
    Round the exact quotient num/den to ``places`` decimals with halves going
    away from zero, the way it is taught: 1/8 -> 0.13, -1/8 -> -0.13.
    """
    r = Rational(num, den)
    scale = Rational(10) ** places
    n = floor(abs(r) * scale + Rational(1, 2))
    value = n / scale if r >= 0 else -n / scale
    return clean_number(float(value), places)


def format_number(x: Number) -> str:
    if isinstance(x, int):
        return str(x)
    if not math.isfinite(x):
        return str(x)
    x = round(x, _DISPLAY_PLACES)
    if x.is_integer():
        return str(int(x))
    s = f"{x:.{_DISPLAY_PLACES}f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def paren(x: Number) -> str:
    """Wrap negatives in parentheses for substitution steps: 3(-2)."""
    s = format_number(x)
    return f"({s})" if s.startswith("-") else s


def signed(x: Number) -> str:
    """Render a trailing term with its operator: '+ 4' / '- 4'."""
    s = format_number(abs(x))
    return f"- {s}" if x < 0 else f"+ {s}"


def coef_term(coef: Number, var: str) -> str:
    if coef == 1:
        return var
    if coef == -1:
        return f"-{var}"
    return f"{format_number(coef)}{var}"


def linear(coef: Number, var: str, const: Number) -> str:
    """'3x - 4', 'x + 2', '-x', '5' ..."""
    if coef == 0:
        return format_number(const)
    head = coef_term(coef, var)
    if const == 0:
        return head
    return f"{head} {signed(const)}"


def fraction_text(num: int, den: int) -> str:
    """Lowest-terms 'p/q' (sign on the numerator); whole numbers come back bare."""
    r = Rational(num, den)
    if r.q == 1:
        return str(r.p)
    return f"{r.p}/{r.q}"
