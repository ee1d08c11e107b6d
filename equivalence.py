# equivalence.py
from __future__ import annotations

import logging
import math
import re
from typing import Optional, Union

from sympy import Rational

from evaluator import MAX_EXPRESSION_LENGTH, try_evaluate
from formatting import format_number

logger = logging.getLogger(__name__)

# --- Grading policy ---------------------------------------------------------------
# Absolute tolerance for numeric equality. Generators pre-round to at most two
# places (cents, pi ~ 3.14), well outside this band, so distinct answers stay distinct.
TOLERANCE = 1e-4

# format_math_answer only offers fractions a student would recognise.
MAX_DISPLAY_DENOMINATOR = 12

_FRACTION_RE = re.compile(r"^(-?\d+)\s*/\s*(\d+)$")
_RATIO_RE = re.compile(r"^(-?\d+)\s*:\s*(-?\d+)$")

Answer = Union[str, int, float]


# --- Low-level helpers ------------------------------------------------------------


def _as_text(value: Answer) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def _close(a: float, b: float) -> bool:
    return abs(a - b) < TOLERANCE


def _parse_float(s: str) -> Optional[float]:
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def _fraction_value(s: str) -> Optional[float]:
    m = _FRACTION_RE.match(s)
    if not m:
        return None
    den = int(m.group(2))
    if den == 0:
        return None
    return int(m.group(1)) / den


def reduce_ratio(s: str) -> Optional[str]:
    """'18:24' -> '3:4', '4:-6' -> '-2:3'. None if ``s`` is not an integer ratio."""
    m = _RATIO_RE.match(s)
    if not m:
        return None
    a, b = int(m.group(1)), int(m.group(2))
    g = math.gcd(abs(a), abs(b))
    if g == 0:
        return f"{a}:{b}"
    sign = -1 if (a < 0) != (b < 0) else 1
    return f"{sign * (abs(a) // g)}:{abs(b) // g}"


# --- Decision rules (first match wins) ---------------------------------------------


def _same_text(user: str, correct: str) -> bool:
    return user == correct


def _same_expression_value(user: str, correct: str) -> Optional[bool]:
    a = try_evaluate(user)
    if a is None:
        return None
    b = try_evaluate(correct)
    if b is None:
        return None
    return _close(a, b)


def _fraction_matches_decimal(user: str, correct: str) -> bool:
    for frac_side, other_side in ((user, correct), (correct, user)):
        frac = _fraction_value(frac_side)
        if frac is None:
            continue
        other = _parse_float(other_side)
        if other is not None and _close(frac, other):
            return True
    return False


def _same_reduced_ratio(user: str, correct: str) -> bool:
    a = reduce_ratio(user)
    b = reduce_ratio(correct)
    return a is not None and b is not None and a == b


def are_equivalent(user_answer: str, correct_answer: Answer) -> bool:
    """
    Decide whether a typed answer denotes the same value as the canonical one.

    Pipeline: exact text (trimmed, case-folded) -> numeric value of both sides
    -> fraction vs decimal -> reduced ratio. Anything undecided is False.
    Never raises.
    """
    if not isinstance(user_answer, str) or correct_answer is None:
        return False

    user = user_answer.strip().casefold()
    correct = _as_text(correct_answer).strip().casefold()

    if _same_text(user, correct):
        return True

    same_value = _same_expression_value(user, correct)
    if same_value is not None:
        return same_value

    if len(user) > MAX_EXPRESSION_LENGTH or len(correct) > MAX_EXPRESSION_LENGTH:
        return False

    if _fraction_matches_decimal(user, correct):
        return True

    if _same_reduced_ratio(user, correct):
        return True

    logger.debug("no rule matched %r against %r", user, correct)
    return False


# --- Display ------------------------------------------------------------------------


def format_math_answer(answer: Union[int, float]) -> str:
    """
    Best-effort alternate form for feedback, e.g. "0.5 or 1/2", "9 or 3²".
    Falls back to the plain number.
    """
    text = format_number(answer)
    if not math.isfinite(answer):
        return text

    if not float(answer).is_integer():
        r = Rational(text).limit_denominator(MAX_DISPLAY_DENOMINATOR)
        if r.q > 1 and _close(float(r), answer):
            return f"{text} or {r.p}/{r.q}"
        return text

    n = int(answer)
    if n > 1:
        root = math.isqrt(n)
        if root * root == n:
            return f"{text} or {root}²"
    return text
