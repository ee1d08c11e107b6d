# generators/grade7/numbers.py
from __future__ import annotations

from formatting import format_number as fmt, paren
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler

_FACTORS = [-12, -10, -8, -6, -5, -4, -3, -2, 2, 3, 4, 5, 6, 8, 10, 12]

# Fractions with terminating decimals only.
_FRACTIONS = [(1, 2), (1, 4), (3, 4), (1, 5), (2, 5), (3, 5), (4, 5), (1, 8), (3, 8), (5, 8), (7, 8)]


def _sign_rule(a: int, b: int, op: str) -> str:
    if a < 0 and b < 0:
        return f"Negative {op} Negative = Positive"
    if a < 0 or b < 0:
        return f"Positive {op} Negative = Negative"
    return f"Positive {op} Positive = Positive"


def integer_add_subtract(rng: Sampler) -> GeneratedProblem:
    a = rng.rand_int(-20, 20)
    b = rng.rand_int(-20, 20)
    op = rng.rand_choice(["+", "-"])

    if op == "+":
        result = a + b
        return problem(
            f"Calculate: {a} + {paren(b)}",
            result,
            "Add the integers using the rules for signed numbers.",
            f"{a} + {paren(b)} = {result}",
        )
    result = a - b
    return problem(
        f"Calculate: {a} - {paren(b)}",
        result,
        "Subtract by adding the opposite.",
        f"{a} - {paren(b)} = {a} + {paren(-b)} = {result}",
    )


def integer_multiply_divide(rng: Sampler) -> GeneratedProblem:
    a = rng.rand_choice(_FACTORS)
    b = rng.rand_choice(_FACTORS)

    if rng.rand_choice(["×", "÷"]) == "×":
        return problem(
            f"Calculate: {a} × {paren(b)}",
            a * b,
            "Remember the sign rules for multiplication.",
            _sign_rule(a, b, "×"),
            f"{a} × {paren(b)} = {a * b}",
        )
    product = a * b
    return problem(
        f"Calculate: {product} ÷ {paren(a)}",
        b,
        "Remember the sign rules for division.",
        _sign_rule(product, a, "÷"),
        f"{product} ÷ {paren(a)} = {b}",
    )


def fraction_decimal_conversion(rng: Sampler) -> GeneratedProblem:
    n, d = rng.rand_choice(_FRACTIONS)
    dec = n / d

    if rng.rand_choice(["to_decimal", "to_fraction"]) == "to_decimal":
        return problem(
            f"Convert {n}/{d} to a decimal.",
            dec,
            "Divide the numerator by the denominator.",
            f"{n} ÷ {d} = {fmt(dec)}",
        )
    thousandths = round(dec * 1000)
    return problem(
        f"Convert {fmt(dec)} to a fraction in simplest form.",
        f"{n}/{d}",
        f"{fmt(dec)} = {thousandths}/1000, then simplify.",
        f"{fmt(dec)} = {thousandths}/1000",
        f"Simplified: {thousandths}/1000 = {n}/{d}",
    )


def absolute_value(rng: Sampler) -> GeneratedProblem:
    nums = [rng.rand_int(-20, -1), rng.rand_int(-20, -1), rng.rand_int(1, 20)]
    a = rng.rand_choice(nums)
    b = rng.rand_choice(nums)
    op = rng.rand_choice(["+", "-"])
    result = abs(a) + abs(b) if op == "+" else abs(a) - abs(b)

    return problem(
        f"Calculate: |{a}| {op} |{b}|",
        result,
        "Find the absolute value of each number first.",
        f"|{a}| = {abs(a)}",
        f"|{b}| = {abs(b)}",
        f"{abs(a)} {op} {abs(b)} = {result}",
    )


TOPIC = TopicGeneratorSet(
    title="The Number System",
    generators=(
        integer_add_subtract,
        integer_multiply_divide,
        fraction_decimal_conversion,
        absolute_value,
    ),
)
