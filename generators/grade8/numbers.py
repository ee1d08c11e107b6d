# generators/grade8/numbers.py
from __future__ import annotations

from formatting import clean_number, format_number as fmt
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler


def rational_or_irrational(rng: Sampler) -> GeneratedProblem:
    digit = rng.rand_int(1, 9)
    candidates = [
        (f"√{rng.rand_choice([4, 9, 16, 25, 36, 49, 64, 81, 100])}", "rational",
         "is the square root of a perfect square"),
        (f"√{rng.rand_choice([2, 3, 5, 6, 7, 8, 10, 11, 13])}", "irrational",
         "is the square root of a number that is not a perfect square"),
        (f"{rng.rand_int(1, 9)}/{rng.rand_int(1, 9)}", "rational",
         "is already a fraction of integers"),
        ("π", "irrational", "has a decimal expansion that never ends or repeats"),
        (f"0.{digit}{digit}{digit}... (repeating)", "rational",
         f"is a repeating decimal equal to {digit}/9"),
    ]
    value, kind, reason = rng.rand_choice(candidates)

    return problem(
        f"Is {value} rational or irrational?",
        kind,
        "Can it be written as a fraction of integers?",
        f"{value} {reason}, so {value} is {kind}",
    )


def square_root(rng: Sampler) -> GeneratedProblem:
    root = rng.rand_int(1, 20)
    square = root * root

    return problem(
        f"Simplify: √{square}",
        root,
        f"What number times itself equals {square}?",
        f"{root} × {root} = {square}",
        f"Therefore, √{square} = {root}",
    )


def cube_root(rng: Sampler) -> GeneratedProblem:
    root = rng.rand_choice([1, 2, 3, 4, 5, -2, -3, -4, -5])
    cube = root ** 3

    return problem(
        f"What is ∛{cube}?",
        root,
        f"What number cubed equals {cube}?",
        f"{root}³ = {root} × {root} × {root} = {cube}",
        f"Therefore, ∛{cube} = {root}",
    )


def exponent_rules(rng: Sampler) -> GeneratedProblem:
    base = rng.rand_int(2, 9)
    m = rng.rand_int(2, 6)
    n = rng.rand_int(2, 6)
    rule = rng.rand_choice(["multiply", "divide", "power"])

    if rule == "multiply":
        return problem(
            f"Simplify: {base}^{m} × {base}^{n}",
            f"{base}^{m + n}",
            "When multiplying powers with the same base, add exponents.",
            f"{base}^{m} × {base}^{n} = {base}^({m}+{n}) = {base}^{m + n}",
        )
    if rule == "divide":
        return problem(
            f"Simplify: {base}^{m + n} ÷ {base}^{n}",
            f"{base}^{m}",
            "When dividing powers with the same base, subtract exponents.",
            f"{base}^{m + n} ÷ {base}^{n} = {base}^({m + n}-{n}) = {base}^{m}",
        )
    return problem(
        f"Simplify: ({base}^{m})^{n}",
        f"{base}^{m * n}",
        "When raising a power to a power, multiply exponents.",
        f"({base}^{m})^{n} = {base}^({m}×{n}) = {base}^{m * n}",
    )


def scientific_notation(rng: Sampler) -> GeneratedProblem:
    if rng.rand_choice(["to_scientific", "from_scientific"]) == "to_scientific":
        num, exp = rng.rand_choice([
            (rng.rand_int(1000, 9999), 3),
            (rng.rand_int(10000, 99999), 4),
            (rng.rand_float(0.001, 0.009, 3), -3),
            (rng.rand_float(0.0001, 0.0009, 4), -4),
        ])
        coefficient = clean_number(num / 10 ** exp, 8)
        answer = f"{fmt(coefficient)} × 10^{exp}"
        return problem(
            f"Express {fmt(num)} in scientific notation.",
            answer,
            "Move the decimal to create a number between 1 and 10.",
            f"Move the decimal {abs(exp)} places {'left' if exp > 0 else 'right'}",
            f"{fmt(num)} = {answer}",
        )

    coefficient = rng.rand_float(1, 9.9, 1)
    exp = rng.rand_int(-4, 4)
    num = clean_number(coefficient * 10 ** exp, 8)
    return problem(
        f"Convert {fmt(coefficient)} × 10^{exp} to standard form.",
        num,
        f"Move the decimal {abs(exp)} places {'right' if exp > 0 else 'left'}.",
        f"{fmt(coefficient)} × 10^{exp} = {fmt(num)}",
    )


TOPIC = TopicGeneratorSet(
    title="Number System & Exponents",
    generators=(rational_or_irrational, square_root, cube_root, exponent_rules, scientific_notation),
)
