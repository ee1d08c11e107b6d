# generators/grade7/expressions.py
from __future__ import annotations

from formatting import linear, signed
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler


def _nonzero(rng: Sampler, lo: int, hi: int) -> int:
    return rng.rand_choice([n for n in range(lo, hi + 1) if n != 0])


def combine_like_terms(rng: Sampler) -> GeneratedProblem:
    c1 = rng.rand_int(2, 9)
    c2 = rng.rand_int(2, 9)
    c3 = rng.rand_int(-9, -2)
    const = _nonzero(rng, -10, 10)
    v = rng.rand_choice(["x", "y", "a", "b"])
    total = c1 + c2 + c3
    # the variable terms can cancel, leaving a plain number
    answer = const if total == 0 else linear(total, v, const)

    return problem(
        f"Simplify: {c1}{v} + {c2}{v} - {abs(c3)}{v} {signed(const)}",
        answer,
        "Combine like terms.",
        f"Combine the {v} terms: {c1} + {c2} + ({c3}) = {total}",
        f"Result: {answer}",
    )


def one_step_equation(rng: Sampler) -> GeneratedProblem:
    kind = rng.rand_choice(["add", "sub", "mult", "div"])
    v = rng.rand_choice(["x", "y", "n", "m"])

    if kind == "add":
        a = _nonzero(rng, -20, 20)
        b = rng.rand_int(-20, 20)
        return problem(
            f"Solve: {v} {signed(a)} = {b}",
            b - a,
            f"{'Add' if a < 0 else 'Subtract'} {abs(a)} {'to' if a < 0 else 'from'} both sides.",
            f"{v} {signed(a)} = {b}",
            f"{v} = {b} {signed(-a)}",
            f"{v} = {b - a}",
        )
    if kind == "sub":
        a = rng.rand_int(1, 20)
        b = rng.rand_int(-20, 20)
        return problem(
            f"Solve: {v} - {a} = {b}",
            b + a,
            f"Add {a} to both sides.",
            f"{v} - {a} = {b}",
            f"{v} = {b} + {a}",
            f"{v} = {b + a}",
        )
    if kind == "mult":
        a = rng.rand_int(2, 12)
        x = rng.rand_int(-10, 10)
        b = a * x
        return problem(
            f"Solve: {a}{v} = {b}",
            x,
            f"Divide both sides by {a}.",
            f"{a}{v} = {b}",
            f"{v} = {b} ÷ {a}",
            f"{v} = {x}",
        )
    a = rng.rand_int(2, 12)
    b = rng.rand_int(-10, 10)
    return problem(
        f"Solve: {v}/{a} = {b}",
        b * a,
        f"Multiply both sides by {a}.",
        f"{v}/{a} = {b}",
        f"{v} = {b} × {a}",
        f"{v} = {b * a}",
    )


def two_step_equation(rng: Sampler) -> GeneratedProblem:
    a = rng.rand_int(2, 9)
    b = _nonzero(rng, -15, 15)
    x = rng.rand_int(-10, 10)
    v = rng.rand_choice(["x", "y", "n"])
    result = a * x + b

    return problem(
        f"Solve: {a}{v} {signed(b)} = {result}",
        x,
        f"First {'add' if b < 0 else 'subtract'} {abs(b)}, then divide by {a}.",
        f"{a}{v} {signed(b)} = {result}",
        f"{a}{v} = {result} {signed(-b)}",
        f"{a}{v} = {result - b}",
        f"{v} = {result - b} ÷ {a}",
        f"{v} = {x}",
    )


def one_step_inequality(rng: Sampler) -> GeneratedProblem:
    v = rng.rand_choice(["x", "y", "n"])
    a = _nonzero(rng, -10, 10)
    b = rng.rand_int(-10, 10)
    ineq = rng.rand_choice(["<", ">", "≤", "≥"])
    answer = f"{v} {ineq} {b - a}"

    return problem(
        f"Solve: {v} {signed(a)} {ineq} {b}",
        answer,
        f"{'Add' if a < 0 else 'Subtract'} {abs(a)} {'to' if a < 0 else 'from'} both sides.",
        f"{v} {signed(a)} {ineq} {b}",
        f"{v} {ineq} {b} {signed(-a)}",
        answer,
    )


TOPIC = TopicGeneratorSet(
    title="Expressions & Equations",
    generators=(combine_like_terms, one_step_equation, two_step_equation, one_step_inequality),
)
