# generators/grade8/functions.py
from __future__ import annotations

from formatting import clean_number, format_number as fmt, linear, paren, round_half_up, signed
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler, resample


def evaluate_function(rng: Sampler) -> GeneratedProblem:
    m = rng.rand_int(2, 5)
    b = rng.rand_int(-10, 10)
    x = rng.rand_int(-5, 5)
    y = m * x + b

    return problem(
        f"If f(x) = {linear(m, 'x', b)}, what is f({x})?",
        y,
        f"Substitute {x} for x in the function.",
        f"f({x}) = {m}{paren(x)} {signed(b)}",
        f"= {m * x} {signed(b)}",
        f"= {y}",
    )


def slope_from_points(rng: Sampler) -> GeneratedProblem:
    # a vertical line has no slope: resample until x1 != x2
    x1, y1, x2, y2 = resample(
        lambda: tuple(rng.rand_int(-5, 5) for _ in range(4)),
        lambda p: p[0] != p[2],
        fallback=(0, 0, 3, 2),
    )
    dy, dx = y2 - y1, x2 - x1
    slope = round_half_up(dy, dx, 2)
    exact = clean_number(dy / dx) == slope

    return problem(
        f"Find the slope of the line passing through ({x1}, {y1}) and ({x2}, {y2}). "
        "Round to the nearest hundredth if needed.",
        slope,
        "Use slope = (y₂ - y₁) / (x₂ - x₁)",
        f"Slope = ({y2} - {paren(y1)}) / ({x2} - {paren(x1)})",
        f"= {dy} / {dx}",
        f"{'=' if exact else '≈'} {fmt(slope)}",
    )


def y_intercept(rng: Sampler) -> GeneratedProblem:
    m = rng.rand_int(-5, 5)
    b = rng.rand_int(-10, 10)

    return problem(
        f"What is the y-intercept of y = {linear(m, 'x', b)}?",
        b,
        "The y-intercept is the constant term in y = mx + b form.",
        "In y = mx + b form:",
        f"m = {m} (slope)",
        f"The line crosses the y-axis at (0, {b})",
        f"y-intercept: b = {b}",
    )


def linear_cost_model(rng: Sampler) -> GeneratedProblem:
    if rng.rand_choice(["taxi", "gym"]) == "taxi":
        fixed = rng.rand_int(3, 5)
        rate = rng.rand_float(1.5, 3, 2)
        unit = "mile"
        question = (
            f"A taxi charges ${fixed} plus ${fmt(rate)} per mile. "
            "Write a function for the total cost C for m miles."
        )
    else:
        fixed = rng.rand_int(20, 50)
        rate = rng.rand_int(25, 40)
        unit = "month"
        question = (
            f"A gym membership costs ${fixed} to join plus ${rate} per month. "
            "Write a function for the total cost C after m months."
        )
    answer = f"C(m) = {fmt(rate)}m + {fixed}"

    return problem(
        question,
        answer,
        "The initial cost is the constant, the cost per unit is the rate.",
        f"Initial/fixed cost: ${fixed}",
        f"Cost per {unit}: ${fmt(rate)}",
        f"Function: {answer}",
    )


def function_table(rng: Sampler) -> GeneratedProblem:
    m = rng.rand_int(2, 5)
    b = rng.rand_int(-5, 5)
    xs = [0, 1, 2, 3]
    missing = rng.rand_int(1, 3)
    ys = [m * x + b for x in xs]
    shown = ", ".join("?" if i == missing else str(y) for i, y in enumerate(ys))
    x = xs[missing]

    return problem(
        f"Complete the function table:\nx: {', '.join(map(str, xs))}\ny: {shown}",
        ys[missing],
        "Find the pattern or rule relating x and y.",
        f"Pattern: each y increases by {m} as x increases by 1",
        f"Rule: y = {linear(m, 'x', b)}",
        f"When x = {x}: y = {m}({x}) {signed(b)} = {ys[missing]}",
    )


TOPIC = TopicGeneratorSet(
    title="Functions",
    generators=(evaluate_function, slope_from_points, y_intercept, linear_cost_model, function_table),
)
