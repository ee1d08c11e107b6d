"""Spot checks that answers are actually derivable from the questions."""
import math
import random
import re
from decimal import ROUND_HALF_UP, Decimal

import pytest

from equivalence import are_equivalent
from evaluator import evaluate
from formatting import round_half_up
from generators.grade7 import expressions, ratios, statistics
from generators.grade8 import functions, geometry, numbers
from sampler import Sampler


def _rng(seed):
    return Sampler(random.Random(seed))


def test_simplified_ratio_is_in_lowest_terms():
    for seed in range(100):
        p = ratios.simplify_ratio(_rng(seed))
        a, b = (int(n) for n in p.answer.split(":"))
        qa, qb = (int(n) for n in re.search(r"(\d+):(\d+)", p.question).groups())
        assert qa * b == qb * a
        assert math.gcd(a, b) == 1


def test_proportion_answer_solves_cross_multiplication():
    for seed in range(100):
        p = ratios.proportion(_rng(seed))
        a, b, c = (int(n) for n in re.findall(r"\d+", p.question)[:3])
        assert a * p.answer == b * c


def test_two_step_equation_answer_solves_equation():
    for seed in range(100):
        p = expressions.two_step_equation(_rng(seed))
        lhs, rhs = p.question.removeprefix("Solve: ").split(" = ")
        var = re.search(r"[a-z]", lhs).group(0)
        assert evaluate(lhs.replace(var, f"({p.answer})")) == int(rhs)


def _half_up(num, den, places):
    exact = Decimal(num) / Decimal(den)
    return float(exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def _points(question):
    return [tuple(int(n) for n in pt) for pt in re.findall(r"\((-?\d+), (-?\d+)\)", question)]


def test_slope_never_vertical():
    for seed in range(200):
        p = functions.slope_from_points(_rng(seed))
        (x1, y1), (x2, y2) = _points(p.question)
        assert x1 != x2
        assert p.answer == pytest.approx(_half_up(y2 - y1, x2 - x1, 2), abs=1e-9)


def test_rounded_answers_round_halves_up():
    for seed in range(300):
        p = ratios.unit_rate(_rng(seed))
        total, units = (int(n) for n in re.findall(r"\d+", p.question)[:2])
        assert are_equivalent(str(_half_up(total, units, 2)), p.answer)

        p = statistics.mean_of_list(_rng(seed))
        values = [int(n) for n in re.findall(r"\d+", p.question)]
        assert are_equivalent(str(_half_up(sum(values), len(values), 1)), p.answer)

        p = functions.slope_from_points(_rng(seed))
        (x1, y1), (x2, y2) = _points(p.question)
        assert are_equivalent(str(_half_up(y2 - y1, x2 - x1, 2)), p.answer)


def test_exact_halves_are_not_rounded_to_even():
    # 1/8, 173/8 and 250/8 sit exactly on a rounding boundary
    assert round_half_up(1, 8, 2) == 0.13
    assert round_half_up(-1, 8, 2) == -0.13
    assert round_half_up(173, 8, 2) == 21.63
    assert round_half_up(250, 8, 1) == 31.3


def test_exact_quotients_are_narrated_with_equals():
    for seed in range(300):
        p = ratios.unit_rate(_rng(seed))
        total, units = (int(n) for n in re.findall(r"\d+", p.question)[:2])
        last = p.solution.splitlines()[-1]
        if (total * 100) % units == 0:
            assert last.startswith("Rate = ")
        else:
            assert last.startswith("Rate ≈ ")

        p = statistics.mean_of_list(_rng(seed))
        values = [int(n) for n in re.findall(r"\d+", p.question)]
        mark = "=" if (sum(values) * 10) % len(values) == 0 else "≈"
        assert f"÷ {len(values)} {mark} " in p.solution.splitlines()[-1]


def test_pythagorean_answer():
    for seed in range(50):
        p = geometry.pythagorean(_rng(seed))
        nums = [int(n) for n in re.findall(r"\d+", p.question)]
        if "hypotenuse." in p.question:
            assert nums[0] ** 2 + nums[1] ** 2 == p.answer ** 2
        else:
            assert nums[1] ** 2 + p.answer ** 2 == nums[0] ** 2


def test_scientific_notation_round_trips():
    for seed in range(100):
        p = numbers.scientific_notation(_rng(seed))
        if isinstance(p.answer, str):
            value = p.question.removeprefix("Express ").removesuffix(" in scientific notation.")
            assert abs(evaluate(p.answer) - float(value)) < 1e-9
            coefficient = float(p.answer.split(" × ")[0])
            assert 1 <= coefficient < 10
        else:
            expr = p.question.removeprefix("Convert ").removesuffix(" to standard form.")
            assert abs(evaluate(expr) - p.answer) < 1e-9
