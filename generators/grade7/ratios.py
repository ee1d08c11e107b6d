# generators/grade7/ratios.py
from __future__ import annotations

import math

from formatting import clean_number, format_number as fmt, round_half_up
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler, resample

_PER_UNIT = {"hours": "hour", "minutes": "minute", "days": "day", "weeks": "week"}


def simplify_ratio(rng: Sampler) -> GeneratedProblem:
    factor = rng.rand_int(2, 12)
    a = rng.rand_int(2, 8) * factor
    b = rng.rand_int(2, 8) * factor
    g = math.gcd(a, b)

    return problem(
        f"Simplify the ratio {a}:{b} to its lowest terms.",
        f"{a // g}:{b // g}",
        f"Find the greatest common factor of {a} and {b}.",
        f"The GCF of {a} and {b} is {g}.",
        f"{a} ÷ {g} = {a // g}",
        f"{b} ÷ {g} = {b // g}",
        f"Therefore, {a}:{b} = {a // g}:{b // g}",
    )


def unit_rate(rng: Sampler) -> GeneratedProblem:
    item = rng.rand_choice(["miles", "pages", "cookies", "problems", "laps", "songs"])
    time = rng.rand_choice(list(_PER_UNIT))
    total = rng.rand_int(20, 200)
    units = rng.rand_int(2, 10)
    rate = round_half_up(total, units, 2)
    exact = clean_number(total / units) == rate

    return problem(
        f"If you complete {total} {item} in {units} {time}, what is your rate per "
        f"{_PER_UNIT[time]}? Round to the nearest hundredth if needed.",
        rate,
        f"Divide the total by the number of {time}.",
        "Rate = Total ÷ Time",
        f"Rate = {total} {item} ÷ {units} {time}",
        f"Rate {'=' if exact else '≈'} {fmt(rate)} {item} per {_PER_UNIT[time]}",
    )


def proportion(rng: Sampler) -> GeneratedProblem:
    def draw():
        return rng.rand_int(2, 12), rng.rand_int(2, 12), rng.rand_int(2, 12)

    # x must come out whole: resample until a divides b*c.
    a, b, c = resample(draw, lambda p: (p[1] * p[2]) % p[0] == 0, fallback=(2, 3, 4))
    x = b * c // a

    return problem(
        f"Solve for x: {a}/{b} = {c}/x",
        x,
        "Use cross multiplication.",
        "Cross multiply:",
        f"{a} × x = {b} × {c}",
        f"{a}x = {b * c}",
        f"x = {b * c} ÷ {a}",
        f"x = {x}",
    )


def recipe_scaling(rng: Sampler) -> GeneratedProblem:
    ingredient = rng.rand_choice(["flour", "sugar", "butter", "milk", "oats"])
    original = rng.rand_choice([0.25, 0.5, 0.75, 1, 1.5, 2, 2.5])
    scale = rng.rand_choice([1.5, 2, 2.5, 3, 0.5])
    amount = clean_number(original * scale)

    return problem(
        f"A recipe calls for {fmt(original)} cups of {ingredient}. How much do you need "
        f"if you make {fmt(scale)} times the recipe?",
        amount,
        f"Multiply {fmt(original)} by {fmt(scale)}.",
        "Amount needed = Original amount × Scale factor",
        f"Amount = {fmt(original)} × {fmt(scale)} = {fmt(amount)} cups",
    )


def percent_of(rng: Sampler) -> GeneratedProblem:
    original = rng.rand_int(20, 200) * 5
    percent = rng.rand_choice([10, 15, 20, 25, 30, 40, 50, 60, 75])
    rate = clean_number(percent / 100)
    amount = clean_number(original * percent / 100)

    if rng.rand_choice(["plain", "discount"]) == "plain":
        return problem(
            f"What is {percent}% of {original}?",
            amount,
            f"Convert {percent}% to a decimal and multiply.",
            f"{percent}% = {fmt(rate)}",
            f"{percent}% of {original} = {fmt(rate)} × {original} = {fmt(amount)}",
        )
    return problem(
        f"A ${original} item is {percent}% off. What is the discount amount in dollars?",
        amount,
        f"Find {percent}% of {original}.",
        f"Discount = {percent}% of ${original}",
        f"Discount = {fmt(rate)} × {original} = ${fmt(amount)}",
    )


TOPIC = TopicGeneratorSet(
    title="Ratios & Proportional Relationships",
    generators=(simplify_ratio, unit_rate, proportion, recipe_scaling, percent_of),
)
