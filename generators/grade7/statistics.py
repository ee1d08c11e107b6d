# generators/grade7/statistics.py
from __future__ import annotations

import math

from formatting import clean_number, format_number as fmt, fraction_text, round_half_up
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler


def sample_estimate(rng: Sampler) -> GeneratedProblem:
    size = rng.rand_choice([20, 25, 40, 50, 100])
    favorable = rng.rand_int(math.floor(size * 0.1), math.floor(size * 0.9))
    population = rng.rand_choice([200, 300, 400, 500, 600, 800, 1000])
    exact = clean_number(favorable / size * population, 4)
    estimate = math.floor(exact + 0.5)

    return problem(
        f"In a sample of {size} students, {favorable} prefer online learning. If the school "
        f"has {population} students, estimate how many prefer online learning. "
        "Round to the nearest whole student.",
        estimate,
        "Find the sample proportion, then multiply by the total population.",
        f"Sample proportion = {favorable}/{size} = {fmt(clean_number(favorable / size, 4))}",
        f"{favorable}/{size} × {population} = {fmt(exact)}",
        f"Estimated total {'=' if exact == estimate else '≈'} {estimate} students",
    )


def mean_of_list(rng: Sampler) -> GeneratedProblem:
    count = rng.rand_int(5, 8)
    numbers = [rng.rand_int(10, 50) for _ in range(count)]
    total = sum(numbers)
    mean = round_half_up(total, count, 1)
    exact = clean_number(total / count) == mean

    return problem(
        f"Find the mean of: {', '.join(map(str, numbers))}. Round to the nearest tenth.",
        mean,
        "Add all numbers and divide by how many there are.",
        f"Sum = {' + '.join(map(str, numbers))} = {total}",
        f"Mean = {total} ÷ {count} {'=' if exact else '≈'} {fmt(mean)}",
    )


def median_of_list(rng: Sampler) -> GeneratedProblem:
    count = rng.rand_choice([5, 6, 7])
    numbers = sorted(rng.rand_int(10, 50) for _ in range(count))
    listed = ", ".join(map(str, numbers))
    mid = count // 2

    if count % 2 == 1:
        median = numbers[mid]
        return problem(
            f"Find the median of: {listed}",
            median,
            "Order the numbers, then find the middle value.",
            f"Ordered: {listed}",
            f"Middle value (position {mid + 1}) = {median}",
        )
    lo, hi = numbers[mid - 1], numbers[mid]
    median = clean_number((lo + hi) / 2)
    return problem(
        f"Find the median of: {listed}",
        median,
        "Order the numbers, then average the two middle values.",
        f"Ordered: {listed}",
        f"Middle two values: {lo} and {hi}",
        f"Median = ({lo} + {hi}) ÷ 2 = {fmt(median)}",
    )


def simple_probability(rng: Sampler) -> GeneratedProblem:
    kind = rng.rand_choice(["die", "cards", "marbles"])

    if kind == "die":
        k = rng.rand_int(1, 5)
        context = f"rolling a number greater than {k} on a six-sided die"
        favorable, total = 6 - k, 6
        described = f"Numbers greater than {k}: {', '.join(str(n) for n in range(k + 1, 7))}"
    elif kind == "cards":
        context = "drawing a heart from a standard deck of 52 cards"
        favorable, total = 13, 52
        described = "There are 13 hearts in a deck"
    else:
        red = rng.rand_int(2, 6)
        blue = rng.rand_int(2, 6)
        context = f"picking a red marble from a bag with {red} red and {blue} blue marbles"
        favorable, total = red, red + blue
        described = f"Red marbles: {red}"

    answer = fraction_text(favorable, total)
    last = f"P(event) = {favorable}/{total}"
    if answer != f"{favorable}/{total}":
        last += f" = {answer}"

    return problem(
        f"What is the probability of {context}?",
        answer,
        "Probability = favorable outcomes ÷ total outcomes",
        described,
        f"Total possible outcomes = {total}",
        last,
    )


TOPIC = TopicGeneratorSet(
    title="Statistics & Probability",
    generators=(sample_estimate, mean_of_list, median_of_list, simple_probability),
)
