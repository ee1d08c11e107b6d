# generators/grade8/statistics.py
from __future__ import annotations

import math

from formatting import clean_number, format_number as fmt, fraction_text
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler

_SCATTER_CONTEXTS = [
    ("study hours", "test score", "positive"),
    ("TV hours", "grades", "negative"),
    ("shoe size", "math score", "no"),
    ("age", "height", "positive"),
    ("temperature", "coat sales", "negative"),
]

_TREND = {
    "positive": "tends to increase",
    "negative": "tends to decrease",
    "no": "shows no clear pattern",
}


def scatter_association(rng: Sampler) -> GeneratedProblem:
    x, y, association = rng.rand_choice(_SCATTER_CONTEXTS)

    return problem(
        f"A scatter plot shows {x} vs {y}. What type of association would you expect "
        "(positive, negative, or no)?",
        association,
        f"Think about how {y} changes as {x} increases.",
        f"As {x} increases, {y} {_TREND[association]}.",
        f"Association: {association}",
    )


def line_of_best_fit(rng: Sampler) -> GeneratedProblem:
    m = rng.rand_int(2, 5)
    b = rng.rand_int(10, 30)
    x = rng.rand_int(5, 15)
    y = m * x + b

    return problem(
        f"A line of best fit has equation y = {m}x + {b}. Predict y when x = {x}.",
        y,
        "Substitute the x-value into the equation.",
        f"y = {m}x + {b}",
        f"y = {m}({x}) + {b}",
        f"y = {m * x} + {b}",
        f"y = {y}",
    )


def two_way_table(rng: Sampler) -> GeneratedProblem:
    boys = rng.rand_int(20, 40)
    girls = rng.rand_int(20, 40)
    share = rng.rand_float(0.3, 0.7)
    boy_sports = math.floor(boys * share + 0.5)
    girl_sports = math.floor(girls * (1 - share) + 0.5)
    total = boys + girls
    sports = boy_sports + girl_sports
    survey = (
        "In a school survey:\n"
        f"- {boys} boys: {boy_sports} play sports, {boys - boy_sports} don't\n"
        f"- {girls} girls: {girl_sports} play sports, {girls - girl_sports} don't\n"
    )
    ask = rng.rand_choice(["total", "boy_sports", "fraction"])

    if ask == "total":
        return problem(
            survey + "How many total students are there?",
            total,
            "Add all students.",
            f"Total = {boys} boys + {girls} girls = {total}",
        )
    if ask == "boy_sports":
        return problem(
            survey + "How many boys play sports?",
            boy_sports,
            "Look at the boys who play sports.",
            f"Boys who play sports = {boy_sports}",
        )
    answer = fraction_text(sports, total)
    last = f"Fraction = {sports}/{total}"
    if answer != f"{sports}/{total}":
        last += f" = {answer}"
    return problem(
        survey + "What fraction of students play sports? Give it in simplest form.",
        answer,
        "Total who play sports ÷ total students",
        f"Students who play sports = {boy_sports} + {girl_sports} = {sports}",
        last,
    )


def relative_frequency(rng: Sampler) -> GeneratedProblem:
    total = rng.rand_choice([50, 100, 200])
    favorable = rng.rand_int(math.floor(total * 0.1), math.floor(total * 0.9))
    decimal = clean_number(favorable / total)

    if rng.rand_choice(["percent", "fraction"]) == "percent":
        answer = f"{fmt(clean_number(favorable / total * 100))}%"
        return problem(
            f"Out of {total} students surveyed, {favorable} prefer math class. "
            "What is the relative frequency as a percent?",
            answer,
            "Relative frequency = favorable ÷ total",
            f"Relative frequency = {favorable}/{total} = {fmt(decimal)} = {answer}",
        )
    answer = fraction_text(favorable, total)
    last = f"Relative frequency = {favorable}/{total}"
    if answer != f"{favorable}/{total}":
        last += f" = {answer}"
    return problem(
        f"Out of {total} students surveyed, {favorable} prefer math class. "
        "What is the relative frequency as a fraction?",
        answer,
        "Relative frequency = favorable ÷ total",
        last,
    )


TOPIC = TopicGeneratorSet(
    title="Statistics & Probability",
    generators=(scatter_association, line_of_best_fit, two_way_table, relative_frequency),
)
