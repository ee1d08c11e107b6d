# generators/grade8/expressions.py
from __future__ import annotations

from formatting import coef_term, linear, paren, signed
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler, resample


def multi_step_equation(rng: Sampler) -> GeneratedProblem:
    # equal x-coefficients would leave 0x = ..., so keep them apart
    a, c = resample(
        lambda: (rng.rand_int(2, 6), rng.rand_int(2, 6)),
        lambda p: p[0] != p[1],
        fallback=(5, 2),
    )
    b = rng.rand_int(-10, 10)
    x = rng.rand_int(-5, 5)
    d = (a - c) * x + b

    return problem(
        f"Solve: {linear(a, 'x', b)} = {linear(c, 'x', d)}",
        x,
        "Get all x terms on one side and constants on the other.",
        f"{linear(a, 'x', b)} = {linear(c, 'x', d)}",
        f"{a}x - {c}x = {d} - {paren(b)}",
        f"{coef_term(a - c, 'x')} = {d - b}",
        f"x = {d - b} ÷ {paren(a - c)}",
        f"x = {x}",
    )


def system_by_substitution(rng: Sampler) -> GeneratedProblem:
    a = rng.rand_int(1, 4)
    b = rng.rand_int(-5, 5)
    x = rng.rand_int(-3, 3)
    y = a * x + b
    total = x + y
    line = linear(a, "x", b)

    return problem(
        f"Solve the system:\ny = {line}\nx + y = {total}",
        f"x = {x}, y = {y}",
        "Substitute the first equation into the second.",
        f"Substitute y = {line} into x + y = {total}:",
        f"x + ({line}) = {total}",
        f"{linear(a + 1, 'x', b)} = {total}",
        f"{a + 1}x = {total - b}",
        f"x = {x}",
        f"y = {a}{paren(x)} {signed(b)} = {y}",
        f"Solution: x = {x}, y = {y}",
    )


def system_by_elimination(rng: Sampler) -> GeneratedProblem:
    x = rng.rand_int(-3, 3)
    y = rng.rand_int(-3, 3)
    a1 = rng.rand_int(1, 3)
    b1 = rng.rand_int(1, 3)
    a2 = rng.rand_int(1, 3)
    b2 = -b1  # y cancels when the equations are added
    c1 = a1 * x + b1 * y
    c2 = a2 * x + b2 * y
    eq1 = f"{coef_term(a1, 'x')} + {coef_term(b1, 'y')}"
    eq2 = f"{coef_term(a2, 'x')} - {coef_term(b1, 'y')}"

    return problem(
        f"Solve the system:\n{eq1} = {c1}\n{eq2} = {c2}",
        f"x = {x}, y = {y}",
        "Add the equations to eliminate y.",
        "Add the equations:",
        f"({eq1}) + ({eq2}) = {c1} + {paren(c2)}",
        f"{a1 + a2}x = {c1 + c2}",
        f"x = {x}",
        f"Substitute back: {a1}{paren(x)} + {coef_term(b1, 'y')} = {c1}",
        f"{a1 * x} + {coef_term(b1, 'y')} = {c1}",
        f"y = {y}",
        f"Solution: x = {x}, y = {y}",
    )


def exponent_evaluation(rng: Sampler) -> GeneratedProblem:
    x = rng.rand_int(2, 5)
    a = rng.rand_int(2, 4)
    b = rng.rand_int(2, 4)
    pa, pb = x ** a, x ** b

    return problem(
        f"If x = {x}, evaluate: x^{a} + x^{b}",
        pa + pb,
        f"Calculate {x}^{a} and {x}^{b} separately, then add.",
        f"x^{a} = {x}^{a} = {pa}",
        f"x^{b} = {x}^{b} = {pb}",
        f"{pa} + {pb} = {pa + pb}",
    )


TOPIC = TopicGeneratorSet(
    title="Expressions & Equations",
    generators=(multi_step_equation, system_by_substitution, system_by_elimination, exponent_evaluation),
)
