# generators/grade8/geometry.py
from __future__ import annotations

from formatting import clean_number, format_number as fmt, signed
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler

PI_APPROX = 3.14

_PYTHAGOREAN_TRIPLES = [(3, 4, 5), (5, 12, 13), (8, 15, 17), (7, 24, 25), (9, 12, 15), (12, 16, 20)]

_REFLECTIONS = {
    "x-axis": ("negate y", "(x, y) → (x, -y)", lambda x, y: (x, -y)),
    "y-axis": ("negate x", "(x, y) → (-x, y)", lambda x, y: (-x, y)),
    "line y = x": ("swap x and y", "(x, y) → (y, x)", lambda x, y: (y, x)),
}

_ROTATIONS = {
    "90° clockwise": ("(x, y) → (y, -x)", lambda x, y: (y, -x)),
    "90° counter-clockwise": ("(x, y) → (-y, x)", lambda x, y: (-y, x)),
    "180°": ("(x, y) → (-x, -y)", lambda x, y: (-x, -y)),
}


def _nonzero(rng: Sampler, lo: int, hi: int) -> int:
    return rng.rand_choice([n for n in range(lo, hi + 1) if n != 0])


def translation(rng: Sampler) -> GeneratedProblem:
    x = rng.rand_int(-5, 5)
    y = rng.rand_int(-5, 5)
    h = _nonzero(rng, -6, 6)
    k = _nonzero(rng, -6, 6)
    answer = f"({x + h}, {y + k})"

    return problem(
        f"Translate point ({x}, {y}) by moving {abs(h)} units {'right' if h > 0 else 'left'} "
        f"and {abs(k)} units {'up' if k > 0 else 'down'}.",
        answer,
        f"{'Add' if h > 0 else 'Subtract'} {abs(h)} {'to' if h > 0 else 'from'} x, "
        f"{'add' if k > 0 else 'subtract'} {abs(k)} {'to' if k > 0 else 'from'} y.",
        f"(x, y) → (x {signed(h)}, y {signed(k)})",
        f"({x}, {y}) → ({x} {signed(h)}, {y} {signed(k)}) = {answer}",
    )


def reflection(rng: Sampler) -> GeneratedProblem:
    x = rng.rand_int(-8, 8)
    y = rng.rand_int(-8, 8)
    axis = rng.rand_choice(list(_REFLECTIONS))
    how, rule, apply = _REFLECTIONS[axis]
    nx, ny = apply(x, y)

    return problem(
        f"Reflect point ({x}, {y}) across the {axis}.",
        f"({nx}, {ny})",
        f"For the {axis}: {how}.",
        f"Reflection across the {axis}:",
        rule,
        f"({x}, {y}) → ({nx}, {ny})",
    )


def rotation(rng: Sampler) -> GeneratedProblem:
    x = rng.rand_int(-5, 5)
    y = rng.rand_int(-5, 5)
    turn = rng.rand_choice(list(_ROTATIONS))
    rule, apply = _ROTATIONS[turn]
    nx, ny = apply(x, y)

    return problem(
        f"Rotate point ({x}, {y}) {turn} around the origin.",
        f"({nx}, {ny})",
        f"For {turn}: {rule}",
        f"{turn} rotation:",
        rule,
        f"({x}, {y}) → ({nx}, {ny})",
    )


def pythagorean(rng: Sampler) -> GeneratedProblem:
    a, b, c = rng.rand_choice(_PYTHAGOREAN_TRIPLES)
    missing = rng.rand_choice(["a", "b", "c"])

    if missing == "c":
        return problem(
            f"A right triangle has legs of length {a} and {b}. Find the hypotenuse.",
            c,
            "Use a² + b² = c²",
            "a² + b² = c²",
            f"{a}² + {b}² = c²",
            f"{a * a} + {b * b} = c²",
            f"{a * a + b * b} = c²",
            f"c = √{a * a + b * b} = {c}",
        )
    known, unknown = (b, a) if missing == "a" else (a, b)
    return problem(
        f"A right triangle has hypotenuse {c} and one leg of length {known}. Find the other leg.",
        unknown,
        "Use a² + b² = c², solve for the unknown leg.",
        "a² + b² = c²",
        f"{missing}² + {known}² = {c}²",
        f"{missing}² = {c * c} - {known * known}",
        f"{missing}² = {c * c - known * known}",
        f"{missing} = √{c * c - known * known} = {unknown}",
    )


def solid_volume(rng: Sampler) -> GeneratedProblem:
    shape = rng.rand_choice(["cylinder", "cone", "sphere"])
    r = rng.rand_int(3, 10)
    h = rng.rand_int(5, 15)

    if shape == "cylinder":
        volume = clean_number(round(PI_APPROX * r * r * h, 2))
        return problem(
            f"Find the volume of a cylinder with radius {r} cm and height {h} cm. (Use π ≈ 3.14)",
            volume,
            "V = πr²h",
            "V = πr²h",
            f"V = π × {r}² × {h}",
            f"V = π × {r * r} × {h}",
            f"V ≈ 3.14 × {r * r * h}",
            f"V ≈ {fmt(volume)} cm³",
        )
    if shape == "cone":
        volume = clean_number(round(PI_APPROX * r * r * h / 3, 2))
        return problem(
            f"Find the volume of a cone with radius {r} cm and height {h} cm. (Use π ≈ 3.14)",
            volume,
            "V = ⅓πr²h",
            "V = ⅓πr²h",
            f"V = ⅓ × π × {r}² × {h}",
            f"V = ⅓ × π × {r * r} × {h}",
            f"V ≈ ⅓ × 3.14 × {r * r * h}",
            f"V ≈ {fmt(volume)} cm³",
        )
    volume = clean_number(round(4 / 3 * PI_APPROX * r ** 3, 2))
    return problem(
        f"Find the volume of a sphere with radius {r} cm. (Use π ≈ 3.14)",
        volume,
        "V = ⁴⁄₃πr³",
        "V = ⁴⁄₃πr³",
        f"V = ⁴⁄₃ × π × {r}³",
        f"V = ⁴⁄₃ × π × {r ** 3}",
        f"V ≈ ⁴⁄₃ × 3.14 × {r ** 3}",
        f"V ≈ {fmt(volume)} cm³",
    )


TOPIC = TopicGeneratorSet(
    title="Geometry",
    generators=(translation, reflection, rotation, pythagorean, solid_volume),
)
