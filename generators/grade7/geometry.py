# generators/grade7/geometry.py
from __future__ import annotations

from formatting import clean_number, format_number as fmt
from generators.base import GeneratedProblem, TopicGeneratorSet, problem
from sampler import Sampler

# Questions say "use π ≈ 3.14", so answers do too.
PI_APPROX = 3.14


def angle_pair(rng: Sampler) -> GeneratedProblem:
    kind = rng.rand_choice(["complementary", "supplementary"])
    total = 90 if kind == "complementary" else 180
    angle1 = rng.rand_int(10, total - 10)
    angle2 = total - angle1

    return problem(
        f"Two angles are {kind}. If one angle measures {angle1}°, what is the measure "
        "of the other angle?",
        angle2,
        f"{kind.capitalize()} angles sum to {total}°.",
        f"First angle + Second angle = {total}°",
        f"{angle1}° + Second angle = {total}°",
        f"Second angle = {total}° - {angle1}° = {angle2}°",
    )


def circle_measure(rng: Sampler) -> GeneratedProblem:
    r = rng.rand_int(3, 15)

    if rng.rand_choice(["area", "circumference"]) == "area":
        area = clean_number(round(PI_APPROX * r * r, 2))
        return problem(
            f"Find the area of a circle with radius {r} cm. (Use π ≈ 3.14)",
            area,
            "Use the formula A = πr²",
            "A = πr²",
            f"A = π × {r}²",
            f"A = π × {r * r}",
            f"A ≈ 3.14 × {r * r}",
            f"A ≈ {fmt(area)} cm²",
        )
    circumference = clean_number(round(2 * PI_APPROX * r, 2))
    return problem(
        f"Find the circumference of a circle with radius {r} cm. (Use π ≈ 3.14)",
        circumference,
        "Use the formula C = 2πr",
        "C = 2πr",
        f"C = 2 × π × {r}",
        f"C ≈ 2 × 3.14 × {r}",
        f"C ≈ {fmt(circumference)} cm",
    )


def triangle_area(rng: Sampler) -> GeneratedProblem:
    base = rng.rand_int(4, 20)
    height = rng.rand_int(3, 15)
    area = clean_number(base * height / 2)

    return problem(
        f"Find the area of a triangle with base {base} cm and height {height} cm.",
        area,
        "Use the formula A = ½ × base × height",
        "A = ½ × base × height",
        f"A = ½ × {base} × {height}",
        f"A = {base * height} ÷ 2",
        f"A = {fmt(area)} cm²",
    )


def prism_volume(rng: Sampler) -> GeneratedProblem:
    length = rng.rand_int(3, 12)
    width = rng.rand_int(3, 12)
    height = rng.rand_int(3, 12)
    volume = length * width * height

    return problem(
        f"Find the volume of a rectangular prism with length {length} cm, width {width} cm, "
        f"and height {height} cm.",
        volume,
        "Use the formula V = length × width × height",
        "V = l × w × h",
        f"V = {length} × {width} × {height}",
        f"V = {volume} cm³",
    )


def scale_drawing(rng: Sampler) -> GeneratedProblem:
    k = rng.rand_choice([2, 3, 4, 5, 10, 25])

    if rng.rand_choice(["reduced", "enlarged"]) == "reduced":
        drawing = rng.rand_int(4, 20)
        actual = drawing * k
        return problem(
            f"A scale drawing uses a scale of 1:{k}. If an object is {drawing} cm in the "
            "drawing, what is its actual size in cm?",
            actual,
            f"Multiply the drawing size by {k}.",
            f"Scale 1:{k} means the actual size is {k} times the drawing size",
            f"Actual size = {drawing} × {k} = {actual} cm",
        )
    actual = rng.rand_int(2, 10)
    drawing = actual * k
    return problem(
        f"An enlarged drawing uses a scale of {k}:1. If an object is {drawing} cm in the "
        "drawing, what is its actual size in cm?",
        actual,
        f"Divide the drawing size by {k}.",
        f"Scale {k}:1 means the drawing is {k} times the actual size",
        f"Actual size = {drawing} ÷ {k} = {actual} cm",
    )


TOPIC = TopicGeneratorSet(
    title="Geometry",
    generators=(angle_pair, circle_measure, triangle_area, prism_volume, scale_drawing),
)
