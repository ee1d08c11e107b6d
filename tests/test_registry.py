import math
import random

import pytest
from pydantic import ValidationError

from errors import UnknownGradeError, UnknownTopicError
from generators.base import GeneratedProblem, TopicGeneratorSet
from registry import REGISTRATIONS, GeneratorRegistry, generate_problem, get_grades, get_topics
from sampler import Sampler


def test_get_topics_grade7_in_registration_order():
    topics = get_topics(7)
    assert [t.id for t in topics] == ["ratios", "numbers", "expressions", "geometry", "statistics"]
    assert topics[0].title == "Ratios & Proportional Relationships"
    assert get_topics(7) == topics


def test_get_topics_grade8():
    assert [t.id for t in get_topics(8)] == [
        "numbers",
        "expressions",
        "functions",
        "geometry",
        "statistics",
    ]


def test_grades():
    assert get_grades() == [7, 8]


def test_unknown_grade():
    with pytest.raises(UnknownGradeError):
        get_topics(9)


def test_unknown_topic():
    with pytest.raises(UnknownTopicError):
        generate_problem(7, "nonexistent")
    with pytest.raises(UnknownTopicError):
        generate_problem(9, "ratios")
    with pytest.raises(UnknownTopicError):
        generate_problem(7, "functions")


def test_empty_topic_set_is_unknown():
    reg = GeneratorRegistry()
    reg.register(7, "empty", TopicGeneratorSet(title="Empty", generators=()))
    assert reg.empty_topics() == [(7, "empty")]
    with pytest.raises(UnknownTopicError):
        reg.generate(7, "empty")


def test_duplicate_registration_rejected():
    reg = GeneratorRegistry(REGISTRATIONS)
    with pytest.raises(ValueError):
        reg.register(*REGISTRATIONS[0])


def test_runtime_registration_is_possible():
    def constant(rng):
        return GeneratedProblem(question="1 + 1?", answer=2, hint="Add.", solution="1 + 1 = 2")

    reg = GeneratorRegistry()
    reg.register(6, "warmup", TopicGeneratorSet(title="Warm-up", generators=(constant,)))
    assert [t.id for t in reg.topics(6)] == ["warmup"]
    assert reg.generate(6, "warmup").answer == 2


def test_generate_problem_returns_problem():
    p = generate_problem(8, "functions")
    assert isinstance(p, GeneratedProblem)
    assert p.question and p.hint and p.solution


def test_seeded_generation_is_reproducible():
    a = generate_problem(7, "ratios", Sampler(random.Random(11)))
    b = generate_problem(7, "ratios", Sampler(random.Random(11)))
    assert a == b


def test_generated_problem_is_immutable_and_finite():
    p = GeneratedProblem(question="q", answer=1.5, hint="h", solution="= 1.5")
    with pytest.raises(ValidationError):
        p.answer = 2
    with pytest.raises(ValidationError):
        GeneratedProblem(question="q", answer=math.nan, hint="h", solution="s")
    with pytest.raises(ValidationError):
        GeneratedProblem(question="q", answer=math.inf, hint="h", solution="s")
