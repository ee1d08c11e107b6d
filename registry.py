# registry.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel

from errors import UnknownGradeError, UnknownTopicError
from generators.base import GeneratedProblem, TopicGeneratorSet
from generators.grade7 import expressions as g7_expressions
from generators.grade7 import geometry as g7_geometry
from generators.grade7 import numbers as g7_numbers
from generators.grade7 import ratios as g7_ratios
from generators.grade7 import statistics as g7_statistics
from generators.grade8 import expressions as g8_expressions
from generators.grade8 import functions as g8_functions
from generators.grade8 import geometry as g8_geometry
from generators.grade8 import numbers as g8_numbers
from generators.grade8 import statistics as g8_statistics
from sampler import Sampler

logger = logging.getLogger(__name__)

Registration = Tuple[int, str, TopicGeneratorSet]

# (grade, topic_id, generator set), in display order.
REGISTRATIONS: Tuple[Registration, ...] = (
    (7, "ratios", g7_ratios.TOPIC),
    (7, "numbers", g7_numbers.TOPIC),
    (7, "expressions", g7_expressions.TOPIC),
    (7, "geometry", g7_geometry.TOPIC),
    (7, "statistics", g7_statistics.TOPIC),
    (8, "numbers", g8_numbers.TOPIC),
    (8, "expressions", g8_expressions.TOPIC),
    (8, "functions", g8_functions.TOPIC),
    (8, "geometry", g8_geometry.TOPIC),
    (8, "statistics", g8_statistics.TOPIC),
)


class TopicInfo(BaseModel):
    id: str
    title: str


class GeneratorRegistry:
    """grade -> topic_id -> TopicGeneratorSet. Dicts keep registration order."""

    def __init__(self, registrations: Iterable[Registration] = ()):
        self._topics: Dict[int, Dict[str, TopicGeneratorSet]] = {}
        for grade, topic_id, topic_set in registrations:
            self.register(grade, topic_id, topic_set)

    def register(self, grade: int, topic_id: str, topic_set: TopicGeneratorSet) -> None:
        by_topic = self._topics.setdefault(grade, {})
        if topic_id in by_topic:
            raise ValueError(f"grade {grade} topic {topic_id!r} registered twice")
        by_topic[topic_id] = topic_set

    def grades(self) -> List[int]:
        return list(self._topics)

    def topics(self, grade: int) -> List[TopicInfo]:
        if grade not in self._topics:
            raise UnknownGradeError(grade)
        return [TopicInfo(id=tid, title=ts.title) for tid, ts in self._topics[grade].items()]

    def topic_set(self, grade: int, topic_id: str) -> TopicGeneratorSet:
        topic_set = self._topics.get(grade, {}).get(topic_id)
        if topic_set is None or not topic_set.generators:
            raise UnknownTopicError(grade, topic_id)
        return topic_set

    def generate(self, grade: int, topic_id: str, sampler: Optional[Sampler] = None) -> GeneratedProblem:
        topic_set = self.topic_set(grade, topic_id)
        rng = sampler if sampler is not None else Sampler()
        generator = rng.rand_choice(topic_set.generators)
        logger.debug("grade %s topic %s -> %s", grade, topic_id, generator.__name__)
        return generator(rng)

    def empty_topics(self) -> List[Tuple[int, str]]:
        return [
            (grade, tid)
            for grade, by_topic in self._topics.items()
            for tid, ts in by_topic.items()
            if not ts.generators
        ]


_registry = GeneratorRegistry(REGISTRATIONS)


def _ensure_topics_have_generators() -> None:
    """Refuse to start with a registered topic that could never produce a problem."""
    empty = _registry.empty_topics()
    if empty:
        raise RuntimeError(f"Topics registered without generators: {empty}")


_ensure_topics_have_generators()


# Public API
def generate_problem(grade: int, topic_id: str, sampler: Optional[Sampler] = None) -> GeneratedProblem:
    return _registry.generate(grade, topic_id, sampler)


def get_topics(grade: int) -> List[TopicInfo]:
    return _registry.topics(grade)


def get_grades() -> List[int]:
    return _registry.grades()


def get_registry() -> GeneratorRegistry:
    return _registry
