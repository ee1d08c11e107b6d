# sampler.py
from __future__ import annotations

import logging
import random
from typing import Callable, Optional, Protocol, Sequence, TypeVar

from errors import EmptyInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RESAMPLE_TRIES = 20


class EntropySource(Protocol):
    def random(self) -> float: ...


class Sampler:
    """
    Uniform integer/float/choice draws over an injectable entropy source.

    The default source is ``random.SystemRandom`` (OS entropy, no shared seed),
    so one Sampler per request or a shared one are both safe. Tests pass a
    seeded ``random.Random`` to get reproducible problems.
    """

    def __init__(self, source: Optional[EntropySource] = None):
        self._source = source if source is not None else random.SystemRandom()

    def rand_int(self, lo: int, hi: int) -> int:
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return lo + int(self._source.random() * (hi - lo + 1))

    def rand_float(self, lo: float, hi: float, decimals: int = 2) -> float:
        return round(self._source.random() * (hi - lo) + lo, decimals)

    def rand_choice(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyInputError("rand_choice() called with no items")
        return items[int(self._source.random() * len(items))]


def resample(
    draw: Callable[[], T],
    accept: Callable[[T], bool],
    fallback: T,
    max_tries: int = MAX_RESAMPLE_TRIES,
) -> T:
    """Draw until ``accept`` passes; give back ``fallback`` after ``max_tries`` misses."""
    for _ in range(max_tries):
        params = draw()
        if accept(params):
            return params
    logger.warning("resample gave up after %d tries, using fallback %r", max_tries, fallback)
    return fallback
