# generators/base.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from sampler import Sampler


class GeneratedProblem(BaseModel):
    """
    One randomized practice problem. ``answer`` is either a number or a
    canonical string form ("3:4", "3/8", "x < 5", "(2, -1)", "C(m) = 2m + 3").
    The last line of ``solution`` always ends with the answer.
    """

    model_config = ConfigDict(frozen=True)

    question: str
    answer: Union[int, float, str]
    hint: str
    solution: str

    @field_validator("answer")
    @classmethod
    def _finite(cls, v):
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("answer must be a finite number")
        return v


Generator = Callable[[Sampler], GeneratedProblem]


@dataclass(frozen=True)
class TopicGeneratorSet:
    title: str
    generators: Tuple[Generator, ...]


def problem(question: str, answer: Union[int, float, str], hint: str, *steps: str) -> GeneratedProblem:
    return GeneratedProblem(question=question, answer=answer, hint=hint, solution="\n".join(steps))
