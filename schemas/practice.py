# schemas/practice.py
from __future__ import annotations

from typing import Union

from pydantic import BaseModel


class TopicOut(BaseModel):
    id: str
    title: str


class ProblemOut(BaseModel):
    grade: int
    topic: str
    question: str
    answer: Union[int, float, str]
    hint: str
    solution: str
