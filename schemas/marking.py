# schemas/marking.py
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

# ---------- Evaluate ----------


class EvaluateRequest(BaseModel):
    expr: str


class EvaluateResponse(BaseModel):
    ok: bool
    value: Optional[float] = None
    feedback: Optional[str] = None


# ---------- Check answer ----------


class CheckRequest(BaseModel):
    answer: str
    # canonical answer as handed out with the problem
    expected: Union[int, float, str]


class CheckResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str = ""


# ---------- Format ----------


class FormatRequest(BaseModel):
    value: float


class FormatResponse(BaseModel):
    formatted: str
