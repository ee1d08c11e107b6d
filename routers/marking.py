from __future__ import annotations

import logging
import math
from typing import Optional

from fastapi import APIRouter

from config import ANSWER_LEN_LIMIT
from equivalence import are_equivalent, format_math_answer
from errors import InvalidExpressionError
from evaluator import evaluate as evaluate_expression
from schemas.marking import (
    CheckRequest,
    CheckResponse,
    EvaluateRequest,
    EvaluateResponse,
    FormatRequest,
    FormatResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["marking"])


# --- Validation helpers ------------------------------------------------------------


def _validate_answer_text(s: str) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Answer required."
    if len(s) > ANSWER_LEN_LIMIT:
        return f"Answer too long (> {ANSWER_LEN_LIMIT})."
    return None


def _alternate_form(expected) -> str:
    if isinstance(expected, (int, float)) and math.isfinite(expected):
        formatted = format_math_answer(expected)
        if " or " in formatted:
            return f"Correct; also written as {formatted}."
    return ""


# --- Endpoints --------------------------------------------------------------------


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    err = _validate_answer_text(req.expr)
    if err:
        return {"ok": False, "value": None, "feedback": err}
    try:
        return {"ok": True, "value": evaluate_expression(req.expr)}
    except InvalidExpressionError as e:
        return {"ok": False, "value": None, "feedback": str(e)}


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    msg = _validate_answer_text(req.answer)
    if msg:
        return {"ok": False, "correct": False, "feedback": msg}

    correct = are_equivalent(req.answer, req.expected)
    logger.debug("check %r against %r -> %s", req.answer, req.expected, correct)
    return {
        "ok": True,
        "correct": correct,
        "feedback": _alternate_form(req.expected) if correct else "",
    }


@router.post("/format", response_model=FormatResponse)
def format_answer(req: FormatRequest):
    return {"formatted": format_math_answer(req.value)}
