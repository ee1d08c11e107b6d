from __future__ import annotations

import random
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from errors import UnknownGradeError, UnknownTopicError
from registry import generate_problem, get_topics
from sampler import Sampler
from schemas.practice import ProblemOut, TopicOut

router = APIRouter(prefix="/grades", tags=["practice"])


@router.get("/{grade}/topics", response_model=List[TopicOut])
def list_topics(grade: int):
    try:
        return [t.model_dump() for t in get_topics(grade)]
    except UnknownGradeError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{grade}/topics/{topic_id}/problem", response_model=ProblemOut)
def new_problem(
    grade: int,
    topic_id: str,
    seed: Optional[int] = Query(default=None, ge=0, description="Reproducible problem when set"),
):
    sampler = Sampler(random.Random(seed)) if seed is not None else None
    try:
        p = generate_problem(grade, topic_id, sampler)
    except UnknownTopicError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"grade": grade, "topic": topic_id, **p.model_dump()}
