# routers/health.py
from fastapi import APIRouter

from registry import get_grades, get_topics

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/registry")
def health_registry():
    topics = {str(grade): len(get_topics(grade)) for grade in get_grades()}
    return {"ok": bool(topics) and all(topics.values()), "topics": topics}
