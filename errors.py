# errors.py
from __future__ import annotations


class PracticeEngineError(Exception):
    """Base class for everything the practice engine raises on purpose."""


class UnknownGradeError(PracticeEngineError, LookupError):
    def __init__(self, grade: int):
        super().__init__(f"No topics registered for grade {grade}")
        self.grade = grade


class UnknownTopicError(PracticeEngineError, LookupError):
    def __init__(self, grade: int, topic_id: str):
        super().__init__(f"No generators found for grade {grade} topic {topic_id}")
        self.grade = grade
        self.topic_id = topic_id


class EmptyInputError(PracticeEngineError, ValueError):
    pass


class InvalidExpressionError(PracticeEngineError, ValueError):
    pass
