"""
Pydantic schemas for the demo dataset: people, assignments, submissions,
and the static analytics series. JSON uses camelCase field names.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Tuple


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---- People ----
class Student(CamelModel):
    id: str
    name: str
    grade: str
    avatar_url: str


class Teacher(CamelModel):
    id: str
    name: str
    subject: str
    avatar_url: str


# ---- Coursework ----
class Assignment(CamelModel):
    id: str
    title: str
    subject: str
    description: str
    due_date: str
    max_score: int = 100


class Submission(CamelModel):
    id: str
    student_id: str
    assignment_id: str
    content: str
    submitted_at: str
    score: Optional[int] = None
    feedback: Optional[str] = None


class LearningResource(CamelModel):
    id: str
    title: str
    type: str
    url: str
    subject: str
    recommended_for: Tuple[int, int]  # inclusive score range


# ---- Analytics series ----
class PerformanceData(CamelModel):
    subject: str
    average_score: float
    submissions: int


class StudentProgress(CamelModel):
    month: str
    score: int
