"""
Pydantic schemas for the grade endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.schemas.academic import CamelModel


class GradeRequest(BaseModel):
    # Both fields are optional here so that absence is reported as a
    # missing field (400) rather than a schema violation.
    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
    assignment_id: Optional[str] = Field(default=None, alias="assignmentId")


class ScoreResult(CamelModel):
    score: int
    feedback: str
    submitted_at: str
    letter_grade: str
    band: str
    recommendations: List[str]


class ErrorResponse(BaseModel):
    error: str
