"""
Student router — dashboard, personal analytics, assignments, and the
study assistant. Renders for the configured demo student.
"""

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.data.mock_data import (
    ASSIGNMENTS,
    LEARNING_RESOURCES,
    get_assignment,
    get_student,
    get_submissions_for_student,
)
from app.schemas.academic import Student
from app.schemas.dashboard import ChatQuery
from app.services.analytics import completion_status, recommended_resources, student_analytics
from app.services.chatbot import ASSISTANT_NAME, get_bot_response, greeting
from app.services.scoring import get_letter_grade
from app.utils.response import success_response

router = APIRouter(prefix="/api/student", tags=["Student"])


def _active_student() -> Student:
    student = get_student(settings.ACTIVE_STUDENT_ID)
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.get("/dashboard")
async def get_dashboard():
    student = _active_student()
    submissions = get_submissions_for_student(student.id)

    assignments = [
        {
            **a.model_dump(by_alias=True),
            "status": completion_status(a, submissions),
        }
        for a in ASSIGNMENTS
    ]

    history = []
    for sub in submissions:
        assignment = get_assignment(sub.assignment_id)
        history.append({
            **sub.model_dump(by_alias=True),
            "assignmentTitle": assignment.title if assignment else None,
            "subject": assignment.subject if assignment else None,
            "letterGrade": get_letter_grade(sub.score) if sub.score is not None else None,
        })

    resources = recommended_resources(LEARNING_RESOURCES, submissions, ASSIGNMENTS)

    return success_response(data={
        "student": student.model_dump(by_alias=True),
        "welcome": f"Namaste, {student.name}! Welcome back to your learning journey.",
        "assignments": assignments,
        "submissions": history,
        "recommendedResources": [r.model_dump(by_alias=True) for r in resources],
    })


@router.get("/analytics")
async def get_analytics():
    student = _active_student()
    submissions = get_submissions_for_student(student.id)
    data = student_analytics(submissions, ASSIGNMENTS)
    data["studentName"] = student.name
    return success_response(data=data)


@router.get("/assignments")
async def get_assignments():
    return success_response(data=[a.model_dump(by_alias=True) for a in ASSIGNMENTS])


@router.get("/chat")
async def open_chat():
    student = _active_student()
    return success_response(data={"sender": ASSISTANT_NAME, "text": greeting(student.name)})


@router.post("/chat")
async def chat(body: ChatQuery):
    if not body.query.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty")
    return success_response(data={"sender": ASSISTANT_NAME, "text": get_bot_response(body.query)})
