"""
Teacher router — class overview, submissions table, student drill-down,
and (mock) messaging.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.data.mock_data import (
    ASSIGNMENTS,
    PERFORMANCE_DATA,
    STUDENT_PROGRESS,
    STUDENTS,
    SUBMISSIONS,
    get_assignment,
    get_student,
    get_submissions_for_student,
)
from app.routers.notifications import get_toast_queue
from app.schemas.academic import Submission
from app.schemas.dashboard import StudentMessage
from app.services.analytics import class_overview
from app.services.notifications import ToastQueue
from app.services.scoring import calculate_class_average, get_letter_grade
from app.utils.response import success_response

router = APIRouter(prefix="/api/teacher", tags=["Teacher"])


def _submission_row(submission: Submission) -> dict:
    student = get_student(submission.student_id)
    assignment = get_assignment(submission.assignment_id)
    return {
        **submission.model_dump(by_alias=True),
        "studentName": student.name if student else None,
        "assignmentTitle": assignment.title if assignment else None,
        "subject": assignment.subject if assignment else None,
        "letterGrade": get_letter_grade(submission.score) if submission.score is not None else None,
    }


@router.get("/overview")
async def get_overview():
    overview = class_overview(SUBMISSIONS, PERFORMANCE_DATA, STUDENT_PROGRESS, len(STUDENTS))
    overview["totalAssignments"] = len(ASSIGNMENTS)
    overview["performance"] = [p.model_dump(by_alias=True) for p in PERFORMANCE_DATA]
    overview["progress"] = [p.model_dump(by_alias=True) for p in STUDENT_PROGRESS]
    return success_response(data=overview)


@router.get("/submissions")
async def get_submissions():
    return success_response(data=[_submission_row(s) for s in SUBMISSIONS])


@router.get("/students")
async def get_students():
    rows = []
    for student in STUDENTS:
        submissions = get_submissions_for_student(student.id)
        scores = [s.score for s in submissions if s.score is not None]
        rows.append({
            **student.model_dump(by_alias=True),
            "submissionCount": len(submissions),
            "averageScore": calculate_class_average(scores) if scores else None,
        })
    return success_response(data=rows)


@router.get("/students/{student_id}")
async def get_student_detail(student_id: str):
    student = get_student(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")

    submissions = get_submissions_for_student(student_id)
    return success_response(data={
        **student.model_dump(by_alias=True),
        "submissions": [_submission_row(s) for s in submissions],
    })


@router.post("/students/{student_id}/message")
async def message_student(
    student_id: str,
    body: StudentMessage,
    toasts: ToastQueue = Depends(get_toast_queue),
):
    """Mock send — nothing leaves the server, a toast confirms it."""
    student = get_student(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    if not body.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")

    toast = toasts.add(f"Message sent to {student.name}", "success")
    return success_response(data={"toastId": toast.id}, message=f"Message sent to {student.name}")
