"""
Grade router — mock AI grading of a text submission.
"""

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.routers.notifications import get_toast_queue
from app.schemas.grading import ErrorResponse, GradeRequest, ScoreResult
from app.services.grading import grade_submission
from app.services.notifications import ToastQueue
from app.services.scoring import RandomSource, get_rng

router = APIRouter(prefix="/api/grade", tags=["Grading"])


@router.post(
    "",
    response_model=ScoreResult,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def grade(
    body: GradeRequest,
    rng: RandomSource = Depends(get_rng),
    toasts: ToastQueue = Depends(get_toast_queue),
):
    """Score a submission and attach templated feedback. Nothing is stored."""
    result = await grade_submission(
        body,
        rng,
        delay=settings.GRADING_DELAY_SECONDS,
        timeout=settings.GRADING_TIMEOUT_SECONDS,
    )
    toasts.add("Assignment graded successfully!", "success")
    return result
