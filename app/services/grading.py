"""
Grade pipeline: validate, resolve the assignment, wait out the simulated
grading latency, then score and write feedback.
"""

import asyncio
import logging
from datetime import datetime, timezone

from app.core.errors import GradingError, InternalError, MissingFieldError, NotFoundError
from app.data.mock_data import get_assignment
from app.schemas.academic import Assignment
from app.schemas.grading import GradeRequest, ScoreResult
from app.services.feedback import generate_feedback, generate_learning_recommendations, score_band
from app.services.scoring import RandomSource, get_letter_grade, grade_assignment

logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def grade_submission(
    body: GradeRequest,
    rng: RandomSource,
    delay: float = 0.0,
    timeout: float | None = None,
) -> ScoreResult:
    """
    Run one grade request end to end.

    Raises MissingFieldError / NotFoundError before any scoring happens.
    Anything unexpected past validation surfaces as InternalError; the
    original exception is logged, never returned.
    """
    if not body.content or not body.assignment_id:
        raise MissingFieldError()

    assignment = get_assignment(body.assignment_id)
    if assignment is None:
        raise NotFoundError()

    try:
        return await asyncio.wait_for(
            _score(body.content, assignment, rng, delay),
            timeout=timeout,
        )
    except GradingError:
        raise
    except asyncio.TimeoutError:
        logger.error("Grading assignment %s timed out after %ss", assignment.id, timeout)
        raise InternalError()
    except Exception:
        logger.exception("Error processing assignment %s", assignment.id)
        raise InternalError()


async def _score(content: str, assignment: Assignment, rng: RandomSource, delay: float) -> ScoreResult:
    if delay > 0:
        await asyncio.sleep(delay)

    subject = assignment.subject
    score = grade_assignment(content, rng)
    feedback = generate_feedback(content, score, subject)
    logger.info("Graded submission for %s (%s): score=%d", assignment.id, subject, score)

    return ScoreResult(
        score=score,
        feedback=feedback,
        submitted_at=_utc_timestamp(),
        letter_grade=get_letter_grade(score),
        band=score_band(score),
        recommendations=generate_learning_recommendations(score, subject),
    )
