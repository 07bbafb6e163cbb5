"""
Dashboard analytics over the demo dataset.

Every function takes its records as arguments so the routers decide which
slice of the dataset a dashboard sees.
"""

from datetime import date
from typing import Dict, List, Optional, Sequence

from dateutil import parser

from app.schemas.academic import (
    Assignment,
    LearningResource,
    PerformanceData,
    StudentProgress,
    Submission,
)
from app.services.feedback import GENERIC, STUDY_TIPS
from app.services.scoring import calculate_class_average

GRADE_BUCKETS = (
    ("A (90-100)", 90),
    ("B (80-89)", 80),
    ("C (70-79)", 70),
    ("D (60-69)", 60),
    ("F (0-59)", 0),
)

# Illustrative series shown on the personal analytics tab
GROWTH_SERIES = [
    {"month": "January", "score": 65},
    {"month": "February", "score": 68},
    {"month": "March", "score": 72},
    {"month": "April", "score": 75},
    {"month": "May", "score": 79},
    {"month": "June", "score": 84},
]

SKILLS_SERIES = [
    {"skill": "Problem Solving", "score": 80, "fullMark": 100},
    {"skill": "Critical Thinking", "score": 75, "fullMark": 100},
    {"skill": "Creativity", "score": 85, "fullMark": 100},
    {"skill": "Communication", "score": 70, "fullMark": 100},
    {"skill": "Research", "score": 65, "fullMark": 100},
    {"skill": "Time Management", "score": 60, "fullMark": 100},
]


def _scores(submissions: Sequence[Submission]) -> List[int]:
    return [s.score for s in submissions if s.score is not None]


def grade_distribution(submissions: Sequence[Submission]) -> List[dict]:
    """Count submissions per letter bucket. Unscored submissions count as 0."""
    counts = {name: 0 for name, _ in GRADE_BUCKETS}
    for submission in submissions:
        score = submission.score or 0
        for name, floor in GRADE_BUCKETS:
            if score >= floor:
                counts[name] += 1
                break
    return [{"name": name, "value": value} for name, value in counts.items()]


def score_summary(submissions: Sequence[Submission]) -> dict:
    scores = _scores(submissions)
    return {
        "submissions": len(submissions),
        "participatingStudents": len({s.student_id for s in submissions}),
        "averageScore": calculate_class_average(scores),
        "highestScore": max(scores) if scores else 0,
        "lowestScore": min(scores) if scores else 0,
    }


def class_overview(
    submissions: Sequence[Submission],
    performance: Sequence[PerformanceData],
    progress: Sequence[StudentProgress],
    total_students: int,
) -> dict:
    overview = score_summary(submissions)
    overview["totalStudents"] = total_students

    if performance:
        best = max(performance, key=lambda p: p.average_score)
        worst = min(performance, key=lambda p: p.average_score)
        overview["bestSubject"] = best.subject
        overview["weakestSubject"] = worst.subject
    else:
        overview["bestSubject"] = overview["weakestSubject"] = None

    overview["progressChange"] = progress[-1].score - progress[0].score if progress else 0
    overview["gradeDistribution"] = grade_distribution(submissions)
    return overview


def subject_averages(
    submissions: Sequence[Submission],
    assignments: Sequence[Assignment],
) -> Dict[str, int]:
    """Rounded average score per subject, for subjects with submissions only."""
    subject_of = {a.id: a.subject for a in assignments}
    buckets: Dict[str, List[int]] = {}
    for submission in submissions:
        subject = subject_of.get(submission.assignment_id)
        if subject is None:
            continue
        buckets.setdefault(subject, []).append(submission.score or 0)

    ordered = dict.fromkeys(a.subject for a in assignments)
    return {
        subject: round(sum(buckets[subject]) / len(buckets[subject]))
        for subject in ordered
        if subject in buckets
    }


def student_analytics(
    submissions: Sequence[Submission],
    assignments: Sequence[Assignment],
) -> dict:
    averages = subject_averages(submissions, assignments)
    average_score = (
        round(sum(s.score or 0 for s in submissions) / len(submissions)) if submissions else 0
    )

    weakest: Optional[str] = min(averages, key=averages.get) if averages else None
    strongest: Optional[str] = max(averages, key=averages.get) if averages else None

    return {
        "averageScore": average_score,
        "subjectPerformance": [
            {"subject": subject, "score": score} for subject, score in averages.items()
        ],
        "improvementArea": weakest,
        "strength": strongest,
        "generalTips": STUDY_TIPS[GENERIC],
        "subjectTips": {k: v for k, v in STUDY_TIPS.items() if k != GENERIC},
        "growth": GROWTH_SERIES,
        "skills": SKILLS_SERIES,
    }


def recommended_resources(
    resources: Sequence[LearningResource],
    submissions: Sequence[Submission],
    assignments: Sequence[Assignment],
) -> List[LearningResource]:
    """Resources whose range contains the student's average in that subject."""
    subject_of = {a.id: a.subject for a in assignments}
    picked = []
    for resource in resources:
        scores = [
            s.score or 0 for s in submissions
            if subject_of.get(s.assignment_id) == resource.subject
        ]
        if not scores:
            continue
        low, high = resource.recommended_for
        if low <= sum(scores) / len(scores) <= high:
            picked.append(resource)
    return picked


def completion_status(
    assignment: Assignment,
    submissions: Sequence[Submission],
    today: Optional[date] = None,
) -> str:
    if any(s.assignment_id == assignment.id for s in submissions):
        return "completed"
    today = today or date.today()
    if parser.isoparse(assignment.due_date).date() < today:
        return "overdue"
    return "pending"
