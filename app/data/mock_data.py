"""
In-memory demo dataset.

All records are frozen pydantic models and nothing here is written to at
request time; newly graded submissions are returned to the caller only.
"""

from typing import List, Optional

from app.schemas.academic import (
    Assignment,
    LearningResource,
    PerformanceData,
    Student,
    StudentProgress,
    Submission,
    Teacher,
)

STUDENTS: List[Student] = [
    Student(id="s1", name="Arjun Sharma", grade="10th", avatar_url="https://i.pravatar.cc/150?u=arjun"),
    Student(id="s2", name="Priya Patel", grade="10th", avatar_url="https://i.pravatar.cc/150?u=priya"),
    Student(id="s3", name="Rahul Verma", grade="10th", avatar_url="https://i.pravatar.cc/150?u=rahul"),
    Student(id="s4", name="Aisha Khan", grade="10th", avatar_url="https://i.pravatar.cc/150?u=aisha"),
    Student(id="s5", name="Vikram Singh", grade="10th", avatar_url="https://i.pravatar.cc/150?u=vikram"),
]

TEACHERS: List[Teacher] = [
    Teacher(id="t1", name="Dr. Neha Gupta", subject="Mathematics", avatar_url="https://i.pravatar.cc/150?u=neha"),
    Teacher(id="t2", name="Prof. Rajesh Kumar", subject="Science", avatar_url="https://i.pravatar.cc/150?u=rajesh"),
    Teacher(id="t3", name="Ms. Anjali Desai", subject="English", avatar_url="https://i.pravatar.cc/150?u=anjali"),
    Teacher(id="t4", name="Mr. Anand Joshi", subject="History", avatar_url="https://i.pravatar.cc/150?u=anand"),
]

ASSIGNMENTS: List[Assignment] = [
    Assignment(
        id="a1",
        title="Quadratic Equations",
        subject="Mathematics",
        description="Solve the following quadratic equations and show your work.",
        due_date="2023-05-15",
        max_score=100,
    ),
    Assignment(
        id="a2",
        title="Cell Structure Essay",
        subject="Science",
        description="Write a 500-word essay on the structure and function of animal cells.",
        due_date="2023-05-18",
        max_score=100,
    ),
    Assignment(
        id="a3",
        title="Literary Analysis",
        subject="English",
        description="Analyze the main themes in 'To Kill a Mockingbird' with textual evidence.",
        due_date="2023-05-20",
        max_score=100,
    ),
    Assignment(
        id="a4",
        title="World War II Timeline",
        subject="History",
        description="Create a timeline of major events during World War II with brief descriptions.",
        due_date="2023-05-22",
        max_score=100,
    ),
]

SUBMISSIONS: List[Submission] = [
    Submission(
        id="sub1",
        student_id="s1",
        assignment_id="a1",
        content=(
            "I solved the equations by factoring and using the quadratic formula. "
            "For x^2 + 5x + 6 = 0, I got x = -2 and x = -3."
        ),
        submitted_at="2023-05-10T14:30:00Z",
        score=85,
        feedback=(
            "Good work on factoring! Make sure to check your solutions by substituting back into "
            "the original equation. You've shown a solid understanding of the quadratic formula."
        ),
    ),
    Submission(
        id="sub2",
        student_id="s2",
        assignment_id="a2",
        content=(
            "Animal cells are eukaryotic cells with a nucleus and organelles. The cell membrane "
            "controls what enters and exits the cell. The nucleus contains DNA and acts as the "
            "cell's control center."
        ),
        submitted_at="2023-05-12T10:15:00Z",
        score=92,
        feedback=(
            "Excellent description of animal cell structure. Your explanation of the function of "
            "each organelle is clear and accurate. Consider including more about the endoplasmic "
            "reticulum in future responses."
        ),
    ),
    Submission(
        id="sub3",
        student_id="s3",
        assignment_id="a3",
        content=(
            "In 'To Kill a Mockingbird', Harper Lee explores themes of racial injustice through the "
            "trial of Tom Robinson. The character of Atticus Finch represents moral integrity in the "
            "face of societal prejudice."
        ),
        submitted_at="2023-05-14T16:45:00Z",
        score=78,
        feedback=(
            "Good identification of themes. Your analysis could be strengthened with more specific "
            "textual evidence and quotes. Try to connect the themes to the historical context of "
            "the novel."
        ),
    ),
    Submission(
        id="sub4",
        student_id="s4",
        assignment_id="a4",
        content=(
            "September 1, 1939: Germany invades Poland, starting WWII. December 7, 1941: Japan "
            "attacks Pearl Harbor. June 6, 1944: D-Day invasion of Normandy. August 6, 1945: "
            "Atomic bomb dropped on Hiroshima."
        ),
        submitted_at="2023-05-16T09:20:00Z",
        score=88,
        feedback=(
            "Very good timeline with key events identified. Your chronology is accurate. To "
            "improve, consider adding brief explanations of why each event was significant to the "
            "overall course of the war."
        ),
    ),
    Submission(
        id="sub5",
        student_id="s5",
        assignment_id="a1",
        content=(
            "For the equation 2x^2 - 7x + 3 = 0, I used the quadratic formula: "
            "x = [7 ± √(49-24)]/4. This gives x = 3 and x = 0.5."
        ),
        submitted_at="2023-05-11T11:50:00Z",
        score=75,
        feedback=(
            "Your approach using the quadratic formula is correct, but there's an error in your "
            "calculation. Double-check your work with the discriminant. Review the steps for "
            "applying the quadratic formula."
        ),
    ),
]

PERFORMANCE_DATA: List[PerformanceData] = [
    PerformanceData(subject="Mathematics", average_score=82, submissions=25),
    PerformanceData(subject="Science", average_score=78, submissions=22),
    PerformanceData(subject="English", average_score=85, submissions=28),
    PerformanceData(subject="History", average_score=79, submissions=20),
]

STUDENT_PROGRESS: List[StudentProgress] = [
    StudentProgress(month="January", score=72),
    StudentProgress(month="February", score=75),
    StudentProgress(month="March", score=79),
    StudentProgress(month="April", score=83),
    StudentProgress(month="May", score=88),
]

LEARNING_RESOURCES: List[LearningResource] = [
    LearningResource(
        id="r1", title="Khan Academy: Quadratic Equations", type="Video", url="#",
        subject="Mathematics", recommended_for=(70, 85),
    ),
    LearningResource(
        id="r2", title="Cell Biology Fundamentals", type="Article", url="#",
        subject="Science", recommended_for=(65, 90),
    ),
    LearningResource(
        id="r3", title="Literary Analysis Techniques", type="PDF", url="#",
        subject="English", recommended_for=(60, 80),
    ),
    LearningResource(
        id="r4", title="World History Interactive Timeline", type="Interactive", url="#",
        subject="History", recommended_for=(75, 95),
    ),
]


def get_assignment(assignment_id: str) -> Optional[Assignment]:
    return next((a for a in ASSIGNMENTS if a.id == assignment_id), None)


def get_student(student_id: str) -> Optional[Student]:
    return next((s for s in STUDENTS if s.id == student_id), None)


def get_submissions_for_student(student_id: str) -> List[Submission]:
    return [s for s in SUBMISSIONS if s.student_id == student_id]
