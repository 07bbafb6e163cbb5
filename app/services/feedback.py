"""
Template-based feedback for graded submissions.

Feedback is a pure function of (score, subject): the score selects a band,
the subject selects a sentence bank, and unknown subjects fall back to the
generic bank. The submission text is accepted for interface parity with a
real grader but is not inspected.
"""

from typing import Dict, List

EXCELLENT = "excellent"
GOOD = "good"
AVERAGE = "average"
NEEDS_IMPROVEMENT = "needs_improvement"

BANDS = (EXCELLENT, GOOD, AVERAGE, NEEDS_IMPROVEMENT)

GENERIC = "General"


def score_band(score: float) -> str:
    if score >= 90:
        return EXCELLENT
    if score >= 80:
        return GOOD
    if score >= 70:
        return AVERAGE
    return NEEDS_IMPROVEMENT


OPENINGS: Dict[str, str] = {
    EXCELLENT: "Excellent work!",
    GOOD: "Good job on this assignment.",
    AVERAGE: "You have made a fair attempt at this assignment.",
    NEEDS_IMPROVEMENT: "This submission needs more work.",
}

CLOSINGS: Dict[str, str] = {
    EXCELLENT: "Keep challenging yourself with more advanced material.",
    GOOD: "With a little more depth this could be outstanding.",
    AVERAGE: "Review the key concepts and try to add more detail next time.",
    NEEDS_IMPROVEMENT: "Please revisit the lesson material and ask for help where you are unsure.",
}

FEEDBACK_BANK: Dict[str, Dict[str, str]] = {
    "Mathematics": {
        EXCELLENT: "Your solution method is clear and every step of the calculation is well justified.",
        GOOD: "Your approach to solving the equations is sound, though a few steps could be shown more explicitly.",
        AVERAGE: "You understand the basic formula, but double-check your calculations for arithmetic errors.",
        NEEDS_IMPROVEMENT: "Work through the problem step by step and verify each solution by substituting it back.",
    },
    "Science": {
        EXCELLENT: "Your explanation of structure and function is accurate and thorough.",
        GOOD: "You describe the key scientific concepts well; add more examples to strengthen your explanation.",
        AVERAGE: "Your answer covers the basics, but the link between structure and function needs more detail.",
        NEEDS_IMPROVEMENT: "Review the core scientific terminology and how each component contributes to the whole.",
    },
    "English": {
        EXCELLENT: "Your analysis of themes and characters is insightful and well supported by textual evidence.",
        GOOD: "Your literary analysis identifies the main themes; support it with more quotes from the text.",
        AVERAGE: "You identify some themes, but your argument needs stronger evidence from the text.",
        NEEDS_IMPROVEMENT: "Focus on building a clear thesis and back each point with evidence from the text.",
    },
    "History": {
        EXCELLENT: "Your timeline is accurate and you explain the impact of each event convincingly.",
        GOOD: "You identify the key historical events; explain more about why each one mattered.",
        AVERAGE: "Your chronology is mostly correct, but the causes and effects of events need more attention.",
        NEEDS_IMPROVEMENT: "Check the order of events and describe the historical significance of each one.",
    },
    GENERIC: {
        EXCELLENT: "Your work shows a thorough understanding of the topic.",
        GOOD: "Your work shows a solid understanding of the main ideas.",
        AVERAGE: "Your work shows a basic understanding of the topic.",
        NEEDS_IMPROVEMENT: "Your work shows gaps in understanding of the topic.",
    },
}

BAND_RECOMMENDATIONS: Dict[str, str] = {
    EXCELLENT: "Explore enrichment material to extend your understanding beyond the syllabus.",
    GOOD: "Revisit the areas where you lost marks and practise similar questions.",
    AVERAGE: "Schedule regular review sessions focused on the core concepts.",
    NEEDS_IMPROVEMENT: "Meet with your teacher to go over the fundamentals before the next assignment.",
}

STUDY_TIPS: Dict[str, List[str]] = {
    "Mathematics": [
        "Practice solving different types of problems regularly",
        "Focus on understanding concepts rather than memorizing formulas",
        "Create a formula sheet for quick reference",
        "Watch video tutorials for complex topics",
    ],
    "Science": [
        "Create diagrams and visual aids to understand concepts",
        "Connect theoretical knowledge with real-world examples",
        "Perform simple experiments when possible",
        "Use mnemonic devices for remembering scientific terminology",
    ],
    "English": [
        "Read diverse materials to improve vocabulary and comprehension",
        "Practice writing regularly and seek feedback",
        "Use mind maps for analyzing literary works",
        "Participate in discussions to develop critical thinking",
    ],
    "History": [
        "Create timelines to understand chronological relationships",
        "Focus on causes and effects rather than just dates",
        "Use storytelling techniques to remember historical events",
        "Connect historical events to present-day scenarios",
    ],
    GENERIC: [
        "Set aside dedicated study time each day for consistent progress",
        "Break down large assignments into smaller, manageable tasks",
        "Use active recall techniques rather than passive reading",
        "Teach concepts to others to solidify your understanding",
    ],
}


def _bank_key(subject: str) -> str:
    return subject if subject in FEEDBACK_BANK else GENERIC


def generate_feedback(text: str, score: float, subject: str) -> str:
    band = score_band(score)
    remark = FEEDBACK_BANK[_bank_key(subject)][band]
    return f"{OPENINGS[band]} {remark} {CLOSINGS[band]}"


def generate_learning_recommendations(score: float, subject: str) -> List[str]:
    """Band guidance followed by two study tips for the subject."""
    band = score_band(score)
    tips = STUDY_TIPS.get(subject, STUDY_TIPS[GENERIC])
    # Weaker bands get the fundamentals first
    offset = 0 if band in (AVERAGE, NEEDS_IMPROVEMENT) else 2
    return [BAND_RECOMMENDATIONS[band], *tips[offset:offset + 2]]
