"""
Canned study-assistant replies, chosen by keyword.
"""

import re
from typing import Sequence, Tuple

ASSISTANT_NAME = "EduAssist AI"

RESPONSES: Sequence[Tuple[Tuple[str, ...], str]] = (
    (
        ("hello", "hi", "namaste"),
        "Namaste! How can I assist you with your studies today?",
    ),
    (
        ("assignment", "homework"),
        "I can help you understand your assignments. You can ask me specific questions about "
        "the topics you're working on, and I'll try to explain them.",
    ),
    (
        ("math", "mathematics"),
        "For mathematics, I can help explain concepts, solve problems, or guide you through the "
        "steps. What specific math topic are you working on?",
    ),
    (
        ("science", "physics", "chemistry", "biology"),
        "Science is fascinating! I can help explain scientific concepts, formulas, or "
        "experiments. What specific area are you studying?",
    ),
    (
        ("english", "literature"),
        "For English and literature, I can help with analyzing texts, understanding themes, or "
        "improving your writing. What specific aspect are you working on?",
    ),
    (
        ("history",),
        "History is all about understanding our past. I can help with historical events, "
        "timelines, or explaining the significance of historical developments. What period or "
        "event are you studying?",
    ),
    (
        ("thank",),
        "You're welcome! Feel free to ask if you need any more help.",
    ),
    (
        ("bye", "goodbye"),
        "Goodbye! Feel free to come back whenever you need help with your studies.",
    ),
)

DEFAULT_RESPONSE = (
    "That's an interesting question! I'd be happy to help you with that. Could you provide "
    "more details so I can give you a more specific answer?"
)


def greeting(student_name: str) -> str:
    return f"Namaste {student_name}! I'm your AI assistant. How can I help you with your studies today?"


def _matches(keyword: str, lowered: str, words: set) -> bool:
    # Short keywords ("hi", "bye") only count as whole words
    if len(keyword) <= 3:
        return keyword in words
    return keyword in lowered


def get_bot_response(query: str) -> str:
    """First matching reply wins; falls back to a generic prompt."""
    lowered = query.lower()
    words = set(re.findall(r"[a-z]+", lowered))
    for keywords, reply in RESPONSES:
        if any(_matches(keyword, lowered, words) for keyword in keywords):
            return reply
    return DEFAULT_RESPONSE
