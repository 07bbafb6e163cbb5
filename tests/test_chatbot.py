"""
Tests for the study assistant replies
"""
import pytest

from app.services.chatbot import DEFAULT_RESPONSE, get_bot_response, greeting


def test_greeting_names_student():
    assert "Arjun Sharma" in greeting("Arjun Sharma")


@pytest.mark.parametrize("query,expected", [
    ("Hello there", "Namaste!"),
    ("hi", "Namaste!"),
    ("I need help with homework", "assignments"),
    ("Explain maths to me", "mathematics"),
    ("Biology question", "Science is fascinating"),
    ("literature essay", "English and literature"),
    ("Tell me about history", "History is all about"),
    ("thanks!", "You're welcome"),
    ("ok bye", "Goodbye"),
])
def test_keyword_replies(query, expected):
    assert expected in get_bot_response(query)


def test_unmatched_query_gets_default():
    assert get_bot_response("What is the weather like") == DEFAULT_RESPONSE
