"""
Tests for templated feedback and recommendations
"""
import pytest

from app.services.feedback import (
    AVERAGE,
    BAND_RECOMMENDATIONS,
    EXCELLENT,
    FEEDBACK_BANK,
    GENERIC,
    GOOD,
    NEEDS_IMPROVEMENT,
    generate_feedback,
    generate_learning_recommendations,
    score_band,
)

SUBJECTS = ["Mathematics", "Science", "English", "History"]


@pytest.mark.parametrize("score,band", [
    (100, EXCELLENT), (90, EXCELLENT),
    (89, GOOD), (80, GOOD),
    (79, AVERAGE), (70, AVERAGE),
    (69, NEEDS_IMPROVEMENT), (0, NEEDS_IMPROVEMENT),
])
def test_score_band(score, band):
    assert score_band(score) == band


@pytest.mark.parametrize("subject", SUBJECTS)
def test_feedback_uses_subject_bank(subject):
    feedback = generate_feedback("anything", 95, subject)
    assert FEEDBACK_BANK[subject][EXCELLENT] in feedback


def test_unknown_subject_falls_back_to_generic_bank():
    feedback = generate_feedback("anything", 72, "Art")
    assert FEEDBACK_BANK[GENERIC][AVERAGE] in feedback


def test_feedback_ignores_text():
    assert generate_feedback("one", 85, "History") == generate_feedback("two", 85, "History")


def test_feedback_differs_between_bands():
    assert generate_feedback("", 95, "Science") != generate_feedback("", 65, "Science")


def test_recommendations_never_empty():
    for subject in SUBJECTS + ["Art", ""]:
        for score in range(0, 101):
            recommendations = generate_learning_recommendations(score, subject)
            assert recommendations
            assert all(recommendations)


def test_recommendations_lead_with_band_guidance():
    recommendations = generate_learning_recommendations(65, "Mathematics")
    assert recommendations[0] == BAND_RECOMMENDATIONS[NEEDS_IMPROVEMENT]
    assert len(recommendations) == 3
