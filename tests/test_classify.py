"""
Unit tests for notification type detection.
"""
from sarkari.models.schema import JobType
from sarkari.parser.classify import detect_type


def test_admit_card_beats_admission():
    assert detect_type("Admit card released for B.Ed admission test") == JobType.ADMIT_CARD


def test_result_needs_a_release_word():
    assert detect_type("SSC GD Result declared") == JobType.RESULT
    assert detect_type("Result will come later") == JobType.JOB


def test_answer_key():
    assert detect_type("CTET Answer Key 2026") == JobType.ANSWER_KEY


def test_admission():
    assert detect_type("B.Ed Admission 2026 open") == JobType.ADMISSION


def test_default_job():
    assert detect_type("SSC GD Constable Recruitment 2026") == JobType.JOB
