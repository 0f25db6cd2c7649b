"""
Unit tests for section location.
"""
from sarkari.parser.sections import (
    MAX_SECTION_CHARS, locate_section, scoped,
)


def test_missing_header_returns_empty():
    assert locate_section("Last Date: 15/03/2026", ["Important Dates"]) == ""
    assert locate_section("", ["Important Dates"]) == ""


def test_section_stops_at_next_caps_heading():
    text = (
        "Important Dates\n"
        "Last Date: 15/03/2026\n"
        "Exam Date: 10/05/2026\n"
        "APPLICATION FEE\n"
        "General: 100"
    )
    section = locate_section(text, ["Important Dates"])
    assert section == "Last Date: 15/03/2026\nExam Date: 10/05/2026"


def test_header_match_is_case_insensitive():
    text = "IMPORTANT DATES\nLast Date: 01/01/2026"
    assert locate_section(text, ["Important Dates"]) == "Last Date: 01/01/2026"


def test_first_listed_header_wins():
    """Priority follows the header list, not document order."""
    text = "Exam Fee: 500\nSome text\nApplication Fee: 100"
    assert locate_section(text, ["Application Fee", "Exam Fee"]) == ": 100"


def test_section_without_marker_is_bounded():
    text = "Vacancy Details " + "x" * 3000
    section = locate_section(text, ["Vacancy Details"])
    assert section == "x" * 999


def test_section_is_capped():
    text = "Vacancy Details:" + "a" * 2000 + "\nNEXT SECTION:\nmore"
    section = locate_section(text, ["Vacancy Details"])
    assert len(section) == MAX_SECTION_CHARS
    assert "NEXT" not in section


def test_marker_right_after_header():
    text = "Age Limit\nSELECTION PROCESS:\nInterview"
    assert locate_section(text, ["Age Limit"]) == "SELECTION PROCESS:\nInterview"


def test_scoped_falls_back_to_document():
    text = "General: Rs. 100\nSC/ST: Nil"
    assert scoped(text, ["Application Fee"]) == text
    assert scoped("Application Fee: 100", ["Application Fee"]) == ": 100"
