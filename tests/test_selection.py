"""
Unit tests for selection process extraction.
"""
from sarkari.parser.selection import extract_selection_process


def test_stages_from_section():
    text = "Selection Process: Written Exam, Interview"
    assert extract_selection_process(text) == ["Written Exam", "Interview"]


def test_list_order_not_document_order():
    text = "Mode of Selection\nInterview\nDocument Verification\nWritten Test"
    assert extract_selection_process(text) == [
        "Written Test",
        "Document Verification",
        "Interview",
    ]


def test_canonical_spelling():
    assert extract_selection_process("Selection Process: CBT and SKILL TEST") == ["CBT", "Skill Test"]
