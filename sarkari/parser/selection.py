from typing import List

from .headers import SECTION_HEADERS
from .sections import scoped


SELECTION_STAGES = [
    "Written Exam",
    "Written Test",
    "CBT",
    "Computer Based Test",
    "Physical Efficiency Test",
    "PET",
    "Physical Standard Test",
    "PST",
    "Document Verification",
    "Medical Test",
    "Medical Examination",
    "Interview",
    "Skill Test",
    "Typing Test",
    "Trade Test",
]


def extract_selection_process(text: str) -> List[str]:
    # list order, not document order
    search_text = scoped(text, SECTION_HEADERS["selection"]).lower()
    return [stage for stage in SELECTION_STAGES if stage.lower() in search_text]
