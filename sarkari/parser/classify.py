from typing import Callable, List, Tuple

from sarkari.models.schema import JobType


def _has_any(text: str, *needles: str) -> bool:
    return any(n in text for n in needles)


# Evaluated top to bottom on lowercased text, first match wins. Admit card
# must stay ahead of admission: "admit card" notices often mention admission.
TYPE_RULES: List[Tuple[Callable[[str], bool], JobType]] = [
    (lambda t: _has_any(t, "admit card", "hall ticket", "call letter"), JobType.ADMIT_CARD),
    (lambda t: "result" in t and _has_any(t, "download", "declared", "out"), JobType.RESULT),
    (lambda t: "answer key" in t, JobType.ANSWER_KEY),
    (lambda t: "admission" in t and "admit card" not in t, JobType.ADMISSION),
]


def detect_type(text: str) -> JobType:
    lower_text = text.lower()
    for predicate, job_type in TYPE_RULES:
        if predicate(lower_text):
            return job_type
    return JobType.JOB
