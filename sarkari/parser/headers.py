from typing import Dict, List


# Header variants per logical section, in priority order. Matching is
# case-insensitive, so "IMPORTANT DATES" is covered by "Important Dates".
SECTION_HEADERS: Dict[str, List[str]] = {
    "dates": ["Important Dates", "Important Date"],
    "fees": ["Application Fee", "Exam Fee"],
    "age": ["Age Limit", "Age Limits"],
    "physical": ["Physical Eligibility", "Physical Standard", "Physical Test"],
    "vacancy": ["Vacancy Details", "Post Wise Vacancy", "Total Post"],
    "selection": ["Selection Process", "Mode of Selection"],
    "qualification": ["Educational Qualification", "Qualification", "Eligibility"],
}
