import re
from typing import List

from sarkari.models.schema import VacancyEntry
from .headers import SECTION_HEADERS
from .normalize import strip_thousands
from .sections import scoped


DEFAULT_POST_NAME = "Various Posts"

HAS_DIGIT_RE = re.compile(r"\d")
POST_LINE_RE = re.compile(
    r"([A-Za-z\s]{1,80}(?:constable|officer|clerk|assistant|manager|engineer|teacher|inspector)?)"
    r"[:\-\s]+([\d,]+)\s*(?:post|vacancy)?",
    re.I,
)
TOTAL_RE = re.compile(r"total\s*(?:post|vacancy|vacancies)\s*[:\-]?\s*([\d,]+)", re.I)
RECRUITMENT_FOR_RE = re.compile(
    r"(?:recruitment|notification|online\s*form)[ \t]*(?:for|of)?[ \t]*([A-Za-z \t]+)",
    re.I,
)


def extract_vacancy_details(text: str) -> List[VacancyEntry]:
    search_text = scoped(text, SECTION_HEADERS["vacancy"])
    vacancies: List[VacancyEntry] = []
    seen = set()

    for line in search_text.split("\n"):
        # a line without a count cannot match
        if not HAS_DIGIT_RE.search(line):
            continue
        m = POST_LINE_RE.search(line)
        if not m:
            continue
        post_name = m.group(1).strip()
        total_post = strip_thousands(m.group(2))
        if len(post_name) <= 3 or not total_post or post_name.lower() in seen:
            continue
        vacancies.append(VacancyEntry(postName=post_name, totalPost=total_post))
        seen.add(post_name.lower())

    # the aggregate is read from the whole notice, not the section
    total = TOTAL_RE.search(text)
    total_posts = strip_thousands(total.group(1)) if total else ""
    if not vacancies and total_posts:
        title = RECRUITMENT_FOR_RE.search(text)
        post_name = title.group(1).strip() if title else ""
        vacancies.append(VacancyEntry(
            postName=post_name or DEFAULT_POST_NAME,
            totalPost=total_posts,
        ))

    return vacancies
