import logging
from typing import List, Optional

from sarkari.models.schema import DateEntry, ParsedJob, VacancyEntry
from .classify import detect_type
from .dates import extract_dates
from .eligibility import extract_age_limit, extract_physical_eligibility
from .fees import extract_fees
from .links import extract_links
from .meta import extract_department, extract_qualification, extract_state, extract_title
from .normalize import parse_int
from .selection import extract_selection_process
from .vacancy import extract_vacancy_details


logger = logging.getLogger(__name__)


def total_posts(vacancies: List[VacancyEntry]) -> int:
    return sum(parse_int(v.totalPost) or 0 for v in vacancies)


def last_date(dates: List[DateEntry]) -> Optional[str]:
    for d in dates:
        if "Last" in d.label and d.date:
            return d.date
    return None


def build_short_info(department: str, title: str, posts: int, last: Optional[str]) -> str:
    parts = [f"{department} has released notification for {title}."]
    if posts > 0:
        parts.append(f"Total {posts} posts available.")
    if last:
        parts.append(f"Last date to apply: {last}.")
    return " ".join(parts)


def parse_job_notification(raw_text: str) -> ParsedJob:
    """Turn a pasted notification into a ParsedJob.

    Every extractor degrades to an empty value, so this never raises for
    sparse or malformed input. Length checks belong to the caller.
    """
    text = raw_text or ""

    title = extract_title(text)
    department = extract_department(text)
    job_type = detect_type(text)
    important_dates = extract_dates(text)
    vacancy_details = extract_vacancy_details(text)
    qualification = extract_qualification(text)
    links = extract_links(text)

    posts = total_posts(vacancy_details)
    record = ParsedJob(
        title=title,
        department=department,
        type=job_type,
        shortInfo=build_short_info(department, title, posts, last_date(important_dates)),
        qualification=qualification,
        state=extract_state(text),
        vacancyDetails=vacancy_details,
        applicationFee=extract_fees(text),
        importantDates=important_dates,
        ageLimit=extract_age_limit(text),
        eligibilityDetails=qualification,
        selectionProcess=extract_selection_process(text),
        physicalEligibility=extract_physical_eligibility(text),
        **links,
    )
    logger.debug(
        "parsed %r: type=%s dates=%d fees=%d vacancies=%d links=%d",
        title, job_type.value, len(important_dates), len(record.applicationFee),
        len(vacancy_details), len(links),
    )
    return record
