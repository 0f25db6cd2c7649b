"""
Age limit and physical standard extraction.

Physical standards are only read from their own section. Height, chest and
weight figures appear all over a notification (medical norms, PET tables),
so without the heading there is no whole-document fallback.
"""

import re
from typing import List, Optional, Tuple

from sarkari.models.schema import AgeEntry, PhysicalEntry
from .headers import SECTION_HEADERS
from .sections import locate_section, scoped


DEFAULT_MIN_AGE = "18"
DEFAULT_MAX_AGE = "35"

MIN_MAX_RE = re.compile(
    r"(?:minimum|min)\s*(?:age)?\s*[:\-]?\s*(\d+)\s*(?:years?)?[\s,]*(?:maximum|max)\s*(?:age)?\s*[:\-]?\s*(\d+)",
    re.I,
)
RANGE_RE = re.compile(r"(\d+)\s*(?:to|-)\s*(\d+)\s*years?", re.I)

# group 1/2: "<cat> 18 to 27", group 3: "<cat> ... max 30"
CATEGORY_AGE_PATTERNS = [
    (re.compile(r"general\s*[:\-]?\s*(\d+)\s*(?:to|-)\s*(\d+)|general\s*[:\-]?[^0-9]*max(?:imum)?\s*(\d+)", re.I), "General"),
    (re.compile(r"obc\s*[:\-]?\s*(\d+)\s*(?:to|-)\s*(\d+)|obc\s*[:\-]?[^0-9]*max(?:imum)?\s*(\d+)", re.I), "OBC"),
    (re.compile(r"sc\s*(?:/\s*st)?\s*[:\-]?\s*(\d+)\s*(?:to|-)\s*(\d+)|sc\s*[:\-]?[^0-9]*max(?:imum)?\s*(\d+)", re.I), "SC/ST"),
    (re.compile(r"ews\s*[:\-]?\s*(\d+)\s*(?:to|-)\s*(\d+)|ews\s*[:\-]?[^0-9]*max(?:imum)?\s*(\d+)", re.I), "EWS"),
]

HEIGHT_RE = re.compile(
    r"height[^0-9]*(\d+\.?\d*)\s*(?:cm|meter)?[^0-9]*(?:male)?[^0-9]*(?:female)?[^0-9]*(\d+\.?\d*)?",
    re.I,
)
CHEST_RE = re.compile(r"chest[^0-9]*(\d+)[^\d]*-[^\d]*(\d+)", re.I)
WEIGHT_RE = re.compile(r"weight[^0-9]*(\d+\.?\d*)\s*(?:kg)?", re.I)


def age_bounds(min_age: Optional[str], max_age: Optional[str]) -> Tuple[str, str]:
    """Fill a missing bound with the usual recruitment defaults (18 / 35).

    This is a heuristic, not a fact read from the notification.
    """
    return min_age or DEFAULT_MIN_AGE, max_age or DEFAULT_MAX_AGE


def extract_age_limit(text: str) -> List[AgeEntry]:
    search_text = scoped(text, SECTION_HEADERS["age"])
    ages: List[AgeEntry] = []

    m = MIN_MAX_RE.search(search_text) or RANGE_RE.search(search_text)
    if m:
        ages.append(AgeEntry(category="General", minAge=m.group(1), maxAge=m.group(2)))

    for regex, category in CATEGORY_AGE_PATTERNS:
        m = regex.search(search_text)
        if not m or any(a.category == category for a in ages):
            continue
        min_age, max_age = age_bounds(m.group(1), m.group(2) or m.group(3))
        ages.append(AgeEntry(category=category, minAge=min_age, maxAge=max_age))

    return ages


def extract_physical_eligibility(text: str) -> List[PhysicalEntry]:
    section = locate_section(text, SECTION_HEADERS["physical"])
    if not section:
        return []

    physical: List[PhysicalEntry] = []

    m = HEIGHT_RE.search(section)
    if m:
        physical.append(PhysicalEntry(
            criteria="Height",
            male=f"{m.group(1)} cm" if m.group(1) else "NA",
            female=f"{m.group(2)} cm" if m.group(2) else "NA",
        ))

    m = CHEST_RE.search(section)
    if m:
        physical.append(PhysicalEntry(criteria="Chest", male=f"{m.group(1)}-{m.group(2)} cm"))

    m = WEIGHT_RE.search(section)
    if m:
        physical.append(PhysicalEntry(criteria="Weight", male=f"{m.group(1)} kg"))

    return physical
