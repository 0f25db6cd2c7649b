import re
from typing import List, Optional

from .headers import SECTION_HEADERS
from .normalize import strip_emphasis
from .sections import locate_section


DEFAULT_TITLE = "Government Job Notification"
DEFAULT_DEPARTMENT = "Government of India"
ALL_INDIA = "All India"

TITLE_SCAN_LINES = 10
MAX_TITLE_LINE = 150
MAX_FALLBACK_TITLE = 100
MAX_DEPARTMENT = 100
MIN_QUALIFICATION_SECTION = 20
MAX_QUALIFICATION = 500

TITLE_KEYWORD_RE = re.compile(r"recruitment|notification|online\s*form|vacancy|bharti", re.I)
TITLE_PHRASE_RE = re.compile(r"(?:recruitment|notification|online\s*form)[ \t]*(?:for|of)?[ \t]*[A-Za-z0-9 \t\-]+", re.I)

# "Organization: Staff Selection Commission"
DEPARTMENT_LABEL_RE = re.compile(r"(?:organization|department|ministry|commission|board|corporation)[ \t]*[:\-][ \t]*([A-Za-z][A-Za-z \t]*)", re.I)
DEPARTMENT_KEYWORD_RE = re.compile(r"commission|board|ministry|department|corporation|police|railway|bank", re.I)
# "Staff Selection Commission", "Bihar Police", "Indian Railway" (bounded name run)
DEPARTMENT_NAME_RE = re.compile(r"([A-Za-z \t]{1,100}(?:commission|board|ministry|department|corporation|police|railway|bank))", re.I)

QUALIFICATION_PATTERNS = [
    (re.compile(r"10th\s*(?:pass|passed|class)", re.I), "10th Pass"),
    (re.compile(r"12th\s*(?:pass|passed|class|intermediate)", re.I), "12th Pass"),
    (re.compile(r"graduation|graduate|bachelor", re.I), "Graduation"),
    (re.compile(r"post\s*graduation|master", re.I), "Post Graduation"),
    (re.compile(r"b\.?tech|b\.?e\.|engineering", re.I), "Engineering"),
    (re.compile(r"mbbs|medical", re.I), "Medical"),
]

STATES = [
    "Uttar Pradesh", "UP", "Bihar", "Rajasthan", "Madhya Pradesh", "MP",
    "Maharashtra", "Gujarat", "Karnataka", "Tamil Nadu", "Kerala",
    "West Bengal", "Haryana", "Punjab", "Delhi", "Uttarakhand",
    "Jharkhand", "Chhattisgarh", "Odisha", "Assam", "Telangana",
    "Andhra Pradesh", "Himachal Pradesh", "Jammu", "Kashmir",
]
STATE_ABBREVIATIONS = {"UP": "Uttar Pradesh", "MP": "Madhya Pradesh"}


def _non_blank_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def extract_title(text: str) -> str:
    lines = _non_blank_lines(text)

    for line in lines[:TITLE_SCAN_LINES]:
        if TITLE_KEYWORD_RE.search(line) and len(line) < MAX_TITLE_LINE:
            title = strip_emphasis(line)
            if title:
                return title

    m = TITLE_PHRASE_RE.search(text)
    if m:
        return m.group(0).strip()

    if lines:
        return lines[0][:MAX_FALLBACK_TITLE]
    return DEFAULT_TITLE


def extract_department(text: str) -> str:
    m = DEPARTMENT_LABEL_RE.search(text)
    if m and m.group(1).strip():
        return m.group(1).strip()[:MAX_DEPARTMENT]

    # names never span lines, so only lines carrying a keyword are searched
    for line in text.split("\n"):
        if not DEPARTMENT_KEYWORD_RE.search(line):
            continue
        m = DEPARTMENT_NAME_RE.search(line)
        if m and m.group(1).strip():
            return m.group(1).strip()[:MAX_DEPARTMENT]
    return DEFAULT_DEPARTMENT


def extract_qualification(text: str) -> str:
    # inline headers leave the separator behind: "Qualification: B.Sc ..."
    section = locate_section(text, SECTION_HEADERS["qualification"]).lstrip(" :-\t\n")
    if len(section) > MIN_QUALIFICATION_SECTION:
        return section[:MAX_QUALIFICATION]

    found = [label for regex, label in QUALIFICATION_PATTERNS if regex.search(text)]
    return ", ".join(found)


def _mentions_state(text: str, state: str) -> bool:
    if state in STATE_ABBREVIATIONS:
        return re.search(rf"\b{state}\b", text) is not None
    return state in text


def extract_state(text: str) -> Optional[str]:
    for state in STATES:
        if _mentions_state(text, state):
            return STATE_ABBREVIATIONS.get(state, state)

    lower_text = text.lower()
    if "all india" in lower_text or "central government" in lower_text:
        return ALL_INDIA
    return None
