import re
from typing import List

from sarkari.models.schema import DateEntry
from .headers import SECTION_HEADERS
from .sections import scoped


# "15/03/2026", "15-03-2026", "05 March 2026", "March 2026"
DATE_VALUE = r"[\d/\-]+\s*\w*\s*\d{4}|\d{1,2}\s+\w+\s+\d{4}"

DATE_PATTERNS = [
    (re.compile(rf"application\s*(?:begin|start|starts?)\s*[:\-]?\s*({DATE_VALUE})", re.I), "Application Start"),
    (re.compile(rf"(?:last|closing)\s*date\s*(?:for\s*(?:apply|application|online))?\s*[:\-]?\s*({DATE_VALUE})", re.I), "Last Date"),
    (re.compile(rf"late\s*fee\s*(?:date|last\s*date)?\s*[:\-]?\s*({DATE_VALUE})", re.I), "Late Fee Date"),
    (re.compile(rf"exam\s*date\s*[:\-]?\s*({DATE_VALUE}|notify\s*soon|will\s*be\s*notified)", re.I), "Exam Date"),
    (re.compile(rf"admit\s*card\s*(?:date|available)?\s*[:\-]?\s*({DATE_VALUE}|before\s*exam|notify\s*soon)", re.I), "Admit Card"),
    (re.compile(r"result\s*(?:date|declaration)?\s*[:\-]?\s*([\d/\-]+\s*\w*\s*\d{4}|notify\s*soon|will\s*be\s*updated)", re.I), "Result Date"),
    (re.compile(rf"fee\s*payment\s*(?:last\s*date)?\s*[:\-]?\s*({DATE_VALUE})", re.I), "Fee Payment Last Date"),
]

LABELLED_DATE_LINE = re.compile(rf"^([^:]+):\s*({DATE_VALUE})")


def extract_dates(text: str) -> List[DateEntry]:
    search_text = scoped(text, SECTION_HEADERS["dates"])
    dates: List[DateEntry] = []

    for regex, label in DATE_PATTERNS:
        m = regex.search(search_text)
        if m and m.group(1):
            dates.append(DateEntry(label=label, date=m.group(1).strip()))

    # any other "<label>: <date>" line, in source order
    seen = {d.label.lower() for d in dates}
    for line in search_text.split("\n"):
        m = LABELLED_DATE_LINE.match(line)
        if not m:
            continue
        label = m.group(1).strip()
        if label.lower() in seen or not 3 < len(label) < 50:
            continue
        dates.append(DateEntry(label=label, date=m.group(2).strip()))
        seen.add(label.lower())

    return dates
