import re
from typing import List

from sarkari.models.schema import FeeEntry
from .headers import SECTION_HEADERS
from .normalize import format_fee
from .sections import scoped


CURRENCY = r"\s*[:\-]?\s*(?:₹|rs\.?|inr)?\s*"

# Order matters: the combined General/EWS/OBC row is claimed before the
# individual categories, SC/ST before SC and ST.
FEE_PATTERNS = [
    (re.compile(r"general\s*(?:/\s*)?(?:ews\s*(?:/\s*)?)?(?:obc)?" + CURRENCY + r"([\d,]+)", re.I), "General/EWS/OBC"),
    (re.compile(r"general" + CURRENCY + r"([\d,]+)", re.I), "General"),
    (re.compile(r"obc" + CURRENCY + r"([\d,]+)", re.I), "OBC"),
    (re.compile(r"ews" + CURRENCY + r"([\d,]+)", re.I), "EWS"),
    (re.compile(r"sc\s*(?:/\s*)?st" + CURRENCY + r"([\d,]+|nil|exempted)", re.I), "SC/ST"),
    (re.compile(r"sc" + CURRENCY + r"([\d,]+|nil|exempted)", re.I), "SC"),
    (re.compile(r"st" + CURRENCY + r"([\d,]+|nil|exempted)", re.I), "ST"),
    (re.compile(r"female" + CURRENCY + r"([\d,]+|nil|exempted)", re.I), "Female"),
    (re.compile(r"(?:ph|pwd|divyang)" + CURRENCY + r"([\d,]+|nil|exempted)", re.I), "PH/PWD"),
    (re.compile(r"ex[\-\s]*servicem[ae]n" + CURRENCY + r"([\d,]+|nil|exempted)", re.I), "Ex-Serviceman"),
]


def extract_fees(text: str) -> List[FeeEntry]:
    search_text = scoped(text, SECTION_HEADERS["fees"])
    fees: List[FeeEntry] = []
    for regex, category in FEE_PATTERNS:
        m = regex.search(search_text)
        if not m or not m.group(1):
            continue
        if any(f.category == category for f in fees):
            continue
        fees.append(FeeEntry(category=category, fee=format_fee(m.group(1))))
    return fees
