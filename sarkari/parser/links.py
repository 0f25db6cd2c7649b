import re
from typing import Dict, List, Tuple


URL_RE = re.compile(r"https?://[^\s<>\"')\]]+", re.I)

# (keywords, field); a URL goes to the first bucket whose keyword it contains
LINK_BUCKETS: List[Tuple[Tuple[str, ...], str]] = [
    (("apply", "registration"), "applyOnlineUrl"),
    (("notification", "pdf"), "notificationUrl"),
    (("admit", "hall-ticket"), "admitCardUrl"),
    (("result",), "resultUrl"),
    (("answer", "key"), "answerKeyUrl"),
    (("gov.in", "nic.in"), "officialWebsiteUrl"),
]


def classify_url(url: str) -> str | None:
    lower_url = url.lower()
    for keywords, field in LINK_BUCKETS:
        if any(k in lower_url for k in keywords):
            return field
    return None


def extract_links(text: str) -> Dict[str, str]:
    links: Dict[str, str] = {}
    for m in URL_RE.finditer(text):
        url = m.group(0).rstrip(".,;")
        field = classify_url(url)
        # a URL whose bucket is already taken is dropped, not reassigned
        if field and field not in links:
            links[field] = url
    return links
