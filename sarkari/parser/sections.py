import re
from typing import Iterable


MAX_SECTION_CHARS = 1500
NO_MARKER_SECTION_CHARS = 1000
MARKER_AT_START_CHARS = 500

# A line opening with a run of capitals, e.g. "\nAGE LIMIT:" or "\nSELECTION PROCESS\n"
NEXT_SECTION_RE = re.compile(r"\n\s*[A-Z][A-Z\s]{5,}[:\n]")


def locate_section(text: str, headers: Iterable[str]) -> str:
    """Return the text that follows the first header found, or "".

    Headers are tried in order and the first one present wins, even when a
    later header would give a better section. The section ends at the next
    all-caps heading line and never exceeds MAX_SECTION_CHARS.
    """
    if not text:
        return ""
    lower_text = text.lower()
    for header in headers:
        idx = lower_text.find(header.lower())
        if idx == -1:
            continue
        start = idx + len(header)
        marker = NEXT_SECTION_RE.search(text, start)
        if marker is None:
            end = start + NO_MARKER_SECTION_CHARS
        else:
            end = start + ((marker.start() - start) or MARKER_AT_START_CHARS)
        return text[start:min(end, start + MAX_SECTION_CHARS)].strip()
    return ""


def scoped(text: str, headers: Iterable[str]) -> str:
    """Section for `headers` when present, otherwise the whole document."""
    return locate_section(text, headers) or text
