import re
from typing import Optional

from bs4 import BeautifulSoup


BLOCK_TAGS = ["p", "div", "br", "li", "tr", "h1", "h2", "h3", "h4", "h5", "h6", "table"]
HTML_TAG_RE = re.compile(r"<\s*(?:html|body|table|tr|td|th|p|div|br|li|ul|h[1-6]|span|strong|b|a)\b", re.IGNORECASE)


def parse_int(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    m = re.search(r"(\d+)", text.replace(",", ""))
    return int(m.group(1)) if m else None


def strip_thousands(value: str) -> str:
    return value.replace(",", "")


def format_fee(raw: str) -> str:
    """Render a captured fee as "Nil" or "₹<amount>/-"."""
    if raw.lower() in ("nil", "exempted"):
        return "Nil"
    return f"₹{strip_thousands(raw)}/-"


def strip_emphasis(line: str) -> str:
    # markdown-ish emphasis left over from copy-paste: **bold**, ## heading, __x__
    return re.sub(r"[*#_]+", "", line.strip()).strip()


def looks_like_html(raw: str) -> bool:
    return bool(raw) and HTML_TAG_RE.search(raw) is not None


def html_to_text(raw: str) -> str:
    """Flatten pasted HTML into newline separated text.

    Table rows become one line with cells joined by " : " so that
    "Post Name | 100" style rows reach the line based extractors intact.
    Plain text is returned unchanged.
    """
    if not looks_like_html(raw):
        return raw
    soup = BeautifulSoup(raw, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    for row in soup.select("tr"):
        cells = [c.get_text(" ", strip=True) for c in row.select("td, th")]
        cells = [c for c in cells if c]
        row.replace_with(soup.new_string("\n" + " : ".join(cells) + "\n"))
    for br in soup.select("br"):
        br.replace_with(soup.new_string("\n"))
    for block in soup.find_all(BLOCK_TAGS):
        block.insert_before(soup.new_string("\n"))
        block.insert_after(soup.new_string("\n"))
    text = soup.get_text()
    lines = [re.sub(r"[ \t\xa0]+", " ", line).strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)
