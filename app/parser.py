# app/parser.py
import re
from typing import List, Optional

from .schemas import Company

UNKNOWN_COMPANY = "Unknown Company"
PLACEHOLDER_URL = "#"

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
LINK_RE = re.compile(r"\[.*?\]\((.*?)\)")
LIST_MARKER_RE = re.compile(r"^\s*[-*]\s*")
LEADING_COLON_RE = re.compile(r"^:\s*")


def is_list_item(line: str) -> bool:
    return line.strip().startswith(("-", "*"))


def parse_company_line(line: str) -> Company:
    """
    Builds a Company from a single markdown list item.
    Only the first bold span and the first link are consumed; any later ones
    stay in the description.
    """
    name_match = BOLD_RE.search(line)
    name = name_match.group(1).strip() if name_match else UNKNOWN_COMPANY

    url_match = LINK_RE.search(line)
    website = url_match.group(1) if url_match else PLACEHOLDER_URL

    description = BOLD_RE.sub("", line, count=1)
    description = LINK_RE.sub("", description, count=1)
    description = LIST_MARKER_RE.sub("", description, count=1)
    description = LEADING_COLON_RE.sub("", description, count=1).strip()

    return Company(name=name, description=description, website=website)


def parse_company_markdown(markdown: Optional[str]) -> List[Company]:
    """
    Turns a markdown answer into companies, one per list item, in order.
    Headers, prose and blank lines are skipped.
    """
    if not markdown:
        return []
    return [parse_company_line(line) for line in markdown.splitlines() if is_list_item(line)]
