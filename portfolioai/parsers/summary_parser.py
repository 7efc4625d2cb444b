"""
Professional summary parser.
"""

from __future__ import annotations

from typing import List

from ..shared import clean_text
from .outcome import Found, NotFound, ParseResult
from .text_lines import find_heading, is_heading, split_lines
from .vocabulary import (
    SUMMARY_END_HEADINGS,
    SUMMARY_HEADINGS,
    SUMMARY_MAX_LENGTH,
    SUMMARY_MIN_LENGTH,
)


def truncate_summary(summary: str, limit: int = SUMMARY_MAX_LENGTH) -> str:
    """Cut to `limit` characters on a word boundary, marking the cut with "..."."""
    if len(summary) <= limit:
        return summary
    cut = summary[: limit - 3]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,;:") + "..."


def parse_summary(text: str) -> ParseResult[str]:
    """
    Text under a summary-like heading, up to the next experience, education,
    skills or employment heading, or the first blank line once some text was
    collected. Lines are joined with spaces.
    """
    lines = split_lines(text)
    start = find_heading(lines, SUMMARY_HEADINGS)
    if start is None:
        return NotFound("no summary heading")

    collected: List[str] = []
    for line in lines[start + 1:]:
        if not line:
            if collected:
                break
            continue
        if is_heading(line, SUMMARY_END_HEADINGS):
            break
        collected.append(clean_text(line))

    summary = " ".join(collected).strip()
    if len(summary) <= SUMMARY_MIN_LENGTH:
        return NotFound(f"summary too short ({len(summary)} chars)")
    return Found(truncate_summary(summary))
