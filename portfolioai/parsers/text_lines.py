"""
Line-level helpers shared by the field parsers.

Resume text is handled as a list of stripped lines. This module knows how
to recognise bullets, dates, links and section headings, and how to slice
out the lines that belong to one section.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .vocabulary import (
    HEADING_MAX_LENGTH,
    HEADING_MAX_WORDS,
    TITLE_KEYWORDS,
)

# ------------------------- Patterns -------------------------

MONTH_NAME = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|"
    r"May|Jun(?:e)?|Jul(?:y)?|Aug(?:ust)?|"
    r"Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)

DATE_RANGE_PATTERN = re.compile(
    rf"(?:{MONTH_NAME}\.?\s+)?(?:\d{{1,2}}/)?\d{{4}}\s*"
    r"(?:--|[-–—]|\bto\b)\s*"
    rf"(?:Present|Now|Current|(?:{MONTH_NAME}\.?\s+)?(?:\d{{1,2}}/)?\d{{4}})",
    re.IGNORECASE,
)

SINGLE_DATE_PATTERN = re.compile(
    rf"(?:(?:Expected|Graduated|Class of)\s+)?(?:{MONTH_NAME}\.?\s+)?\b(?:19|20)\d{{2}}\b",
    re.IGNORECASE,
)

BULLET_PATTERN = re.compile(r"^[•\-*▪◦–·]\s*")

SPACED_DASH_PATTERN = re.compile(r"\s+[-–—]\s+")

EMPTY_BRACKETS_PATTERN = re.compile(r"[(\[]\s*[)\]]")

URL_PATTERN = re.compile(
    r"(?:https?://|www\.)\S+|\b[\w-]+\.(?:com|org|net|io|dev|me)(?:/\S*)?",
    re.IGNORECASE,
)

LINK_PATTERN = re.compile(
    r"(?:https?://|www\.)\S+|\bgithub\.com/\S+",
    re.IGNORECASE,
)

# ------------------------- Line access -------------------------


def split_lines(text: str) -> List[str]:
    return [line.strip() for line in (text or "").split("\n")]


def nonblank_lines(text: str) -> List[str]:
    return [line for line in split_lines(text) if line]


# ------------------------- Line predicates -------------------------


def _word_pattern(keywords: Sequence[str], at_end: bool = False) -> "re.Pattern[str]":
    alternatives = "|".join(
        r"\s+".join(re.escape(word) for word in k.split()) for k in keywords
    )
    anchor = "$" if at_end else ""
    return re.compile(rf"\b(?:{alternatives})s?\b{anchor}", re.IGNORECASE)


_PATTERN_CACHE: dict = {}


def _cached_pattern(keywords: Sequence[str], at_end: bool = False) -> "re.Pattern[str]":
    key = (tuple(keywords), at_end)
    pattern = _PATTERN_CACHE.get(key)
    if pattern is None:
        pattern = _PATTERN_CACHE[key] = _word_pattern(key[0], at_end)
    return pattern


def has_word(line: str, keywords: Sequence[str]) -> bool:
    """
    True if `line` contains any keyword as a whole word.

    A trailing plural "s" is accepted, so "project" matches "Projects".
    """
    return _cached_pattern(keywords).search(line) is not None


def ends_with_word(line: str, keywords: Sequence[str]) -> bool:
    """True if the last word(s) of `line` are one of `keywords`."""
    return _cached_pattern(keywords, at_end=True).search(line.rstrip()) is not None


def has_title_keyword(line: str) -> bool:
    return has_word(line, TITLE_KEYWORDS)


def is_bullet(line: str) -> bool:
    # "-" followed by a digit is a negative number or a range, not a bullet
    if line.startswith("-") and line[1:2].isdigit():
        return False
    return BULLET_PATTERN.match(line) is not None


def strip_bullet(line: str) -> str:
    return BULLET_PATTERN.sub("", line, count=1).strip()


def has_url(line: str) -> bool:
    return URL_PATTERN.search(line) is not None


def is_heading(line: str, keywords: Sequence[str]) -> bool:
    """
    Decide whether `line` is a section heading naming one of `keywords`.

    Headings are short, free of digits, contact details and delimiters.
    A trailing colon is allowed, but "Skills: Python, Go" is a label with
    a value, not a heading. A line that ends with the section keyword is a
    heading even with a job-title word in front ("Executive Summary"); other
    lines holding a job-title word are titles ("Project Manager").
    """
    stripped = line.strip().rstrip(":").strip()
    if not stripped or len(stripped) >= HEADING_MAX_LENGTH:
        return False
    if is_bullet(stripped):
        return False
    if ":" in stripped or "|" in stripped or "@" in stripped:
        return False
    if any(ch.isdigit() for ch in stripped):
        return False
    if len(stripped.split()) > HEADING_MAX_WORDS:
        return False
    if not has_word(stripped, keywords):
        return False
    return ends_with_word(stripped, keywords) or not has_title_keyword(stripped)


def find_heading(lines: Sequence[str], keywords: Sequence[str], start: int = 0) -> Optional[int]:
    for idx in range(start, len(lines)):
        if is_heading(lines[idx], keywords):
            return idx
    return None


def section_lines(
    lines: Sequence[str],
    start_keywords: Sequence[str],
    end_keywords: Sequence[str],
) -> Optional[List[str]]:
    """
    Lines between the first heading naming `start_keywords` and the next
    heading naming `end_keywords` (or the end of the text).

    Returns None when no start heading exists.
    """
    start = find_heading(lines, start_keywords)
    if start is None:
        return None
    end = find_heading(lines, end_keywords, start + 1)
    return list(lines[start + 1 : end if end is not None else len(lines)])


# ------------------------- Entry lines -------------------------


def split_delimited(line: str) -> List[str]:
    """Split on "|" when present, else on spaced dashes; empty parts dropped."""
    if "|" in line:
        parts = line.split("|")
    else:
        parts = SPACED_DASH_PATTERN.split(line)
    return [p.strip(" ,;") for p in parts if p.strip(" ,;")]


def pop_date_range(line: str) -> Tuple[str, str]:
    """
    Remove the first date range from `line`.

    Returns (duration, remainder); duration is "" when no range is present.
    """
    m = DATE_RANGE_PATTERN.search(line)
    if not m:
        return "", line
    return " ".join(m.group(0).split()), _cut(line, m.start(), m.end())


def pop_single_date(line: str) -> Tuple[str, str]:
    m = SINGLE_DATE_PATTERN.search(line)
    if not m:
        return "", line
    return " ".join(m.group(0).split()), _cut(line, m.start(), m.end())


def _cut(line: str, start: int, end: int) -> str:
    remainder = line[:start] + " " + line[end:]
    # "(2018 - 2020)" leaves empty brackets behind
    remainder = EMPTY_BRACKETS_PATTERN.sub(" ", remainder)
    return " ".join(remainder.split())


def is_delimited_entry(line: str, max_length: int) -> bool:
    if is_bullet(line) or len(line) > max_length:
        return False
    return "|" in line or SPACED_DASH_PATTERN.search(line) is not None


def first_link(line: str) -> Optional[str]:
    m = LINK_PATTERN.search(line)
    if not m:
        return None
    return m.group(0).rstrip(").,;")


def dedupe_casefold(items: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for item in items:
        key = item.casefold()
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out
