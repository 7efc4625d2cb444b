"""
Header fields of a resume: name, email, phone, location and job title.

These live near the top of the document and are matched line by line
with conservative filters, so a miss is reported as NotFound rather than
guessed.
"""

from __future__ import annotations

import re
from typing import Optional

from ..shared import clean_text
from .outcome import Found, NotFound, ParseResult
from .text_lines import ends_with_word, has_title_keyword, has_url, has_word, is_bullet, nonblank_lines
from .vocabulary import (
    LOCATION_MAX_LENGTH,
    LOCATION_SCAN_LINES,
    NAME_FALLBACK_SCAN_LINES,
    NAME_MAX_LENGTH,
    NAME_MAX_WORDS,
    NAME_MIN_LENGTH,
    NAME_MIN_WORDS,
    NAME_SCAN_LINES,
    NAME_WORD_MAX_LENGTH,
    NAME_WORD_MIN_LENGTH,
    SECTION_WORDS,
    TITLE_MAX_LENGTH,
    TITLE_MAX_WORDS,
)

# ------------------------- Patterns -------------------------

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

NORTH_AMERICAN_PHONE_PATTERN = re.compile(
    r"(?<![\d\w])(?:\+?1[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)"
)

INTERNATIONAL_PHONE_PATTERN = re.compile(
    r"(?<!\d)\+\d{1,3}(?:[\s.-]?\(?\d{1,4}\)?){2,5}(?!\d)"
)
MIN_INTERNATIONAL_DIGITS = 8

NAME_LINE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z\s.'-]*$")
NAME_WORD_PATTERN = re.compile(r"^[A-Za-z]+(?:[-'][A-Za-z]+)*\.?$")
FALLBACK_NAME_PATTERN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,2}\b")

REGION_LOCATION_PATTERN = re.compile(
    r"\b[A-Z][A-Za-z.]+(?:\s[A-Z][A-Za-z.]+)*,\s*[A-Z]{2}\b"
)
GENERIC_LOCATION_PATTERN = re.compile(
    r"\b[A-Z][A-Za-z]+(?:\s[A-Z][A-Za-z]+)*,\s*[A-Z][A-Za-z]+(?:\s[A-Z][A-Za-z]+)*\b"
)
MAX_LOCATION_LINE_COMMAS = 2

# ------------------------- Name -------------------------


def _title_case_word(word: str) -> str:
    if not (word.isupper() or word.islower()):
        return word
    # keep hyphen / apostrophe segments capitalised: o'brien -> O'Brien
    return re.sub(r"[A-Za-z]+", lambda m: m.group(0).capitalize(), word)


def title_case_name(line: str) -> str:
    return " ".join(_title_case_word(w) for w in line.split())


def _is_label_or_title(line: str) -> bool:
    return has_word(line, SECTION_WORDS) or has_title_keyword(line)


def _rejected_name_line(line: str) -> bool:
    lowered = line.lower()
    if "resume" in lowered or "curriculum" in lowered:
        return True
    if "@" in line or "(" in line or has_url(line):
        return True
    if line[:1].isdigit():
        return True
    return not (NAME_MIN_LENGTH <= len(line) <= NAME_MAX_LENGTH)


def _name_words_ok(line: str) -> bool:
    words = line.split()
    if not (NAME_MIN_WORDS <= len(words) <= NAME_MAX_WORDS):
        return False
    return all(
        NAME_WORD_MIN_LENGTH <= len(w) <= NAME_WORD_MAX_LENGTH and NAME_WORD_PATTERN.match(w)
        for w in words
    )


def parse_name(text: str) -> ParseResult[str]:
    """
    Find the candidate's name in the document header.

    The first of the leading lines made of 2-4 alphabetic words, that is not
    a heading, a job title or contact line, wins. All-caps or all-lowercase
    words are title-cased. Falls back to a capitalised word pair or triple.
    """
    lines = nonblank_lines(text)

    for line in lines[:NAME_SCAN_LINES]:
        if _rejected_name_line(line):
            continue
        if not NAME_LINE_PATTERN.match(line) or not _name_words_ok(line):
            continue
        if _is_label_or_title(line):
            continue
        return Found(title_case_name(line))

    for line in lines[:NAME_FALLBACK_SCAN_LINES]:
        if "@" in line or has_url(line):
            continue
        for m in FALLBACK_NAME_PATTERN.finditer(line):
            candidate = m.group(0)
            if not _is_label_or_title(candidate):
                return Found(candidate)

    return NotFound("no name-like line in the document header")


# ------------------------- Email / phone -------------------------


def parse_email(text: str) -> ParseResult[str]:
    m = EMAIL_PATTERN.search(text or "")
    if m:
        return Found(m.group(0))
    return NotFound("no email address")


def parse_phone(text: str) -> ParseResult[str]:
    """First North American phone number, else the first "+"-prefixed international one."""
    text = text or ""
    m = NORTH_AMERICAN_PHONE_PATTERN.search(text)
    if m:
        return Found(m.group(0).strip())
    for m in INTERNATIONAL_PHONE_PATTERN.finditer(text):
        candidate = m.group(0).strip()
        if sum(ch.isdigit() for ch in candidate) >= MIN_INTERNATIONAL_DIGITS:
            return Found(candidate)
    return NotFound("no phone number")


# ------------------------- Location -------------------------


def _location_in(line: str, pattern: "re.Pattern[str]") -> Optional[str]:
    for m in pattern.finditer(line):
        candidate = m.group(0).strip()
        if "@" in candidate or len(candidate) > LOCATION_MAX_LENGTH:
            continue
        if _is_label_or_title(candidate):
            continue
        return candidate
    return None


def parse_location(text: str) -> ParseResult[str]:
    """
    "City, ST" or "City, Country" from the document header.

    A two-letter region code is preferred over a generic comma pair; lines
    that read as comma-separated lists are skipped.
    """
    header = [
        line for line in nonblank_lines(text)[:LOCATION_SCAN_LINES]
        if line.count(",") <= MAX_LOCATION_LINE_COMMAS
    ]
    for pattern in (REGION_LOCATION_PATTERN, GENERIC_LOCATION_PATTERN):
        for line in header:
            found = _location_in(line, pattern)
            if found:
                return Found(found)
    return NotFound("no location in the document header")


# ------------------------- Title -------------------------


def parse_title(text: str) -> ParseResult[str]:
    """First short line containing a job-title keyword."""
    for line in nonblank_lines(text):
        if len(line) >= TITLE_MAX_LENGTH or len(line.split()) > TITLE_MAX_WORDS:
            continue
        if "@" in line or "(" in line or "|" in line or has_url(line):
            continue
        if is_bullet(line) or line.endswith("."):
            continue
        # "Executive Summary" is a heading
        if ends_with_word(line.rstrip(":"), SECTION_WORDS):
            continue
        if has_title_keyword(line):
            return Found(clean_text(line))
    return NotFound("no line with a job title")
