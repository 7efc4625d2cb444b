"""
Education parser.

A line naming a degree or an institution opens an entry. Lines are split
on "|" or spaced dashes; degrees of the form "X in Y" yield the field of
study. A degree line followed by an institution line (or the reverse) is
merged into one entry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..shared import EducationEntry, clean_text
from .outcome import Found, NotFound, ParseResult
from .text_lines import (
    has_word,
    is_bullet,
    nonblank_lines,
    pop_date_range,
    pop_single_date,
    section_lines,
    split_delimited,
    strip_bullet,
)
from .vocabulary import (
    DEGREE_KEYWORDS,
    EDUCATION_END_HEADINGS,
    EDUCATION_HEADINGS,
    INSTITUTION_KEYWORDS,
)

GPA_PATTERN = re.compile(
    r"\bgpa:?\s*(\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?)",
    re.IGNORECASE,
)
FIELD_SPLIT_PATTERN = re.compile(r"\s+in\s+", re.IGNORECASE)
BRACKETED_FIELD_PATTERN = re.compile(r"^(.*?)\s*\(([^)]+)\)\s*$")

MISSING = "N/A"


@dataclass
class EducationBuilder:
    institution: str = ""
    degree: str = ""
    field: str = ""
    duration: str = ""
    gpa: Optional[str] = None

    def finalize(self) -> EducationEntry:
        return EducationEntry(
            institution=self.institution or MISSING,
            degree=self.degree or MISSING,
            field=self.field or MISSING,
            duration=self.duration or MISSING,
            gpa=self.gpa,
        )

    def absorb(self, other: "EducationBuilder") -> bool:
        """
        Merge a follow-up line that supplies only the missing half of this
        entry (institution for a degree line, or the reverse).
        """
        fills_institution = other.institution and not other.degree and not self.institution
        fills_degree = other.degree and not other.institution and not self.degree
        if not (fills_institution or fills_degree):
            return False
        self.institution = self.institution or other.institution
        self.degree = self.degree or other.degree
        self.field = self.field or other.field
        self.duration = self.duration or other.duration
        self.gpa = self.gpa or other.gpa
        return True


def split_degree(degree: str) -> Tuple[str, str]:
    """("Bachelor of Science in Computer Science") -> (degree, field)."""
    parts = FIELD_SPLIT_PATTERN.split(degree, maxsplit=1)
    if len(parts) == 2:
        return parts[0].strip(" ,"), parts[1].strip(" ,")
    m = BRACKETED_FIELD_PATTERN.match(degree)
    if m:
        return m.group(1).strip(" ,"), m.group(2).strip()
    return degree.strip(" ,"), ""


def _is_institution(part: str) -> bool:
    return has_word(part, INSTITUTION_KEYWORDS)


def _is_degree(part: str) -> bool:
    return has_word(part, DEGREE_KEYWORDS)


def build_entry(line: str) -> EducationBuilder:
    entry = EducationBuilder()

    m = GPA_PATTERN.search(line)
    if m:
        entry.gpa = m.group(1).replace(" ", "")
        line = (line[: m.start()] + line[m.end():]).strip(" ,;|")

    entry.duration, line = pop_date_range(line)
    parts = split_delimited(line)
    if not entry.duration:
        for idx, part in enumerate(parts):
            found, remainder = pop_single_date(part)
            if found:
                entry.duration = found
                if remainder.strip(" ,;"):
                    parts[idx] = remainder.strip(" ,;")
                else:
                    del parts[idx]
                break

    # "Bachelor of Science, University of Somewhere" in one undelimited part
    if len(parts) == 1 and _is_degree(parts[0]) and _is_institution(parts[0]) and "," in parts[0]:
        parts = [p.strip() for p in parts[0].split(",", 1) if p.strip()]

    rest: List[str] = []
    for part in parts:
        if not entry.institution and _is_institution(part) and not _is_degree(part):
            entry.institution = clean_text(part)
        elif not entry.degree and _is_degree(part):
            entry.degree, entry.field = (clean_text(p) for p in split_degree(part))
        elif not entry.institution and _is_institution(part):
            entry.institution = clean_text(part)
        else:
            rest.append(clean_text(part))

    if rest and not entry.field and entry.degree:
        entry.field = rest.pop(0)
    if rest and not entry.institution and entry.degree:
        entry.institution = rest.pop(0)
    return entry


def parse_education(text: str) -> ParseResult[Tuple[EducationEntry, ...]]:
    section = section_lines(nonblank_lines(text), EDUCATION_HEADINGS, EDUCATION_END_HEADINGS)
    if section is None:
        return NotFound("no education heading")

    entries: List[EducationEntry] = []
    current: Optional[EducationBuilder] = None

    def flush_current() -> None:
        nonlocal current
        if current is not None:
            entries.append(current.finalize())
            current = None

    for raw in section:
        line = strip_bullet(raw) if is_bullet(raw) else raw

        if _is_degree(line) or _is_institution(line):
            entry = build_entry(line)
            if current is not None and current.absorb(entry):
                continue
            flush_current()
            current = entry
            continue

        if current is None:
            continue
        m = GPA_PATTERN.search(line)
        if m and not current.gpa:
            current.gpa = m.group(1).replace(" ", "")
            continue
        if not current.duration:
            duration, remainder = pop_date_range(line)
            if not duration:
                duration, remainder = pop_single_date(line)
            if duration and not remainder.strip(" ,;"):
                current.duration = duration

    flush_current()

    if not entries:
        return NotFound("education heading without degree or institution lines")
    return Found(tuple(entries))
