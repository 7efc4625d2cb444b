"""
Work experience parser.

Entries start at a delimited heading line such as
"TechCorp Inc. | Senior Software Engineer | Jan 2020 - Present"; bullets
beneath it become achievements and the first long plain line becomes the
description.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..shared import ExperienceEntry, clean_text
from .outcome import Found, NotFound, ParseResult
from .text_lines import (
    has_title_keyword,
    is_bullet,
    is_delimited_entry,
    nonblank_lines,
    pop_date_range,
    pop_single_date,
    section_lines,
    split_delimited,
    strip_bullet,
)
from .vocabulary import (
    ENTRY_LINE_MAX_LENGTH,
    EXPERIENCE_END_HEADINGS,
    EXPERIENCE_HEADINGS,
    MAX_EXPERIENCE,
    MIN_ACHIEVEMENT_LENGTH,
    MIN_DESCRIPTION_LENGTH,
)


@dataclass
class ExperienceBuilder:
    company: str = ""
    position: str = ""
    duration: str = ""
    description: str = ""
    achievements: List[str] = field(default_factory=list)

    def finalize(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company.strip(),
            position=self.position.strip(),
            duration=self.duration.strip(),
            description=self.description.strip(),
            achievements=tuple(self.achievements),
        )


def split_entry_heading(line: str) -> Tuple[str, str, str]:
    """
    Split an entry heading into (company, position, duration).

    When only the first part reads like a job title, the first two parts
    are swapped ("Senior Engineer | TechCorp").
    """
    duration, rest = pop_date_range(line)
    parts = split_delimited(rest)
    if not duration:
        for idx, part in enumerate(parts):
            found, remainder = pop_single_date(part)
            if found and not remainder.strip(" ,;"):
                duration = found
                del parts[idx]
                break

    company = parts[0] if parts else ""
    position = parts[1] if len(parts) > 1 else ""
    if position and has_title_keyword(company) and not has_title_keyword(position):
        company, position = position, company
    return clean_text(company), clean_text(position), duration


def parse_experience(text: str) -> ParseResult[Tuple[ExperienceEntry, ...]]:
    section = section_lines(nonblank_lines(text), EXPERIENCE_HEADINGS, EXPERIENCE_END_HEADINGS)
    if section is None:
        return NotFound("no experience heading")

    entries: List[ExperienceEntry] = []
    current: Optional[ExperienceBuilder] = None

    def flush_current() -> None:
        nonlocal current
        if current is not None:
            entries.append(current.finalize())
            current = None

    for line in section:
        if is_bullet(line):
            if current is not None:
                item = clean_text(strip_bullet(line))
                if len(item) > MIN_ACHIEVEMENT_LENGTH:
                    current.achievements.append(item)
            continue

        if is_delimited_entry(line, ENTRY_LINE_MAX_LENGTH):
            company, position, duration = split_entry_heading(line)
            # a bare date line ("Jan 2020 - Present") completes the open entry
            if not company and not position:
                if current is not None and duration and not current.duration:
                    current.duration = duration
                continue
            flush_current()
            current = ExperienceBuilder(company=company, position=position, duration=duration)
            continue

        if current is None:
            continue
        if not current.duration:
            duration, remainder = pop_date_range(line)
            if duration and not remainder.strip(" ,;"):
                current.duration = duration
                continue
        if not current.description and len(line) > MIN_DESCRIPTION_LENGTH:
            current.description = clean_text(line)

    flush_current()

    if not entries:
        return NotFound("experience heading without delimited entries")
    return Found(tuple(entries[:MAX_EXPERIENCE]))
