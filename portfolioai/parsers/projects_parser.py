"""
Projects parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..shared import ProjectEntry, clean_text
from .outcome import Found, NotFound, ParseResult
from .text_lines import (
    dedupe_casefold,
    first_link,
    is_bullet,
    nonblank_lines,
    section_lines,
    split_delimited,
    strip_bullet,
)
from .vocabulary import (
    MAX_PROJECTS,
    MIN_DESCRIPTION_LENGTH,
    PROJECT_END_HEADINGS,
    PROJECT_HEADINGS,
    PROJECT_NAME_MAX_LENGTH,
    PROJECT_NAME_MIN_LENGTH,
    TECH_ITEM_MAX_LENGTH,
    TECH_ITEM_MIN_LENGTH,
)

TECHNOLOGIES_PATTERN = re.compile(
    r"\b(?:technolog(?:y|ies)|tech\s+stack)\b\s*:?\s*(.*)$",
    re.IGNORECASE,
)
LIST_SEPARATORS = re.compile(r"[,;|/]")
SENTENCE_MIN_WORDS = 9
LINK_LABELS = ("link", "github", "demo", "url", "live", "source", "repo")


@dataclass
class ProjectBuilder:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    link: Optional[str] = None

    def finalize(self) -> ProjectEntry:
        return ProjectEntry(
            name=self.name.strip(),
            description=self.description.strip(),
            technologies=tuple(dedupe_casefold(self.technologies)),
            link=self.link,
        )


def split_technologies(raw: str) -> List[str]:
    """
    "React, Node.js; MongoDB" -> ["React", "Node.js", "MongoDB"].

    Comma-like separators split first; a piece too long to be one item is
    split again on whitespace. Items outside 2-20 characters are dropped.
    """
    items: List[str] = []
    for piece in LIST_SEPARATORS.split(raw):
        piece = piece.strip(" .:()")
        if len(piece) > TECH_ITEM_MAX_LENGTH:
            items.extend(w.strip(" .:()") for w in piece.split())
        elif piece:
            items.append(piece)
    return [
        item for item in items
        if TECH_ITEM_MIN_LENGTH <= len(item) <= TECH_ITEM_MAX_LENGTH
    ]


def split_project_heading(line: str) -> Tuple[str, str]:
    parts = split_delimited(line)
    if len(parts) >= 2:
        return clean_text(parts[0]), clean_text(" - ".join(parts[1:]))
    return clean_text(line), ""


def _reads_as_sentence(line: str) -> bool:
    # "Name - description" lines are headings however long they are
    if len(split_delimited(line)) > 1:
        return False
    return line.endswith(".") or len(line.split()) >= SENTENCE_MIN_WORDS


def _can_name_project(line: str) -> bool:
    return PROJECT_NAME_MIN_LENGTH <= len(line) <= PROJECT_NAME_MAX_LENGTH


def parse_projects(text: str) -> ParseResult[Tuple[ProjectEntry, ...]]:
    """
    Projects under a "Projects" heading, up to an education, certification
    or achievement heading.

    A short plain line names a new project ("Name - description" is split);
    a technologies line fills the technology list; a link fills the link;
    the first long line otherwise becomes the description.
    """
    section = section_lines(nonblank_lines(text), PROJECT_HEADINGS, PROJECT_END_HEADINGS)
    if section is None:
        return NotFound("no projects heading")

    projects: List[ProjectEntry] = []
    current: Optional[ProjectBuilder] = None

    def flush_current() -> None:
        nonlocal current
        if current is not None and current.name:
            projects.append(current.finalize())
        current = None

    def start_project(heading: str) -> None:
        nonlocal current
        flush_current()
        name, description = split_project_heading(heading)
        current = ProjectBuilder(name=name, description=description)

    def consume(line: str, bullet: bool) -> None:
        m = TECHNOLOGIES_PATTERN.search(line)
        if m:
            prefix = line[: m.start()].strip(" |-–—:,(")
            if prefix and not bullet and _can_name_project(prefix):
                start_project(prefix)
            if current is not None:
                current.technologies.extend(split_technologies(m.group(1)))
            return

        if current is not None and not current.description and len(line) > MIN_DESCRIPTION_LENGTH:
            if bullet or _reads_as_sentence(line) or not _can_name_project(line):
                current.description = clean_text(line)
                return

        if not bullet and _can_name_project(line) and not _reads_as_sentence(line):
            start_project(line)

    for raw in section:
        bullet = is_bullet(raw)
        line = strip_bullet(raw) if bullet else raw

        link = first_link(line)
        if link:
            line = line.replace(link, " ").strip(" |-–—:,")
            if line.lower() in LINK_LABELS:
                line = ""
        if line:
            consume(line, bullet)
        if link and current is not None and current.link is None:
            current.link = link
    flush_current()

    if not projects:
        return NotFound("projects heading without project entries")
    return Found(tuple(projects[:MAX_PROJECTS]))
