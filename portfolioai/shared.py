"""
Shared models and text utilities.

Defines the ProfileRecord data model (the contract with the profile store
and the portfolio renderer), the placeholder values that stand in for
fields the parsers could not find, and the text normalization helpers used
by the extractors.
"""

from __future__ import annotations

import re

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

# ------------------------- Models -------------------------

@dataclass(frozen=True)
class PersonalInfo:
    name: str
    email: str
    phone: str
    location: str
    title: str
    summary: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "title": self.title,
            "summary": self.summary,
        }


@dataclass(frozen=True)
class ExperienceEntry:
    company: str
    position: str
    duration: str
    description: str
    achievements: Tuple[str, ...] = ()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "position": self.position,
            "duration": self.duration,
            "description": self.description,
            "achievements": list(self.achievements),
        }


@dataclass(frozen=True)
class EducationEntry:
    institution: str
    degree: str
    field: str
    duration: str
    gpa: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        data = {
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "duration": self.duration,
        }
        if self.gpa:
            data["gpa"] = self.gpa
        return data


@dataclass(frozen=True)
class SkillSet:
    technical: Tuple[str, ...] = ()
    soft: Tuple[str, ...] = ()

    def as_dict(self) -> Dict[str, List[str]]:
        return {"technical": list(self.technical), "soft": list(self.soft)}


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    description: str
    technologies: Tuple[str, ...] = ()
    link: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "technologies": list(self.technologies),
        }
        if self.link:
            data["link"] = self.link
        return data


@dataclass(frozen=True)
class ProfileRecord:
    """
    Structured profile produced by one successful extraction.

    Every field is always populated; fields the parsers could not find
    hold the placeholder values defined below.
    """
    personal_info: PersonalInfo
    experience: Tuple[ExperienceEntry, ...]
    education: Tuple[EducationEntry, ...]
    skills: SkillSet
    projects: Tuple[ProjectEntry, ...] = ()

    def as_dict(self) -> Dict[str, Any]:
        """JSON-ready dict using the camelCase keys of the profile store."""
        return {
            "personalInfo": self.personal_info.as_dict(),
            "experience": [e.as_dict() for e in self.experience],
            "education": [e.as_dict() for e in self.education],
            "skills": self.skills.as_dict(),
            "projects": [p.as_dict() for p in self.projects],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProfileRecord":
        """
        Rebuild a ProfileRecord from its JSON form.

        Optional keys (gpa, link, achievements, technologies) may be absent.

        Raises:
            ValueError: If a required section or field is missing
        """
        info = _require(data, "personalInfo", "profile")
        skills = _require(data, "skills", "profile")
        return cls(
            personal_info=PersonalInfo(
                **{k: str(_require(info, k, "personalInfo")) for k in _PERSONAL_KEYS}
            ),
            experience=tuple(
                ExperienceEntry(
                    company=str(_require(e, "company", "experience")),
                    position=str(_require(e, "position", "experience")),
                    duration=str(e.get("duration", "")),
                    description=str(e.get("description", "")),
                    achievements=tuple(e.get("achievements") or ()),
                )
                for e in _require(data, "experience", "profile")
            ),
            education=tuple(
                EducationEntry(
                    institution=str(_require(e, "institution", "education")),
                    degree=str(_require(e, "degree", "education")),
                    field=str(e.get("field", "")),
                    duration=str(e.get("duration", "")),
                    gpa=e.get("gpa") or None,
                )
                for e in _require(data, "education", "profile")
            ),
            skills=SkillSet(
                technical=tuple(skills.get("technical") or ()),
                soft=tuple(skills.get("soft") or ()),
            ),
            projects=tuple(
                ProjectEntry(
                    name=str(_require(p, "name", "projects")),
                    description=str(p.get("description", "")),
                    technologies=tuple(p.get("technologies") or ()),
                    link=p.get("link") or None,
                )
                for p in data.get("projects") or ()
            ),
        )


_PERSONAL_KEYS = ("name", "email", "phone", "location", "title", "summary")


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{where} must be an object, got {type(data).__name__}")
    if data.get(key) is None:
        raise ValueError(f"{where} missing required field: {key}")
    return data[key]

# ------------------------- Placeholders -------------------------

NAME_NOT_FOUND = "Name Not Found"
EMAIL_NOT_FOUND = "Email Not Found"
PHONE_NOT_FOUND = "Phone Not Found"
LOCATION_NOT_FOUND = "Location Not Found"
TITLE_NOT_FOUND = "Title Not Found"
SUMMARY_NOT_FOUND = (
    "Professional summary not found. Please add a summary highlighting "
    "your experience and goals."
)

EXPERIENCE_NOT_FOUND = ExperienceEntry(
    company="Experience not found",
    position="Please update manually",
    duration="N/A",
    description="Work experience could not be extracted from the resume.",
)
EDUCATION_NOT_FOUND = EducationEntry(
    institution="Education not found",
    degree="Please update manually",
    field="N/A",
    duration="N/A",
)
PROJECT_NOT_FOUND = ProjectEntry(
    name="Projects not found",
    description="Please add your projects manually.",
)
TECHNICAL_SKILLS_NOT_FOUND = "Technical skills not found"
SOFT_SKILLS_NOT_FOUND = "Soft skills not found"

PLACEHOLDER_STRINGS = frozenset({
    NAME_NOT_FOUND,
    EMAIL_NOT_FOUND,
    PHONE_NOT_FOUND,
    LOCATION_NOT_FOUND,
    TITLE_NOT_FOUND,
    SUMMARY_NOT_FOUND,
    TECHNICAL_SKILLS_NOT_FOUND,
    SOFT_SKILLS_NOT_FOUND,
})


def is_placeholder(value: Any) -> bool:
    """True if `value` is one of the "not found" stand-ins, not real data."""
    if isinstance(value, str):
        return value in PLACEHOLDER_STRINGS
    return value in (EXPERIENCE_NOT_FOUND, EDUCATION_NOT_FOUND, PROJECT_NOT_FOUND)


def is_placeholder_list(items: Tuple[Any, ...]) -> bool:
    return len(items) == 1 and is_placeholder(items[0])

# ------------------------- Text helpers -------------------------

_WS_RE = re.compile(r"\s+")
_CID_RE = re.compile(r"\(cid:\d+\)")
_CAMEL_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")
_HSPACE_RUN_RE = re.compile(r"[^\S\n]{3,}")
_BLANK_RUN_RE = re.compile(r"\n(?:[^\S\n]*\n){2,}")

def _strip_invalid_xml_1_0_chars(s: str) -> str:
    """
    Remove characters invalid in XML 1.0.
    Valid:
      #x9 | #xA | #xD |
      [#x20-#xD7FF] |
      [#xE000-#xFFFD] |
      [#x10000-#x10FFFF]
    """
    out: List[str] = []
    for ch in s:
        cp = ord(ch)
        if (
            cp == 0x9
            or cp == 0xA
            or cp == 0xD
            or (0x20 <= cp <= 0xD7FF)
            or (0xE000 <= cp <= 0xFFFD)
            or (0x10000 <= cp <= 0x10FFFF)
        ):
            out.append(ch)
    return "".join(out)

def normalize_text_for_processing(s: str) -> str:
    """
    Normalize what we consider "text":
    - convert NBSP to normal space
    - replace soft hyphen with real hyphen
    - normalize newlines
    - strip invalid XML chars
    """
    s = s.replace("\u00A0", " ")
    s = s.replace("\u00AD", "-")  # preserve "high-quality"
    s = s.replace("\r\n", "\n").replace("\r", "\n")
    s = _strip_invalid_xml_1_0_chars(s)
    return s

def clean_text(text: str) -> str:
    """Collapse whitespace to single spaces and trim."""
    text = normalize_text_for_processing(text)
    text = _WS_RE.sub(" ", text)
    return text.strip()

def normalize_extracted_text(text: str) -> str:
    """
    Post-process raw extractor output into normalized text:
    - drop `(cid:N)` glyph artifacts
    - split camelCase joins left by lossy extraction ("SeniorEngineer")
    - collapse runs of 3+ spaces/tabs to one space
    - collapse runs of 3+ newlines to a single blank line
    """
    text = normalize_text_for_processing(text)
    text = _CID_RE.sub("", text)
    text = _CAMEL_RE.sub(" ", text)
    text = _HSPACE_RUN_RE.sub(" ", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
