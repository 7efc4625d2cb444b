"""
Heuristic field parsers over normalized resume text.

Every parser is a pure function of the text and returns Found(value) or
NotFound(reason). Parsers share no state and may run concurrently.
"""

from .outcome import Found, NotFound, ParseResult, value_or
from .contact_parser import parse_email, parse_location, parse_name, parse_phone, parse_title
from .summary_parser import parse_summary
from .experience_parser import parse_experience
from .education_parser import parse_education
from .skills_parser import parse_skills
from .projects_parser import parse_projects

# Field name -> parser, in ProfileRecord order
FIELD_PARSERS = {
    "name": parse_name,
    "email": parse_email,
    "phone": parse_phone,
    "location": parse_location,
    "title": parse_title,
    "summary": parse_summary,
    "experience": parse_experience,
    "education": parse_education,
    "skills": parse_skills,
    "projects": parse_projects,
}

__all__ = [
    "Found",
    "NotFound",
    "ParseResult",
    "value_or",
    "FIELD_PARSERS",
    "parse_name",
    "parse_email",
    "parse_phone",
    "parse_location",
    "parse_title",
    "parse_summary",
    "parse_experience",
    "parse_education",
    "parse_skills",
    "parse_projects",
]
