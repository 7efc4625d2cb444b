"""
Keyword tables and limits used by the field parsers.

Kept apart from the parsing code so accuracy can be tuned here without
touching control flow.
"""

from __future__ import annotations

# ------------------------- Limits -------------------------

NAME_SCAN_LINES = 10
NAME_FALLBACK_SCAN_LINES = 15
NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
NAME_MIN_WORDS = 2
NAME_MAX_WORDS = 4
NAME_WORD_MIN_LENGTH = 2
NAME_WORD_MAX_LENGTH = 20

LOCATION_SCAN_LINES = 20
LOCATION_MAX_LENGTH = 50

TITLE_MAX_LENGTH = 80
TITLE_MAX_WORDS = 8

HEADING_MAX_LENGTH = 50
HEADING_MAX_WORDS = 6

SUMMARY_MIN_LENGTH = 50         # summaries must be longer than this
SUMMARY_MAX_LENGTH = 500

MAX_EXPERIENCE = 5
MAX_PROJECTS = 6
MAX_TECHNICAL_SKILLS = 15
MAX_SOFT_SKILLS = 10

MIN_ACHIEVEMENT_LENGTH = 10     # bullets kept only if longer than this
MIN_DESCRIPTION_LENGTH = 20     # first line longer than this becomes the description
ENTRY_LINE_MAX_LENGTH = 150

PROJECT_NAME_MIN_LENGTH = 10
PROJECT_NAME_MAX_LENGTH = 100
TECH_ITEM_MIN_LENGTH = 2
TECH_ITEM_MAX_LENGTH = 20

# ------------------------- Job titles -------------------------

TITLE_KEYWORDS = (
    "engineer", "developer", "analyst", "manager", "designer", "consultant",
    "specialist", "lead", "senior", "junior", "architect", "director",
    "coordinator", "administrator", "programmer", "technician", "supervisor",
    "executive", "scientist", "researcher", "associate", "intern", "trainee",
)

# ------------------------- Section headings -------------------------

SUMMARY_HEADINGS = ("summary", "objective", "profile", "overview", "about", "introduction")
SUMMARY_END_HEADINGS = ("experience", "education", "skills", "employment")

EXPERIENCE_HEADINGS = ("experience", "employment", "work history")
EXPERIENCE_END_HEADINGS = ("education", "skills", "projects")

EDUCATION_HEADINGS = ("education", "academic")
EDUCATION_END_HEADINGS = ("experience", "skills", "projects")

PROJECT_HEADINGS = ("project",)
PROJECT_END_HEADINGS = ("education", "certification", "achievement")

# Words that mark a line as a heading or label rather than a person's name
SECTION_WORDS = (
    SUMMARY_HEADINGS
    + EXPERIENCE_HEADINGS
    + EDUCATION_HEADINGS
    + PROJECT_HEADINGS
    + ("skills", "contact", "references", "certification", "achievement", "resume", "curriculum")
)

# ------------------------- Education -------------------------

DEGREE_KEYWORDS = ("bachelor", "master", "phd", "doctorate", "diploma", "certificate", "degree")
INSTITUTION_KEYWORDS = ("university", "college", "institute", "school")

# ------------------------- Skills -------------------------

# Canonical spellings; matching is case-insensitive.
TECHNICAL_SKILLS = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "PHP",
    "Swift", "Kotlin", "React", "Angular", "Vue", "Node.js", "Express",
    "Django", "Flask", "Spring Boot", "HTML", "CSS", "SQL", "PostgreSQL",
    "MySQL", "MongoDB", "Redis", "GraphQL", "AWS", "Azure", "GCP", "Docker",
    "Kubernetes", "Terraform", "Jenkins", "Git", "Linux", "TensorFlow",
)

SOFT_SKILLS = (
    "Leadership", "Communication", "Teamwork", "Problem Solving",
    "Critical Thinking", "Time Management", "Project Management",
    "Collaboration", "Adaptability", "Creativity", "Mentoring",
    "Attention to Detail", "Analytical Thinking", "Decision Making",
    "Conflict Resolution", "Negotiation", "Public Speaking", "Customer Service",
)

# Names that contain a technical term but are not reported ("Git" in "GitHub")
COVERING_TERMS = ("GitHub", "GitLab")
