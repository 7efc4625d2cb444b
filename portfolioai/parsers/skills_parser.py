"""
Skills parser.

The whole document is matched against fixed technical and soft-skill
vocabularies. Matches are reported in canonical spelling and vocabulary
order. A term whose every occurrence sits inside a longer matched term
("Java" inside "JavaScript", "SQL" inside "PostgreSQL") is dropped. Covering
terms such as "GitHub" hide the terms inside them without being reported.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Sequence, Tuple

from ..shared import SkillSet
from .outcome import Found, NotFound, ParseResult
from .text_lines import dedupe_casefold
from .vocabulary import (
    COVERING_TERMS,
    MAX_SOFT_SKILLS,
    MAX_TECHNICAL_SKILLS,
    SOFT_SKILLS,
    TECHNICAL_SKILLS,
)

CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")

Span = Tuple[int, int]


@lru_cache(maxsize=None)
def term_pattern(term: str) -> "re.Pattern[str]":
    """
    Case-insensitive pattern for one vocabulary term.

    Spaces in the term match any run of whitespace or a hyphen; camelCase
    joints also match with a single space, since extracted text has had
    "JavaScript" split into "Java Script".
    """
    pieces = []
    for word in term.split():
        camel_parts = CAMEL_BOUNDARY.split(word)
        pieces.append(r"\s?".join(re.escape(p) for p in camel_parts))
    body = r"[\s-]+".join(pieces)
    return re.compile(rf"(?<![A-Za-z0-9]){body}(?![A-Za-z0-9+#])", re.IGNORECASE)


def _spans(text: str, term: str) -> List[Span]:
    return [m.span() for m in term_pattern(term).finditer(text)]


def _inside(span: Span, others: Sequence[Span]) -> bool:
    start, end = span
    return any(o_start <= start and end <= o_end and (o_start, o_end) != span for o_start, o_end in others)


def match_vocabulary(text: str, vocabulary: Sequence[str], covering: Sequence[str] = ()) -> List[str]:
    """Vocabulary terms present in `text`, in vocabulary order."""
    found = {}
    for term in vocabulary:
        spans = _spans(text, term)
        if spans:
            found[term] = spans

    all_spans = [span for spans in found.values() for span in spans]
    all_spans.extend(span for term in covering for span in _spans(text, term))
    matched = [
        term for term, spans in found.items()
        if not all(_inside(span, all_spans) for span in spans)
    ]
    return dedupe_casefold(matched)


def parse_technical_skills(text: str) -> List[str]:
    return match_vocabulary(text or "", TECHNICAL_SKILLS, COVERING_TERMS)[:MAX_TECHNICAL_SKILLS]


def parse_soft_skills(text: str) -> List[str]:
    return match_vocabulary(text or "", SOFT_SKILLS)[:MAX_SOFT_SKILLS]


def parse_skills(text: str) -> ParseResult[SkillSet]:
    """
    Technical and soft skills mentioned anywhere in the text.

    Found carries both lists, either of which may be empty; NotFound only
    when neither vocabulary matched.
    """
    technical = parse_technical_skills(text)
    soft = parse_soft_skills(text)
    if not technical and not soft:
        return NotFound("no vocabulary skill mentioned")
    return Found(SkillSet(technical=tuple(technical), soft=tuple(soft)))
