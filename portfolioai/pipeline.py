"""
High-level profile extraction pipeline.

Orchestrates text extraction and the field parsers to produce a complete
ProfileRecord from an uploaded PDF or DOCX. Every field of the result is
populated: parsers that come back NotFound are replaced by the placeholder
values from `shared`.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor
from typing import Dict, List, Optional

from .extractors import ensure_sufficient_text, extract_text
from .logging_utils import LOG
from .parsers import FIELD_PARSERS, Found, ParseResult, value_or
from .settings import ExtractionSettings, get_default_settings
from .shared import (
    EDUCATION_NOT_FOUND,
    EMAIL_NOT_FOUND,
    EXPERIENCE_NOT_FOUND,
    LOCATION_NOT_FOUND,
    NAME_NOT_FOUND,
    PHONE_NOT_FOUND,
    PROJECT_NOT_FOUND,
    SOFT_SKILLS_NOT_FOUND,
    SUMMARY_NOT_FOUND,
    TECHNICAL_SKILLS_NOT_FOUND,
    TITLE_NOT_FOUND,
    PersonalInfo,
    ProfileRecord,
    SkillSet,
    is_placeholder,
    is_placeholder_list,
)

# ------------------------- Field parsing -------------------------


def parse_fields(text: str, executor: Optional[Executor] = None) -> Dict[str, ParseResult]:
    """
    Run every field parser over `text`.

    Parsers are independent, so with an `executor` they are submitted
    concurrently; the result is the same either way.

    Returns:
        Field name -> Found / NotFound, in ProfileRecord order
    """
    if executor is None:
        results = {name: parser(text) for name, parser in FIELD_PARSERS.items()}
    else:
        futures = {name: executor.submit(parser, text) for name, parser in FIELD_PARSERS.items()}
        results = {name: future.result() for name, future in futures.items()}

    for name, result in results.items():
        if isinstance(result, Found):
            LOG.debug("Parsed %s: found", name)
        else:
            LOG.debug("Parsed %s: not found (%s)", name, result.reason)
    return results


# ------------------------- Assembly -------------------------


def assemble_profile(
    text: str,
    min_text_length: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> ProfileRecord:
    """
    Build a ProfileRecord from normalized resume text.

    Args:
        text: Normalized text, as produced by the extractors
        min_text_length: Minimum accepted text length (process default when omitted)
        executor: Optional executor to run the parsers concurrently

    Raises:
        InsufficientTextError: If `text` is shorter than `min_text_length`
    """
    if min_text_length is None:
        min_text_length = get_default_settings().min_text_length
    ensure_sufficient_text(text, min_text_length)

    results = parse_fields(text, executor)

    skills = value_or(results["skills"], SkillSet())
    return ProfileRecord(
        personal_info=PersonalInfo(
            name=value_or(results["name"], NAME_NOT_FOUND),
            email=value_or(results["email"], EMAIL_NOT_FOUND),
            phone=value_or(results["phone"], PHONE_NOT_FOUND),
            location=value_or(results["location"], LOCATION_NOT_FOUND),
            title=value_or(results["title"], TITLE_NOT_FOUND),
            summary=value_or(results["summary"], SUMMARY_NOT_FOUND),
        ),
        experience=value_or(results["experience"], (EXPERIENCE_NOT_FOUND,)),
        education=value_or(results["education"], (EDUCATION_NOT_FOUND,)),
        skills=SkillSet(
            technical=skills.technical or (TECHNICAL_SKILLS_NOT_FOUND,),
            soft=skills.soft or (SOFT_SKILLS_NOT_FOUND,),
        ),
        projects=value_or(results["projects"], (PROJECT_NOT_FOUND,)),
    )


def placeholder_fields(profile: ProfileRecord) -> List[str]:
    """Names of the fields that hold placeholders instead of extracted data."""
    missing = [
        f"personalInfo.{key}"
        for key, value in profile.personal_info.as_dict().items()
        if is_placeholder(value)
    ]
    for name, items in (
        ("experience", profile.experience),
        ("education", profile.education),
        ("skills.technical", profile.skills.technical),
        ("skills.soft", profile.skills.soft),
        ("projects", profile.projects),
    ):
        if is_placeholder_list(items):
            missing.append(name)
    return missing


# ------------------------- Entry points -------------------------


def extract_profile_sync(
    file_bytes: bytes,
    hint: str,
    settings: Optional[ExtractionSettings] = None,
    executor: Optional[Executor] = None,
) -> ProfileRecord:
    """
    Extract a ProfileRecord from an uploaded document.

    Args:
        file_bytes: The uploaded PDF or DOCX
        hint: MIME type or filename of the upload
        settings: Extraction settings (process default when omitted)
        executor: Optional executor to run the parsers concurrently

    Raises:
        UnsupportedFormatError, CorruptedDocumentError, InsufficientTextError
    """
    settings = settings or get_default_settings()
    text = extract_text(file_bytes, hint, settings)
    profile = assemble_profile(text, settings.min_text_length, executor)

    missing = placeholder_fields(profile)
    if missing:
        LOG.info("Profile extracted with placeholders for: %s", ", ".join(missing))
    else:
        LOG.info("Profile extracted with all fields found")
    return profile


async def extract_profile(
    file_bytes: bytes,
    hint: str,
    settings: Optional[ExtractionSettings] = None,
) -> ProfileRecord:
    """
    Coroutine form of extract_profile_sync.

    Parsing is CPU-bound, so it runs in a worker thread and does not block
    the event loop. Errors propagate unchanged.
    """
    return await asyncio.to_thread(extract_profile_sync, file_bytes, hint, settings)
