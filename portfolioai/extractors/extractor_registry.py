"""
Extractor registry for document formats.

Maps a format name ("pdf", "docx") to the extractor class that reads it,
and selects the extractor for an upload from its MIME type or filename.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from ..errors import UnsupportedFormatError
from ..logging_utils import LOG
from ..settings import ExtractionSettings
from .base import DocumentTextExtractor

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Global extractor registry
_EXTRACTOR_REGISTRY: Dict[str, Type[DocumentTextExtractor]] = {}


def register_extractor(name: str, extractor_class: Type[DocumentTextExtractor]) -> None:
    """
    Register an extractor class in the global registry.

    Args:
        name: The format name to register the extractor under (e.g., "pdf")
        extractor_class: The extractor class to register
    """
    _EXTRACTOR_REGISTRY[name] = extractor_class


def get_extractor(name: str, **kwargs) -> Optional[DocumentTextExtractor]:
    """
    Get an extractor instance by format name.

    Args:
        name: The format name (e.g., "pdf", "docx")
        **kwargs: Arguments to pass to the extractor constructor

    Returns:
        Extractor instance, or None if not found
    """
    extractor_class = _EXTRACTOR_REGISTRY.get(name)
    if extractor_class:
        return extractor_class(**kwargs)
    return None


def list_extractors() -> List[Dict[str, str]]:
    """
    List all registered extractors with their descriptions.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    extractors = []
    for name, extractor_class in _EXTRACTOR_REGISTRY.items():
        description = extractor_class.__doc__ or "No description available"
        description = description.strip().split('\n')[0]
        extractors.append({
            'name': name,
            'description': description
        })
    return sorted(extractors, key=lambda x: x['name'])


def unregister_extractor(name: str) -> None:
    """
    Unregister an extractor from the global registry.

    Args:
        name: The format name to unregister
    """
    _EXTRACTOR_REGISTRY.pop(name, None)


def detect_format(hint: str) -> str:
    """
    Decide the document format from a MIME type or filename.

    Args:
        hint: e.g. "application/pdf", "resume.pdf", "cv.docx"

    Returns:
        "pdf" or "docx"

    Raises:
        UnsupportedFormatError: If the hint names neither format
    """
    lowered = (hint or "").strip().lower()
    if lowered == DOCX_MIME_TYPE or lowered.endswith(".docx"):
        return "docx"
    if lowered == "application/pdf" or lowered.endswith(".pdf"):
        return "pdf"
    raise UnsupportedFormatError(
        f"Unsupported file format: {hint or '(unknown)'}. Only PDF and DOCX files are supported."
    )


def extractor_for(hint: str, settings: Optional[ExtractionSettings] = None) -> DocumentTextExtractor:
    """
    Instantiate the registered extractor for an upload.

    Raises:
        UnsupportedFormatError: If the format is unknown or has no extractor
    """
    fmt = detect_format(hint)
    extractor = get_extractor(fmt, settings=settings)
    if extractor is None:
        raise UnsupportedFormatError(f"No extractor registered for format: {fmt}")
    return extractor


def extract_text(file_bytes: bytes, hint: str, settings: Optional[ExtractionSettings] = None) -> str:
    """
    Convert an uploaded PDF or DOCX into normalized text.

    Args:
        file_bytes: The uploaded document
        hint: MIME type or filename of the upload
        settings: Extraction settings (process default when omitted)

    Returns:
        Normalized resume text

    Raises:
        UnsupportedFormatError: If the file is neither PDF nor DOCX
        CorruptedDocumentError: If the bytes cannot be parsed as that format
        InsufficientTextError: If the document yields too little text
    """
    extractor = extractor_for(hint, settings)
    LOG.info("Extracting text from %s (%s, %d bytes)", hint, extractor.format_name, len(file_bytes))
    return extractor.extract_text(file_bytes)


__all__ = [
    "DOCX_MIME_TYPE",
    "register_extractor",
    "get_extractor",
    "list_extractors",
    "unregister_extractor",
    "detect_format",
    "extractor_for",
    "extract_text",
]
