"""
Base interface for document text extractors.

Defines the contract for pluggable extraction implementations: raw bytes of
one document format in, normalized resume text out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import InsufficientTextError
from ..logging_utils import LOG
from ..settings import ExtractionSettings, get_default_settings
from ..shared import normalize_extracted_text


class DocumentTextExtractor(ABC):
    """
    Abstract base class for document text extractors.

    Implementations read one document format into plain text; the shared
    post-processing (whitespace and camelCase normalization, minimum
    length check) lives here so every format yields the same shape of
    text for the field parsers.
    """

    format_name: str = ""

    def __init__(self, settings: Optional[ExtractionSettings] = None):
        self.settings = settings or get_default_settings()

    @abstractmethod
    def read_text(self, file_bytes: bytes) -> str:
        """
        Read the raw text of a document.

        Args:
            file_bytes: The complete document as uploaded

        Returns:
            Raw text in reading order, one visual line per line

        Raises:
            CorruptedDocumentError: If the bytes are not a valid document
                of this extractor's format
        """
        pass

    def extract_text(self, file_bytes: bytes) -> str:
        """
        Extract normalized text from a document.

        Raises:
            CorruptedDocumentError: If the document cannot be parsed
            InsufficientTextError: If too little text was recovered
        """
        raw = self.read_text(file_bytes)
        text = normalize_extracted_text(raw)
        LOG.info("Extracted %d characters of %s text", len(text), self.format_name or "document")
        ensure_sufficient_text(text, self.settings.min_text_length)
        return text


def ensure_sufficient_text(text: str, min_length: int) -> str:
    """
    Reject text too short to be a real resume.

    Raises:
        InsufficientTextError: If `text` has fewer than `min_length` characters
    """
    length = len(text.strip())
    if length < min_length:
        raise InsufficientTextError(
            f"Could not extract sufficient text from the document "
            f"({length} characters, at least {min_length} required). "
            f"The file may be image-based, scanned, or empty.",
            text_length=length,
        )
    return text
